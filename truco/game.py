"""High-level game orchestration for Truco Mineiro."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from random import Random
from typing import Callable, List, Optional, Sequence, Tuple

from .cards import Card, card_label
from .config import DEFAULT_PLAYER_NAMES, Settings, display_name
from .deck import Deck
from .errors import (
    InvalidAction,
    InvalidCardIndex,
    MatchOver,
    NotYourTurn,
    ResponsePending,
    TurnNotStarted,
)
from .hand import HandState
from .log import EventKind, GameLog
from .negotiation import TrucoState
from .player import Player
from .trick import Trick

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ActionResult:
    """Outcome of a command: ok, or rejected with a reason."""

    action: str
    ok: bool
    reason: Optional[str] = None


@dataclass(frozen=True)
class HandResult:
    hand_number: int
    winner: Optional[int]
    points: int
    truco_value: int
    reason: str
    scores: Tuple[int, int]


class Game:
    """A two-seat match: hands are dealt, played and scored until reset."""

    def __init__(
        self,
        player1_name: Optional[str] = None,
        player2_name: Optional[str] = None,
        *,
        seed: Optional[int] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or Settings()
        names = (
            display_name(player1_name or self.settings.player1_name, DEFAULT_PLAYER_NAMES[0]),
            display_name(player2_name or self.settings.player2_name, DEFAULT_PLAYER_NAMES[1]),
        )
        self.rng = Random(seed if seed is not None else self.settings.seed)
        self.players: List[Player] = [Player(name) for name in names]
        self.log = GameLog()
        self.hand_number = 1
        self.hand_history: List[HandResult] = []
        self.match_winner: Optional[int] = None
        self.last_result: Optional[ActionResult] = None
        self.current_player = 0
        self.deck = Deck.build()
        self.trick = Trick(leader=0)
        self.hand = HandState()
        self.truco = TrucoState()
        self._start_hand()

    # Queries -----------------------------------------------------------

    @property
    def current(self) -> Player:
        return self.players[self.current_player]

    def opponent(self, seat: int) -> int:
        return 1 - seat

    def scores(self) -> Tuple[int, int]:
        return self.players[0].score, self.players[1].score

    def is_over(self) -> bool:
        return self.match_winner is not None

    # Commands ----------------------------------------------------------

    def start_turn(self) -> ActionResult:
        return self._run("start_turn", self._start_turn)

    def play_card(self, player_id: int, card_index: int) -> ActionResult:
        return self._run("play_card", lambda: self._play_card(player_id, card_index))

    def call_truco(self) -> ActionResult:
        return self._run("call_truco", self._call_truco)

    def accept_truco(self) -> ActionResult:
        return self._run("accept_truco", self._accept_truco)

    def deny_truco(self) -> ActionResult:
        return self._run("deny_truco", self._deny_truco)

    def raise_truco(self) -> ActionResult:
        return self._run("raise_truco", self._raise_truco)

    def reset_game(self) -> ActionResult:
        for player in self.players:
            player.reset()
        self.hand_history = []
        self.match_winner = None
        self.hand_number = 1
        self._start_hand()
        logger.info("Match reset: %s vs %s", self.players[0].name, self.players[1].name)
        self.last_result = ActionResult("reset_game", True)
        return self.last_result

    def deal_hand(self, hands: Sequence[Sequence[Card]]) -> None:
        """Restart the current hand with a fixed deal instead of a random one."""
        if len(hands) != 2:
            raise ValueError("A deal needs exactly two hands.")
        dealt = [card for hand in hands for card in hand]
        if len(set(dealt)) != len(dealt):
            raise ValueError("A card cannot be dealt twice.")
        self._start_hand(hands=[list(hand) for hand in hands])

    def end_hand(
        self,
        winner: Optional[int],
        points_already_awarded: Optional[int] = None,
        *,
        reason: str = "",
    ) -> HandResult:
        """Score the hand, then deal the next one unless the match is won.

        points_already_awarded is set by paths that paid the winner
        themselves (a denied truco) so the bet value is not paid twice.
        """
        value = self.truco.value
        points = 0
        if winner is not None:
            if points_already_awarded is None:
                points = value
                self.players[winner].award(points)
                self.log.record(
                    EventKind.HAND_ENDED,
                    f"{self.players[winner].name} won the hand and scores {points} point(s)!",
                    seat=winner,
                    points=points,
                )
            else:
                points = points_already_awarded
        else:
            self.log.record(EventKind.HAND_ENDED, "Hand drawn. Nobody scores.")

        result = HandResult(
            hand_number=self.hand_number,
            winner=winner,
            points=points,
            truco_value=value,
            reason=reason,
            scores=self.scores(),
        )
        self.hand_history.append(result)
        logger.info(
            "Hand %d ended (%s): winner=%s points=%d scores=%s",
            result.hand_number,
            reason or "decided",
            "none" if winner is None else self.players[winner].name,
            points,
            result.scores,
        )

        if winner is not None and self.players[winner].score >= self.settings.target_score:
            self.match_winner = winner
            self.log.record(
                EventKind.MATCH_WON,
                f"{self.players[winner].name} reached {self.players[winner].score} points and wins the match!",
                seat=winner,
            )
            logger.info("Match won by %s with %s", self.players[winner].name, result.scores)
            return result

        self.hand_number += 1
        self._start_hand()
        return result

    # Command handlers --------------------------------------------------

    def _run(self, action: str, handler: Callable[[], None]) -> ActionResult:
        try:
            if self.match_winner is not None:
                raise MatchOver(f"{self.players[self.match_winner].name} already won the match. Reset to play again.")
            handler()
        except InvalidAction as exc:
            self.log.record(EventKind.ACTION_REJECTED, str(exc), seat=self.current_player, action=action)
            result = ActionResult(action, False, str(exc))
        else:
            result = ActionResult(action, True)
        self.last_result = result
        return result

    def _start_turn(self) -> None:
        player = self.current
        if self.truco.pending_response:
            raise ResponsePending(f"{player.name} must answer the truco before playing.")
        if player.has_started_turn:
            raise InvalidAction(f"{player.name} has already started their turn.")
        player.has_started_turn = True
        self.log.record(EventKind.TURN_STARTED, f"{player.name} revealed their hand.", seat=self.current_player)

    def _play_card(self, seat: int, card_index: int) -> None:
        if seat not in (0, 1):
            raise InvalidAction(f"There is no player {seat}.")
        player = self.players[seat]
        if self.truco.pending_response:
            raise ResponsePending(f"{player.name} tried to play a card, but a truco call is pending!")
        if seat != self.current_player:
            raise NotYourTurn(f"It is not {player.name}'s turn.")
        if not player.has_started_turn:
            raise TurnNotStarted(f"{player.name} must start their turn before playing.")
        if not 0 <= card_index < len(player.hand):
            raise InvalidCardIndex(f"{player.name} has no card at position {card_index}.")

        card = player.play_card(card_index)
        if self.trick.is_empty():
            # An accepted truco can hand the lead to the responder.
            self.trick = Trick(leader=seat)
        self.hand.start_trick()
        self.trick.add_play(seat, card)

        if not self.trick.is_full():
            # The lead card stays face down until the answer is on the table.
            self.log.record(EventKind.CARD_PLAYED, f"{player.name} played a card.", seat=seat, card=card)
            self._pass_turn()
            return

        self.log.record(EventKind.CARD_PLAYED, f"{player.name} played {card_label(card)}.", seat=seat, card=card)
        self._resolve_trick()

    def _resolve_trick(self) -> None:
        decision = self.hand.record_trick(self.trick)
        completed = self.hand.trick_history[-1]
        number = self.hand.trick_count
        lead = f"{self.players[completed.leader].name}'s {card_label(completed.lead_card)}"
        follow = f"{self.players[completed.follower].name}'s {card_label(completed.follow_card)}"
        if completed.winner is None:
            message = f"Trick {number} drawn: {lead} ties {follow}."
        else:
            message = f"{self.players[completed.winner].name} won trick {number} ({lead} against {follow})."
        self.log.record(
            EventKind.TRICK_RESOLVED,
            message,
            seat=completed.winner,
            trick=number,
            trick_points=tuple(self.hand.trick_points),
        )

        if decision is not None:
            self.end_hand(decision.winner, reason=decision.reason)
            return

        self.trick = Trick(leader=self.hand.leader)
        self._set_turn(self.hand.leader)
        self.log.record(
            EventKind.TURN_PASSED,
            f"{self.current.name} leads trick {number + 1}.",
            seat=self.current_player,
        )

    def _call_truco(self) -> None:
        seat = self.current_player
        value = self.truco.call(seat)
        self.log.record(EventKind.TRUCO_CALLED, f"{self.current.name} called truco ({value})!", seat=seat, value=value)
        self._pass_turn()

    def _accept_truco(self) -> None:
        seat = self.current_player
        value = self.truco.accept(seat)
        self.log.record(
            EventKind.TRUCO_ACCEPTED,
            f"{self.current.name} accepted the truco! The hand is now worth {value} points.",
            seat=seat,
            value=value,
        )
        # Play resumes with whoever still owes a card to the open trick.
        if self.trick.has_played(seat):
            self._pass_turn()

    def _deny_truco(self) -> None:
        seat = self.current_player
        caller, points = self.truco.deny(seat)
        self.players[caller].award(points)
        self.log.record(
            EventKind.TRUCO_DENIED,
            f"{self.current.name} denied the truco! {self.players[caller].name} scores {points} point(s).",
            seat=seat,
            points=points,
        )
        self.end_hand(caller, points_already_awarded=points, reason="truco denied")

    def _raise_truco(self) -> None:
        seat = self.current_player
        value = self.truco.raise_bet(seat)
        self.log.record(EventKind.TRUCO_RAISED, f"{self.current.name} raised to {value}!", seat=seat, value=value)
        self._pass_turn()

    # Helpers -----------------------------------------------------------

    def _start_hand(self, hands: Optional[List[List[Card]]] = None) -> None:
        # The log covers the hand in play; finished hands live in hand_history.
        self.log.clear()
        if hands is None:
            self.deck = Deck.new_shuffled(self.rng)
            hands = list(self.deck.deal(self.settings.hand_size))
        else:
            self.deck = Deck.build()
            for card in hands[0] + hands[1]:
                self.deck.cards.remove(card)
            self.deck.shuffle(self.rng)
        for player, cards in zip(self.players, hands):
            player.take_hand(cards)

        leader = self._hand_leader()
        self.hand = HandState(leader=leader)
        self.truco = TrucoState()
        self.trick = Trick(leader=leader)
        self._set_turn(leader)
        logger.debug("Hand %d dealt, %s leads", self.hand_number, self.players[leader].name)

    def _hand_leader(self) -> int:
        if self.settings.alternate_hand_leader:
            return (self.hand_number - 1) % 2
        return 0

    def _set_turn(self, seat: int) -> None:
        self.current_player = seat
        for index, player in enumerate(self.players):
            player.is_turn = index == seat
            player.has_started_turn = False

    def _pass_turn(self) -> None:
        self._set_turn(self.opponent(self.current_player))
        self.log.record(EventKind.TURN_PASSED, f"It is {self.current.name}'s turn.", seat=self.current_player)
