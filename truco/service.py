"""Convenience service layer for presentation code."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .cards import Card, card_label, serialize_card
from .game import ActionResult, Game, HandResult
from .negotiation import next_value


@dataclass
class PlayerView:
    seat: int
    name: str
    score: int
    is_turn: bool
    has_started_turn: bool
    hand_size: int
    hand_visible: bool
    hand: list[dict]
    hand_labels: list[str]
    played_labels: list[str]


@dataclass
class TrickPlayView:
    player: int
    card: Optional[dict]
    label: str


@dataclass
class TrickView:
    leader: int
    plays: list[TrickPlayView]


@dataclass
class TrucoView:
    value: int
    caller: Optional[int]
    is_active: bool
    pending_response: bool
    next_value: Optional[int]


@dataclass
class HandResultView:
    hand_number: int
    winner: Optional[int]
    winner_name: Optional[str]
    points: int
    truco_value: int
    reason: str


@dataclass
class ActionResultView:
    action: str
    ok: bool
    reason: Optional[str]


@dataclass
class GameView:
    hand_number: int
    current_player: int
    players: list[PlayerView]
    trick: TrickView
    trick_count: int
    trick_points: list[int]
    trick_history: list[list[dict]]
    truco: TrucoView
    log: list[str]
    available_actions: list[str]
    last_hand: Optional[HandResultView]
    last_action: Optional[ActionResultView]
    match_winner: Optional[int]


def available_actions(game: Game) -> list[str]:
    """Commands the current state accepts; everything else would be rejected."""
    if game.is_over():
        return ["reset_game"]
    seat = game.current_player
    player = game.current
    truco = game.truco
    actions: list[str] = []
    if not truco.pending_response:
        if not player.has_started_turn:
            actions.append("start_turn")
        elif player.hand:
            actions.append("play_card")
    if truco.can_call():
        actions.append("call_truco")
    if truco.can_answer(seat):
        actions.extend(["accept_truco", "deny_truco"])
    if truco.can_raise(seat):
        actions.append("raise_truco")
    actions.append("reset_game")
    return actions


class GameService:
    """Facade around a Game instance for UI consumers."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game or Game()

    # Actions -----------------------------------------------------------

    def start_turn(self) -> GameView:
        self.game.start_turn()
        return self.view()

    def play_card(self, player_id: int, card_index: int) -> GameView:
        self.game.play_card(player_id, card_index)
        return self.view()

    def call_truco(self) -> GameView:
        self.game.call_truco()
        return self.view()

    def accept_truco(self) -> GameView:
        self.game.accept_truco()
        return self.view()

    def deny_truco(self) -> GameView:
        self.game.deny_truco()
        return self.view()

    def raise_truco(self) -> GameView:
        self.game.raise_truco()
        return self.view()

    def reset_game(self) -> GameView:
        self.game.reset_game()
        return self.view()

    # Views -------------------------------------------------------------

    def view(self) -> GameView:
        game = self.game
        trick = game.trick
        return GameView(
            hand_number=game.hand_number,
            current_player=game.current_player,
            players=[self._player_view(game, seat) for seat in (0, 1)],
            trick=TrickView(
                leader=trick.leader,
                plays=[self._trick_play_view(trick.is_full(), seat, card) for seat, card in trick.plays],
            ),
            trick_count=game.hand.trick_count,
            trick_points=list(game.hand.trick_points),
            trick_history=[
                [
                    {"player": done.leader, "card": serialize_card(done.lead_card), "label": card_label(done.lead_card)},
                    {"player": done.follower, "card": serialize_card(done.follow_card), "label": card_label(done.follow_card)},
                    {"winner": done.winner},
                ]
                for done in game.hand.trick_history
            ],
            truco=TrucoView(
                value=game.truco.value,
                caller=game.truco.caller,
                is_active=game.truco.is_active,
                pending_response=game.truco.pending_response,
                next_value=next_value(game.truco.value),
            ),
            log=list(game.log.entries),
            available_actions=available_actions(game),
            last_hand=self._hand_result_view(game, game.hand_history[-1]) if game.hand_history else None,
            last_action=self._action_view(game.last_result),
            match_winner=game.match_winner,
        )

    # Helpers -----------------------------------------------------------

    def _player_view(self, game: Game, seat: int) -> PlayerView:
        player = game.players[seat]
        visible = player.is_turn and player.has_started_turn
        on_table = game.trick.cards()
        return PlayerView(
            seat=seat,
            name=player.name,
            score=player.score,
            is_turn=player.is_turn,
            has_started_turn=player.has_started_turn,
            hand_size=len(player.hand),
            hand_visible=visible,
            hand=[serialize_card(card) for card in player.hand] if visible else [],
            hand_labels=[card_label(card) for card in player.hand] if visible else [],
            played_labels=[card_label(card) for card in player.cards_played if card not in on_table],
        )

    def _trick_play_view(self, revealed: bool, seat: int, card: Card) -> TrickPlayView:
        # A lone lead card is shown face down until the trick is answered.
        if not revealed:
            return TrickPlayView(player=seat, card=None, label="face down")
        return TrickPlayView(player=seat, card=serialize_card(card), label=card_label(card))

    def _hand_result_view(self, game: Game, result: HandResult) -> HandResultView:
        return HandResultView(
            hand_number=result.hand_number,
            winner=result.winner,
            winner_name=None if result.winner is None else game.players[result.winner].name,
            points=result.points,
            truco_value=result.truco_value,
            reason=result.reason,
        )

    def _action_view(self, result: Optional[ActionResult]) -> Optional[ActionResultView]:
        if result is None:
            return None
        return ActionResultView(action=result.action, ok=result.ok, reason=result.reason)
