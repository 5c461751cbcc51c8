"""Hand state: up to three tricks decided best-of-three."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from .cards import Card
from .trick import Trick, TrickError

TRICKS_PER_HAND = 3
TRICKS_TO_WIN = 2
TIE = -1


class HandPhase(Enum):
    DEALT = auto()
    TRICK_IN_PROGRESS = auto()
    HAND_DECIDED = auto()


@dataclass(frozen=True)
class CompletedTrick:
    leader: int
    lead_card: Card
    follower: int
    follow_card: Card
    winner: Optional[int]


@dataclass(frozen=True)
class HandDecision:
    """Outcome of a decided hand. winner is None for a drawn hand."""

    winner: Optional[int]
    reason: str


@dataclass
class HandState:
    leader: int = 0
    phase: HandPhase = HandPhase.DEALT
    trick_count: int = 0
    trick_points: List[int] = field(default_factory=lambda: [0, 0])
    last_trick_winner: Optional[int] = None
    trick_history: List[CompletedTrick] = field(default_factory=list)
    decision: Optional[HandDecision] = None

    def start_trick(self) -> None:
        if self.phase is HandPhase.HAND_DECIDED:
            raise TrickError("Hand already decided.")
        self.phase = HandPhase.TRICK_IN_PROGRESS

    def record_trick(self, trick: Trick) -> Optional[HandDecision]:
        """Score a full trick and return the hand decision, if any.

        The trick winner leads the next trick. On a drawn trick the seat that
        led it keeps the lead.
        """
        if self.phase is HandPhase.HAND_DECIDED:
            raise TrickError("Hand already decided.")
        winner = trick.winner()
        (leader, lead_card), (follower, follow_card) = trick.plays
        self.trick_history.append(CompletedTrick(leader, lead_card, follower, follow_card, winner))
        self.trick_count += 1

        if winner is None:
            self.last_trick_winner = TIE
            self.leader = leader
        else:
            self.last_trick_winner = winner
            self.trick_points[winner] += 1
            self.leader = winner

        self.decision = self._decide()
        self.phase = HandPhase.HAND_DECIDED if self.decision else HandPhase.DEALT
        return self.decision

    def _decide(self) -> Optional[HandDecision]:
        for seat in (0, 1):
            if self.trick_points[seat] >= TRICKS_TO_WIN:
                return HandDecision(seat, f"won {TRICKS_TO_WIN} tricks")
        if self.trick_count < TRICKS_PER_HAND:
            return None
        first, second = self.trick_points
        if first > second:
            return HandDecision(0, "more tricks after three")
        if second > first:
            return HandDecision(1, "more tricks after three")
        return HandDecision(None, "tricks level after three")

    def is_decided(self) -> bool:
        return self.phase is HandPhase.HAND_DECIDED
