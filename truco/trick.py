"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .cards import Card, Comparison, compare


class TrickError(RuntimeError):
    """Raised when trick play breaks ordering constraints."""


class TrickOutcome(Enum):
    WINNER_A = auto()
    WINNER_B = auto()
    TIE = auto()


def resolve_trick(card_a: Card, card_b: Card) -> TrickOutcome:
    """Decide a trick between two cards. A tie is a drawn trick, not an error."""
    result = compare(card_a, card_b)
    if result is Comparison.GREATER:
        return TrickOutcome.WINNER_A
    if result is Comparison.LESS:
        return TrickOutcome.WINNER_B
    return TrickOutcome.TIE


@dataclass
class Trick:
    leader: int
    plays: List[Tuple[int, Card]] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.plays

    def add_play(self, player: int, card: Card) -> None:
        if len(self.plays) >= 2:
            raise TrickError("Trick already complete.")
        if not self.plays and player != self.leader:
            raise TrickError("Only the leader can start the trick.")
        if self.plays and player == self.plays[0][0]:
            raise TrickError("Leader cannot play twice in the same trick.")
        self.plays.append((player, card))

    def is_full(self) -> bool:
        return len(self.plays) == 2

    def has_played(self, player: int) -> bool:
        return any(seat == player for seat, _ in self.plays)

    def cards(self) -> List[Card]:
        return [card for _, card in self.plays]

    def outcome(self) -> TrickOutcome:
        if not self.is_full():
            raise TrickError("Cannot resolve a trick before both cards are down.")
        return resolve_trick(self.plays[0][1], self.plays[1][1])

    def winner(self) -> Optional[int]:
        """Return the winning seat, or None when the trick is drawn."""
        outcome = self.outcome()
        if outcome is TrickOutcome.WINNER_A:
            return self.plays[0][0]
        if outcome is TrickOutcome.WINNER_B:
            return self.plays[1][0]
        return None
