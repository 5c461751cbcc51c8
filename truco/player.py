"""Per-seat player state."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List

from .cards import Card


@dataclass
class Player:
    name: str
    hand: List[Card] = field(default_factory=list)
    score: int = 0
    is_turn: bool = False
    has_started_turn: bool = False
    cards_played: List[Card] = field(default_factory=list)

    def add_card(self, card: Card) -> None:
        self.hand.append(card)

    def take_hand(self, cards: Iterable[Card]) -> None:
        self.reset_hand()
        self.hand.extend(cards)

    def play_card(self, index: int) -> Card:
        """Move the card at index from the hand to the played pile."""
        if index < 0 or index >= len(self.hand):
            raise IndexError(f"No card at index {index}; hand holds {len(self.hand)}.")
        card = self.hand.pop(index)
        self.cards_played.append(card)
        return card

    def reset_hand(self) -> None:
        self.hand = []
        self.cards_played = []

    def award(self, points: int) -> None:
        if points < 0:
            raise ValueError("Points awarded must be non-negative.")
        self.score += points

    def reset(self) -> None:
        self.reset_hand()
        self.score = 0
        self.is_turn = False
        self.has_started_turn = False

    def __str__(self) -> str:
        return f"{self.name}({self.score})"
