"""Deck creation, shuffling and dealing for Truco Mineiro."""

from __future__ import annotations

from dataclasses import dataclass, field
from random import Random
from typing import List, Optional, Tuple

from .cards import Card, NORMAL_ORDER, Suit
from .errors import InsufficientCards

DECK_SIZE = 40


def build_deck() -> List[Card]:
    """Return the ordered 40-card deck (no 8s, 9s or 10s)."""
    return [Card(rank, suit) for suit in Suit for rank in NORMAL_ORDER]


@dataclass
class Deck:
    cards: List[Card] = field(default_factory=build_deck)

    @classmethod
    def build(cls) -> Deck:
        return cls(cards=build_deck())

    @classmethod
    def new_shuffled(cls, rng: Optional[Random] = None) -> Deck:
        deck = cls.build()
        deck.shuffle(rng or Random())
        return deck

    def shuffle(self, rng: Random) -> None:
        # Random.shuffle is an in-place Fisher-Yates pass.
        rng.shuffle(self.cards)

    def deal(self, n: int) -> Tuple[List[Card], List[Card]]:
        """Pop n cards for each of two players, alternating, from the end."""
        if n < 0:
            raise ValueError("Cannot deal a negative number of cards.")
        if len(self.cards) < 2 * n:
            raise InsufficientCards(
                f"Dealing {n} cards to two players needs {2 * n} cards, deck has {len(self.cards)}."
            )
        hand0: List[Card] = []
        hand1: List[Card] = []
        for _ in range(n):
            hand0.append(self.cards.pop())
            hand1.append(self.cards.pop())
        return hand0, hand1

    def remaining(self) -> int:
        return len(self.cards)

    def __len__(self) -> int:
        return len(self.cards)
