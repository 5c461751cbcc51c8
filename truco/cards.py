"""Card-related data structures and ranking for Truco Mineiro."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Mapping


class Suit(Enum):
    CLUBS = "clubs"
    HEARTS = "hearts"
    SPADES = "spades"
    DIAMONDS = "diamonds"

    def __str__(self) -> str:
        return self.value


class Rank(Enum):
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    QUEEN = "Q"
    JACK = "J"
    KING = "K"
    ACE = "A"
    TWO = "2"
    THREE = "3"

    def __str__(self) -> str:
        return self.value


class Comparison(Enum):
    GREATER = auto()
    LESS = auto()
    EQUAL = auto()


# Rank order from weakest to strongest for cards that are not fixed trumps.
NORMAL_ORDER: list[Rank] = [
    Rank.FOUR,
    Rank.FIVE,
    Rank.SIX,
    Rank.SEVEN,
    Rank.QUEEN,
    Rank.JACK,
    Rank.KING,
    Rank.ACE,
    Rank.TWO,
    Rank.THREE,
]

NORMAL_STRENGTH: dict[Rank, int] = {rank: index for index, rank in enumerate(NORMAL_ORDER)}

# Fixed trumps (manilhas). Values sit above every index in NORMAL_ORDER.
FIXED_TRUMPS: dict[tuple[Rank, Suit], int] = {
    (Rank.FOUR, Suit.CLUBS): 14,
    (Rank.SEVEN, Suit.HEARTS): 13,
    (Rank.ACE, Suit.SPADES): 12,
    (Rank.SEVEN, Suit.DIAMONDS): 11,
}

TRUMP_NAMES: dict[tuple[Rank, Suit], str] = {
    (Rank.FOUR, Suit.CLUBS): "Zap",
    (Rank.SEVEN, Suit.HEARTS): "Copeta",
    (Rank.ACE, Suit.SPADES): "Espadilha",
    (Rank.SEVEN, Suit.DIAMONDS): "Pica-fumo",
}


def strength_of(card: Card) -> int:
    """Return the comparison strength of a card.

    Fixed trumps map to 11..14; every other card maps to its index in
    NORMAL_ORDER (0..9), so a trump always beats a non-trump.
    """
    trump_value = FIXED_TRUMPS.get((card.rank, card.suit))
    if trump_value is not None:
        return trump_value
    return NORMAL_STRENGTH[card.rank]


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    rank: Rank
    suit: Suit
    strength: int = field(init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "strength", strength_of(self))

    def is_trump(self) -> bool:
        return (self.rank, self.suit) in FIXED_TRUMPS

    def __str__(self) -> str:
        return f"{self.rank} of {self.suit}"


def is_trump(card: Card) -> bool:
    return card.is_trump()


def compare(a: Card, b: Card) -> Comparison:
    """Compare two cards purely by strength.

    Different suits of the same non-trump rank share a strength and compare
    EQUAL; that is how a trick ends drawn.
    """
    if a.strength > b.strength:
        return Comparison.GREATER
    if a.strength < b.strength:
        return Comparison.LESS
    return Comparison.EQUAL


def serialize_card(card: Card) -> dict[str, str]:
    return {"rank": card.rank.value, "suit": card.suit.value}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    try:
        rank = Rank(str(payload["rank"]).upper())
        suit = Suit(str(payload["suit"]).lower())
    except KeyError as exc:
        raise ValueError("Card payload needs 'rank' and 'suit'.") from exc
    return Card(rank, suit)


def card_label(card: Card) -> str:
    nickname = TRUMP_NAMES.get((card.rank, card.suit))
    if nickname:
        return f"{card} ({nickname})"
    return str(card)
