"""Append-only, human-readable record of what happened in a hand."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, List, Mapping, Optional, Tuple

from .cards import Card

logger = logging.getLogger(__name__)


class EventKind(Enum):
    CARD_PLAYED = auto()
    TRICK_RESOLVED = auto()
    TURN_PASSED = auto()
    TURN_STARTED = auto()
    TRUCO_CALLED = auto()
    TRUCO_ACCEPTED = auto()
    TRUCO_DENIED = auto()
    TRUCO_RAISED = auto()
    HAND_ENDED = auto()
    ACTION_REJECTED = auto()
    MATCH_WON = auto()


@dataclass(frozen=True)
class GameEvent:
    kind: EventKind
    message: str
    seat: Optional[int] = None
    card: Optional[Card] = None
    data: Mapping[str, Any] = field(default_factory=dict)


class GameLog:
    """Ordered log of text entries with a structured event alongside each.

    Entries are only ever appended. The whole log is cleared when a new hand
    starts. Every entry is mirrored to the module logger so a host process can
    capture the game transcript with ordinary logging handlers.
    """

    def __init__(self) -> None:
        self._events: List[GameEvent] = []

    def record(
        self,
        kind: EventKind,
        message: str,
        *,
        seat: Optional[int] = None,
        card: Optional[Card] = None,
        **data: Any,
    ) -> GameEvent:
        event = GameEvent(kind=kind, message=message, seat=seat, card=card, data=dict(data))
        self._events.append(event)
        level = logging.WARNING if kind is EventKind.ACTION_REJECTED else logging.INFO
        logger.log(level, "%s: %s", kind.name.lower(), message)
        return event

    @property
    def entries(self) -> Tuple[str, ...]:
        return tuple(event.message for event in self._events)

    @property
    def events(self) -> Tuple[GameEvent, ...]:
        return tuple(self._events)

    def since(self, index: int) -> Tuple[GameEvent, ...]:
        return tuple(self._events[index:])

    def last(self) -> Optional[GameEvent]:
        return self._events[-1] if self._events else None

    def clear(self) -> None:
        self._events = []

    def __len__(self) -> int:
        return len(self._events)
