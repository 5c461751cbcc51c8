"""Truco bet escalation: call, accept, deny and raise."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from .errors import BetAtMaximum, NoPendingTruco, SelfRaise, TrucoAlreadyCalled

TRUCO_LADDER: Tuple[int, ...] = (1, 3, 6, 9, 12)
BASE_VALUE = TRUCO_LADDER[0]
MAX_TRUCO_VALUE = TRUCO_LADDER[-1]
# Refusing a bet concedes the caller this much less than the bet on the table.
DENY_DISCOUNT = 2


def next_value(value: int) -> Optional[int]:
    """Return the next rung of the ladder, or None at the top."""
    try:
        index = TRUCO_LADDER.index(value)
    except ValueError as exc:
        raise ValueError(f"{value} is not on the truco ladder.") from exc
    if index + 1 >= len(TRUCO_LADDER):
        return None
    return TRUCO_LADDER[index + 1]


class TrucoPhase(Enum):
    IDLE = auto()
    CALLED = auto()
    ACCEPTED = auto()


@dataclass
class TrucoState:
    """Two-seat bet negotiation for a single hand."""

    value: int = BASE_VALUE
    caller: Optional[int] = None
    is_active: bool = False
    pending_response: bool = False
    history: List[Tuple[int, str, int]] = field(default_factory=list)

    @property
    def phase(self) -> TrucoPhase:
        if not self.is_active:
            return TrucoPhase.IDLE
        if self.pending_response:
            return TrucoPhase.CALLED
        return TrucoPhase.ACCEPTED

    def call(self, seat: int) -> int:
        if self.is_active:
            raise TrucoAlreadyCalled("Truco has already been called this hand.")
        self.value = next_value(BASE_VALUE)
        self.caller = seat
        self.is_active = True
        self.pending_response = True
        self.history.append((seat, "call", self.value))
        return self.value

    def accept(self, seat: int) -> int:
        self._ensure_responder(seat)
        self.pending_response = False
        self.history.append((seat, "accept", self.value))
        return self.value

    def deny(self, seat: int) -> Tuple[int, int]:
        """Refuse the bet. Returns (caller seat, points conceded to the caller)."""
        self._ensure_responder(seat)
        assert self.caller is not None
        points = self.value - DENY_DISCOUNT
        self.pending_response = False
        self.history.append((seat, "deny", self.value))
        return self.caller, points

    def raise_bet(self, seat: int) -> int:
        """Answer a pending call by moving the bet one rung up.

        Only the seat facing the call may raise; an accepted bet is settled
        for the rest of the hand.
        """
        if not self.is_active:
            raise NoPendingTruco("Truco has not been called yet.")
        if not self.pending_response:
            raise NoPendingTruco("There is no truco call to raise.")
        if seat == self.caller:
            raise SelfRaise("You cannot raise your own truco.")
        raised = next_value(self.value)
        if raised is None:
            raise BetAtMaximum(f"The bet is already at the maximum ({MAX_TRUCO_VALUE}).")
        self.value = raised
        self.caller = seat
        self.pending_response = True
        self.history.append((seat, "raise", self.value))
        return self.value

    def can_call(self) -> bool:
        return not self.is_active

    def can_answer(self, seat: int) -> bool:
        return self.pending_response and seat != self.caller

    def can_raise(self, seat: int) -> bool:
        return self.pending_response and seat != self.caller and self.value < MAX_TRUCO_VALUE

    def _ensure_responder(self, seat: int) -> None:
        if not self.pending_response:
            raise NoPendingTruco("There is no truco call to answer.")
        if seat == self.caller:
            raise SelfRaise("You cannot answer your own truco.")
