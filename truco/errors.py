"""Rule violations raised by the engine."""

from __future__ import annotations


class InvalidAction(ValueError):
    """Base class for recoverable rule violations.

    The game command layer turns these into a rejected ActionResult and a log
    entry; state is left untouched.
    """


class NotYourTurn(InvalidAction):
    """Raised when a seat acts while the other seat holds the turn."""


class ResponsePending(InvalidAction):
    """Raised when play is attempted while a truco call awaits an answer."""


class TurnNotStarted(InvalidAction):
    """Raised when the current player plays before revealing their hand."""


class InvalidCardIndex(InvalidAction):
    """Raised when a card selection falls outside the player's hand."""


class TrucoAlreadyCalled(InvalidAction):
    """Raised when truco is called while a bet is already active."""


class NoPendingTruco(InvalidAction):
    """Raised when a truco answer arrives with nothing to answer."""


class SelfRaise(InvalidAction):
    """Raised when the current caller tries to answer or raise their own bet."""


class BetAtMaximum(InvalidAction):
    """Raised when a raise is requested at the top of the ladder."""


class MatchOver(InvalidAction):
    """Raised for any command other than a reset once the match is won."""


class InsufficientCards(RuntimeError):
    """Raised when the deck cannot cover a deal. Deck sizing makes this a bug."""
