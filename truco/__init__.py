"""Core engine package for Truco Mineiro with fixed trumps."""

__all__ = [
    "cards",
    "deck",
    "errors",
    "player",
    "trick",
    "hand",
    "negotiation",
    "log",
    "config",
    "game",
    "service",
]
