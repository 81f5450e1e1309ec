"""Errors raised by hand evaluation."""
from typing import Optional


class PokerShowdownError(Exception):
    """Base class for evaluation errors."""
    pass


class CannotEvaluateError(PokerShowdownError):
    """The request as a whole cannot be answered (e.g. fewer than two hands)."""
    pass


class IllegalHandError(PokerShowdownError):
    """A hand does not have exactly five distinct cards."""

    def __init__(self, message: str, hand_index: Optional[int] = None):
        super().__init__(message)
        self.hand_index = hand_index
