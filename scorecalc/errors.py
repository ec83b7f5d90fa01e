"""
Error taxonomy for the Score Calculator.

Score errors are recoverable: every one of them is caught by the
sub-screen that triggered it and shown as a transient message.
``BackendError`` is the only fatal error and aborts start-up.
"""

from __future__ import annotations


class ScoreError(Exception):
    """Base class for recoverable score-handling errors."""


class OutOfRangeError(ScoreError):
    """A score lies outside the accepted range."""

    def __init__(self, value: int, low: int, high: int) -> None:
        super().__init__(f"score {value} outside [{low}, {high}]")
        self.value = value
        self.low = low
        self.high = high


class CapacityExceededError(ScoreError):
    """The score store has no free slots left."""

    def __init__(self, capacity: int) -> None:
        super().__init__(f"score store is full ({capacity} scores)")
        self.capacity = capacity


class EmptyStoreError(ScoreError):
    """Statistics or a listing were requested with no scores stored."""

    def __init__(self) -> None:
        super().__init__("no scores stored")


class UnparsableInputError(ScoreError):
    """Text typed at a numeric prompt is not a base-10 integer."""

    def __init__(self, text: str) -> None:
        super().__init__(f"not an integer: {text!r}")
        self.text = text


class BackendError(RuntimeError):
    """A terminal backend could not be initialised."""
