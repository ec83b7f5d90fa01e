"""Utility functions and helpers."""

from .functions import parse_score, wrap_index
from .input_handler import DOWN, ENTER, ESCAPE, UP, Key, KeyEvent

__all__ = [
    "parse_score",
    "wrap_index",
    "Key",
    "KeyEvent",
    "UP",
    "DOWN",
    "ENTER",
    "ESCAPE",
]
