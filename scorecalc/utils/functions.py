"""
Shared helpers for the Score Calculator.
"""

from __future__ import annotations

from scorecalc.errors import UnparsableInputError


def parse_score(text: str) -> int:
    """Convert prompt input to an integer.

    The whole string (surrounding whitespace aside) must be a base-10
    integer with an optional sign; anything else raises
    ``UnparsableInputError``.  Range checking is left to the store.
    """
    stripped = text.strip()
    body = stripped[1:] if stripped[:1] in ("+", "-") else stripped
    if not body or not (body.isascii() and body.isdigit()):
        raise UnparsableInputError(text)
    return int(stripped, 10)


def wrap_index(index: int, step: int, size: int) -> int:
    """Move *index* by *step* within ``range(size)``, wrapping at both ends."""
    return (index + step + size) % size
