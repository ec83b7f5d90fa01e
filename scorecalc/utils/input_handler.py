"""
Input events for the Score Calculator.

Backends decode raw key presses into ``KeyEvent`` values so that the
menu and the sub-screens never see platform key codes.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Key(Enum):
    """Logical keys the application reacts to."""
    UP = auto()
    DOWN = auto()
    ENTER = auto()
    ESCAPE = auto()
    OTHER = auto()


@dataclass(frozen=True)
class KeyEvent:
    """A single decoded key press.

    ``code`` carries the character code for ``Key.OTHER`` and is ``0``
    for the named keys.
    """
    key: Key
    code: int = 0

    @classmethod
    def other(cls, code: int) -> KeyEvent:
        return cls(Key.OTHER, code)


UP = KeyEvent(Key.UP)
DOWN = KeyEvent(Key.DOWN)
ENTER = KeyEvent(Key.ENTER)
ESCAPE = KeyEvent(Key.ESCAPE)
