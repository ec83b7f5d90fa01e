"""
Console colour palette shared by all terminal backends.

The sixteen entries follow the classic PC text-mode ordering, so the low
three bits select the base ANSI colour and bit 3 selects the bright
variant.
"""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    BLACK = 0
    BLUE = 1
    GREEN = 2
    CYAN = 3
    RED = 4
    MAGENTA = 5
    BROWN = 6
    LIGHTGRAY = 7
    DARKGRAY = 8
    LIGHTBLUE = 9
    LIGHTGREEN = 10
    LIGHTCYAN = 11
    LIGHTRED = 12
    LIGHTMAGENTA = 13
    YELLOW = 14
    WHITE = 15

    @property
    def is_bright(self) -> bool:
        return bool(self.value & 0x08)


# RGB values used by the pygame console window.
RGB: dict[Color, tuple[int, int, int]] = {
    Color.BLACK: (0, 0, 0),
    Color.BLUE: (0, 0, 170),
    Color.GREEN: (0, 170, 0),
    Color.CYAN: (0, 170, 170),
    Color.RED: (170, 0, 0),
    Color.MAGENTA: (170, 0, 170),
    Color.BROWN: (170, 85, 0),
    Color.LIGHTGRAY: (170, 170, 170),
    Color.DARKGRAY: (85, 85, 85),
    Color.LIGHTBLUE: (85, 85, 255),
    Color.LIGHTGREEN: (85, 255, 85),
    Color.LIGHTCYAN: (85, 255, 255),
    Color.LIGHTRED: (255, 85, 85),
    Color.LIGHTMAGENTA: (255, 85, 255),
    Color.YELLOW: (255, 255, 85),
    Color.WHITE: (255, 255, 255),
}
