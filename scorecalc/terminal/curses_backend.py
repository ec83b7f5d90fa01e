"""
Curses implementation of the terminal backend.

Colour pairs are allocated lazily for each (foreground, background)
combination actually drawn.  Bright palette entries use the upper
eight curses colours when the terminal has sixteen, and the base colour
plus ``A_BOLD`` otherwise.
"""

from __future__ import annotations

import curses
import logging

from scorecalc.colors import Color
from scorecalc.config import INPUT_WIDTH
from scorecalc.errors import BackendError
from scorecalc.terminal.base import TerminalBackend
from scorecalc.utils.input_handler import DOWN, ENTER, ESCAPE, UP, KeyEvent

logger = logging.getLogger(__name__)


# PC text-mode order (low 3 bits) -> curses colour number
_CURSES_COLORS: tuple[int, ...] = (
    curses.COLOR_BLACK,
    curses.COLOR_BLUE,
    curses.COLOR_GREEN,
    curses.COLOR_CYAN,
    curses.COLOR_RED,
    curses.COLOR_MAGENTA,
    curses.COLOR_YELLOW,
    curses.COLOR_WHITE,
)

_ENTER_CODES = (curses.KEY_ENTER, 10, 13)
_ESCAPE_CODE = 27


def curses_color(color: Color, sixteen: bool) -> tuple[int, int]:
    """Return the curses colour number and extra attribute for *color*.

    Terminals with 16 colours get the bright palette entries directly.
    On 8-colour terminals bright colours become the base colour in bold.
    """
    base = _CURSES_COLORS[color & 0x07]
    if not color.is_bright:
        return base, curses.A_NORMAL
    if sixteen:
        return base + 8, curses.A_NORMAL
    return base, curses.A_BOLD


def decode_key(code: int) -> KeyEvent:
    """Translate a curses ``getch`` code into a ``KeyEvent``."""
    if code == curses.KEY_UP:
        return UP
    if code == curses.KEY_DOWN:
        return DOWN
    if code in _ENTER_CODES:
        return ENTER
    if code == _ESCAPE_CODE:
        return ESCAPE
    return KeyEvent.other(code)


class CursesBackend(TerminalBackend):
    """Draws on the real terminal through the ``curses`` module."""

    name = "curses"

    def __init__(self) -> None:
        self._screen = None
        self._col = 0
        self._row = 0
        self._fg = Color.WHITE
        self._bg = Color.BLACK
        self._pairs: dict[tuple[int, int], int] = {}
        self._has_colors = False
        self._sixteen = False

    # ── Raw mode ────────────────────────────────────────────────────────

    def enable_raw_input(self) -> None:
        try:
            self._screen = curses.initscr()
            curses.noecho()
            curses.cbreak()
            self._screen.keypad(True)
            # Without this curses waits a full second to tell Esc from
            # the start of an escape sequence.
            curses.set_escdelay(25)
            if curses.has_colors():
                curses.start_color()
                self._has_colors = True
                self._sixteen = curses.COLORS >= 16
        except curses.error as exc:
            self.restore_input()
            raise BackendError(f"cannot initialise curses: {exc}") from exc

    def restore_input(self) -> None:
        if self._screen is None:
            return
        try:
            self._screen.keypad(False)
            curses.echo()
            curses.nocbreak()
        except curses.error:  # pragma: no cover - terminal already gone
            pass
        finally:
            curses.endwin()
            self._screen = None

    # ── Output ──────────────────────────────────────────────────────────

    def move_cursor(self, col: int, row: int) -> None:
        self._col = max(col - 1, 0)
        self._row = max(row - 1, 0)

    def set_foreground(self, color: Color) -> None:
        self._fg = color

    def set_background(self, color: Color) -> None:
        self._bg = color

    def clear_screen(self) -> None:
        self._screen.erase()
        self._col = self._row = 0

    def write(self, text: str) -> None:
        height, width = self._screen.getmaxyx()
        if self._row >= height or self._col >= width:
            return
        visible = text[: width - self._col]
        try:
            self._screen.addstr(self._row, self._col, visible, self._attr())
        except curses.error:
            # Writing the bottom-right cell moves the cursor off-screen;
            # the text itself has been drawn.
            pass
        self._col += len(visible)

    def _attr(self) -> int:
        if not self._has_colors:
            return curses.A_REVERSE if self._bg != Color.BLACK else curses.A_NORMAL
        fg, fg_attr = curses_color(self._fg, self._sixteen)
        bg, _ = curses_color(self._bg, self._sixteen)
        pair = self._pairs.get((fg, bg))
        if pair is None:
            pair = len(self._pairs) + 1
            curses.init_pair(pair, fg, bg)
            self._pairs[(fg, bg)] = pair
        return curses.color_pair(pair) | fg_attr

    # ── Input ───────────────────────────────────────────────────────────

    def read_key(self) -> KeyEvent:
        self._screen.move(self._row, self._col)
        self._screen.refresh()
        while True:
            code = self._screen.getch()
            if code == curses.KEY_RESIZE:
                continue
            return decode_key(code)

    def read_line(self) -> str:
        self._screen.move(self._row, self._col)
        self._screen.refresh()
        curses.echo()
        try:
            raw = self._screen.getstr(self._row, self._col, INPUT_WIDTH)
        except curses.error:
            raw = b""
        finally:
            curses.noecho()
        return raw.decode("utf-8", errors="replace")
