"""
Shared fixtures: a scripted, in-memory terminal backend.
"""

from collections import deque

import pytest

from scorecalc.colors import Color
from scorecalc.config import SCREEN_COLS, SCREEN_ROWS
from scorecalc.errors import BackendError
from scorecalc.models.score_store import ScoreStore
from scorecalc.terminal.base import TerminalBackend
from scorecalc.ui.renderer import ScreenRenderer
from scorecalc.utils.input_handler import KeyEvent


class ScriptExhausted(AssertionError):
    """The code under test asked for more input than the test scripted."""


class FakeBackend(TerminalBackend):
    """Records writes on a character grid and replays scripted input."""

    name = "fake"

    def __init__(self, keys=(), lines=(), fail_start=False):
        self.keys = deque(keys)
        self.lines = deque(lines)
        self.fail_start = fail_start
        self.raw = False
        self.restore_calls = 0
        self.clears = 0
        self.prompts = []
        self.col = 1
        self.row = 1
        self.fg = Color.WHITE
        self.bg = Color.BLACK
        self._blank()

    def _blank(self):
        self.grid = [[" "] * SCREEN_COLS for _ in range(SCREEN_ROWS)]
        self.colors = {}

    def script(self, keys=(), lines=()):
        self.keys.extend(keys)
        self.lines.extend(lines)

    # ── TerminalBackend ─────────────────────────────────────────────────

    def move_cursor(self, col, row):
        self.col = col
        self.row = row

    def set_foreground(self, color):
        self.fg = color

    def set_background(self, color):
        self.bg = color

    def clear_screen(self):
        self._blank()
        self.clears += 1
        self.col = self.row = 1

    def write(self, text):
        for ch in text:
            if 1 <= self.row <= SCREEN_ROWS and 1 <= self.col <= SCREEN_COLS:
                self.grid[self.row - 1][self.col - 1] = ch
                self.colors[(self.col, self.row)] = (self.fg, self.bg)
            self.col += 1

    def read_key(self) -> KeyEvent:
        if not self.keys:
            raise ScriptExhausted("no scripted keys left")
        return self.keys.popleft()

    def read_line(self) -> str:
        if not self.lines:
            raise ScriptExhausted("no scripted lines left")
        self.prompts.append((self.col, self.row))
        line = self.lines.popleft()
        self.write(line)
        return line

    def enable_raw_input(self):
        if self.fail_start:
            raise BackendError("no terminal attached")
        self.raw = True

    def restore_input(self):
        self.raw = False
        self.restore_calls += 1

    # ── Inspection ──────────────────────────────────────────────────────

    def row_text(self, row):
        return "".join(self.grid[row - 1]).rstrip()

    def screen_text(self):
        return "\n".join(self.row_text(r) for r in range(1, SCREEN_ROWS + 1))

    def color_at(self, col, row):
        return self.colors.get((col, row))


@pytest.fixture
def backend():
    return FakeBackend()


@pytest.fixture
def store():
    return ScoreStore()


@pytest.fixture
def renderer(backend, store):
    return ScreenRenderer(backend, store)
