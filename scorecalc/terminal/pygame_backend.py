"""
Pygame implementation of the terminal backend.

Emulates an 80x25 text console in a window: writes go to a character
grid, and the grid is painted and flipped whenever the application
blocks for input.  Closing the window raises ``KeyboardInterrupt`` so
the application unwinds through the same path as Ctrl+C.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

try:
    import pygame
except ImportError:
    pygame = None  # type: ignore[assignment]

from scorecalc.colors import RGB, Color
from scorecalc.config import (
    CELL_HEIGHT,
    CELL_WIDTH,
    DEFAULT_SCALE,
    INPUT_WIDTH,
    SCREEN_COLS,
    SCREEN_ROWS,
    UPDATE_RATE,
    WINDOW_CAPTION,
)
from scorecalc.errors import BackendError
from scorecalc.terminal.base import TerminalBackend
from scorecalc.utils.input_handler import DOWN, ENTER, ESCAPE, UP, KeyEvent

logger = logging.getLogger(__name__)


@dataclass
class Cell:
    char: str = " "
    fg: Color = Color.WHITE
    bg: Color = Color.BLACK


def _blank_grid() -> list[list[Cell]]:
    return [[Cell() for _ in range(SCREEN_COLS)] for _ in range(SCREEN_ROWS)]


def decode_key(event) -> KeyEvent:
    """Translate a ``pygame.KEYDOWN`` event into a ``KeyEvent``."""
    if event.key == pygame.K_UP:
        return UP
    if event.key == pygame.K_DOWN:
        return DOWN
    if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
        return ENTER
    if event.key == pygame.K_ESCAPE:
        return ESCAPE
    if event.unicode:
        return KeyEvent.other(ord(event.unicode[0]))
    return KeyEvent.other(event.key)


@dataclass
class PygameBackend(TerminalBackend):
    """Character-grid console rendered in a pygame window."""

    name = "pygame"

    scale: int = DEFAULT_SCALE

    # Runtime state (initialized in ``enable_raw_input``)
    screen: object = field(default=None, repr=False)
    clock: object = field(default=None, repr=False)
    font: object = field(default=None, repr=False)
    grid: list[list[Cell]] = field(default_factory=_blank_grid, repr=False)
    col: int = 0
    row: int = 0
    fg: Color = Color.WHITE
    bg: Color = Color.BLACK

    # ── Raw mode ────────────────────────────────────────────────────────

    def enable_raw_input(self) -> None:
        if pygame is None:
            raise BackendError(
                "pygame is required for the pygame backend. "
                "Install with: pip install pygame"
            )
        try:
            pygame.init()
            width = SCREEN_COLS * CELL_WIDTH * self.scale
            height = SCREEN_ROWS * CELL_HEIGHT * self.scale
            self.screen = pygame.display.set_mode((width, height))
            pygame.display.set_caption(WINDOW_CAPTION)
            pygame.key.set_repeat(400, 40)
            self.font = pygame.font.Font(None, CELL_HEIGHT * self.scale)
        except pygame.error as exc:
            self.screen = None
            pygame.quit()
            raise BackendError(f"cannot create display: {exc}") from exc

        self.clock = pygame.time.Clock()

    def restore_input(self) -> None:
        if self.screen is None:
            return
        self.screen = None
        pygame.quit()

    # ── Output ──────────────────────────────────────────────────────────

    def move_cursor(self, col: int, row: int) -> None:
        self.col = max(col - 1, 0)
        self.row = max(row - 1, 0)

    def set_foreground(self, color: Color) -> None:
        self.fg = color

    def set_background(self, color: Color) -> None:
        self.bg = color

    def clear_screen(self) -> None:
        self.grid = _blank_grid()
        self.col = self.row = 0

    def write(self, text: str) -> None:
        for ch in text:
            if ch == "\n":
                self.row += 1
                self.col = 0
                continue
            if self.row < SCREEN_ROWS and self.col < SCREEN_COLS:
                self.grid[self.row][self.col] = Cell(ch, self.fg, self.bg)
            self.col += 1

    def text_at(self, row: int) -> str:
        """Return the characters on 1-based *row*, trailing blanks removed."""
        return "".join(cell.char for cell in self.grid[row - 1]).rstrip()

    # ── Rendering ───────────────────────────────────────────────────────

    def _render(self, show_cursor: bool = False) -> None:
        """Paint the character grid and flip the display."""
        cw = CELL_WIDTH * self.scale
        ch = CELL_HEIGHT * self.scale
        self.screen.fill(RGB[Color.BLACK])
        for y, line in enumerate(self.grid):
            for x, cell in enumerate(line):
                if cell.bg != Color.BLACK:
                    self.screen.fill(RGB[cell.bg], (x * cw, y * ch, cw, ch))
                if cell.char != " ":
                    surf = self.font.render(cell.char, True, RGB[cell.fg])
                    self.screen.blit(surf, (x * cw, y * ch))
        if show_cursor and self.row < SCREEN_ROWS and self.col < SCREEN_COLS:
            self.screen.fill(
                RGB[Color.WHITE],
                (self.col * cw, (self.row + 1) * ch - 2 * self.scale, cw, 2 * self.scale),
            )
        pygame.display.flip()

    def _next_keydown(self, show_cursor: bool = False):
        """Block until a key is pressed, repainting while waiting."""
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    raise KeyboardInterrupt
                if event.type == pygame.KEYDOWN:
                    return event
            self._render(show_cursor)
            self.clock.tick(UPDATE_RATE)

    # ── Input ───────────────────────────────────────────────────────────

    def read_key(self) -> KeyEvent:
        self._render()
        return decode_key(self._next_keydown())

    def read_line(self) -> str:
        """Let the user type a line at the cursor, echoing into the grid.

        Enter finishes, Backspace deletes, Escape discards what was typed.
        """
        start_col = self.col
        text = ""
        while True:
            event = self._next_keydown(show_cursor=True)
            if event.key in (pygame.K_RETURN, pygame.K_KP_ENTER):
                break
            if event.key == pygame.K_BACKSPACE:
                text = text[:-1]
            elif event.key == pygame.K_ESCAPE:
                text = ""
            elif len(text) < INPUT_WIDTH and event.unicode and event.unicode.isprintable():
                text += event.unicode
            self.col = start_col
            self.write(text.ljust(INPUT_WIDTH))
            self.col = start_col + len(text)
        self.row += 1
        self.col = 0
        return text
