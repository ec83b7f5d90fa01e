"""
Screen renderer for the Score Calculator.

Every cursor-addressed write in the application goes through
``ScreenRenderer``.  The renderer only paints; reading keys is left to
the menu loop and the sub-screen controllers.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Optional, Sequence

from scorecalc.colors import Color
from scorecalc.config import (
    COLOR_BACKGROUND,
    COLOR_DIM,
    COLOR_ERROR,
    COLOR_NOTICE,
    COLOR_OK,
    COLOR_SELECTED_BG,
    COLOR_SELECTED_FG,
    COLOR_TEXT,
    COLOR_TITLE,
    CONTENT_ROW,
    CONTROLS_HINT,
    CONTROLS_ROW,
    DATA_ROW,
    DEFAULT_SUBTITLE,
    INPUT_COL,
    INPUT_WIDTH,
    LEFT_MARGIN,
    MENU_COL,
    MESSAGE_ROW,
    MESSAGE_WIDTH,
    PAUSE_PROMPT,
    PAUSE_ROW,
    SUBTITLE_ROW,
    TABLE_FIRST_ROW,
    TABLE_LAST_ROW,
    TITLE,
    TITLE_ROW,
)
from scorecalc.models.score_store import ScoreStats, ScoreStore
from scorecalc.terminal.base import TerminalBackend
from scorecalc.ui import text


class Screen(Enum):
    """Logical screens the renderer can paint from scratch."""
    MENU = auto()
    ADD = auto()
    LIST = auto()
    STATISTICS = auto()
    CLEAR = auto()
    ABOUT = auto()


_SUBTITLES: dict[Screen, str] = {
    Screen.ADD: text.MSG_ADD_SUBTITLE,
    Screen.LIST: "List all scores.",
    Screen.STATISTICS: "Statistics.",
    Screen.CLEAR: "Clear all data.",
    Screen.ABOUT: "About this program.",
}


class ScreenRenderer:
    """Paints logical screens onto a ``TerminalBackend``.

    The store is only read, for the header's data counter.
    """

    def __init__(self, backend: TerminalBackend, store: ScoreStore) -> None:
        self.backend = backend
        self.store = store

    # ── Primitives ──────────────────────────────────────────────────────

    def text_at(self, col: int, row: int, value: str,
                color: Color = COLOR_TEXT) -> None:
        self.backend.set_foreground(color)
        self.backend.write_at(col, row, value)
        self.backend.set_foreground(COLOR_TEXT)

    def clear_line(self, col: int, row: int, width: int) -> None:
        self.backend.write_at(col, row, " " * width)

    def message(self, value: str, color: Color) -> None:
        """Replace the transient message line."""
        self.clear_line(LEFT_MARGIN, MESSAGE_ROW, MESSAGE_WIDTH)
        self.text_at(LEFT_MARGIN, MESSAGE_ROW, value, color)

    def pause_prompt(self) -> None:
        self.text_at(LEFT_MARGIN, PAUSE_ROW, PAUSE_PROMPT, COLOR_NOTICE)

    def input_field(self, row: int) -> None:
        """Blank the input field on *row* and park the cursor at its start."""
        self.clear_line(INPUT_COL, row, INPUT_WIDTH)
        self.backend.set_foreground(COLOR_TEXT)
        self.backend.move_cursor(INPUT_COL, row)

    # ── Screen parts ────────────────────────────────────────────────────

    def header(self, subtitle: Optional[str] = None) -> None:
        self.text_at(LEFT_MARGIN, TITLE_ROW, TITLE, COLOR_TITLE)
        self.text_at(LEFT_MARGIN, SUBTITLE_ROW, subtitle or DEFAULT_SUBTITLE)
        self.data_line()

    def data_line(self) -> None:
        self.text_at(
            LEFT_MARGIN, DATA_ROW,
            text.format_data_line(self.store.count, self.store.capacity),
            COLOR_DIM,
        )

    def menu(self, labels: Sequence[str], selected: int) -> None:
        for i, label in enumerate(labels):
            self.backend.move_cursor(MENU_COL, CONTENT_ROW + i)
            if i == selected:
                self.backend.set_foreground(COLOR_SELECTED_FG)
                self.backend.set_background(COLOR_SELECTED_BG)
                self.backend.write(text.format_menu_item(label, True))
                self.backend.set_background(COLOR_BACKGROUND)
                self.backend.set_foreground(COLOR_TEXT)
            else:
                self.backend.set_foreground(COLOR_TEXT)
                self.backend.write(text.format_menu_item(label, False))
        self.text_at(LEFT_MARGIN, CONTROLS_ROW, CONTROLS_HINT, COLOR_DIM)

    def add_form(self) -> None:
        self.text_at(LEFT_MARGIN, CONTENT_ROW, text.MSG_ADD_PROMPT)
        self.text_at(LEFT_MARGIN, CONTENT_ROW + 2, text.MSG_ADD_TIP)

    def no_scores(self) -> None:
        self.text_at(LEFT_MARGIN, CONTENT_ROW, text.MSG_NO_SCORES, COLOR_NOTICE)

    def score_table(self, scores: Sequence[int]) -> int:
        """Draw the listing table and return how many rows fit.

        Rows stop at ``TABLE_LAST_ROW``; when that cuts the list short a
        note on the message row says how many were shown.
        """
        self.text_at(LEFT_MARGIN, CONTENT_ROW, text.TABLE_HEADER, COLOR_OK)
        capacity = TABLE_LAST_ROW - TABLE_FIRST_ROW + 1
        shown = min(len(scores), capacity)
        for i, score in enumerate(scores[:shown]):
            self.text_at(LEFT_MARGIN, TABLE_FIRST_ROW + i,
                         text.format_table_row(i + 1, score))
        if shown < len(scores):
            self.text_at(LEFT_MARGIN, MESSAGE_ROW,
                         text.format_truncation(shown), COLOR_NOTICE)
        return shown

    def stats(self, stats: ScoreStats) -> None:
        self.text_at(LEFT_MARGIN, CONTENT_ROW, text.STATS_HEADER, COLOR_OK)
        for i, line in enumerate(text.format_stats(stats)):
            self.text_at(LEFT_MARGIN, TABLE_FIRST_ROW + i, line)

    def clear_warning(self) -> None:
        self.text_at(LEFT_MARGIN, CONTENT_ROW, text.MSG_CLEAR_WARNING, COLOR_ERROR)
        self.text_at(LEFT_MARGIN, CONTENT_ROW + 2, text.MSG_CLEAR_CONFIRM)

    def about(self) -> None:
        for i, line in enumerate(text.ABOUT_LINES):
            if line:
                self.text_at(LEFT_MARGIN, CONTENT_ROW + i, line)

    # ── Whole screens ───────────────────────────────────────────────────

    def render(self, screen: Screen, **context) -> Optional[int]:
        """Clear the terminal and paint *screen*.

        Context keys: ``labels``/``selected`` for MENU, ``scores`` for
        LIST and ``stats`` for STATISTICS.  An empty ``scores`` or a
        ``None`` ``stats`` paints the no-scores notice instead.  LIST
        returns the number of rows shown.
        """
        self.backend.set_background(COLOR_BACKGROUND)
        self.backend.clear_screen()
        self.header(_SUBTITLES.get(screen))
        if screen is Screen.MENU:
            self.menu(context["labels"], context["selected"])
        elif screen is Screen.ADD:
            self.add_form()
        elif screen is Screen.LIST:
            scores = context["scores"]
            if not scores:
                self.no_scores()
                return 0
            return self.score_table(scores)
        elif screen is Screen.STATISTICS:
            if context["stats"] is None:
                self.no_scores()
            else:
                self.stats(context["stats"])
        elif screen is Screen.CLEAR:
            self.clear_warning()
        elif screen is Screen.ABOUT:
            self.about()
        return None

    def blank(self) -> None:
        """Leave a cleared screen behind on exit."""
        self.backend.set_foreground(COLOR_TEXT)
        self.backend.set_background(COLOR_BACKGROUND)
        self.backend.clear_screen()
