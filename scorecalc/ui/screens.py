"""
Sub-screen controllers.

Each controller paints its screen, runs its own small input loop and
returns when the user is done, leaving the menu to redraw.  Score errors
raised while a controller runs are shown on the message line and never
leave the controller.
"""

from __future__ import annotations

import logging
from typing import Callable

from scorecalc.config import (
    COLOR_ERROR,
    COLOR_NOTICE,
    COLOR_OK,
    CONTENT_ROW,
    FINISH_SENTINEL,
)
from scorecalc.colors import Color
from scorecalc.errors import (
    EmptyStoreError,
    OutOfRangeError,
    UnparsableInputError,
)
from scorecalc.menu import MenuAction
from scorecalc.models.score_store import ScoreStore
from scorecalc.terminal.base import TerminalBackend
from scorecalc.ui import text
from scorecalc.ui.renderer import Screen, ScreenRenderer
from scorecalc.utils.functions import parse_score
from scorecalc.utils.input_handler import Key

logger = logging.getLogger(__name__)

Controller = Callable[[TerminalBackend, ScreenRenderer, ScoreStore], None]


def wait_for_key(backend: TerminalBackend, renderer: ScreenRenderer) -> None:
    """Show the go-back prompt and block for any key."""
    renderer.pause_prompt()
    backend.read_key()


def _finish(backend: TerminalBackend, renderer: ScreenRenderer,
            message: str, color: Color) -> None:
    renderer.message(message, color)
    wait_for_key(backend, renderer)


# ── Controllers ─────────────────────────────────────────────────────────────


def add_scores(backend: TerminalBackend, renderer: ScreenRenderer,
               store: ScoreStore) -> None:
    """Prompt for scores until -1 is typed or the store fills up.

    Invalid text and out-of-range numbers re-prompt at the same place
    without using a slot.  Fullness is checked before each prompt, so
    ``store.add`` only ever rejects a value for being out of range.
    """
    renderer.render(Screen.ADD)
    while True:
        if store.is_full:
            _finish(backend, renderer, text.MSG_STORAGE_FULL, COLOR_ERROR)
            return

        renderer.input_field(CONTENT_ROW)
        raw = backend.read_line()
        try:
            value = parse_score(raw)
            if value == FINISH_SENTINEL:
                _finish(backend, renderer, text.MSG_FINISHED, COLOR_OK)
                return
            store.add(value)
        except (UnparsableInputError, OutOfRangeError) as exc:
            logger.debug("Rejected input %r: %s", raw, exc)
            renderer.message(text.MSG_INVALID, COLOR_ERROR)
            continue

        renderer.data_line()
        renderer.message(text.MSG_ADDED, COLOR_OK)


def list_scores(backend: TerminalBackend, renderer: ScreenRenderer,
                store: ScoreStore) -> None:
    shown = renderer.render(Screen.LIST, scores=store.scores)
    logger.debug("Listed %d of %d scores", shown, store.count)
    wait_for_key(backend, renderer)


def show_statistics(backend: TerminalBackend, renderer: ScreenRenderer,
                    store: ScoreStore) -> None:
    try:
        stats = store.stats()
    except EmptyStoreError:
        stats = None
    renderer.render(Screen.STATISTICS, stats=stats)
    wait_for_key(backend, renderer)


def clear_all(backend: TerminalBackend, renderer: ScreenRenderer,
              store: ScoreStore) -> None:
    """Ask for confirmation, then wipe the store on Enter.

    Escape cancels; every other key is ignored.
    """
    renderer.render(Screen.CLEAR)
    while True:
        event = backend.read_key()
        if event.key is Key.ENTER:
            store.clear()
            renderer.data_line()
            _finish(backend, renderer, text.MSG_CLEARED, COLOR_OK)
            return
        if event.key is Key.ESCAPE:
            _finish(backend, renderer, text.MSG_CANCELED, COLOR_NOTICE)
            return


def about(backend: TerminalBackend, renderer: ScreenRenderer,
          store: ScoreStore) -> None:
    renderer.render(Screen.ABOUT)
    wait_for_key(backend, renderer)


CONTROLLERS: dict[MenuAction, Controller] = {
    MenuAction.ADD: add_scores,
    MenuAction.LIST: list_scores,
    MenuAction.STATISTICS: show_statistics,
    MenuAction.CLEAR: clear_all,
    MenuAction.ABOUT: about,
}
