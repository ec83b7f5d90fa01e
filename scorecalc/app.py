"""
Core application logic for the Score Calculator.

Owns the score store and the menu selection, and drives the top-level
event loop: read a key, apply the menu transition, run a sub-screen
when one is opened, redraw.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto

from scorecalc import menu
from scorecalc.menu import Command, MenuAction
from scorecalc.models.score_store import ScoreStore
from scorecalc.terminal.base import TerminalBackend
from scorecalc.ui.renderer import Screen, ScreenRenderer
from scorecalc.ui.screens import CONTROLLERS
from scorecalc.utils.input_handler import KeyEvent

logger = logging.getLogger(__name__)


# ── Application states ──────────────────────────────────────────────────────


class AppState(Enum):
    MENU = auto()
    ADD = auto()
    LIST = auto()
    STATISTICS = auto()
    CLEAR = auto()
    ABOUT = auto()
    EXITED = auto()


_ACTION_STATES: dict[MenuAction, AppState] = {
    MenuAction.ADD: AppState.ADD,
    MenuAction.LIST: AppState.LIST,
    MenuAction.STATISTICS: AppState.STATISTICS,
    MenuAction.CLEAR: AppState.CLEAR,
    MenuAction.ABOUT: AppState.ABOUT,
}


# ── Score Calculator ────────────────────────────────────────────────────────


@dataclass
class ScoreCalculator:
    """Top-level controller.

    Holds the store shared by every sub-screen and the highlighted menu
    entry.  The backend must already be in raw input mode.
    """

    backend: TerminalBackend
    store: ScoreStore = field(default_factory=ScoreStore)
    selected: int = 0
    state: AppState = AppState.MENU
    renderer: ScreenRenderer = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.renderer = ScreenRenderer(self.backend, self.store)

    # ── Drawing ─────────────────────────────────────────────────────────

    def draw_menu(self) -> None:
        self.renderer.render(Screen.MENU, labels=menu.labels(),
                             selected=self.selected)

    # ── Event handling ──────────────────────────────────────────────────

    def handle_key(self, event: KeyEvent) -> AppState:
        """Apply one key press at the menu and return the resulting state.

        When the key opens a sub-screen, the sub-screen runs to
        completion before this returns.
        """
        if self.state is AppState.EXITED:
            return self.state

        step = menu.transition(self.selected, event)
        if step.selected != self.selected:
            logger.debug("Menu selection %d -> %d", self.selected, step.selected)
        self.selected = step.selected

        if step.command is Command.QUIT:
            self.quit()
        elif step.command is Command.OPEN:
            self.open(step.action)
        return self.state

    def open(self, action: MenuAction) -> None:
        """Run the sub-screen bound to *action*, then return to the menu."""
        self.state = _ACTION_STATES[action]
        logger.info("Opening %s screen", action.name.lower())
        try:
            CONTROLLERS[action](self.backend, self.renderer, self.store)
        finally:
            if self.state is not AppState.EXITED:
                self.state = AppState.MENU

    def quit(self) -> None:
        self.renderer.blank()
        self.state = AppState.EXITED
        logger.info("Leaving with %d scores in memory", self.store.count)

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Loop until Escape or the Exit entry ends the program."""
        while self.state is not AppState.EXITED:
            self.draw_menu()
            self.handle_key(self.backend.read_key())
