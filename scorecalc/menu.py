"""
Top-level menu state machine.

``transition`` is pure: it maps the current selection and one key event
to the next selection and what the caller should do about it.  All I/O
lives in ``scorecalc.app``.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from scorecalc.utils.functions import wrap_index
from scorecalc.utils.input_handler import Key, KeyEvent


class MenuAction(Enum):
    """Menu entries, in display order."""
    ADD = 0
    LIST = 1
    STATISTICS = 2
    CLEAR = 3
    ABOUT = 4
    EXIT = 5


MENU_LABELS: dict[MenuAction, str] = {
    MenuAction.ADD: "Add Score",
    MenuAction.LIST: "List Scores",
    MenuAction.STATISTICS: "Statistics",
    MenuAction.CLEAR: "Clear All",
    MenuAction.ABOUT: "About",
    MenuAction.EXIT: "Exit",
}

MENU_ORDER: tuple[MenuAction, ...] = tuple(MenuAction)
MENU_SIZE: int = len(MENU_ORDER)


class Command(Enum):
    STAY = auto()   # redraw the menu and keep reading keys
    OPEN = auto()   # run the sub-screen for ``Transition.action``
    QUIT = auto()   # leave the program


@dataclass(frozen=True)
class Transition:
    selected: int
    command: Command
    action: Optional[MenuAction] = None


def labels() -> list[str]:
    return [MENU_LABELS[action] for action in MENU_ORDER]


def transition(selected: int, event: KeyEvent) -> Transition:
    """Return the menu's reaction to *event* while *selected* is highlighted."""
    if event.key is Key.UP:
        return Transition(wrap_index(selected, -1, MENU_SIZE), Command.STAY)
    if event.key is Key.DOWN:
        return Transition(wrap_index(selected, 1, MENU_SIZE), Command.STAY)
    if event.key is Key.ESCAPE:
        return Transition(selected, Command.QUIT)
    if event.key is Key.ENTER:
        action = MENU_ORDER[selected]
        if action is MenuAction.EXIT:
            return Transition(selected, Command.QUIT, action)
        return Transition(selected, Command.OPEN, action)
    return Transition(selected, Command.STAY)
