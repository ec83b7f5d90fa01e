"""User interface components."""

from .renderer import Screen, ScreenRenderer
from .screens import (
    CONTROLLERS,
    about,
    add_scores,
    clear_all,
    list_scores,
    show_statistics,
    wait_for_key,
)

__all__ = [
    "CONTROLLERS",
    "Screen",
    "ScreenRenderer",
    "about",
    "add_scores",
    "clear_all",
    "list_scores",
    "show_statistics",
    "wait_for_key",
]
