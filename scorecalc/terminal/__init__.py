"""Terminal backends: the drawing and key-input layer."""

from __future__ import annotations

from scorecalc.terminal.base import TerminalBackend

BACKENDS: tuple[str, ...] = ("curses", "pygame")


def create_backend(name: str, scale: int = 1) -> TerminalBackend:
    """Build the backend selected on the command line."""
    if name == "curses":
        from scorecalc.terminal.curses_backend import CursesBackend
        return CursesBackend()
    if name == "pygame":
        from scorecalc.terminal.pygame_backend import PygameBackend
        return PygameBackend(scale=scale)
    raise ValueError(f"unknown backend {name!r}; expected one of {BACKENDS}")


__all__ = ["BACKENDS", "TerminalBackend", "create_backend"]
