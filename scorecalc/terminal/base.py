"""
Terminal backend contract.

The application draws and reads input exclusively through this
interface.  Coordinates are 1-based ``(column, row)``.  Raw input mode
is a scoped resource: enter a backend as a context manager so that
``restore_input`` runs on every exit path.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from scorecalc.colors import Color
from scorecalc.utils.input_handler import KeyEvent


class TerminalBackend(ABC):
    """Cursor-addressed, colour-capable console with blocking key input."""

    name: str = "abstract"

    # ── Output ──────────────────────────────────────────────────────────

    @abstractmethod
    def move_cursor(self, col: int, row: int) -> None:
        """Place the cursor at 1-based (*col*, *row*)."""

    @abstractmethod
    def set_foreground(self, color: Color) -> None: ...

    @abstractmethod
    def set_background(self, color: Color) -> None: ...

    @abstractmethod
    def clear_screen(self) -> None: ...

    @abstractmethod
    def write(self, text: str) -> None:
        """Write *text* at the cursor in the current colours."""

    # ── Input ───────────────────────────────────────────────────────────

    @abstractmethod
    def read_key(self) -> KeyEvent:
        """Block until one key is pressed and return it decoded."""

    @abstractmethod
    def read_line(self) -> str:
        """Read one line of echoed text at the cursor, without the newline."""

    # ── Raw mode ────────────────────────────────────────────────────────

    @abstractmethod
    def enable_raw_input(self) -> None:
        """Switch to unbuffered, unechoed input.

        Raises ``BackendError`` if the backend cannot start.
        """

    @abstractmethod
    def restore_input(self) -> None:
        """Return the terminal to its original mode.  Safe to call twice."""

    # ── Helpers ─────────────────────────────────────────────────────────

    def write_at(self, col: int, row: int, text: str) -> None:
        self.move_cursor(col, row)
        self.write(text)

    def __enter__(self) -> TerminalBackend:
        self.enable_raw_input()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.restore_input()
