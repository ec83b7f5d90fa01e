"""
Main entry point for the Score Calculator.

Parses the command line, sets up logging, starts the selected terminal
backend and runs the menu loop.  The terminal is restored on every exit
path, including Ctrl+C and unexpected errors.

Usage:
    python score-calculator.py [OPTIONS]

Options:
    --backend NAME       Terminal backend: curses (default) or pygame
    --scale N            Pygame window scale multiplier (1-4, default: 1)
    --capacity N         Maximum number of stored scores (default: 200)
    --log-file PATH      Write log records to PATH
    --debug              Log at DEBUG level
"""

from __future__ import annotations

import argparse
import logging
import sys
from contextlib import ExitStack
from dataclasses import dataclass, field
from typing import Optional

from scorecalc.app import ScoreCalculator
from scorecalc.config import DEFAULT_SCALE, MAX_SCALE, MAX_SCORES, MIN_SCALE
from scorecalc.errors import BackendError
from scorecalc.logging_config import setup_logging
from scorecalc.models.score_store import ScoreStore
from scorecalc.terminal import BACKENDS, TerminalBackend, create_backend

logger = logging.getLogger("scorecalc.main")


# ── Argument parsing ───────────────────────────────────────────────────────


def _positive_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Score Calculator – keyboard-driven text UI",
    )
    parser.add_argument(
        "--backend", choices=BACKENDS, default="curses",
        help="Terminal backend (default: curses)",
    )
    parser.add_argument(
        "--scale", type=int, default=DEFAULT_SCALE,
        choices=range(MIN_SCALE, MAX_SCALE + 1),
        metavar="N",
        help=f"Pygame window scale ({MIN_SCALE}-{MAX_SCALE}, default: {DEFAULT_SCALE})",
    )
    parser.add_argument(
        "--capacity", type=_positive_int, default=MAX_SCORES,
        metavar="N",
        help=f"Maximum number of stored scores (default: {MAX_SCORES})",
    )
    parser.add_argument(
        "--log-file", default=None, metavar="PATH",
        help="Write log records to PATH",
    )
    parser.add_argument(
        "--debug", action="store_true",
        help="Log at DEBUG level",
    )
    return parser.parse_args(argv)


# ── Application ─────────────────────────────────────────────────────────────


@dataclass
class ScoreCalculatorApp:
    """Top-level application wrapper.

    Owns the terminal backend and the calculator for one run.
    """

    backend_name: str = "curses"
    scale: int = DEFAULT_SCALE
    capacity: int = MAX_SCORES

    # Runtime state (initialized in ``init``)
    backend: Optional[TerminalBackend] = field(default=None, repr=False)
    calculator: Optional[ScoreCalculator] = field(default=None, repr=False)
    running: bool = False
    _raw_mode: ExitStack = field(default_factory=ExitStack, repr=False)

    # ── Initialisation ──────────────────────────────────────────────────

    def init(self) -> bool:
        """Start the backend in raw input mode and build the calculator.

        Returns True on success, False on failure.
        """
        if self.backend is None:
            self.backend = create_backend(self.backend_name, scale=self.scale)
        try:
            self._raw_mode.enter_context(self.backend)
        except BackendError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            logger.error("Backend start-up failed: %s", exc)
            return False

        logger.info("Terminal backend %r started", self.backend.name)
        self.calculator = ScoreCalculator(
            backend=self.backend,
            store=ScoreStore(capacity=self.capacity),
        )
        self.running = True
        return True

    # ── Main loop ───────────────────────────────────────────────────────

    def run(self) -> None:
        """Run the menu loop until the user leaves."""
        if not self.running:
            return

        try:
            self.calculator.run()
        except KeyboardInterrupt:
            logger.info("Interrupted")
        finally:
            self.shutdown()

    # ── Shutdown ────────────────────────────────────────────────────────

    def shutdown(self) -> None:
        """Restore the terminal.  Safe to call more than once."""
        if self.running:
            self.running = False
            self._raw_mode.close()
            logger.info("Terminal backend %r stopped", self.backend.name)


# ── Entry point ─────────────────────────────────────────────────────────────


def main(argv: list[str] | None = None) -> int:
    """Application entry point.  Returns exit code."""
    args = parse_args(argv)
    setup_logging(
        level=logging.DEBUG if args.debug else logging.INFO,
        log_file=args.log_file,
    )

    app = ScoreCalculatorApp(
        backend_name=args.backend,
        scale=args.scale,
        capacity=args.capacity,
    )

    if not app.init():
        return 1

    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
