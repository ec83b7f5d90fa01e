"""
In-memory score store.

Holds an ordered, bounded sequence of integer scores and computes the
summary statistics shown on the Statistics screen.  Nothing is persisted;
the store lives exactly as long as the application object that owns it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from scorecalc.config import MAX_SCORE, MAX_SCORES, MIN_SCORE, PASS_MARK
from scorecalc.errors import (
    CapacityExceededError,
    EmptyStoreError,
    OutOfRangeError,
)

logger = logging.getLogger(__name__)


# ── Statistics ──────────────────────────────────────────────────────────────


@dataclass(frozen=True)
class ScoreStats:
    """Summary of every score in a non-empty store."""

    count: int
    total: int
    maximum: int
    minimum: int
    pass_count: int

    @property
    def average(self) -> float:
        return self.total / self.count

    @property
    def pass_rate(self) -> float:
        """Percentage of scores at or above the pass mark."""
        return 100.0 * self.pass_count / self.count


# ── Score Store ─────────────────────────────────────────────────────────────


@dataclass
class ScoreStore:
    """Ordered, fixed-capacity sequence of scores in [0, 100].

    A failed ``add`` never changes the store.  The capacity check comes
    first, so a full store reports ``CapacityExceededError`` even for an
    out-of-range value.
    """

    capacity: int = MAX_SCORES
    _scores: list[int] = field(default_factory=list, repr=False)

    def __post_init__(self) -> None:
        if self.capacity < 1:
            raise ValueError(f"capacity must be positive, got {self.capacity}")

    # ── Queries ─────────────────────────────────────────────────────────

    @property
    def count(self) -> int:
        return len(self._scores)

    @property
    def is_empty(self) -> bool:
        return not self._scores

    @property
    def is_full(self) -> bool:
        return len(self._scores) >= self.capacity

    @property
    def scores(self) -> tuple[int, ...]:
        """Snapshot of the stored scores in insertion order."""
        return tuple(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __iter__(self) -> Iterator[int]:
        return iter(tuple(self._scores))

    def stats(self) -> ScoreStats:
        """Return the summary statistics.

        Raises ``EmptyStoreError`` when there is nothing to summarise.
        """
        if not self._scores:
            raise EmptyStoreError()
        return ScoreStats(
            count=len(self._scores),
            total=sum(self._scores),
            maximum=max(self._scores),
            minimum=min(self._scores),
            pass_count=sum(1 for v in self._scores if v >= PASS_MARK),
        )

    # ── Mutations ───────────────────────────────────────────────────────

    def add(self, value: int) -> None:
        """Append *value* to the store."""
        if self.is_full:
            raise CapacityExceededError(self.capacity)
        if not MIN_SCORE <= value <= MAX_SCORE:
            raise OutOfRangeError(value, MIN_SCORE, MAX_SCORE)
        self._scores.append(value)
        logger.debug("Added score %d (%d/%d)", value, self.count, self.capacity)

    def clear(self) -> None:
        """Remove every score.  Cannot be undone."""
        removed = len(self._scores)
        self._scores.clear()
        logger.info("Cleared %d scores", removed)
