"""
Tests for the in-memory score store and its statistics.
"""

import pytest

from scorecalc.config import MAX_SCORES
from scorecalc.errors import (
    CapacityExceededError,
    EmptyStoreError,
    OutOfRangeError,
    ScoreError,
)
from scorecalc.models.score_store import ScoreStats, ScoreStore


class TestAdd:
    def test_starts_empty(self):
        store = ScoreStore()
        assert store.count == 0
        assert store.is_empty
        assert store.capacity == MAX_SCORES == 200

    def test_values_kept_in_insertion_order(self):
        store = ScoreStore()
        values = [88, 0, 100, 42, 60]
        for v in values:
            store.add(v)
        assert store.count == len(values)
        assert list(store) == values
        assert store.scores == tuple(values)

    def test_iteration_is_restartable(self):
        store = ScoreStore()
        store.add(1)
        store.add(2)
        assert list(store) == list(store) == [1, 2]

    def test_bounds_are_inclusive(self):
        store = ScoreStore()
        store.add(0)
        store.add(100)
        assert store.scores == (0, 100)

    @pytest.mark.parametrize("value", [-1, 101, -50, 1000])
    def test_out_of_range_rejected_without_mutation(self, value):
        store = ScoreStore()
        store.add(50)
        with pytest.raises(OutOfRangeError) as info:
            store.add(value)
        assert info.value.value == value
        assert store.scores == (50,)

    def test_fill_to_capacity(self):
        store = ScoreStore()
        for i in range(MAX_SCORES):
            store.add(i % 101)
        assert store.count == MAX_SCORES
        assert store.is_full

    def test_add_beyond_capacity_rejected(self):
        store = ScoreStore(capacity=3)
        for v in (10, 20, 30):
            store.add(v)
        with pytest.raises(CapacityExceededError):
            store.add(40)
        assert store.scores == (10, 20, 30)

    def test_capacity_checked_before_range(self):
        store = ScoreStore(capacity=1)
        store.add(10)
        with pytest.raises(CapacityExceededError):
            store.add(500)

    def test_invalid_capacity(self):
        with pytest.raises(ValueError):
            ScoreStore(capacity=0)

    def test_errors_share_a_base(self):
        assert issubclass(OutOfRangeError, ScoreError)
        assert issubclass(CapacityExceededError, ScoreError)
        assert issubclass(EmptyStoreError, ScoreError)


class TestClear:
    def test_clear_empties(self):
        store = ScoreStore()
        for v in (1, 2, 3):
            store.add(v)
        store.clear()
        assert store.count == 0
        assert list(store) == []

    def test_clear_on_empty_store(self):
        store = ScoreStore()
        store.clear()
        assert store.count == 0

    def test_full_store_accepts_again_after_clear(self):
        store = ScoreStore(capacity=2)
        store.add(1)
        store.add(2)
        store.clear()
        store.add(3)
        assert store.scores == (3,)


class TestStats:
    def test_reference_values(self):
        store = ScoreStore()
        for v in (70, 50, 90, 60):
            store.add(v)
        stats = store.stats()
        assert stats.count == 4
        assert stats.total == 270
        assert stats.average == pytest.approx(67.5)
        assert f"{stats.average:.2f}" == "67.50"
        assert stats.maximum == 90
        assert stats.minimum == 50
        assert stats.pass_count == 3
        assert stats.pass_rate == pytest.approx(75.0)

    def test_exactly_sixty_passes(self):
        store = ScoreStore()
        store.add(60)
        store.add(59)
        stats = store.stats()
        assert stats.pass_count == 1
        assert stats.pass_rate == pytest.approx(50.0)

    def test_average_uses_real_division(self):
        store = ScoreStore()
        for v in (1, 2):
            store.add(v)
        assert store.stats().average == pytest.approx(1.5)

    def test_single_score(self):
        store = ScoreStore()
        store.add(42)
        stats = store.stats()
        assert stats.maximum == stats.minimum == 42
        assert stats.pass_rate == 0.0

    def test_empty_store_raises(self):
        with pytest.raises(EmptyStoreError):
            ScoreStore().stats()

    def test_stats_is_a_snapshot(self):
        store = ScoreStore()
        store.add(80)
        stats = store.stats()
        store.add(0)
        assert stats == ScoreStats(count=1, total=80, maximum=80,
                                   minimum=80, pass_count=1)
