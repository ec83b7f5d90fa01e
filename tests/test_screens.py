"""
Tests for the sub-screen controllers.

Each controller is driven with scripted keys and lines; a controller
that asks for more input than scripted fails the test, so returning
normally proves the controller terminated where expected.
"""

import pytest

from scorecalc.config import CONTENT_ROW, INPUT_COL, MESSAGE_ROW, PAUSE_ROW
from scorecalc.models.score_store import ScoreStore
from scorecalc.ui import text
from scorecalc.ui.renderer import ScreenRenderer
from scorecalc.ui.screens import (
    CONTROLLERS,
    about,
    add_scores,
    clear_all,
    list_scores,
    show_statistics,
)
from scorecalc.menu import MenuAction
from scorecalc.utils.input_handler import DOWN, ENTER, ESCAPE, UP, KeyEvent

from conftest import FakeBackend, ScriptExhausted

ANY_KEY = KeyEvent.other(ord("x"))


def message_line(backend):
    return backend.row_text(MESSAGE_ROW).strip()


# ── Add ─────────────────────────────────────────────────────────────────────


class TestAddScores:
    def test_adds_until_sentinel(self, backend, store, renderer):
        backend.script(lines=["70", "50", "-1"], keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        assert store.scores == (70, 50)
        assert message_line(backend) == text.MSG_FINISHED
        assert backend.row_text(PAUSE_ROW).strip() == "Press any key to go back..."
        assert not backend.keys

    def test_prompt_stays_at_fixed_coordinate(self, backend, store, renderer):
        backend.script(lines=["1", "oops", "200", "2", "-1"], keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        assert backend.prompts == [(INPUT_COL, CONTENT_ROW)] * 5

    def test_previous_input_erased_before_prompt(self, backend, store, renderer):
        backend.script(lines=["12345", "-1"], keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        field = backend.row_text(CONTENT_ROW)[INPUT_COL - 1:]
        assert field == "-1"

    def test_sentinel_after_invalid_attempts(self, backend, store, renderer):
        backend.script(lines=["abc", "101", "-5", "", "-1"], keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        assert store.count == 0
        assert message_line(backend) == text.MSG_FINISHED

    @pytest.mark.parametrize("raw", ["abc", "101", "-2", "7.5", "9 9"])
    def test_invalid_input_shows_error_and_reprompts(self, raw):
        backend = FakeBackend(lines=[raw])
        store = ScoreStore()
        renderer = ScreenRenderer(backend, store)
        with pytest.raises(ScriptExhausted):
            add_scores(backend, renderer, store)
        assert store.count == 0
        assert message_line(backend) == text.MSG_INVALID
        # Second prompt was attempted at the same spot.
        assert backend.prompts == [(INPUT_COL, CONTENT_ROW)]

    def test_success_message_and_counter(self, backend, store, renderer):
        backend.script(lines=["88"])
        with pytest.raises(ScriptExhausted):
            add_scores(backend, renderer, store)
        assert message_line(backend) == text.MSG_ADDED
        assert "Data: 1/200 scores" in backend.screen_text()

    def test_full_store_stops_before_prompting(self, backend, renderer):
        store = ScoreStore(capacity=2)
        renderer = ScreenRenderer(backend, store)
        store.add(1)
        store.add(2)
        backend.script(keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        assert backend.prompts == []
        assert message_line(backend) == text.MSG_STORAGE_FULL

    def test_store_fills_during_session(self, backend):
        store = ScoreStore(capacity=2)
        renderer = ScreenRenderer(backend, store)
        backend.script(lines=["10", "20", "30"], keys=[ANY_KEY])
        add_scores(backend, renderer, store)
        assert store.scores == (10, 20)
        assert list(backend.lines) == ["30"]
        assert message_line(backend) == text.MSG_STORAGE_FULL


# ── List ────────────────────────────────────────────────────────────────────


class TestListScores:
    def test_empty(self, backend, store, renderer):
        backend.script(keys=[ANY_KEY])
        list_scores(backend, renderer, store)
        assert text.MSG_NO_SCORES in backend.screen_text()
        assert not backend.keys

    def test_lists_scores(self, backend, store, renderer):
        for v in (90, 45):
            store.add(v)
        backend.script(keys=[ANY_KEY])
        list_scores(backend, renderer, store)
        screen = backend.screen_text()
        assert "1      90" in screen
        assert "2      45" in screen

    def test_long_list_truncated(self, backend, store, renderer):
        for v in range(40):
            store.add(v)
        backend.script(keys=[ANY_KEY])
        list_scores(backend, renderer, store)
        assert "(Only first 11 shown on screen)" in backend.screen_text()


# ── Statistics ──────────────────────────────────────────────────────────────


class TestStatistics:
    def test_empty(self, backend, store, renderer):
        backend.script(keys=[ANY_KEY])
        show_statistics(backend, renderer, store)
        assert text.MSG_NO_SCORES in backend.screen_text()

    def test_summary(self, backend, store, renderer):
        for v in (70, 50, 90, 60):
            store.add(v)
        backend.script(keys=[ANY_KEY])
        show_statistics(backend, renderer, store)
        screen = backend.screen_text()
        assert "Average   : 67.50" in screen
        assert "Pass Rate : 75.0%" in screen


# ── Clear ───────────────────────────────────────────────────────────────────


class TestClearAll:
    def test_enter_clears(self, backend, store, renderer):
        store.add(10)
        backend.script(keys=[ENTER, ANY_KEY])
        clear_all(backend, renderer, store)
        assert store.count == 0
        assert message_line(backend) == text.MSG_CLEARED
        assert "Data: 0/200 scores" in backend.screen_text()

    def test_escape_cancels(self, backend, store, renderer):
        store.add(10)
        backend.script(keys=[ESCAPE, ANY_KEY])
        clear_all(backend, renderer, store)
        assert store.scores == (10,)
        assert message_line(backend) == text.MSG_CANCELED

    def test_other_keys_ignored(self, backend, store, renderer):
        store.add(10)
        backend.script(keys=[UP, DOWN, ANY_KEY, KeyEvent.other(ord("y")), ESCAPE, ANY_KEY])
        clear_all(backend, renderer, store)
        assert store.count == 1
        assert backend.clears == 1

    def test_warning_shown(self, backend, store, renderer):
        backend.script(keys=[ESCAPE, ANY_KEY])
        clear_all(backend, renderer, store)
        assert text.MSG_CLEAR_WARNING in backend.screen_text()


# ── About ───────────────────────────────────────────────────────────────────


class TestAbout:
    def test_waits_for_one_key(self, backend, store, renderer):
        backend.script(keys=[ANY_KEY, ENTER])
        about(backend, renderer, store)
        assert list(backend.keys) == [ENTER]
        assert "Functions:" in backend.screen_text()


class TestControllerTable:
    def test_every_action_but_exit_has_a_controller(self):
        assert set(CONTROLLERS) == set(MenuAction) - {MenuAction.EXIT}
