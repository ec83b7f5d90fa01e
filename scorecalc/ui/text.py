"""
UI text for the Score Calculator.

Message strings and the formatting helpers that turn store data into
the lines painted by the renderer.
"""

from __future__ import annotations

from scorecalc.config import MENU_ITEM_WIDTH, PASS_MARK
from scorecalc.models.score_store import ScoreStats

MSG_ADD_SUBTITLE = "Add scores (0~100). Input -1 to finish."
MSG_ADD_PROMPT = "Enter score: "
MSG_ADD_TIP = "Tips: You can input multiple scores continuously."
MSG_ADDED = "Score added."
MSG_FINISHED = "Finish adding scores."
MSG_INVALID = "Invalid input! Please enter 0~100 or -1 to finish."
MSG_STORAGE_FULL = "Storage is full. Cannot add more."
MSG_NO_SCORES = "No scores yet. Please add scores first."
MSG_CLEAR_WARNING = "This will delete ALL scores."
MSG_CLEAR_CONFIRM = "Press Enter to confirm, Esc to cancel."
MSG_CLEARED = "All scores cleared."
MSG_CANCELED = "Canceled."

TABLE_HEADER = "Index   Score"
STATS_HEADER = "Result Summary"

ABOUT_LINES: tuple[str, ...] = (
    "This is a Text UI Score Calculator written in Python.",
    "",
    "Backends: curses (terminal) or pygame (window).",
    "",
    "Functions:",
    "- Add score (0~100)",
    "- List scores",
    "- Statistics (avg/max/min/pass rate)",
    "- Clear all",
)


def format_data_line(count: int, capacity: int) -> str:
    return f"Data: {count}/{capacity} scores"


def format_menu_item(label: str, selected: bool) -> str:
    if selected:
        return f" > {label:<{MENU_ITEM_WIDTH}} "
    return f"   {label:<{MENU_ITEM_WIDTH}}"


def format_table_row(index: int, score: int) -> str:
    """Format one listing row; *index* is 1-based."""
    return f"{index:5d}   {score:5d}"


def format_truncation(shown: int) -> str:
    return f"(Only first {shown} shown on screen)"


def format_stats(stats: ScoreStats) -> list[str]:
    """Return the Statistics screen body, one string per row."""
    return [
        f"Count     : {stats.count}",
        f"Average   : {stats.average:.2f}",
        f"Maximum   : {stats.maximum}",
        f"Minimum   : {stats.minimum}",
        f"Pass (>={PASS_MARK}): {stats.pass_count}",
        f"Pass Rate : {stats.pass_rate:.1f}%",
    ]
