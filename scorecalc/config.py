"""
Configuration constants for the Score Calculator.

Screen coordinates are 1-based (column, row), matching the classic
console ``locate(x, y)`` convention used by the terminal backends.
"""

from scorecalc.colors import Color

# ---------------------------------------------------------------------------
# Score store
# ---------------------------------------------------------------------------
MAX_SCORES: int = 200
MIN_SCORE: int = 0
MAX_SCORE: int = 100
PASS_MARK: int = 60        # scores >= PASS_MARK count as a pass
FINISH_SENTINEL: int = -1  # typed on the Add screen to return to the menu

# ---------------------------------------------------------------------------
# Screen geometry
# ---------------------------------------------------------------------------
SCREEN_COLS: int = 80
SCREEN_ROWS: int = 25

LEFT_MARGIN: int = 3
TITLE_ROW: int = 2
SUBTITLE_ROW: int = 3
DATA_ROW: int = 4
CONTENT_ROW: int = 7        # first row below the header block

MENU_COL: int = 5
MENU_ITEM_WIDTH: int = 20
CONTROLS_ROW: int = 16

INPUT_COL: int = 16         # cursor column for the Add prompt
INPUT_WIDTH: int = 30
TABLE_FIRST_ROW: int = 9
TABLE_LAST_ROW: int = 19    # last row a table entry may occupy
MESSAGE_ROW: int = 20
MESSAGE_WIDTH: int = 70
PAUSE_ROW: int = 22

# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------
TITLE: str = "=== Score Calculator (Text UI) ==="
DEFAULT_SUBTITLE: str = "Use Up/Down to move, Enter to select, Esc to exit."
CONTROLS_HINT: str = "Controls: Up/Down = move | Enter = select | Esc = exit"
PAUSE_PROMPT: str = "Press any key to go back..."

# ---------------------------------------------------------------------------
# Colours
# ---------------------------------------------------------------------------
COLOR_TITLE: Color = Color.LIGHTCYAN
COLOR_TEXT: Color = Color.WHITE
COLOR_DIM: Color = Color.DARKGRAY
COLOR_OK: Color = Color.LIGHTGREEN
COLOR_ERROR: Color = Color.LIGHTRED
COLOR_NOTICE: Color = Color.YELLOW
COLOR_BACKGROUND: Color = Color.BLACK
COLOR_SELECTED_FG: Color = Color.BLACK
COLOR_SELECTED_BG: Color = Color.LIGHTGREEN

# ---------------------------------------------------------------------------
# Pygame console window
# ---------------------------------------------------------------------------
CELL_WIDTH: int = 8         # pixels per character cell at scale 1
CELL_HEIGHT: int = 16
DEFAULT_SCALE: int = 1
MIN_SCALE: int = 1
MAX_SCALE: int = 4
WINDOW_CAPTION: str = "Score Calculator"
UPDATE_RATE: int = 60       # Hz, event polling rate while blocked on input
