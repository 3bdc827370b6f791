"""Shared constants for terminal drawing."""

# ANSI escape sequences
ESC = "\x1b"
CSI = f"{ESC}["
RESET = f"{CSI}0m"

ALT_SCREEN_ON = f"{CSI}?1049h"
ALT_SCREEN_OFF = f"{CSI}?1049l"
CURSOR_HIDE = f"{CSI}?25l"
CURSOR_SHOW = f"{CSI}?25h"
CLEAR_SCREEN = f"{CSI}2J{CSI}H"
# Also drops the scrollback so nothing from before the dashboard peeks through
HARD_CLEAR_SCREEN = f"{CSI}H{CSI}2J{CSI}3J"

# Single-line box drawing characters (CP437 code in comments)
BOX = {
    "horizontal": "─",    # 196/0xC4
    "vertical": "│",      # 179/0xB3
    "top_left": "┌",      # 218/0xDA
    "top_right": "┐",     # 191/0xBF
    "bottom_left": "└",   # 192/0xC0
    "bottom_right": "┘",  # 217/0xD9
    "tee_right": "├",     # 195/0xC3 - vertical line branching right
    "tee_left": "┤",      # 180/0xB4 - vertical line branching left
    "tee_down": "┬",      # 194/0xC2
    "tee_up": "┴",        # 193/0xC1
    "cross": "┼",         # 197/0xC5
}

# Border styling (SGR)
BORDER_STYLE = f"{CSI}90m"
TITLE_STYLE = f"{CSI}1;37m"

# Fallbacks and limits
DEFAULT_ROWS = 24
DEFAULT_COLS = 80
DEBUG_LOG_MAX_LINES = 10_000
ISSUE_URL = "https://github.com/paneboard/paneboard/issues"
