from __future__ import annotations

KILO_VERSION = "0.0.1"
KILO_TAB_STOP = 8
KILO_QUIT_TIMES = 3
KILO_STATUS_TTL = 5
KILO_STATUS_MAX = 79

# Rows reserved below the text area for the status and message bars.
KILO_BAR_ROWS = 2

# Key actions.
ENTER = 13
ESC = 27
BACKSPACE = 127

ARROW_LEFT = 1000
ARROW_RIGHT = 1001
ARROW_UP = 1002
ARROW_DOWN = 1003
DEL_KEY = 1004
HOME_KEY = 1005
END_KEY = 1006
PAGE_UP = 1007
PAGE_DOWN = 1008

# Escape sequences, as bytes since frames are assembled as bytes.
ANSI_CLEAR_SCREEN = b"\x1b[2J"
ANSI_HIDE_CURSOR = b"\x1b[?25l"
ANSI_SHOW_CURSOR = b"\x1b[?25h"
ANSI_CURSOR_HOME = b"\x1b[H"
ANSI_CLEAR_LINE = b"\x1b[K"
ANSI_INVERT_ON = b"\x1b[7m"
ANSI_INVERT_OFF = b"\x1b[m"
ANSI_CURSOR_QUERY = b"\x1b[6n"
ANSI_CURSOR_FAR_CORNER = b"\x1b[999C\x1b[999B"
CRLF = b"\r\n"

CSI_SIMPLE_MAP = {
    ord("A"): ARROW_UP,
    ord("B"): ARROW_DOWN,
    ord("C"): ARROW_RIGHT,
    ord("D"): ARROW_LEFT,
    ord("H"): HOME_KEY,
    ord("F"): END_KEY,
}
CSI_TILDE_MAP = {
    ord("1"): HOME_KEY,
    ord("3"): DEL_KEY,
    ord("4"): END_KEY,
    ord("5"): PAGE_UP,
    ord("6"): PAGE_DOWN,
    ord("7"): HOME_KEY,
    ord("8"): END_KEY,
}
SS3_SIMPLE_MAP = {
    ord("H"): HOME_KEY,
    ord("F"): END_KEY,
}


def ctrl(ch: str) -> int:
    return ord(ch.upper()) & 0x1F


CTRL_H = ctrl("h")
CTRL_L = ctrl("l")
CTRL_Q = ctrl("q")
CTRL_S = ctrl("s")
