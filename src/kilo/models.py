from __future__ import annotations

from dataclasses import dataclass, field

from .constants import KILO_TAB_STOP


@dataclass(slots=True)
class Row:
    idx: int
    chars: bytearray
    render: bytes = b""

    @property
    def size(self) -> int:
        return len(self.chars)

    @property
    def rsize(self) -> int:
        return len(self.render)


@dataclass(slots=True)
class EditorConfig:
    cx: int = 0
    cy: int = 0
    rx: int = 0
    rowoff: int = 0
    coloff: int = 0
    screenrows: int = 0
    screencols: int = 0
    tab_stop: int = KILO_TAB_STOP
    rows: list[Row] = field(default_factory=list)
    dirty: int = 0
    filename: str | None = None
    statusmsg: str = ""
    statusmsg_time: float = 0.0

    @property
    def numrows(self) -> int:
        return len(self.rows)

    def current_row(self) -> Row | None:
        if self.cy < self.numrows:
            return self.rows[self.cy]
        return None
