from __future__ import annotations

from .constants import KILO_TAB_STOP
from .models import EditorConfig, Row


TAB_BYTE = 0x09


def render_chars(chars: bytes | bytearray, tab_stop: int = KILO_TAB_STOP) -> bytes:
    out = bytearray()
    for c in chars:
        if c == TAB_BYTE:
            out.append(0x20)
            while len(out) % tab_stop != 0:
                out.append(0x20)
        else:
            out.append(c)
    return bytes(out)


def row_cx_to_rx(row: Row, cx: int, tab_stop: int = KILO_TAB_STOP) -> int:
    rx = 0
    for c in row.chars[:cx]:
        if c == TAB_BYTE:
            rx += (tab_stop - 1) - (rx % tab_stop)
        rx += 1
    return rx


def update_row(cfg: EditorConfig, row: Row) -> None:
    row.render = render_chars(row.chars, cfg.tab_stop)


def _renumber(cfg: EditorConfig, start: int) -> None:
    for j in range(start, cfg.numrows):
        cfg.rows[j].idx = j


def insert_row(cfg: EditorConfig, at: int, data: bytes | bytearray) -> None:
    if at < 0 or at > cfg.numrows:
        return
    row = Row(idx=at, chars=bytearray(data))
    cfg.rows.insert(at, row)
    _renumber(cfg, at + 1)
    update_row(cfg, row)
    cfg.dirty += 1


def append_row(cfg: EditorConfig, data: bytes | bytearray) -> None:
    insert_row(cfg, cfg.numrows, data)


def del_row(cfg: EditorConfig, at: int) -> None:
    if at < 0 or at >= cfg.numrows:
        return
    del cfg.rows[at]
    _renumber(cfg, at)
    cfg.dirty += 1


def row_insert_char(cfg: EditorConfig, row: Row, at: int, c: int) -> None:
    """Insert byte ``c`` before column ``at``.

    Columns past the end of the row are clamped to the end, so insertion
    never fails.
    """
    if at < 0 or at > row.size:
        at = row.size
    row.chars.insert(at, c & 0xFF)
    update_row(cfg, row)
    cfg.dirty += 1


def row_append_bytes(cfg: EditorConfig, row: Row, data: bytes | bytearray) -> None:
    row.chars.extend(data)
    update_row(cfg, row)
    cfg.dirty += 1


def row_del_char(cfg: EditorConfig, row: Row, at: int) -> None:
    if at < 0 or at >= row.size:
        return
    del row.chars[at]
    update_row(cfg, row)
    cfg.dirty += 1


def rows_to_bytes(cfg: EditorConfig) -> bytes:
    return b"".join(bytes(row.chars) + b"\n" for row in cfg.rows)
