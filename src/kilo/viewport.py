from __future__ import annotations

from .constants import (
    ARROW_DOWN,
    ARROW_LEFT,
    ARROW_RIGHT,
    ARROW_UP,
    END_KEY,
    HOME_KEY,
    PAGE_DOWN,
    PAGE_UP,
)
from .models import EditorConfig
from .rows import row_cx_to_rx


def scroll(cfg: EditorConfig) -> None:
    """Recompute ``rx`` and slide the window so the cursor is on screen."""
    row = cfg.current_row()
    cfg.rx = row_cx_to_rx(row, cfg.cx, cfg.tab_stop) if row is not None else 0

    if cfg.cy < cfg.rowoff:
        cfg.rowoff = cfg.cy
    if cfg.cy >= cfg.rowoff + cfg.screenrows:
        cfg.rowoff = cfg.cy - cfg.screenrows + 1
    if cfg.rx < cfg.coloff:
        cfg.coloff = cfg.rx
    if cfg.rx >= cfg.coloff + cfg.screencols:
        cfg.coloff = cfg.rx - cfg.screencols + 1


def row_len(cfg: EditorConfig) -> int:
    row = cfg.current_row()
    return row.size if row is not None else 0


def move_cursor(cfg: EditorConfig, key: int) -> None:
    if key == ARROW_LEFT:
        if cfg.cx > 0:
            cfg.cx -= 1
        elif cfg.cy > 0:
            cfg.cy -= 1
            cfg.cx = cfg.rows[cfg.cy].size
    elif key == ARROW_RIGHT:
        row = cfg.current_row()
        if row is not None and cfg.cx < row.size:
            cfg.cx += 1
        elif row is not None and cfg.cy + 1 < cfg.numrows:
            cfg.cy += 1
            cfg.cx = 0
    elif key == ARROW_UP:
        if cfg.cy > 0:
            cfg.cy -= 1
    elif key == ARROW_DOWN:
        if cfg.cy < cfg.numrows:
            cfg.cy += 1

    rowlen = row_len(cfg)
    if cfg.cx > rowlen:
        cfg.cx = rowlen


def move_home(cfg: EditorConfig) -> None:
    cfg.cx = 0


def move_end(cfg: EditorConfig) -> None:
    cfg.cx = row_len(cfg)


def move_page(cfg: EditorConfig, key: int) -> None:
    # Jump to the window edge, then step a full screen one line at a time.
    if key == PAGE_UP:
        cfg.cy = cfg.rowoff
    elif key == PAGE_DOWN:
        cfg.cy = min(cfg.rowoff + cfg.screenrows - 1, cfg.numrows)

    for _ in range(cfg.screenrows):
        move_cursor(cfg, ARROW_UP if key == PAGE_UP else ARROW_DOWN)


NAVIGATION_KEYS = frozenset(
    (ARROW_UP, ARROW_DOWN, ARROW_LEFT, ARROW_RIGHT, HOME_KEY, END_KEY, PAGE_UP, PAGE_DOWN)
)


def navigate(cfg: EditorConfig, key: int) -> None:
    if key == HOME_KEY:
        move_home(cfg)
    elif key == END_KEY:
        move_end(cfg)
    elif key in (PAGE_UP, PAGE_DOWN):
        move_page(cfg, key)
    else:
        move_cursor(cfg, key)
