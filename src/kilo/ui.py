from __future__ import annotations

import time

from .constants import (
    ANSI_CLEAR_LINE,
    ANSI_CLEAR_SCREEN,
    ANSI_CURSOR_HOME,
    ANSI_HIDE_CURSOR,
    ANSI_INVERT_OFF,
    ANSI_INVERT_ON,
    ANSI_SHOW_CURSOR,
    CRLF,
    KILO_STATUS_MAX,
    KILO_STATUS_TTL,
    KILO_VERSION,
)
from .models import EditorConfig
from .terminal import write_all
from .viewport import scroll


def _encode(text: str) -> bytes:
    return text.encode("utf-8", errors="replace")


def set_status_message(cfg: EditorConfig, fmt: str, *args: object) -> None:
    msg = fmt % args if args else fmt
    cfg.statusmsg = msg[:KILO_STATUS_MAX]
    cfg.statusmsg_time = time.time()


def draw_welcome(cfg: EditorConfig, ab: list[bytes]) -> None:
    welcome = f"Kilo editor -- version {KILO_VERSION}"
    if len(welcome) > cfg.screencols:
        welcome = welcome[: cfg.screencols]
    padding = (cfg.screencols - len(welcome)) // 2
    if padding:
        ab.append(b"~")
        padding -= 1
    if padding > 0:
        ab.append(b" " * padding)
    ab.append(_encode(welcome))


def draw_rows(cfg: EditorConfig, ab: list[bytes]) -> None:
    for y in range(cfg.screenrows):
        filerow = cfg.rowoff + y
        if filerow >= cfg.numrows:
            if cfg.numrows == 0 and y == cfg.screenrows // 3:
                draw_welcome(cfg, ab)
            else:
                ab.append(b"~")
        else:
            row = cfg.rows[filerow]
            ab.append(row.render[cfg.coloff : cfg.coloff + cfg.screencols])
        ab.append(ANSI_CLEAR_LINE)
        ab.append(CRLF)


def draw_status_bar(cfg: EditorConfig, ab: list[bytes]) -> None:
    ab.append(ANSI_INVERT_ON)
    filename = cfg.filename if cfg.filename else "[No Name]"
    modified = " (modified)" if cfg.dirty else ""
    status = f"{filename:.20} - {cfg.numrows} lines{modified}"
    rstatus = f"{cfg.cy + 1}/{cfg.numrows}"
    if len(status) > cfg.screencols:
        status = status[: cfg.screencols]
    ab.append(_encode(status))
    fill = len(status)
    while fill < cfg.screencols:
        if cfg.screencols - fill == len(rstatus):
            ab.append(_encode(rstatus))
            break
        ab.append(b" ")
        fill += 1
    ab.append(ANSI_INVERT_OFF)
    ab.append(CRLF)


def draw_message_bar(cfg: EditorConfig, ab: list[bytes], now: float) -> None:
    ab.append(ANSI_CLEAR_LINE)
    if cfg.statusmsg and now - cfg.statusmsg_time < KILO_STATUS_TTL:
        ab.append(_encode(cfg.statusmsg[: cfg.screencols]))


def cursor_escape(cfg: EditorConfig) -> bytes:
    return f"\x1b[{cfg.cy - cfg.rowoff + 1};{cfg.rx - cfg.coloff + 1}H".encode()


def compose_frame(cfg: EditorConfig, now: float | None = None) -> bytes:
    """Build one complete frame.

    The viewport offsets must already be current; ``refresh_screen`` runs
    ``scroll`` first.
    """
    if now is None:
        now = time.time()
    ab: list[bytes] = [ANSI_HIDE_CURSOR, ANSI_CURSOR_HOME]
    draw_rows(cfg, ab)
    draw_status_bar(cfg, ab)
    draw_message_bar(cfg, ab, now)
    ab.append(cursor_escape(cfg))
    ab.append(ANSI_SHOW_CURSOR)
    return b"".join(ab)


def refresh_screen(cfg: EditorConfig, fd: int) -> None:
    scroll(cfg)
    write_all(fd, compose_frame(cfg))


def clear_screen(fd: int) -> None:
    write_all(fd, ANSI_CLEAR_SCREEN + ANSI_CURSOR_HOME)
