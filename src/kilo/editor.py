from __future__ import annotations

import contextlib
import logging
import os
import signal
import sys

from .constants import (
    ARROW_RIGHT,
    BACKSPACE,
    CTRL_H,
    CTRL_L,
    CTRL_Q,
    CTRL_S,
    DEL_KEY,
    ENTER,
    ESC,
    KILO_BAR_ROWS,
    KILO_QUIT_TIMES,
)
from .fileio import open_file, save
from .models import EditorConfig
from .rows import (
    del_row,
    insert_row,
    row_append_bytes,
    row_del_char,
    row_insert_char,
    update_row,
)
from .settings import Settings, configure_logging
from .terminal import RawMode, get_window_size, read_key
from .ui import clear_screen, refresh_screen, set_status_message
from .viewport import NAVIGATION_KEYS, move_cursor, navigate


logger = logging.getLogger(__name__)

HELP_MESSAGE = "HELP: Ctrl-S = save | Ctrl-Q = quit"


class Editor:
    def __init__(self, stdin_fd: int, stdout_fd: int, settings: Settings | None = None) -> None:
        settings = settings if settings is not None else Settings()
        self.cfg = EditorConfig(tab_stop=settings.tab_stop)
        self.quit_times = KILO_QUIT_TIMES
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd

    def update_window_size(self) -> None:
        try:
            rows, cols = get_window_size(self.stdin_fd, self.stdout_fd)
        except OSError as exc:
            raise OSError(exc.errno, "get_window_size") from exc
        self.cfg.screenrows = max(1, rows - KILO_BAR_ROWS)
        self.cfg.screencols = max(1, cols)
        logger.debug("window size %dx%d", rows, cols)

    def handle_sigwinch(self, _signum: int, _frame) -> None:
        self.update_window_size()
        self.refresh_screen()

    def set_status_message(self, fmt: str, *args: object) -> None:
        set_status_message(self.cfg, fmt, *args)

    def open_file(self, filename: str) -> None:
        open_file(self.cfg, filename)

    def save(self) -> int:
        return save(self.cfg)

    def refresh_screen(self) -> None:
        refresh_screen(self.cfg, self.stdout_fd)

    def insert_char(self, c: int) -> None:
        cfg = self.cfg
        if cfg.cy == cfg.numrows:
            insert_row(cfg, cfg.numrows, b"")
        row_insert_char(cfg, cfg.rows[cfg.cy], cfg.cx, c)
        cfg.cx += 1

    def insert_newline(self) -> None:
        cfg = self.cfg
        if cfg.cx == 0:
            insert_row(cfg, cfg.cy, b"")
        else:
            row = cfg.rows[cfg.cy]
            insert_row(cfg, cfg.cy + 1, row.chars[cfg.cx :])
            row = cfg.rows[cfg.cy]
            del row.chars[cfg.cx :]
            update_row(cfg, row)
        cfg.cy += 1
        cfg.cx = 0

    def del_char(self) -> None:
        cfg = self.cfg
        if cfg.cy == cfg.numrows:
            return
        if cfg.cx == 0 and cfg.cy == 0:
            return

        row = cfg.rows[cfg.cy]
        if cfg.cx > 0:
            row_del_char(cfg, row, cfg.cx - 1)
            cfg.cx -= 1
        else:
            prev = cfg.rows[cfg.cy - 1]
            cfg.cx = prev.size
            row_append_bytes(cfg, prev, row.chars)
            del_row(cfg, cfg.cy)
            cfg.cy -= 1

    def del_forward(self) -> None:
        cfg = self.cfg
        row = cfg.current_row()
        if row is None or (cfg.cx == row.size and cfg.cy + 1 >= cfg.numrows):
            return
        move_cursor(cfg, ARROW_RIGHT)
        self.del_char()

    def process_keypress(self) -> bool:
        """Read and dispatch one key. Returns True when the editor should quit."""
        c = read_key(self.stdin_fd)
        if c == ENTER:
            self.insert_newline()
        elif c == CTRL_Q:
            if self.cfg.dirty and self.quit_times > 0:
                self.set_status_message(
                    "WARNING!!! File has unsaved changes. Press Ctrl-Q %d more times to quit.",
                    self.quit_times,
                )
                self.quit_times -= 1
                return False
            return True
        elif c == CTRL_S:
            self.save()
        elif c in (BACKSPACE, CTRL_H):
            self.del_char()
        elif c == DEL_KEY:
            self.del_forward()
        elif c in NAVIGATION_KEYS:
            navigate(self.cfg, c)
        elif c in (CTRL_L, ESC):
            pass
        else:
            self.insert_char(c)

        self.quit_times = KILO_QUIT_TIMES
        return False


def _terminate(signum: int, _frame) -> None:
    raise SystemExit(128 + signum)


def _report_fatal(exc: OSError) -> None:
    logger.error("fatal: %s", exc)
    reason = os.strerror(exc.errno) if exc.errno else str(exc)
    print(f"kilo: {exc.strerror}: {reason}", file=sys.stderr)


def run(argv: list[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print("Usage: kilo <filename>", file=sys.stderr)
        return 1

    settings = Settings.from_env()
    try:
        configure_logging(settings)
    except OSError as exc:
        _report_fatal(exc)
        return 1

    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    editor = Editor(stdin_fd, stdout_fd, settings)
    logger.info("session start: %s", args[0])
    previous_handlers: dict[int, object] = {}
    try:
        with RawMode(stdin_fd):
            editor.update_window_size()
            previous_handlers[signal.SIGWINCH] = signal.signal(signal.SIGWINCH, editor.handle_sigwinch)
            previous_handlers[signal.SIGTERM] = signal.signal(signal.SIGTERM, _terminate)
            previous_handlers[signal.SIGHUP] = signal.signal(signal.SIGHUP, _terminate)
            editor.open_file(args[0])
            editor.set_status_message(HELP_MESSAGE)
            while True:
                editor.refresh_screen()
                if editor.process_keypress():
                    break
            clear_screen(stdout_fd)
    except OSError as exc:
        with contextlib.suppress(OSError):
            clear_screen(stdout_fd)
        _report_fatal(exc)
        return 1
    finally:
        for signum, handler in previous_handlers.items():
            signal.signal(signum, handler)
    logger.info("session end")
    return 0
