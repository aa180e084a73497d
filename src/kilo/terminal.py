from __future__ import annotations

import errno
import fcntl
import logging
import os
import re
import struct
import termios
from contextlib import AbstractContextManager

from .constants import (
    ANSI_CURSOR_FAR_CORNER,
    ANSI_CURSOR_QUERY,
    CSI_SIMPLE_MAP,
    CSI_TILDE_MAP,
    ESC,
    SS3_SIMPLE_MAP,
)


logger = logging.getLogger(__name__)

CURSOR_REPORT_RE = re.compile(rb"\x1b\[(\d+);(\d+)R")


def _read_byte_once(fd: int) -> int | None:
    """Read one byte, or return None when the poll interval expires."""
    try:
        data = os.read(fd, 1)
    except (BlockingIOError, InterruptedError):
        return None
    except OSError as exc:
        raise OSError(exc.errno, "read") from exc
    if not data:
        return None
    return data[0]


def _read_byte_blocking(fd: int) -> int:
    while True:
        c = _read_byte_once(fd)
        if c is not None:
            return c


def read_key(fd: int) -> int:
    c = _read_byte_blocking(fd)
    if c != ESC:
        return c

    seq0 = _read_byte_once(fd)
    if seq0 is None:
        return ESC
    seq1 = _read_byte_once(fd)
    if seq1 is None:
        return ESC

    if seq0 == ord("["):
        if ord("0") <= seq1 <= ord("9"):
            seq2 = _read_byte_once(fd)
            if seq2 is None or seq2 != ord("~"):
                return ESC
            return CSI_TILDE_MAP.get(seq1, ESC)
        return CSI_SIMPLE_MAP.get(seq1, ESC)
    if seq0 == ord("O"):
        return SS3_SIMPLE_MAP.get(seq1, ESC)
    return ESC


def write_all(fd: int, data: bytes, operation: str = "write") -> None:
    view = memoryview(data)
    while view:
        try:
            n = os.write(fd, view)
        except InterruptedError:
            continue
        except OSError as exc:
            raise OSError(exc.errno, operation) from exc
        if n <= 0:
            raise OSError(errno.EIO, operation)
        view = view[n:]


def get_cursor_position(ifd: int, ofd: int) -> tuple[int, int]:
    write_all(ofd, ANSI_CURSOR_QUERY, "get_cursor_position")

    buf = bytearray()
    while len(buf) < 31:
        c = _read_byte_once(ifd)
        if c is None:
            break
        buf.append(c)
        if c == ord("R"):
            break

    match = CURSOR_REPORT_RE.match(bytes(buf))
    if not match:
        raise OSError(errno.EIO, "get_cursor_position")
    return int(match.group(1)), int(match.group(2))


def get_window_size(ifd: int, ofd: int) -> tuple[int, int]:
    try:
        packed = fcntl.ioctl(ofd, termios.TIOCGWINSZ, struct.pack("HHHH", 0, 0, 0, 0))
        rows, cols, _, _ = struct.unpack("HHHH", packed)
        if cols:
            return rows, cols
    except OSError:
        logger.debug("TIOCGWINSZ failed, probing with cursor report")

    orig_row, orig_col = get_cursor_position(ifd, ofd)
    write_all(ofd, ANSI_CURSOR_FAR_CORNER, "get_window_size")
    rows, cols = get_cursor_position(ifd, ofd)
    write_all(ofd, f"\x1b[{orig_row};{orig_col}H".encode(), "get_window_size")
    return rows, cols


def _tcgetattr(fd: int) -> list:
    try:
        return termios.tcgetattr(fd)
    except termios.error as exc:
        raise OSError(exc.args[0], "tcgetattr") from exc


def _tcsetattr(fd: int, attrs: list) -> None:
    try:
        termios.tcsetattr(fd, termios.TCSAFLUSH, attrs)
    except termios.error as exc:
        raise OSError(exc.args[0], "tcsetattr") from exc


class RawMode(AbstractContextManager["RawMode"]):
    """Put a terminal in raw mode for the duration of a ``with`` block.

    Reads return after at most a tenth of a second even when no byte is
    available. The original attributes are restored when the block exits,
    whether it returns normally or raises.
    """

    def __init__(self, fd: int) -> None:
        self.fd = fd
        self._orig: list | None = None

    def __enter__(self) -> "RawMode":
        if not os.isatty(self.fd):
            raise OSError(errno.ENOTTY, "tcgetattr")

        self._orig = _tcgetattr(self.fd)
        raw = _tcgetattr(self.fd)
        raw[0] &= ~(termios.BRKINT | termios.ICRNL | termios.INPCK | termios.ISTRIP | termios.IXON)
        raw[1] &= ~termios.OPOST
        raw[2] |= termios.CS8
        raw[3] &= ~(termios.ECHO | termios.ICANON | termios.IEXTEN | termios.ISIG)
        raw[6][termios.VMIN] = 0
        raw[6][termios.VTIME] = 1
        _tcsetattr(self.fd, raw)
        logger.debug("raw mode enabled on fd %d", self.fd)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        if self._orig is not None:
            orig, self._orig = self._orig, None
            _tcsetattr(self.fd, orig)
            logger.debug("terminal attributes restored on fd %d", self.fd)
