from __future__ import annotations

import errno
import logging
import os

from .models import EditorConfig
from .rows import append_row, rows_to_bytes
from .ui import set_status_message


logger = logging.getLogger(__name__)


def open_file(cfg: EditorConfig, filename: str) -> None:
    cfg.filename = filename
    try:
        with open(filename, "rb") as f:
            for line in f:
                while line and line[-1] in (0x0A, 0x0D):
                    line = line[:-1]
                append_row(cfg, line)
    except OSError as exc:
        raise OSError(exc.errno, "fopen") from exc
    cfg.dirty = 0
    logger.info("loaded %s (%d rows)", filename, cfg.numrows)


def save(cfg: EditorConfig) -> int:
    if not cfg.filename:
        set_status_message(cfg, "Can't save! No filename.")
        return 1

    data = rows_to_bytes(cfg)
    fd = -1
    try:
        fd = os.open(cfg.filename, os.O_RDWR | os.O_CREAT, 0o644)
        os.ftruncate(fd, len(data))
        written = 0
        while written < len(data):
            n = os.write(fd, data[written:])
            if n <= 0:
                raise OSError(errno.EIO, "short write")
            written += n
    except OSError as exc:
        logger.warning("saving %s failed: %s", cfg.filename, exc)
        set_status_message(cfg, "Can't save! I/O error: %s", os.strerror(exc.errno or errno.EIO))
        return 1
    finally:
        if fd != -1:
            os.close(fd)

    cfg.dirty = 0
    set_status_message(cfg, "%d bytes written to disk", len(data))
    logger.info("saved %s (%d bytes)", cfg.filename, len(data))
    return 0
