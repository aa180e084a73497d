import os

import pytest

from kilo.models import EditorConfig
from kilo.rows import append_row


@pytest.fixture
def make_cfg():
    """Build an EditorConfig holding the given lines, with a clean dirty flag."""

    def _make(lines=(), screenrows=10, screencols=20):
        cfg = EditorConfig(screenrows=screenrows, screencols=screencols)
        for line in lines:
            append_row(cfg, line.encode("latin-1") if isinstance(line, str) else line)
        cfg.dirty = 0
        return cfg

    return _make


@pytest.fixture
def key_pipe():
    """Return a writer that feeds bytes into a pipe and hands back its read end.

    The write end is closed right away, so once the bytes are consumed every
    further read reports end-of-file, which the decoder treats like a poll
    timeout.
    """
    fds = []

    def _feed(data):
        r, w = os.pipe()
        fds.append(r)
        os.write(w, data)
        os.close(w)
        return r

    yield _feed
    for fd in fds:
        os.close(fd)
