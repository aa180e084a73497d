import errno

import pytest

from kilo.fileio import open_file, save
from kilo.models import EditorConfig


def test_open_strips_line_terminators(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"abc\r\n\tx\n\nlast")
    cfg = EditorConfig()
    open_file(cfg, str(path))
    assert [bytes(row.chars) for row in cfg.rows] == [b"abc", b"\tx", b"", b"last"]
    assert cfg.rows[1].render == b"        x"
    assert cfg.filename == str(path)
    assert cfg.dirty == 0


def test_open_keeps_non_utf8_bytes(tmp_path):
    path = tmp_path / "latin.txt"
    path.write_bytes(b"caf\xe9\n")
    cfg = EditorConfig()
    open_file(cfg, str(path))
    assert cfg.rows[0].chars == bytearray(b"caf\xe9")


def test_open_missing_file_is_fatal(tmp_path):
    cfg = EditorConfig()
    with pytest.raises(OSError) as excinfo:
        open_file(cfg, str(tmp_path / "missing.txt"))
    assert excinfo.value.errno == errno.ENOENT
    assert excinfo.value.strerror == "fopen"


def test_save_round_trips_and_truncates(tmp_path):
    path = tmp_path / "doc.txt"
    path.write_bytes(b"one\ntwo\nthree\n")
    cfg = EditorConfig()
    open_file(cfg, str(path))
    del cfg.rows[1:]
    assert save(cfg) == 0
    assert path.read_bytes() == b"one\n"
    assert cfg.statusmsg == "4 bytes written to disk"


def test_save_without_filename(tmp_path):
    cfg = EditorConfig()
    assert save(cfg) == 1
    assert cfg.statusmsg == "Can't save! No filename."


def test_save_failure_reports_status(tmp_path):
    cfg = EditorConfig(filename=str(tmp_path / "no-such-dir" / "doc.txt"))
    cfg.dirty = 1
    assert save(cfg) == 1
    assert cfg.statusmsg.startswith("Can't save! I/O error: ")
    assert cfg.dirty == 1
