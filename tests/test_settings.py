import errno
import logging

import pytest

from kilo.constants import KILO_TAB_STOP
from kilo.settings import Settings, configure_logging


def test_defaults_from_empty_environment():
    settings = Settings.from_env({})
    assert settings == Settings(log_file=None, log_level="INFO", tab_stop=KILO_TAB_STOP)


def test_environment_overrides():
    settings = Settings.from_env(
        {"KILO_LOG": "/tmp/kilo.log", "KILO_LOG_LEVEL": "debug", "KILO_TAB_STOP": "4"}
    )
    assert settings.log_file == "/tmp/kilo.log"
    assert settings.log_level == "DEBUG"
    assert settings.tab_stop == 4


def test_invalid_tab_stop_falls_back():
    assert Settings.from_env({"KILO_TAB_STOP": "zero"}).tab_stop == KILO_TAB_STOP
    assert Settings.from_env({"KILO_TAB_STOP": "0"}).tab_stop == KILO_TAB_STOP


def test_file_logging(tmp_path):
    log_path = tmp_path / "kilo.log"
    logger = logging.getLogger("kilo")
    before = list(logger.handlers)
    try:
        configure_logging(Settings(log_file=str(log_path), log_level="DEBUG"))
        logging.getLogger("kilo.editor").debug("hello from the editor")
        for handler in logger.handlers:
            handler.flush()
        assert "hello from the editor" in log_path.read_text(encoding="utf-8")
    finally:
        for handler in logger.handlers[len(before):]:
            handler.close()
        logger.handlers[:] = before
        logger.setLevel(logging.NOTSET)


def test_non_ascii_digit_tab_stop_falls_back():
    assert Settings.from_env({"KILO_TAB_STOP": "²"}).tab_stop == KILO_TAB_STOP


def _with_kilo_logger(fn):
    logger = logging.getLogger("kilo")
    before = list(logger.handlers)
    try:
        return fn(logger)
    finally:
        for handler in logger.handlers[len(before):]:
            handler.close()
        logger.handlers[:] = before
        logger.setLevel(logging.NOTSET)


def test_unknown_log_level_name_uses_info(tmp_path):
    settings = Settings.from_env(
        {"KILO_LOG": str(tmp_path / "kilo.log"), "KILO_LOG_LEVEL": "BASIC_FORMAT"}
    )

    def check(logger):
        configure_logging(settings)
        assert logger.level == logging.INFO

    _with_kilo_logger(check)


def test_unwritable_log_file_names_operation(tmp_path):
    settings = Settings(log_file=str(tmp_path / "missing-dir" / "kilo.log"))

    def check(logger):
        with pytest.raises(OSError) as excinfo:
            configure_logging(settings)
        assert excinfo.value.strerror == "open_log"
        assert excinfo.value.errno == errno.ENOENT

    _with_kilo_logger(check)
