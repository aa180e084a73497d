from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass

from .constants import KILO_TAB_STOP


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True, slots=True)
class Settings:
    log_file: str | None = None
    log_level: str = "INFO"
    tab_stop: int = KILO_TAB_STOP

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "Settings":
        env = os.environ if environ is None else environ
        tab_stop = KILO_TAB_STOP
        raw_tab = env.get("KILO_TAB_STOP", "")
        if raw_tab.isdecimal() and int(raw_tab) > 0:
            tab_stop = int(raw_tab)
        return cls(
            log_file=env.get("KILO_LOG") or None,
            log_level=env.get("KILO_LOG_LEVEL", "INFO").upper(),
            tab_stop=tab_stop,
        )


def configure_logging(settings: Settings) -> None:
    # The terminal belongs to the editor, so log records only ever go to a file.
    root = logging.getLogger("kilo")
    if settings.log_file is None:
        root.addHandler(logging.NullHandler())
        return
    try:
        handler = logging.FileHandler(settings.log_file, encoding="utf-8")
    except OSError as exc:
        raise OSError(exc.errno, "open_log") from exc
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    level = logging.getLevelName(settings.log_level)
    root.setLevel(level if isinstance(level, int) else logging.INFO)
