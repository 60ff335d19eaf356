# filebundler/settings.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional

LOG_LEVEL_ENV = "FIB_LOG_LEVEL"
LOG_DIR_ENV = "FIB_LOG_DIR"


def _parse_level(value: Optional[str], default: int) -> int:
    if value is None or not value.strip():
        return default

    value = value.strip()
    if value.isdigit():
        return int(value)

    level = logging.getLevelName(value.upper())
    if not isinstance(level, int):
        logging.getLogger(__name__).warning(
            "Ignoring %s=%r: not a logging level name or number", LOG_LEVEL_ENV, value
        )
        return default
    return level


@dataclass(frozen=True)
class LogSettings:
    """
    Ambient logging settings. They never influence bundle content.

    FIB_LOG_LEVEL   level name or number (default WARNING)
    FIB_LOG_DIR     directory for the JSON log file; unset disables file logging
    """

    level: int = logging.WARNING
    log_dir: Optional[str] = None
    log_file: str = "fib.jsonl"

    @staticmethod
    def from_env(environ: Optional[Mapping[str, str]] = None) -> "LogSettings":
        env = os.environ if environ is None else environ

        log_dir = env.get(LOG_DIR_ENV)
        if log_dir is not None and not log_dir.strip():
            log_dir = None

        return LogSettings(
            level=_parse_level(env.get(LOG_LEVEL_ENV), logging.WARNING),
            log_dir=log_dir.strip() if log_dir else None,
        )
