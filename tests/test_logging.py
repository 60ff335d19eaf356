# tests/test_logging.py
from __future__ import annotations

import json
import logging

from filebundler.logger import BasicLogger, JsonFormatter
from filebundler.settings import LogSettings


def test_json_formatter_includes_extra_fields():
    record = logging.LogRecord("fib", logging.INFO, __file__, 1, "bundled %d", (3,), None)
    record.output = "out.txt"

    payload = json.loads(JsonFormatter().format(record))

    assert payload["level"] == "INFO"
    assert payload["logger"] == "fib"
    assert payload["message"] == "bundled 3"
    assert payload["output"] == "out.txt"


def test_basic_logger_writes_json_file(tmp_path):
    logger = BasicLogger(
        "fib-test-file-logger",
        level=logging.INFO,
        log_to_file=True,
        log_dir=str(tmp_path / "logs"),
    ).get_logger()

    logger.info("hello", extra={"files": 2})
    for handler in logger.handlers:
        handler.flush()

    lines = (tmp_path / "logs" / "fib.jsonl").read_text(encoding="utf-8").splitlines()
    assert json.loads(lines[-1])["files"] == 2

    for handler in list(logger.handlers):
        handler.close()
        logger.removeHandler(handler)


def test_basic_logger_attaches_handlers_once():
    first = BasicLogger("fib-test-once").get_logger()
    count = len(first.handlers)

    second = BasicLogger("fib-test-once").get_logger()

    assert second is first
    assert len(second.handlers) == count == 1


def test_log_settings_defaults():
    settings = LogSettings.from_env({})

    assert settings.level == logging.WARNING
    assert settings.log_dir is None


def test_log_settings_from_env():
    settings = LogSettings.from_env({"FIB_LOG_LEVEL": "debug", "FIB_LOG_DIR": " /tmp/fib "})

    assert settings.level == logging.DEBUG
    assert settings.log_dir == "/tmp/fib"
    assert LogSettings.from_env({"FIB_LOG_LEVEL": "15", "FIB_LOG_DIR": "  "}) == LogSettings(level=15)


def test_log_settings_unknown_level_falls_back_to_default(caplog):
    with caplog.at_level(logging.WARNING, logger="filebundler.settings"):
        settings = LogSettings.from_env({"FIB_LOG_LEVEL": "LOUD"})

    assert settings.level == logging.WARNING
    assert "Ignoring FIB_LOG_LEVEL='LOUD'" in caplog.text
