"""Tests for logging setup."""

import json
import logging

import pytest

from bangla_phonetic.utils.log import JSONFormatter, log_with_context, setup_logging


@pytest.fixture
def restore_root_logger():
    """Put the root logger back the way pytest configured it."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_extra_fields():
    """Structured context ends up in the JSON record."""
    record = logging.LogRecord("test", logging.INFO, __file__, 1, "loaded", None, None)
    record.extra_fields = {"patterns": 3, "find": "ক"}

    data = json.loads(JSONFormatter().format(record))

    assert data["level"] == "INFO"
    assert data["message"] == "loaded"
    assert data["patterns"] == 3
    assert data["find"] == "ক"
    assert data["timestamp"].endswith("Z")


def test_setup_logging_with_file(temp_dir, restore_root_logger):
    """File logs are written as JSON lines."""
    log_file = temp_dir / "logs" / "run.log"
    logger = setup_logging(level="INFO", format_type="json", log_file=log_file)

    log_with_context(logging.getLogger("test_log"), "info", "hello", count=2)
    for handler in logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").splitlines()
    record = json.loads(lines[-1])
    assert record["message"] == "hello"
    assert record["count"] == 2
    assert len(logger.handlers) == 2

    for handler in logger.handlers:
        handler.close()
