"""
Tests for CLI logging configuration.
"""

import json
import logging
import sys

import pytest

from src.cli.logging_setup import JSONFormatter, setup_logging


@pytest.fixture
def restore_root_logger():
    """Restore root logger handlers and level after setup_logging runs."""
    root_logger = logging.getLogger()
    handlers = list(root_logger.handlers)
    level = root_logger.level
    yield root_logger
    for handler in root_logger.handlers:
        if handler not in handlers:
            handler.close()
    root_logger.handlers[:] = handlers
    root_logger.setLevel(level)


def test_setup_logging_sets_level(restore_root_logger):
    setup_logging(level="DEBUG")
    assert restore_root_logger.level == logging.DEBUG
    assert len(restore_root_logger.handlers) == 1


def test_setup_logging_unknown_level_defaults_to_info(restore_root_logger):
    setup_logging(level="VERBOSE")
    assert restore_root_logger.level == logging.INFO


def test_setup_logging_writes_json_file(restore_root_logger, tmp_path):
    log_file = tmp_path / "logs" / "equalizer.log"
    setup_logging(level="INFO", log_file=log_file, use_json=True)

    logging.getLogger("src.equalizer.engine").info("Equalized %d weights", 3)
    for handler in restore_root_logger.handlers:
        handler.flush()

    lines = log_file.read_text(encoding="utf-8").strip().splitlines()
    record = json.loads(lines[-1])
    assert record["level"] == "INFO"
    assert record["logger"] == "src.equalizer.engine"
    assert record["message"] == "Equalized 3 weights"


def test_json_formatter_includes_exception():
    formatter = JSONFormatter()
    try:
        raise ValueError("boom")
    except ValueError:
        record = logging.LogRecord(
            "test", logging.ERROR, __file__, 1, "failed", None, exc_info=None
        )
        record.exc_info = sys.exc_info()

    payload = json.loads(formatter.format(record))
    assert payload["message"] == "failed"
    assert "ValueError: boom" in payload["exception"]
