"""Tests for the file logger setup."""

import logging

from dependabot_tracker.logging.logger import setup_logger


def test_writes_to_file(tmp_path):
    log_file = tmp_path / "logs" / "tracker.log"
    logger = setup_logger("dependabot_tracker.test_file", level="debug", log_file=log_file)
    logger.debug("hello %s", "world")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    assert "hello world" in log_file.read_text(encoding="utf-8")


def test_is_idempotent(tmp_path):
    name = "dependabot_tracker.test_idempotent"
    first = setup_logger(name, log_file=tmp_path / "a.log")
    second = setup_logger(name, log_file=tmp_path / "b.log")
    assert first is second
    assert len(second.handlers) == 1
