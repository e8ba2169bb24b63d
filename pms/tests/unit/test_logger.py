"""Tests for the shared logging helper."""

from __future__ import annotations

import logging

from pms import logger


def test_log_appends_metadata(caplog) -> None:
    caplog.set_level(logging.INFO)

    logger.log("hello", "world", collection="tasks")

    assert any("hello world" in message for message in caplog.messages)
    assert any("collection" in message for message in caplog.messages)


def test_log_error_uses_error_level(caplog) -> None:
    caplog.set_level(logging.INFO)

    logger.log_error("[db] connection refused")

    record = caplog.records[-1]
    assert record.levelno == logging.ERROR
    assert record.getMessage() == "[db] connection refused"
