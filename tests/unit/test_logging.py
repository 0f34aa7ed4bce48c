"""
Unit Tests for the structured logging setup.

These tests verify:
1. JSON rendering of events, levels and bound context
2. Console rendering
3. Level filtering
"""

import json
import logging

import pytest
import structlog

from src.core.config import Settings
from src.core.logging import setup_logging


@pytest.fixture(autouse=True)
def restore_logging():
    """Put structlog and the root logger back after each test."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    structlog.reset_defaults()
    structlog.contextvars.clear_contextvars()
    root.handlers[:] = handlers
    root.setLevel(level)


def read_json_lines(capsys) -> list:
    out = capsys.readouterr().out
    return [json.loads(line) for line in out.splitlines() if line.strip()]


class TestJsonRenderer:
    """setup_logging() with log_format="json"."""

    def test_event_is_one_json_line(self, capsys):
        setup_logging(Settings(log_format="json", log_level="INFO"))

        structlog.get_logger("test").info("batch_evaluated", applicants=5)

        [entry] = read_json_lines(capsys)
        assert entry["event"] == "batch_evaluated"
        assert entry["level"] == "info"
        assert entry["applicants"] == 5
        assert "timestamp" in entry

    def test_context_vars_are_merged(self, capsys):
        setup_logging(Settings(log_format="json", log_level="INFO"))
        structlog.contextvars.bind_contextvars(request_id="req-1")

        structlog.get_logger("test").warning("slow_batch")

        [entry] = read_json_lines(capsys)
        assert entry["request_id"] == "req-1"
        assert entry["level"] == "warning"

    def test_debug_level_reports_configuration(self, capsys):
        setup_logging(Settings(log_format="json", log_level="DEBUG"))

        [entry] = read_json_lines(capsys)
        assert entry["event"] == "logging_configured"
        assert entry["format"] == "json"


class TestConsoleRenderer:
    """setup_logging() with log_format="console"."""

    def test_event_is_human_readable(self, capsys):
        setup_logging(Settings(log_format="console", log_level="INFO"))

        structlog.get_logger("test").info("batch_evaluated", applicants=5)

        out = capsys.readouterr().out
        assert "batch_evaluated" in out
        assert "applicants" in out
        with pytest.raises(json.JSONDecodeError):
            json.loads(out.strip())


class TestLevelFiltering:
    """Events below the configured level are dropped."""

    def test_debug_dropped_at_info(self, capsys):
        setup_logging(Settings(log_format="json", log_level="INFO"))

        logger = structlog.get_logger("test")
        logger.debug("hidden")
        logger.info("shown")

        assert [entry["event"] for entry in read_json_lines(capsys)] == ["shown"]

    def test_unknown_level_falls_back_to_info(self, capsys):
        setup_logging(Settings(log_format="json", log_level="chatty"))

        logger = structlog.get_logger("test")
        logger.debug("hidden")
        logger.info("shown")

        assert [entry["event"] for entry in read_json_lines(capsys)] == ["shown"]
