"""
Tests for setup_logging().

setup_logging() configures the whole structured logging pipeline, so every
other logger in the package depends on it behaving.
"""

import json
import logging
from io import StringIO

import pytest
import structlog

from modelizer.infrastructure.observability import setup_logging


@pytest.fixture
def clean_logging():
    """Reset stdlib and structlog global state around each test."""
    original_handlers = logging.root.handlers[:]

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()

    yield

    logging.root.handlers = []
    logging.root.setLevel(logging.WARNING)
    structlog.reset_defaults()
    logging.root.handlers = original_handlers


def capture(level=logging.INFO):
    """Attach a root handler writing to a buffer; returns (buffer, handler)."""
    buffer = StringIO()
    handler = logging.StreamHandler(buffer)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logging.root.addHandler(handler)
    return buffer, handler


def json_lines(buffer):
    return [json.loads(line) for line in buffer.getvalue().splitlines() if line.strip()]


class TestSetupLogging:
    def test_json_mode(self, clean_logging):
        setup_logging(level="INFO", json_logs=True, include_timestamp=True)
        buffer, handler = capture()

        try:
            structlog.get_logger("test_json").info("json_test_event", value=123)

            (entry,) = json_lines(buffer)
            assert entry["event"] == "json_test_event"
            assert entry["value"] == 123
            assert entry["app"] == "modelizer"
            assert entry["severity"] == "INFO"
            assert "timestamp" in entry
        finally:
            logging.root.removeHandler(handler)

    def test_text_mode(self, clean_logging):
        setup_logging(level="INFO", json_logs=False)
        buffer, handler = capture()

        try:
            structlog.get_logger("test_text").info("text_test_event", value=456)

            output = buffer.getvalue()
            assert "text_test_event" in output
            with pytest.raises(json.JSONDecodeError):
                json.loads(output)
        finally:
            logging.root.removeHandler(handler)

    @pytest.mark.parametrize("level", ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    def test_root_level(self, clean_logging, level):
        setup_logging(level=level)

        assert structlog.is_configured()
        assert logging.root.level == getattr(logging, level)

    def test_lowercase_level(self, clean_logging):
        setup_logging(level="debug")

        assert logging.root.level == logging.DEBUG

    def test_invalid_level_falls_back_to_info(self, clean_logging):
        setup_logging(level="INVALID_LEVEL")

        assert logging.root.level == logging.INFO

    def test_without_timestamp(self, clean_logging):
        setup_logging(level="INFO", json_logs=True, include_timestamp=False)
        buffer, handler = capture()

        try:
            log = structlog.get_logger("test_no_ts")
            log.debug("debug_should_not_appear")
            log.info("no_timestamp_test", flag=True)

            (entry,) = json_lines(buffer)
            assert entry["event"] == "no_timestamp_test"
            assert entry["flag"] is True
            assert "timestamp" not in entry
        finally:
            logging.root.removeHandler(handler)

    def test_severity_follows_level(self, clean_logging):
        setup_logging(level="DEBUG", json_logs=True)
        buffer, handler = capture(logging.DEBUG)

        try:
            log = structlog.get_logger("test_severity")
            log.debug("d")
            log.warning("w")
            log.error("e")

            assert [entry["severity"] for entry in json_lines(buffer)] == [
                "DEBUG",
                "WARNING",
                "ERROR",
            ]
        finally:
            logging.root.removeHandler(handler)

    def test_exception_info_is_rendered(self, clean_logging):
        setup_logging(level="INFO", json_logs=True)
        buffer, handler = capture()

        try:
            try:
                raise ValueError("boom")
            except ValueError:
                structlog.get_logger("test_exc").exception("failed")

            (entry,) = json_lines(buffer)
            assert "ValueError: boom" in entry["exception"]
        finally:
            logging.root.removeHandler(handler)
