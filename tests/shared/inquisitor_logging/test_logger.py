"""Tests for inquisitor_logging logger module."""

import io
import json
import logging
import sys

import pytest

from inquisitor_logging import (
    ContextScope,
    InquisitorLogger,
    configure_logging,
    get_logger,
    set_current_context,
)
from inquisitor_logging.logger import _loggers


class TestInquisitorLogger:
    """Tests for InquisitorLogger class."""

    def setup_method(self):
        set_current_context(None)

    def test_creates_logger_with_name(self):
        """Test that logger is created with the given name."""
        logger = InquisitorLogger("test-service")
        assert logger.name == "test-service"
        assert logger._logger.name == "test-service"

    def test_component_gets_child_logger(self):
        """Test that a component logs through its own child logger."""
        logger = InquisitorLogger("test-service", component="tickets")
        assert logger._logger.name == "test-service.tickets"

    def test_default_level_is_info(self):
        logger = InquisitorLogger("test")
        assert logger._logger.level == logging.INFO

    def test_accepts_string_level(self):
        logger = InquisitorLogger("test", level="DEBUG")
        assert logger._logger.level == logging.DEBUG

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError):
            InquisitorLogger("test", log_format="xml")


def attach_buffer(logger: InquisitorLogger) -> io.StringIO:
    """Create the logger's handler and point it at an in-memory stream."""
    logger._ensure_handlers()
    buffer = io.StringIO()
    logger._logger.handlers[0].setStream(buffer)
    return buffer


class TestLoggerMethods:
    """Tests for logger log methods."""

    def setup_method(self):
        set_current_context(None)

    @pytest.fixture
    def logger(self):
        logger = InquisitorLogger("test-methods")
        yield logger
        for handler in logger._logger.handlers[:]:
            logger._logger.removeHandler(handler)

    def test_handler_writes_to_stderr(self, logger):
        """Test that log output never lands on stdout."""
        logger._ensure_handlers()
        assert len(logger._logger.handlers) == 1
        assert logger._logger.handlers[0].stream is sys.stderr

    def test_handlers_added_once(self, logger):
        logger._ensure_handlers()
        logger._ensure_handlers()
        assert len(logger._logger.handlers) == 1

    def test_info_written(self, logger):
        buffer = attach_buffer(logger)
        logger.info("Info message")
        assert "Info message" in buffer.getvalue()

    def test_debug_filtered_at_info(self, logger):
        buffer = attach_buffer(logger)
        logger.debug("Hidden message")
        assert "Hidden message" not in buffer.getvalue()

    def test_warning_and_error(self, logger):
        buffer = attach_buffer(logger)
        logger.warning("Warn message")
        logger.error("Error message")
        output = buffer.getvalue()
        assert "Warn message" in output
        assert "Error message" in output

    def test_exception_includes_traceback(self, logger):
        buffer = attach_buffer(logger)
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            logger.exception("Failed")
        output = buffer.getvalue()
        assert "Traceback" in output
        assert "boom" in output

    def test_json_format_includes_fields_and_context(self):
        """Test that JSON output carries extras and the current scope."""
        logger = InquisitorLogger("test-json", log_format="json")
        try:
            buffer = attach_buffer(logger)
            with ContextScope(project="FACT", fix_version="2.1.0"):
                logger.info("Fetched", ticket_count=3)
            entry = json.loads(buffer.getvalue().strip().splitlines()[-1])
        finally:
            for handler in logger._logger.handlers[:]:
                logger._logger.removeHandler(handler)

        assert entry["message"] == "Fetched"
        assert entry["context"]["project"] == "FACT"
        assert entry["context"]["fix_version"] == "2.1.0"
        assert entry["extra"]["ticket_count"] == 3


class TestGetLogger:
    """Tests for get_logger registry."""

    def setup_method(self):
        self._saved = dict(_loggers)
        _loggers.clear()

    def teardown_method(self):
        _loggers.clear()
        _loggers.update(self._saved)

    def test_returns_same_instance(self):
        assert get_logger("svc") is get_logger("svc")

    def test_component_is_part_of_key(self):
        assert get_logger("svc", component="a") is not get_logger("svc", component="b")


class TestConfigureLogging:
    """Tests for configure_logging."""

    def setup_method(self):
        self._saved = dict(_loggers)
        _loggers.clear()

    def teardown_method(self):
        _loggers.clear()
        _loggers.update(self._saved)
        root = logging.getLogger()
        for handler in root.handlers[:]:
            root.removeHandler(handler)

    def test_applies_level_and_format(self):
        """Test that registered loggers pick up the new level and format."""
        logger = get_logger("svc-configure")
        logger.info("creates a handler")

        configure_logging(level="DEBUG", log_format="json")

        assert logger._logger.level == logging.DEBUG
        assert logger.log_format == "json"
        assert logger._logger.handlers == []

    def test_rejects_unknown_format(self):
        with pytest.raises(ValueError):
            configure_logging(log_format="xml")

    def test_root_logger_configured(self):
        configure_logging(level="WARNING")
        root = logging.getLogger()
        assert root.level == logging.WARNING
        assert len(root.handlers) == 1
