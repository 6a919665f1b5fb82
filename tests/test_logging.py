"""Tests for logging configuration."""

import logging
import sys

from bookshelf.core.config import Settings
from bookshelf.core.logging import get_logger, log_request_info, setup_logging
from tests.conftest import capture_logger


class TestLogging:
    """Test cases for logging configuration."""

    def test_setup_logging_uses_configured_level(self):
        """Test that the root logger takes the configured level."""
        setup_logging(Settings(_env_file=None, log_level="debug"))

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG
        assert len(root_logger.handlers) > 0

    def test_setup_logging_writes_to_stderr(self):
        """Test that log output never targets stdout by default."""
        setup_logging(Settings(_env_file=None))

        handler = logging.getLogger().handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr

    def test_get_logger_returns_logger(self):
        """Test that get_logger returns a logger instance."""
        logger = get_logger("test.module")

        assert isinstance(logger, logging.Logger)
        assert logger.name == "test.module"

    def test_log_request_info_logs_correctly(self, caplog):
        """Test that log_request_info logs with correct fields."""
        setup_logging()
        with capture_logger(caplog, "api.request"):
            log_request_info(
                method="GET",
                path="/api/v1/books/",
                status_code=200,
                duration_ms=1.23,
                request_id="test-uuid-123",
            )

        assert len(caplog.records) == 1
        record = caplog.records[0]

        assert record.name == "api.request"
        assert record.getMessage() == "Request completed"
        assert record.method == "GET"
        assert record.path == "/api/v1/books/"
        assert record.status_code == 200
        assert record.duration_ms == 1.23
        assert record.request_id == "test-uuid-123"

    def test_different_log_levels(self, caplog):
        """Test that records below the capture level are dropped."""
        setup_logging()
        logger = get_logger("test.levels")

        with capture_logger(caplog, "test.levels", level=logging.WARNING):
            logger.info("Info message")
            logger.warning("Warning message")
            logger.error("Error message")

        messages = [record.getMessage() for record in caplog.records]
        assert "Info message" not in messages
        assert "Warning message" in messages
        assert "Error message" in messages
