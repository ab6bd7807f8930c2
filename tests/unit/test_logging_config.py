"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

import pytest
from esclient.logging_config import (
    clear_correlation_id,
    get_correlation_id,
    get_logger,
    log_http_request,
    set_correlation_id,
    setup_logging,
)


pytestmark = pytest.mark.usefixtures("reset_logging")


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        root_logger = logging.getLogger()
        assert root_logger.level == logging.DEBUG

    def test_setup_logging_unknown_level_falls_back_to_info(self):
        setup_logging(level="chatty")
        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_with_file(self, temp_dir: Path):
        """Test setup_logging with log file."""
        log_file = temp_dir / "logs" / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        assert log_file.exists()
        assert "test_message" in log_file.read_text()

    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_lines = [line for line in log_file.read_text().strip().split("\n") if line]
        log_entry = json.loads(log_lines[0])
        assert log_entry["event"] == "test_message"
        assert log_entry["key"] == "value"
        assert log_entry["logger"] == "esclient.test"
        assert "timestamp" in log_entry
        assert "level" in log_entry

    def test_setup_logging_human_format(self, temp_dir: Path):
        """Test setup_logging with human-readable format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        logger = get_logger("test")
        logger.info("test_message", key="value")

        log_content = log_file.read_text()
        assert "test_message" in log_content
        assert "key" in log_content

    def test_level_filters_debug(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("test").debug("hidden")
        assert "hidden" not in log_file.read_text()


class TestCorrelationId:
    def test_set_and_get(self):
        assert set_correlation_id("req-1") == "req-1"
        assert get_correlation_id() == "req-1"

    def test_generates_id(self):
        generated = set_correlation_id()
        assert generated
        assert get_correlation_id() == generated

    def test_clear(self):
        set_correlation_id("req-1")
        clear_correlation_id()
        assert get_correlation_id() is None

    def test_correlation_id_in_log_output(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)
        set_correlation_id("req-42")

        get_logger("test").info("with_correlation")

        entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert entry["correlation_id"] == "req-42"


class TestLogHttpRequest:
    def test_logs_at_debug(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        log_http_request(get_logger("transport"), "POST", "/_refresh", 200, 1.5, attempt=1)

        entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert entry["event"] == "http_request"
        assert entry["level"] == "debug"
        assert entry["method"] == "POST"
        assert entry["path"] == "/_refresh"
        assert entry["status_code"] == 200
        assert entry["duration_ms"] == 1.5
        assert entry["attempt"] == 1

    def test_omits_missing_status(self, temp_dir: Path):
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)

        log_http_request(get_logger("transport"), "PUT", "/idx", None, 0.2)

        entry = json.loads(log_file.read_text().strip().split("\n")[0])
        assert "status_code" not in entry
