"""
Unit tests for logging setup
"""

import logging

import orjson
import structlog

from spa_admin.config import LoggingConfig
from spa_admin.infrastructure.logger import (
    bind_context,
    clear_context,
    setup_logging,
)
from spa_admin.infrastructure.logger.enums import QuietLoggers
from spa_admin.infrastructure.logger.manager import LoggerManager


def last_line(text: str) -> str:
    return [line for line in text.splitlines() if line.strip()][-1]


class TestLoggingSetup:
    """Tests for structlog configuration"""

    def test_json_output(self, clean_logging, capsys):
        """Non-debug mode renders one JSON object per line on stderr"""
        setup_logging(LoggingConfig(debug=False, app_name="Test Spa"))

        structlog.get_logger("tests.json").info(
            "  Stock updated  ", product_id="p1"
        )

        captured = capsys.readouterr()
        entry = orjson.loads(last_line(captured.err))
        assert entry["event"] == "Stock updated"
        assert entry["level"] == "info"
        assert entry["app"] == "Test Spa"
        assert entry["product_id"] == "p1"
        assert entry["logger"] == "tests.json"
        assert captured.out == ""

    def test_bound_context_included(self, clean_logging, capsys):
        setup_logging(LoggingConfig(debug=False))
        bind_context(session="s1")
        try:
            structlog.get_logger("tests.ctx").warning("Booking")
        finally:
            clear_context()

        entry = orjson.loads(last_line(capsys.readouterr().err))
        assert entry["session"] == "s1"
        assert entry["level"] == "warning"

    def test_console_output(self, clean_logging, capsys):
        setup_logging(LoggingConfig(debug=True))

        structlog.get_logger("tests.console").info("Dashboard ready")

        assert "Dashboard ready" in capsys.readouterr().err

    def test_level_filtering(self, clean_logging, capsys):
        setup_logging(LoggingConfig(debug=False, log_level="warning"))

        structlog.get_logger("tests.level").info("hidden")

        assert "hidden" not in capsys.readouterr().err

    def test_setup_is_idempotent(self, clean_logging):
        setup_logging(LoggingConfig(debug=False))
        handlers = list(LoggerManager().handlers)

        setup_logging(LoggingConfig(debug=True))

        assert LoggerManager().handlers == handlers
        assert LoggerManager().is_configured

    def test_file_logging(self, clean_logging, tmp_path):
        config = LoggingConfig(
            debug=False,
            enable_file_logging=True,
            logs_dir=tmp_path / "logs",
            logs_file_name="test.log",
        )
        setup_logging(config)

        structlog.get_logger("tests.file").info("Written to file")
        for handler in LoggerManager().handlers:
            handler.flush()

        content = (tmp_path / "logs" / "test.log").read_text()
        assert "Written to file" in content

    def test_quiet_loggers(self, clean_logging):
        setup_logging(LoggingConfig(debug=False))

        for quiet in QuietLoggers:
            logger = logging.getLogger(quiet.logger_name)
            assert logger.level == quiet.logger_level
            assert logger.propagate
