"""Tests for logging configuration and helpers."""

import logging
from unittest.mock import Mock

import structlog

from receipt_points.logging.config import (
    configure_logging,
    get_logger,
    get_scoring_logger,
    log_rule_award,
)


class TestConfigureLogging:
    """Test structlog configuration."""

    def teardown_method(self):
        structlog.reset_defaults()
        logging.getLogger().setLevel(logging.WARNING)

    def test_json_renderer(self):
        configure_logging(level="DEBUG", format_json=True)

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)
        assert logging.getLogger().level == logging.DEBUG

    def test_console_renderer(self):
        configure_logging(level="warning")

        processors = structlog.get_config()["processors"]
        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
        assert logging.getLogger().level == logging.WARNING

    def test_optional_processors(self):
        extra = Mock()
        configure_logging(include_timestamp=False, extra_processors=[extra])

        processors = structlog.get_config()["processors"]
        assert not any(isinstance(p, structlog.processors.TimeStamper) for p in processors)
        assert extra in processors


class TestLoggerHelpers:
    """Test logger factories and award logging."""

    def test_get_logger(self):
        assert get_logger("receipt_points.test") is not None

    def test_scoring_logger_binds_subsystem(self):
        logger = get_scoring_logger("receipt_points.test")
        context = structlog.get_context(logger)

        assert context["subsystem"] == "scoring"
        assert context["audit_trail"] is True

    def test_log_rule_award(self):
        mock_logger = Mock()
        mock_logger.bind.return_value = mock_logger

        log_rule_award(mock_logger, "item_pairs", 10, "2 pairs")

        mock_logger.bind.assert_called_once_with(rule="item_pairs", points=10, detail="2 pairs")
        mock_logger.debug.assert_called_once_with("Rule evaluated")

    def test_log_rule_award_with_context(self):
        mock_logger = Mock()
        mock_logger.bind.return_value = mock_logger

        log_rule_award(mock_logger, "odd_purchase_day", 6, "day 1", context={"receipt": "x"})

        assert mock_logger.bind.call_count == 2
        mock_logger.bind.assert_called_with(context={"receipt": "x"})
