"""
Logging configuration and utilities for the receipt scoring system.
"""
from .config import configure_logging, get_logger, get_scoring_logger, log_rule_award

__all__ = ["configure_logging", "get_logger", "get_scoring_logger", "log_rule_award"]
