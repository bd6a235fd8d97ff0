"""
Centralized logging configuration for the receipt scoring system.

This module provides standardized logging configuration using structlog
for all components. All logging throughout the system should use this
configuration to ensure consistent formatting and structured logging.
"""
import logging
import sys
from typing import Any, Optional

import structlog
from structlog.types import FilteringBoundLogger


def configure_logging(
    level: str = "INFO",
    format_json: bool = False,
    include_timestamp: bool = True,
    include_caller: bool = False,
    extra_processors: Optional[list] = None
) -> None:
    """
    Configure structlog for the entire application.

    Args:
        level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        format_json: If True, output JSON format; otherwise human-readable
        include_timestamp: Include timestamp in log output
        include_caller: Include caller information (filename, line number)
        extra_processors: Additional structlog processors to include
    """
    # Convert string level to logging constant
    log_level = getattr(logging, level.upper())

    # Configure standard library logging
    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",  # structlog will handle formatting
        force=True
    )

    # Build processor chain
    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    # Add timestamp if requested
    if include_timestamp:
        processors.append(structlog.processors.TimeStamper(fmt="iso"))

    # Add caller information if requested
    if include_caller:
        processors.append(structlog.processors.CallsiteParameterAdder(
            parameters=[structlog.processors.CallsiteParameter.FILENAME,
                       structlog.processors.CallsiteParameter.LINENO]
        ))

    # Add any extra processors
    if extra_processors:
        processors.extend(extra_processors)

    # Add final formatting processor
    if format_json:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=sys.stdout.isatty()))

    # Configure structlog
    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> FilteringBoundLogger:
    """
    Get a configured structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger instance
    """
    return structlog.get_logger(name)


def get_scoring_logger(name: str) -> FilteringBoundLogger:
    """
    Get a logger specifically configured for rule evaluation.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger for scoring decisions
    """
    logger = get_logger(name)

    return logger.bind(
        subsystem="scoring",
        audit_trail=True
    )


def log_rule_award(
    logger: FilteringBoundLogger,
    rule: str,
    points: int,
    detail: str,
    context: Optional[dict[str, Any]] = None
) -> None:
    """
    Log a single rule's contribution with standardized format.

    Args:
        logger: Structlog logger instance
        rule: Name of the scoring rule
        points: Points the rule awarded (may be zero)
        detail: Short explanation of the outcome
        context: Additional context data
    """
    bound_logger = logger.bind(
        rule=rule,
        points=points,
        detail=detail
    )

    if context:
        bound_logger = bound_logger.bind(context=context)

    bound_logger.debug("Rule evaluated")
