"""Configuration validation utilities."""

from dataclasses import dataclass, fields
from typing import Any

from .defaults import LoggingParams, ScoringParams

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

POINT_FIELDS = (
    "round_dollar_points",
    "quarter_multiple_points",
    "item_pair_points",
    "high_total_points",
    "odd_day_points",
    "afternoon_points",
)


@dataclass(frozen=True)
class ValidationError:
    """Represents a configuration validation error."""
    field: str
    message: str
    value: Any


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


class ConfigValidator:
    """Validates configuration parameters."""

    @staticmethod
    def validate_scoring_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate scoring rule parameters."""
        errors = []

        known = {f.name for f in fields(ScoringParams)}
        for key in params:
            if key not in known:
                errors.append(ValidationError(
                    field=key,
                    message="Unknown scoring parameter",
                    value=params[key]
                ))

        # Point awards must be non-negative integers
        for name in POINT_FIELDS:
            if name in params:
                value = params[name]
                if not _is_int(value) or value < 0:
                    errors.append(ValidationError(
                        field=name,
                        message="Must be a non-negative integer",
                        value=value
                    ))

        # Validate round_dollar_suffix
        if "round_dollar_suffix" in params:
            value = params["round_dollar_suffix"]
            if not isinstance(value, str) or not value:
                errors.append(ValidationError(
                    field="round_dollar_suffix",
                    message="Must be a non-empty string",
                    value=value
                ))

        # Validate quarter_multiple
        if "quarter_multiple" in params:
            value = params["quarter_multiple"]
            if not _is_number(value) or value <= 0:
                errors.append(ValidationError(
                    field="quarter_multiple",
                    message="Must be a positive number",
                    value=value
                ))

        # Validate description_length_multiple
        if "description_length_multiple" in params:
            value = params["description_length_multiple"]
            if not _is_int(value) or value <= 0:
                errors.append(ValidationError(
                    field="description_length_multiple",
                    message="Must be a positive integer",
                    value=value
                ))

        # Validate description_price_multiplier
        if "description_price_multiplier" in params:
            value = params["description_price_multiplier"]
            if not _is_number(value) or value < 0:
                errors.append(ValidationError(
                    field="description_price_multiplier",
                    message="Must be a non-negative number",
                    value=value
                ))

        # Validate high_total_threshold
        if "high_total_threshold" in params:
            value = params["high_total_threshold"]
            if not _is_number(value):
                errors.append(ValidationError(
                    field="high_total_threshold",
                    message="Must be a number",
                    value=value
                ))

        # Validate afternoon_hour
        if "afternoon_hour" in params:
            value = params["afternoon_hour"]
            if not _is_int(value) or not 0 <= value <= 23:
                errors.append(ValidationError(
                    field="afternoon_hour",
                    message="Must be an integer between 0 and 23",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_logging_params(params: dict[str, Any]) -> list[ValidationError]:
        """Validate logging parameters."""
        errors = []

        known = {f.name for f in fields(LoggingParams)}
        for key in params:
            if key not in known:
                errors.append(ValidationError(
                    field=key,
                    message="Unknown logging parameter",
                    value=params[key]
                ))

        # Validate level
        if "level" in params:
            value = params["level"]
            if not isinstance(value, str) or value.upper() not in LOG_LEVELS:
                errors.append(ValidationError(
                    field="level",
                    message=f"Must be one of {', '.join(LOG_LEVELS)}",
                    value=value
                ))

        # Validate format_json
        if "format_json" in params:
            value = params["format_json"]
            if not isinstance(value, bool):
                errors.append(ValidationError(
                    field="format_json",
                    message="Must be a boolean",
                    value=value
                ))

        return errors

    @staticmethod
    def validate_config(config: dict[str, Any]) -> list[ValidationError]:
        """Validate complete configuration."""
        errors = []

        for section in config:
            if section not in ("scoring", "logging"):
                errors.append(ValidationError(
                    field=section,
                    message="Unknown configuration section",
                    value=config[section]
                ))

        if "scoring" in config:
            if isinstance(config["scoring"], dict):
                errors.extend(ConfigValidator.validate_scoring_params(config["scoring"]))
            else:
                errors.append(ValidationError(
                    field="scoring",
                    message="Must be a mapping",
                    value=config["scoring"]
                ))

        if "logging" in config:
            if isinstance(config["logging"], dict):
                errors.extend(ConfigValidator.validate_logging_params(config["logging"]))
            else:
                errors.append(ValidationError(
                    field="logging",
                    message="Must be a mapping",
                    value=config["logging"]
                ))

        return errors
