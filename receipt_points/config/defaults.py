"""Default configuration parameters for the receipt scoring system."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ScoringParams:
    """Point values and thresholds for the eight scoring rules."""
    # Round-dollar total
    round_dollar_suffix: str = ".00"                 # Literal suffix on the total text
    round_dollar_points: int = 50

    # Quarter multiple
    quarter_multiple: float = 0.25                   # Divisor for the fmod check
    quarter_multiple_points: int = 25

    # Item pairs
    item_pair_points: int = 5                        # Awarded per complete pair

    # Description length
    description_length_multiple: int = 3             # Trimmed length divisor
    description_price_multiplier: float = 0.2        # Price share, rounded up

    # High total
    high_total_threshold: float = 10.0               # Strictly greater than
    high_total_points: int = 5

    # Purchase date and time
    odd_day_points: int = 6
    afternoon_hour: int = 14                         # 24-hour clock
    afternoon_points: int = 10


@dataclass(frozen=True)
class LoggingParams:
    """Logging output parameters."""
    level: str = "INFO"
    format_json: bool = False


@dataclass(frozen=True)
class DefaultConfig:
    """Complete default configuration."""
    scoring: ScoringParams
    logging: LoggingParams


def get_default_config() -> DefaultConfig:
    """Get the default configuration instance."""
    return DefaultConfig(
        scoring=ScoringParams(),
        logging=LoggingParams(),
    )
