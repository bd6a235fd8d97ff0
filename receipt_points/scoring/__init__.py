"""Scoring engine for receipt reward points"""

from .calculator import PointsCalculator, score_receipt
from .rules import (
    afternoon_points,
    description_points,
    high_total_points,
    item_pair_points,
    odd_day_points,
    quarter_multiple_points,
    retailer_points,
    round_dollar_points,
)

__all__ = [
    "PointsCalculator",
    "score_receipt",
    "retailer_points",
    "round_dollar_points",
    "quarter_multiple_points",
    "item_pair_points",
    "description_points",
    "high_total_points",
    "odd_day_points",
    "afternoon_points",
]
