"""Points calculator that applies every scoring rule to a receipt"""

from typing import Optional

from ..config.defaults import ScoringParams, get_default_config
from ..data.models import Receipt
from ..logging.config import get_scoring_logger, log_rule_award
from ..models.score import RuleAward, ScoreBreakdown
from ..utils.amounts import parse_amount
from ..utils.time import parse_purchase_date, parse_purchase_time
from . import rules

RETAILER = "retailer_alphanumeric"
ROUND_DOLLAR = "round_dollar_total"
QUARTER_MULTIPLE = "quarter_multiple_total"
ITEM_PAIRS = "item_pairs"
DESCRIPTION_LENGTH = "description_length"
HIGH_TOTAL = "high_total"
ODD_DAY = "odd_purchase_day"
AFTERNOON = "afternoon_purchase"


class PointsCalculator:
    """
    Scores receipts with the eight reward rules.

    Scoring is pure: the calculator holds only its parameters and never
    modifies the receipt. Rules run in a fixed order and their points add up.
    If the total cannot be parsed, only the retailer rule counts and the rest
    are skipped. Unparseable item prices, dates and times skip only their
    own rule.
    """

    def __init__(self, params: Optional[ScoringParams] = None):
        self.params = params or get_default_config().scoring
        self.logger = get_scoring_logger(__name__)

    def score(self, receipt: Receipt) -> int:
        """Total points for a validated receipt."""
        return self.explain(receipt).total

    def explain(self, receipt: Receipt) -> ScoreBreakdown:
        """
        Score a receipt and record what each rule contributed.

        Args:
            receipt: Validated receipt

        Returns:
            ScoreBreakdown whose total is the receipt's points
        """
        params = self.params
        awards = []

        retailer = rules.retailer_points(receipt.retailer)
        awards.append(RuleAward(RETAILER, retailer, f"{retailer} alphanumeric characters"))

        total = parse_amount(receipt.total)
        if total is None:
            self.logger.debug(
                "Total is not a decimal amount, skipping remaining rules",
                total=receipt.total
            )
            return self._finish(awards, aborted=True)

        awards.append(RuleAward(
            ROUND_DOLLAR,
            rules.round_dollar_points(receipt.total, params),
            f"total {receipt.total!r}"
        ))
        awards.append(RuleAward(
            QUARTER_MULTIPLE,
            rules.quarter_multiple_points(total, params),
            f"total {total} against {params.quarter_multiple}"
        ))
        awards.append(RuleAward(
            ITEM_PAIRS,
            rules.item_pair_points(len(receipt.items), params),
            f"{len(receipt.items) // 2} pairs"
        ))

        for index, item in enumerate(receipt.items):
            points = rules.description_points(item, params)
            if points is None:
                awards.append(RuleAward(
                    DESCRIPTION_LENGTH, 0, f"item {index}: price {item.price!r} not usable"
                ))
            elif points:
                trimmed = rules.trim_description(item.short_description)
                awards.append(RuleAward(
                    DESCRIPTION_LENGTH, points, f"item {index}: {trimmed!r}"
                ))

        awards.append(RuleAward(
            HIGH_TOTAL,
            rules.high_total_points(total, params),
            f"total {total} against {params.high_total_threshold}"
        ))

        purchase_date = parse_purchase_date(receipt.purchase_date)
        if purchase_date is None:
            awards.append(RuleAward(ODD_DAY, 0, f"date {receipt.purchase_date!r} not parseable"))
        else:
            awards.append(RuleAward(
                ODD_DAY,
                rules.odd_day_points(purchase_date, params),
                f"day {purchase_date.day}"
            ))

        purchase_time = parse_purchase_time(receipt.purchase_time)
        if purchase_time is None:
            awards.append(RuleAward(AFTERNOON, 0, f"time {receipt.purchase_time!r} not parseable"))
        else:
            awards.append(RuleAward(
                AFTERNOON,
                rules.afternoon_points(purchase_time, params),
                f"hour {purchase_time.hour}"
            ))

        return self._finish(awards, aborted=False)

    def _finish(self, awards: list[RuleAward], aborted: bool) -> ScoreBreakdown:
        for award in awards:
            log_rule_award(self.logger, award.rule, award.points, award.detail)
        return ScoreBreakdown(awards=tuple(awards), aborted=aborted)


def score_receipt(receipt: Receipt, params: Optional[ScoringParams] = None) -> int:
    """Score a receipt with the given (or default) scoring parameters."""
    return PointsCalculator(params).score(receipt)
