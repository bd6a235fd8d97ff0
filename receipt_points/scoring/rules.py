"""
Individual scoring rules.

Each rule is a pure function of receipt fields and scoring parameters and
returns the points it awards. Rules that need parsed values take them
already parsed; parse failures are handled by the caller.
"""

import math
from datetime import date, time
from typing import Optional

from ..config.defaults import ScoringParams
from ..data.models import Item
from ..utils.amounts import parse_amount

# Unicode White_Space only; the \x1c-\x1f separators are kept.
DESCRIPTION_WHITESPACE = (
    "\t\n\v\f\r \x85\xa0\u1680"
    "\u2000\u2001\u2002\u2003\u2004\u2005\u2006\u2007\u2008\u2009\u200a"
    "\u2028\u2029\u202f\u205f\u3000"
)


def retailer_points(retailer: str) -> int:
    """One point per Unicode letter or decimal digit in the retailer name."""
    return sum(1 for ch in retailer if ch.isalpha() or ch.isdecimal())


def round_dollar_points(total_text: str, params: ScoringParams) -> int:
    """Bonus when the total text ends in the round-dollar suffix."""
    if total_text.endswith(params.round_dollar_suffix):
        return params.round_dollar_points
    return 0


def quarter_multiple_points(total: float, params: ScoringParams) -> int:
    """
    Bonus when the total is an exact multiple of the quarter divisor.

    Uses double-precision ``fmod``; non-finite totals never qualify.
    """
    if not math.isfinite(total):
        return 0
    if math.fmod(total, params.quarter_multiple) == 0:
        return params.quarter_multiple_points
    return 0


def item_pair_points(item_count: int, params: ScoringParams) -> int:
    """Points for every complete pair of items."""
    return (item_count // 2) * params.item_pair_points


def trim_description(description: str) -> str:
    """Strip leading and trailing Unicode whitespace from a description."""
    return description.strip(DESCRIPTION_WHITESPACE)


def description_length(description: str) -> int:
    """Length in UTF-8 bytes of the whitespace-trimmed description."""
    return len(trim_description(description).encode("utf-8"))


def description_points(item: Item, params: ScoringParams) -> Optional[int]:
    """
    Price-share bonus for an item whose trimmed description length is a
    multiple of the configured divisor.

    Returns:
        Points awarded, or None when the length qualifies but the price
        cannot be used (unparseable or non-finite)
    """
    if description_length(item.short_description) % params.description_length_multiple != 0:
        return 0

    price = parse_amount(item.price)
    if price is None or not math.isfinite(price):
        return None

    # Negative prices would otherwise subtract points
    return max(math.ceil(price * params.description_price_multiplier), 0)


def high_total_points(total: float, params: ScoringParams) -> int:
    """Bonus when the total is strictly above the threshold."""
    if total > params.high_total_threshold:
        return params.high_total_points
    return 0


def odd_day_points(purchase_date: date, params: ScoringParams) -> int:
    """Bonus when the purchase falls on an odd day of the month."""
    if purchase_date.day % 2 == 1:
        return params.odd_day_points
    return 0


def afternoon_points(purchase_time: time, params: ScoringParams) -> int:
    """Bonus when the purchase hour equals the configured afternoon hour."""
    if purchase_time.hour == params.afternoon_hour:
        return params.afternoon_points
    return 0
