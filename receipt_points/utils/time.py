"""
Purchase date and time parsing.

Both parsers are strict about layout and return None instead of raising, so
scoring rules can skip a bonus when the submitted text is unusable.
"""

import re
from datetime import date, time
from typing import Optional

_DATE_RE = re.compile(r"(\d{4})-(\d{2})-(\d{2})", re.ASCII)
_TIME_RE = re.compile(r"(\d{1,2}):(\d{2})", re.ASCII)


def parse_purchase_date(text: str) -> Optional[date]:
    """
    Parse a ``YYYY-MM-DD`` purchase date.

    Args:
        text: Submitted date text

    Returns:
        Calendar date, or None if the layout is wrong or the date does not exist
    """
    match = _DATE_RE.fullmatch(text)
    if match is None:
        return None

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        return None


def parse_purchase_time(text: str) -> Optional[time]:
    """
    Parse a 24-hour ``HH:MM`` purchase time.

    The hour may be written with one or two digits; minutes always take two.

    Args:
        text: Submitted time text

    Returns:
        Time of day, or None if the text is not a valid clock time
    """
    match = _TIME_RE.fullmatch(text)
    if match is None:
        return None

    hour, minute = (int(part) for part in match.groups())
    if hour > 23 or minute > 59:
        return None

    return time(hour, minute)
