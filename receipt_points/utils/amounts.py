"""Monetary amount parsing for receipt totals and item prices."""

import math
import re
from typing import Optional

_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
_HEX_RE = re.compile(
    r"[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)[pP][+-]?\d+", re.ASCII
)
_SPECIAL_VALUES = {
    "inf", "+inf", "-inf",
    "infinity", "+infinity", "-infinity",
    "nan",
}


def parse_amount(text: str) -> Optional[float]:
    """
    Parse a decimal amount into a double.

    Surrounding whitespace and digit-group underscores are rejected, as are
    finite spellings that overflow a double (e.g. ``1e400``). Explicit
    ``inf``/``nan`` spellings are accepted and returned as non-finite floats.
    Hexadecimal mantissas need a binary exponent (``0x1p-2``).

    Args:
        text: Submitted amount text

    Returns:
        Parsed value, or None if the text is not a decimal number
    """
    if text.lower() in _SPECIAL_VALUES:
        return float(text)

    if _HEX_RE.fullmatch(text) is not None:
        try:
            value = float.fromhex(text)
        except OverflowError:
            return None
        return None if math.isinf(value) else value

    if _DECIMAL_RE.fullmatch(text) is None:
        return None

    value = float(text)
    if math.isinf(value):
        return None

    return value
