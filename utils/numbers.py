"""
Safe numeric coercion for spreadsheet cells

Source files are hand-maintained spreadsheets, so blank cells, stray
whitespace and text in numeric columns are normal. These helpers never raise
and never return NaN or infinity.
"""
import math
import re
from typing import Any, Optional

_INT_PREFIX = re.compile(r'^[+-]?\d+')
_FLOAT_PREFIX = re.compile(r'^[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?')


def _clean(value: Any) -> Optional[str]:
    if value is None:
        return None
    cleaned = str(value).strip()
    return cleaned or None


def parse_int(value: Any) -> Optional[int]:
    """
    Parse the leading integer of a cell, or None when there is none.

    Matches spreadsheet exports where counts sometimes arrive as "12.0" or
    "12 " (both read as 12).
    """
    cleaned = _clean(value)
    if cleaned is None:
        return None
    match = _INT_PREFIX.match(cleaned)
    if not match:
        return None
    return int(match.group(0))


def parse_float(value: Any) -> Optional[float]:
    """Parse the leading decimal of a cell, or None when there is none."""
    cleaned = _clean(value)
    if cleaned is None:
        return None
    match = _FLOAT_PREFIX.match(cleaned)
    if not match:
        return None
    parsed = float(match.group(0))
    if math.isnan(parsed) or math.isinf(parsed):
        return None
    return parsed


def safe_int(value: Any, allow_negative: bool = False) -> int:
    """
    Coerce a cell to a count.

    Unparseable cells become 0. Negative results also become 0 unless
    ``allow_negative`` is set, since counts cannot be negative.
    """
    parsed = parse_int(value)
    if parsed is None:
        return 0
    if parsed < 0 and not allow_negative:
        return 0
    return parsed


def safe_float(value: Any, allow_negative: bool = True) -> float:
    """Coerce a cell to a float; unparseable cells become 0.0."""
    parsed = parse_float(value)
    if parsed is None:
        return 0.0
    if parsed < 0 and not allow_negative:
        return 0.0
    return parsed


def safe_divide(numerator: float, denominator: float, default: float = 0.0) -> float:
    """Divide, returning ``default`` when the denominator is zero."""
    if denominator == 0:
        return default
    return numerator / denominator
