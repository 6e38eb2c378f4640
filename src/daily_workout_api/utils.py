"""Utility functions."""
import math
import re
from typing import Any, Optional

# Leading numeric prefix, so "40%" and "12.5 pts" still yield a number
_LEADING_NUMBER = re.compile(r'^\s*[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?')


def to_float(value: Any) -> Optional[float]:
    """Convert a cell value to float, returning None if it holds no number."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        number = float(value)
        return None if math.isnan(number) or math.isinf(number) else number
    match = _LEADING_NUMBER.match(str(value))
    if not match:
        return None
    try:
        number = float(match.group(0))
    except ValueError:
        return None
    return None if math.isinf(number) else number


def clamp(value: float, low: float, high: float) -> float:
    """Clamp value into the closed interval [low, high]."""
    return max(low, min(high, value))
