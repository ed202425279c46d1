"""
Optional-number parsing for string-typed block attributes.
Invalid or absent values come back as None so callers omit the field.
"""

import math
import re
from typing import Any, Optional

# Decimal with optional sign, fraction and exponent. No hex, no nan/inf, no underscores.
NUMERIC_RE = re.compile(r"^\s*[+-]?(\d+(\.\d*)?|\.\d+)([eE][+-]?\d+)?\s*$")


def parse_number(value: Any) -> Optional[float]:
    """Return value as a finite float, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        if not NUMERIC_RE.match(value):
            return None
        number = float(value)
    else:
        return None
    if not math.isfinite(number):
        return None
    return number


def parse_count(value: Any) -> Optional[int]:
    """Numeric value truncated toward zero ("2.7" -> 2), or None."""
    number = parse_number(value)
    if number is None:
        return None
    return int(number)
