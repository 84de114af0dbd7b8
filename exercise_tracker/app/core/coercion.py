"""
Helpers that turn loosely typed request values into typed ones.

Form posts deliver every value as text, so durations and limits are
parsed with "leading integer" semantics: surrounding whitespace is
ignored, an optional sign is honoured and anything after the digits is
dropped (``"45 min"`` -> ``45``).  Values without leading digits are
not numbers at all.
"""

import re
from typing import Any, Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")
_OBJECT_ID = re.compile(r"^[0-9a-fA-F]{24}$")

# Range of a SQLite INTEGER column.
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


def parse_int(value: Any) -> Optional[int]:
    """Return the leading integer of ``value`` or ``None``.

    Booleans are rejected; floats are truncated toward zero.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if value != value or value in (float("inf"), float("-inf")):
            return None
        return int(value)
    match = _LEADING_INT.match(str(value))
    if not match:
        return None
    return int(match.group(1))


def fits_int64(value: int) -> bool:
    return INT64_MIN <= value <= INT64_MAX


def is_positive_integer(value: Optional[int]) -> bool:
    return value is not None and value > 0


def parse_limit(raw: Any) -> Optional[int]:
    """Parse a ``limit`` query value; anything not positive becomes ``None``."""
    value = parse_int(raw)
    return value if is_positive_integer(value) else None


def is_valid_id(value: Any) -> bool:
    """Check that ``value`` has the shape of a user identifier."""
    return isinstance(value, str) and bool(_OBJECT_ID.match(value))
