"""
Lenient parsing of record ids.

Clients send ids as path segments and as ``userId`` in JSON bodies,
sometimes as numbers and sometimes as strings.  ``parse_leading_int``
reads the leading run of digits (``"12abc"`` is 12) and returns
``None`` for anything that does not start with one.  Booleans are
never ids.
"""

import math
import re
from typing import Any, Optional


_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")


def parse_leading_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    if isinstance(value, str):
        match = _LEADING_INT.match(value)
        if match:
            return int(match.group(1))
    return None


def is_blank(value: Any) -> bool:
    """True for the values a request may use to leave a field out."""
    if value is None or value is False or value == "":
        return True
    return isinstance(value, (int, float)) and value == 0
