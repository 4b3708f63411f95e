"""Record id helpers"""
import re
from typing import Optional

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def parse_record_id(value: str) -> Optional[int]:
    """
    Read the integer id from a path segment

    Uses leading-integer semantics: "42abc" is 42. Returns None when the
    segment does not start with a number, in which case no record matches.
    """
    match = _LEADING_INT.match(value)
    if not match:
        return None
    return int(match.group(1))
