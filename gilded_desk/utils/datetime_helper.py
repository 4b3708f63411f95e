"""Timestamp helpers shared by the collections"""
import time
from datetime import datetime, timezone
from typing import Optional


def now_iso() -> str:
    """
    Current UTC time as an ISO-8601 string

    Returns:
        str: e.g. "2025-10-14T10:30:00.123Z" (millisecond precision, Z suffix)
    """
    now = datetime.now(timezone.utc)
    return now.isoformat(timespec="milliseconds").replace("+00:00", "Z")


def now_ms() -> int:
    """Milliseconds since the epoch"""
    return int(time.time() * 1000)


def parse_timestamp(value) -> Optional[datetime]:
    """
    Parse a stored timestamp into an aware datetime

    Accepts ISO-8601 strings (with or without a trailing Z) and epoch
    milliseconds. Returns None when the value cannot be interpreted.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    if not isinstance(value, str):
        return None

    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"

    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None

    # Naive timestamps are treated as UTC
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt


_OLDEST = datetime.min.replace(tzinfo=timezone.utc)


def newest_first(records: list, key: str = "createdAt") -> list:
    """
    Sort records by a timestamp field, newest first

    Python's sort is stable with reverse=True, so records with equal
    timestamps keep their insertion order. Unparseable timestamps sort last.
    """
    return sorted(
        records,
        key=lambda record: parse_timestamp(record.get(key)) or _OLDEST,
        reverse=True,
    )
