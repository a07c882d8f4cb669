"""Lenient parsing of date, duration and number strings produced by the upstream parser."""

import re
from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import TypeAdapter, ValidationError

_DATETIME = TypeAdapter(datetime)
_DURATION = TypeAdapter(timedelta)

# W3CDTF reduced precision: "2021", "2021-06"
_YEAR_MONTH = re.compile(r"^(\d{4})(?:-(\d{2}))?$")
_NUMBER = re.compile(r"^[+-]?\d+(?:\.\d+)?$")
_EPOCH_MILLIS_MIN_DIGITS = 10


def parse_datetime(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a date string the way the upstream parser tends to emit them.

    Accepted forms, tried in order:
    - epoch milliseconds, 10 digits or more ("1609459200000")
    - W3CDTF year or year-month ("2021", "2021-06"), taken as the first day
    - ISO-8601 date-time ("2021-01-01T00:00:00Z", with or without offset)
    - ISO-8601 date ("2021-01-01"), taken as midnight

    Any other bare number is rejected. Values without an offset are taken as UTC.

    Args:
        value: Raw string value (may be None or blank)

    Returns:
        Parsed datetime, or None when the value is absent or unparseable
    """
    if value is None:
        return None
    text = value.strip()
    if not text:
        return None

    if text.isdigit() and len(text) >= _EPOCH_MILLIS_MIN_DIGITS:
        try:
            return datetime.fromtimestamp(int(text) / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    match = _YEAR_MONTH.match(text)
    if match:
        year, month = match.groups()
        try:
            return datetime(int(year), int(month or 1), 1, tzinfo=timezone.utc)
        except ValueError:
            return None

    if _NUMBER.match(text):
        return None

    try:
        parsed = _DATETIME.validate_python(text)
    except ValidationError:
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def parse_duration_seconds(value: Optional[str]) -> Optional[int]:
    """Parse an ISO-8601 duration ("PT2H3M24S") or a plain number of seconds."""
    if value is None or not value.strip():
        return None
    text = value.strip()
    if text.isdigit():
        return int(text)
    if not text.upper().startswith("P"):
        return None
    try:
        return int(_DURATION.validate_python(text).total_seconds())
    except ValidationError:
        return None


def parse_bool(value: str) -> bool:
    """Truthy strings used by the upstream parser: true, yes, 1."""
    return value.strip().lower() in ("true", "yes", "1")


def parse_marked(value: Optional[str]) -> Optional[bool]:
    """xmpRights:Marked flag: "true" in any case is True, any other string False, None stays None."""
    if value is None:
        return None
    return value.strip().lower() == "true"
