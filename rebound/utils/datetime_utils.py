"""Date and time utilities."""

import math
from datetime import date, datetime, timezone
from typing import Union

DateLike = Union[date, datetime]


def to_date(value: DateLike) -> date:
    """Reduce a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def to_datetime(value: DateLike) -> datetime:
    """Promote a date to midnight of that day; datetimes pass through."""
    if isinstance(value, datetime):
        return value
    return datetime.combine(value, datetime.min.time())


def calendar_days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier).

    Time of day is ignored: anything due later today is 0 days away.
    """
    return (to_date(end) - to_date(start)).days


def parse_date(value: Union[str, DateLike]) -> DateLike:
    """Parse an ISO-8601 date or datetime string."""
    if isinstance(value, (date, datetime)):
        return value
    if not isinstance(value, str):
        raise TypeError(f"Expected an ISO-8601 string, date or datetime, got {type(value).__name__}")
    text = value.strip()
    if text.endswith('Z'):
        text = text[:-1] + '+00:00'
    if 'T' in text or ' ' in text:
        parsed = datetime.fromisoformat(text)
        if parsed.tzinfo is not None:
            # Stored as naive UTC so it compares with naive reference times
            parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
        return parsed
    return date.fromisoformat(text)


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from zero for positive values."""
    return int(math.floor(value + 0.5))
