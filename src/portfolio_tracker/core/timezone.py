"""Time utilities: UTC clock and lenient date parsing."""

from datetime import date, datetime
from typing import Optional, Union

import pytz
from dateutil import parser as date_parser

UTC = pytz.UTC


def now_utc() -> datetime:
    """Return the current time as an aware UTC datetime."""
    return datetime.now(UTC)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC, treating naive values as already UTC."""
    if dt.tzinfo is None:
        return UTC.localize(dt)
    return dt.astimezone(UTC)


def to_epoch_millis(dt: datetime) -> int:
    """Milliseconds since the Unix epoch for a datetime."""
    return int(to_utc(dt).timestamp() * 1000)


def from_epoch_seconds(seconds: Union[int, float]) -> datetime:
    """Aware UTC datetime for a Unix timestamp in seconds."""
    return datetime.fromtimestamp(seconds, UTC)


def parse_date(value: Union[str, date, datetime, None]) -> Optional[date]:
    """
    Parse a calendar date from loose input.

    Accepts ISO strings ("2024-01-15"), full timestamps
    ("2024-01-15T00:00:00.000Z") and date/datetime objects. Empty input
    yields None.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date_parser.parse(value).date()
