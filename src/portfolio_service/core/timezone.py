"""Timezone utilities. Trading dates are keyed by their UTC start of day."""

from datetime import date, datetime
from typing import Union

import pytz
from dateutil import parser as date_parser

UTC_TZ = pytz.UTC


def now_utc() -> datetime:
    """Return current time in UTC."""
    return datetime.now(UTC_TZ)


def to_utc(dt: datetime) -> datetime:
    """Convert a datetime to UTC."""
    if dt.tzinfo is None:
        # Assume naive datetime is already UTC
        return UTC_TZ.localize(dt)
    return dt.astimezone(UTC_TZ)


def utc_start_of_day(value: Union[datetime, date]) -> datetime:
    """
    Return midnight UTC of the calendar day `value` falls on (in UTC).

    A plain date is taken as a UTC calendar day.
    """
    if not isinstance(value, datetime):
        return UTC_TZ.localize(datetime(value.year, value.month, value.day))
    return to_utc(value).replace(hour=0, minute=0, second=0, microsecond=0)


def parse_datetime_utc(value: str) -> datetime:
    """
    Parse a date/datetime string and return it in UTC.

    If no timezone is provided in the string, assumes UTC.
    """
    return to_utc(date_parser.parse(value))
