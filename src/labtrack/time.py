# SPDX-License-Identifier: MIT

import datetime
import re
from typing import Optional, cast

import pendulum

from labtrack.error import InvalidDate

_CALENDAR_DATE_RE = re.compile(r"^(\d{4})-(\d{2})-(\d{2})$")


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    """Current calendar date in the local timezone, with no time component."""
    return pendulum.today("local").date()


def to_calendar_date(value: datetime.date) -> pendulum.Date:
    """Drop any time-of-day component and return a pendulum.Date."""
    if isinstance(value, datetime.datetime):
        value = value.date()
    return pendulum.date(value.year, value.month, value.day)


def date_from_str(date_str: object) -> pendulum.Date:
    """
    Parse a 'YYYY-MM-DD' string into a pendulum.Date.

    Raises:
        InvalidDate: if the value is not a string in that format or names a
            day that does not exist (e.g. 2023-02-29)
    """
    if not isinstance(date_str, str):
        raise InvalidDate(date_str)

    match = _CALENDAR_DATE_RE.match(date_str.strip())
    if match is None:
        raise InvalidDate(date_str)

    year, month, day = (int(part) for part in match.groups())
    try:
        return pendulum.date(year, month, day)
    except ValueError:
        raise InvalidDate(date_str) from None


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def date_to_str(date: datetime.date) -> str:
    return date.isoformat()


def date_to_str_optional(date: Optional[datetime.date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def add_days(date: pendulum.Date, days: int) -> pendulum.Date:
    """Calendar-day arithmetic; raises InvalidDate past the representable range."""
    try:
        return date.add(days=days)
    except (OverflowError, ValueError):
        raise InvalidDate(
            date_to_str(date), f"out of range when shifted by {days} days"
        ) from None


def days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    """Signed number of calendar days from start to end."""
    return start.diff(end, False).in_days()


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_date_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("YYYY-MM-DD ddd")


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")
