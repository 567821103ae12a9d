# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, Protocol, cast

import pendulum


class Clock(Protocol):
    def now(self) -> pendulum.DateTime: ...

    def today(self) -> pendulum.Date: ...


class SystemClock:
    """Wall clock. Timestamps are UTC, calendar days are local."""

    def now(self) -> pendulum.DateTime:
        return now_utc()

    def today(self) -> pendulum.Date:
        return today_local()


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def today_local() -> pendulum.Date:
    return pendulum.today("local").date()


def minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> int:
    """Whole minutes from start to end, truncated and floored at zero."""
    seconds = (end - start).total_seconds()
    if seconds <= 0:
        return 0
    return int(seconds // 60)


def whole_days_between(start: pendulum.Date, end: pendulum.Date) -> int:
    if not isinstance(start, datetime.date) or not isinstance(end, datetime.date):
        raise TypeError(f"expected dates, got {start!r} and {end!r}")
    return (end - start).days


def python_to_pendulum_utc(python_value: datetime.datetime) -> pendulum.DateTime:
    pendulum_value = pendulum.instance(python_value, tz="local")
    return pendulum_value.in_tz("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_to_iso_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_iso_str(datetime)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_str_optional(datetime: Optional[str]) -> Optional[pendulum.DateTime]:
    if datetime is None:
        return None
    return datetime_from_str(datetime)


def date_to_str(date: pendulum.Date) -> str:
    return date.isoformat()


def date_to_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_str(date)


def date_from_str(date_str: str | datetime.date) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string. The YAML loader may already hand back a date."""
    if isinstance(date_str, datetime.date):
        return pendulum.date(date_str.year, date_str.month, date_str.day)
    parsed = pendulum.parse(date_str, exact=True)
    if isinstance(parsed, pendulum.DateTime):
        return parsed.date()
    if not isinstance(parsed, pendulum.Date):
        raise ValueError(f"not a calendar date: {date_str!r}")
    return parsed


def date_from_str_optional(
    date_str: Optional[str | datetime.date],
) -> Optional[pendulum.Date]:
    if date_str is None:
        return None
    return date_from_str(date_str)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> Optional[str]:
    if datetime is None:
        return None
    return datetime_to_display_local_datetime_str(datetime)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> Optional[str]:
    if date is None:
        return None
    return date_to_display_str(date)


def minutes_to_display_str(minutes: int) -> str:
    hours, remainder = divmod(max(0, minutes), 60)
    if hours > 0:
        return f"{hours}h {remainder}m"
    return f"{remainder}m"
