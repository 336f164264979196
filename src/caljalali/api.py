from __future__ import annotations

from datetime import date, datetime
from typing import List, Optional

from .core.time import julian_day_number
from .core.types import Month
from .core.zones import ZoneLike, irst, tehran
from .engines.arithmetic_year import days_in_month, is_leap_jalali_year, is_valid_jalali_date
from .engines.conversion import gregorian_to_jalali, jalali_to_gregorian
from .formatting import parse, parse_in_location
from .instant import Clock, JalaliDateTime


def jalali_date(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
    tz: ZoneLike = None,
) -> JalaliDateTime:
    """Validated constructor; raises ValidationError on any out-of-range field."""
    return JalaliDateTime(year, month, day, hour, minute, second, nanosecond, tz)


def now(tz: ZoneLike = None, *, clock: Optional[Clock] = None) -> JalaliDateTime:
    return JalaliDateTime.now(tz, clock=clock)


def to_jalali(dt: datetime) -> JalaliDateTime:
    return JalaliDateTime.from_gregorian(dt)


def to_gregorian_date(year: int, month: int, day: int) -> date:
    gy, gm, gd = jalali_to_gregorian(year, month, day)
    return date(gy, gm, gd)


def month_days(year: int, month: int) -> List[JalaliDateTime]:
    """Every day of a Jalali month at midnight UTC."""
    return [JalaliDateTime(year, month, d, tz="UTC") for d in range(1, days_in_month(year, month) + 1)]


def nowruz(year: int) -> date:
    """Gregorian date of 1 Farvardin of a Jalali year."""
    return to_gregorian_date(year, Month.FARVARDIN, 1)


__all__ = [
    "days_in_month",
    "gregorian_to_jalali",
    "irst",
    "is_leap_jalali_year",
    "is_valid_jalali_date",
    "jalali_date",
    "jalali_to_gregorian",
    "julian_day_number",
    "month_days",
    "now",
    "nowruz",
    "parse",
    "parse_in_location",
    "tehran",
    "to_gregorian_date",
    "to_jalali",
]
