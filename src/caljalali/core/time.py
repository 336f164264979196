from __future__ import annotations

import math
from typing import Tuple

from .errors import ValidationError

# JDN of 1970-01-01 (Unix epoch)
JDN_UNIX_EPOCH = 2440588
SECONDS_PER_DAY = 86400
NANOS_PER_SECOND = 1_000_000_000
NANOS_PER_DAY = SECONDS_PER_DAY * NANOS_PER_SECOND


def ymd_to_jdn(y: int, m: int, day: int) -> int:
    """Gregorian (y, m, d) -> JDN, without going through ``date`` (no year limits)."""
    a = (14 - m) // 12
    y2 = y + 4800 - a
    m2 = m + 12 * a - 3
    return day + (153 * m2 + 2) // 5 + 365 * y2 + y2 // 4 - y2 // 100 + y2 // 400 - 32045


def jdn_to_ymd(jdn: int) -> Tuple[int, int, int]:
    """Fliegel-Van Flandern inverse of ymd_to_jdn (Gregorian, no year limits)."""
    a = jdn + 32044
    b = (4 * a + 3) // 146097
    c = a - (146097 * b) // 4
    d = (4 * c + 3) // 1461
    e = c - (1461 * d) // 4
    m = (5 * e + 2) // 153
    day = e - (153 * m + 2) // 5 + 1
    month = m + 3 - 12 * (m // 10)
    year = 100 * b + d - 4800 + (m // 10)
    return year, month, day


def julian_day_number(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: int = 0,
    nanosecond: int = 0,
) -> float:
    """
    Fractional Julian date of a proleptic-Gregorian wall-clock reading.

    Each field is checked on its own; day is only bounded by 1..31, not by
    the length of the month.
    """
    if year < -4712:
        raise ValidationError("year", year, ">= -4712")
    if not 1 <= month <= 12:
        raise ValidationError("month", month, "between 1 and 12")
    if not 1 <= day <= 31:
        raise ValidationError("day", day, "between 1 and 31")
    if not 0 <= hour <= 23:
        raise ValidationError("hour", hour, "between 0 and 23")
    if not 0 <= minute <= 59:
        raise ValidationError("minute", minute, "between 0 and 59")
    if not 0 <= second <= 59:
        raise ValidationError("second", second, "between 0 and 59")
    if not 0 <= nanosecond <= 999_999_999:
        raise ValidationError("nanosecond", nanosecond, "between 0 and 999999999")

    if month <= 2:
        year -= 1
        month += 12
    a = math.floor(year / 100)
    b = 2 - a + math.floor(a / 4)
    jdn = math.floor(365.25 * (year + 4716)) + math.floor(30.6001 * (month + 1)) + day + b - 1524.5

    fraction = (
        hour / 24
        + minute / (24 * 60)
        + second / (24 * 60 * 60)
        + nanosecond / (24 * 60 * 60 * 1e9)
    )
    return jdn + fraction


def wall_clock_nanoseconds(y: int, m: int, d: int, hour: int, minute: int, second: int, nanosecond: int) -> int:
    """Nanoseconds since 1970-01-01T00:00 of a Gregorian wall-clock reading, ignoring zones."""
    days = ymd_to_jdn(y, m, d) - JDN_UNIX_EPOCH
    seconds = days * SECONDS_PER_DAY + hour * 3600 + minute * 60 + second
    return seconds * NANOS_PER_SECOND + nanosecond
