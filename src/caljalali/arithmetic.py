"""
caljalali.arithmetic
--------------------
Two families of date arithmetic:

Instant-based (``add``, ``add_days``, ``sub``, ``days_between``): go through
the absolute timeline, so zone-offset changes are reflected. ``add_days(n)``
adds n * 24h of elapsed time; across an offset change the wall clock shifts.

Field-based (``add_years``, ``add_months``, ``add_jalali_duration``): edit the
year/month/day fields and normalise them; the absolute instant is never
consulted. Results that would fall outside years 1..9999 are returned as
``None``.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Optional

from .core.time import NANOS_PER_DAY, NANOS_PER_SECOND, SECONDS_PER_DAY
from .core.types import JalaliDuration
from .engines.arithmetic_year import days_in_month, is_leap_jalali_year
from .instant import MAX_YEAR, MIN_YEAR, JalaliDateTime


def timedelta_nanoseconds(d: timedelta) -> int:
    return (d.days * SECONDS_PER_DAY + d.seconds) * NANOS_PER_SECOND + d.microseconds * 1000


def _with_fields(t: JalaliDateTime, year: int, month: int, day: int) -> Optional[JalaliDateTime]:
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    return JalaliDateTime(year, month, day, t.hour, t.minute, t.second, t.nanosecond, t.tz)


# ============================================================
# Instant-based
# ============================================================

def add_nanoseconds(t: JalaliDateTime, ns: int) -> JalaliDateTime:
    return JalaliDateTime.from_unix_nanoseconds(t.unix_nanoseconds() + ns, t.tz)


def add(t: JalaliDateTime, d: timedelta) -> JalaliDateTime:
    return add_nanoseconds(t, timedelta_nanoseconds(d))


def add_days(t: JalaliDateTime, n: int) -> JalaliDateTime:
    return add_nanoseconds(t, n * NANOS_PER_DAY)


def sub(t: JalaliDateTime, u: JalaliDateTime) -> timedelta:
    """Elapsed time t - u (microsecond resolution)."""
    ns = t.unix_nanoseconds() - u.unix_nanoseconds()
    return timedelta(microseconds=ns // 1000)


def days_between(t: JalaliDateTime, u: JalaliDateTime) -> int:
    """Whole days between the two instants, regardless of order."""
    if u.before(t):
        t, u = u, t
    return (u.unix_seconds() - t.unix_seconds()) // SECONDS_PER_DAY


def days_until(t: JalaliDateTime, target: JalaliDateTime) -> int:
    """Signed whole days from t to target, truncated toward zero (wall-clock Julian dates)."""
    return int(target.julian_date() - t.julian_date())


# ============================================================
# Field-based
# ============================================================

def add_years(t: JalaliDateTime, n: int) -> Optional[JalaliDateTime]:
    # Only Esfand 30 of a leap year is clamped, whatever the target year.
    day = t.day
    if is_leap_jalali_year(t.year) and t.month == 12 and t.day == 30:
        day = 29
    return _with_fields(t, t.year + n, t.month, day)


def add_months(t: JalaliDateTime, n: int) -> Optional[JalaliDateTime]:
    year, month0 = divmod(t.year * 12 + (t.month - 1) + n, 12)
    month = month0 + 1
    if not MIN_YEAR <= year <= MAX_YEAR:
        return None
    return _with_fields(t, year, month, min(t.day, days_in_month(year, month)))


def add_date(t: JalaliDateTime, years: int, months: int, days: int) -> Optional[JalaliDateTime]:
    """add_years, then add_months, then add_days; order matters."""
    out = add_years(t, years)
    if out is None:
        return None
    out = add_months(out, months)
    if out is None:
        return None
    return add_days(out, days)


def add_jalali_duration(t: JalaliDateTime, d: JalaliDuration) -> Optional[JalaliDateTime]:
    year = t.year + d.years
    month = t.month + d.months
    day = t.day + d.days

    while month > 12:
        year += 1
        month -= 12
    while month < 1:
        year -= 1
        month += 12

    # Month lengths differ, so the day is walked one month at a time.
    max_days = days_in_month(year, month)
    while day > max_days:
        day -= max_days
        month += 1
        if month > 12:
            year += 1
            month = 1
        max_days = days_in_month(year, month)

    while day < 1:
        month -= 1
        if month < 1:
            year -= 1
            month = 12
        day += days_in_month(year, month)

    return _with_fields(t, year, month, day)


def sub_jalali_duration(t: JalaliDateTime, d: JalaliDuration) -> Optional[JalaliDateTime]:
    return add_jalali_duration(t, -d)
