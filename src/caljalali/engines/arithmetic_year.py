"""
caljalali.engines.arithmetic_year
---------------------------------
Year-level arithmetic of the Jalali calendar: the 33-year leap cycle and the
fixed month-length tables shared by the conversion engine.
"""

from __future__ import annotations

from typing import FrozenSet, Tuple

GREGORIAN_DAYS_IN_MONTH: Tuple[int, ...] = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
JALALI_DAYS_IN_MONTH: Tuple[int, ...] = (31, 31, 31, 31, 31, 31, 30, 30, 30, 30, 30, 29)

# Remainders of year mod 33 that are leap years. This table is the rule.
LEAP_REMAINDERS: FrozenSet[int] = frozenset({1, 5, 9, 13, 17, 22, 26, 30})

CYCLE_YEARS = 33
CYCLE_DAYS = 33 * 365 + 8  # 12053


def is_leap_jalali_year(year: int) -> bool:
    return (year % CYCLE_YEARS) in LEAP_REMAINDERS


def is_leap_gregorian_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    """Length of a Jalali month; 0 for a month outside 1..12."""
    if month < 1 or month > 12:
        return 0
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_leap_jalali_year(year) else 29


def is_valid_jalali_date(year: int, month: int, day: int) -> bool:
    if year < 1 or month < 1 or month > 12 or day < 1:
        return False
    return day <= days_in_month(year, month)


def day_of_year(month: int, day: int) -> int:
    """1-based ordinal of (month, day) within its Jalali year."""
    return sum(JALALI_DAYS_IN_MONTH[: month - 1]) + day
