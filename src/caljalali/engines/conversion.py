"""
caljalali.engines.conversion
----------------------------
Gregorian <-> Jalali date mapping through a day count anchored at
Gregorian 1600-01-01 (day 0) and Jalali 979-01-01 (Gregorian day 79).

Both directions peel the day count into fixed blocks:
  Gregorian: 146097 (400y), 36524 (100y), 1461 (4y), 365 (1y)
  Jalali:    12053 (33y),   1461 (4y),   365 (1y)
then walk the month-length table.
"""

from __future__ import annotations

from typing import Tuple

from .arithmetic_year import (
    CYCLE_DAYS,
    GREGORIAN_DAYS_IN_MONTH,
    JALALI_DAYS_IN_MONTH,
    is_leap_gregorian_year,
)

GREGORIAN_EPOCH_YEAR = 1600
JALALI_EPOCH_YEAR = 979
# Days from 1600-01-01 to 979-01-01 (Jalali), i.e. to 1600-03-20.
EPOCH_OFFSET_DAYS = 79

YMD = Tuple[int, int, int]


def gregorian_day_number(g_year: int, g_month: int, g_day: int) -> int:
    gy = g_year - GREGORIAN_EPOCH_YEAR
    gm = g_month - 1
    gd = g_day - 1

    n = 365 * gy + (gy + 3) // 4 - (gy + 99) // 100 + (gy + 399) // 400
    n += sum(GREGORIAN_DAYS_IN_MONTH[:gm])
    if gm > 1 and is_leap_gregorian_year(g_year):
        n += 1  # leap and after Feb
    return n + gd


def jalali_day_number(j_year: int, j_month: int, j_day: int) -> int:
    jy = j_year - JALALI_EPOCH_YEAR
    jm = j_month - 1
    jd = j_day - 1

    n = 365 * jy + (jy // 33) * 8 + (jy % 33 + 3) // 4
    n += sum(JALALI_DAYS_IN_MONTH[:jm])
    return n + jd


def gregorian_to_jalali(g_year: int, g_month: int, g_day: int) -> YMD:
    j_no = gregorian_day_number(g_year, g_month, g_day) - EPOCH_OFFSET_DAYS

    j_np, j_no = divmod(j_no, CYCLE_DAYS)
    j_year = JALALI_EPOCH_YEAR + 33 * j_np + 4 * (j_no // 1461)
    j_no %= 1461

    if j_no >= 366:
        j_year += (j_no - 1) // 365
        j_no = (j_no - 1) % 365

    i = 0
    while i < 11 and j_no >= JALALI_DAYS_IN_MONTH[i]:
        j_no -= JALALI_DAYS_IN_MONTH[i]
        i += 1
    return j_year, i + 1, j_no + 1


def jalali_to_gregorian(j_year: int, j_month: int, j_day: int) -> YMD:
    g_no = jalali_day_number(j_year, j_month, j_day) + EPOCH_OFFSET_DAYS

    gy = GREGORIAN_EPOCH_YEAR + 400 * (g_no // 146097)
    g_no %= 146097

    leap = True
    if g_no >= 36525:
        g_no -= 1
        gy += 100 * (g_no // 36524)
        g_no %= 36524
        if g_no >= 365:
            g_no += 1
        else:
            leap = False

    gy += 4 * (g_no // 1461)
    g_no %= 1461

    if g_no >= 366:
        leap = False
        g_no -= 1
        gy += g_no // 365
        g_no %= 365

    i = 0
    while True:
        length = GREGORIAN_DAYS_IN_MONTH[i] + (1 if i == 1 and leap else 0)
        if g_no < length:
            break
        g_no -= length
        i += 1
    return gy, i + 1, g_no + 1
