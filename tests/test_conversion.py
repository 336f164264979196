# tests/test_conversion.py

import random
from datetime import date, timedelta

import pytest

from caljalali.core.time import jdn_to_ymd, ymd_to_jdn
from caljalali.engines.arithmetic_year import days_in_month, is_leap_jalali_year
from caljalali.engines.conversion import gregorian_to_jalali, jalali_to_gregorian


@pytest.mark.parametrize(
    "greg, jal",
    [
        ((2021, 3, 20), (1399, 12, 30)),
        ((2023, 3, 20), (1401, 12, 29)),
        ((2023, 3, 21), (1402, 1, 1)),
        ((2021, 7, 8), (1400, 4, 17)),
        ((2022, 1, 1), (1400, 10, 11)),
        ((2021, 1, 1), (1399, 10, 12)),
        ((2021, 3, 21), (1400, 1, 1)),
        ((2021, 4, 21), (1400, 2, 1)),
        ((2021, 5, 22), (1400, 3, 1)),
        ((2021, 2, 28), (1399, 12, 10)),
        ((2020, 12, 30), (1399, 10, 10)),
        ((2023, 1, 1), (1401, 10, 11)),
        ((1600, 3, 20), (979, 1, 1)),
        ((1600, 3, 19), (978, 12, 29)),
    ],
)
def test_known_dates(greg, jal):
    assert gregorian_to_jalali(*greg) == jal
    assert jalali_to_gregorian(*jal) == greg


def test_roundtrip_every_day_of_a_century():
    d = date(1950, 1, 1)
    end = date(2050, 12, 31)
    prev = gregorian_to_jalali(1949, 12, 31)
    while d <= end:
        j = gregorian_to_jalali(d.year, d.month, d.day)
        assert 1 <= j[2] <= days_in_month(j[0], j[1])
        assert jalali_to_gregorian(*j) == (d.year, d.month, d.day)
        # consecutive Gregorian days map to consecutive Jalali days
        if j[2] == 1:
            assert prev[2] == days_in_month(prev[0], prev[1])
        else:
            assert (j[0], j[1], j[2] - 1) == prev
        prev = j
        d += timedelta(days=1)


def test_roundtrip_random_wide_range():
    random.seed(42)
    # Gregorian 0700-01-01 .. 9999-12-31; covers dates before the 1600 anchor
    for _ in range(10000):
        jdn = random.randint(ymd_to_jdn(700, 1, 1), ymd_to_jdn(9999, 12, 31))
        g = jdn_to_ymd(jdn)
        assert jalali_to_gregorian(*gregorian_to_jalali(*g)) == g


def test_roundtrip_every_jalali_day_1390s():
    for y in range(1390, 1400):
        for m in range(1, 13):
            for d in range(1, days_in_month(y, m) + 1):
                assert gregorian_to_jalali(*jalali_to_gregorian(y, m, d)) == (y, m, d)


def test_year_lengths_follow_leap_rule():
    for y in range(1300, 1500):
        start = date(*jalali_to_gregorian(y, 1, 1))
        nxt = date(*jalali_to_gregorian(y + 1, 1, 1))
        assert (nxt - start).days == (366 if is_leap_jalali_year(y) else 365)


def test_leap_years():
    assert is_leap_jalali_year(1399)
    assert not is_leap_jalali_year(1400)
    assert not is_leap_jalali_year(-1)
    leaps = [y for y in range(1206, 1240) if is_leap_jalali_year(y)]
    assert leaps == [1210, 1214, 1218, 1222, 1226, 1230, 1234, 1238]
    assert sum(is_leap_jalali_year(y) for y in range(33)) == 8


def test_days_in_month():
    assert days_in_month(1399, 12) == 30
    assert days_in_month(1400, 12) == 29
    for m in range(1, 7):
        assert days_in_month(1400, m) == 31
    for m in range(7, 12):
        assert days_in_month(1400, m) == 30
    assert days_in_month(1410, 12) == 29


@pytest.mark.parametrize("month", [0, 13, -1, 100])
def test_days_in_month_out_of_range_is_zero(month):
    assert days_in_month(1400, month) == 0
