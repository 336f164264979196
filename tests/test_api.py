# tests/test_api.py

from datetime import date, timezone

import pytest

import caljalali
from caljalali import JalaliDuration, Month, ValidationError, Weekday


def test_month_days():
    days = caljalali.month_days(1399, 12)
    assert len(days) == 30
    assert days[0].day == 1 and days[-1].day == 30
    assert all(t.hour == 0 and t.tz is timezone.utc for t in days)
    assert len(caljalali.month_days(1400, 12)) == 29


def test_nowruz_and_gregorian_dates():
    assert caljalali.nowruz(1402) == date(2023, 3, 21)
    assert caljalali.nowruz(1400) == date(2021, 3, 21)
    assert caljalali.to_gregorian_date(1401, 10, 11) == date(2023, 1, 1)


def test_tehran_zone():
    assert caljalali.tehran().key == "Asia/Tehran"
    assert caljalali.irst().key == "Asia/Tehran"


def test_is_valid_jalali_date():
    assert caljalali.is_valid_jalali_date(1399, 12, 30)
    assert not caljalali.is_valid_jalali_date(1400, 12, 30)
    assert not caljalali.is_valid_jalali_date(0, 1, 1)
    assert not caljalali.is_valid_jalali_date(1400, 0, 1)


def test_month_names():
    assert str(Month.TIR) == "Tir"
    assert Month.MEHR.fa_name == "مهر"
    assert Month.from_name("mehr") is Month.MEHR
    assert Month.from_name("اسفند") is Month.ESFAND
    with pytest.raises(ValidationError) as exc:
        Month.from_name("January")
    assert exc.value.field == "month"


def test_weekday_from_python():
    # date.weekday(): Monday is 0
    assert Weekday.from_python_weekday(0) is Weekday.DOSHANBE
    assert Weekday.from_python_weekday(5) is Weekday.SHANBE
    assert Weekday.from_python_weekday(6) is Weekday.YEKSHANBE
    assert Weekday.JOOMEH.en_name == "Joomeh"


def test_duration_negation():
    assert -JalaliDuration(1, -2, 3) == JalaliDuration(-1, 2, -3)
