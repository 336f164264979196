from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Dict

from .errors import ValidationError


class Month(IntEnum):
    FARVARDIN = 1
    ORDIBEHESHT = 2
    KHORDAD = 3
    TIR = 4
    MORDAD = 5
    SHAHRIVAR = 6
    MEHR = 7
    ABAN = 8
    AZAR = 9
    DEY = 10
    BAHMAN = 11
    ESFAND = 12

    @property
    def en_name(self) -> str:
        return MONTH_NAMES_EN[self]

    @property
    def fa_name(self) -> str:
        return MONTH_NAMES_FA[self]

    @classmethod
    def from_name(cls, name: str) -> "Month":
        """Reverse lookup from an English transliteration or a Persian name."""
        key = name.strip()
        for m, en in MONTH_NAMES_EN.items():
            if en.lower() == key.lower() or MONTH_NAMES_FA[m] == key:
                return m
        raise ValidationError("month", name, "a Jalali month name")

    def __str__(self) -> str:
        return self.en_name


class Weekday(IntEnum):
    """Day of the week; index 0 is Sunday (Yekshanbe)."""
    YEKSHANBE = 0
    DOSHANBE = 1
    SESHANBE = 2
    CHAHARSHANBE = 3
    PANJSHANBE = 4
    JOOMEH = 5
    SHANBE = 6

    @property
    def en_name(self) -> str:
        return WEEKDAY_NAMES_EN[self]

    @property
    def fa_name(self) -> str:
        return WEEKDAY_NAMES_FA[self]

    @classmethod
    def from_python_weekday(cls, wd: int) -> "Weekday":
        """Map ``date.weekday()`` (Monday=0) onto the Sunday-first index."""
        return cls((wd + 1) % 7)

    def __str__(self) -> str:
        return self.en_name


MONTH_NAMES_EN: Dict[Month, str] = {
    Month.FARVARDIN: "Farvardin",
    Month.ORDIBEHESHT: "Ordibehesht",
    Month.KHORDAD: "Khordad",
    Month.TIR: "Tir",
    Month.MORDAD: "Mordad",
    Month.SHAHRIVAR: "Shahrivar",
    Month.MEHR: "Mehr",
    Month.ABAN: "Aban",
    Month.AZAR: "Azar",
    Month.DEY: "Dey",
    Month.BAHMAN: "Bahman",
    Month.ESFAND: "Esfand",
}

MONTH_NAMES_FA: Dict[Month, str] = {
    Month.FARVARDIN: "فروردین",
    Month.ORDIBEHESHT: "اردیبهشت",
    Month.KHORDAD: "خرداد",
    Month.TIR: "تیر",
    Month.MORDAD: "مرداد",
    Month.SHAHRIVAR: "شهریور",
    Month.MEHR: "مهر",
    Month.ABAN: "آبان",
    Month.AZAR: "آذر",
    Month.DEY: "دی",
    Month.BAHMAN: "بهمن",
    Month.ESFAND: "اسفند",
}

WEEKDAY_NAMES_EN: Dict[Weekday, str] = {
    Weekday.YEKSHANBE: "1Shanbeh",
    Weekday.DOSHANBE: "2Shanbeh",
    Weekday.SESHANBE: "3Shanbeh",
    Weekday.CHAHARSHANBE: "4Shanbeh",
    Weekday.PANJSHANBE: "5Shanbeh",
    Weekday.JOOMEH: "Joomeh",
    Weekday.SHANBE: "Shanbeh",
}

WEEKDAY_NAMES_FA: Dict[Weekday, str] = {
    Weekday.YEKSHANBE: "یکشنبه",
    Weekday.DOSHANBE: "دوشنبه",
    Weekday.SESHANBE: "سه‌شنبه",
    Weekday.CHAHARSHANBE: "چهارشنبه",
    Weekday.PANJSHANBE: "پنج‌شنبه",
    Weekday.JOOMEH: "جمعه",
    Weekday.SHANBE: "شنبه",
}


@dataclass(frozen=True)
class JalaliDuration:
    """Calendar-relative offset. Only meaningful when applied to a date."""
    years: int = 0
    months: int = 0
    days: int = 0

    def __neg__(self) -> "JalaliDuration":
        return JalaliDuration(-self.years, -self.months, -self.days)
