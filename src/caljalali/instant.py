"""
caljalali.instant
-----------------
The Jalali date-time value type.

A JalaliDateTime is a wall-clock reading (year, month, day, time of day) in a
zone. Conversions to and from ``datetime`` only relabel the date triple; the
time of day and the zone pass through unchanged. Absolute-time questions
(unix time, ordering, instant arithmetic) reinterpret the wall clock in the
carried zone.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone, tzinfo
from typing import Any, Callable, Optional, Tuple, Union

from .core.errors import ValidationError
from .core.time import (
    JDN_UNIX_EPOCH,
    NANOS_PER_SECOND,
    SECONDS_PER_DAY,
    jdn_to_ymd,
    julian_day_number,
    wall_clock_nanoseconds,
    ymd_to_jdn,
)
from .core.types import JalaliDuration, Month, Weekday
from .core.zones import ZoneLike, instant_offset, resolve_zone, wall_offset, zone_name
from .engines.arithmetic_year import day_of_year, days_in_month, is_leap_jalali_year
from .engines.conversion import gregorian_to_jalali, jalali_to_gregorian

MIN_YEAR = 1
MAX_YEAR = 9999

Clock = Callable[[tzinfo], datetime]


def _system_clock(tz: tzinfo) -> datetime:
    return datetime.now(tz)


@dataclass(frozen=True, eq=False)
class JalaliDateTime:
    year: int
    month: Month
    day: int
    hour: int = 0
    minute: int = 0
    second: int = 0
    nanosecond: int = 0
    tz: Any = field(default=None)

    def __post_init__(self) -> None:
        if not MIN_YEAR <= self.year <= MAX_YEAR:
            raise ValidationError("year", self.year, f"between {MIN_YEAR} and {MAX_YEAR}")
        if not 1 <= self.month <= 12:
            raise ValidationError("month", self.month, "between 1 and 12")
        dim = days_in_month(self.year, self.month)
        if not 1 <= self.day <= dim:
            raise ValidationError("day", self.day, f"between 1 and {dim}")
        if not 0 <= self.hour <= 23:
            raise ValidationError("hour", self.hour, "between 0 and 23")
        if not 0 <= self.minute <= 59:
            raise ValidationError("minute", self.minute, "between 0 and 59")
        if not 0 <= self.second <= 59:
            raise ValidationError("second", self.second, "between 0 and 59")
        if not 0 <= self.nanosecond <= 999_999_999:
            raise ValidationError("nanosecond", self.nanosecond, "between 0 and 999999999")
        object.__setattr__(self, "month", Month(self.month))
        object.__setattr__(self, "tz", resolve_zone(self.tz))

    # ---------------------------------------------------------
    # Construction
    # ---------------------------------------------------------

    @classmethod
    def zero(cls) -> "JalaliDateTime":
        """The all-zero value. Not a date; only ``is_zero`` is meaningful on it."""
        obj = cls.__new__(cls)
        for name in ("year", "month", "day", "hour", "minute", "second", "nanosecond"):
            object.__setattr__(obj, name, 0)
        object.__setattr__(obj, "tz", None)
        return obj

    @classmethod
    def from_gregorian(cls, dt: datetime, *, nanosecond: Optional[int] = None) -> "JalaliDateTime":
        """Relabel a Gregorian ``datetime``; naive values get the default zone."""
        jy, jm, jd = gregorian_to_jalali(dt.year, dt.month, dt.day)
        ns = dt.microsecond * 1000 if nanosecond is None else nanosecond
        return cls(jy, jm, jd, dt.hour, dt.minute, dt.second, ns, dt.tzinfo)

    @classmethod
    def now(cls, tz: ZoneLike = None, *, clock: Optional[Clock] = None) -> "JalaliDateTime":
        zone = resolve_zone(tz)
        read = clock if clock is not None else _system_clock
        return cls.from_gregorian(read(zone))

    @classmethod
    def from_unix_nanoseconds(cls, ns: int, tz: ZoneLike = None) -> "JalaliDateTime":
        zone = resolve_zone(tz)
        seconds, rem = divmod(ns, NANOS_PER_SECOND)
        days, secs = divmod(seconds, SECONDS_PER_DAY)
        gy, gm, gd = jdn_to_ymd(JDN_UNIX_EPOCH + days)
        offset = instant_offset(zone, gy, gm, gd, secs // 3600, secs % 3600 // 60, secs % 60)

        days, secs = divmod(seconds + offset, SECONDS_PER_DAY)
        jy, jm, jd = gregorian_to_jalali(*jdn_to_ymd(JDN_UNIX_EPOCH + days))
        return cls(jy, jm, jd, secs // 3600, secs % 3600 // 60, secs % 60, rem, zone)

    def replace_zone(self, tz: ZoneLike) -> "JalaliDateTime":
        """Same wall clock, different zone label."""
        return JalaliDateTime(
            self.year, self.month, self.day,
            self.hour, self.minute, self.second, self.nanosecond,
            resolve_zone(tz),
        )

    def local(self) -> "JalaliDateTime":
        from .core.zones import local_zone
        return self.replace_zone(local_zone())

    def in_zone(self, tz: ZoneLike) -> "JalaliDateTime":
        """Same absolute instant, read on another zone's wall clock."""
        return JalaliDateTime.from_unix_nanoseconds(self.unix_nanoseconds(), tz)

    def utc(self) -> "JalaliDateTime":
        return self.in_zone(timezone.utc)

    # ---------------------------------------------------------
    # Gregorian view
    # ---------------------------------------------------------

    def gregorian_date(self) -> Tuple[int, int, int]:
        return jalali_to_gregorian(self.year, self.month, self.day)

    def to_gregorian(self) -> datetime:
        """
        The same wall clock as an aware Gregorian ``datetime``.
        Sub-microsecond digits are truncated. Raises ValidationError when the
        Gregorian date is past year 9999, where ``datetime`` ends.
        """
        if self.is_zero():
            raise ValidationError("year", 0, "a real date, not the zero value")
        gy, gm, gd = self.gregorian_date()
        try:
            return datetime(gy, gm, gd, self.hour, self.minute, self.second,
                            self.nanosecond // 1000, tzinfo=self.tz)
        except (ValueError, OverflowError) as exc:
            raise ValidationError("year", self.year, "within the datetime range once converted") from exc

    def zone(self) -> Tuple[str, int]:
        """(abbreviation, offset in seconds east of UTC) in effect at this wall clock."""
        if self.is_zero():
            raise ValidationError("year", 0, "a real date, not the zero value")
        return wall_offset(self.tz, *self.gregorian_date(), self.hour, self.minute, self.second)

    @property
    def location(self) -> tzinfo:
        return self.tz

    # ---------------------------------------------------------
    # Absolute time
    # ---------------------------------------------------------

    def unix_nanoseconds(self) -> int:
        gy, gm, gd = self.gregorian_date()
        wall = wall_clock_nanoseconds(gy, gm, gd, self.hour, self.minute, self.second, self.nanosecond)
        _, offset = self.zone()
        return wall - offset * NANOS_PER_SECOND

    def unix_seconds(self) -> int:
        return self.unix_nanoseconds() // NANOS_PER_SECOND

    def julian_date(self) -> float:
        """Fractional Julian date of the wall-clock reading (zone ignored)."""
        gy, gm, gd = self.gregorian_date()
        return julian_day_number(gy, gm, gd, self.hour, self.minute, self.second, self.nanosecond)

    # ---------------------------------------------------------
    # Comparison
    # ---------------------------------------------------------

    def before(self, other: "JalaliDateTime") -> bool:
        return self.unix_nanoseconds() < other.unix_nanoseconds()

    def after(self, other: "JalaliDateTime") -> bool:
        return self.unix_nanoseconds() > other.unix_nanoseconds()

    def equal(self, other: "JalaliDateTime") -> bool:
        """Field-wise equality including the zone identity, not just the instant."""
        return self._key() == other._key()

    def _key(self) -> Tuple[Any, ...]:
        return (
            int(self.year), int(self.month), int(self.day),
            self.hour, self.minute, self.second, self.nanosecond,
            zone_name(self.tz),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JalaliDateTime):
            return NotImplemented
        return self.equal(other)

    def __hash__(self) -> int:
        return hash(self._key())

    def __lt__(self, other: "JalaliDateTime") -> bool:
        return self.before(other)

    def __gt__(self, other: "JalaliDateTime") -> bool:
        return self.after(other)

    def __le__(self, other: "JalaliDateTime") -> bool:
        return not self.after(other)

    def __ge__(self, other: "JalaliDateTime") -> bool:
        return not self.before(other)

    # ---------------------------------------------------------
    # Derived views
    # ---------------------------------------------------------

    def is_zero(self) -> bool:
        return (
            self.year == 0 and self.month == 0 and self.day == 0
            and self.hour == 0 and self.minute == 0 and self.second == 0
            and self.nanosecond == 0
        )

    def is_leap_year(self) -> bool:
        return is_leap_jalali_year(self.year)

    def days_in_month(self) -> int:
        return days_in_month(self.year, self.month)

    def weekday(self) -> Weekday:
        return Weekday((ymd_to_jdn(*self.gregorian_date()) + 1) % 7)

    def year_day(self) -> int:
        return day_of_year(self.month, self.day)

    # ---------------------------------------------------------
    # Arithmetic (see caljalali.arithmetic)
    # ---------------------------------------------------------

    def add(self, d: timedelta) -> "JalaliDateTime":
        from . import arithmetic
        return arithmetic.add(self, d)

    def add_days(self, n: int) -> "JalaliDateTime":
        from . import arithmetic
        return arithmetic.add_days(self, n)

    def sub(self, other: "JalaliDateTime") -> timedelta:
        from . import arithmetic
        return arithmetic.sub(self, other)

    def add_years(self, n: int) -> Optional["JalaliDateTime"]:
        from . import arithmetic
        return arithmetic.add_years(self, n)

    def add_months(self, n: int) -> Optional["JalaliDateTime"]:
        from . import arithmetic
        return arithmetic.add_months(self, n)

    def add_date(self, years: int, months: int, days: int) -> Optional["JalaliDateTime"]:
        from . import arithmetic
        return arithmetic.add_date(self, years, months, days)

    def add_jalali_duration(self, d: JalaliDuration) -> Optional["JalaliDateTime"]:
        from . import arithmetic
        return arithmetic.add_jalali_duration(self, d)

    def sub_jalali_duration(self, d: JalaliDuration) -> Optional["JalaliDateTime"]:
        from . import arithmetic
        return arithmetic.sub_jalali_duration(self, d)

    def days_between(self, other: "JalaliDateTime") -> int:
        from . import arithmetic
        return arithmetic.days_between(self, other)

    def days_until(self, target: "JalaliDateTime") -> int:
        from . import arithmetic
        return arithmetic.days_until(self, target)

    def __add__(self, other: Union[timedelta, JalaliDuration]):
        if isinstance(other, timedelta):
            return self.add(other)
        if isinstance(other, JalaliDuration):
            return self.add_jalali_duration(other)
        return NotImplemented

    __radd__ = __add__

    def __sub__(self, other: Union["JalaliDateTime", timedelta, JalaliDuration]):
        if isinstance(other, JalaliDateTime):
            return self.sub(other)
        if isinstance(other, timedelta):
            return self.add(-other)
        if isinstance(other, JalaliDuration):
            return self.sub_jalali_duration(other)
        return NotImplemented

    # ---------------------------------------------------------
    # Text (see caljalali.formatting)
    # ---------------------------------------------------------

    def format(self, layout: str) -> str:
        from .formatting import format_jalali
        return format_jalali(self, layout)

    def format_short(self) -> str:
        return self.format("%Y/%m/%d")

    def format_long(self) -> str:
        return self.format("%d %B %Y")

    def __str__(self) -> str:
        return self.format("%Y/%m/%d %T")

    def __repr__(self) -> str:
        return (
            f"JalaliDateTime({self.year}, {int(self.month)}, {self.day}, "
            f"{self.hour}, {self.minute}, {self.second}, {self.nanosecond}, "
            f"tz={zone_name(self.tz)!r})"
        )
