"""
Zone helpers. Zones are opaque ``tzinfo`` objects supplied by ``zoneinfo``,
``datetime.timezone`` or the host C library (``LocalZone``); nothing here
knows about offsets beyond asking them.
"""

from __future__ import annotations

import calendar
import logging
import time
from datetime import MAXYEAR, MINYEAR, datetime, timedelta, timezone, tzinfo
from typing import Optional, Tuple, Union
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from .config import get_settings
from .errors import ValidationError

log = logging.getLogger(__name__)

TEHRAN = "Asia/Tehran"

ZoneLike = Union[tzinfo, str, None]


def load_zone(key: str) -> ZoneInfo:
    try:
        return ZoneInfo(key)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        raise ValidationError("tz", key, "a known IANA time zone key") from exc


def tehran() -> ZoneInfo:
    """Iran Standard Time as observed in Tehran."""
    return load_zone(TEHRAN)


def irst() -> ZoneInfo:
    return tehran()


class LocalZone(tzinfo):
    """
    The host zone as the C library sees it (``TZ``, /etc/localtime).

    The offset is looked up for every moment, so daylight-saving changes
    apply to readings on either side of them.
    """

    key = "Local"

    def _struct(self, dt: Optional[datetime]) -> time.struct_time:
        if dt is None:
            return time.localtime()
        stamp = time.mktime((dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second, dt.weekday(), 0, -1))
        return time.localtime(stamp)

    def utcoffset(self, dt: Optional[datetime]) -> timedelta:
        return timedelta(seconds=self._struct(dt).tm_gmtoff)

    def dst(self, dt: Optional[datetime]) -> timedelta:
        st = self._struct(dt)
        if st.tm_isdst > 0:
            return timedelta(seconds=st.tm_gmtoff + time.timezone)
        return timedelta(0)

    def tzname(self, dt: Optional[datetime]) -> str:
        return self._struct(dt).tm_zone

    def fromutc(self, dt: datetime) -> datetime:
        # dt carries UTC fields labelled with this zone
        stamp = calendar.timegm(dt.replace(tzinfo=None).timetuple())
        return dt + timedelta(seconds=time.localtime(stamp).tm_gmtoff)

    def __repr__(self) -> str:
        return "LocalZone()"


LOCAL = LocalZone()


def local_zone() -> tzinfo:
    return LOCAL


def default_zone() -> tzinfo:
    key = get_settings().default_zone
    if key:
        log.debug("default zone from settings: %s", key)
        return load_zone(key)
    return local_zone()


def resolve_zone(tz: ZoneLike) -> tzinfo:
    if tz is None:
        return default_zone()
    if isinstance(tz, str):
        if tz.upper() == "UTC":
            return timezone.utc
        return load_zone(tz)
    if isinstance(tz, tzinfo):
        return tz
    raise ValidationError("tz", tz, "a tzinfo, a zone key or None")


def zone_name(tz: Optional[tzinfo]) -> str:
    """Identity of a zone: the IANA key, or the fixed zone's name."""
    if tz is None:
        return ""
    key = getattr(tz, "key", None)
    if key:
        return key
    name = tz.tzname(None)
    return name if name is not None else str(tz)


# datetime stops at year 9999; readings outside [MINYEAR + 1, MAXYEAR - 1]
# borrow the zone rules of the nearest year inside it.
_RULES_FIRST_YEAR = MINYEAR + 1
_RULES_LAST_YEAR = MAXYEAR - 1


def _rules_date(year: int, month: int, day: int) -> Tuple[int, int, int]:
    if _RULES_FIRST_YEAR <= year <= _RULES_LAST_YEAR:
        return year, month, day
    year = min(max(year, _RULES_FIRST_YEAR), _RULES_LAST_YEAR)
    if month == 2 and day == 29 and not calendar.isleap(year):
        day = 28
    return year, month, day


def wall_offset(tz: tzinfo, year: int, month: int, day: int,
                hour: int = 0, minute: int = 0, second: int = 0) -> Tuple[str, int]:
    """(abbreviation, seconds east of UTC) for a Gregorian wall-clock reading in tz."""
    y, m, d = _rules_date(year, month, day)
    dt = datetime(y, m, d, hour, minute, second, tzinfo=tz)
    offset = dt.utcoffset() or timedelta(0)
    return dt.tzname() or "", int(offset.total_seconds())


def instant_offset(tz: tzinfo, year: int, month: int, day: int,
                   hour: int = 0, minute: int = 0, second: int = 0) -> int:
    """Seconds east of UTC that tz observes at a UTC reading."""
    y, m, d = _rules_date(year, month, day)
    utc = datetime(y, m, d, hour, minute, second, tzinfo=timezone.utc)
    offset = utc.astimezone(tz).utcoffset() or timedelta(0)
    return int(offset.total_seconds())
