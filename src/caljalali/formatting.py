"""
caljalali.formatting
--------------------
strftime-like rendering and the inverse parser for Jalali date-times.

Format directives:
  %Y  year, 4 digits            %y  year mod 100, 2 digits
  %m  month, 2 digits           %d  day, 2 digits
  %B  Persian month name        %b  first 3 characters of %B
  %H  %M  %S  hour/minute/second, 2 digits
  %p  صبح before noon, عصر from noon
  %w  Persian weekday name
  %z  zone offset as +HHMM      %Z  zone identity
  %R  HH:MM                     %T  HH:MM:SS
  %n  newline                   %%  percent sign
Any other %X is copied through unchanged.

Parsing understands only the numeric directives. Whatever their order in the
layout, the first six captured numbers are read as year, month, day, hour,
minute, second.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from typing import TYPE_CHECKING, Callable, Dict, Tuple

from .core.errors import ParseError, ValidationError
from .core.types import Month
from .core.zones import ZoneLike, resolve_zone, zone_name
from .engines.arithmetic_year import days_in_month

if TYPE_CHECKING:
    from .instant import JalaliDateTime

log = logging.getLogger(__name__)

AM_FA = "صبح"
PM_FA = "عصر"

SHORT_LAYOUT = "%Y/%m/%d"
LONG_LAYOUT = "%d %B %Y"
DEFAULT_LAYOUT = "%Y/%m/%d %T"


def _offset(t: "JalaliDateTime") -> str:
    _, offset = t.zone()
    sign = "+"
    if offset < 0:
        sign = "-"
        offset = -offset
    return f"{sign}{offset // 3600:02d}{(offset % 3600) // 60:02d}"


_DIRECTIVES: Dict[str, Callable[["JalaliDateTime"], str]] = {
    "n": lambda t: "\n",
    "%": lambda t: "%",
    "Y": lambda t: f"{t.year:04d}",
    "y": lambda t: f"{t.year % 100:02d}",
    "m": lambda t: f"{int(t.month):02d}",
    "B": lambda t: t.month.fa_name,
    "b": lambda t: t.month.fa_name[:3],
    "d": lambda t: f"{t.day:02d}",
    "H": lambda t: f"{t.hour:02d}",
    "M": lambda t: f"{t.minute:02d}",
    "S": lambda t: f"{t.second:02d}",
    "p": lambda t: AM_FA if t.hour < 12 else PM_FA,
    "w": lambda t: t.weekday().fa_name,
    "z": _offset,
    "Z": lambda t: zone_name(t.tz),
    "R": lambda t: f"{t.hour:02d}:{t.minute:02d}",
    "T": lambda t: f"{t.hour:02d}:{t.minute:02d}:{t.second:02d}",
}


def format_jalali(t: "JalaliDateTime", layout: str) -> str:
    out = []
    i = 0
    n = len(layout)
    while i < n:
        ch = layout[i]
        if ch == "%" and i + 1 < n:
            directive = layout[i + 1]
            fn = _DIRECTIVES.get(directive)
            out.append(fn(t) if fn is not None else layout[i:i + 2])
            i += 2
        else:
            out.append(ch)
            i += 1
    return "".join(out)


# ============================================================
# Parsing
# ============================================================

NUMERIC_DIRECTIVES = frozenset("YymdHMS")
# Captures are consumed in this order, not in layout order.
CAPTURE_ORDER: Tuple[str, ...] = ("year", "month", "day", "hour", "minute", "second")


@dataclass(frozen=True)
class CompiledLayout:
    layout: str
    pattern: "re.Pattern[str]"
    captures: int

    def match(self, value: str) -> Tuple[int, ...]:
        m = self.pattern.search(value)
        if m is None or len(m.groups()) < len(CAPTURE_ORDER):
            raise ParseError(
                f"unable to parse {value!r} using layout {self.layout!r}",
                value=value,
                layout=self.layout,
            )
        return tuple(int(g) for g in m.groups()[: len(CAPTURE_ORDER)])


@lru_cache(maxsize=128)
def compile_layout(layout: str) -> CompiledLayout:
    """Build the matcher for a layout once; later calls reuse it."""
    parts = []
    captures = 0
    i = 0
    n = len(layout)
    while i < n:
        if layout[i] == "%" and i + 1 < n and layout[i + 1] in NUMERIC_DIRECTIVES:
            parts.append(r"(\d+)")
            captures += 1
            i += 2
        else:
            parts.append(re.escape(layout[i]))
            i += 1
    return CompiledLayout(layout=layout, pattern=re.compile("".join(parts)), captures=captures)


def parse_in_location(layout: str, value: str, tz: ZoneLike) -> "JalaliDateTime":
    from .instant import JalaliDateTime

    compiled = compile_layout(layout)
    try:
        year, month, day, hour, minute, second = compiled.match(value)
    except ParseError:
        log.debug("no match: layout=%r value=%r captures=%d", layout, value, compiled.captures)
        raise

    if year < 1 or not 1 <= month <= 12 or not 1 <= day <= days_in_month(year, month):
        raise ParseError(
            f"invalid Jalali date: {year}/{month:02d}/{day:02d}",
            value=(year, month, day),
            layout=layout,
        )
    zone = resolve_zone(tz)
    try:
        return JalaliDateTime(year, Month(month), day, hour, minute, second, 0, zone)
    except ValidationError as exc:
        raise ParseError(str(exc), value=exc.value, layout=layout) from exc


def parse(layout: str, value: str) -> "JalaliDateTime":
    """Parse in the default zone."""
    return parse_in_location(layout, value, None)
