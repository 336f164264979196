"""caljalali public API.

Keep this surface small: users should mostly interact with names re-exported here.
"""

from .api import (
    days_in_month,
    gregorian_to_jalali,
    irst,
    is_leap_jalali_year,
    is_valid_jalali_date,
    jalali_date,
    jalali_to_gregorian,
    julian_day_number,
    month_days,
    now,
    nowruz,
    parse,
    parse_in_location,
    tehran,
    to_gregorian_date,
    to_jalali,
)
from .core.errors import CaljalaliError, ParseError, ValidationError
from .core.types import JalaliDuration, Month, Weekday
from .instant import JalaliDateTime
from .recurrence import RecurringEvent

__all__ = [
    "CaljalaliError",
    "JalaliDateTime",
    "JalaliDuration",
    "Month",
    "ParseError",
    "RecurringEvent",
    "ValidationError",
    "Weekday",
    "days_in_month",
    "gregorian_to_jalali",
    "irst",
    "is_leap_jalali_year",
    "is_valid_jalali_date",
    "jalali_date",
    "jalali_to_gregorian",
    "julian_day_number",
    "month_days",
    "now",
    "nowruz",
    "parse",
    "parse_in_location",
    "tehran",
    "to_gregorian_date",
    "to_jalali",
]
