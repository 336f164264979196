from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator, List, Optional

from .arithmetic import add_nanoseconds, timedelta_nanoseconds
from .core.errors import ValidationError
from .instant import JalaliDateTime

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurringEvent:
    """
    An event repeating every ``frequency`` from ``start``.

    ``end`` bounds the last occurrence (inclusive); ``None`` means unbounded.
    A zero JalaliDateTime is accepted as unbounded too.
    """
    start: JalaliDateTime
    frequency: timedelta
    end: Optional[JalaliDateTime] = None

    def __post_init__(self) -> None:
        if self.frequency <= timedelta(0):
            raise ValidationError("frequency", self.frequency, "a positive duration")

    @property
    def unbounded(self) -> bool:
        return self.end is None or self.end.is_zero()

    def _first_at_or_after(self, t: JalaliDateTime) -> JalaliDateTime:
        """First grid point start + k*frequency that is not before t."""
        if not t.after(self.start):
            return self.start
        step = timedelta_nanoseconds(self.frequency)
        elapsed = t.unix_nanoseconds() - self.start.unix_nanoseconds()
        k = -(-elapsed // step)
        log.debug("fast-forward %d steps of %s from %s", k, self.frequency, self.start)
        return add_nanoseconds(self.start, k * step)

    def iter_occurrences(self, range_start: JalaliDateTime, range_end: JalaliDateTime) -> Iterator[JalaliDateTime]:
        if self.start.after(range_end):
            return
        cursor = self._first_at_or_after(range_start)
        while not cursor.after(range_end):
            if not self.unbounded and cursor.after(self.end):
                return
            yield cursor
            cursor = cursor.add(self.frequency)

    def occurrences(self, range_start: JalaliDateTime, range_end: JalaliDateTime) -> List[JalaliDateTime]:
        """Occurrences inside [range_start, range_end], in order."""
        return list(self.iter_occurrences(range_start, range_end))
