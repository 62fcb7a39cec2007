"""
Time granularities and the calendar arithmetic that goes with them.
"""

from __future__ import annotations

import re
from datetime import datetime
from enum import Enum
from typing import List, Optional

import pendulum
from pendulum import DateTime, Duration

from .exceptions import CannotCeilLowerPrecision, InvalidDate

_GRANULARITY = re.compile(r"(\d{4})(-\d{2})?(-\d{2})?( \d{2})?(:\d{2})?(:\d{2})?")


class Precision(Enum):
    """
    Granularity of a period, ordered from coarsest (YEAR) to finest (SECOND).

    A precision knows how to align an instant to its unit (``round``), how to
    find the last moment of that unit (``ceil``) and how to step one unit
    forwards or backwards.
    """

    YEAR = "year"
    MONTH = "month"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"

    @classmethod
    def all(cls) -> List["Precision"]:
        """All precisions, coarsest first."""
        return list(cls)

    @classmethod
    def from_string(cls, text: str) -> "Precision":
        """
        Infer a precision from the granularity of a date string.

        ``2022`` is YEAR, ``2022-01`` MONTH, ``2022-01-01`` DAY,
        ``2022-01-01 10`` HOUR, ``2022-01-01 10:15`` MINUTE and
        ``2022-01-01 10:15:30`` SECOND.

        Raises:
            InvalidDate: If the text is not a date in one of those shapes
        """
        match = _GRANULARITY.fullmatch(text.strip())
        if match is None:
            raise InvalidDate.for_format(text, None)

        matched = 0
        for group in match.groups():
            if group is None:
                break
            matched += 1

        return cls.all()[matched - 1]

    @property
    def unit(self) -> str:
        """Name of one unit of this precision, e.g. ``"day"``."""
        return self.value

    @property
    def rank(self) -> int:
        """Position in the coarse-to-fine ordering (YEAR is 0)."""
        return self.all().index(self)

    @property
    def interval(self) -> Duration:
        """One unit of this precision."""
        return pendulum.duration(**{f"{self.value}s": 1})

    @property
    def date_format(self) -> str:
        """pendulum format tokens showing exactly the fields of this precision."""
        return _DATE_FORMATS[self]

    def format_date(self, instant: datetime) -> str:
        """Write ``instant`` in ``date_format``, with the year always four digits."""
        rest = _DATE_FORMATS[self][len("YYYY"):]
        text = f"{instant.year:04d}"
        if rest:
            text += pendulum.instance(instant).format(rest)
        return text

    def higher_than(self, other: "Precision") -> bool:
        """True if this precision is strictly finer than ``other``."""
        return self.rank > other.rank

    def round(self, instant: datetime) -> DateTime:
        """Reset every field finer than this precision to its minimum."""
        return pendulum.instance(instant).start_of(self.value)

    def ceil(self, instant: datetime, target: Optional["Precision"] = None) -> DateTime:
        """
        Push every field finer than ``target`` to its maximum.

        ``target`` defaults to this precision, so a DAY value ceils to 23:59:59
        of that day and ceiling it to MONTH gives the last second of its month.

        Raises:
            CannotCeilLowerPrecision: If ``target`` is finer than this precision
        """
        if target is None:
            target = self
        if target.higher_than(self):
            raise CannotCeilLowerPrecision.precision_is_lower(self, target)

        return pendulum.instance(instant).end_of(target.value).start_of("second")

    def shift(self, instant: datetime, units: int) -> DateTime:
        """Move ``units`` units forwards (or backwards when negative), then round."""
        return self.round(pendulum.instance(instant).add(**{f"{self.value}s": units}))

    def increment(self, instant: datetime) -> DateTime:
        return self.shift(instant, 1)

    def decrement(self, instant: datetime) -> DateTime:
        return self.shift(instant, -1)

    def units_between(self, start: datetime, end: datetime) -> int:
        """Whole units from ``start`` to ``end``, both aligned to this precision."""
        interval = pendulum.instance(start).diff(pendulum.instance(end), abs=False)
        return getattr(interval, f"in_{self.value}s")()


_DATE_FORMATS = {
    Precision.YEAR: "YYYY",
    Precision.MONTH: "YYYY-MM",
    Precision.DAY: "YYYY-MM-DD",
    Precision.HOUR: "YYYY-MM-DD HH",
    Precision.MINUTE: "YYYY-MM-DD HH:mm",
    Precision.SECOND: "YYYY-MM-DD HH:mm:ss",
}
