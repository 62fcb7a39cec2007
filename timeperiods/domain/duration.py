"""
Comparison of periods by the amount of real time they span.
"""

from __future__ import annotations

from datetime import timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .period import Period


class PeriodDuration:
    """
    The wall-clock span of a period, from its included start up to and
    including the last second of its included end.

    Unlike the period algebra, durations compare across precisions: the
    month of January and the days 1 to 31 January have equal durations.
    """

    def __init__(self, period: Period):
        self._period = period

    def as_timedelta(self) -> timedelta:
        end = self._period.ceiling_end().add(seconds=1)
        return end - self._period.included_start

    def in_seconds(self) -> int:
        return int(self.as_timedelta().total_seconds())

    def compare_to(self, other: "PeriodDuration") -> int:
        """-1, 0 or 1 as this duration is shorter, equal or longer than ``other``."""
        mine, theirs = self.in_seconds(), other.in_seconds()
        return (mine > theirs) - (mine < theirs)

    def equals(self, other: "PeriodDuration") -> bool:
        return self.compare_to(other) == 0

    def is_larger_than(self, other: "PeriodDuration") -> bool:
        return self.compare_to(other) > 0

    def is_smaller_than(self, other: "PeriodDuration") -> bool:
        return self.compare_to(other) < 0

    def __repr__(self) -> str:
        return f"PeriodDuration({self.as_timedelta()})"
