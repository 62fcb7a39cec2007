"""
Inclusive/exclusive endpoint styles of a period.
"""

from __future__ import annotations

from datetime import datetime
from enum import Enum

from .precision import Precision


class Boundaries(Enum):
    """
    The four endpoint combinations, keyed by their bracket notation.

    Endpoints passed to a period are read in its boundary style. The algebra
    itself only ever looks at the *included* endpoints, which step an excluded
    endpoint one unit inward. ``real_start``/``real_end`` go the other way.
    """

    EXCLUDE_NONE = "[]"
    EXCLUDE_END = "[)"
    EXCLUDE_START = "(]"
    EXCLUDE_ALL = "()"

    @classmethod
    def from_string(cls, start_boundary: str, end_boundary: str) -> "Boundaries":
        """Map a bracket pair such as ``"["`` and ``")"`` to its member."""
        notation = f"{start_boundary}{end_boundary}"
        for member in cls:
            if member.value == notation:
                return member
        raise ValueError(f"Unknown boundary notation: '{notation}'")

    @classmethod
    def include_both(cls) -> "Boundaries":
        return cls.EXCLUDE_NONE

    @classmethod
    def exclude_end(cls) -> "Boundaries":
        return cls.EXCLUDE_END

    @classmethod
    def exclude_start(cls) -> "Boundaries":
        return cls.EXCLUDE_START

    @classmethod
    def exclude_both(cls) -> "Boundaries":
        return cls.EXCLUDE_ALL

    @property
    def notation(self) -> str:
        return self.value

    def start_excluded(self) -> bool:
        return self.value[0] == "("

    def start_included(self) -> bool:
        return not self.start_excluded()

    def end_excluded(self) -> bool:
        return self.value[1] == ")"

    def end_included(self) -> bool:
        return not self.end_excluded()

    def included_start(self, start: datetime, precision: Precision) -> datetime:
        """First instant inside the period for a start written in this style."""
        if self.start_included():
            return start
        return precision.increment(start)

    def included_end(self, end: datetime, precision: Precision) -> datetime:
        """Last instant inside the period for an end written in this style."""
        if self.end_included():
            return end
        return precision.decrement(end)

    def real_start(self, included_start: datetime, precision: Precision) -> datetime:
        """Write an included start back in this boundary style."""
        if self.start_included():
            return included_start
        return precision.decrement(included_start)

    def real_end(self, included_end: datetime, precision: Precision) -> datetime:
        """Write an included end back in this boundary style."""
        if self.end_included():
            return included_end
        return precision.increment(included_end)
