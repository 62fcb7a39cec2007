"""
Domain-specific exception hierarchy for the period algebra.
"""

from __future__ import annotations

from datetime import datetime
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .precision import Precision


class PeriodError(Exception):
    """Base class for all period-level errors."""


class InvalidPeriod(PeriodError, ValueError):
    """Raised when a period would end before it starts."""

    def __init__(self, message: str, start: datetime | None = None, end: datetime | None = None):
        super().__init__(message)
        self.start = start
        self.end = end

    @classmethod
    def end_before_start(cls, start: datetime, end: datetime) -> "InvalidPeriod":
        return cls(
            f"The end time `{end.isoformat()}` is before the start time `{start.isoformat()}`.",
            start=start,
            end=end,
        )


class CannotComparePeriods(PeriodError):
    """Raised when two periods with different precisions are compared."""

    def __init__(self, message: str, left: Precision | None = None, right: Precision | None = None):
        super().__init__(message)
        self.left = left
        self.right = right

    @classmethod
    def precision_does_not_match(cls, left: Precision, right: Precision) -> "CannotComparePeriods":
        return cls(
            f"Cannot compare a {left.unit}-precision period with a {right.unit}-precision period.",
            left=left,
            right=right,
        )


class CannotCeilLowerPrecision(PeriodError):
    """Raised when asking for the ceiling at a finer precision than the value carries."""

    @classmethod
    def precision_is_lower(cls, own: Precision, target: Precision) -> "CannotCeilLowerPrecision":
        return cls(f"Cannot get the latest {own.unit} of a {target.unit}.")


class InvalidDate(PeriodError, ValueError):
    """Raised when an input cannot be resolved to a date."""

    @classmethod
    def for_format(cls, value: Any, fmt: str | None) -> "InvalidDate":
        if fmt is None:
            return cls(f"Could not construct a date from `{value!r}`.")
        return cls(f"Could not construct a date from `{value!r}` with format `{fmt}`.")

    @classmethod
    def cannot_be_null(cls, parameter: str) -> "InvalidDate":
        return cls(f"{parameter} cannot be null")

    @classmethod
    def for_notation(cls, text: str) -> "InvalidDate":
        return cls(
            f"Could not parse `{text}` as a period. "
            "Expected bracket notation such as `[2022-01-01, 2022-01-31)`."
        )
