"""
timeperiods - precision-aware interval algebra over date/time ranges.
"""

from .domain import (
    Boundaries,
    CannotCeilLowerPrecision,
    CannotComparePeriods,
    InvalidDate,
    InvalidPeriod,
    Period,
    PeriodCollection,
    PeriodDuration,
    PeriodError,
    Precision,
)

__version__ = "0.1.0"

__all__ = [
    "Boundaries",
    "CannotCeilLowerPrecision",
    "CannotComparePeriods",
    "InvalidDate",
    "InvalidPeriod",
    "Period",
    "PeriodCollection",
    "PeriodDuration",
    "PeriodError",
    "Precision",
    "__version__",
]
