"""
Domain layer - the interval algebra, free of any I/O.
"""

from .boundaries import Boundaries
from .collection import PeriodCollection
from .duration import PeriodDuration
from .exceptions import (
    CannotCeilLowerPrecision,
    CannotComparePeriods,
    InvalidDate,
    InvalidPeriod,
    PeriodError,
)
from .period import Period
from .precision import Precision

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
]
