"""
Shared helpers for the test suite.
"""

import pendulum
import pytest
from pendulum import DateTime

from timeperiods import Period, PeriodCollection


def utc(*parts: int) -> DateTime:
    """Shorthand for a UTC datetime, e.g. ``utc(2022, 1, 31)``."""
    return pendulum.datetime(*parts, tz="UTC")


def period(text: str) -> Period:
    """Shorthand for bracket notation, e.g. ``period("[2022-01-01, 2022-01-31]")``."""
    return Period.from_string(text)


def collection(*texts: str) -> PeriodCollection:
    return PeriodCollection(*(period(text) for text in texts))


@pytest.fixture
def january() -> Period:
    """The whole of January 2022 at day precision."""
    return Period.make("2022-01-01", "2022-01-31")


@pytest.fixture
def working_day() -> Period:
    """Monday 3 January 2022, 09:00 up to (not including) 17:00, by the hour."""
    return period("[2022-01-03 09, 2022-01-03 17)")
