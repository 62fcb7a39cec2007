"""
Turns caller input (strings, dates, datetimes, bracket notation) into periods.
"""

from __future__ import annotations

import re
from datetime import date, datetime, tzinfo
from typing import Any, Optional, Union

import pendulum
from pendulum import DateTime

from .boundaries import Boundaries
from .exceptions import InvalidDate
from .period import Period
from .precision import Precision

DateInput = Union[str, date, datetime]

DEFAULT_TIMEZONE = pendulum.UTC

_NOTATION = re.compile(r"\s*([\[(])([\d\-\s:]+),([\d\-\s:]+)([\])])\s*")


def resolve_date(value: Any, fmt: Optional[str] = None, tz: Optional[tzinfo] = None) -> DateTime:
    """
    Resolve one endpoint to a timezone-aware pendulum DateTime.

    Aware datetimes keep their own zone. Naive datetimes, dates and strings
    are read in ``tz`` (UTC by default). Strings are parsed with the pendulum
    format ``fmt`` when given (e.g. ``"DD.MM.YYYY"``), otherwise with the
    format matching their own granularity.

    Raises:
        InvalidDate: If the value is missing or cannot be parsed
    """
    if value is None:
        raise InvalidDate.cannot_be_null("date")

    zone = tz or DEFAULT_TIMEZONE

    if isinstance(value, datetime):
        return DateTime.instance(value, tz=zone)

    if isinstance(value, date):
        return pendulum.datetime(value.year, value.month, value.day, tz=zone)

    if not isinstance(value, str):
        raise InvalidDate.for_format(value, fmt)

    text = value.strip()
    if fmt is None:
        fmt = Precision.from_string(text).date_format

    try:
        return pendulum.from_format(text, fmt, tz=zone)
    except ValueError as exc:
        raise InvalidDate.for_format(value, fmt) from exc


def make(
    start: DateInput,
    end: DateInput,
    precision: Optional[Precision] = None,
    boundaries: Optional[Boundaries] = None,
    fmt: Optional[str] = None,
    tz: Optional[tzinfo] = None,
) -> Period:
    """Build a period, defaulting to DAY precision with both endpoints included."""
    if precision is None:
        precision = Precision.DAY
    if boundaries is None:
        boundaries = Boundaries.EXCLUDE_NONE

    return Period(
        precision.round(resolve_date(start, fmt, tz)),
        precision.round(resolve_date(end, fmt, tz)),
        precision,
        boundaries,
    )


def make_with_boundaries(
    included_start: DateInput,
    included_end: DateInput,
    precision: Precision,
    boundaries: Boundaries,
    tz: Optional[tzinfo] = None,
) -> Period:
    """Build a period whose *included* endpoints are the given ones."""
    included_start = precision.round(resolve_date(included_start, tz=tz))
    included_end = precision.round(resolve_date(included_end, tz=tz))

    return Period(
        boundaries.real_start(included_start, precision),
        boundaries.real_end(included_end, precision),
        precision,
        boundaries,
    )


def from_string(text: str, tz: Optional[tzinfo] = None) -> Period:
    """
    Parse bracket notation, e.g. ``[2022-01-01, 2022-01-31)``.

    The precision is taken from the granularity of the start date; the end
    date must be written at the same granularity.

    Raises:
        InvalidDate: If the text is not valid bracket notation
    """
    match = _NOTATION.fullmatch(text)
    if match is None:
        raise InvalidDate.for_notation(text)

    start_bracket, start_text, end_text, end_bracket = match.groups()
    boundaries = Boundaries.from_string(start_bracket, end_bracket)

    start_text = start_text.strip()
    end_text = end_text.strip()
    precision = Precision.from_string(start_text)

    return Period(
        resolve_date(start_text, precision.date_format, tz),
        resolve_date(end_text, precision.date_format, tz),
        precision,
        boundaries,
    )
