"""
The period value type and the pairwise interval algebra.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, tzinfo
from typing import TYPE_CHECKING, Iterator, List, Optional, Union

from .boundaries import Boundaries
from .duration import PeriodDuration
from .exceptions import CannotComparePeriods, InvalidPeriod
from .precision import Precision

if TYPE_CHECKING:
    from .collection import PeriodCollection
    from .factory import DateInput


logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class Period:
    """
    An immutable, bounded span of time at a given precision.

    ``start`` and ``end`` are kept as written, in the style of ``boundaries``.
    ``included_start`` and ``included_end`` are the first and last instants
    that actually belong to the period; every comparison and operation works
    on those.

    Invariant: included_start <= included_end.
    """

    start: datetime
    end: datetime
    precision: Precision = Precision.DAY
    boundaries: Boundaries = Boundaries.EXCLUDE_NONE
    included_start: datetime = field(init=False, repr=False)
    included_end: datetime = field(init=False, repr=False)

    def __post_init__(self):
        start = self.precision.round(self.start)
        end = self.precision.round(self.end)
        if start > end:
            raise InvalidPeriod.end_before_start(start, end)

        included_start = self.boundaries.included_start(start, self.precision)
        included_end = self.boundaries.included_end(end, self.precision)
        if included_start > included_end:
            raise InvalidPeriod.end_before_start(included_start, included_end)

        object.__setattr__(self, "start", start)
        object.__setattr__(self, "end", end)
        object.__setattr__(self, "included_start", included_start)
        object.__setattr__(self, "included_end", included_end)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    @classmethod
    def make(
        cls,
        start: DateInput,
        end: DateInput,
        precision: Optional[Precision] = None,
        boundaries: Optional[Boundaries] = None,
        fmt: Optional[str] = None,
        tz: Optional[tzinfo] = None,
    ) -> "Period":
        """
        Build a period from strings, dates or datetimes.

        Defaults to DAY precision with both endpoints included.
        """
        from .factory import make

        return make(start, end, precision=precision, boundaries=boundaries, fmt=fmt, tz=tz)

    @classmethod
    def make_with_boundaries(
        cls,
        included_start: DateInput,
        included_end: DateInput,
        precision: Precision,
        boundaries: Boundaries,
        tz: Optional[tzinfo] = None,
    ) -> "Period":
        """Build a period from its included endpoints, written back in ``boundaries`` style."""
        from .factory import make_with_boundaries

        return make_with_boundaries(included_start, included_end, precision, boundaries, tz=tz)

    @classmethod
    def from_string(cls, text: str, tz: Optional[tzinfo] = None) -> "Period":
        """Parse bracket notation such as ``[2022-01-01, 2022-01-31)``."""
        from .factory import from_string

        return from_string(text, tz=tz)

    # ------------------------------------------------------------------
    # Getters
    # ------------------------------------------------------------------

    def is_start_included(self) -> bool:
        return self.boundaries.start_included()

    def is_start_excluded(self) -> bool:
        return self.boundaries.start_excluded()

    def is_end_included(self) -> bool:
        return self.boundaries.end_included()

    def is_end_excluded(self) -> bool:
        return self.boundaries.end_excluded()

    def length(self) -> int:
        """Number of precision units in the period, counting both ends."""
        return self.precision.units_between(self.included_start, self.included_end) + 1

    @property
    def duration(self) -> PeriodDuration:
        return PeriodDuration(self)

    def ceiling_end(self, precision: Optional[Precision] = None) -> datetime:
        """Last second of the included end, optionally widened to a coarser unit."""
        return self.precision.ceil(self.included_end, precision)

    def as_string(self) -> str:
        start_bracket, end_bracket = self.boundaries.notation
        start = self.precision.format_date(self.start)
        end = self.precision.format_date(self.end)
        return f"{start_bracket}{start},{end}{end_bracket}"

    def __str__(self) -> str:
        return self.as_string()

    def __repr__(self) -> str:
        return f"Period({self.as_string()}, precision={self.precision.unit})"

    def __iter__(self) -> Iterator[datetime]:
        """Every instant in the period, one precision unit apart."""
        current = self.included_start
        while current <= self.included_end:
            yield current
            current = self.precision.increment(current)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Period):
            return NotImplemented
        return self._key() == other._key()

    def __hash__(self) -> int:
        return hash(self._key())

    def _key(self):
        return (self.precision, self.included_start, self.included_end)

    # ------------------------------------------------------------------
    # Comparisons
    # ------------------------------------------------------------------

    def ensure_precision_matches(self, other: "Period") -> None:
        if self.precision is not other.precision:
            raise CannotComparePeriods.precision_does_not_match(self.precision, other.precision)

    def overlaps_with(self, other: "Period") -> bool:
        self.ensure_precision_matches(other)
        return (
            self.included_start <= other.included_end
            and other.included_start <= self.included_end
        )

    def touches_with(self, other: "Period") -> bool:
        """True if one period starts the unit right after the other ends."""
        self.ensure_precision_matches(other)
        return (
            self.precision.increment(self.included_end) == other.included_start
            or self.precision.increment(other.included_end) == self.included_start
        )

    def contains(self, other: Union["Period", datetime]) -> bool:
        """Whether ``other`` (a period or an instant) lies entirely within this period."""
        if isinstance(other, Period):
            self.ensure_precision_matches(other)
            return (
                self.included_start <= other.included_start
                and other.included_end <= self.included_end
            )

        rounded = self.precision.round(other)
        return self.included_start <= rounded <= self.included_end

    def equals(self, other: "Period") -> bool:
        self.ensure_precision_matches(other)
        return (
            self.included_start == other.included_start
            and self.included_end == other.included_end
        )

    def starts_before(self, instant: datetime) -> bool:
        return self.included_start < instant

    def starts_before_or_at(self, instant: datetime) -> bool:
        return self.included_start <= instant

    def starts_after(self, instant: datetime) -> bool:
        return self.included_start > instant

    def starts_after_or_at(self, instant: datetime) -> bool:
        return self.included_start >= instant

    def starts_at(self, instant: datetime) -> bool:
        return self.included_start == instant

    def ends_before(self, instant: datetime) -> bool:
        return self.included_end < instant

    def ends_before_or_at(self, instant: datetime) -> bool:
        return self.included_end <= instant

    def ends_after(self, instant: datetime) -> bool:
        return self.included_end > instant

    def ends_after_or_at(self, instant: datetime) -> bool:
        return self.included_end >= instant

    def ends_at(self, instant: datetime) -> bool:
        return self.included_end == instant

    def is_before(self, other: "Period") -> bool:
        self.ensure_precision_matches(other)
        return self.included_end < other.included_start

    def is_after(self, other: "Period") -> bool:
        self.ensure_precision_matches(other)
        return self.included_start > other.included_end

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def _span(self, included_start: datetime, included_end: datetime) -> "Period":
        return Period(included_start, included_end, self.precision, Boundaries.EXCLUDE_NONE)

    def overlap(self, other: "Period") -> Optional["Period"]:
        """
        The shared part of two periods, or None if they do not overlap.

        Raises:
            CannotComparePeriods: If the precisions differ
        """
        self.ensure_precision_matches(other)

        included_start = max(self.included_start, other.included_start)
        included_end = min(self.included_end, other.included_end)
        if included_start > included_end:
            return None

        return self._span(included_start, included_end)

    def overlap_any(self, *others: "Period") -> "PeriodCollection":
        """Every non-empty overlap between this period and one of ``others``."""
        from .collection import PeriodCollection

        overlaps: List[Period] = []
        for other in others:
            overlap = self.overlap(other)
            if overlap is not None:
                overlaps.append(overlap)

        return PeriodCollection(*overlaps)

    def overlap_all(self, *others: "Period") -> Optional["Period"]:
        """The part of this period shared with every one of ``others``."""
        overlap: Optional[Period] = self
        for other in others:
            overlap = overlap.overlap(other)
            if overlap is None:
                return None

        return overlap

    def subtract(self, *others: "Period") -> "PeriodCollection":
        """
        What remains of this period once every one of ``others`` is removed.

        The result is the smallest set of disjoint periods covering the
        remainder, ordered by start. ``others`` may overlap each other.

        Algorithm:
        1. Drop the periods that do not overlap this one
        2. Sort the rest by included start
        3. Walk a cursor from our start; emit the stretch before each
           deduction and jump the cursor past it
        4. Emit whatever is left between the cursor and our end

        Raises:
            CannotComparePeriods: If any precision differs from ours
        """
        from .collection import PeriodCollection

        if not others:
            return PeriodCollection(self)

        relevant = sorted(
            (other for other in others if self.overlaps_with(other)),
            key=lambda other: other.included_start,
        )

        remainders: List[Period] = []
        cursor = self.included_start

        for other in relevant:
            if other.included_start > cursor:
                remainders.append(
                    self._span(cursor, self.precision.decrement(other.included_start))
                )

            after = self.precision.increment(other.included_end)
            if after > cursor:
                cursor = after

        if cursor <= self.included_end:
            remainders.append(self._span(cursor, self.included_end))

        logger.debug(
            "Subtracted %d of %d periods from %s, %d remainder(s)",
            len(relevant), len(others), self, len(remainders),
        )

        return PeriodCollection(*remainders)

    def diff(self, other: "Period") -> "PeriodCollection":
        """Symmetric difference: the parts covered by exactly one of the two periods."""
        return self.subtract(other).add(*other.subtract(self))

    def gap(self, other: "Period") -> Optional["Period"]:
        """The period strictly between two periods, if they neither overlap nor touch."""
        self.ensure_precision_matches(other)

        if self.overlaps_with(other) or self.touches_with(other):
            return None

        if self.included_start >= other.included_end:
            return self._span(
                self.precision.increment(other.included_end),
                self.precision.decrement(self.included_start),
            )

        return self._span(
            self.precision.increment(self.included_end),
            self.precision.decrement(other.included_start),
        )

    def renew(self) -> "Period":
        """A period of the same length that starts right after this one ends."""
        included_start = self.precision.increment(self.included_end)
        included_end = self.precision.shift(included_start, self.length() - 1)

        return Period(
            self.boundaries.real_start(included_start, self.precision),
            self.boundaries.real_end(included_end, self.precision),
            self.precision,
            self.boundaries,
        )
