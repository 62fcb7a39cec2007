"""
Ordered collections of periods and the multi-period algebra built on them.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any, Callable, Iterator, List, Optional, Tuple, Union, overload

from .period import Period

logger = logging.getLogger(__name__)


class PeriodCollection(Sequence):
    """
    An immutable, ordered sequence of periods.

    Duplicates and overlapping members are allowed. Every operation returns a
    new collection; the original is never modified.
    """

    def __init__(self, *periods: Period):
        self._periods: Tuple[Period, ...] = tuple(periods)

    @classmethod
    def make(cls, *periods: Period) -> "PeriodCollection":
        return cls(*periods)

    # ------------------------------------------------------------------
    # Sequence protocol
    # ------------------------------------------------------------------

    @overload
    def __getitem__(self, index: int) -> Period: ...

    @overload
    def __getitem__(self, index: slice) -> "PeriodCollection": ...

    def __getitem__(self, index):
        if isinstance(index, slice):
            return PeriodCollection(*self._periods[index])
        return self._periods[index]

    def __len__(self) -> int:
        return len(self._periods)

    def __iter__(self) -> Iterator[Period]:
        return iter(self._periods)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PeriodCollection):
            return NotImplemented
        return self._periods == other._periods

    def __hash__(self) -> int:
        return hash(self._periods)

    def __repr__(self) -> str:
        return f"PeriodCollection({', '.join(str(period) for period in self._periods)})"

    # ------------------------------------------------------------------
    # Container helpers
    # ------------------------------------------------------------------

    def is_empty(self) -> bool:
        return not self._periods

    def add(self, *periods: Period) -> "PeriodCollection":
        return PeriodCollection(*self._periods, *periods)

    def map(self, transform: Callable[[Period], Period]) -> "PeriodCollection":
        return PeriodCollection(*(transform(period) for period in self._periods))

    def filter(self, predicate: Callable[[Period], bool]) -> "PeriodCollection":
        return PeriodCollection(*(period for period in self._periods if predicate(period)))

    def reduce(self, reducer: Callable[[Any, Period], Any], initial: Any = None) -> Any:
        carry = initial
        for period in self._periods:
            carry = reducer(carry, period)
        return carry

    def sort(self) -> "PeriodCollection":
        """Members ordered by included start, then included end."""
        return PeriodCollection(
            *sorted(self._periods, key=lambda period: (period.included_start, period.included_end))
        )

    # ------------------------------------------------------------------
    # Interval algebra
    # ------------------------------------------------------------------

    def overlap(self, other: "PeriodCollection") -> "PeriodCollection":
        """
        Pairwise overlaps between members of both collections.

        Results follow our order first, then ``other``'s; duplicates are kept.
        """
        overlaps: List[Period] = []
        for period in self._periods:
            for candidate in other:
                overlap = period.overlap(candidate)
                if overlap is not None:
                    overlaps.append(overlap)

        return PeriodCollection(*overlaps)

    def overlap_all(self, *others: "PeriodCollection") -> "PeriodCollection":
        """Time covered by this collection and by every one of ``others``."""
        overlap = self
        for other in others:
            overlap = overlap.overlap(other)

        return overlap

    def boundaries(self) -> Optional[Period]:
        """
        The smallest period spanning every member, or None when empty.

        Raises:
            CannotComparePeriods: If the members do not share one precision
        """
        if not self._periods:
            return None

        first = self._periods[0]
        for period in self._periods[1:]:
            first.ensure_precision_matches(period)

        start = min(period.included_start for period in self._periods)
        end = max(period.included_end for period in self._periods)

        return Period(start, end, first.precision)

    def gaps(self) -> "PeriodCollection":
        """The stretches inside our boundaries that no member covers."""
        boundaries = self.boundaries()
        if boundaries is None:
            return PeriodCollection()

        gaps = boundaries.subtract(*self._periods)
        logger.debug("Found %d gap(s) across %d period(s)", len(gaps), len(self))
        return gaps

    def intersect(self, intersection: Period) -> "PeriodCollection":
        """Each member clipped to ``intersection``; members outside it are dropped."""
        intersected: List[Period] = []
        for period in self._periods:
            overlap = intersection.overlap(period)
            if overlap is not None:
                intersected.append(overlap)

        return PeriodCollection(*intersected)

    def subtract(self, others: Union[Period, "PeriodCollection"]) -> "PeriodCollection":
        """Remove a period, or every period of a collection, from each member."""
        if isinstance(others, Period):
            others = PeriodCollection(others)

        if others.is_empty():
            return self

        remainders: List[Period] = []
        for period in self._periods:
            remainders.extend(period.subtract(*others))

        return PeriodCollection(*remainders)
