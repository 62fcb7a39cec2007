"""Hypothesis property-based tests.

Laws of the period algebra that must hold for any input, checked by random
generation over day-precision periods in 2022.
"""

from __future__ import annotations

from datetime import timedelta, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from timeperiods import Boundaries, Period, PeriodCollection, Precision

from conftest import utc


EPOCH = utc(2022, 1, 1)


# ---------------------------------------------------------------------------
# Strategies
# ---------------------------------------------------------------------------

def _day_period(offset: int, length: int) -> Period:
    start = EPOCH + timedelta(days=offset)
    return Period(start, start + timedelta(days=length - 1), Precision.DAY)


_day_periods = st.builds(
    _day_period,
    st.integers(min_value=0, max_value=120),
    st.integers(min_value=1, max_value=40),
)

_instants = st.datetimes(
    min_value=EPOCH.replace(year=1950, tzinfo=None),
    max_value=EPOCH.replace(year=2100, tzinfo=None),
    timezones=st.just(timezone.utc),
)

_precisions = st.sampled_from(Precision.all())

_boundaries = st.sampled_from(list(Boundaries))


def _days_of(periods) -> set:
    covered = set()
    for p in periods:
        covered.update(p)
    return covered


# ---------------------------------------------------------------------------
# Property: precision arithmetic
# ---------------------------------------------------------------------------
class TestPrecisionLaws:
    """round/increment/decrement behave consistently for every precision."""

    @given(instant=_instants, precision=_precisions)
    @settings(max_examples=100)
    def test_round_is_idempotent(self, instant, precision):
        """Rounding an aligned value changes nothing."""
        once = precision.round(instant)
        assert precision.round(once) == once

    @given(instant=_instants, precision=_precisions)
    @settings(max_examples=100)
    def test_decrement_undoes_increment(self, instant, precision):
        """One step forward and one back returns to the aligned value."""
        aligned = precision.round(instant)
        assert precision.decrement(precision.increment(aligned)) == aligned

    @given(instant=_instants, precision=_precisions)
    @settings(max_examples=100)
    def test_ceil_stays_in_unit(self, instant, precision):
        """The ceiling lies in the same unit as the value."""
        assert precision.round(precision.ceil(instant)) == precision.round(instant)


# ---------------------------------------------------------------------------
# Property: construction
# ---------------------------------------------------------------------------
class TestConstructionLaws:
    """Included endpoints survive a trip through any boundary style."""

    @given(p=_day_periods, boundaries=_boundaries)
    @settings(max_examples=50)
    def test_make_with_boundaries_keeps_included_endpoints(self, p, boundaries):
        """The rebuilt period includes exactly the requested endpoints."""
        rebuilt = Period.make_with_boundaries(p.included_start, p.included_end, Precision.DAY, boundaries)

        assert rebuilt.included_start == p.included_start
        assert rebuilt.included_end == p.included_end
        assert rebuilt.boundaries is boundaries
        assert rebuilt == p

    @given(p=_day_periods)
    @settings(max_examples=50)
    def test_length_matches_iteration(self, p):
        """length() counts exactly the instants iteration yields."""
        assert p.length() == len(list(p))


# ---------------------------------------------------------------------------
# Property: overlap
# ---------------------------------------------------------------------------
class TestOverlapLaws:
    """overlap is commutative and agrees with overlaps_with."""

    @given(a=_day_periods, b=_day_periods)
    @settings(max_examples=100)
    def test_overlap_is_commutative(self, a, b):
        """A ∩ B == B ∩ A."""
        assert a.overlap(b) == b.overlap(a)

    @given(a=_day_periods, b=_day_periods)
    @settings(max_examples=100)
    def test_overlap_agrees_with_overlaps_with(self, a, b):
        """A non-empty overlap exists exactly when the periods overlap."""
        shared = a.overlap(b)

        assert (shared is not None) == a.overlaps_with(b)
        if shared is not None:
            assert a.contains(shared) and b.contains(shared)

    @given(a=_day_periods, b=_day_periods)
    @settings(max_examples=100)
    def test_touching_periods_do_not_overlap(self, a, b):
        """Touching and overlapping exclude each other."""
        assert not (a.touches_with(b) and a.overlaps_with(b))


# ---------------------------------------------------------------------------
# Property: subtract
# ---------------------------------------------------------------------------
class TestSubtractLaws:
    """Subtract partitions the period into remainders and removed days."""

    @given(a=_day_periods, others=st.lists(_day_periods, max_size=4))
    @settings(max_examples=100)
    def test_remainders_and_overlaps_cover_the_period(self, a, others):
        """Remainders plus the removed parts give back exactly A."""
        remainders = a.subtract(*others)
        removed = [o.overlap(a) for o in others]

        covered = _days_of(remainders) | _days_of(r for r in removed if r is not None)
        assert covered == set(a)

    @given(a=_day_periods, others=st.lists(_day_periods, max_size=4))
    @settings(max_examples=100)
    def test_remainders_avoid_every_deduction(self, a, others):
        """No remainder overlaps any subtracted period."""
        for remainder in a.subtract(*others):
            assert a.contains(remainder)
            for other in others:
                assert not remainder.overlaps_with(other)

    @given(a=_day_periods, others=st.lists(_day_periods, max_size=4))
    @settings(max_examples=100)
    def test_remainders_are_minimal_and_ordered(self, a, others):
        """Remainders are sorted, disjoint and never touch each other."""
        remainders = a.subtract(*others)

        for earlier, later in zip(remainders, remainders[1:]):
            assert earlier.is_before(later)
            assert not earlier.touches_with(later)

    @given(a=_day_periods)
    def test_subtract_nothing_is_identity(self, a):
        """A minus nothing is A."""
        assert a.subtract() == PeriodCollection(a)


# ---------------------------------------------------------------------------
# Property: collections
# ---------------------------------------------------------------------------
class TestCollectionLaws:
    """gaps and boundaries agree with each other."""

    @given(periods=st.lists(_day_periods, min_size=1, max_size=5))
    @settings(max_examples=100)
    def test_gaps_and_members_cover_boundaries(self, periods):
        """Members plus gaps cover the boundaries without overlap."""
        members = PeriodCollection(*periods)
        boundaries = members.boundaries()
        gaps = members.gaps()

        assert _days_of(members) | _days_of(gaps) == set(boundaries)
        assert not (_days_of(members) & _days_of(gaps))

    @given(a=_day_periods, others=st.lists(_day_periods, max_size=4))
    @settings(max_examples=50)
    def test_no_gaps_when_a_member_spans_everything(self, a, others):
        """A member equal to the boundaries leaves no gaps."""
        inside = PeriodCollection(*others).intersect(a)

        assert PeriodCollection(a, *inside).gaps().is_empty()
