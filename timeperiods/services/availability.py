"""
Free-slot finding on top of the period algebra.

``AvailabilityCalculator`` holds the pure logic; ``AvailabilityService``
fetches busy periods through a schedule source and hands them to the
calculator, so the source can be swapped for a stub in tests.
"""

from __future__ import annotations

import logging
from typing import Dict, List, Protocol, Sequence

from ..domain.collection import PeriodCollection
from ..domain.period import Period

logger = logging.getLogger(__name__)


class ScheduleSourceProtocol(Protocol):
    """Protocol describing the schedule source behaviour needed by the service."""

    def get_schedule(
        self,
        participants: Sequence[str],
        window: Period,
    ) -> Dict[str, PeriodCollection]:
        """Return busy periods per participant."""


class AvailabilityCalculator:
    """
    Calculates the periods in a window when everybody is free.

    Algorithm:
    1. For each participant, subtract their busy periods from the window
    2. Overlap the free periods of all participants
    3. Drop results shorter than ``min_length`` precision units
    4. Return them ordered by start
    """

    def __init__(self, min_length: int = 1):
        if min_length < 1:
            raise ValueError(f"min_length must be at least 1, got {min_length}")
        self.min_length = min_length

    def free_periods(self, window: Period, busy: PeriodCollection) -> PeriodCollection:
        """The parts of ``window`` not covered by any busy period."""
        return PeriodCollection(window).subtract(busy)

    def common_free_periods(
        self,
        window: Period,
        busy_by_participant: Dict[str, PeriodCollection],
    ) -> PeriodCollection:
        """
        Periods in ``window`` when no participant is busy.

        Args:
            window: The span to search
            busy_by_participant: Busy periods keyed by participant

        Returns:
            Free periods of at least ``min_length`` units, sorted by start
        """
        if not busy_by_participant:
            return self._long_enough(PeriodCollection(window))

        free_by_participant: List[PeriodCollection] = [
            self.free_periods(window, busy) for busy in busy_by_participant.values()
        ]

        first, *rest = free_by_participant
        common = first.overlap_all(*rest)
        logger.debug(
            "%d common free period(s) for %d participant(s) in %s",
            len(common), len(free_by_participant), window,
        )

        return self._long_enough(common).sort()

    def _long_enough(self, periods: PeriodCollection) -> PeriodCollection:
        return periods.filter(lambda period: period.length() >= self.min_length)


class AvailabilityService:
    """
    Orchestrates busy-period retrieval and free-period calculation.

    Dependency inversion toward a protocol makes it easy to plug in the YAML
    schedule file or a stub in tests.
    """

    def __init__(
        self,
        schedule_source: ScheduleSourceProtocol,
        calculator: AvailabilityCalculator,
    ) -> None:
        self._schedule_source = schedule_source
        self._calculator = calculator

    def find_free_periods(
        self,
        *,
        participants: Sequence[str],
        window: Period,
    ) -> PeriodCollection:
        """Retrieve busy data, normalize it, and compute common free periods."""
        busy = self.fetch_busy_periods(participants=participants, window=window)
        return self._calculator.common_free_periods(window, busy)

    def fetch_busy_periods(
        self,
        *,
        participants: Sequence[str],
        window: Period,
    ) -> Dict[str, PeriodCollection]:
        """Fetch busy periods for the requested participants."""
        participant_list = list(participants)
        busy = self._schedule_source.get_schedule(participant_list, window)
        return self._ensure_busy_entries(participant_list, busy)

    @staticmethod
    def _ensure_busy_entries(
        participants: Sequence[str],
        busy: Dict[str, PeriodCollection],
    ) -> Dict[str, PeriodCollection]:
        """
        Restrict the busy map to exactly the requested participants.

        A source may omit participants without entries; they are treated as
        free for the whole window. Participants nobody asked for are ignored.
        """
        normalized: Dict[str, PeriodCollection] = {}

        for participant in participants:
            normalized[participant] = busy.get(participant, PeriodCollection())

        for participant in busy:
            if participant not in normalized:
                logger.warning("Ignoring busy periods for unrequested participant '%s'", participant)

        return normalized
