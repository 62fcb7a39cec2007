"""
Busy schedules read from a YAML file.
"""

import logging
from datetime import tzinfo
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import yaml

from ..domain.collection import PeriodCollection
from ..domain.exceptions import InvalidDate
from ..domain.factory import from_string
from ..domain.period import Period

logger = logging.getLogger(__name__)


class ScheduleFile:
    """
    Schedule source backed by a YAML file of busy periods per participant.

    Expected layout, with periods in bracket notation::

        participants:
          alice:
            - "[2022-01-03 09, 2022-01-03 11)"
          bob: []
    """

    def __init__(self, busy: Dict[str, PeriodCollection]):
        self._busy = busy

    @classmethod
    def load(cls, path: Path, tz: Optional[tzinfo] = None) -> "ScheduleFile":
        """
        Read and parse a schedule file.

        Args:
            path: Path to the YAML schedule
            tz: Timezone attached to the parsed dates

        Raises:
            FileNotFoundError: If the file doesn't exist
            ValueError: If the YAML is malformed
            InvalidDate: If a period entry cannot be parsed
        """
        if not path.exists():
            raise FileNotFoundError(f"Schedule file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {path}: {exc}") from exc

        participants = data.get("participants") if isinstance(data, dict) else None
        if not isinstance(participants, dict):
            raise ValueError(f"Schedule file {path} must contain a 'participants' mapping.")

        busy: Dict[str, PeriodCollection] = {}
        for name, entries in participants.items():
            if entries is None:
                entries = []
            if not isinstance(entries, list):
                raise ValueError(
                    f"Participant '{name}' in {path} must list busy periods, got {type(entries).__name__}."
                )
            busy[str(name)] = cls._parse_entries(str(name), entries, tz)

        logger.debug("Loaded busy periods for %d participant(s) from %s", len(busy), path)
        return cls(busy)

    @staticmethod
    def _parse_entries(name: str, entries: List[str], tz: Optional[tzinfo]) -> PeriodCollection:
        periods: List[Period] = []
        for entry in entries:
            try:
                periods.append(from_string(str(entry), tz=tz))
            except InvalidDate as exc:
                raise InvalidDate(f"Participant '{name}': {exc}") from exc
        return PeriodCollection(*periods)

    @property
    def participants(self) -> List[str]:
        return list(self._busy)

    def get_schedule(self, participants: Sequence[str], window: Period) -> Dict[str, PeriodCollection]:
        """
        Busy periods per participant that overlap ``window``.

        Participants missing from the file are left out; the service fills
        them in as fully free.
        """
        schedule: Dict[str, PeriodCollection] = {}

        for participant in participants:
            if participant not in self._busy:
                logger.warning("No schedule entries for participant '%s'", participant)
                continue

            schedule[participant] = self._busy[participant].filter(window.overlaps_with)

        return schedule
