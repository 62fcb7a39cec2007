"""
Adapters layer - reading periods from outside sources.
"""

from .schedule_file import ScheduleFile

__all__ = ["ScheduleFile"]
