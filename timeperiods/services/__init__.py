"""
Service layer helpers that orchestrate adapters and domain logic.
"""

from .availability import AvailabilityCalculator, AvailabilityService, ScheduleSourceProtocol

__all__ = ["AvailabilityCalculator", "AvailabilityService", "ScheduleSourceProtocol"]
