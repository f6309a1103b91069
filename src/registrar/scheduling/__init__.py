"""Scheduling - Weekly time slots and faculty conflict detection."""

from registrar.scheduling.conflicts import Scheduled, has_conflict
from registrar.scheduling.timeslot import (
    InvalidTimeSlotError,
    TimeSlot,
    Weekday,
    format_clock,
    overlaps,
    parse_clock,
)

__all__ = [
    "InvalidTimeSlotError",
    "Scheduled",
    "TimeSlot",
    "Weekday",
    "format_clock",
    "has_conflict",
    "overlaps",
    "parse_clock",
]
