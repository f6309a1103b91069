"""Weekly recurring time slots and the overlap predicate."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import time
from enum import StrEnum


class Weekday(StrEnum):
    """Day of the week an offering meets on."""

    MON = "Mon"
    TUE = "Tue"
    WED = "Wed"
    THU = "Thu"
    FRI = "Fri"
    SAT = "Sat"
    SUN = "Sun"


class InvalidTimeSlotError(ValueError):
    """Raised when a time slot cannot be constructed from its parts."""


def parse_clock(value: str) -> time:
    """Parse an 'HH:MM' clock time.

    Args:
        value: 24-hour clock time, e.g. "09:30".

    Returns:
        The parsed time of day.

    Raises:
        InvalidTimeSlotError: If the format or the values are invalid.
    """
    parts = value.strip().split(":")
    if len(parts) != 2 or not all(p.isascii() and p.isdigit() and len(p) == 2 for p in parts):
        raise InvalidTimeSlotError(f"Invalid time format: {value!r}")
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours <= 23 and 0 <= minutes <= 59):
        raise InvalidTimeSlotError(f"Invalid time value: {value!r}")
    return time(hours, minutes)


def format_clock(value: time) -> str:
    """Format a time of day as 'HH:MM'."""
    return f"{value.hour:02d}:{value.minute:02d}"


def _minutes(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True)
class TimeSlot:
    """A weekly recurring slot: a set of weekdays and a clock-time range.

    Attributes:
        weekdays: Days the slot recurs on. Never empty.
        start: Start time of day (inclusive).
        end: End time of day (exclusive). Always after ``start``.
    """

    weekdays: frozenset[Weekday]
    start: time
    end: time

    def __post_init__(self) -> None:
        if not self.weekdays:
            raise InvalidTimeSlotError("A time slot needs at least one weekday")
        if _minutes(self.start) >= _minutes(self.end):
            raise InvalidTimeSlotError(
                f"Start time {format_clock(self.start)} must be before "
                f"end time {format_clock(self.end)}"
            )

    @classmethod
    def from_strings(cls, days: Iterable[str], start_time: str, end_time: str) -> TimeSlot:
        """Build a slot from stored record fields.

        Args:
            days: Weekday codes such as "Mon" or "Wed".
            start_time: Start in 'HH:MM'.
            end_time: End in 'HH:MM'.

        Raises:
            InvalidTimeSlotError: If any part is invalid.
        """
        try:
            weekdays = frozenset(Weekday(day) for day in days)
        except ValueError as e:
            raise InvalidTimeSlotError(str(e)) from e
        return cls(weekdays=weekdays, start=parse_clock(start_time), end=parse_clock(end_time))

    @property
    def start_minutes(self) -> int:
        return _minutes(self.start)

    @property
    def end_minutes(self) -> int:
        return _minutes(self.end)

    def overlaps(self, other: TimeSlot) -> bool:
        """Check whether this slot overlaps another one."""
        return overlaps(self, other)


def overlaps(a: TimeSlot, b: TimeSlot) -> bool:
    """Decide whether two weekly slots collide.

    Slots collide only if they share a weekday and their half-open time ranges
    intersect. Back-to-back slots (``a.end == b.start``) do not collide.
    """
    if a.weekdays.isdisjoint(b.weekdays):
        return False
    return a.start_minutes < b.end_minutes and b.start_minutes < a.end_minutes
