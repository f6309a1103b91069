"""Unit tests for faculty conflict detection."""

from dataclasses import dataclass

import pytest

from registrar.scheduling import TimeSlot, has_conflict


@dataclass
class Assigned:
    time_slot: TimeSlot


def assigned(days: list[str], start: str, end: str) -> Assigned:
    return Assigned(TimeSlot.from_strings(days, start, end))


@pytest.mark.unit
class TestHasConflict:
    """Tests for has_conflict."""

    def test_no_existing_slots(self) -> None:
        """A faculty member with nothing assigned is always available."""
        candidate = TimeSlot.from_strings(["Mon"], "09:00", "10:00")

        assert has_conflict([], candidate) is False

    def test_detects_overlap_among_many(self) -> None:
        """Any single overlapping slot is a conflict."""
        existing = [
            assigned(["Tue"], "09:00", "10:00"),
            assigned(["Mon"], "08:00", "09:00"),
            assigned(["Wed", "Mon"], "09:30", "11:00"),
        ]
        candidate = TimeSlot.from_strings(["Mon"], "09:00", "10:00")

        assert has_conflict(existing, candidate) is True

    def test_back_to_back_schedule_allowed(self) -> None:
        """Slots ending when the candidate starts are not conflicts."""
        existing = [
            assigned(["Mon"], "08:00", "09:00"),
            assigned(["Mon"], "10:00", "11:00"),
        ]
        candidate = TimeSlot.from_strings(["Mon"], "09:00", "10:00")

        assert has_conflict(existing, candidate) is False

    def test_stops_at_first_match(self) -> None:
        """Items after the first conflict are not inspected."""
        first = assigned(["Fri"], "13:00", "14:00")

        def items():
            yield first
            raise AssertionError("scanned past the first conflict")

        candidate = TimeSlot.from_strings(["Fri"], "13:30", "14:30")

        assert has_conflict(items(), candidate) is True
