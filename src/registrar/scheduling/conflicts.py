"""Faculty schedule conflict detection."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Protocol

from registrar.scheduling.timeslot import TimeSlot, overlaps


class Scheduled(Protocol):
    """Anything occupying a weekly time slot."""

    @property
    def time_slot(self) -> TimeSlot: ...


def has_conflict(existing: Iterable[Scheduled], candidate: TimeSlot) -> bool:
    """Check a candidate slot against a faculty member's assigned slots.

    ``existing`` must already be narrowed to one faculty member within one
    registration period; only the slots are compared here.

    Args:
        existing: Offerings already assigned to the faculty member.
        candidate: The slot being requested.

    Returns:
        True as soon as any existing slot overlaps the candidate.
    """
    return any(overlaps(item.time_slot, candidate) for item in existing)
