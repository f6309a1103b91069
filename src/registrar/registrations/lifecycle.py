"""Semester registration lifecycle: UPCOMING -> ONGOING -> ENDED."""

from __future__ import annotations

from typing import TYPE_CHECKING

from registrar.exceptions import (
    ActiveRegistrationExistsError,
    IllegalTransitionError,
    ImmutableStateError,
    InvalidWindowError,
)
from registrar.state_store import RegistrationStatus

if TYPE_CHECKING:
    from datetime import datetime

    from registrar.state_store import SemesterRegistration

ALLOWED_TRANSITIONS: dict[RegistrationStatus, frozenset[RegistrationStatus]] = {
    RegistrationStatus.UPCOMING: frozenset({RegistrationStatus.ONGOING}),
    RegistrationStatus.ONGOING: frozenset({RegistrationStatus.ENDED}),
    RegistrationStatus.ENDED: frozenset(),
}


def can_transition(current: RegistrationStatus, requested: RegistrationStatus) -> bool:
    """Check whether ``requested`` is reachable from ``current`` in one step."""
    return requested in ALLOWED_TRANSITIONS[current]


def ensure_transition(current: RegistrationStatus, requested: RegistrationStatus) -> None:
    """Reject any status change that is not an allowed edge.

    Raises:
        IllegalTransitionError: For backward moves, skipped states, same-state
            requests and anything requested from ENDED.
    """
    if not can_transition(current, requested):
        raise IllegalTransitionError(current.value, requested.value)


def ensure_editable(registration: SemesterRegistration, action: str = "update") -> None:
    """Require a registration to still be UPCOMING.

    Raises:
        ImmutableStateError: If the registration is ONGOING or ENDED.
    """
    if registration.registration_status is not RegistrationStatus.UPCOMING:
        raise ImmutableStateError(
            f"You can not {action} this semester registration as it is {registration.status}"
        )


def ensure_no_active(active: SemesterRegistration | None) -> None:
    """Require that no registration is currently UPCOMING or ONGOING.

    Raises:
        ActiveRegistrationExistsError: If ``active`` is a registration.
    """
    if active is not None:
        raise ActiveRegistrationExistsError(
            f"There is already an {active.status} registered semester"
        )


def check_window(
    start_date: datetime, end_date: datetime, min_credit: int, max_credit: int
) -> None:
    """Require an ordered window and ordered credit bounds.

    Raises:
        InvalidWindowError: If ``start_date`` is not before ``end_date`` or
            ``min_credit`` exceeds ``max_credit``.
    """
    if start_date >= end_date:
        raise InvalidWindowError(
            f"Registration must start before it ends ({start_date} >= {end_date})"
        )
    if min_credit > max_credit:
        raise InvalidWindowError(
            f"Minimum credit {min_credit} exceeds maximum credit {max_credit}"
        )
