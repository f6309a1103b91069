"""Error taxonomy for registration and offering operations.

Every failure raised by the core carries an ``ErrorKind`` so callers can map it
to a distinguishable client-visible code.
"""

from __future__ import annotations

from enum import StrEnum


class ErrorKind(StrEnum):
    """Kinds of failure a core operation can report."""

    NOT_FOUND = "NotFound"
    INTEGRITY_MISMATCH = "IntegrityMismatch"
    DUPLICATE_SECTION = "DuplicateSection"
    SCHEDULE_CONFLICT = "ScheduleConflict"
    ACTIVE_REGISTRATION_EXISTS = "ActiveRegistrationExists"
    ILLEGAL_TRANSITION = "IllegalTransition"
    IMMUTABLE_STATE = "ImmutableState"
    INVALID_WINDOW = "InvalidWindow"
    CASCADE_DELETE_FAILED = "CascadeDeleteFailed"


class RegistrarError(Exception):
    """Base exception for registration and offering errors."""

    kind: ErrorKind

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(RegistrarError):
    """A referenced entity does not exist."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, entity: str, entity_id: str) -> None:
        super().__init__(f"{entity} with id '{entity_id}' not found")
        self.entity = entity
        self.entity_id = entity_id


class IntegrityMismatchError(RegistrarError):
    """A referenced entity does not belong to its claimed parent."""

    kind = ErrorKind.INTEGRITY_MISMATCH


class DuplicateSectionError(RegistrarError):
    """An offering with the same registration, course and section exists."""

    kind = ErrorKind.DUPLICATE_SECTION


class ScheduleConflictError(RegistrarError):
    """The faculty member already teaches in an overlapping time slot."""

    kind = ErrorKind.SCHEDULE_CONFLICT


class ActiveRegistrationExistsError(RegistrarError):
    """Another registration is active, or the semester is already registered."""

    kind = ErrorKind.ACTIVE_REGISTRATION_EXISTS


class IllegalTransitionError(RegistrarError):
    """Requested status change does not follow an allowed edge."""

    kind = ErrorKind.ILLEGAL_TRANSITION

    def __init__(self, current: str, requested: str) -> None:
        super().__init__(f"Cannot change registration status from {current} to {requested}")
        self.current = current
        self.requested = requested


class ImmutableStateError(RegistrarError):
    """Mutation attempted while the owning registration is not UPCOMING."""

    kind = ErrorKind.IMMUTABLE_STATE


class InvalidWindowError(RegistrarError):
    """A registration window or its credit bounds are out of order."""

    kind = ErrorKind.INVALID_WINDOW


class CascadeDeleteFailedError(RegistrarError):
    """The atomic registration delete could not complete."""

    kind = ErrorKind.CASCADE_DELETE_FAILED

    def __init__(self, stage: str, registration_id: str) -> None:
        super().__init__(
            f"Failed to delete semester registration '{registration_id}' at stage '{stage}'"
        )
        self.stage = stage
        self.registration_id = registration_id
