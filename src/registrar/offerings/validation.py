"""Check stages run before an offering is written.

A check is a zero-argument callable returning ``None`` when it passes or the
``RegistrarError`` describing why it failed. Checks are evaluated lazily and in
order by ``run_checks``; nothing after the first failure is evaluated.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from typing import TYPE_CHECKING

from registrar.exceptions import (
    DuplicateSectionError,
    ImmutableStateError,
    IntegrityMismatchError,
    NotFoundError,
    RegistrarError,
    ScheduleConflictError,
)
from registrar.scheduling import TimeSlot, has_conflict
from registrar.state_store import RegistrationStatus

if TYPE_CHECKING:
    from registrar.state_store import (
        DepartmentRepository,
        OfferedCourseRepository,
        SemesterRegistrationRepository,
    )
    from registrar.state_store.repositories import Repository

Check = Callable[[], RegistrarError | None]


def run_checks(checks: Iterable[Check]) -> None:
    """Run checks in order and raise the first failure."""
    for check in checks:
        error = check()
        if error is not None:
            raise error


def entity_exists(repository: Repository, entity: str, entity_id: str) -> Check:
    def check() -> RegistrarError | None:
        if not repository.exists(entity_id):
            return NotFoundError(entity, entity_id)
        return None

    return check


def department_belongs_to(
    departments: DepartmentRepository, department_id: str, academic_faculty_id: str
) -> Check:
    def check() -> RegistrarError | None:
        if not departments.belongs_to(department_id, academic_faculty_id):
            return IntegrityMismatchError(
                f"Department '{department_id}' does not belong to "
                f"academic faculty '{academic_faculty_id}'"
            )
        return None

    return check


def section_is_free(
    offerings: OfferedCourseRepository,
    semester_registration_id: str,
    course_id: str,
    section: str,
) -> Check:
    def check() -> RegistrarError | None:
        if offerings.find_section(semester_registration_id, course_id, section) is not None:
            return DuplicateSectionError(
                f"Offered course with section '{section}' already exists in this registration"
            )
        return None

    return check


def registration_is_upcoming(
    registrations: SemesterRegistrationRepository,
    semester_registration_id: str,
    action: str = "update",
) -> Check:
    def check() -> RegistrarError | None:
        registration = registrations.get(semester_registration_id)
        if registration is None:
            return NotFoundError("Semester registration", semester_registration_id)
        if registration.registration_status is not RegistrationStatus.UPCOMING:
            return ImmutableStateError(
                f"You can not {action} this offered course as it is {registration.status}"
            )
        return None

    return check


def faculty_is_available(
    offerings: OfferedCourseRepository,
    semester_registration_id: str,
    faculty_id: str,
    candidate: TimeSlot,
    exclude_id: str | None = None,
) -> Check:
    """Check the faculty member has no overlapping offering in the registration.

    Args:
        offerings: Offering repository of the current transaction.
        semester_registration_id: Registration period the offering is in.
        faculty_id: Faculty member being assigned.
        candidate: Requested time slot.
        exclude_id: Offering being updated, left out of its own conflict scope.
    """

    def check() -> RegistrarError | None:
        assigned = offerings.list_for_faculty(
            semester_registration_id, faculty_id, exclude_id=exclude_id
        )
        if has_conflict(assigned, candidate):
            return ScheduleConflictError(
                "The faculty is not available at that time! Please choose another time or days."
            )
        return None

    return check
