"""OfferingService - Creation and scheduling of offered courses."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError

from registrar.exceptions import DuplicateSectionError, NotFoundError
from registrar.offerings.validation import (
    department_belongs_to,
    entity_exists,
    faculty_is_available,
    registration_is_upcoming,
    run_checks,
    section_is_free,
)
from registrar.scheduling import TimeSlot, Weekday, format_clock
from registrar.state_store import (
    AcademicFacultyRepository,
    CourseRepository,
    DepartmentRepository,
    FacultyRepository,
    OfferedCourse,
    OfferedCourseRepository,
    SemesterRegistrationRepository,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

    from registrar.state_store import StateStore

logger = logging.getLogger(__name__)


def _stored_days(time_slot: TimeSlot) -> list[str]:
    week = list(Weekday)
    return [day.value for day in sorted(time_slot.weekdays, key=week.index)]


class OfferingService:
    """Validates and writes offered courses.

    Checks and the write share one transaction, so a conflict or duplicate
    check always reflects the state the offering is written into.
    """

    def __init__(self, state_store: StateStore) -> None:
        """Initialize the OfferingService.

        Args:
            state_store: StateStore instance for offering persistence.
        """
        self.state_store = state_store

    def create_offering(
        self,
        semester_registration_id: str,
        academic_faculty_id: str,
        department_id: str,
        course_id: str,
        faculty_id: str,
        section: str,
        days: Iterable[str],
        start_time: str,
        end_time: str,
        max_capacity: int = 10,
    ) -> OfferedCourse:
        """Offer a course section taught by a faculty member.

        Args:
            semester_registration_id: Registration period of the offering
            academic_faculty_id: Academic faculty the department belongs to
            department_id: Department offering the course
            course_id: The catalog course
            faculty_id: Faculty member teaching the section
            section: Section label, unique per course within the registration
            days: Weekday codes the section meets on
            start_time: Start in 'HH:MM'
            end_time: End in 'HH:MM'
            max_capacity: Maximum number of enrolled students

        Returns:
            Created OfferedCourse object with generated ID

        Raises:
            InvalidTimeSlotError: If the schedule is malformed
            NotFoundError: If a referenced entity doesn't exist
            IntegrityMismatchError: If the department is not in the academic faculty
            DuplicateSectionError: If the section is already offered
            ScheduleConflictError: If the faculty member is busy at that time
        """
        time_slot = TimeSlot.from_strings(days, start_time, end_time)

        try:
            with self.state_store.transaction() as session:
                registrations = SemesterRegistrationRepository(session)
                departments = DepartmentRepository(session)
                offerings = OfferedCourseRepository(session)

                run_checks(
                    [
                        entity_exists(
                            registrations, "Semester registration", semester_registration_id
                        ),
                        entity_exists(
                            AcademicFacultyRepository(session),
                            "Academic faculty",
                            academic_faculty_id,
                        ),
                        entity_exists(departments, "Department", department_id),
                        entity_exists(CourseRepository(session), "Course", course_id),
                        entity_exists(FacultyRepository(session), "Faculty", faculty_id),
                        department_belongs_to(departments, department_id, academic_faculty_id),
                        section_is_free(offerings, semester_registration_id, course_id, section),
                        faculty_is_available(
                            offerings, semester_registration_id, faculty_id, time_slot
                        ),
                    ]
                )

                registration = registrations.get(semester_registration_id)
                offering = offerings.add(
                    OfferedCourse(
                        semester_registration_id=semester_registration_id,
                        semester_id=registration.semester_id,  # type: ignore[union-attr]
                        academic_faculty_id=academic_faculty_id,
                        department_id=department_id,
                        course_id=course_id,
                        faculty_id=faculty_id,
                        section=section,
                        days=_stored_days(time_slot),
                        start_time=format_clock(time_slot.start),
                        end_time=format_clock(time_slot.end),
                        max_capacity=max_capacity,
                    )
                )
        except IntegrityError as e:
            if "uq_offered_course_section" in str(e) or "offered_courses.section" in str(e):
                raise DuplicateSectionError(
                    f"Offered course with section '{section}' already exists in this registration"
                ) from e
            raise

        logger.info(
            "Created offered course %s (course %s, section %s) in registration %s",
            offering.id,
            course_id,
            section,
            semester_registration_id,
        )
        return offering

    def get_offering(self, offered_course_id: str) -> OfferedCourse:
        """Get an offered course by ID.

        Raises:
            NotFoundError: If the offered course doesn't exist
        """
        with self.state_store.transaction() as session:
            offering = OfferedCourseRepository(session).get(offered_course_id)
            if offering is None:
                raise NotFoundError("Offered course", offered_course_id)
            return offering

    def list_offerings(
        self,
        semester_registration_id: str | None = None,
        faculty_id: str | None = None,
    ) -> list[OfferedCourse]:
        """List offered courses with optional filters."""
        with self.state_store.transaction() as session:
            return OfferedCourseRepository(session).list(
                semester_registration_id=semester_registration_id,
                faculty_id=faculty_id,
            )

    def update_offering(
        self,
        offered_course_id: str,
        faculty_id: str,
        days: Iterable[str],
        start_time: str,
        end_time: str,
        max_capacity: int | None = None,
    ) -> OfferedCourse:
        """Reassign or reschedule an offered course.

        The offering being updated is left out of its own conflict scope.

        Raises:
            InvalidTimeSlotError: If the schedule is malformed
            NotFoundError: If the offering or the faculty member doesn't exist
            ImmutableStateError: If the registration is no longer UPCOMING
            ScheduleConflictError: If the faculty member is busy at that time
        """
        time_slot = TimeSlot.from_strings(days, start_time, end_time)

        with self.state_store.transaction() as session:
            offerings = OfferedCourseRepository(session)
            offering = offerings.get(offered_course_id)
            if offering is None:
                raise NotFoundError("Offered course", offered_course_id)

            run_checks(
                [
                    entity_exists(FacultyRepository(session), "Faculty", faculty_id),
                    registration_is_upcoming(
                        SemesterRegistrationRepository(session),
                        offering.semester_registration_id,
                    ),
                    faculty_is_available(
                        offerings,
                        offering.semester_registration_id,
                        faculty_id,
                        time_slot,
                        exclude_id=offering.id,
                    ),
                ]
            )

            offering.faculty_id = faculty_id
            offering.days = _stored_days(time_slot)
            offering.start_time = format_clock(time_slot.start)
            offering.end_time = format_clock(time_slot.end)
            if max_capacity is not None:
                offering.max_capacity = max_capacity
            offering = offerings.save(offering)

        logger.info("Updated offered course %s", offered_course_id)
        return offering

    def delete_offering(self, offered_course_id: str) -> OfferedCourse:
        """Delete an offered course while its registration is UPCOMING.

        Returns:
            The deleted OfferedCourse.

        Raises:
            NotFoundError: If the offered course doesn't exist
            ImmutableStateError: If the registration is no longer UPCOMING
        """
        with self.state_store.transaction() as session:
            offerings = OfferedCourseRepository(session)
            offering = offerings.get(offered_course_id)
            if offering is None:
                raise NotFoundError("Offered course", offered_course_id)

            run_checks(
                [
                    registration_is_upcoming(
                        SemesterRegistrationRepository(session),
                        offering.semester_registration_id,
                        action="delete",
                    ),
                ]
            )
            offerings.delete(offered_course_id)

        logger.info("Deleted offered course %s", offered_course_id)
        return offering
