"""Narrow per-entity repositories bound to a transaction session.

Repositories never commit. The caller owns the transaction (see
``Database.transaction``) and decides whether the unit of work is kept.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar

from sqlalchemy import delete, select

from registrar.state_store.models import (
    ACTIVE_STATUSES,
    AcademicFaculty,
    Base,
    Course,
    Department,
    Faculty,
    OfferedCourse,
    RegistrationStatus,
    Semester,
    SemesterRegistration,
)

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT", bound=Base)


class Repository(Generic[ModelT]):
    """Lookup and write access to one entity type."""

    model: ClassVar[type[Base]]

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, record_id: str) -> ModelT | None:
        """Get a record by ID, or None if it doesn't exist."""
        return self.session.get(self.model, record_id)  # type: ignore[return-value]

    def exists(self, record_id: str) -> bool:
        """Check whether a record with the given ID exists."""
        stmt = select(self.model.id).where(self.model.id == record_id)  # type: ignore[attr-defined]
        return self.session.execute(stmt).first() is not None

    def add(self, record: ModelT) -> ModelT:
        """Insert a record and load its server-generated columns."""
        self.session.add(record)
        self.session.flush()
        self.session.refresh(record)
        return record

    def save(self, record: ModelT) -> ModelT:
        """Flush pending changes on a record and reload it."""
        self.session.flush()
        self.session.refresh(record)
        return record


class AcademicFacultyRepository(Repository[AcademicFaculty]):
    model = AcademicFaculty


class DepartmentRepository(Repository[Department]):
    model = Department

    def belongs_to(self, department_id: str, academic_faculty_id: str) -> bool:
        """Check that a department is part of the given academic faculty."""
        stmt = select(Department.id).where(
            Department.id == department_id,
            Department.academic_faculty_id == academic_faculty_id,
        )
        return self.session.execute(stmt).first() is not None


class CourseRepository(Repository[Course]):
    model = Course


class FacultyRepository(Repository[Faculty]):
    model = Faculty


class SemesterRepository(Repository[Semester]):
    model = Semester


class SemesterRegistrationRepository(Repository[SemesterRegistration]):
    model = SemesterRegistration

    def find_active(self) -> SemesterRegistration | None:
        """Find the registration that is currently UPCOMING or ONGOING."""
        stmt = select(SemesterRegistration).where(
            SemesterRegistration.status.in_([s.value for s in ACTIVE_STATUSES])
        )
        return self.session.execute(stmt).scalars().first()

    def find_by_semester(self, semester_id: str) -> SemesterRegistration | None:
        """Find the registration of a semester, whatever its status."""
        stmt = select(SemesterRegistration).where(SemesterRegistration.semester_id == semester_id)
        return self.session.execute(stmt).scalar_one_or_none()

    def list(self, status: RegistrationStatus | None = None) -> list[SemesterRegistration]:
        """List registrations, most recent first."""
        stmt = select(SemesterRegistration)
        if status is not None:
            stmt = stmt.where(SemesterRegistration.status == status.value)
        stmt = stmt.order_by(SemesterRegistration.start_date.desc())
        return list(self.session.execute(stmt).scalars().all())

    def delete(self, registration_id: str) -> int:
        """Delete a registration. Returns the number of rows removed."""
        stmt = delete(SemesterRegistration).where(SemesterRegistration.id == registration_id)
        return self.session.execute(stmt).rowcount


class OfferedCourseRepository(Repository[OfferedCourse]):
    model = OfferedCourse

    def find_section(
        self, semester_registration_id: str, course_id: str, section: str
    ) -> OfferedCourse | None:
        """Find the offering occupying a course section in a registration."""
        stmt = select(OfferedCourse).where(
            OfferedCourse.semester_registration_id == semester_registration_id,
            OfferedCourse.course_id == course_id,
            OfferedCourse.section == section,
        )
        return self.session.execute(stmt).scalar_one_or_none()

    def list_for_faculty(
        self,
        semester_registration_id: str,
        faculty_id: str,
        exclude_id: str | None = None,
    ) -> list[OfferedCourse]:
        """List a faculty member's offerings within one registration period.

        Args:
            semester_registration_id: Registration period to scope to.
            faculty_id: Faculty member teaching the offerings.
            exclude_id: Offering to leave out (the one being updated).
        """
        stmt = select(OfferedCourse).where(
            OfferedCourse.semester_registration_id == semester_registration_id,
            OfferedCourse.faculty_id == faculty_id,
        )
        if exclude_id is not None:
            stmt = stmt.where(OfferedCourse.id != exclude_id)
        return list(self.session.execute(stmt).scalars().all())

    def list(
        self,
        semester_registration_id: str | None = None,
        faculty_id: str | None = None,
    ) -> list[OfferedCourse]:
        """List offerings with optional filters, ordered by section."""
        stmt = select(OfferedCourse)
        if semester_registration_id is not None:
            stmt = stmt.where(OfferedCourse.semester_registration_id == semester_registration_id)
        if faculty_id is not None:
            stmt = stmt.where(OfferedCourse.faculty_id == faculty_id)
        stmt = stmt.order_by(OfferedCourse.course_id, OfferedCourse.section)
        return list(self.session.execute(stmt).scalars().all())

    def delete_by_registration(self, semester_registration_id: str) -> int:
        """Delete every offering of a registration. Returns the number removed."""
        stmt = delete(OfferedCourse).where(
            OfferedCourse.semester_registration_id == semester_registration_id
        )
        return self.session.execute(stmt).rowcount

    def delete(self, offered_course_id: str) -> int:
        """Delete one offering. Returns the number of rows removed."""
        stmt = delete(OfferedCourse).where(OfferedCourse.id == offered_course_id)
        return self.session.execute(stmt).rowcount
