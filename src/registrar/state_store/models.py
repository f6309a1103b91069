"""SQLAlchemy models for State Store."""

from __future__ import annotations

import uuid
from datetime import datetime  # noqa: TC003 - used at runtime for SQLAlchemy
from enum import StrEnum
from typing import Any

from sqlalchemy import (
    JSON,
    DateTime,
    ForeignKey,
    Index,
    Integer,
    String,
    UniqueConstraint,
    func,
    text,
)
from sqlalchemy.orm import (
    DeclarativeBase,
    Mapped,
    mapped_column,
)

from registrar.scheduling import TimeSlot


class RegistrationStatus(StrEnum):
    """Semester registration status enum."""

    UPCOMING = "UPCOMING"
    ONGOING = "ONGOING"
    ENDED = "ENDED"


ACTIVE_STATUSES = (RegistrationStatus.UPCOMING, RegistrationStatus.ONGOING)


def generate_uuid() -> str:
    """Generate a new UUID string."""
    return str(uuid.uuid4())


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class AcademicFaculty(Base):
    """Academic faculty - the organisational unit owning departments."""

    __tablename__ = "academic_faculties"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)

    def __init__(self, name: str, id: str | None = None, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name

    def __repr__(self) -> str:
        return f"<AcademicFaculty(id={self.id!r}, name={self.name!r})>"


class Department(Base):
    """Department - belongs to exactly one academic faculty."""

    __tablename__ = "departments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    academic_faculty_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("academic_faculties.id"), nullable=False
    )

    def __init__(
        self, name: str, academic_faculty_id: str, id: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name
        self.academic_faculty_id = academic_faculty_id

    def __repr__(self) -> str:
        return f"<Department(id={self.id!r}, name={self.name!r})>"


class Course(Base):
    """Course catalog entry."""

    __tablename__ = "courses"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    prefix: Mapped[str] = mapped_column(String(20), nullable=False)
    code: Mapped[int] = mapped_column(Integer, nullable=False)
    credits: Mapped[int] = mapped_column(Integer, nullable=False)

    def __init__(
        self,
        title: str,
        prefix: str,
        code: int,
        credits: int = 3,
        id: str | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.title = title
        self.prefix = prefix
        self.code = code
        self.credits = credits

    def __repr__(self) -> str:
        return f"<Course(id={self.id!r}, prefix={self.prefix!r}, code={self.code!r})>"


class Faculty(Base):
    """Faculty member - the person teaching an offering."""

    __tablename__ = "faculties"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    designation: Mapped[str] = mapped_column(String(100), nullable=False)

    def __init__(
        self, name: str, designation: str = "Lecturer", id: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name
        self.designation = designation

    def __repr__(self) -> str:
        return f"<Faculty(id={self.id!r}, name={self.name!r})>"


class Semester(Base):
    """Academic semester, e.g. Autumn 2026."""

    __tablename__ = "semesters"
    __table_args__ = (UniqueConstraint("name", "year", name="uq_semester_name_year"),)

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    year: Mapped[int] = mapped_column(Integer, nullable=False)
    code: Mapped[str] = mapped_column(String(10), nullable=False)

    def __init__(
        self, name: str, year: int, code: str, id: str | None = None, **kwargs: Any
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.name = name
        self.year = year
        self.code = code

    def __repr__(self) -> str:
        return f"<Semester(id={self.id!r}, name={self.name!r}, year={self.year!r})>"


class SemesterRegistration(Base):
    """Semester registration - the enrollment window of one semester."""

    __tablename__ = "semester_registrations"
    __table_args__ = (
        # At most one row may be UPCOMING or ONGOING. The indexed expression is the
        # same for every active row, so a second active row of either status fails.
        # Service writes are already serialized by BEGIN IMMEDIATE (Database); this
        # catches writes that skip the service checks.
        Index(
            "uq_semester_registrations_active_status",
            text("(status IN ('UPCOMING', 'ONGOING'))"),
            unique=True,
            sqlite_where=text("status IN ('UPCOMING', 'ONGOING')"),
            postgresql_where=text("status IN ('UPCOMING', 'ONGOING')"),
        ),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    semester_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("semesters.id"), nullable=False, unique=True
    )
    status: Mapped[str] = mapped_column(String(20), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    end_date: Mapped[datetime] = mapped_column(DateTime, nullable=False)
    min_credit: Mapped[int] = mapped_column(Integer, nullable=False)
    max_credit: Mapped[int] = mapped_column(Integer, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        semester_id: str,
        start_date: datetime,
        end_date: datetime,
        id: str | None = None,
        status: str | None = None,
        min_credit: int = 3,
        max_credit: int = 15,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.semester_id = semester_id
        self.status = status if status is not None else RegistrationStatus.UPCOMING.value
        self.start_date = start_date
        self.end_date = end_date
        self.min_credit = min_credit
        self.max_credit = max_credit

    @property
    def registration_status(self) -> RegistrationStatus:
        """Get status as RegistrationStatus enum."""
        return RegistrationStatus(self.status)

    @registration_status.setter
    def registration_status(self, value: RegistrationStatus) -> None:
        """Set status from RegistrationStatus enum."""
        self.status = value.value

    def __repr__(self) -> str:
        return (
            f"<SemesterRegistration(id={self.id!r}, semester_id={self.semester_id!r}, "
            f"status={self.status!r})>"
        )


class OfferedCourse(Base):
    """Offered course - one faculty-taught section within a registration period."""

    __tablename__ = "offered_courses"
    __table_args__ = (
        UniqueConstraint(
            "semester_registration_id",
            "course_id",
            "section",
            name="uq_offered_course_section",
        ),
        Index("ix_offered_courses_registration_faculty", "semester_registration_id", "faculty_id"),
    )

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    semester_registration_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("semester_registrations.id"), nullable=False
    )
    semester_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("semesters.id"), nullable=False
    )
    academic_faculty_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("academic_faculties.id"), nullable=False
    )
    department_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("departments.id"), nullable=False
    )
    course_id: Mapped[str] = mapped_column(String(36), ForeignKey("courses.id"), nullable=False)
    faculty_id: Mapped[str] = mapped_column(String(36), ForeignKey("faculties.id"), nullable=False)
    max_capacity: Mapped[int] = mapped_column(Integer, nullable=False)
    section: Mapped[str] = mapped_column(String(20), nullable=False)
    days: Mapped[list[str]] = mapped_column(JSON, nullable=False)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now()
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime, nullable=False, server_default=func.now(), onupdate=func.now()
    )

    def __init__(
        self,
        semester_registration_id: str,
        semester_id: str,
        academic_faculty_id: str,
        department_id: str,
        course_id: str,
        faculty_id: str,
        section: str,
        days: list[str],
        start_time: str,
        end_time: str,
        id: str | None = None,
        max_capacity: int = 10,
        **kwargs: Any,
    ) -> None:
        super().__init__(**kwargs)
        self.id = id if id is not None else generate_uuid()
        self.semester_registration_id = semester_registration_id
        self.semester_id = semester_id
        self.academic_faculty_id = academic_faculty_id
        self.department_id = department_id
        self.course_id = course_id
        self.faculty_id = faculty_id
        self.section = section
        self.days = list(days)
        self.start_time = start_time
        self.end_time = end_time
        self.max_capacity = max_capacity

    @property
    def time_slot(self) -> TimeSlot:
        """Get the stored schedule as a TimeSlot."""
        return TimeSlot.from_strings(self.days, self.start_time, self.end_time)

    def __repr__(self) -> str:
        return (
            f"<OfferedCourse(id={self.id!r}, course_id={self.course_id!r}, "
            f"section={self.section!r})>"
        )
