"""StateStore - Main API for State Store operations."""

from __future__ import annotations

from typing import TYPE_CHECKING, TypeVar

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from registrar.exceptions import NotFoundError
from registrar.state_store.database import Database
from registrar.state_store.exceptions import RecordExistsError
from registrar.state_store.models import (
    AcademicFaculty,
    Base,
    Course,
    Department,
    Faculty,
    Semester,
)
from registrar.state_store.repositories import AcademicFacultyRepository

if TYPE_CHECKING:
    from contextlib import AbstractContextManager

    from sqlalchemy.orm import Session

ModelT = TypeVar("ModelT", bound=Base)


class StateStore:
    """Main API for State Store operations.

    Owns the database and hands out transactions. Provides CRUD for the
    catalog entities (academic faculties, departments, courses, faculty
    members and semesters) that registrations and offerings refer to.
    """

    def __init__(self, db_path: str = "registrar.db") -> None:
        """Initialize State Store with SQLite database.

        Creates database and tables if they don't exist.

        Args:
            db_path: Path to SQLite database file
        """
        self._db = Database(db_path)
        self._db.create_tables()

    @property
    def database(self) -> Database:
        return self._db

    def transaction(self) -> AbstractContextManager[Session]:
        """Open an all-or-nothing unit of work. See ``Database.transaction``."""
        return self._db.transaction()

    def close(self) -> None:
        """Close the database connection."""
        self._db.close()

    # --- Generic helpers ---

    def _create(self, record: ModelT, description: str) -> ModelT:
        try:
            with self.transaction() as session:
                session.add(record)
                session.flush()
                session.refresh(record)
        except IntegrityError as e:
            if "UNIQUE constraint failed" in str(e):
                raise RecordExistsError(f"{description} already exists") from e
            raise
        return record

    def _get(self, model: type[ModelT], label: str, record_id: str) -> ModelT:
        with self.transaction() as session:
            record = session.get(model, record_id)
            if record is None:
                raise NotFoundError(label, record_id)
            return record

    def _list(self, model: type[ModelT], *order_by: object) -> list[ModelT]:
        with self.transaction() as session:
            stmt = select(model).order_by(*order_by)  # type: ignore[arg-type]
            return list(session.execute(stmt).scalars().all())

    # --- Academic Faculty Operations ---

    def create_academic_faculty(self, name: str) -> AcademicFaculty:
        """Create an academic faculty.

        Raises:
            RecordExistsError: If an academic faculty with this name exists
        """
        return self._create(AcademicFaculty(name=name), f"Academic faculty '{name}'")

    def get_academic_faculty(self, academic_faculty_id: str) -> AcademicFaculty:
        return self._get(AcademicFaculty, "Academic faculty", academic_faculty_id)

    def list_academic_faculties(self) -> list[AcademicFaculty]:
        return self._list(AcademicFaculty, AcademicFaculty.name)

    # --- Department Operations ---

    def create_department(self, name: str, academic_faculty_id: str) -> Department:
        """Create a department under an academic faculty.

        Args:
            name: Department name (unique)
            academic_faculty_id: Owning academic faculty

        Returns:
            Created Department object with generated ID

        Raises:
            NotFoundError: If the academic faculty doesn't exist
            RecordExistsError: If a department with this name exists
        """
        with self.transaction() as session:
            if not AcademicFacultyRepository(session).exists(academic_faculty_id):
                raise NotFoundError("Academic faculty", academic_faculty_id)
        return self._create(
            Department(name=name, academic_faculty_id=academic_faculty_id),
            f"Department '{name}'",
        )

    def get_department(self, department_id: str) -> Department:
        return self._get(Department, "Department", department_id)

    def list_departments(self) -> list[Department]:
        return self._list(Department, Department.name)

    # --- Course Operations ---

    def create_course(self, title: str, prefix: str, code: int, credits: int = 3) -> Course:
        """Create a catalog course.

        Raises:
            RecordExistsError: If a course with this title exists
        """
        return self._create(
            Course(title=title, prefix=prefix, code=code, credits=credits),
            f"Course '{title}'",
        )

    def get_course(self, course_id: str) -> Course:
        return self._get(Course, "Course", course_id)

    def list_courses(self) -> list[Course]:
        return self._list(Course, Course.prefix, Course.code)

    # --- Faculty Member Operations ---

    def create_faculty(self, name: str, designation: str = "Lecturer") -> Faculty:
        """Create a faculty member."""
        return self._create(Faculty(name=name, designation=designation), f"Faculty '{name}'")

    def get_faculty(self, faculty_id: str) -> Faculty:
        return self._get(Faculty, "Faculty", faculty_id)

    def list_faculties(self) -> list[Faculty]:
        return self._list(Faculty, Faculty.name)

    # --- Semester Operations ---

    def create_semester(self, name: str, year: int, code: str) -> Semester:
        """Create a semester.

        Raises:
            RecordExistsError: If the semester already exists for that year
        """
        return self._create(
            Semester(name=name, year=year, code=code),
            f"Semester '{name} {year}'",
        )

    def get_semester(self, semester_id: str) -> Semester:
        return self._get(Semester, "Semester", semester_id)

    def list_semesters(self) -> list[Semester]:
        return self._list(Semester, Semester.year.desc(), Semester.code)

