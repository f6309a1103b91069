"""State Store - Persistent storage for registrations, offerings and the catalog."""

from registrar.state_store.database import Database
from registrar.state_store.exceptions import RecordExistsError, StateStoreError
from registrar.state_store.models import (
    ACTIVE_STATUSES,
    AcademicFaculty,
    Course,
    Department,
    Faculty,
    OfferedCourse,
    RegistrationStatus,
    Semester,
    SemesterRegistration,
)
from registrar.state_store.repositories import (
    AcademicFacultyRepository,
    CourseRepository,
    DepartmentRepository,
    FacultyRepository,
    OfferedCourseRepository,
    SemesterRegistrationRepository,
    SemesterRepository,
)
from registrar.state_store.store import StateStore

__all__ = [
    "ACTIVE_STATUSES",
    "AcademicFaculty",
    "AcademicFacultyRepository",
    "Course",
    "CourseRepository",
    "Database",
    "Department",
    "DepartmentRepository",
    "Faculty",
    "FacultyRepository",
    "OfferedCourse",
    "OfferedCourseRepository",
    "RecordExistsError",
    "RegistrationStatus",
    "Semester",
    "SemesterRegistration",
    "SemesterRegistrationRepository",
    "SemesterRepository",
    "StateStore",
    "StateStoreError",
]
