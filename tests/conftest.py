"""Shared pytest fixtures and configuration."""

from dataclasses import dataclass
from datetime import datetime

import pytest

from registrar.offerings import OfferingService
from registrar.registrations import RegistrationService
from registrar.state_store import (
    AcademicFaculty,
    Course,
    Department,
    Faculty,
    Semester,
    SemesterRegistration,
    StateStore,
)


# Register custom markers
def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line("markers", "unit: fast tests with no external dependencies")
    config.addinivalue_line("markers", "integration: component interaction tests")


@dataclass
class Catalog:
    """Reference records most offering tests need."""

    science: AcademicFaculty
    arts: AcademicFaculty
    computer_science: Department
    history: Department
    algorithms: Course
    databases: Course
    alice: Faculty
    bob: Faculty
    autumn: Semester
    spring: Semester


# Shared fixtures


@pytest.fixture
def store():
    """Create an in-memory StateStore."""
    s = StateStore(":memory:")
    yield s
    s.close()


@pytest.fixture
def catalog(store: StateStore) -> Catalog:
    """Populate the catalog with two of everything."""
    science = store.create_academic_faculty("Faculty of Science")
    arts = store.create_academic_faculty("Faculty of Arts")
    return Catalog(
        science=science,
        arts=arts,
        computer_science=store.create_department("Computer Science", science.id),
        history=store.create_department("History", arts.id),
        algorithms=store.create_course("Algorithms", "CSE", 201, credits=3),
        databases=store.create_course("Databases", "CSE", 305, credits=4),
        alice=store.create_faculty("Alice Rahman", "Professor"),
        bob=store.create_faculty("Bob Chowdhury"),
        autumn=store.create_semester("Autumn", 2026, "03"),
        spring=store.create_semester("Spring", 2027, "01"),
    )


@pytest.fixture
def registration_service(store: StateStore) -> RegistrationService:
    return RegistrationService(store)


@pytest.fixture
def offering_service(store: StateStore) -> OfferingService:
    return OfferingService(store)


@pytest.fixture
def registration(
    registration_service: RegistrationService, catalog: Catalog
) -> SemesterRegistration:
    """An UPCOMING registration for the autumn semester."""
    return registration_service.create_registration(
        semester_id=catalog.autumn.id,
        start_date=datetime(2026, 8, 1),
        end_date=datetime(2026, 8, 31),
    )


@pytest.fixture
def make_offering(offering_service: OfferingService, catalog: Catalog, registration):
    """Factory creating offerings in the upcoming registration.

    Defaults to Algorithms taught by Alice on Mon/Wed 10:00-11:30.
    """

    def _make(**overrides):
        fields = {
            "semester_registration_id": registration.id,
            "academic_faculty_id": catalog.science.id,
            "department_id": catalog.computer_science.id,
            "course_id": catalog.algorithms.id,
            "faculty_id": catalog.alice.id,
            "section": "A",
            "days": ["Mon", "Wed"],
            "start_time": "10:00",
            "end_time": "11:30",
        }
        fields.update(overrides)
        return offering_service.create_offering(**fields)

    return _make
