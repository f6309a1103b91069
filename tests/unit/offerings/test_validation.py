"""Unit tests for the offering check pipeline."""

from unittest.mock import MagicMock

import pytest

from registrar.exceptions import (
    DuplicateSectionError,
    ErrorKind,
    ImmutableStateError,
    IntegrityMismatchError,
    NotFoundError,
    ScheduleConflictError,
)
from registrar.offerings import run_checks
from registrar.offerings.validation import (
    department_belongs_to,
    entity_exists,
    faculty_is_available,
    registration_is_upcoming,
    section_is_free,
)
from registrar.scheduling import TimeSlot
from registrar.state_store import RegistrationStatus


def passing() -> None:
    return None


@pytest.mark.unit
class TestRunChecks:
    """Tests for run_checks ordering."""

    def test_all_pass(self) -> None:
        """No failure means no exception."""
        run_checks([passing, passing])

    def test_first_failure_wins(self) -> None:
        """Later checks are not evaluated once one fails."""
        later = MagicMock(return_value=None)
        first = NotFoundError("Course", "c1")
        second = MagicMock(return_value=DuplicateSectionError("dup"))

        with pytest.raises(NotFoundError) as exc_info:
            run_checks([passing, lambda: first, second, later])

        assert exc_info.value is first
        second.assert_not_called()
        later.assert_not_called()


@pytest.mark.unit
class TestChecks:
    """Tests for the individual check factories."""

    def test_entity_exists(self) -> None:
        """Missing entities produce NotFoundError naming the entity."""
        repository = MagicMock()
        repository.exists.return_value = False

        error = entity_exists(repository, "Faculty", "f1")()

        assert isinstance(error, NotFoundError)
        assert error.kind is ErrorKind.NOT_FOUND
        assert "Faculty" in error.message
        repository.exists.assert_called_once_with("f1")

        repository.exists.return_value = True
        assert entity_exists(repository, "Faculty", "f1")() is None

    def test_factories_are_lazy(self) -> None:
        """Building a check does not touch the repository."""
        repository = MagicMock()

        entity_exists(repository, "Course", "c1")

        repository.exists.assert_not_called()

    def test_department_belongs_to(self) -> None:
        """A department outside the academic faculty is an integrity mismatch."""
        departments = MagicMock()
        departments.belongs_to.return_value = False

        error = department_belongs_to(departments, "d1", "af1")()

        assert isinstance(error, IntegrityMismatchError)
        departments.belongs_to.assert_called_once_with("d1", "af1")

    def test_section_is_free(self) -> None:
        """An occupied section is a duplicate."""
        offerings = MagicMock()
        offerings.find_section.return_value = MagicMock()

        error = section_is_free(offerings, "r1", "c1", "A")()

        assert isinstance(error, DuplicateSectionError)
        assert "'A'" in error.message

        offerings.find_section.return_value = None
        assert section_is_free(offerings, "r1", "c1", "A")() is None

    def test_registration_is_upcoming(self) -> None:
        """Only UPCOMING registrations pass."""
        registrations = MagicMock()
        registrations.get.return_value.registration_status = RegistrationStatus.ONGOING
        registrations.get.return_value.status = "ONGOING"

        error = registration_is_upcoming(registrations, "r1", action="delete")()

        assert isinstance(error, ImmutableStateError)
        assert error.message == "You can not delete this offered course as it is ONGOING"

        registrations.get.return_value.registration_status = RegistrationStatus.UPCOMING
        assert registration_is_upcoming(registrations, "r1")() is None

    def test_registration_is_upcoming_missing(self) -> None:
        """A missing registration is reported as NotFoundError."""
        registrations = MagicMock()
        registrations.get.return_value = None

        error = registration_is_upcoming(registrations, "r1")()

        assert isinstance(error, NotFoundError)

    def test_faculty_is_available(self) -> None:
        """An overlapping assignment is a schedule conflict."""
        busy = MagicMock()
        busy.time_slot = TimeSlot.from_strings(["Mon"], "09:00", "10:00")
        offerings = MagicMock()
        offerings.list_for_faculty.return_value = [busy]

        clash = TimeSlot.from_strings(["Mon"], "09:30", "10:30")
        free = TimeSlot.from_strings(["Mon"], "10:00", "11:00")

        error = faculty_is_available(offerings, "r1", "f1", clash, exclude_id="o1")()

        assert isinstance(error, ScheduleConflictError)
        offerings.list_for_faculty.assert_called_once_with("r1", "f1", exclude_id="o1")
        assert faculty_is_available(offerings, "r1", "f1", free)() is None
