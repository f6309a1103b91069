"""Integration tests for deleting a registration together with its offerings."""

from unittest.mock import patch

import pytest
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import Session

from registrar.exceptions import CascadeDeleteFailedError, ErrorKind, NotFoundError
from registrar.registrations.cascade import STAGE_COMMIT, STAGE_OFFERINGS, STAGE_REGISTRATION
from registrar.state_store import (
    OfferedCourseRepository,
    RegistrationStatus,
    SemesterRegistrationRepository,
)


@pytest.fixture
def scheduled(make_offering, catalog):
    """Three offerings in the upcoming registration."""
    return [
        make_offering(),
        make_offering(section="B", days=["Fri"]),
        make_offering(course_id=catalog.databases.id, faculty_id=catalog.bob.id),
    ]


def fail_after(original):
    """Wrap a repository method so it runs, then raises a storage error."""

    def wrapper(self, *args, **kwargs):
        original(self, *args, **kwargs)
        raise OperationalError("DELETE", {}, Exception("disk I/O error"))

    return wrapper


@pytest.mark.integration
class TestCascadeDelete:
    """Tests for RegistrationService.delete_registration with offerings."""

    def test_removes_every_offering(
        self, registration_service, offering_service, registration, scheduled
    ) -> None:
        """The registration and all of its offerings are gone."""
        registration_service.delete_registration(registration.id)

        assert offering_service.list_offerings() == []
        with pytest.raises(NotFoundError):
            registration_service.get_registration(registration.id)
        for offering in scheduled:
            with pytest.raises(NotFoundError):
                offering_service.get_offering(offering.id)

    def test_offering_stage_failure_changes_nothing(
        self, registration_service, offering_service, registration, scheduled
    ) -> None:
        """A failure while removing offerings rolls everything back."""
        original = OfferedCourseRepository.delete_by_registration
        with (
            patch.object(OfferedCourseRepository, "delete_by_registration", fail_after(original)),
            pytest.raises(CascadeDeleteFailedError) as exc_info,
        ):
            registration_service.delete_registration(registration.id)

        assert exc_info.value.stage == STAGE_OFFERINGS
        assert exc_info.value.kind is ErrorKind.CASCADE_DELETE_FAILED
        assert registration_service.get_registration(registration.id).id == registration.id
        assert len(offering_service.list_offerings()) == len(scheduled)

    def test_registration_stage_failure_restores_offerings(
        self, registration_service, offering_service, registration, scheduled
    ) -> None:
        """Offerings removed in the first stage come back if the second fails."""
        original = SemesterRegistrationRepository.delete
        with (
            patch.object(SemesterRegistrationRepository, "delete", fail_after(original)),
            pytest.raises(CascadeDeleteFailedError) as exc_info,
        ):
            registration_service.delete_registration(registration.id)

        assert exc_info.value.stage == STAGE_REGISTRATION
        assert registration_service.get_registration(registration.id) is not None
        remaining = {o.id for o in offering_service.list_offerings()}
        assert remaining == {o.id for o in scheduled}

    def test_registration_row_missing_fails(
        self, registration_service, offering_service, registration, scheduled
    ) -> None:
        """Removing no registration row counts as a failed stage."""
        with (
            patch.object(SemesterRegistrationRepository, "delete", return_value=0),
            pytest.raises(CascadeDeleteFailedError) as exc_info,
        ):
            registration_service.delete_registration(registration.id)

        assert exc_info.value.stage == STAGE_REGISTRATION
        assert len(offering_service.list_offerings()) == len(scheduled)

    def test_commit_failure_changes_nothing(
        self, registration_service, offering_service, registration, scheduled
    ) -> None:
        """A failing commit of the whole unit is reported as a failed delete."""
        busy = OperationalError("COMMIT", {}, Exception("database is locked"))
        with (
            patch.object(Session, "commit", side_effect=busy),
            pytest.raises(CascadeDeleteFailedError) as exc_info,
        ):
            registration_service.delete_registration(registration.id)

        assert exc_info.value.stage == STAGE_COMMIT
        assert exc_info.value.kind is ErrorKind.CASCADE_DELETE_FAILED
        assert isinstance(exc_info.value.__cause__, OperationalError)
        assert registration_service.get_registration(registration.id).id == registration.id
        assert len(offering_service.list_offerings()) == len(scheduled)

    def test_other_registrations_untouched(
        self, registration_service, offering_service, make_offering, catalog, registration
    ) -> None:
        """Only offerings of the deleted registration are removed."""
        make_offering()
        registration_service.update_registration_status(
            registration.id, RegistrationStatus.ONGOING
        )
        registration_service.update_registration_status(registration.id, RegistrationStatus.ENDED)
        spring = registration_service.create_registration(
            semester_id=catalog.spring.id,
            start_date=registration.start_date,
            end_date=registration.end_date,
        )
        make_offering(semester_registration_id=spring.id)

        registration_service.delete_registration(spring.id)

        remaining = offering_service.list_offerings()
        assert [o.semester_registration_id for o in remaining] == [registration.id]
