"""RegistrationService - Lifecycle of semester registrations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from registrar.exceptions import (
    ActiveRegistrationExistsError,
    CascadeDeleteFailedError,
    NotFoundError,
)
from registrar.registrations.cascade import STAGE_COMMIT, CascadeDeleteCoordinator
from registrar.registrations.lifecycle import (
    check_window,
    ensure_editable,
    ensure_no_active,
    ensure_transition,
)
from registrar.state_store import (
    RegistrationStatus,
    SemesterRegistration,
    SemesterRegistrationRepository,
    SemesterRepository,
)

if TYPE_CHECKING:
    from datetime import datetime

    from registrar.state_store import StateStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Creates, advances and deletes semester registrations.

    Every operation runs as a single transaction; the checks it performs read
    the same state the write is applied to.
    """

    def __init__(self, state_store: StateStore) -> None:
        """Initialize the RegistrationService.

        Args:
            state_store: StateStore instance for registration persistence.
        """
        self.state_store = state_store

    def create_registration(
        self,
        semester_id: str,
        start_date: datetime,
        end_date: datetime,
        min_credit: int = 3,
        max_credit: int = 15,
    ) -> SemesterRegistration:
        """Open the registration window of a semester.

        New registrations always start UPCOMING.

        Args:
            semester_id: The semester to register.
            start_date: When the registration window opens.
            end_date: When the registration window closes.
            min_credit: Minimum credits a student must take.
            max_credit: Maximum credits a student may take.

        Returns:
            The created SemesterRegistration.

        Raises:
            ActiveRegistrationExistsError: If any registration is UPCOMING or
                ONGOING, or the semester already has a registration.
            InvalidWindowError: If the window or credit bounds are out of order.
            NotFoundError: If the semester doesn't exist.
        """
        check_window(start_date, end_date, min_credit, max_credit)

        try:
            with self.state_store.transaction() as session:
                registrations = SemesterRegistrationRepository(session)

                ensure_no_active(registrations.find_active())

                if not SemesterRepository(session).exists(semester_id):
                    raise NotFoundError("Semester", semester_id)

                if registrations.find_by_semester(semester_id) is not None:
                    raise ActiveRegistrationExistsError(
                        f"Semester '{semester_id}' is already registered"
                    )

                registration = registrations.add(
                    SemesterRegistration(
                        semester_id=semester_id,
                        start_date=start_date,
                        end_date=end_date,
                        min_credit=min_credit,
                        max_credit=max_credit,
                    )
                )
        except IntegrityError as e:
            # A concurrent creation committed between our checks and the insert
            if "UNIQUE constraint failed" in str(e):
                raise ActiveRegistrationExistsError(
                    "Another semester registration was created concurrently"
                ) from e
            raise

        logger.info(
            "Created semester registration %s for semester %s", registration.id, semester_id
        )
        return registration

    def get_registration(self, registration_id: str) -> SemesterRegistration:
        """Get a registration by ID.

        Raises:
            NotFoundError: If the registration doesn't exist.
        """
        with self.state_store.transaction() as session:
            registration = SemesterRegistrationRepository(session).get(registration_id)
            if registration is None:
                raise NotFoundError("Semester registration", registration_id)
            return registration

    def list_registrations(
        self, status: RegistrationStatus | None = None
    ) -> list[SemesterRegistration]:
        """List registrations, optionally filtered by status."""
        with self.state_store.transaction() as session:
            return SemesterRegistrationRepository(session).list(status=status)

    def update_registration(
        self,
        registration_id: str,
        status: RegistrationStatus | None = None,
        start_date: datetime | None = None,
        end_date: datetime | None = None,
        min_credit: int | None = None,
        max_credit: int | None = None,
    ) -> SemesterRegistration:
        """Update a registration. Only provided fields are updated.

        Window and credit fields may only change while the registration is
        UPCOMING. The status may only move along an allowed edge.

        Raises:
            NotFoundError: If the registration doesn't exist.
            ImmutableStateError: If non-status fields change outside UPCOMING.
            InvalidWindowError: If the merged window or credit bounds are out
                of order.
            IllegalTransitionError: If the status change is not allowed.
        """
        fields = {
            "start_date": start_date,
            "end_date": end_date,
            "min_credit": min_credit,
            "max_credit": max_credit,
        }
        changes = {name: value for name, value in fields.items() if value is not None}

        with self.state_store.transaction() as session:
            registrations = SemesterRegistrationRepository(session)
            registration = registrations.get(registration_id)
            if registration is None:
                raise NotFoundError("Semester registration", registration_id)

            current = registration.registration_status
            if changes:
                ensure_editable(registration)
                check_window(
                    changes.get("start_date", registration.start_date),
                    changes.get("end_date", registration.end_date),
                    changes.get("min_credit", registration.min_credit),
                    changes.get("max_credit", registration.max_credit),
                )
            if status is not None:
                ensure_transition(current, status)

            for name, value in changes.items():
                setattr(registration, name, value)
            if status is not None:
                registration.registration_status = status

            registration = registrations.save(registration)

        if status is not None:
            logger.info(
                "Semester registration %s moved from %s to %s",
                registration_id,
                current.value,
                status.value,
            )
        return registration

    def update_registration_status(
        self, registration_id: str, status: RegistrationStatus
    ) -> SemesterRegistration:
        """Advance a registration to its next status."""
        return self.update_registration(registration_id, status=status)

    def delete_registration(self, registration_id: str) -> SemesterRegistration:
        """Delete an UPCOMING registration and all of its offerings atomically.

        Returns:
            The deleted SemesterRegistration.

        Raises:
            NotFoundError: If the registration doesn't exist.
            ImmutableStateError: If the registration is not UPCOMING.
            CascadeDeleteFailedError: If the delete could not complete; nothing
                is changed in that case.
        """
        try:
            with self.state_store.transaction() as session:
                registration = SemesterRegistrationRepository(session).get(registration_id)
                if registration is None:
                    raise NotFoundError("Semester registration", registration_id)
                ensure_editable(registration, action="delete")

                removed = CascadeDeleteCoordinator(session).delete(registration_id)
        except SQLAlchemyError as e:
            # Storage failures outside the two stages: taking the write lock or committing
            raise CascadeDeleteFailedError(STAGE_COMMIT, registration_id) from e

        logger.info(
            "Deleted semester registration %s with %d offered courses", registration_id, removed
        )
        return registration
