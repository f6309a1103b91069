"""Atomic removal of a registration together with its offerings."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from sqlalchemy.exc import SQLAlchemyError

from registrar.exceptions import CascadeDeleteFailedError
from registrar.state_store import OfferedCourseRepository, SemesterRegistrationRepository

if TYPE_CHECKING:
    from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

STAGE_OFFERINGS = "offerings"
STAGE_REGISTRATION = "registration"
STAGE_COMMIT = "commit"


class CascadeDeleteCoordinator:
    """Deletes a registration and every offering that references it.

    Must run inside an open transaction. Any failure raises
    ``CascadeDeleteFailedError`` so the surrounding transaction rolls back
    both stages.
    """

    def __init__(self, session: Session) -> None:
        self.registrations = SemesterRegistrationRepository(session)
        self.offerings = OfferedCourseRepository(session)

    def delete(self, registration_id: str) -> int:
        """Run both delete stages.

        Args:
            registration_id: The registration to remove.

        Returns:
            Number of offerings removed along with the registration.

        Raises:
            CascadeDeleteFailedError: If either stage cannot complete.
        """
        try:
            removed = self.offerings.delete_by_registration(registration_id)
        except SQLAlchemyError as e:
            raise CascadeDeleteFailedError(STAGE_OFFERINGS, registration_id) from e
        logger.debug("Removed %d offerings of registration %s", removed, registration_id)

        try:
            deleted = self.registrations.delete(registration_id)
        except SQLAlchemyError as e:
            raise CascadeDeleteFailedError(STAGE_REGISTRATION, registration_id) from e
        if deleted != 1:
            raise CascadeDeleteFailedError(STAGE_REGISTRATION, registration_id)

        return removed
