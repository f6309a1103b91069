"""Semester registration endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import RegistrationServiceDep
from registrar.api.models import (
    APIResponse,
    RegistrationCreate,
    RegistrationResponse,
    RegistrationUpdate,
    registration_to_response,
)
from registrar.state_store import RegistrationStatus

router = APIRouter(prefix="/semester-registrations", tags=["semester-registrations"])


@router.get("", response_model=APIResponse[list[RegistrationResponse]])
def list_registrations(
    service: RegistrationServiceDep, status: RegistrationStatus | None = None
) -> APIResponse[list[RegistrationResponse]]:
    """List semester registrations, optionally filtered by status."""
    registrations = service.list_registrations(status=status)
    return APIResponse(data=[registration_to_response(r) for r in registrations])


@router.post(
    "",
    response_model=APIResponse[RegistrationResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_registration(
    registration: RegistrationCreate, service: RegistrationServiceDep
) -> APIResponse[RegistrationResponse]:
    """Open a semester registration."""
    created = service.create_registration(
        semester_id=registration.semester_id,
        start_date=registration.start_date,
        end_date=registration.end_date,
        min_credit=registration.min_credit,
        max_credit=registration.max_credit,
    )
    return APIResponse(data=registration_to_response(created))


@router.get("/{registration_id}", response_model=APIResponse[RegistrationResponse])
def get_registration(
    registration_id: str, service: RegistrationServiceDep
) -> APIResponse[RegistrationResponse]:
    """Get a semester registration by ID."""
    registration = service.get_registration(registration_id)
    return APIResponse(data=registration_to_response(registration))


@router.patch("/{registration_id}", response_model=APIResponse[RegistrationResponse])
def update_registration(
    registration_id: str, registration: RegistrationUpdate, service: RegistrationServiceDep
) -> APIResponse[RegistrationResponse]:
    """Update a semester registration (partial update)."""
    updated = service.update_registration(
        registration_id,
        status=registration.status,
        start_date=registration.start_date,
        end_date=registration.end_date,
        min_credit=registration.min_credit,
        max_credit=registration.max_credit,
    )
    return APIResponse(data=registration_to_response(updated))


@router.delete("/{registration_id}", response_model=APIResponse[RegistrationResponse])
def delete_registration(
    registration_id: str, service: RegistrationServiceDep
) -> APIResponse[RegistrationResponse]:
    """Delete an UPCOMING semester registration and its offered courses."""
    deleted = service.delete_registration(registration_id)
    return APIResponse(data=registration_to_response(deleted))
