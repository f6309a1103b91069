"""Offered course endpoints."""

from fastapi import APIRouter, status

from registrar.api.dependencies import OfferingServiceDep
from registrar.api.models import (
    APIResponse,
    OfferingCreate,
    OfferingResponse,
    OfferingUpdate,
    offering_to_response,
)

router = APIRouter(prefix="/offered-courses", tags=["offered-courses"])


@router.get("", response_model=APIResponse[list[OfferingResponse]])
def list_offerings(
    service: OfferingServiceDep,
    semester_registration_id: str | None = None,
    faculty_id: str | None = None,
) -> APIResponse[list[OfferingResponse]]:
    """List offered courses with optional filters."""
    offerings = service.list_offerings(
        semester_registration_id=semester_registration_id,
        faculty_id=faculty_id,
    )
    return APIResponse(data=[offering_to_response(o) for o in offerings])


@router.post(
    "",
    response_model=APIResponse[OfferingResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_offering(
    offering: OfferingCreate, service: OfferingServiceDep
) -> APIResponse[OfferingResponse]:
    """Offer a course section."""
    created = service.create_offering(
        semester_registration_id=offering.semester_registration_id,
        academic_faculty_id=offering.academic_faculty_id,
        department_id=offering.department_id,
        course_id=offering.course_id,
        faculty_id=offering.faculty_id,
        section=offering.section,
        days=[day.value for day in offering.days],
        start_time=offering.start_time,
        end_time=offering.end_time,
        max_capacity=offering.max_capacity,
    )
    return APIResponse(data=offering_to_response(created))


@router.get("/{offered_course_id}", response_model=APIResponse[OfferingResponse])
def get_offering(
    offered_course_id: str, service: OfferingServiceDep
) -> APIResponse[OfferingResponse]:
    """Get an offered course by ID."""
    offering = service.get_offering(offered_course_id)
    return APIResponse(data=offering_to_response(offering))


@router.patch("/{offered_course_id}", response_model=APIResponse[OfferingResponse])
def update_offering(
    offered_course_id: str, offering: OfferingUpdate, service: OfferingServiceDep
) -> APIResponse[OfferingResponse]:
    """Reschedule or reassign an offered course."""
    updated = service.update_offering(
        offered_course_id,
        faculty_id=offering.faculty_id,
        days=[day.value for day in offering.days],
        start_time=offering.start_time,
        end_time=offering.end_time,
        max_capacity=offering.max_capacity,
    )
    return APIResponse(data=offering_to_response(updated))


@router.delete("/{offered_course_id}", response_model=APIResponse[OfferingResponse])
def delete_offering(
    offered_course_id: str, service: OfferingServiceDep
) -> APIResponse[OfferingResponse]:
    """Delete an offered course while its registration is UPCOMING."""
    deleted = service.delete_offering(offered_course_id)
    return APIResponse(data=offering_to_response(deleted))
