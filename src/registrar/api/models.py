"""Pydantic models for REST API."""

from datetime import datetime
from typing import Any, Generic, Self, TypeVar

from pydantic import BaseModel, ConfigDict, Field, model_validator

from registrar.scheduling import InvalidTimeSlotError, TimeSlot, Weekday
from registrar.state_store import RegistrationStatus

T = TypeVar("T")

CLOCK_PATTERN = r"^\d{2}:\d{2}$"


class APIResponse(BaseModel, Generic[T]):
    """Standard API response wrapper."""

    data: T | None = None
    error: str | None = None
    code: str | None = None


def _check_slot(days: list[Weekday], start_time: str, end_time: str) -> None:
    try:
        TimeSlot.from_strings(days, start_time, end_time)
    except InvalidTimeSlotError as e:
        raise ValueError(str(e)) from e


# Semester registration models


class RegistrationCreate(BaseModel):
    """Request model for opening a semester registration."""

    semester_id: str = Field(..., min_length=1)
    start_date: datetime
    end_date: datetime
    min_credit: int = Field(default=3, ge=0)
    max_credit: int = Field(default=15, ge=1)

    @model_validator(mode="after")
    def check_window(self) -> Self:
        if self.start_date >= self.end_date:
            raise ValueError("start_date must be before end_date")
        if self.min_credit > self.max_credit:
            raise ValueError("min_credit must not exceed max_credit")
        return self


class RegistrationUpdate(BaseModel):
    """Request model for updating a semester registration (partial update)."""

    status: RegistrationStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None
    min_credit: int | None = Field(default=None, ge=0)
    max_credit: int | None = Field(default=None, ge=1)

    @model_validator(mode="after")
    def check_given_together(self) -> Self:
        # Values given alone are checked against the stored ones by the service
        if self.start_date is not None and self.end_date is not None:
            if self.start_date >= self.end_date:
                raise ValueError("start_date must be before end_date")
        if self.min_credit is not None and self.max_credit is not None:
            if self.min_credit > self.max_credit:
                raise ValueError("min_credit must not exceed max_credit")
        return self


class RegistrationResponse(BaseModel):
    """Response model for a semester registration."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    semester_id: str
    status: RegistrationStatus
    start_date: datetime
    end_date: datetime
    min_credit: int
    max_credit: int
    created_at: datetime
    updated_at: datetime


def registration_to_response(registration: Any) -> RegistrationResponse:
    """Convert a SemesterRegistration model to RegistrationResponse."""
    return RegistrationResponse.model_validate(registration)


# Offered course models


class OfferingCreate(BaseModel):
    """Request model for offering a course section."""

    semester_registration_id: str = Field(..., min_length=1)
    academic_faculty_id: str = Field(..., min_length=1)
    department_id: str = Field(..., min_length=1)
    course_id: str = Field(..., min_length=1)
    faculty_id: str = Field(..., min_length=1)
    section: str = Field(..., min_length=1, max_length=20)
    max_capacity: int = Field(default=10, ge=1)
    days: list[Weekday] = Field(..., min_length=1)
    start_time: str = Field(..., pattern=CLOCK_PATTERN)
    end_time: str = Field(..., pattern=CLOCK_PATTERN)

    @model_validator(mode="after")
    def check_slot(self) -> Self:
        _check_slot(self.days, self.start_time, self.end_time)
        return self


class OfferingUpdate(BaseModel):
    """Request model for rescheduling or reassigning an offered course."""

    faculty_id: str = Field(..., min_length=1)
    max_capacity: int | None = Field(default=None, ge=1)
    days: list[Weekday] = Field(..., min_length=1)
    start_time: str = Field(..., pattern=CLOCK_PATTERN)
    end_time: str = Field(..., pattern=CLOCK_PATTERN)

    @model_validator(mode="after")
    def check_slot(self) -> Self:
        _check_slot(self.days, self.start_time, self.end_time)
        return self


class OfferingResponse(BaseModel):
    """Response model for an offered course."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    semester_registration_id: str
    semester_id: str
    academic_faculty_id: str
    department_id: str
    course_id: str
    faculty_id: str
    section: str
    max_capacity: int
    days: list[Weekday]
    start_time: str
    end_time: str
    created_at: datetime
    updated_at: datetime


def offering_to_response(offering: Any) -> OfferingResponse:
    """Convert an OfferedCourse model to OfferingResponse."""
    return OfferingResponse.model_validate(offering)


# Catalog models


class AcademicFacultyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)


class AcademicFacultyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str


class DepartmentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    academic_faculty_id: str = Field(..., min_length=1)


class DepartmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    academic_faculty_id: str


class CourseCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=255)
    prefix: str = Field(..., min_length=1, max_length=20)
    code: int = Field(..., ge=1)
    credits: int = Field(default=3, ge=1)


class CourseResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    title: str
    prefix: str
    code: int
    credits: int


class FacultyCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    designation: str = Field(default="Lecturer", max_length=100)


class FacultyResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    designation: str


class SemesterCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=50)
    year: int = Field(..., ge=1900, le=9999)
    code: str = Field(..., min_length=1, max_length=10)


class SemesterResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    year: int
    code: str
