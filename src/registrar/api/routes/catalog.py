"""Catalog endpoints: academic faculties, departments, courses, faculty members, semesters."""

from fastapi import APIRouter, status

from registrar.api.dependencies import StateStoreDep
from registrar.api.models import (
    AcademicFacultyCreate,
    AcademicFacultyResponse,
    APIResponse,
    CourseCreate,
    CourseResponse,
    DepartmentCreate,
    DepartmentResponse,
    FacultyCreate,
    FacultyResponse,
    SemesterCreate,
    SemesterResponse,
)

router = APIRouter(tags=["catalog"])


# Academic faculties


@router.get("/academic-faculties", response_model=APIResponse[list[AcademicFacultyResponse]])
def list_academic_faculties(store: StateStoreDep) -> APIResponse[list[AcademicFacultyResponse]]:
    """List all academic faculties."""
    items = store.list_academic_faculties()
    return APIResponse(data=[AcademicFacultyResponse.model_validate(i) for i in items])


@router.post(
    "/academic-faculties",
    response_model=APIResponse[AcademicFacultyResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_academic_faculty(
    body: AcademicFacultyCreate, store: StateStoreDep
) -> APIResponse[AcademicFacultyResponse]:
    """Create an academic faculty."""
    created = store.create_academic_faculty(name=body.name)
    return APIResponse(data=AcademicFacultyResponse.model_validate(created))


@router.get(
    "/academic-faculties/{academic_faculty_id}",
    response_model=APIResponse[AcademicFacultyResponse],
)
def get_academic_faculty(
    academic_faculty_id: str, store: StateStoreDep
) -> APIResponse[AcademicFacultyResponse]:
    """Get an academic faculty by ID."""
    item = store.get_academic_faculty(academic_faculty_id)
    return APIResponse(data=AcademicFacultyResponse.model_validate(item))


# Departments


@router.get("/departments", response_model=APIResponse[list[DepartmentResponse]])
def list_departments(store: StateStoreDep) -> APIResponse[list[DepartmentResponse]]:
    """List all departments."""
    items = store.list_departments()
    return APIResponse(data=[DepartmentResponse.model_validate(i) for i in items])


@router.post(
    "/departments",
    response_model=APIResponse[DepartmentResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_department(
    body: DepartmentCreate, store: StateStoreDep
) -> APIResponse[DepartmentResponse]:
    """Create a department under an academic faculty."""
    created = store.create_department(
        name=body.name, academic_faculty_id=body.academic_faculty_id
    )
    return APIResponse(data=DepartmentResponse.model_validate(created))


@router.get("/departments/{department_id}", response_model=APIResponse[DepartmentResponse])
def get_department(department_id: str, store: StateStoreDep) -> APIResponse[DepartmentResponse]:
    """Get a department by ID."""
    item = store.get_department(department_id)
    return APIResponse(data=DepartmentResponse.model_validate(item))


# Courses


@router.get("/courses", response_model=APIResponse[list[CourseResponse]])
def list_courses(store: StateStoreDep) -> APIResponse[list[CourseResponse]]:
    """List all courses."""
    items = store.list_courses()
    return APIResponse(data=[CourseResponse.model_validate(i) for i in items])


@router.post(
    "/courses",
    response_model=APIResponse[CourseResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_course(body: CourseCreate, store: StateStoreDep) -> APIResponse[CourseResponse]:
    """Create a catalog course."""
    created = store.create_course(
        title=body.title, prefix=body.prefix, code=body.code, credits=body.credits
    )
    return APIResponse(data=CourseResponse.model_validate(created))


@router.get("/courses/{course_id}", response_model=APIResponse[CourseResponse])
def get_course(course_id: str, store: StateStoreDep) -> APIResponse[CourseResponse]:
    """Get a course by ID."""
    item = store.get_course(course_id)
    return APIResponse(data=CourseResponse.model_validate(item))


# Faculty members


@router.get("/faculties", response_model=APIResponse[list[FacultyResponse]])
def list_faculties(store: StateStoreDep) -> APIResponse[list[FacultyResponse]]:
    """List all faculty members."""
    items = store.list_faculties()
    return APIResponse(data=[FacultyResponse.model_validate(i) for i in items])


@router.post(
    "/faculties",
    response_model=APIResponse[FacultyResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_faculty(body: FacultyCreate, store: StateStoreDep) -> APIResponse[FacultyResponse]:
    """Create a faculty member."""
    created = store.create_faculty(name=body.name, designation=body.designation)
    return APIResponse(data=FacultyResponse.model_validate(created))


@router.get("/faculties/{faculty_id}", response_model=APIResponse[FacultyResponse])
def get_faculty(faculty_id: str, store: StateStoreDep) -> APIResponse[FacultyResponse]:
    """Get a faculty member by ID."""
    item = store.get_faculty(faculty_id)
    return APIResponse(data=FacultyResponse.model_validate(item))


# Semesters


@router.get("/semesters", response_model=APIResponse[list[SemesterResponse]])
def list_semesters(store: StateStoreDep) -> APIResponse[list[SemesterResponse]]:
    """List all semesters, most recent year first."""
    items = store.list_semesters()
    return APIResponse(data=[SemesterResponse.model_validate(i) for i in items])


@router.post(
    "/semesters",
    response_model=APIResponse[SemesterResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_semester(body: SemesterCreate, store: StateStoreDep) -> APIResponse[SemesterResponse]:
    """Create a semester."""
    created = store.create_semester(name=body.name, year=body.year, code=body.code)
    return APIResponse(data=SemesterResponse.model_validate(created))


@router.get("/semesters/{semester_id}", response_model=APIResponse[SemesterResponse])
def get_semester(semester_id: str, store: StateStoreDep) -> APIResponse[SemesterResponse]:
    """Get a semester by ID."""
    item = store.get_semester(semester_id)
    return APIResponse(data=SemesterResponse.model_validate(item))
