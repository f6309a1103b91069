"""Integration tests for the assembled Registrar API."""

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from registrar.api import create_app


@pytest.fixture
def client(tmp_path: Path):
    """Run the full app, lifespan included, against a file database."""
    app = create_app(db_path=str(tmp_path / "registrar.db"))
    with TestClient(app) as client:
        yield client


def create(client: TestClient, path: str, body: dict) -> dict:
    response = client.post(f"/api/v1/{path}", json=body)
    assert response.status_code == 201, response.text
    return response.json()["data"]


@pytest.fixture
def catalog_ids(client: TestClient) -> dict:
    """Seed the catalog through the API."""
    science = create(client, "academic-faculties", {"name": "Faculty of Science"})
    cse = create(
        client, "departments", {"name": "Computer Science", "academic_faculty_id": science["id"]}
    )
    course = create(client, "courses", {"title": "Operating Systems", "prefix": "CSE", "code": 310})
    other = create(client, "courses", {"title": "Networks", "prefix": "CSE", "code": 320})
    faculty = create(client, "faculties", {"name": "Dana Karim", "designation": "Professor"})
    semester = create(client, "semesters", {"name": "Autumn", "year": 2026, "code": "03"})
    return {
        "academic_faculty_id": science["id"],
        "department_id": cse["id"],
        "course_id": course["id"],
        "other_course_id": other["id"],
        "faculty_id": faculty["id"],
        "semester_id": semester["id"],
    }


@pytest.mark.integration
class TestRegistrationFlow:
    """End-to-end registration and offering flow."""

    def test_full_lifecycle(self, client: TestClient, catalog_ids: dict) -> None:
        """Open, schedule, start and end a registration."""
        registration = create(
            client,
            "semester-registrations",
            {
                "semester_id": catalog_ids["semester_id"],
                "start_date": "2026-08-01T00:00:00",
                "end_date": "2026-08-31T00:00:00",
            },
        )
        offering_body = {
            "semester_registration_id": registration["id"],
            "academic_faculty_id": catalog_ids["academic_faculty_id"],
            "department_id": catalog_ids["department_id"],
            "course_id": catalog_ids["course_id"],
            "faculty_id": catalog_ids["faculty_id"],
            "section": "A",
            "days": ["Sun", "Tue"],
            "start_time": "08:00",
            "end_time": "09:30",
        }
        offering = create(client, "offered-courses", offering_body)
        assert offering["semester_id"] == catalog_ids["semester_id"]

        back_to_back = create(
            client,
            "offered-courses",
            {
                **offering_body,
                "course_id": catalog_ids["other_course_id"],
                "start_time": "09:30",
                "end_time": "11:00",
            },
        )
        assert back_to_back["start_time"] == "09:30"

        started = client.patch(
            f"/api/v1/semester-registrations/{registration['id']}", json={"status": "ONGOING"}
        )
        assert started.json()["data"]["status"] == "ONGOING"

        locked = client.delete(f"/api/v1/offered-courses/{offering['id']}")
        assert locked.status_code == 400
        assert locked.json()["code"] == "ImmutableState"

        ended = client.patch(
            f"/api/v1/semester-registrations/{registration['id']}", json={"status": "ENDED"}
        )
        assert ended.json()["data"]["status"] == "ENDED"

        reopened = client.patch(
            f"/api/v1/semester-registrations/{registration['id']}", json={"status": "ONGOING"}
        )
        assert reopened.status_code == 400
        assert reopened.json()["code"] == "IllegalTransition"

    def test_delete_cascades(self, client: TestClient, catalog_ids: dict) -> None:
        """Deleting a registration removes its offerings."""
        registration = create(
            client,
            "semester-registrations",
            {
                "semester_id": catalog_ids["semester_id"],
                "start_date": "2026-08-01T00:00:00",
                "end_date": "2026-08-31T00:00:00",
            },
        )
        create(
            client,
            "offered-courses",
            {
                "semester_registration_id": registration["id"],
                "academic_faculty_id": catalog_ids["academic_faculty_id"],
                "department_id": catalog_ids["department_id"],
                "course_id": catalog_ids["course_id"],
                "faculty_id": catalog_ids["faculty_id"],
                "section": "A",
                "days": ["Mon"],
                "start_time": "08:00",
                "end_time": "09:00",
            },
        )

        deleted = client.delete(f"/api/v1/semester-registrations/{registration['id']}")
        assert deleted.status_code == 200

        listed = client.get(
            "/api/v1/offered-courses",
            params={"semester_registration_id": registration["id"]},
        )
        assert listed.json()["data"] == []
