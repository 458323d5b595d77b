from datetime import date, timedelta

import pytest
from fastapi import status

from domain.entities.student import years_before
from repositories import StudentRepository


def create_student(client, payload, **overrides):
    body = dict(payload, **overrides)
    response = client.post("/api/students", json=body)
    assert response.status_code == status.HTTP_201_CREATED, response.json()
    return response.json()


def create_course(client, payload, **overrides):
    body = dict(payload, **overrides)
    response = client.post("/api/courses", json=body)
    assert response.status_code == status.HTTP_201_CREATED, response.json()
    return response.json()


def assert_envelope(response, status_code, message):
    assert response.status_code == status_code
    body = response.json()
    assert body["message"] == message
    assert set(body) == {"message", "details", "errors", "timestamp"}
    assert body["timestamp"].endswith("Z")
    return body


class TestHealth:

    def test_health(self, client):
        response = client.get("/api/health")
        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {"status": "ok", "service": "EduTrack API", "version": "1.0.0"}


class TestStudentEndpoints:

    def test_create_and_get(self, client, student_payload):
        student_id = create_student(client, student_payload)

        response = client.get(f"/api/students/{student_id}")
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == student_id
        assert data["fullName"] == "Jane Marie Doe"
        assert data["email"] == "jane.doe@university.edu"
        assert data["age"] == 20
        assert data["status"] == "Active"
        assert data["gpa"] is None
        assert data["academicStanding"] == "No GPA Recorded"
        assert data["address"]["state"] == "IL"
        assert data["address"]["city"] == "Springfield"
        assert data["enrollmentDate"] == date.today().isoformat()

    def test_duplicate_email_is_conflict(self, client, student_payload):
        create_student(client, student_payload)
        response = client.post(
            "/api/students", json=dict(student_payload, email="JANE.DOE@university.edu")
        )
        body = assert_envelope(response, status.HTTP_409_CONFLICT, "Resource conflict")
        assert "jane.doe@university.edu" in body["details"]

    def test_too_young_student_is_rejected(self, client, student_payload):
        too_young = years_before(date.today(), 15).isoformat()
        response = client.post("/api/students", json=dict(student_payload, dateOfBirth=too_young))
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")
        assert body["details"] == "One or more validation errors occurred"
        assert body["errors"][0]["property"] == "dateOfBirth"
        assert body["errors"][0]["message"] == "Student must be at least 16 years old"

    def test_malformed_phone_is_invalid_argument(self, client, student_payload):
        response = client.post("/api/students", json=dict(student_payload, phoneNumber="12345"))
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Invalid argument")
        assert "10 digits" in body["details"]

    def test_unknown_student_is_not_found(self, client):
        response = client.get("/api/students/not-a-real-id")
        assert_envelope(response, status.HTTP_404_NOT_FOUND, "Resource not found")

    def test_gpa_update_and_derived_fields(self, client, student_payload):
        student_id = create_student(client, student_payload)

        response = client.put(f"/api/students/{student_id}/gpa", json={"gpaValue": 3.75})
        assert response.status_code == status.HTTP_204_NO_CONTENT

        data = client.get(f"/api/students/{student_id}").json()
        assert data["gpa"] == 3.75
        assert data["letterGrade"] == "A"
        assert data["academicStanding"] == "Summa Cum Laude"

    def test_gpa_out_of_range_is_rejected(self, client, student_payload):
        student_id = create_student(client, student_payload)
        response = client.put(f"/api/students/{student_id}/gpa", json={"gpaValue": 4.5})
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")
        assert body["errors"][0]["message"] == "GPA must be between 0.0 and 4.0"

    def test_nan_gpa_is_rejected_and_stored_gpa_kept(self, client, student_payload):
        student_id = create_student(client, student_payload)
        client.put(f"/api/students/{student_id}/gpa", json={"gpaValue": 3.2})
        headers = {"Content-Type": "application/json"}

        response = client.put(
            f"/api/students/{student_id}/gpa", content='{"gpaValue": NaN}', headers=headers
        )
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")
        assert body["errors"][0]["property"] == "gpaValue"

        response = client.put(f"/api/students/{student_id}", content='{"gpa": NaN}', headers=headers)
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")

        assert client.get(f"/api/students/{student_id}").json()["gpa"] == 3.2

    def test_email_taken_between_check_and_write_is_conflict(
        self, client, student_payload, monkeypatch
    ):
        create_student(client, student_payload)
        monkeypatch.setattr(
            StudentRepository, "exists_by_email", lambda self, email, exclude_id=None: False
        )

        response = client.post("/api/students", json=student_payload)
        body = assert_envelope(response, status.HTTP_409_CONFLICT, "Resource conflict")
        assert "email" in body["details"]

    def test_partial_update(self, client, student_payload):
        student_id = create_student(client, student_payload)
        response = client.put(
            f"/api/students/{student_id}",
            json={"fullName": "jane smith", "gpa": 2.5},
        )
        assert response.status_code == status.HTTP_204_NO_CONTENT

        data = client.get(f"/api/students/{student_id}").json()
        assert data["fullName"] == "Jane Smith"
        assert data["gpa"] == 2.5
        assert data["email"] == "jane.doe@university.edu"

    def test_update_rejects_gpa_with_three_decimals(self, client, student_payload):
        student_id = create_student(client, student_payload)
        response = client.put(f"/api/students/{student_id}", json={"gpa": 3.125})
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")

    def test_contact_update_conflicts_with_other_student(self, client, student_payload):
        create_student(client, student_payload, email="first@university.edu")
        second = create_student(client, student_payload, email="second@university.edu")

        response = client.put(
            f"/api/students/{second}/contact", json={"email": "first@university.edu"}
        )
        assert_envelope(response, status.HTTP_409_CONFLICT, "Resource conflict")

        response = client.put(
            f"/api/students/{second}/contact",
            json={"email": "second@college.edu", "phoneNumber": "555.987.6543"},
        )
        assert response.status_code == status.HTTP_204_NO_CONTENT
        data = client.get(f"/api/students/{second}").json()
        assert data["email"] == "second@college.edu"
        assert data["phoneNumber"] == "(555) 987-6543"

    def test_status_changes(self, client, student_payload):
        student_id = create_student(client, student_payload)

        response = client.put(f"/api/students/{student_id}/status", json={"newStatus": "Graduated"})
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/students/{student_id}").json()["status"] == "Graduated"

        response = client.put(f"/api/students/{student_id}/status", json={"newStatus": "Dropped"})
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Invalid argument")

    def test_invalid_transition_is_invalid_operation(self, client, student_payload):
        student_id = create_student(client, student_payload)
        client.put(f"/api/students/{student_id}/status", json={"newStatus": "Expelled"})

        response = client.put(f"/api/students/{student_id}/status", json={"newStatus": "Active"})
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Invalid operation")

    def test_delete_is_soft(self, client, student_payload):
        student_id = create_student(client, student_payload)

        response = client.delete(f"/api/students/{student_id}")
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/students/{student_id}").status_code == status.HTTP_404_NOT_FOUND
        assert client.delete(f"/api/students/{student_id}").status_code == status.HTTP_404_NOT_FOUND

        # The address stays reserved by the deleted record
        response = client.post("/api/students", json=student_payload)
        assert response.status_code == status.HTTP_409_CONFLICT


class TestStudentLists:

    @pytest.fixture
    def students(self, client, student_payload):
        people = [
            ("Carl Gauss", "carl@university.edu", 3.9),
            ("Alan Turing", "alan@university.edu", 1.5),
            ("Emmy Noether", "emmy@college.edu", 3.2),
        ]
        ids = {}
        for name, email, gpa in people:
            student_id = create_student(client, student_payload, fullName=name, email=email)
            client.put(f"/api/students/{student_id}/gpa", json={"gpaValue": gpa})
            ids[name] = student_id
        return ids

    def test_pagination_envelope(self, client, students):
        response = client.get("/api/students", params={"pageNumber": 1, "pageSize": 2})
        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert [item["fullName"] for item in data["items"]] == ["Alan Turing", "Carl Gauss"]
        assert data["pageNumber"] == 1
        assert data["pageSize"] == 2
        assert data["totalCount"] == 3
        assert data["totalPages"] == 2
        assert data["hasNextPage"] is True
        assert data["hasPreviousPage"] is False

    def test_filters_and_sorting(self, client, students):
        response = client.get(
            "/api/students",
            params={"minGPA": 3.0, "sortBy": "GPA", "sortDirection": "desc"},
        )
        names = [item["fullName"] for item in response.json()["items"]]
        assert names == ["Carl Gauss", "Emmy Noether"]

        response = client.get("/api/students", params={"searchTerm": "college"})
        assert [item["fullName"] for item in response.json()["items"]] == ["Emmy Noether"]

    @pytest.mark.parametrize(
        "params",
        [
            {"pageNumber": 0},
            {"pageSize": 101},
            {"sortBy": "Nickname"},
            {"sortDirection": "sideways"},
            {"minGPA": 3.5, "maxGPA": 3.0},
            {"minAge": 15},
            {"minGPA": "nan"},
        ],
    )
    def test_invalid_query_parameters(self, client, params):
        response = client.get("/api/students", params=params)
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")
        assert len(body["errors"]) == 1

    @pytest.mark.parametrize("term", ["%", "_", "%a%"])
    def test_search_wildcards_are_literal(self, client, students, term):
        data = client.get("/api/students", params={"searchTerm": term}).json()
        assert data["totalCount"] == 0
        assert data["items"] == []

    def test_probation_list(self, client, students):
        data = client.get("/api/students/probation").json()
        assert [item["id"] for item in data["items"]] == [students["Alan Turing"]]
        assert data["totalCount"] == 1

    def test_status_list(self, client, students):
        client.put(f"/api/students/{students['Carl Gauss']}/status", json={"newStatus": "Inactive"})
        data = client.get("/api/students/status/inactive").json()
        assert [item["fullName"] for item in data["items"]] == ["Carl Gauss"]
        assert data["items"][0]["status"] == "Inactive"


class TestCourseEndpoints:

    def test_create_and_get(self, client, course_payload):
        course_id = create_course(client, course_payload, prerequisites=["MA101", "MA102"])

        data = client.get(f"/api/courses/{course_id}").json()
        assert data["code"] == "CS101"
        assert data["creditHours"] == 3
        assert data["maxEnrollment"] == 40
        assert data["status"] == "Draft"
        assert data["prerequisiteCreditHours"] == 6
        assert data["academicPeriod"] == ""

    def test_academic_period_schedules_course(self, client, course_payload):
        course_id = create_course(client, course_payload, academicPeriod="Fall 2025")

        data = client.get(f"/api/courses/{course_id}").json()
        assert data["status"] == "Scheduled"
        assert data["academicPeriod"] == "Fall 2025"
        assert date.fromisoformat(data["startDate"]) > date.today()
        assert date.fromisoformat(data["endDate"]) > date.fromisoformat(data["startDate"])

    def test_duplicate_code_is_conflict(self, client, course_payload):
        create_course(client, course_payload)
        response = client.post("/api/courses", json=course_payload)
        assert_envelope(response, status.HTTP_409_CONFLICT, "Resource conflict")

    @pytest.mark.parametrize(
        "overrides",
        [
            {"courseCode": "cs101"},
            {"courseCode": "C101"},
            {"level": "Kindergarten"},
            {"credits": 0},
            {"prerequisites": [f"MA{100 + i}" for i in range(11)]},
        ],
    )
    def test_create_validation(self, client, course_payload, overrides):
        response = client.post("/api/courses", json=dict(course_payload, **overrides))
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")

    def test_lifecycle(self, client, course_payload):
        course_id = create_course(client, course_payload)

        response = client.post(f"/api/courses/{course_id}/activate")
        body = assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Invalid operation")
        assert "scheduled" in body["details"]

        start = date.today() + timedelta(days=30)
        response = client.post(
            f"/api/courses/{course_id}/schedule",
            json={
                "semester": "Spring",
                "academicYear": start.year,
                "startDate": start.isoformat(),
                "endDate": (start + timedelta(days=100)).isoformat(),
            },
        )
        assert response.status_code == status.HTTP_200_OK
        assert "message" in response.json()

        response = client.post(f"/api/courses/{course_id}/activate")
        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/courses/{course_id}").json()["status"] == "Active"

        response = client.post(
            f"/api/courses/{course_id}/complete", json={"completionNotes": "All grades posted"}
        )
        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/courses/{course_id}").json()["status"] == "Completed"

    @pytest.mark.parametrize(
        "start_offset,length",
        [(-1, 90), (10, 0), (10, 400)],
    )
    def test_schedule_validation(self, client, course_payload, start_offset, length):
        course_id = create_course(client, course_payload)
        start = date.today() + timedelta(days=start_offset)
        response = client.post(
            f"/api/courses/{course_id}/schedule",
            json={
                "semester": "Fall",
                "academicYear": start.year,
                "startDate": start.isoformat(),
                "endDate": (start + timedelta(days=length)).isoformat(),
            },
        )
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Validation failed")

    def test_update(self, client, course_payload):
        course_id = create_course(client, course_payload)
        update = dict(
            course_payload,
            title="Programming Fundamentals",
            courseCode="CS110",
            maxCapacity=60,
            prerequisiteCreditHours=9,
        )
        response = client.put(f"/api/courses/{course_id}", json=update)
        assert response.status_code == status.HTTP_204_NO_CONTENT

        data = client.get(f"/api/courses/{course_id}").json()
        assert data["title"] == "Programming Fundamentals"
        assert data["code"] == "CS110"
        assert data["maxEnrollment"] == 60
        assert data["prerequisiteCreditHours"] == 9

    def test_update_unknown_course(self, client, course_payload):
        response = client.put("/api/courses/missing", json=course_payload)
        assert_envelope(response, status.HTTP_404_NOT_FOUND, "Resource not found")

    def test_list_and_department_queries(self, client, course_payload):
        create_course(client, course_payload, title="Operating Systems", courseCode="CS301")
        create_course(client, course_payload, title="Algorithms", courseCode="CS201", level="Graduate")
        create_course(
            client, course_payload, title="Calculus", courseCode="MA101", department="Mathematics"
        )

        data = client.get("/api/courses", params={"sortBy": "Code", "pageSize": 2}).json()
        assert [item["code"] for item in data["items"]] == ["CS201", "CS301"]
        assert data["totalPages"] == 2
        assert data["items"][0]["enrollment"] == "0/40"

        data = client.get("/api/courses", params={"department": "computer science"}).json()
        assert data["totalCount"] == 2

        response = client.get("/api/courses/department/Computer Science")
        assert [item["title"] for item in response.json()] == ["Algorithms", "Operating Systems"]

        response = client.get(
            "/api/courses/department/Computer Science", params={"level": "Graduate"}
        )
        assert [item["code"] for item in response.json()] == ["CS201"]


class TestTeacherEndpoints:

    @pytest.fixture
    def teacher_payload(self):
        return {
            "fullName": "Grace Hopper",
            "email": "grace.hopper@university.edu",
            "employeeId": "EMP042",
            "department": "Computer Science",
            "title": "AssistantProfessor",
            "dateOfBirth": years_before(date.today(), 45).isoformat(),
        }

    def test_create_and_assign(self, client, teacher_payload, course_payload):
        response = client.post("/api/teachers", json=teacher_payload)
        assert response.status_code == status.HTTP_201_CREATED
        teacher_id = response.json()
        course_id = create_course(client, course_payload)

        response = client.post(f"/api/teachers/{teacher_id}/courses/{course_id}")
        assert response.status_code == status.HTTP_200_OK

        data = client.get(f"/api/teachers/{teacher_id}").json()
        assert data["currentCourseLoad"] == 1
        assert data["maxCoursesPerSemester"] == 3

        response = client.delete(f"/api/teachers/{teacher_id}/courses/{course_id}")
        assert response.status_code == status.HTTP_200_OK
        assert client.get(f"/api/teachers/{teacher_id}").json()["currentCourseLoad"] == 0

    def test_duplicate_employee_id(self, client, teacher_payload):
        client.post("/api/teachers", json=teacher_payload)
        response = client.post(
            "/api/teachers", json=dict(teacher_payload, email="someone.else@university.edu")
        )
        assert_envelope(response, status.HTTP_409_CONFLICT, "Resource conflict")

    def test_activating_active_teacher_is_noop(self, client, teacher_payload):
        teacher_id = client.post("/api/teachers", json=teacher_payload).json()

        response = client.put(f"/api/teachers/{teacher_id}/status", json={"newStatus": "Active"})
        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/teachers/{teacher_id}").json()["status"] == "Active"

    def test_inactive_teacher_cannot_be_assigned(self, client, teacher_payload, course_payload):
        teacher_id = client.post("/api/teachers", json=teacher_payload).json()
        course_id = create_course(client, course_payload)

        response = client.put(f"/api/teachers/{teacher_id}/status", json={"newStatus": "OnLeave"})
        assert response.status_code == status.HTTP_204_NO_CONTENT

        response = client.post(f"/api/teachers/{teacher_id}/courses/{course_id}")
        assert_envelope(response, status.HTTP_400_BAD_REQUEST, "Invalid operation")

        data = client.get("/api/teachers", params={"status": "OnLeave"}).json()
        assert [item["id"] for item in data["items"]] == [teacher_id]

    def test_assign_unknown_course(self, client, teacher_payload):
        teacher_id = client.post("/api/teachers", json=teacher_payload).json()
        response = client.post(f"/api/teachers/{teacher_id}/courses/missing")
        assert_envelope(response, status.HTTP_404_NOT_FOUND, "Resource not found")
