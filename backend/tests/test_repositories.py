from datetime import date, timedelta

import pytest
from sqlalchemy.exc import IntegrityError

from constants import SortDirection
from domain.entities import Course, Student, Teacher
from domain.entities.student import years_before
from domain.events import StudentCreatedEvent, StudentGPAUpdatedEvent
from domain.value_objects import (
    GPA,
    AcademicTitle,
    Address,
    CourseLevel,
    CourseStatus,
    Email,
    FullName,
    PhoneNumber,
    StudentStatus,
)
from exceptions import ConflictError, DatabaseError
from repositories import Page, UnitOfWork
from repositories.base_repository import translate_integrity_error
from repositories.course_specifications import CoursesByLevelSpec, CoursesMatchingSearchSpec
from repositories.specifications import MatchAllSpecification, all_of, contains_pattern
from repositories.student_specifications import (
    StudentsByStatusSpec,
    StudentsInAgeRangeSpec,
    StudentsInGpaRangeSpec,
    StudentsMatchingSearchSpec,
)
from repositories.teacher_specifications import TeachersMatchingSearchSpec
from services.event_dispatcher import EventDispatcher


def new_student(name: str, email: str, age: int = 20, gpa: float | None = None) -> Student:
    student = Student.create(
        full_name=FullName(name),
        date_of_birth=years_before(date.today(), age),
        email=Email(email),
    )
    if gpa is not None:
        student.update_gpa(GPA(gpa))
    return student


def new_course(code: str, title: str, level: CourseLevel = CourseLevel.UNDERGRADUATE) -> Course:
    return Course.create(
        title=title,
        code=code,
        description="A course description long enough.",
        credit_hours=3,
        level=level,
        department="Mathematics",
    )


def new_teacher(employee_id: str, email: str) -> Teacher:
    return Teacher.create(
        full_name=FullName("Grace Hopper"),
        email=Email(email),
        employee_id=employee_id,
        department="Computer Science",
        title=AcademicTitle.LECTURER,
        date_of_birth=years_before(date.today(), 50),
    )


@pytest.fixture
def uow(db_session):
    return UnitOfWork(db_session)


class TestPage:

    @pytest.mark.parametrize("total,size,pages", [(0, 10, 0), (10, 10, 1), (11, 10, 2), (25, 5, 5)])
    def test_total_pages_rounds_up(self, total, size, pages):
        page = Page(items=[], page_number=1, page_size=size, total_count=total)
        assert page.total_pages == pages

    def test_navigation_flags(self):
        page = Page(items=[], page_number=2, page_size=10, total_count=25)
        assert page.has_previous_page
        assert page.has_next_page
        last = Page(items=[], page_number=3, page_size=10, total_count=25)
        assert not last.has_next_page


class TestStudentRepository:

    def test_round_trip_with_value_objects(self, uow):
        student = Student.create(
            full_name=FullName("Ada Lovelace"),
            date_of_birth=date(2001, 12, 10),
            email=Email("ada@university.edu"),
            phone_number=PhoneNumber("555-234-5678"),
            address=Address("12 Byron Rd", "London", "KY", "40741"),
        )
        uow.students.add(student)
        uow.save_changes()

        loaded = uow.students.get_by_id(student.id)
        assert loaded == student
        assert loaded.full_name == FullName("Ada Lovelace")
        assert loaded.phone_number == PhoneNumber("(555) 234-5678")
        assert loaded.address.city == "London"
        assert loaded.domain_events == []

    def test_address_can_be_replaced_and_cleared(self, uow):
        student = new_student("Ada Lovelace", "ada@university.edu")
        student.update_address(Address("1 First St", "Austin", "TX", "73301"))
        uow.students.add(student)
        uow.save_changes()

        loaded = uow.students.get_by_id(student.id)
        loaded.update_address(Address("2 Second St", "Austin", "TX", "73301"))
        uow.students.update(loaded)
        uow.save_changes()
        assert uow.students.get_by_id(student.id).address.street == "2 Second St"

        loaded.update_address(None)
        uow.students.update(loaded)
        uow.save_changes()
        assert uow.students.get_by_id(student.id).address is None

    def test_soft_delete_hides_student_but_keeps_email_reserved(self, uow):
        student = new_student("Ada Lovelace", "ada@university.edu")
        uow.students.add(student)
        uow.save_changes()

        uow.students.delete(student)
        uow.save_changes()

        assert uow.students.get_by_id(student.id) is None
        assert uow.students.count() == 0
        assert uow.students.exists_by_email(Email("ADA@university.edu"))
        assert not uow.students.exists_by_email(Email("ada@university.edu"), exclude_id=student.id)

    def test_paginated_sorting_and_totals(self, uow):
        for index, name in enumerate(["Carl Gauss", "Alan Turing", "Emmy Noether", "Blaise Pascal"]):
            uow.students.add(new_student(name, f"s{index}@university.edu"))
        uow.save_changes()

        page = uow.students.get_paginated(MatchAllSpecification(), 1, 3)
        assert [str(s.full_name) for s in page.items] == ["Alan Turing", "Blaise Pascal", "Carl Gauss"]
        assert page.total_count == 4
        assert page.total_pages == 2
        assert page.has_next_page

        page = uow.students.get_paginated(MatchAllSpecification(), 1, 2, "FullName", SortDirection.DESC)
        assert [str(s.full_name) for s in page.items] == ["Emmy Noether", "Carl Gauss"]

    def test_probation_query(self, uow):
        uow.students.add(new_student("Low Gpa", "low@university.edu", gpa=1.2))
        uow.students.add(new_student("Edge Gpa", "edge@university.edu", gpa=2.0))
        uow.students.add(new_student("No Gpa", "none@university.edu"))
        uow.save_changes()

        page = uow.students.get_on_probation(2.0, 1, 10)
        assert [str(s.email) for s in page.items] == ["low@university.edu"]


class TestStudentSpecifications:

    @pytest.fixture
    def populated(self, uow):
        uow.students.add(new_student("Young Honors", "young@university.edu", age=18, gpa=3.9))
        uow.students.add(new_student("Mid Average", "mid@college.edu", age=25, gpa=2.8))
        uow.students.add(new_student("Older Struggling", "old@university.edu", age=40, gpa=1.5))
        uow.save_changes()
        return uow

    def test_search_matches_name_or_email(self, populated):
        found = populated.students.find(StudentsMatchingSearchSpec("college"))
        assert [str(s.full_name) for s in found] == ["Mid Average"]
        found = populated.students.find(StudentsMatchingSearchSpec("honors"))
        assert [str(s.email) for s in found] == ["young@university.edu"]

    def test_gpa_and_age_ranges(self, populated):
        assert populated.students.count(StudentsInGpaRangeSpec(2.5, 4.0)) == 2
        assert populated.students.count(StudentsInAgeRangeSpec(min_age=20, max_age=30)) == 1
        assert populated.students.count(StudentsInAgeRangeSpec(max_age=40)) == 3

    def test_combinators_match_in_memory_evaluation(self, populated):
        spec = StudentsInGpaRangeSpec(min_gpa=2.0) & ~StudentsMatchingSearchSpec("college")
        found = populated.students.find(spec)
        assert [str(s.full_name) for s in found] == ["Young Honors"]
        assert all(spec.is_satisfied_by(s) for s in found)

        either = StudentsMatchingSearchSpec("young") | StudentsMatchingSearchSpec("older")
        assert populated.students.count(either) == 2

    def test_status_filter(self, populated):
        student = populated.students.find(StudentsMatchingSearchSpec("mid"))[0]
        student.deactivate()
        populated.students.update(student)
        populated.save_changes()

        spec = all_of([StudentsByStatusSpec(StudentStatus.INACTIVE)])
        assert [s.id for s in populated.students.find(spec)] == [student.id]


class TestCourseRepository:

    def test_code_lookup_is_case_insensitive(self, uow):
        uow.courses.add(new_course("MA101", "Calculus I"))
        uow.save_changes()

        assert uow.courses.get_by_code("ma101").title == "Calculus I"
        assert uow.courses.exists_by_code("ma101")

    def test_department_listing_sorted_by_title(self, uow):
        uow.courses.add(new_course("MA201", "Linear Algebra"))
        uow.courses.add(new_course("MA101", "Calculus I"))
        uow.courses.add(new_course("MA501", "Measure Theory", CourseLevel.GRADUATE))
        uow.save_changes()

        titles = [c.title for c in uow.courses.get_by_department("mathematics")]
        assert titles == ["Calculus I", "Linear Algebra", "Measure Theory"]

        graduate = uow.courses.get_by_department("Mathematics", CoursesByLevelSpec(CourseLevel.GRADUATE))
        assert [c.code for c in graduate] == ["MA501"]

    def test_lifecycle_state_persists(self, uow):
        course = new_course("MA101", "Calculus I")
        uow.courses.add(course)
        uow.save_changes()

        start = date.today() + timedelta(days=30)
        loaded = uow.courses.get_by_id(course.id)
        loaded.schedule("Fall", start.year, start, start + timedelta(days=100))
        uow.courses.update(loaded)
        uow.save_changes()

        stored = uow.courses.get_by_id(course.id)
        assert stored.status is CourseStatus.SCHEDULED
        assert stored.start_date == start
        assert stored.academic_period == f"Fall {start.year}"

    def test_search_matches_title_or_code(self, uow):
        uow.courses.add(new_course("MA101", "Calculus I"))
        uow.courses.add(new_course("MA201", "Linear Algebra"))
        uow.save_changes()

        page = uow.courses.get_paginated(CoursesMatchingSearchSpec("algebra"), 1, 10)
        assert [c.code for c in page.items] == ["MA201"]
        page = uow.courses.get_paginated(CoursesMatchingSearchSpec("ma1"), 1, 10)
        assert [c.code for c in page.items] == ["MA101"]


class TestTeacherRepository:

    def test_lists_survive_round_trip(self, uow):
        teacher = Teacher.create(
            full_name=FullName("Grace Hopper"),
            email=Email("grace@university.edu"),
            employee_id="t-100",
            department="Computer Science",
            title=AcademicTitle.LECTURER,
            date_of_birth=years_before(date.today(), 50),
        )
        teacher.add_specialization("Compilers")
        teacher.add_qualification("PhD Mathematics")
        uow.teachers.add(teacher)
        uow.save_changes()

        loaded = uow.teachers.get_by_id(teacher.id)
        assert loaded.specializations == ["Compilers"]
        assert loaded.qualifications == ["PhD Mathematics"]
        assert loaded.max_courses_per_semester == 4
        assert uow.teachers.exists_by_employee_id("T-100")


class TestUnitOfWork:

    def test_events_dispatched_after_commit_in_order(self, db_session):
        received = []
        dispatcher = EventDispatcher()
        dispatcher.register(StudentCreatedEvent, received.append)
        dispatcher.register(StudentGPAUpdatedEvent, received.append)
        uow = UnitOfWork(db_session, dispatcher)

        student = new_student("Ada Lovelace", "ada@university.edu", gpa=3.2)
        uow.students.add(student)
        assert received == []

        written = uow.save_changes()
        assert written == 1
        assert [type(e) for e in received] == [StudentCreatedEvent, StudentGPAUpdatedEvent]
        assert student.domain_events == []

    def test_rollback_discards_staged_rows(self, uow):
        uow.students.add(new_student("Ada Lovelace", "ada@university.edu"))
        uow.rollback()
        assert uow.students.count() == 0


class TestLiteralSearch:

    def test_contains_pattern_escapes_wildcards(self):
        assert contains_pattern("50%_a\\b") == "%50\\%\\_a\\\\b%"

    @pytest.fixture
    def populated(self, uow):
        uow.students.add(new_student("Ada Lovelace", "ada_l@university.edu"))
        uow.students.add(new_student("Adam Smith", "adaxl@university.edu"))
        uow.save_changes()
        return uow

    @pytest.mark.parametrize("term,emails", [
        ("%", []),
        ("_", ["ada_l@university.edu"]),
        ("a_l", ["ada_l@university.edu"]),
        ("\\", []),
    ])
    def test_wildcards_match_literally(self, populated, term, emails):
        spec = StudentsMatchingSearchSpec(term)
        found = populated.students.find(spec)
        assert sorted(str(s.email) for s in found) == emails

        everyone = populated.students.find(MatchAllSpecification())
        in_memory = sorted(str(s.email) for s in everyone if spec.is_satisfied_by(s))
        assert in_memory == emails

    def test_course_search_percent(self, uow):
        uow.courses.add(new_course("ED101", "Grading 100% Online"))
        uow.courses.add(new_course("HI101", "A 1000 Year History"))
        uow.save_changes()

        page = uow.courses.get_paginated(CoursesMatchingSearchSpec("100%"), 1, 10)
        assert [c.code for c in page.items] == ["ED101"]

    def test_teacher_search_underscore(self, uow):
        uow.teachers.add(new_teacher("T_100", "t1@university.edu"))
        uow.teachers.add(new_teacher("TX100", "t2@university.edu"))
        uow.save_changes()

        page = uow.teachers.get_paginated(TeachersMatchingSearchSpec("t_1"), 1, 10)
        assert [t.employee_id for t in page.items] == ["T_100"]


class TestUniqueViolations:

    def test_duplicate_email_raises_conflict(self, uow):
        uow.students.add(new_student("Ada Lovelace", "ada@university.edu"))
        uow.save_changes()

        with pytest.raises(ConflictError) as exc_info:
            uow.students.add(new_student("Ada Byron", "ada@university.edu"))
        assert exc_info.value.details["resource"] == "Student"
        assert exc_info.value.details["field"] == "email"
        assert uow.students.count() == 1

    def test_duplicate_employee_id_raises_conflict(self, uow):
        uow.teachers.add(new_teacher("EMP100", "a@university.edu"))
        uow.save_changes()

        with pytest.raises(ConflictError) as exc_info:
            uow.teachers.add(new_teacher("EMP100", "b@university.edu"))
        assert exc_info.value.details["resource"] == "Teacher"
        assert exc_info.value.details["field"] == "employeeId"

    def test_postgres_unique_message(self):
        orig = Exception(
            'duplicate key value violates unique constraint "courses_code_key"\n'
            "DETAIL:  Key (code)=(CS101) already exists."
        )
        error = translate_integrity_error(IntegrityError("INSERT INTO courses", {}, orig))
        assert isinstance(error, ConflictError)
        assert error.details["field"] == "code"
        assert error.details["value"] == "CS101"

    def test_other_integrity_failures_stay_database_errors(self):
        orig = Exception("NOT NULL constraint failed: students.email")
        error = translate_integrity_error(IntegrityError("INSERT INTO students", {}, orig))
        assert isinstance(error, DatabaseError)
