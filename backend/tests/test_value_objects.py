import pytest

from domain.value_objects import (
    GPA,
    Address,
    CourseLevel,
    CourseStatus,
    Email,
    EmploymentStatus,
    FullName,
    PhoneNumber,
    StudentStatus,
)


class TestEmail:

    def test_normalizes_case_and_whitespace(self):
        email = Email("  John.Doe@University.EDU ")
        assert email.value == "john.doe@university.edu"
        assert email == Email("john.doe@university.edu")

    @pytest.mark.parametrize("raw", ["", "   ", "no-at-sign", "a@b", "a@@b.com"])
    def test_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            Email(raw)

    def test_domain_helpers(self):
        email = Email("jdoe@state.edu")
        assert email.local_part == "jdoe"
        assert email.domain == "state.edu"
        assert email.is_university_email
        assert email.is_corporate_email
        assert not Email("jdoe@gmail.com").is_corporate_email
        assert email.with_domain("acme.com") == Email("jdoe@acme.com")


class TestFullName:

    def test_title_cases_and_collapses_spaces(self):
        name = FullName("  jOHN   ronald  doe ")
        assert name.value == "John Ronald Doe"
        assert name.first_name == "John"
        assert name.middle_name == "Ronald"
        assert name.last_name == "Doe"

    def test_requires_first_and_last_name(self):
        with pytest.raises(ValueError, match="first and last"):
            FullName("Madonna")

    def test_rejects_digits(self):
        with pytest.raises(ValueError):
            FullName("John Doe 3rd")

    def test_formatting(self):
        name = FullName.from_parts("jane", "smith")
        assert name.initials == "J.S."
        assert name.display_name == "Smith, Jane"
        assert name.formal_name("Dr.") == "Dr. Jane Smith"
        assert name.middle_name is None
        assert name.contains("SMI")


class TestGPA:

    def test_rounds_to_two_decimals(self):
        assert GPA(3.456).value == 3.46
        assert str(GPA(3.5)) == "3.50"

    @pytest.mark.parametrize("value", [-0.01, 4.01, "abc", float("nan"), float("inf")])
    def test_rejects_out_of_range(self, value):
        with pytest.raises(ValueError):
            GPA(value)

    def test_classification(self):
        assert GPA(3.8).letter_grade == "A"
        assert GPA(3.8).academic_standing == "Summa Cum Laude"
        assert GPA(3.8).is_deans_list
        assert GPA(3.5).is_honors
        assert GPA(1.9).is_on_probation
        assert GPA(1.9).academic_standing == "Academic Probation"
        assert GPA(0.5).letter_grade == "F"

    def test_ordering_and_weighting(self):
        assert GPA(2.0) < GPA(3.0)
        assert GPA(4.0).weighted_with(GPA(2.0), 3, 1).value == 3.5
        assert GPA(3.9).apply_bonus(0.5).value == 4.0

    def test_from_percentage(self):
        assert GPA.from_percentage(95).value == 3.5
        assert GPA.from_percentage(40).value == 0.0
        with pytest.raises(ValueError):
            GPA.from_percentage(101)


class TestPhoneNumber:

    @pytest.mark.parametrize("raw", ["555-234-5678", "+1 (555) 234 5678", "15552345678", "555.234.5678"])
    def test_accepts_common_formats(self, raw):
        assert PhoneNumber(raw).value == "(555) 234-5678"

    @pytest.mark.parametrize("raw", ["123", "055-234-5678", "555-134-5678"])
    def test_rejects_invalid(self, raw):
        with pytest.raises(ValueError):
            PhoneNumber(raw)

    def test_formats(self):
        phone = PhoneNumber("8002345678")
        assert phone.e164 == "+18002345678"
        assert phone.dash_format == "800-234-5678"
        assert phone.is_toll_free
        assert phone.masked() == "(XXX) XXX-5678"


class TestAddress:

    def test_normalizes_parts(self):
        address = Address("123 main st", "springfield", "il", "62701")
        assert address.street == "123 Main St"
        assert address.city == "Springfield"
        assert address.state == "IL"
        assert address.full_address == "123 Main St, Springfield, IL 62701"
        assert address.state_name == "Illinois"

    def test_zip_plus_four(self):
        address = Address("1 Elm St", "Austin", "TX", "73301-1234")
        assert address.zip5 == "73301"
        assert address.zip_extension == "1234"

    @pytest.mark.parametrize("state,zip_code", [("Illinois", "62701"), ("IL", "6270")])
    def test_rejects_bad_state_or_zip(self, state, zip_code):
        with pytest.raises(ValueError):
            Address("123 Main St", "Springfield", state, zip_code)

    def test_with_methods_return_new_instance(self):
        address = Address("PO Box 12", "Austin", "TX", "73301")
        moved = address.with_city("dallas")
        assert moved.city == "Dallas"
        assert address.city == "Austin"
        assert address.is_po_box

    def test_mailing_lines(self):
        domestic = Address("12 elm st", "austin", "tx", "73301", street2="apt 4b")
        assert domestic.mailing_lines == ["12 Elm St", "Apt 4b", "Austin, TX 73301"]

        abroad = Address("1 King St", "Toronto", "ON", "12345", country="ca")
        assert abroad.mailing_lines == ["1 King St", "Toronto, ON 12345", "CA"]


class TestStatusEnums:

    def test_parse_ignores_case(self):
        assert StudentStatus.from_string("graduated") is StudentStatus.GRADUATED
        assert CourseLevel.from_string("GRADUATE") is CourseLevel.GRADUATE
        assert EmploymentStatus.from_string("onleave") is EmploymentStatus.ON_LEAVE

    def test_unknown_value_raises(self):
        with pytest.raises(ValueError):
            StudentStatus.from_string("Dropped")

    def test_course_status_rules(self):
        assert CourseStatus.COMPLETED.is_terminal()
        assert CourseStatus.ACTIVE.accepts_enrollment()
        assert not CourseStatus.SCHEDULED.accepts_enrollment()
