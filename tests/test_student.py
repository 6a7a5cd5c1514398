"""Unit tests for the Student record."""

import pytest

from registrar.core import (
    AcademicStanding,
    EnrollmentLimitError,
    InvalidStudentIdError,
    OutOfRangeError,
    RegistrarSettings,
    Student,
    ValidationError,
)


class TestConstruction:
    """Tests for Student construction."""

    def test_defaults(self, student):
        assert student.student_id == "CS2025001"
        assert student.name == "Asha Rao"
        assert student.department == "Computer Science"
        assert student.cgpa == 0.0
        assert student.semester == 1
        assert student.enrolled_courses == []

    @pytest.mark.parametrize("bad_id", ["", "cs2025001", "12345", "CS12", "CS 2025001", "CS2025001X"])
    def test_invalid_id_rejected(self, bad_id):
        with pytest.raises(InvalidStudentIdError):
            Student(bad_id, "Name", "Dept")

    def test_invalid_id_is_an_invalid_argument(self):
        with pytest.raises(ValidationError):
            Student("", "Name", "Dept")
        with pytest.raises(ValueError):
            Student("", "Name", "Dept")

    def test_custom_id_pattern(self):
        settings = RegistrarSettings(student_id_pattern=r"^S-\d{4}$")
        student = Student("S-0001", "Name", "Dept", settings=settings)
        assert student.student_id == "S-0001"
        with pytest.raises(InvalidStudentIdError):
            Student("CS2025001", "Name", "Dept", settings=settings)


class TestEnrollment:
    """Tests for enroll_in_course."""

    def test_enroll_appends_in_order(self, student):
        assert student.enroll_in_course("CS101") is True
        assert student.enroll_in_course("MATH201") is True
        assert student.enrolled_courses == ["CS101", "MATH201"]

    def test_duplicate_returns_false(self, student):
        student.enroll_in_course("CS101")
        assert student.enroll_in_course("CS101") is False
        assert student.enrolled_courses == ["CS101"]

    def test_limit_raises_runtime_error(self, student):
        for i in range(6):
            student.enroll_in_course(f"CS10{i}")
        with pytest.raises(EnrollmentLimitError) as exc_info:
            student.enroll_in_course("CS200")
        assert isinstance(exc_info.value, RuntimeError)
        assert exc_info.value.details["limit"] == 6
        assert len(student.enrolled_courses) == 6

    def test_duplicate_at_limit_returns_false(self, student):
        for i in range(6):
            student.enroll_in_course(f"CS10{i}")
        assert student.enroll_in_course("CS100") is False

    def test_configured_limit(self):
        student = Student("EE1001", "Name", "Electrical", settings=RegistrarSettings(max_courses_per_student=1))
        student.enroll_in_course("EE101")
        with pytest.raises(EnrollmentLimitError):
            student.enroll_in_course("EE102")

    def test_returned_list_is_a_copy(self, student):
        student.enroll_in_course("CS101")
        courses = student.get_enrolled_courses()
        courses.append("HACK999")
        assert student.enrolled_courses == ["CS101"]

    def test_enrollment_bumps_version(self, student):
        version = student.version
        student.enroll_in_course("CS101")
        assert student.version == version + 1


class TestCGPA:
    """Tests for CGPA updates and academic standing."""

    @pytest.mark.parametrize("value", [0.0, 10.0, 5.5])
    def test_update_within_range(self, student, value):
        student.update_cgpa(value)
        assert student.cgpa == value

    @pytest.mark.parametrize("value", [-0.1, 10.1])
    def test_update_out_of_range(self, student, value):
        student.update_cgpa(8.0)
        with pytest.raises(OutOfRangeError):
            student.update_cgpa(value)
        assert student.cgpa == 8.0

    @pytest.mark.parametrize("cgpa,expected", [
        (10.0, AcademicStanding.EXCELLENT),
        (9.0, AcademicStanding.EXCELLENT),
        (8.99, AcademicStanding.GOOD),
        (7.0, AcademicStanding.GOOD),
        (6.99, AcademicStanding.SATISFACTORY),
        (5.0, AcademicStanding.SATISFACTORY),
        (4.99, AcademicStanding.PROBATION),
        (0.0, AcademicStanding.PROBATION),
    ])
    def test_standing_boundaries(self, student, cgpa, expected):
        student.update_cgpa(cgpa)
        assert student.get_academic_standing() is expected
        assert student.academic_standing is expected


class TestSemester:
    """Tests for advance_to_next_semester."""

    def test_probation_blocks_advance(self, student):
        student.update_cgpa(4.0)
        assert student.advance_to_next_semester() is False
        assert student.semester == 1

    def test_new_student_is_on_probation(self, student):
        # cgpa starts at 0.0
        assert student.advance_to_next_semester() is False

    def test_advance_increments(self, student):
        student.update_cgpa(5.0)
        assert student.advance_to_next_semester() is True
        assert student.advance_to_next_semester() is True
        assert student.semester == 3


def test_to_dict(student):
    student.update_cgpa(7.5)
    student.enroll_in_course("CS101")
    data = student.to_dict()
    assert data["student_id"] == "CS2025001"
    assert data["academic_standing"] == "good"
    assert data["enrolled_courses"] == ["CS101"]
    assert data["semester"] == 1


def test_starting_cgpa_within_configured_range():
    settings = RegistrarSettings(min_cgpa=-1.0)
    student = Student("CS2025009", "Name", "Dept", settings=settings)
    assert settings.min_cgpa <= student.cgpa <= settings.max_cgpa
    assert student.cgpa == 0.0


def test_bookkeeping_fields(student):
    data = student.to_dict()
    assert data["id"] == "CS2025001"
    assert data["version"] == 1
    assert data["created_at"] == data["updated_at"]
    student.update_cgpa(8.0)
    assert student.to_dict()["version"] == 2
    assert student.updated_at >= student.created_at
