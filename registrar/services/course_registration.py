"""
Course registration ledger.

Holds the course catalog and validates registration requests against
the deadline, existing enrollment, capacity and prerequisites, in that
order. Students are referenced by ID only; the caller owns the Student
objects.
"""

import logging
from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional

from ..core.entities import CourseInfo, Student
from ..core.enums import RegistrationStatus
from ..core.exceptions import (
    CourseNotFoundError, DuplicateCourseError, EnrollmentLimitError, OutOfRangeError, ValidationError
)
from ..core.interfaces import Clock, SystemClock


logger = logging.getLogger(__name__)


class CourseRegistration:
    """Catalog of courses and their enrolled students."""

    def __init__(self, clock: Optional[Clock] = None):
        self._clock = clock or SystemClock()
        self._courses: Dict[str, CourseInfo] = {}  # course_code -> CourseInfo

    def add_course(self, course_code: str, course_name: str, capacity: int,
                   prerequisites: Optional[Iterable[str]], deadline: datetime) -> None:
        """Add a course to the catalog.

        Raises DuplicateCourseError if the code is already present and
        OutOfRangeError if the capacity is negative.
        """
        if course_code in self._courses:
            raise DuplicateCourseError(
                "Course already exists",
                error_code="DUPLICATE_COURSE",
                details={'course_code': course_code},
            )
        if capacity < 0:
            raise OutOfRangeError(
                "Capacity must be non-negative",
                error_code="NEGATIVE_CAPACITY",
                details={'course_code': course_code, 'capacity': capacity},
            )
        self._courses[course_code] = CourseInfo(
            course_code, course_name, capacity, prerequisites or (), deadline
        )
        logger.debug("Added course %s (capacity %d)", course_code, capacity)

    def register_student(self, student: Student, course_code: str) -> RegistrationStatus:
        """Register a student for a course.

        Raises ValidationError for an unknown course. Every other rejection
        is reported through the returned status.
        """
        course = self._courses.get(course_code)
        if course is None:
            raise ValidationError(
                "Course does not exist",
                error_code="UNKNOWN_COURSE",
                details={'course_code': course_code},
            )

        status = self._check_registration(student, course)
        if status is not RegistrationStatus.SUCCESS:
            logger.debug("Registration of %s in %s rejected: %s",
                         student.student_id, course_code, status.value)
            return status

        course.add_student(student.student_id)
        try:
            student.enroll_in_course(course_code)
        except EnrollmentLimitError:
            course.remove_student(student.student_id)
            raise

        logger.debug("Registered %s in %s", student.student_id, course_code)
        return RegistrationStatus.SUCCESS

    def _check_registration(self, student: Student, course: CourseInfo) -> RegistrationStatus:
        if course.is_closed(self._clock.now()):
            return RegistrationStatus.REGISTRATION_CLOSED
        if course.is_enrolled(student.student_id):
            return RegistrationStatus.ALREADY_ENROLLED
        if course.is_full:
            return RegistrationStatus.COURSE_FULL
        if not self.validate_prerequisites(student, course.course_code):
            return RegistrationStatus.PREREQ_NOT_MET
        return RegistrationStatus.SUCCESS

    def validate_prerequisites(self, student: Student, course_code: str) -> bool:
        """Check that every prerequisite appears in the student's enrolled courses.

        Current enrollment counts as meeting a prerequisite; completion is
        not tracked.
        """
        course = self._courses.get(course_code)
        if course is None:
            return False
        return course.prerequisites.issubset(student.get_enrolled_courses())

    def withdraw_student(self, student_id: str, course_code: str) -> bool:
        """Withdraw a student from a course.

        Only the course side is updated; the student's own course list is
        left as it is. Returns False if the course is unknown or the student
        was not enrolled.
        """
        course = self._courses.get(course_code)
        if course is None:
            return False
        removed = course.remove_student(student_id)
        if removed:
            logger.debug("Withdrew %s from %s", student_id, course_code)
        return removed

    def get_enrollment_count(self, course_code: str) -> int:
        """Get the number of students enrolled in a course."""
        return self._get_course(course_code).enrolled_count

    def is_course_full(self, course_code: str) -> bool:
        """Check whether a course has reached its capacity."""
        return self._get_course(course_code).is_full

    def has_course(self, course_code: str) -> bool:
        return course_code in self._courses

    @property
    def course_codes(self) -> List[str]:
        return sorted(self._courses)

    def get_course(self, course_code: str) -> Dict[str, Any]:
        """Get a snapshot of a course's catalog entry."""
        return self._get_course(course_code).to_dict()

    def get_enrolled_students(self, course_code: str) -> List[str]:
        """Get the IDs of students enrolled in a course."""
        return sorted(self._get_course(course_code).enrolled_students)

    def get_statistics(self) -> Dict[str, Any]:
        """Get catalog-wide enrollment statistics."""
        courses = self._courses.values()
        return {
            'total_courses': len(self._courses),
            'total_enrollments': sum(c.enrolled_count for c in courses),
            'total_capacity': sum(c.max_capacity for c in courses),
            'full_courses': sorted(c.course_code for c in courses if c.is_full),
        }

    def _get_course(self, course_code: str) -> CourseInfo:
        course = self._courses.get(course_code)
        if course is None:
            raise CourseNotFoundError(
                "Course does not exist",
                error_code="UNKNOWN_COURSE",
                details={'course_code': course_code},
            )
        return course
