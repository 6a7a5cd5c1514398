"""
Core entities for the Registrar package: student records and catalog courses.
"""

import logging
from abc import ABC
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional, Set

from .config import RegistrarSettings, get_settings
from .enums import AcademicStanding
from .exceptions import (
    EnrollmentLimitError, InvalidStudentIdError, OutOfRangeError, ValidationError
)


logger = logging.getLogger(__name__)


class AbstractEntity(ABC):
    """Base abstract entity with a natural key, timestamps and versioning."""

    def __init__(self, entity_id: str):
        self._id = entity_id
        self._created_at = datetime.now(timezone.utc)
        self._updated_at = self._created_at
        self._version = 1

    @property
    def id(self) -> str:
        """Get the entity ID."""
        return self._id

    @property
    def created_at(self) -> datetime:
        """Get creation timestamp."""
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        """Get last update timestamp."""
        return self._updated_at

    @property
    def version(self) -> int:
        """Get current version."""
        return self._version

    def touch(self) -> None:
        """Record a state change."""
        self._updated_at = datetime.now(timezone.utc)
        self._version += 1

    def to_dict(self) -> Dict[str, Any]:
        """Convert entity to dictionary."""
        return {
            'id': self._id,
            'created_at': self._created_at.isoformat(),
            'updated_at': self._updated_at.isoformat(),
            'version': self._version,
        }

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self._id!r}, version={self._version})"


class Student(AbstractEntity):
    """Student record with academic standing and an ordered course list."""

    def __init__(self, student_id: str, name: str, department: str,
                 settings: Optional[RegistrarSettings] = None):
        self._settings = settings or get_settings()
        if not isinstance(student_id, str) or not self._settings.matches_student_id(student_id):
            raise InvalidStudentIdError(
                f"Invalid student ID format: {student_id!r}",
                error_code="INVALID_STUDENT_ID",
                details={'pattern': self._settings.student_id_pattern},
            )
        super().__init__(student_id)
        self._name = name
        self._department = department
        self._cgpa = 0.0
        self._semester = 1
        self._enrolled_courses: List[str] = []

    @property
    def student_id(self) -> str:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def department(self) -> str:
        return self._department

    @property
    def cgpa(self) -> float:
        return self._cgpa

    @property
    def semester(self) -> int:
        return self._semester

    @property
    def enrolled_courses(self) -> List[str]:
        return list(self._enrolled_courses)

    @property
    def academic_standing(self) -> AcademicStanding:
        return self.get_academic_standing()

    def get_enrolled_courses(self) -> List[str]:
        """Get the course codes the student is enrolled in, in enrollment order."""
        return list(self._enrolled_courses)

    def enroll_in_course(self, course_code: str) -> bool:
        """Enroll in a course.

        Returns False if the course is already on the student's list.
        Raises EnrollmentLimitError once the course limit is reached.
        """
        if course_code in self._enrolled_courses:
            return False
        limit = self._settings.max_courses_per_student
        if len(self._enrolled_courses) >= limit:
            raise EnrollmentLimitError(
                f"Student {self._id} already holds the maximum of {limit} courses",
                error_code="ENROLLMENT_LIMIT",
                details={'student_id': self._id, 'limit': limit},
            )
        self._enrolled_courses.append(course_code)
        self.touch()
        logger.debug("Student %s enrolled in %s", self._id, course_code)
        return True

    def update_cgpa(self, new_cgpa: float) -> None:
        """Update CGPA."""
        low, high = self._settings.min_cgpa, self._settings.max_cgpa
        if not low <= new_cgpa <= high:
            raise OutOfRangeError(
                f"CGPA must be between {low} and {high}",
                error_code="CGPA_OUT_OF_RANGE",
                details={'value': new_cgpa},
            )
        self._cgpa = float(new_cgpa)
        self.touch()

    def get_academic_standing(self) -> AcademicStanding:
        """Classify the current CGPA into an academic standing."""
        if self._cgpa >= self._settings.excellent_threshold:
            return AcademicStanding.EXCELLENT
        if self._cgpa >= self._settings.good_threshold:
            return AcademicStanding.GOOD
        if self._cgpa >= self._settings.satisfactory_threshold:
            return AcademicStanding.SATISFACTORY
        return AcademicStanding.PROBATION

    def advance_to_next_semester(self) -> bool:
        """Move to the next semester unless on academic probation."""
        if self.get_academic_standing() is AcademicStanding.PROBATION:
            logger.debug("Student %s held back in semester %d (probation)", self._id, self._semester)
            return False
        self._semester += 1
        self.touch()
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert student to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'student_id': self._id,
            'name': self._name,
            'department': self._department,
            'cgpa': self._cgpa,
            'semester': self._semester,
            'academic_standing': self.get_academic_standing().value,
            'enrolled_courses': list(self._enrolled_courses),
        })
        return base_dict


class CourseInfo(AbstractEntity):
    """Catalog entry for a course, keyed by course code."""

    def __init__(self, course_code: str, course_name: str, max_capacity: int,
                 prerequisites: Iterable[str], registration_deadline: datetime):
        if max_capacity < 0:
            raise OutOfRangeError(
                "Capacity must be non-negative",
                error_code="NEGATIVE_CAPACITY",
                details={'course_code': course_code, 'capacity': max_capacity},
            )
        if isinstance(prerequisites, str):
            raise ValidationError(
                "Prerequisites must be a collection of course codes, not a string",
                error_code="INVALID_PREREQUISITES",
                details={'course_code': course_code, 'prerequisites': prerequisites},
            )
        super().__init__(course_code)
        self._course_name = course_name
        self._max_capacity = max_capacity
        self._prerequisites: Set[str] = set(prerequisites or ())
        self._enrolled_students: Set[str] = set()
        if registration_deadline.tzinfo is None:
            registration_deadline = registration_deadline.replace(tzinfo=timezone.utc)
        self._registration_deadline = registration_deadline

    @property
    def course_code(self) -> str:
        return self._id

    @property
    def course_name(self) -> str:
        return self._course_name

    @property
    def max_capacity(self) -> int:
        return self._max_capacity

    @property
    def prerequisites(self) -> Set[str]:
        return self._prerequisites.copy()

    @property
    def enrolled_students(self) -> Set[str]:
        return self._enrolled_students.copy()

    @property
    def registration_deadline(self) -> datetime:
        return self._registration_deadline

    @property
    def enrolled_count(self) -> int:
        return len(self._enrolled_students)

    @property
    def is_full(self) -> bool:
        return len(self._enrolled_students) >= self._max_capacity

    @property
    def seats_available(self) -> int:
        return max(self._max_capacity - len(self._enrolled_students), 0)

    def is_enrolled(self, student_id: str) -> bool:
        return student_id in self._enrolled_students

    def is_closed(self, now: datetime) -> bool:
        """Check whether the registration deadline has passed."""
        return now > self._registration_deadline

    def add_student(self, student_id: str) -> None:
        """Add a student ID. The caller checks capacity first."""
        if self.is_full:
            raise OutOfRangeError(
                f"Course {self._id} is at capacity",
                error_code="COURSE_AT_CAPACITY",
                details={'course_code': self._id, 'capacity': self._max_capacity},
            )
        self._enrolled_students.add(student_id)
        self.touch()

    def remove_student(self, student_id: str) -> bool:
        """Remove a student ID. Returns True if it was present."""
        if student_id not in self._enrolled_students:
            return False
        self._enrolled_students.remove(student_id)
        self.touch()
        return True

    def to_dict(self) -> Dict[str, Any]:
        """Convert course to dictionary."""
        base_dict = super().to_dict()
        base_dict.update({
            'course_code': self._id,
            'course_name': self._course_name,
            'max_capacity': self._max_capacity,
            'prerequisites': sorted(self._prerequisites),
            'enrolled_students': sorted(self._enrolled_students),
            'registration_deadline': self._registration_deadline.isoformat(),
            'enrolled_count': self.enrolled_count,
            'is_full': self.is_full,
            'seats_available': self.seats_available,
        })
        return base_dict
