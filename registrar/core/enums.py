"""
Enumerations for the Registrar package.
"""

from enum import Enum


class AcademicStanding(Enum):
    """Academic standing of a student, derived from CGPA."""
    EXCELLENT = "excellent"  # cgpa >= 9.0 by default
    GOOD = "good"  # 7.0 <= cgpa < 9.0 by default
    SATISFACTORY = "satisfactory"  # 5.0 <= cgpa < 7.0 by default
    PROBATION = "probation"  # cgpa < 5.0 by default


class RegistrationStatus(Enum):
    """Outcome of a course registration attempt."""
    SUCCESS = "success"
    COURSE_FULL = "course_full"
    PREREQ_NOT_MET = "prereq_not_met"
    TIME_CONFLICT = "time_conflict"  # Reserved; no check produces it yet
    ALREADY_ENROLLED = "already_enrolled"
    REGISTRATION_CLOSED = "registration_closed"
