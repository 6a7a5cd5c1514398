"""
Services module containing the course registration ledger.
"""

from .course_registration import CourseRegistration

__all__ = [
    "CourseRegistration",
]
