"""
Core module containing the student and course object model.
"""

from .exceptions import *
from .enums import *
from .interfaces import *
from .config import *
from .entities import *

__all__ = [
    # Entities
    "AbstractEntity",
    "Student",
    "CourseInfo",
    
    # Interfaces
    "Clock",
    "SystemClock",
    
    # Configuration
    "RegistrarSettings",
    "get_settings",
    
    # Enums
    "AcademicStanding",
    "RegistrationStatus",
    
    # Exceptions
    "RegistrarException",
    "ValidationError",
    "InvalidStudentIdError",
    "DuplicateCourseError",
    "OutOfRangeError",
    "CourseNotFoundError",
    "EnrollmentLimitError",
    "ConfigurationError",
]
