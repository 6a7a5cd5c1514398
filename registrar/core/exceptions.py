"""
Custom exceptions for the Registrar package.

Hard failures (malformed input, unknown entities, exceeded limits) are
raised. Business-rule outcomes of a registration attempt are returned as
a RegistrationStatus instead.
"""

from typing import Optional, Any, Dict


class RegistrarException(Exception):
    """Base exception for all Registrar-related errors."""
    
    def __init__(self, message: str, error_code: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ValidationError(RegistrarException, ValueError):
    """Raised when an argument is malformed or refers to nothing."""
    pass


class InvalidStudentIdError(ValidationError):
    """Raised when a student ID does not match the configured format."""
    pass


class DuplicateCourseError(ValidationError):
    """Raised when adding a course code that is already in the catalog."""
    pass


class OutOfRangeError(RegistrarException, ValueError):
    """Raised when a value or lookup falls outside the permitted range."""
    pass


class CourseNotFoundError(OutOfRangeError):
    """Raised when querying a course code that is not in the catalog."""
    pass


class EnrollmentLimitError(RegistrarException, RuntimeError):
    """Raised when a student already holds the maximum number of courses."""
    pass


class ConfigurationError(RegistrarException):
    """Raised when configuration is invalid."""
    pass
