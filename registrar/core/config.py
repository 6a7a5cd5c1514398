"""
Configuration for the Registrar package.

Limits and thresholds that govern student records live here so they can
be adjusted without touching the entity code. A shared default instance
is available through get_settings().
"""

import re
from functools import lru_cache

from pydantic import BaseModel, Field, field_validator, model_validator

from .exceptions import ConfigurationError


__all__ = ["DEFAULT_STUDENT_ID_PATTERN", "RegistrarSettings", "get_settings"]

DEFAULT_STUDENT_ID_PATTERN = r"^[A-Z]{2,4}[0-9]{3,8}$"


class RegistrarSettings(BaseModel):
    """Tunable limits for student records.

    Attributes:
        max_courses_per_student: Most courses a student may hold at once.
        student_id_pattern: Regex a student ID must fully match.
        min_cgpa: Lowest accepted CGPA (inclusive).
        max_cgpa: Highest accepted CGPA (inclusive).
        excellent_threshold: Lowest CGPA for EXCELLENT standing.
        good_threshold: Lowest CGPA for GOOD standing.
        satisfactory_threshold: Lowest CGPA for SATISFACTORY standing.
    """

    model_config = {"frozen": True}

    max_courses_per_student: int = Field(default=6, ge=1)
    student_id_pattern: str = Field(default=DEFAULT_STUDENT_ID_PATTERN, min_length=1)
    min_cgpa: float = 0.0
    max_cgpa: float = 10.0
    excellent_threshold: float = 9.0
    good_threshold: float = 7.0
    satisfactory_threshold: float = 5.0

    @field_validator("student_id_pattern")
    @classmethod
    def _check_pattern(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ConfigurationError(f"Invalid student ID pattern: {e}") from e
        return value

    @model_validator(mode="after")
    def _check_ranges(self) -> "RegistrarSettings":
        if self.min_cgpa >= self.max_cgpa:
            raise ConfigurationError("min_cgpa must be lower than max_cgpa")
        # New students start at a CGPA of 0.0
        if not self.min_cgpa <= 0.0 <= self.max_cgpa:
            raise ConfigurationError(
                "CGPA range must include 0.0",
                details={"min_cgpa": self.min_cgpa, "max_cgpa": self.max_cgpa},
            )
        thresholds = (self.excellent_threshold, self.good_threshold, self.satisfactory_threshold)
        if not self.max_cgpa >= thresholds[0] > thresholds[1] > thresholds[2] >= self.min_cgpa:
            raise ConfigurationError(
                "Standing thresholds must be strictly descending and inside the CGPA range",
                details={"thresholds": list(thresholds)},
            )
        return self

    def matches_student_id(self, student_id: str) -> bool:
        """Check a student ID against the configured pattern."""
        return re.fullmatch(self.student_id_pattern, student_id) is not None


@lru_cache
def get_settings() -> RegistrarSettings:
    """Get the shared default settings."""
    return RegistrarSettings()
