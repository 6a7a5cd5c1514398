"""Pytest configuration and shared fixtures."""

from datetime import datetime, timedelta, timezone

import pytest

from registrar.core import Clock, Student
from registrar.services import CourseRegistration


NOW = datetime(2025, 2, 5, 12, 0, tzinfo=timezone.utc)


class FixedClock(Clock):
    """Clock frozen at a given instant."""

    def __init__(self, instant: datetime):
        self.instant = instant

    def now(self) -> datetime:
        return self.instant


@pytest.fixture
def clock():
    """Create a clock frozen at NOW."""
    return FixedClock(NOW)


@pytest.fixture
def future_deadline():
    return NOW + timedelta(days=1)


@pytest.fixture
def past_deadline():
    return NOW - timedelta(days=1)


@pytest.fixture
def registry(clock):
    """Create an empty registration ledger on the frozen clock."""
    return CourseRegistration(clock=clock)


@pytest.fixture
def student():
    return Student("CS2025001", "Asha Rao", "Computer Science")


@pytest.fixture
def other_student():
    return Student("CS2025002", "Ben Okafor", "Computer Science")
