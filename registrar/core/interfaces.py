"""
Core interfaces for the Registrar package.
"""

from abc import ABC, abstractmethod
from datetime import datetime, timezone


class Clock(ABC):
    """Source of the current time used for registration deadlines."""
    
    @abstractmethod
    def now(self) -> datetime:
        """Get the current time as a timezone-aware datetime."""
        pass


class SystemClock(Clock):
    """Clock backed by the system wall clock, in UTC."""
    
    def now(self) -> datetime:
        return datetime.now(timezone.utc)
