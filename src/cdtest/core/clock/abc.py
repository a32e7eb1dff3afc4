"""Clock abstraction for testing.

This module provides an ABC for reading the current time so that
timestamping and garbage-collection decisions can be tested without
waiting on the wall clock.
"""

from abc import ABC, abstractmethod
from datetime import datetime


class Clock(ABC):
    """Abstract clock operations for dependency injection."""

    @abstractmethod
    def now(self) -> datetime:
        """Return the current time as a timezone-aware UTC datetime."""
        ...
