"""Time operations abstraction for testing.

This module provides an ABC for clock reads so that TTL expiry can be
exercised in tests by advancing a fake clock instead of sleeping.
"""

from abc import ABC, abstractmethod


class Time(ABC):
    """Abstract time operations for dependency injection."""

    @abstractmethod
    def monotonic(self) -> float:
        """Return a monotonic clock reading in seconds.

        Only differences between readings are meaningful.
        """
        ...
