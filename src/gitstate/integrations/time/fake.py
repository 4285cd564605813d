"""Fake Time implementation for testing.

FakeTime is a manually driven clock: it only moves when a test calls
advance(), so TTL boundaries can be hit exactly.
"""

from gitstate.integrations.time.abc import Time


class FakeTime(Time):
    """In-memory clock that starts at a fixed reading.

    Initial state is provided via constructor; the clock then moves only
    through advance().
    """

    def __init__(self, start: float = 1000.0) -> None:
        """Create FakeTime.

        Args:
            start: Initial clock reading in seconds
        """
        self._now = start
        self._reads = 0

    @property
    def reads(self) -> int:
        """Number of monotonic() calls made, for test assertions."""
        return self._reads

    def monotonic(self) -> float:
        """Return the current fake reading."""
        self._reads += 1
        return self._now

    def advance(self, seconds: float) -> None:
        """Move the clock forward.

        Args:
            seconds: Non-negative number of seconds to advance
        """
        if seconds < 0:
            raise ValueError("FakeTime cannot move backwards")
        self._now += seconds
