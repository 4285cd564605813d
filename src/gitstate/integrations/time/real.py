"""Real time implementation using time.monotonic()."""

import time

from gitstate.integrations.time.abc import Time


class RealTime(Time):
    """Production implementation backed by the system monotonic clock."""

    def monotonic(self) -> float:
        """Return time.monotonic()."""
        return time.monotonic()
