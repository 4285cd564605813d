from gitstate.integrations.time.abc import Time
from gitstate.integrations.time.fake import FakeTime
from gitstate.integrations.time.real import RealTime

__all__ = [
    "FakeTime",
    "RealTime",
    "Time",
]
