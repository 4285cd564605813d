"""Pytest configuration and fixtures."""

import pytest

from gitstate.cache import TTLCache
from gitstate.integrations.time.fake import FakeTime
from gitstate.models.stash import Stash
from gitstate.models.tag import Tag


@pytest.fixture
def fake_time() -> FakeTime:
    """Create a FakeTime starting at 1000.0."""
    return FakeTime()


@pytest.fixture
def tag_cache(fake_time: FakeTime) -> TTLCache[list[Tag]]:
    """Create a tag cache with the default 120 second TTL."""
    return TTLCache[list[Tag]](120.0, fake_time, name="tags")


@pytest.fixture
def stash_cache(fake_time: FakeTime) -> TTLCache[list[Stash]]:
    """Create a stash cache with the default 30 second TTL."""
    return TTLCache[list[Stash]](30.0, fake_time, name="stashes")
