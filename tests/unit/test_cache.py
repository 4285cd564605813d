"""Tests for TTLCache."""

import pytest

from gitstate.cache import TTLCache
from gitstate.integrations.time.fake import FakeTime


class TestTTLCacheExpiry:
    """Tests for time-based validity."""

    def test_empty_cache_misses(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)

        assert cache.get("/repo") is None
        assert not cache.is_valid("/repo")

    def test_value_is_returned_before_expiry(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo", ["a"])

        fake_time.advance(29.9)

        assert cache.get("/repo") == ["a"]
        assert cache.is_valid("/repo")

    def test_value_expires_exactly_at_ttl(self, fake_time: FakeTime) -> None:
        """A read at set-time + ttl is already a miss."""
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo", ["a"])

        fake_time.advance(30.0)

        assert cache.get("/repo") is None
        assert not cache.is_valid("/repo")

    def test_set_restarts_the_ttl(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo", ["a"])
        fake_time.advance(20.0)
        cache.set("/repo", ["b"])
        fake_time.advance(20.0)

        assert cache.get("/repo") == ["b"]

    def test_ttl_must_be_positive(self, fake_time: FakeTime) -> None:
        with pytest.raises(ValueError, match="positive"):
            TTLCache[list[str]](0, fake_time)

    def test_ttl_property(self, fake_time: FakeTime) -> None:
        assert TTLCache[list[str]](120.0, fake_time).ttl == 120.0


class TestTTLCacheKeys:
    """Tests for repository keys."""

    def test_other_key_misses(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo-a", ["a"])

        assert cache.get("/repo-b") is None
        assert cache.get("/repo-a") == ["a"]

    def test_set_for_other_key_replaces_slot(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo-a", ["a"])
        cache.set("/repo-b", ["b"])

        assert cache.get("/repo-a") is None
        assert cache.get("/repo-b") == ["b"]


class TestTTLCacheInvalidate:
    """Tests for invalidate()."""

    def test_invalidate_forces_miss(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)
        cache.set("/repo", ["a"])

        cache.invalidate()

        assert cache.get("/repo") is None

    def test_invalidate_empty_cache_is_noop(self, fake_time: FakeTime) -> None:
        cache = TTLCache[list[str]](30.0, fake_time)

        cache.invalidate()

        assert cache.get("/repo") is None
