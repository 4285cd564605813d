"""Serialized access to one cached, repository-keyed collection."""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Generic, TypeVar

from gitstate.cache import TTLCache
from gitstate.errors import GitStateError

logger = logging.getLogger(__name__)

T = TypeVar("T")
C = TypeVar("C")
R = TypeVar("R")


class CachedCollection(Generic[T]):
    """Guards a TTLCache holding a list read from git.

    All reads and mutations on one instance run one at a time under an
    asyncio.Lock, so a miss -> fetch -> populate sequence cannot interleave
    with a mutation. Concurrent readers of a cold cache queue on the lock
    and are served by the first reader's fetch.

    invalidate() may also be called without the lock (it is synchronous);
    a fetch that was in flight when that happened does not populate the
    cache with what it read.
    """

    def __init__(self, cache: TTLCache[list[T]], name: str) -> None:
        self._cache = cache
        self._name = name
        self._lock = asyncio.Lock()
        self._generation = 0

    @property
    def cache(self) -> TTLCache[list[T]]:
        return self._cache

    async def read(self, key: str, fetch: Callable[[], Awaitable[list[T]]]) -> list[T]:
        """Return the cached list for key, fetching it on a miss.

        If fetch raises, the error propagates and the cache is unchanged.
        """
        async with self._lock:
            cached = self._cache.get(key)
            if cached is not None:
                return list(cached)

            generation = self._generation
            items = await fetch()
            if generation == self._generation:
                self._cache.set(key, items)
            else:
                logger.debug("%s: invalidated during fetch, not caching result", self._name)
            return list(items)

    async def mutate(self, mutation: Callable[[], Awaitable[R]]) -> R:
        """Run mutation and invalidate the cache only once it has succeeded.

        A failed mutation changed nothing in git, so the cached view is
        still accurate and is kept.
        """
        async with self._lock:
            return await self._run_mutation(mutation)

    async def mutate_then_read(
        self,
        mutation: Callable[[], Awaitable[C]],
        read_back: Callable[[C], Awaitable[R]],
    ) -> R:
        """Run mutation, then read_back with its result, under one lock hold.

        The cache is invalidated as soon as mutation succeeds, before
        read_back runs, so a failing read_back still leaves the next read
        going to git.
        """
        async with self._lock:
            changed = await self._run_mutation(mutation)
            return await read_back(changed)

    async def _run_mutation(self, mutation: Callable[[], Awaitable[R]]) -> R:
        try:
            result = await mutation()
        except GitStateError as e:
            logger.debug("%s: mutation failed, keeping cached view: %s", self._name, e)
            raise
        except asyncio.CancelledError:
            # git may still finish the change without us
            self.invalidate()
            raise
        self.invalidate()
        return result

    def invalidate(self) -> None:
        self._generation += 1
        self._cache.invalidate()
