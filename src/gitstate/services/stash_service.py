"""Stash listing and mutation with a TTL cache."""

from pathlib import Path

from gitstate.cache import TTLCache
from gitstate.engine.engine import GitEngine
from gitstate.models.options import StashApplyOptions, StashOptions
from gitstate.models.stash import Stash, stash_ref
from gitstate.services.cached_collection import CachedCollection


class StashService:
    """Stash operations addressed by stack position.

    Positions shift whenever an entry is pushed or removed, so an index is
    turned into git's `stash@{n}` selector right before each command and
    nothing maps indices to entries across calls. Every successful
    mutation invalidates the cache (30 seconds by default), which makes
    all previously listed indices stale.
    """

    def __init__(self, engine: GitEngine, cache: TTLCache[list[Stash]]) -> None:
        """Create StashService.

        Args:
            engine: Runs the git commands
            cache: Cache owned exclusively by this service
        """
        self._engine = engine
        self._stashes = CachedCollection(cache, name="stashes")

    async def list_stashes(self, repo_path: Path | str) -> list[Stash]:
        repo = Path(repo_path)
        return await self._stashes.read(str(repo), lambda: self._engine.list_stashes(repo))

    async def push(
        self,
        repo_path: Path | str,
        message: str | None = None,
        include_untracked: bool = True,
    ) -> Stash | None:
        """Stash local changes.

        Returns:
            The new entry (index 0), or None if there was nothing to stash
        """
        repo = Path(repo_path)
        options = StashOptions(message=message, include_untracked=include_untracked)

        async def read_new_entry(saved: bool) -> Stash | None:
            if not saved:
                return None
            return await self._engine.newest_stash(repo)

        return await self._stashes.mutate_then_read(
            lambda: self._engine.stash_save(repo, options), read_new_entry
        )

    async def pop(self, repo_path: Path | str, index: int = 0) -> None:
        repo = Path(repo_path)
        ref = stash_ref(index)
        await self._stashes.mutate(lambda: self._engine.stash_pop(repo, ref))

    async def apply(self, repo_path: Path | str, index: int = 0) -> None:
        repo = Path(repo_path)
        options = StashApplyOptions(stash_ref=stash_ref(index))
        await self._stashes.mutate(lambda: self._engine.stash_apply(repo, options))

    async def drop(self, repo_path: Path | str, index: int) -> None:
        repo = Path(repo_path)
        ref = stash_ref(index)
        await self._stashes.mutate(lambda: self._engine.stash_drop(repo, ref))

    def invalidate_cache(self) -> None:
        self._stashes.invalidate()
