"""Tag listing and mutation with a TTL cache."""

from pathlib import Path

from gitstate.cache import TTLCache
from gitstate.engine.engine import GitEngine
from gitstate.models.options import TagOptions
from gitstate.models.tag import Tag
from gitstate.services.cached_collection import CachedCollection


class TagService:
    """Tag operations for the UI.

    Reads are served from a cache (120 seconds by default); a successful
    create or delete invalidates it.
    """

    def __init__(self, engine: GitEngine, cache: TTLCache[list[Tag]]) -> None:
        """Create TagService.

        Args:
            engine: Runs the git commands
            cache: Cache owned exclusively by this service
        """
        self._engine = engine
        self._tags = CachedCollection(cache, name="tags")

    async def list_tags(self, repo_path: Path | str) -> list[Tag]:
        repo = Path(repo_path)
        return await self._tags.read(str(repo), lambda: self._engine.list_tags(repo))

    async def create_tag(
        self,
        repo_path: Path | str,
        name: str,
        message: str | None = None,
        ref: str = "HEAD",
    ) -> Tag:
        """Create a tag at ref.

        The tag is annotated when a message is given and lightweight
        otherwise.

        The cache is invalidated once git has created the tag, even if
        reading the new tag back then fails.
        """
        repo = Path(repo_path)
        options = TagOptions(
            name=name,
            target_ref=ref,
            message=message,
            is_annotated=message is not None,
        )
        return await self._tags.mutate_then_read(
            lambda: self._engine.write_tag(repo, options),
            lambda _: self._engine.read_tag(repo, name),
        )

    async def delete_tag(self, repo_path: Path | str, name: str) -> None:
        repo = Path(repo_path)
        await self._tags.mutate(lambda: self._engine.delete_tag(repo, name))

    def invalidate_cache(self) -> None:
        self._tags.invalidate()
