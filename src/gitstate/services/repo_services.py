"""Construction of the services for one open repository context."""

from dataclasses import dataclass

from gitstate.cache import TTLCache
from gitstate.context import GitStateContext
from gitstate.engine.engine import GitEngine
from gitstate.models.stash import Stash
from gitstate.models.tag import Tag
from gitstate.services.merge_service import MergeService
from gitstate.services.stash_service import StashService
from gitstate.services.tag_service import TagService


@dataclass(frozen=True)
class RepoServices:
    """The Tag, Stash and Merge services sharing one engine.

    Build one per open-repository context and pass it by reference; there
    are no module-level service singletons.
    """

    tags: TagService
    stashes: StashService
    merges: MergeService

    @classmethod
    def create(cls, ctx: GitStateContext) -> "RepoServices":
        engine = GitEngine(ctx.executor, git_binary=ctx.config.git_binary)
        return cls(
            tags=TagService(
                engine,
                TTLCache[list[Tag]](ctx.config.tag_ttl_seconds, ctx.time, name="tags"),
            ),
            stashes=StashService(
                engine,
                TTLCache[list[Stash]](ctx.config.stash_ttl_seconds, ctx.time, name="stashes"),
            ),
            merges=MergeService(engine),
        )
