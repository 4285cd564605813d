"""Service layer for gitstate.

Services are the API for UI code and the CLI. Each binds the git engine
to the caching and invalidation policy of one entity kind:
- TagService: tags, cached for 120 seconds
- StashService: stashes, cached for 30 seconds
- MergeService: merge/rebase, never cached
"""

from gitstate.services.merge_service import MergeService
from gitstate.services.repo_services import RepoServices
from gitstate.services.stash_service import StashService
from gitstate.services.tag_service import TagService

__all__ = [
    "MergeService",
    "RepoServices",
    "StashService",
    "TagService",
]
