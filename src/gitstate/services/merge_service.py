"""Merge and rebase operations.

There is deliberately no cache here: whether a merge or rebase is in
progress lives in git's on-disk state and can be changed by another
process or by hand at any time. Every call goes to git.
"""

import logging
from pathlib import Path

from gitstate.engine.engine import GitEngine
from gitstate.models.options import MergeOptions, RebaseOptions
from gitstate.models.repository_state import RepositoryState

logger = logging.getLogger(__name__)


class MergeService:
    """Issues merge/rebase commands; git's state is the source of truth."""

    def __init__(self, engine: GitEngine) -> None:
        self._engine = engine

    async def merge(
        self,
        repo_path: Path | str,
        branch: str,
        no_fast_forward: bool = False,
        squash: bool = False,
        message: str | None = None,
    ) -> None:
        """Merge branch into the current branch.

        Completes directly on success; on conflict raises MergeConflict
        and leaves the repository in the MERGING state.
        """
        options = MergeOptions(
            no_fast_forward=no_fast_forward,
            squash=squash,
            commit_message=message,
        )
        logger.debug("Merging %s into %s", branch, repo_path)
        await self._engine.merge(Path(repo_path), branch, options)

    async def merge_abort(self, repo_path: Path | str) -> None:
        await self._engine.merge_abort(Path(repo_path))

    async def rebase(self, repo_path: Path | str, onto: str) -> None:
        logger.debug("Rebasing %s onto %s", repo_path, onto)
        await self._engine.rebase(Path(repo_path), onto, RebaseOptions())

    async def rebase_continue(self, repo_path: Path | str) -> None:
        await self._engine.rebase_continue(Path(repo_path))

    async def rebase_abort(self, repo_path: Path | str) -> None:
        await self._engine.rebase_abort(Path(repo_path))

    async def repository_state(self, repo_path: Path | str) -> RepositoryState:
        """Current in-progress state, read fresh from disk."""
        return await self._engine.repository_state(Path(repo_path))
