"""Translation between high-level git intents and git invocations.

GitEngine builds the argument list for each operation, runs it through a
CommandExecutor, and turns the result into models or typed errors. It keeps
no state of its own: no caching, no retries.
"""

import logging
import os
import tempfile
from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from pathlib import Path

from gitstate.engine.parsing import (
    STASH_FORMAT,
    TAG_FORMAT,
    has_conflict,
    parse_single_line,
    parse_stash_lines,
    parse_tag_lines,
)
from gitstate.errors import (
    ApplyFailure,
    MergeConflict,
    RebaseConflict,
    RefNotFound,
    ToolReportedFailure,
)
from gitstate.integrations.executor.abc import CommandExecutor, CommandResult
from gitstate.models.options import (
    MergeOptions,
    RebaseOptions,
    StashApplyOptions,
    StashOptions,
    TagOptions,
    check_ref_argument,
)
from gitstate.models.repository_state import RepositoryState
from gitstate.models.stash import Stash
from gitstate.models.tag import Tag

logger = logging.getLogger(__name__)

# Continuing a rebase must never stop in an editor waiting for input.
_NO_EDITOR_ENV = {"GIT_EDITOR": "true", "GIT_MERGE_AUTOEDIT": "no"}


def _diagnostic(result: CommandResult) -> str:
    """git's own explanation of a failure, preferring stderr."""
    return result.stderr.strip() or result.stdout.strip()


@contextmanager
def scoped_patch_file(patch: str) -> Iterator[Path]:
    """Write patch to a temporary file that is removed on every exit path.

    Removal also covers a write that fails part-way, e.g. an unencodable
    patch or a full disk.
    """
    f = tempfile.NamedTemporaryFile(
        mode="w", prefix="gitstate_patch_", suffix=".patch", delete=False, encoding="utf-8"
    )
    patch_path = Path(f.name)
    try:
        with f:
            f.write(patch)
        yield patch_path
    finally:
        patch_path.unlink(missing_ok=True)


class GitEngine:
    """Runs git operations for a repository path.

    Example:
        engine = GitEngine(RealCommandExecutor())
        tags = await engine.list_tags(Path("/path/to/repo"))
    """

    def __init__(self, executor: CommandExecutor, git_binary: str = "git") -> None:
        """Create GitEngine.

        Args:
            executor: Runs the git processes
            git_binary: Name or path of the git executable
        """
        self._executor = executor
        self._git_binary = git_binary

    async def _git(
        self, repo_path: Path, *args: str, env: Mapping[str, str] | None = None
    ) -> CommandResult:
        return await self._executor.execute([self._git_binary, *args], cwd=repo_path, env=env)

    # ------------------------------------------------------------------
    # Refs
    # ------------------------------------------------------------------

    async def resolve_sha(self, repo_path: Path, ref: str) -> str:
        """Resolve a ref to a full object name.

        Raises:
            RefNotFound: If git cannot resolve the ref
        """
        check_ref_argument(ref, "Ref")
        result = await self._git(repo_path, "rev-parse", "--verify", ref)
        if not result.success:
            raise RefNotFound(ref, _diagnostic(result))
        return parse_single_line(result.stdout, f"resolve ref '{ref}'")

    # ------------------------------------------------------------------
    # Tags
    # ------------------------------------------------------------------

    async def list_tags(self, repo_path: Path) -> list[Tag]:
        """List all tags, newest first as git sorts them."""
        result = await self._git(
            repo_path,
            "for-each-ref",
            f"--format={TAG_FORMAT}",
            "--sort=-creatordate",
            "refs/tags",
        )
        if not result.success:
            raise ToolReportedFailure("list tags", _diagnostic(result))
        return parse_tag_lines(result.stdout)

    async def create_tag(self, repo_path: Path, options: TagOptions) -> Tag:
        """Create a tag and return it as list_tags would report it."""
        await self.write_tag(repo_path, options)
        return await self.read_tag(repo_path, options.name)

    async def write_tag(self, repo_path: Path, options: TagOptions) -> None:
        """Create a tag without reading it back."""
        result = await self._git(repo_path, "tag", *options.to_args())
        if not result.success:
            raise ToolReportedFailure(f"create tag '{options.name}'", _diagnostic(result))
        logger.debug("Created tag %s at %s", options.name, options.target_ref)

    async def read_tag(self, repo_path: Path, name: str) -> Tag:
        """Read one tag with its tagger, date and peeled target.

        Raises:
            RefNotFound: If no tag with this name exists
        """
        check_ref_argument(name, "Tag name")
        ref = f"refs/tags/{name}"
        result = await self._git(repo_path, "for-each-ref", f"--format={TAG_FORMAT}", ref)
        if not result.success:
            raise ToolReportedFailure(f"read tag '{name}'", _diagnostic(result))

        # for-each-ref also matches tags nested below the name, e.g. name/x
        for tag in parse_tag_lines(result.stdout):
            if tag.name == name:
                return tag
        raise RefNotFound(ref)

    async def delete_tag(self, repo_path: Path, name: str) -> None:
        check_ref_argument(name, "Tag name")
        result = await self._git(repo_path, "tag", "-d", name)
        if not result.success:
            raise ToolReportedFailure(f"delete tag '{name}'", _diagnostic(result))

    # ------------------------------------------------------------------
    # Stashes
    # ------------------------------------------------------------------

    async def list_stashes(self, repo_path: Path) -> list[Stash]:
        """List stash entries with the indices git assigns them."""
        result = await self._git(repo_path, "stash", "list", f"--format={STASH_FORMAT}")
        if not result.success:
            raise ToolReportedFailure("list stashes", _diagnostic(result))
        return parse_stash_lines(result.stdout)

    async def stash_push(self, repo_path: Path, options: StashOptions) -> Stash | None:
        """Stash local changes.

        Returns:
            The new entry at index 0, or None if there was nothing to stash
        """
        if not await self.stash_save(repo_path, options):
            return None
        return await self.newest_stash(repo_path)

    async def stash_save(self, repo_path: Path, options: StashOptions) -> bool:
        """Run `git stash push`.

        Returns:
            False if git had no local changes to save
        """
        result = await self._git(repo_path, "stash", *options.to_args())
        if not result.success:
            raise ToolReportedFailure("stash changes", _diagnostic(result))
        return "No local changes to save" not in result.output

    async def newest_stash(self, repo_path: Path) -> Stash | None:
        stashes = await self.list_stashes(repo_path)
        return next((stash for stash in stashes if stash.index == 0), None)

    async def stash_apply(self, repo_path: Path, options: StashApplyOptions) -> None:
        result = await self._git(repo_path, "stash", "apply", *options.to_args())
        if not result.success:
            raise ApplyFailure(f"apply {options.stash_ref}", _diagnostic(result))

    async def stash_pop(self, repo_path: Path, stash_ref: str) -> None:
        """Apply and drop a stash entry; git keeps the entry if applying conflicts."""
        result = await self._git(repo_path, "stash", "pop", stash_ref)
        if not result.success:
            raise ApplyFailure(f"pop {stash_ref}", _diagnostic(result))

    async def stash_drop(self, repo_path: Path, stash_ref: str) -> None:
        result = await self._git(repo_path, "stash", "drop", stash_ref)
        if not result.success:
            raise ToolReportedFailure(f"drop {stash_ref}", _diagnostic(result))

    # ------------------------------------------------------------------
    # Merge / rebase
    # ------------------------------------------------------------------

    async def merge(self, repo_path: Path, branch: str, options: MergeOptions) -> None:
        """Merge branch into the current branch.

        Raises:
            MergeConflict: If the merge stopped with conflicts
            ToolReportedFailure: For any other failure
        """
        check_ref_argument(branch, "Branch")
        result = await self._git(
            repo_path, "merge", *options.to_args(), branch, env=_NO_EDITOR_ENV
        )
        if result.success:
            return
        if has_conflict(result.stdout, result.stderr):
            raise MergeConflict(result.output)
        raise ToolReportedFailure(f"merge '{branch}'", _diagnostic(result))

    async def merge_abort(self, repo_path: Path) -> None:
        result = await self._git(repo_path, "merge", "--abort")
        if not result.success:
            raise ToolReportedFailure("abort merge", _diagnostic(result))

    async def rebase(self, repo_path: Path, branch: str, options: RebaseOptions) -> None:
        """Rebase the current branch onto branch.

        Raises:
            RebaseConflict: If the rebase stopped with conflicts
            ToolReportedFailure: For any other failure
        """
        check_ref_argument(branch, "Branch")
        result = await self._git(
            repo_path, "rebase", *options.to_args(), branch, env=_NO_EDITOR_ENV
        )
        if result.success:
            return
        if has_conflict(result.stdout, result.stderr):
            raise RebaseConflict(result.output)
        raise ToolReportedFailure(f"rebase onto '{branch}'", _diagnostic(result))

    async def rebase_continue(self, repo_path: Path) -> None:
        """Continue a stopped rebase.

        Raises:
            ApplyFailure: If conflicts remain or the next step conflicts
        """
        result = await self._git(repo_path, "rebase", "--continue", env=_NO_EDITOR_ENV)
        if not result.success:
            raise ApplyFailure("continue rebase", result.output)

    async def rebase_abort(self, repo_path: Path) -> None:
        result = await self._git(repo_path, "rebase", "--abort")
        if not result.success:
            raise ToolReportedFailure("abort rebase", _diagnostic(result))

    async def repository_state(self, repo_path: Path) -> RepositoryState:
        """Read the in-progress operation from git's marker files.

        Always reflects the on-disk state at call time.
        """
        result = await self._git(repo_path, "rev-parse", "--git-dir")
        if not result.success:
            raise ToolReportedFailure("read repository state", _diagnostic(result))

        git_dir = Path(parse_single_line(result.stdout, "read repository state"))
        if not git_dir.is_absolute():
            git_dir = repo_path / git_dir

        if (git_dir / "rebase-merge").is_dir() or (git_dir / "rebase-apply").is_dir():
            return RepositoryState.REBASING
        if (git_dir / "MERGE_HEAD").exists():
            return RepositoryState.MERGING
        if (git_dir / "CHERRY_PICK_HEAD").exists():
            return RepositoryState.CHERRY_PICKING
        if (git_dir / "REVERT_HEAD").exists():
            return RepositoryState.REVERTING
        return RepositoryState.CLEAN

    # ------------------------------------------------------------------
    # Patches
    # ------------------------------------------------------------------

    async def apply_patch(
        self,
        repo_path: Path,
        patch: str,
        *,
        cached: bool = False,
        reverse: bool = False,
    ) -> None:
        """Apply a unified diff to the index and/or working tree.

        The patch is written to a temporary file that exists only for the
        duration of the git call.

        Raises:
            ApplyFailure: If git rejects the patch
        """
        args = ["apply", "--verbose"]
        if cached:
            args.append("--cached")
        if reverse:
            args.append("--reverse")

        with scoped_patch_file(patch) as patch_path:
            result = await self._git(repo_path, *args, os.fspath(patch_path))

        if not result.success:
            raise ApplyFailure("apply patch", _diagnostic(result))
