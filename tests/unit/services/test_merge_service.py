"""Tests for MergeService, which never caches."""

from pathlib import Path

import pytest

from gitstate.engine.engine import GitEngine
from gitstate.errors import MergeConflict, RebaseConflict
from gitstate.integrations.executor.fake import FakeCommandExecutor, failed, ok
from gitstate.models.repository_state import RepositoryState
from gitstate.services.merge_service import MergeService
from tests.test_utils.git_output import REPO


class TestMergeService:
    """Tests for merge and its options."""

    async def test_merge_defaults(self) -> None:
        executor = FakeCommandExecutor()

        await MergeService(GitEngine(executor)).merge(REPO, "feature")

        assert executor.calls[0].args == ("git", "merge", "feature")

    async def test_merge_with_options(self) -> None:
        executor = FakeCommandExecutor()

        await MergeService(GitEngine(executor)).merge(
            REPO, "feature", no_fast_forward=True, message="Merge feature"
        )

        assert executor.calls[0].args == (
            "git",
            "merge",
            "--no-ff",
            "-m",
            "Merge feature",
            "feature",
        )

    async def test_squash_with_no_ff_rejected_before_git(self) -> None:
        executor = FakeCommandExecutor()

        with pytest.raises(ValueError):
            await MergeService(GitEngine(executor)).merge(
                REPO, "feature", no_fast_forward=True, squash=True
            )

        assert executor.calls == []

    async def test_merge_conflict(self) -> None:
        executor = FakeCommandExecutor(
            results={("merge",): failed("", stdout="CONFLICT (content): Merge conflict in a\n")}
        )

        with pytest.raises(MergeConflict):
            await MergeService(GitEngine(executor)).merge(REPO, "feature")

    async def test_abort(self) -> None:
        executor = FakeCommandExecutor()

        await MergeService(GitEngine(executor)).merge_abort(REPO)

        assert executor.calls[0].args == ("git", "merge", "--abort")


class TestRebaseService:
    """Tests for rebase operations."""

    async def test_rebase(self) -> None:
        executor = FakeCommandExecutor()

        await MergeService(GitEngine(executor)).rebase(REPO, "main")

        assert executor.calls[0].args == ("git", "rebase", "main")

    async def test_rebase_conflict(self) -> None:
        executor = FakeCommandExecutor(
            results={("rebase",): failed("CONFLICT (content): Merge conflict in a\n")}
        )

        with pytest.raises(RebaseConflict):
            await MergeService(GitEngine(executor)).rebase(REPO, "main")

    async def test_continue_and_abort(self) -> None:
        executor = FakeCommandExecutor()
        service = MergeService(GitEngine(executor))

        await service.rebase_continue(REPO)
        await service.rebase_abort(REPO)

        assert [c.args[1:] for c in executor.calls] == [
            ("rebase", "--continue"),
            ("rebase", "--abort"),
        ]


class TestRepositoryStateIsLive:
    """repository_state must query git on every call."""

    async def test_every_call_reads_git(self, tmp_path: Path) -> None:
        git_dir = tmp_path / ".git"
        git_dir.mkdir()
        executor = FakeCommandExecutor(results={("rev-parse", "--git-dir"): ok(".git\n")})
        service = MergeService(GitEngine(executor))

        assert await service.repository_state(tmp_path) == RepositoryState.CLEAN
        (git_dir / "MERGE_HEAD").write_text("x", encoding="utf-8")
        assert await service.repository_state(tmp_path) == RepositoryState.MERGING

        assert len(executor.calls) == 2
