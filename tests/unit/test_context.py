"""Tests for GitStateContext and RepoServices wiring."""

from gitstate.config import GitStateConfig, InMemoryConfigOps
from gitstate.context import GitStateContext, create_context
from gitstate.integrations.executor.fake import FakeCommandExecutor, ok
from gitstate.integrations.executor.real import RealCommandExecutor
from gitstate.integrations.time.fake import FakeTime
from gitstate.integrations.time.real import RealTime
from gitstate.services.repo_services import RepoServices
from tests.test_utils.git_output import REPO, lines, stash_line


class TestGitStateContext:
    """Tests for context construction."""

    def test_for_test_uses_fakes(self) -> None:
        ctx = GitStateContext.for_test()

        assert isinstance(ctx.executor, FakeCommandExecutor)
        assert isinstance(ctx.time, FakeTime)
        assert ctx.config == GitStateConfig()

    def test_create_context_uses_real_implementations(self) -> None:
        config = GitStateConfig(git_binary="/opt/git")

        ctx = create_context(InMemoryConfigOps(config))

        assert isinstance(ctx.executor, RealCommandExecutor)
        assert isinstance(ctx.time, RealTime)
        assert ctx.config is config


class TestRepoServices:
    """Tests for RepoServices.create."""

    async def test_services_use_configured_ttls_and_binary(self) -> None:
        clock = FakeTime()
        ctx = GitStateContext.for_test(
            results={("stash", "list"): ok(lines(stash_line(0, "a" * 40, "On main: x")))},
            time=clock,
            config=GitStateConfig(git_binary="git2", stash_ttl_seconds=5.0),
        )
        services = RepoServices.create(ctx)

        await services.stashes.list_stashes(REPO)
        clock.advance(4.9)
        await services.stashes.list_stashes(REPO)
        clock.advance(0.1)
        await services.stashes.list_stashes(REPO)

        assert isinstance(ctx.executor, FakeCommandExecutor)
        assert len(ctx.executor.calls) == 2
        assert ctx.executor.calls[0].args[0] == "git2"

    async def test_tag_and_stash_caches_are_independent(self) -> None:
        ctx = GitStateContext.for_test(
            results={
                ("for-each-ref",): ok(""),
                ("stash", "list"): ok(""),
            }
        )
        services = RepoServices.create(ctx)
        await services.tags.list_tags(REPO)
        await services.stashes.list_stashes(REPO)

        services.tags.invalidate_cache()
        await services.tags.list_tags(REPO)
        await services.stashes.list_stashes(REPO)

        assert isinstance(ctx.executor, FakeCommandExecutor)
        assert len(ctx.executor.calls_matching("for-each-ref")) == 2
        assert len(ctx.executor.calls_matching("stash", "list")) == 1
