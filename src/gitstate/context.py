"""Context for dependency injection."""

from collections.abc import Mapping
from dataclasses import dataclass

from gitstate.config import ConfigOps, FilesystemConfigOps, GitStateConfig
from gitstate.integrations.executor.abc import CommandExecutor, CommandResult
from gitstate.integrations.executor.fake import FakeCommandExecutor
from gitstate.integrations.executor.real import RealCommandExecutor
from gitstate.integrations.time.abc import Time
from gitstate.integrations.time.fake import FakeTime
from gitstate.integrations.time.real import RealTime


@dataclass(frozen=True)
class GitStateContext:
    """All injected dependencies for one open-repository context.

    This is a frozen dataclass; build one per repository window and pass
    it to whatever needs services. Use for_test() for testing scenarios.
    """

    executor: CommandExecutor
    time: Time
    config: GitStateConfig

    @classmethod
    def for_test(
        cls,
        *,
        results: Mapping[tuple[str, ...], CommandResult | list[CommandResult]] | None = None,
        default_result: CommandResult | None = None,
        launch_failure: str | None = None,
        time: Time | None = None,
        config: GitStateConfig | None = None,
    ) -> "GitStateContext":
        """Create a test context with fake implementations.

        Args:
            results: Pre-configured results for FakeCommandExecutor
            default_result: Result for commands with no configured prefix
            launch_failure: If set, every command fails to launch
            time: Clock to use (defaults to a fresh FakeTime)
            config: Configuration (defaults to GitStateConfig())

        Returns:
            GitStateContext with fake implementations
        """
        return cls(
            executor=FakeCommandExecutor(
                results=results,
                default_result=default_result,
                launch_failure=launch_failure,
            ),
            time=time or FakeTime(),
            config=config or GitStateConfig(),
        )


def create_context(config_ops: ConfigOps | None = None) -> GitStateContext:
    """Create the production context with real implementations."""
    ops = config_ops or FilesystemConfigOps()
    return GitStateContext(
        executor=RealCommandExecutor(),
        time=RealTime(),
        config=ops.load(),
    )
