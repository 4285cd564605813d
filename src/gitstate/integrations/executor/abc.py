"""Abstract interface for running external commands."""

from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class CommandResult:
    """Captured outcome of one external process."""

    stdout: str
    stderr: str
    exit_code: int

    @property
    def success(self) -> bool:
        return self.exit_code == 0

    @property
    def output(self) -> str:
        """stdout followed by stderr."""
        return self.stdout + self.stderr


class CommandExecutor(ABC):
    """Abstract interface for executing external commands.

    Implementations include:
    - FakeCommandExecutor: Pre-configured results for testing
    - RealCommandExecutor: asyncio subprocesses for production
    """

    @abstractmethod
    async def execute(
        self,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run a command and capture its output.

        A non-zero exit status is returned, not raised: some git commands
        print diagnostics on stderr even when they succeed, so callers decide
        what counts as failure. There is no timeout and no retry.

        Args:
            args: Executable followed by its arguments
            cwd: Working directory for the process
            env: Extra environment variables layered over the defaults

        Returns:
            CommandResult with stdout, stderr and exit code

        Raises:
            LaunchFailure: If the process could not be started
        """
        ...
