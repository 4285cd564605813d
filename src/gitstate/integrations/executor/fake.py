"""In-memory fake implementation of CommandExecutor for testing."""

import asyncio
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from gitstate.errors import LaunchFailure
from gitstate.integrations.executor.abc import CommandExecutor, CommandResult


@dataclass(frozen=True)
class ExecuteCall:
    """Record of a single execute() call."""

    args: tuple[str, ...]
    cwd: Path
    env: dict[str, str] | None


def ok(stdout: str = "", stderr: str = "") -> CommandResult:
    """Build a successful CommandResult."""
    return CommandResult(stdout=stdout, stderr=stderr, exit_code=0)


def failed(stderr: str, exit_code: int = 1, stdout: str = "") -> CommandResult:
    """Build a failed CommandResult."""
    return CommandResult(stdout=stdout, stderr=stderr, exit_code=exit_code)


class FakeCommandExecutor(CommandExecutor):
    """In-memory fake implementation for testing.

    All state is provided via constructor using keyword arguments.

    Results are looked up by the arguments that follow the executable,
    matching the longest configured prefix. A list of results is consumed
    one per call; its last element keeps answering once the others are used.
    """

    def __init__(
        self,
        *,
        results: Mapping[tuple[str, ...], CommandResult | list[CommandResult]] | None = None,
        default_result: CommandResult | None = None,
        launch_failure: str | None = None,
        written_files: dict[str, str] | None = None,
    ) -> None:
        """Create FakeCommandExecutor.

        Args:
            results: Mapping of argument prefix -> result(s) to return
            default_result: Result for commands with no configured prefix
            launch_failure: If set, every call raises LaunchFailure with this reason
            written_files: If given, the contents of any existing file passed
                as an argument are captured here (path -> text)
        """
        self._results: dict[tuple[str, ...], list[CommandResult]] = {}
        for prefix, value in (results or {}).items():
            self._results[prefix] = list(value) if isinstance(value, list) else [value]
        self._default_result = default_result or ok()
        self._launch_failure = launch_failure
        self._written_files = written_files
        self._calls: list[ExecuteCall] = []

    @property
    def calls(self) -> list[ExecuteCall]:
        """Read-only access to executed calls for test assertions."""
        return self._calls.copy()

    def calls_matching(self, *prefix: str) -> list[ExecuteCall]:
        """Calls whose arguments (after the executable) start with prefix."""
        return [call for call in self._calls if call.args[1:][: len(prefix)] == prefix]

    async def execute(
        self,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Return the configured result for args."""
        call = ExecuteCall(args=tuple(args), cwd=cwd, env=dict(env) if env is not None else None)
        self._calls.append(call)

        # Yield to the event loop like a real subprocess would.
        await asyncio.sleep(0)

        if self._launch_failure is not None:
            raise LaunchFailure(args, self._launch_failure)

        if self._written_files is not None:
            for arg in call.args[1:]:
                path = Path(arg)
                if path.is_absolute() and path.is_file():
                    self._written_files[arg] = path.read_text(encoding="utf-8")

        return self._next_result(call.args[1:])

    def _next_result(self, tail: tuple[str, ...]) -> CommandResult:
        best: tuple[str, ...] | None = None
        for prefix in self._results:
            if tail[: len(prefix)] == prefix and (best is None or len(prefix) > len(best)):
                best = prefix

        if best is None:
            return self._default_result

        queue = self._results[best]
        if len(queue) > 1:
            return queue.pop(0)
        return queue[0]
