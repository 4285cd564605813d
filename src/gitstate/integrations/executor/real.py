"""Production command executor using asyncio subprocesses."""

import asyncio
import logging
import os
from collections.abc import Mapping, Sequence
from pathlib import Path

from gitstate.errors import LaunchFailure
from gitstate.integrations.executor.abc import CommandExecutor, CommandResult

logger = logging.getLogger(__name__)

# Non-interactive, parseable git: no pager, no credential prompts, no
# optional index locks on reads, untranslated messages.
GIT_ENV_OVERRIDES: dict[str, str] = {
    "GIT_PAGER": "",
    "PAGER": "",
    "GIT_TERMINAL_PROMPT": "0",
    "GIT_OPTIONAL_LOCKS": "0",
    "LC_ALL": "C",
    "LANG": "C",
}


class RealCommandExecutor(CommandExecutor):
    """Runs commands with asyncio.create_subprocess_exec.

    The calling task is suspended while the process runs; other tasks keep
    going, so independent commands may run in parallel.
    """

    def __init__(self, base_env: Mapping[str, str] | None = None) -> None:
        """Create RealCommandExecutor.

        Args:
            base_env: Environment to start from (defaults to os.environ)
        """
        env = dict(os.environ if base_env is None else base_env)
        env.update(GIT_ENV_OVERRIDES)
        self._env = env

    async def execute(
        self,
        args: Sequence[str],
        cwd: Path,
        env: Mapping[str, str] | None = None,
    ) -> CommandResult:
        """Run the command and wait for it to exit."""
        if not args:
            raise ValueError("Command must not be empty")

        if not cwd.is_dir():
            raise LaunchFailure(args, f"working directory does not exist: {cwd}")

        final_env = self._env if env is None else {**self._env, **env}
        logger.debug("Running %s (cwd=%s)", " ".join(args), cwd)

        try:
            process = await asyncio.create_subprocess_exec(
                *args,
                cwd=cwd,
                env=final_env,
                stdin=asyncio.subprocess.DEVNULL,
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise LaunchFailure(args, f"command not found: {args[0]}") from e
        except OSError as e:
            raise LaunchFailure(args, str(e)) from e

        stdout, stderr = await process.communicate()
        exit_code = process.returncode if process.returncode is not None else -1

        logger.debug("Finished %s with exit code %d", args[0], exit_code)

        return CommandResult(
            stdout=stdout.decode("utf-8", errors="replace"),
            stderr=stderr.decode("utf-8", errors="replace"),
            exit_code=exit_code,
        )
