"""Shared plumbing for CLI commands."""

import asyncio
from collections.abc import Coroutine
from pathlib import Path
from typing import Any, TypeVar

import click

from gitstate.cli.output import user_output
from gitstate.errors import GitStateError

T = TypeVar("T")

repo_option = click.option(
    "--repo",
    "-C",
    "repo_path",
    type=click.Path(file_okay=False, path_type=Path),
    default=".",
    show_default=True,
    help="Repository to operate on.",
)


def run_git_operation(operation: Coroutine[Any, Any, T]) -> T:
    """Run a service coroutine to completion.

    Errors from git are shown verbatim after a red "Error:" prefix.

    Raises:
        SystemExit: If the operation failed (with exit code 1)
    """
    try:
        return asyncio.run(operation)
    except GitStateError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
    except ValueError as e:
        user_output(click.style("Error: ", fg="red") + str(e))
        raise SystemExit(1) from e
