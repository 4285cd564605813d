"""Stash commands."""

from pathlib import Path

import click

from gitstate.cli.core import repo_option, run_git_operation
from gitstate.cli.output import machine_output, user_output
from gitstate.context import GitStateContext
from gitstate.models.stash import Stash, stash_ref
from gitstate.services.repo_services import RepoServices

index_argument = click.argument("index", type=click.IntRange(min=0), default=0)


def format_stash_line(stash: Stash) -> str:
    return f"{stash.reference}\t{stash.short_sha}\t{stash.display_message}"


@click.group("stash")
def stash_group() -> None:
    """Manage the stash stack by position (0 = newest)."""
    pass


@click.command("list")
@repo_option
@click.pass_obj
def list_stashes(ctx: GitStateContext, repo_path: Path) -> None:
    """List stash entries."""
    services = RepoServices.create(ctx)
    for stash in run_git_operation(services.stashes.list_stashes(repo_path)):
        machine_output(format_stash_line(stash))


@click.command("push")
@click.option("--message", "-m", default=None, help="Stash message.")
@click.option(
    "--include-untracked/--no-include-untracked",
    default=True,
    show_default=True,
    help="Also stash untracked files.",
)
@repo_option
@click.pass_obj
def push_stash(
    ctx: GitStateContext, message: str | None, include_untracked: bool, repo_path: Path
) -> None:
    """Stash local changes."""
    services = RepoServices.create(ctx)
    stash = run_git_operation(
        services.stashes.push(repo_path, message=message, include_untracked=include_untracked)
    )
    if stash is None:
        user_output("No local changes to save")
        return
    user_output(f"Saved {stash.reference}: {stash.display_message}")


@click.command("pop")
@index_argument
@repo_option
@click.pass_obj
def pop_stash(ctx: GitStateContext, index: int, repo_path: Path) -> None:
    """Apply stash INDEX and remove it."""
    services = RepoServices.create(ctx)
    run_git_operation(services.stashes.pop(repo_path, index))
    user_output(f"Popped {stash_ref(index)}")


@click.command("apply")
@index_argument
@repo_option
@click.pass_obj
def apply_stash(ctx: GitStateContext, index: int, repo_path: Path) -> None:
    """Apply stash INDEX and keep it."""
    services = RepoServices.create(ctx)
    run_git_operation(services.stashes.apply(repo_path, index))
    user_output(f"Applied {stash_ref(index)}")


@click.command("drop")
@click.argument("index", type=click.IntRange(min=0))
@repo_option
@click.pass_obj
def drop_stash(ctx: GitStateContext, index: int, repo_path: Path) -> None:
    """Remove stash INDEX without applying it."""
    services = RepoServices.create(ctx)
    run_git_operation(services.stashes.drop(repo_path, index))
    user_output(f"Dropped {stash_ref(index)}")


stash_group.add_command(list_stashes)
stash_group.add_command(push_stash)
stash_group.add_command(pop_stash)
stash_group.add_command(apply_stash)
stash_group.add_command(drop_stash)
