"""Merge, rebase and repository state commands.

These never use cached data; every invocation asks git.
"""

from pathlib import Path

import click

from gitstate.cli.core import repo_option, run_git_operation
from gitstate.cli.output import machine_output, user_output
from gitstate.context import GitStateContext
from gitstate.services.repo_services import RepoServices


@click.group("merge")
def merge_group() -> None:
    """Merge branches."""
    pass


@click.command("run")
@click.argument("branch")
@click.option("--no-ff", "no_fast_forward", is_flag=True, help="Always create a merge commit.")
@click.option("--squash", is_flag=True, help="Squash the branch into staged changes.")
@click.option("--message", "-m", default=None, help="Merge commit message.")
@repo_option
@click.pass_obj
def run_merge(
    ctx: GitStateContext,
    branch: str,
    no_fast_forward: bool,
    squash: bool,
    message: str | None,
    repo_path: Path,
) -> None:
    """Merge BRANCH into the current branch."""
    services = RepoServices.create(ctx)
    run_git_operation(
        services.merges.merge(
            repo_path, branch, no_fast_forward=no_fast_forward, squash=squash, message=message
        )
    )
    user_output(f"Merged {branch}")


@click.command("abort")
@repo_option
@click.pass_obj
def abort_merge(ctx: GitStateContext, repo_path: Path) -> None:
    """Abort an in-progress merge."""
    services = RepoServices.create(ctx)
    run_git_operation(services.merges.merge_abort(repo_path))
    user_output("Merge aborted")


merge_group.add_command(run_merge)
merge_group.add_command(abort_merge)


@click.group("rebase")
def rebase_group() -> None:
    """Rebase the current branch."""
    pass


@click.command("run")
@click.argument("onto")
@repo_option
@click.pass_obj
def run_rebase(ctx: GitStateContext, onto: str, repo_path: Path) -> None:
    """Rebase the current branch onto ONTO."""
    services = RepoServices.create(ctx)
    run_git_operation(services.merges.rebase(repo_path, onto))
    user_output(f"Rebased onto {onto}")


@click.command("continue")
@repo_option
@click.pass_obj
def continue_rebase(ctx: GitStateContext, repo_path: Path) -> None:
    """Continue a stopped rebase after resolving conflicts."""
    services = RepoServices.create(ctx)
    run_git_operation(services.merges.rebase_continue(repo_path))
    user_output("Rebase continued")


@click.command("abort")
@repo_option
@click.pass_obj
def abort_rebase(ctx: GitStateContext, repo_path: Path) -> None:
    """Abort a stopped rebase and restore the original branch."""
    services = RepoServices.create(ctx)
    run_git_operation(services.merges.rebase_abort(repo_path))
    user_output("Rebase aborted")


rebase_group.add_command(run_rebase)
rebase_group.add_command(continue_rebase)
rebase_group.add_command(abort_rebase)


@click.command("state")
@repo_option
@click.pass_obj
def state_cmd(ctx: GitStateContext, repo_path: Path) -> None:
    """Show whether a merge, rebase, cherry-pick or revert is in progress."""
    services = RepoServices.create(ctx)
    state = run_git_operation(services.merges.repository_state(repo_path))
    machine_output(state.value)
