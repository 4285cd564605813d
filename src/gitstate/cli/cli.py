import logging

import click

from gitstate.cli.commands.merge import merge_group, rebase_group, state_cmd
from gitstate.cli.commands.stash import stash_group
from gitstate.cli.commands.tags import tags_group
from gitstate.context import GitStateContext, create_context

CONTEXT_SETTINGS = dict(help_option_names=["-h", "--help"])


@click.group(context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="gitstate")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Inspect and change tags, stashes and merge/rebase state of a git repository."""
    # Only create context if not already provided (e.g., by tests)
    if ctx.obj is None:
        try:
            ctx.obj = create_context()
        except ValueError as e:
            raise click.ClickException(str(e)) from e

    gitstate_ctx: GitStateContext = ctx.obj
    if gitstate_ctx.config.debug:
        logging.basicConfig(level=logging.DEBUG, format="[DEBUG %(name)s:%(lineno)d] %(message)s")


cli.add_command(tags_group)
cli.add_command(stash_group)
cli.add_command(merge_group)
cli.add_command(rebase_group)
cli.add_command(state_cmd)


def main() -> None:
    """CLI entry point used by the `gitstate` console script."""
    cli()
