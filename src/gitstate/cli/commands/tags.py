"""Tag commands."""

from pathlib import Path

import click

from gitstate.cli.core import repo_option, run_git_operation
from gitstate.cli.output import machine_output, user_output
from gitstate.context import GitStateContext
from gitstate.models.tag import Tag
from gitstate.services.repo_services import RepoServices


def format_tag_line(tag: Tag) -> str:
    line = f"{tag.name}\t{tag.short_sha}"
    if tag.is_annotated:
        line += "\tannotated"
        if tag.message:
            line += f"\t{tag.message}"
    return line


@click.group("tags")
def tags_group() -> None:
    """List, create and delete tags."""
    pass


@click.command("list")
@repo_option
@click.pass_obj
def list_tags(ctx: GitStateContext, repo_path: Path) -> None:
    """List tags, newest first."""
    services = RepoServices.create(ctx)
    tags = run_git_operation(services.tags.list_tags(repo_path))
    for tag in tags:
        machine_output(format_tag_line(tag))


@click.command("create")
@click.argument("name")
@click.option("--message", "-m", default=None, help="Create an annotated tag with this message.")
@click.option("--ref", default="HEAD", show_default=True, help="Commit to tag.")
@repo_option
@click.pass_obj
def create_tag(
    ctx: GitStateContext, name: str, message: str | None, ref: str, repo_path: Path
) -> None:
    """Create tag NAME."""
    services = RepoServices.create(ctx)
    tag = run_git_operation(services.tags.create_tag(repo_path, name, message=message, ref=ref))
    user_output(f"Created tag {tag.name} at {tag.short_sha}")


@click.command("delete")
@click.argument("name")
@repo_option
@click.pass_obj
def delete_tag(ctx: GitStateContext, name: str, repo_path: Path) -> None:
    """Delete tag NAME."""
    services = RepoServices.create(ctx)
    run_git_operation(services.tags.delete_tag(repo_path, name))
    user_output(f"Deleted tag {name}")


tags_group.add_command(list_tags)
tags_group.add_command(create_tag)
tags_group.add_command(delete_tag)
