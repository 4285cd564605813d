"""Output helpers with clear intent.

user_output: human-facing messages and errors (stderr)
machine_output: results other tools may consume (stdout)
"""

import click


def user_output(message: str) -> None:
    click.echo(message, err=True)


def machine_output(message: str) -> None:
    click.echo(message)
