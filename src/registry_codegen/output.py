"""Output helpers with clear intent.

user_output goes to stderr so stdout stays free for machine-readable output.
"""

import click


def user_output(message: str = "", nl: bool = True) -> None:
    """Print a message meant for the person running the command."""
    click.echo(message, nl=nl, err=True)


def machine_output(message: str = "", nl: bool = True) -> None:
    """Print a message meant for scripts consuming stdout."""
    click.echo(message, nl=nl)
