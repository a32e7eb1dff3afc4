"""Output utilities for CLI commands.

User-facing messages go to stderr so that stdout belongs to the interactive
shell the command launches.
"""

import click


def user_output(message: str = "") -> None:
    """Write a message for the user to stderr."""
    click.echo(message, err=True)
