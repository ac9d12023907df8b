"""User-facing output helpers.

All text meant for the person at the terminal goes through ``user_output`` so
it can be captured by ``click.testing.CliRunner`` in tests.
"""

from typing import Any

import click


def user_output(message: Any = "", *, nl: bool = True) -> None:
    """Print a message for the user.

    Args:
        message: Text to print (already styled with click.style if needed)
        nl: Whether to print a trailing newline
    """
    click.echo(message, nl=nl)


def error_output(message: str) -> None:
    """Print an error line prefixed with a red 'Error: '."""
    user_output(click.style("Error: ", fg="red") + message)
