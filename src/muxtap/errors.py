"""Shared error types and exit handling for muxtap commands.

Commands let these propagate from the core and turn them into an exit code
at the CLI boundary.

PUBLIC API:
  - MuxTapError: Base exception for everything muxtap reports to the user
  - UsageError: Bad or missing arguments
  - ValidationError: Target directory absent or not a directory
  - UserCancelled: Picker returned nothing
  - NoSessionsError: Nothing to manage
  - exit_with_error: Print error to stderr and exit non-zero
"""

from typing import NoReturn

import typer
from rich.console import Console

_stderr = Console(stderr=True)


class MuxTapError(Exception):
    """Base exception for all muxtap failures."""

    pass


class UsageError(MuxTapError):
    """Raised on bad or missing arguments."""

    pass


class ValidationError(MuxTapError):
    """Raised when the requested working directory does not exist."""

    pass


class UserCancelled(MuxTapError):
    """Raised when the user aborts the picker."""

    pass


class NoSessionsError(MuxTapError):
    """Raised when no tmux pane is available to manage."""

    pass


def exit_with_error(message: str, code: int = 1) -> NoReturn:
    """Print error message to stderr and exit.

    Args:
        message: The error message to display
        code: Process exit code
    """
    _stderr.print(f"[bold red]Error:[/bold red] {message}", highlight=False)
    raise typer.Exit(code=code)


def print_notice(message: str) -> None:
    """Print a non-error notice (cancellation, empty server) to stderr."""
    _stderr.print(message, style="dim", highlight=False)
