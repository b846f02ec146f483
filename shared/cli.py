"""Console output helpers for click commands."""

import functools
import sys
from typing import Any, Callable

import click
from rich.console import Console
from rich.markup import escape

console = Console(highlight=False)
error_console = Console(stderr=True, highlight=False)


def success(message: str) -> None:
    """Print a success message."""
    console.print(escape(message), style="green", soft_wrap=True)


def error(message: str) -> None:
    """Print an error message to stderr."""
    error_console.print(f"Error: {escape(message)}", style="bold red", soft_wrap=True)


def handle_errors(func: Callable[..., Any]) -> Callable[..., Any]:
    """
    Turn uncaught exceptions in a command into an error message and exit code.

    click's own exceptions and SystemExit pass through untouched.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except (click.exceptions.ClickException, click.exceptions.Abort, click.exceptions.Exit):
            raise
        except KeyboardInterrupt:
            error("Interrupted")
            sys.exit(130)
        except Exception as e:
            error(f"Unexpected error: {e}")
            sys.exit(1)

    return wrapper
