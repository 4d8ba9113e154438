"""Shared helpers for CLI commands."""

from contextlib import contextmanager
from typing import Iterator

import typer
from rich.console import Console
from rich.markup import escape

from workspacectl.exceptions import WorkspacectlError

# Errors go to stderr so list/cat output stays pipeable
err_console = Console(stderr=True)


def print_error(message: str) -> None:
    err_console.print(f"[red]Error:[/red] {escape(message)}")


@contextmanager
def exit_on_error() -> Iterator[None]:
    """Turn workspacectl errors into an error message and exit status 1.

    Raises:
        typer.Exit: If the wrapped block raised a WorkspacectlError
    """
    try:
        yield
    except WorkspacectlError as e:
        print_error(str(e))
        raise typer.Exit(1)
