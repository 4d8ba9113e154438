"""workspacectl CLI application - main entry point."""

import logging

import typer
from rich.console import Console

app = typer.Typer(
    name="workspacectl",
    help="Manage and open local and remote workspaces",
    no_args_is_help=True,
)

console = Console()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show informational log messages"),
    debug: bool = typer.Option(False, "--debug", help="Show debug log messages"),
):
    """Manage and open local and remote workspaces."""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    elif verbose:
        logging.getLogger().setLevel(logging.INFO)


@app.command()
def version():
    """Show version information."""
    from workspacectl import __version__

    console.print(f"workspacectl version {__version__}")


# Register subcommands from separate modules
from .config import config_app  # noqa: E402
from .workspace import cat, current, editor, list_workspaces, new, open_, terminal  # noqa: E402

app.command("new")(new)
app.command("list")(list_workspaces)
app.command("open")(open_)
app.command("current")(current)
app.command("cat")(cat)
app.command("terminal")(terminal)
app.command("editor")(editor)
app.add_typer(config_app, name="config")
