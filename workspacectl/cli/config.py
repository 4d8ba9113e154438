"""Configuration management CLI commands."""

import typer
from rich.console import Console

console = Console()

config_app = typer.Typer(help="Manage workspacectl configuration")


@config_app.command("show")
def config_show():
    """Show current configuration."""
    from workspacectl.config import get_config_path, load_config

    config_path = get_config_path()
    config = load_config()

    console.print(f"[cyan]Configuration file:[/cyan] [dim]{config_path}[/dim]\n")
    console.print(f"[bold]Terminal:[/bold] {config.terminal}")

    if config.editor:
        console.print(f"[bold]Default Editor:[/bold] {config.editor.command}")
    else:
        console.print("[dim]No default editor set ($VISUAL, $EDITOR or vim)[/dim]")

    if config.shell:
        console.print(f"[bold]Default Shell:[/bold] {config.shell.command}")
    else:
        console.print("[dim]No default shell set ($SHELL or bash)[/dim]")
