"""Workspace CLI commands."""

from pathlib import Path, PurePosixPath
from typing import Optional

import typer
from pydantic import ValidationError

from workspacectl import launch
from workspacectl.config import fill_defaults, load_config
from workspacectl.workspace import (
    Ssh,
    Workspace,
    WorkspaceStore,
    get_current_name,
    get_current_workspace,
    open_workspace,
)

from .helpers import exit_on_error, print_error


def _local_workspace(path: str, name: Optional[str]) -> Workspace:
    try:
        dir = (Path.cwd() / path).resolve(strict=True)
    except OSError as e:
        print_error(f"canonicalize path {path}: {e}")
        raise typer.Exit(1)

    if name is None:
        name = dir.name
        if not name:
            print_error(f"cannot infer name for workspace in directory {dir}")
            raise typer.Exit(1)

    # Try to make the path relative to the user's $HOME directory
    try:
        dir = dir.relative_to(Path.home())
    except ValueError:
        pass

    return Workspace(name=name, dir=str(dir))


def _remote_workspace(
    host: str,
    path: str,
    name: Optional[str],
    user: Optional[str],
    port: Optional[int],
    identity_file: Optional[str],
) -> Workspace:
    if name is None:
        name = PurePosixPath(path).name or host
    try:
        ssh = Ssh(host=host, user=user, port=port, identity_file=identity_file)
    except ValidationError as e:
        print_error(f"invalid ssh options: {e}")
        raise typer.Exit(1)
    return Workspace(name=name, dir=path, ssh=ssh)


def new(
    path: str = typer.Argument(
        ".",
        help="Workspace path. Relative to the current directory for local workspaces "
        "and to the remote $HOME for remote workspaces.",
    ),
    name: Optional[str] = typer.Argument(None, help="Workspace name (defaults to the last segment of PATH)"),
    ssh: Optional[str] = typer.Option(None, "--ssh", help="SSH host for a remote workspace"),
    user: Optional[str] = typer.Option(None, "--user", "-l", help="SSH user"),
    port: Optional[int] = typer.Option(None, "--port", "-p", help="SSH port"),
    identity_file: Optional[str] = typer.Option(None, "--identity-file", "-i", help="SSH identity file"),
):
    """Create a new workspace."""
    if ssh:
        workspace = _remote_workspace(ssh, path, name, user, port, identity_file)
    else:
        if user or port or identity_file:
            print_error("--user, --port and --identity-file require --ssh")
            raise typer.Exit(1)
        workspace = _local_workspace(path, name)

    store = WorkspaceStore()
    with exit_on_error():
        if store.exists(workspace.name):
            print_error(f"workspace '{workspace.name}' already exists")
            typer.echo(f"View it with: workspacectl cat {workspace.name}", err=True)
            raise typer.Exit(1)
        file_path = store.create(workspace)

    typer.echo(f"Created workspace {workspace.name} ({file_path})", err=True)


def list_workspaces():
    """List defined workspaces."""
    for name in WorkspaceStore().list():
        typer.echo(name)


def open_(name: str = typer.Argument(..., help="Workspace name")):
    """Open a workspace."""
    with exit_on_error():
        open_workspace(name)


def current():
    """Print the name of the currently open workspace."""
    with exit_on_error():
        typer.echo(get_current_name())


def cat(
    name: Optional[str] = typer.Argument(None, help="Workspace name (defaults to the current open workspace)"),
):
    """Print the workspace config as JSON."""
    with exit_on_error():
        if name is None:
            name = get_current_name()
        workspace = WorkspaceStore().read(name)
    typer.echo(workspace.model_dump_json(exclude_none=True))


def terminal():
    """Open a terminal in the current workspace."""
    config = load_config()
    with exit_on_error():
        workspace = fill_defaults(get_current_workspace(), config)
        launch.spawn(launch.build_terminal_command(workspace, config.terminal))


def editor():
    """Open an editor in the current workspace."""
    config = load_config()
    with exit_on_error():
        workspace = fill_defaults(get_current_workspace(), config)
        launch.spawn(launch.build_editor_command(workspace, config.terminal))
