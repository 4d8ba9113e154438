"""Build and spawn terminal and editor sessions for a workspace.

Local workspaces are opened in their directory. Remote workspaces go through
ssh with a remote `cd` before exec'ing the shell or editor.
"""

import logging
import os
import shlex
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional

from .exceptions import LaunchError
from .workspace.models import Workspace

logger = logging.getLogger(__name__)

DEFAULT_TERMINAL = "kitty"
LOCAL_SHELLS = ["bash", "zsh", "sh"]
LOCAL_EDITORS = ["nvim", "vim", "vi"]
REMOTE_SHELL = "bash"
REMOTE_EDITOR = "vim"


@dataclass
class LaunchCommand:
    """A program to spawn and the directory to spawn it in."""

    argv: List[str]
    cwd: Optional[Path] = None


def resolve_local_dir(dir: str) -> Path:
    """Resolve a stored directory, which is relative to $HOME unless absolute."""
    return Path.home() / Path(dir).expanduser()


def _first_on_path(candidates: List[str], fallback: str) -> str:
    for candidate in candidates:
        found = shutil.which(candidate)
        if found:
            return found
    return fallback


def default_shell() -> str:
    return os.environ.get("SHELL") or _first_on_path(LOCAL_SHELLS, "sh")


def default_editor() -> str:
    return os.environ.get("VISUAL") or os.environ.get("EDITOR") or _first_on_path(LOCAL_EDITORS, "vi")


def _ssh_prefix(workspace: Workspace) -> List[str]:
    ssh = workspace.ssh
    return [ssh.ssh_command(), "-t", *ssh.ssh_args()]


def build_terminal_command(workspace: Workspace, terminal: str = DEFAULT_TERMINAL) -> LaunchCommand:
    """Build the command opening a login shell in the workspace directory.

    Args:
        workspace: Workspace definition, defaults already filled in
        terminal: Terminal emulator program

    Returns:
        Command to spawn
    """
    if workspace.is_remote:
        shell = workspace.shell.command if workspace.shell else REMOTE_SHELL
        remote_cmd = f"cd {shlex.quote(workspace.dir)}; exec {shell} --login"
        return LaunchCommand([terminal, *_ssh_prefix(workspace), remote_cmd])

    shell = workspace.shell.command if workspace.shell else default_shell()
    return LaunchCommand([terminal, *shlex.split(shell)], cwd=resolve_local_dir(workspace.dir))


def build_editor_command(workspace: Workspace, terminal: str = DEFAULT_TERMINAL) -> LaunchCommand:
    """Build the command opening an editor on the workspace directory.

    Args:
        workspace: Workspace definition, defaults already filled in
        terminal: Terminal emulator program

    Returns:
        Command to spawn
    """
    if workspace.is_remote:
        editor = workspace.editor.command if workspace.editor else REMOTE_EDITOR
        shell = workspace.shell.command if workspace.shell else REMOTE_SHELL
        title = f"{workspace.ssh.host}: {editor} {workspace.dir}"
        remote_cmd = f"cd {shlex.quote(workspace.dir)}; exec {shell} --login -c {shlex.quote(editor + ' .')}"
        return LaunchCommand([terminal, "--title", title, *_ssh_prefix(workspace), remote_cmd])

    editor = workspace.editor.command if workspace.editor else default_editor()
    title = f"{editor} {workspace.dir}"
    return LaunchCommand(
        [terminal, "--title", title, *shlex.split(editor), "."],
        cwd=resolve_local_dir(workspace.dir),
    )


def spawn(command: LaunchCommand) -> subprocess.Popen:
    """Start `command` without waiting for it.

    Raises:
        LaunchError: If the program cannot be started
    """
    logger.info("Spawning %s in %s", shlex.join(command.argv), command.cwd or Path.cwd())
    try:
        return subprocess.Popen(command.argv, cwd=command.cwd, start_new_session=True)
    except OSError as e:
        raise LaunchError(f"could not start {command.argv[0]}: {e}") from e
