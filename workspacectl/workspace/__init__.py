"""Workspace definitions for workspacectl.

A workspace is a named pointer at a project root:
- Local directory (stored relative to $HOME when possible)
- Remote directory reached over SSH
- Optional editor and shell overrides

Definitions live as one YAML file per workspace; the file path is the name.
"""

from .current import get_current_name, get_current_workspace, open_workspace
from .models import Editor, Shell, Ssh, Workspace
from .store import EXTENSION, FORBIDDEN_CHARACTERS, WorkspaceStore, validate_name

__all__ = [
    "Workspace",
    "Ssh",
    "Editor",
    "Shell",
    "WorkspaceStore",
    "validate_name",
    "get_current_name",
    "get_current_workspace",
    "open_workspace",
    "EXTENSION",
    "FORBIDDEN_CHARACTERS",
]
