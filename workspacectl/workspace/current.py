"""Resolve and select the currently open workspace."""

from pathlib import Path
from typing import Optional

from workspacectl import cache
from workspacectl.cache import CacheKey

from .models import Workspace
from .store import WorkspaceStore


def get_current_name(cache_dir: Optional[Path] = None) -> str:
    """Name of the currently open workspace.

    Raises:
        CacheEntryNotFoundError: If no workspace was ever opened
    """
    return cache.read(CacheKey.CURRENT, cache_dir)


def get_current_workspace(store: Optional[WorkspaceStore] = None, cache_dir: Optional[Path] = None) -> Workspace:
    """Load the definition of the currently open workspace.

    Args:
        store: Workspace store. Defaults to the XDG config directory store
        cache_dir: Cache directory. Defaults to the XDG cache directory

    Returns:
        The current workspace

    Raises:
        CacheEntryNotFoundError: If no workspace is open
        WorkspaceNotFoundError: If the open workspace no longer has a definition
    """
    if store is None:
        store = WorkspaceStore()
    name = get_current_name(cache_dir)
    return store.read(name)


def open_workspace(name: str, store: Optional[WorkspaceStore] = None, cache_dir: Optional[Path] = None) -> Workspace:
    """Mark `name` as the current workspace.

    The definition is read first so that a missing or broken workspace is
    never selected.
    """
    if store is None:
        store = WorkspaceStore()
    workspace = store.read(name)
    cache.write(CacheKey.CURRENT, name, cache_dir)
    return workspace


__all__ = ["get_current_name", "get_current_workspace", "open_workspace"]
