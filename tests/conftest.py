"""Test configuration and fixtures."""

from pathlib import Path

import pytest

from workspacectl.workspace import WorkspaceStore


@pytest.fixture(autouse=True)
def home(tmp_path, monkeypatch) -> Path:
    """Point $HOME and the XDG directories at a temporary directory."""
    home = tmp_path.resolve() / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USERPROFILE", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(home / ".config"))
    monkeypatch.setenv("XDG_CACHE_HOME", str(home / ".cache"))
    return home


@pytest.fixture
def store(home) -> WorkspaceStore:
    return WorkspaceStore(home / ".config" / "workspacectl")


@pytest.fixture
def cache_dir(home) -> Path:
    return home / ".cache" / "workspacectl"
