"""Tests for atomic file writes."""

import sys
from unittest.mock import patch

import pytest

from workspacectl.atomic import atomic_write


class Interrupted(Exception):
    """Stands in for the process dying between temp file creation and rename."""


@pytest.fixture
def directory(tmp_path):
    """An empty directory holding nothing but what the test writes."""
    path = tmp_path / "data"
    path.mkdir()
    return path


def _names(directory):
    return sorted(p.name for p in directory.iterdir())


def test_overwrite_replaces_content(directory):
    path = directory / "value"
    path.write_bytes(b"old\n")

    atomic_write(path, b"new\n", overwrite=True)

    assert path.read_bytes() == b"new\n"
    assert _names(directory) == ["value"]


def test_overwrite_creates_missing_file(directory):
    path = directory / "value"

    atomic_write(path, b"new\n", overwrite=True)

    assert path.read_bytes() == b"new\n"


def test_create_only_fails_on_existing_file(directory):
    path = directory / "record.yaml"
    path.write_bytes(b"original")

    with pytest.raises(FileExistsError):
        atomic_write(path, b"replacement", overwrite=False)

    assert path.read_bytes() == b"original"
    assert _names(directory) == ["record.yaml"]


def test_create_only_writes_new_file(directory):
    path = directory / "record.yaml"

    atomic_write(path, b"content", overwrite=False)

    assert path.read_bytes() == b"content"
    assert _names(directory) == ["record.yaml"]


def test_interrupted_overwrite_keeps_original(directory):
    path = directory / "value"
    path.write_bytes(b"original\n")

    with patch("workspacectl.atomic.os.replace", side_effect=Interrupted):
        with pytest.raises(Interrupted):
            atomic_write(path, b"partial", overwrite=True)

    assert path.read_bytes() == b"original\n"
    assert _names(directory) == ["value"]


@pytest.mark.skipif(sys.platform == "win32", reason="create-only writes rename instead of link on Windows")
def test_interrupted_create_only_leaves_no_file(directory):
    path = directory / "record.yaml"

    with patch("workspacectl.atomic.os.link", side_effect=Interrupted):
        with pytest.raises(Interrupted):
            atomic_write(path, b"content", overwrite=False)

    assert not path.exists()
    assert _names(directory) == []


def test_interrupted_write_during_flush_keeps_original(directory):
    path = directory / "value"
    path.write_bytes(b"original\n")

    with patch("workspacectl.atomic.os.fsync", side_effect=Interrupted):
        with pytest.raises(Interrupted):
            atomic_write(path, b"new content", overwrite=True)

    assert path.read_bytes() == b"original\n"
    assert _names(directory) == ["value"]


def test_missing_parent_directory_raises(directory):
    with pytest.raises(OSError):
        atomic_write(directory / "missing" / "value", b"x", overwrite=True)
