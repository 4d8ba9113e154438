"""Read and write the workspace definition database.

Each workspace is one YAML file under the workspace directory (by default
``~/.config/workspacectl``). The file path relative to that directory, minus
the ``.yaml`` suffix, is the workspace name, so ``team/api`` lives in
``team/api.yaml``.
"""

import logging
import os
import re
from pathlib import Path, PurePosixPath, PureWindowsPath
from typing import Iterator, List, Optional

import yaml
from pydantic import ValidationError

from workspacectl.atomic import atomic_write
from workspacectl.exceptions import (
    InvalidNameError,
    StorageError,
    WorkspaceExistsError,
    WorkspaceNotFoundError,
    WorkspaceParseError,
)
from workspacectl.xdg import get_xdg_config_dir

from .models import Workspace

logger = logging.getLogger(__name__)

EXTENSION = ".yaml"

# Characters forbidden in *nix and Windows file names. `/` and `\` are allowed
# because workspaces can be organized into directories.
FORBIDDEN_CHARACTERS = frozenset("\n\r\t\0<>:\"|?*")

_SEPARATORS = re.compile(r"[\\/]")


def _has_control_characters(name: str) -> bool:
    return any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in name)


def _has_forbidden_characters(name: str) -> bool:
    return any(ch in FORBIDDEN_CHARACTERS for ch in name)


def validate_name(name: str) -> None:
    """Check all the preconditions for a workspace name.

    Args:
        name: Workspace name, possibly containing `/` separated directories

    Raises:
        InvalidNameError: If the name cannot safely map to a file inside the
            workspace directory
    """
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        raise InvalidNameError(name, "must be valid UTF-8") from None
    if _has_control_characters(name):
        raise InvalidNameError(name, "cannot contain ascii control characters")
    if _has_forbidden_characters(name):
        forbidden = "".join(sorted(FORBIDDEN_CHARACTERS)).encode("unicode_escape").decode()
        raise InvalidNameError(name, f"cannot contain any of {forbidden}")

    file_name = name + EXTENSION
    if PurePosixPath(file_name).is_absolute() or PureWindowsPath(file_name).anchor:
        raise InvalidNameError(name, "must be a relative path")

    # Every segment must survive the list() round-trip unchanged
    segments = _SEPARATORS.split(name)
    if ".." in segments:
        raise InvalidNameError(name, "must not contain '..' segments")
    if "" in segments:
        raise InvalidNameError(name, "must not be empty or contain empty segments")
    if "." in segments:
        raise InvalidNameError(name, "must not contain '.' segments")


class WorkspaceStore:
    """File-backed store of workspace definitions."""

    def __init__(self, root: Optional[Path] = None):
        """Initialize the store.

        Args:
            root: Workspace directory. Defaults to the XDG config directory.
        """
        self.root = root if root is not None else get_xdg_config_dir()

    def resolve_path(self, name: str) -> Path:
        """Return the path of the file storing workspace `name`.

        Validation happens before any filesystem access.

        Raises:
            InvalidNameError: If the name is not a valid workspace name
        """
        validate_name(name)
        return self.root / (name + EXTENSION)

    def exists(self, name: str) -> bool:
        return self.resolve_path(name).is_file()

    def create(self, workspace: Workspace) -> Path:
        """Create a new workspace definition.

        Args:
            workspace: Definition to store under `workspace.name`

        Returns:
            Path of the new workspace file

        Raises:
            InvalidNameError: If the workspace name is invalid
            WorkspaceExistsError: If a workspace with that name already exists
            StorageError: If the file cannot be written
        """
        path = self.resolve_path(workspace.name)
        buf = yaml.safe_dump(workspace.to_body(), sort_keys=False, allow_unicode=True)

        try:
            path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise StorageError(f"could not create parent directory for workspace at {path}: {e}", path) from e

        try:
            atomic_write(path, buf.encode("utf-8"), overwrite=False)
        except FileExistsError as e:
            raise WorkspaceExistsError(workspace.name, path) from e
        except OSError as e:
            raise StorageError(f"atomically writing workspace file at {path}: {e}", path) from e

        logger.info("Created workspace '%s' at %s", workspace.name, path)
        return path

    def read(self, name: str) -> Workspace:
        """Read the workspace definition for `name`.

        Raises:
            InvalidNameError: If the name is invalid
            WorkspaceNotFoundError: If there is no file for the workspace
            WorkspaceParseError: If the file is not a valid definition
            StorageError: For other filesystem failures
        """
        path = self.resolve_path(name)
        try:
            buf = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise WorkspaceNotFoundError(name, path) from e
        except UnicodeDecodeError as e:
            raise WorkspaceParseError(path, f"not valid UTF-8: {e}") from e
        except OSError as e:
            raise StorageError(f"reading workspace file at {path}: {e}", path) from e

        try:
            data = yaml.safe_load(buf)
        except yaml.YAMLError as e:
            raise WorkspaceParseError(path, str(e)) from e
        if not isinstance(data, dict):
            raise WorkspaceParseError(path, f"expected a mapping, got {type(data).__name__}")

        # The name comes from the path, never from the file body
        data.pop("name", None)
        try:
            workspace = Workspace.model_validate(data)
        except ValidationError as e:
            raise WorkspaceParseError(path, str(e)) from e

        workspace.name = name
        return workspace

    def list(self) -> List[str]:
        """List all workspace names, sorted by file name at each level.

        Problems with individual entries are logged and the entry is skipped.
        This never raises.
        """
        try:
            if not self.root.is_dir():
                logger.info("workspace directory %s does not exist", self.root)
                return []
        except OSError as e:
            logger.warning("error reading workspace list: %s", e)
            return []
        return list(self._walk(self.root, ()))

    def _walk(self, directory: Path, prefix: tuple) -> Iterator[str]:
        try:
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda entry: entry.name)
        except OSError as e:
            logger.warning("encountered an error while gathering workspace list: %s", e)
            return

        for entry in entries:
            if not self._is_listable_name(entry):
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=False)
                is_file = entry.is_file()
            except OSError as e:
                logger.warning("encountered an error while gathering workspace list: %s", e)
                continue

            if is_dir:
                yield from self._walk(Path(entry.path), prefix + (entry.name,))
                continue
            if not is_file:
                continue
            if not entry.name.endswith(EXTENSION) or entry.name == EXTENSION:
                logger.debug("ignoring file without %s extension %s", EXTENSION, entry.path)
                continue

            yield "/".join(prefix + (entry.name[: -len(EXTENSION)],))

    @staticmethod
    def _is_listable_name(entry: os.DirEntry) -> bool:
        name = entry.name
        try:
            name.encode("utf-8")
        except UnicodeEncodeError:
            logger.info("ignoring path with invalid UTF-8 characters %r", entry.path)
            return False
        if _has_control_characters(name):
            logger.info("ignoring path with ascii control characters %r", entry.path)
            return False
        if _has_forbidden_characters(name):
            logger.info("ignoring path with forbidden characters %r", entry.path)
            return False
        return True


__all__ = ["WorkspaceStore", "validate_name", "EXTENSION", "FORBIDDEN_CHARACTERS"]
