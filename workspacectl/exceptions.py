"""Custom exception classes for workspacectl."""

from pathlib import Path
from typing import Optional


class WorkspacectlError(Exception):
    """Base class for all errors raised by workspacectl."""


class InvalidNameError(WorkspacectlError, ValueError):
    """Raised when a workspace name fails validation.

    Attributes:
        name: The rejected name
        reason: Human readable explanation
    """

    def __init__(self, name: str, reason: str):
        super().__init__(f"invalid workspace name {name!r}: {reason}")
        self.name = name
        self.reason = reason


class NotFoundError(WorkspacectlError, LookupError):
    """Raised when a stored value does not exist."""


class WorkspaceNotFoundError(NotFoundError):
    """Raised when no workspace definition exists under a name."""

    def __init__(self, name: str, path: Path):
        super().__init__(f"workspace '{name}' not found at {path}")
        self.name = name
        self.path = path


class CacheEntryNotFoundError(NotFoundError):
    """Raised when a cache key has never been written."""

    def __init__(self, key: str, path: Path):
        super().__init__(f"no value stored for '{key}' at {path}")
        self.key = key
        self.path = path


class WorkspaceExistsError(WorkspacectlError):
    """Raised when creating a workspace whose file already exists."""

    def __init__(self, name: str, path: Path):
        super().__init__(f"workspace '{name}' already exists at {path}")
        self.name = name
        self.path = path


class WorkspaceParseError(WorkspacectlError, ValueError):
    """Raised when a workspace file cannot be decoded into a definition."""

    def __init__(self, path: Path, detail: str):
        super().__init__(f"parsing workspace file at {path}: {detail}")
        self.path = path
        self.detail = detail


class CacheEncodingError(WorkspacectlError, ValueError):
    """Raised when a cache value is not valid UTF-8."""

    def __init__(self, path: Path):
        super().__init__(f"cache value at {path} is not valid UTF-8")
        self.path = path


class StorageError(WorkspacectlError):
    """Raised for filesystem failures (permissions, disk full, ...).

    Always chained to the originating OSError.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.path = path


class LaunchError(WorkspacectlError):
    """Raised when an external program cannot be started."""
