"""Global key-value state stored in the program cache directory.

Each key maps to one file in ``~/.cache/workspacectl`` and the value is that
file's contents stripped of surrounding whitespace. Values are always UTF-8
and never contain newlines.
"""

import logging
from enum import Enum
from pathlib import Path
from typing import Optional

from workspacectl.atomic import atomic_write
from workspacectl.exceptions import CacheEncodingError, CacheEntryNotFoundError, StorageError
from workspacectl.xdg import get_xdg_cache_dir

logger = logging.getLogger(__name__)


class CacheKey(str, Enum):
    """Keys of the cache store."""

    CURRENT = "current"  # Currently open workspace

    @property
    def filename(self) -> str:
        return self.value


def get_cache_dir() -> Path:
    return get_xdg_cache_dir()


def get_cache_file_path(key: CacheKey, cache_dir: Optional[Path] = None) -> Path:
    """Get the file storing the value of `key`.

    Args:
        key: Cache key
        cache_dir: Cache directory. If None, uses the XDG cache directory

    Returns:
        Path to cache file
    """
    if cache_dir is None:
        cache_dir = get_cache_dir()
    return cache_dir / key.filename


def read(key: CacheKey, cache_dir: Optional[Path] = None) -> str:
    """Read the value stored for `key`.

    Args:
        key: Cache key
        cache_dir: Cache directory. If None, uses the XDG cache directory

    Returns:
        Stored value with surrounding whitespace removed

    Raises:
        CacheEntryNotFoundError: If nothing was written for the key
        CacheEncodingError: If the file is not valid UTF-8
        StorageError: If the file cannot be read
    """
    path = get_cache_file_path(key, cache_dir)
    try:
        buf = path.read_bytes()
    except FileNotFoundError as e:
        raise CacheEntryNotFoundError(key.value, path) from e
    except OSError as e:
        raise StorageError(f"reading cache file at {path}: {e}", path) from e

    try:
        return buf.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        raise CacheEncodingError(path) from e


def write(key: CacheKey, value: str, cache_dir: Optional[Path] = None) -> None:
    """Atomically replace the value stored for `key`.

    The value is stripped and written with a single trailing newline. It is
    not validated here; callers must not pass values with inner newlines.

    Args:
        key: Cache key
        value: New value
        cache_dir: Cache directory. If None, uses the XDG cache directory

    Raises:
        CacheEncodingError: If the value cannot be encoded as UTF-8
        StorageError: If the cache directory or file cannot be written
    """
    path = get_cache_file_path(key, cache_dir)
    try:
        buf = (value.strip() + "\n").encode("utf-8")
    except UnicodeEncodeError as e:
        raise CacheEncodingError(path) from e

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageError(f"could not create cache directory at {path.parent}: {e}", path) from e

    try:
        atomic_write(path, buf, overwrite=True)
    except OSError as e:
        raise StorageError(f"atomically writing cache file at {path}: {e}", path) from e
    logger.debug("Set %s to %r", key.value, value.strip())
