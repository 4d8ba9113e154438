"""Atomic file writes.

A write goes to a temporary file in the destination directory and is then
moved into place in one step, so a concurrent reader sees either the old
content or the new content, never a partial file.
"""

import logging
import os
import tempfile
from pathlib import Path

logger = logging.getLogger(__name__)


def atomic_write(path: Path, data: bytes, overwrite: bool) -> None:
    """Atomically write ``data`` to ``path``.

    Args:
        path: Destination file. Its parent directory must exist.
        data: Complete file content
        overwrite: Replace an existing file if True, otherwise fail when
            ``path`` already exists

    Raises:
        FileExistsError: If ``overwrite`` is False and ``path`` exists
        OSError: For any other filesystem failure
    """
    fd, tmp_name = tempfile.mkstemp(prefix=f".{path.name}.", suffix=".tmp", dir=path.parent)
    tmp = Path(tmp_name)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
            os.fsync(f.fileno())

        if overwrite:
            os.replace(tmp, path)
        elif os.name == "nt":
            # rename refuses to replace an existing file on Windows
            os.rename(tmp, path)
        else:
            # link fails with EEXIST instead of clobbering the target
            os.link(tmp, path)
        logger.debug("Wrote %d bytes to %s", len(data), path)
    finally:
        try:
            tmp.unlink()
        except FileNotFoundError:
            pass
