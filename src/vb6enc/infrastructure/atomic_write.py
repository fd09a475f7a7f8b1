"""Crash-safe in-place file rewrite preserving permission bits."""

from __future__ import annotations

import contextlib
import logging
import os
import stat
import tempfile
from pathlib import Path

from vb6enc.errors import FileAccessError, RenameError

logger = logging.getLogger(__name__)


def _remove_quietly(tmp_path: str) -> None:
    with contextlib.suppress(FileNotFoundError):
        os.unlink(tmp_path)


def rewrite_atomic(path: Path, data: bytes) -> None:
    """Replace the content of ``path`` with ``data`` atomically.

    The new content is written to a temporary file in the same directory,
    flushed to disk, given the target's permission bits, and renamed over
    the target. Readers observe either the old or the new content.

    Parameters
    ----------
    path : Path
        Existing file to rewrite.
    data : bytes
        Complete new content.

    Raises
    ------
    FileAccessError
        If the target cannot be stat'ed or the temporary file cannot be
        written. The target is untouched.
    RenameError
        If the final replace fails. The target is untouched.

    Notes
    -----
    - The temporary name is unique per call (``mkstemp``), so an unrelated
      ``<name>.tmp`` next to the target is never clobbered.
    - Any temporary file is removed before an error is raised.
    """
    try:
        mode = stat.S_IMODE(os.stat(path).st_mode)
    except OSError as exc:
        raise FileAccessError(f"stat failed: {exc.strerror or exc}", path=path) from exc

    directory = path.parent
    try:
        fd, tmp_path = tempfile.mkstemp(
            dir=directory, prefix=f".{path.name}.", suffix=".tmp"
        )
    except OSError as exc:
        raise FileAccessError(
            f"cannot create temporary file in {directory}: {exc.strerror or exc}",
            path=path,
        ) from exc

    try:
        with os.fdopen(fd, "wb") as handle:
            handle.write(data)
            handle.flush()
            os.fsync(handle.fileno())
        os.chmod(tmp_path, mode)
    except OSError as exc:
        _remove_quietly(tmp_path)
        raise FileAccessError(f"write tmp failed: {exc.strerror or exc}", path=path) from exc

    try:
        os.replace(tmp_path, path)
    except OSError as exc:
        _remove_quietly(tmp_path)
        raise RenameError(f"replace failed: {exc.strerror or exc}", path=path) from exc

    logger.debug("rewrote %s (%d bytes, mode %o)", path, len(data), mode)
