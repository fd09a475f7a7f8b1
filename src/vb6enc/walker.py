"""Candidate file discovery: extension allow-list and binary probe."""

from __future__ import annotations

import logging
import os
from pathlib import Path

from vb6enc.errors import EnumerationError
from vb6enc.schemas import WalkerConfig

logger = logging.getLogger(__name__)


class Walker:
    """Produce the ordered list of text files to process under a root."""

    def __init__(self, config: WalkerConfig | None = None) -> None:
        self.config = config or WalkerConfig()

    def walk(self, root: Path) -> list[Path]:
        """Return matching files under ``root`` in sorted order.

        Raises
        ------
        EnumerationError
            If ``root`` does not exist or a directory cannot be listed.
        """
        if not root.exists():
            raise EnumerationError("path does not exist", path=root)
        if root.is_file():
            return [root] if self._accepts(root) else []

        def _raise(exc: OSError) -> None:
            raise EnumerationError(
                f"cannot list directory: {exc.strerror or exc}",
                path=Path(exc.filename) if exc.filename else root,
            ) from exc

        files: list[Path] = []
        for dirpath, dirnames, filenames in os.walk(root, onerror=_raise):
            dirnames[:] = sorted(d for d in dirnames if not self.should_skip_dir(d))
            for name in sorted(filenames):
                candidate = Path(dirpath) / name
                if self._accepts(candidate):
                    files.append(candidate)
        logger.debug("walker found %d candidate files under %s", len(files), root)
        return files

    def should_skip_dir(self, name: str) -> bool:
        return name.lower() in self.config.skip_dirs

    def has_valid_extension(self, path: Path) -> bool:
        return path.suffix.lower() in self.config.extensions

    def is_probably_text(self, path: Path) -> bool:
        """Return ``False`` if the first probe bytes hold a NUL or cannot be read."""
        try:
            with path.open("rb") as handle:
                head = handle.read(self.config.probe_bytes)
        except OSError:
            return False
        return b"\x00" not in head

    def _accepts(self, path: Path) -> bool:
        return path.is_file() and self.has_valid_extension(path) and self.is_probably_text(path)
