"""Filesystem adapters: tree enumeration, bounded detection, atomic store."""

from __future__ import annotations

from pathlib import Path

from vb6enc.detector import FileDetection, detect_file
from vb6enc.errors import FileAccessError
from vb6enc.infrastructure.atomic_write import rewrite_atomic
from vb6enc.schemas import DEFAULT_MAX_READ_BYTES, WalkerConfig
from vb6enc.walker import Walker


class TreeFileSource:
    """Enumerate candidate files with the extension/NUL-probe walker."""

    def __init__(self, config: WalkerConfig | None = None) -> None:
        self.walker = Walker(config)

    def list_files(self, root: Path) -> list[Path]:
        return self.walker.walk(root)


class BoundedFileDetector:
    """Classify files from at most ``max_read_bytes`` of content."""

    def __init__(self, max_read_bytes: int = DEFAULT_MAX_READ_BYTES) -> None:
        self.max_read_bytes = max_read_bytes

    def detect(self, path: Path) -> FileDetection:
        return detect_file(path, self.max_read_bytes)


class AtomicFileStore:
    """Read whole files and replace them via same-directory atomic rename."""

    def read(self, path: Path) -> bytes:
        try:
            return path.read_bytes()
        except OSError as exc:
            raise FileAccessError(f"read failed: {exc.strerror or exc}", path=path) from exc

    def write(self, path: Path, data: bytes) -> None:
        rewrite_atomic(path, data)
