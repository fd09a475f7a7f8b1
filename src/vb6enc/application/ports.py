"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol

from vb6enc.detector import FileDetection
from vb6enc.types import ConversionDirection


class FileSource(Protocol):
    """Enumerate candidate files under a root."""

    def list_files(self, root: Path) -> list[Path]:
        """Return candidate paths; raise ``EnumerationError`` on failure."""


class EncodingDetector(Protocol):
    """Classify a file's encoding."""

    def detect(self, path: Path) -> FileDetection:
        """Classify file at path."""


class ContentConverter(Protocol):
    """Strictly re-encode a byte buffer."""

    def convert(self, data: bytes, direction: ConversionDirection) -> bytes:
        """Return transformed bytes or raise ``ConversionError``."""


class ContentStore(Protocol):
    """Read full file content and persist replacements."""

    def read(self, path: Path) -> bytes:
        """Return the complete file content."""

    def write(self, path: Path, data: bytes) -> None:
        """Replace file content; leave it untouched on failure."""
