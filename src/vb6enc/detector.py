"""Classify byte buffers as UTF-8, GBK, or Unknown."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from vb6enc.errors import FileAccessError
from vb6enc.schemas import DEFAULT_MAX_READ_BYTES
from vb6enc.types import EncodingLabel


@dataclass(frozen=True)
class FileDetection:
    """Classification of one file's (possibly bounded) content."""

    path: Path
    encoding: EncodingLabel
    bytes_read: int
    truncated: bool = False


def is_valid_utf8(buffer: bytes) -> bool:
    """Return ``True`` if ``buffer`` is well-formed UTF-8.

    Overlong forms, surrogates, and truncated sequences are rejected by the
    strict decoder.
    """
    try:
        buffer.decode("utf-8", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def can_decode_gbk(buffer: bytes) -> bool:
    """Return ``True`` if ``buffer`` decodes as GBK with no errors or leftovers.

    A lead byte at the end of the buffer with no trail byte counts as an
    error.
    """
    try:
        buffer.decode("gbk", errors="strict")
    except UnicodeDecodeError:
        return False
    return True


def classify(buffer: bytes) -> EncodingLabel:
    """Classify ``buffer``.

    UTF-8 wins whenever the buffer is valid UTF-8, so pure 7-bit content
    (valid under both) and empty buffers are labelled UTF-8.

    Parameters
    ----------
    buffer : bytes
        Raw file content. Not modified.

    Returns
    -------
    EncodingLabel
        ``UTF8``, ``GBK``, or ``UNKNOWN``.
    """
    if is_valid_utf8(buffer):
        return EncodingLabel.UTF8
    if can_decode_gbk(buffer):
        return EncodingLabel.GBK
    return EncodingLabel.UNKNOWN


def read_bounded(path: Path, max_read_bytes: int = DEFAULT_MAX_READ_BYTES) -> tuple[bytes, bool]:
    """Read at most ``max_read_bytes`` from ``path``.

    Returns
    -------
    tuple[bytes, bool]
        The content read and whether the file holds more bytes than the cap.
    """
    try:
        with path.open("rb") as handle:
            content = handle.read(max_read_bytes)
            truncated = bool(handle.read(1))
    except OSError as exc:
        raise FileAccessError(f"read failed: {exc.strerror or exc}", path=path) from exc
    return content, truncated


def detect_file(path: Path, max_read_bytes: int = DEFAULT_MAX_READ_BYTES) -> FileDetection:
    """Classify the file at ``path`` from its first ``max_read_bytes`` bytes.

    Notes
    -----
    - When the file is larger than the cap, a multi-byte sequence can be
      split at the boundary and the label may be wrong. ``truncated`` is set
      so callers can warn; conversion always re-reads the whole file and
      decodes strictly, so a wrong label never corrupts content.
    """
    content, truncated = read_bounded(path, max_read_bytes)
    return FileDetection(
        path=path,
        encoding=classify(content),
        bytes_read=len(content),
        truncated=truncated,
    )
