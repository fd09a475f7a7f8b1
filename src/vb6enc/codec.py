"""Strict, non-lossy transforms between GBK and UTF-8."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

from vb6enc.errors import DecodeError, EncodeError, FileAccessError
from vb6enc.infrastructure.atomic_write import rewrite_atomic
from vb6enc.types import ConversionDirection, codec_name

ContentWriter = Callable[[Path, bytes], None]


def _decode(buffer: bytes, direction: ConversionDirection) -> str:
    source = direction.source
    try:
        return buffer.decode(codec_name(source), errors="strict")
    except UnicodeDecodeError as exc:
        bad = buffer[exc.start : exc.end].hex(" ").upper()
        raise DecodeError(
            f"invalid {source} byte sequence [{bad}] at offset {exc.start}"
        ) from exc


def _encode(text: str, direction: ConversionDirection) -> bytes:
    target = direction.target
    try:
        return text.encode(codec_name(target), errors="strict")
    except UnicodeEncodeError as exc:
        char = text[exc.start]
        raise EncodeError(
            f"character U+{ord(char):04X} at position {exc.start} "
            f"has no {target} representation"
        ) from exc


def transform(buffer: bytes, direction: ConversionDirection) -> bytes:
    """Re-encode ``buffer`` in the direction's target encoding.

    Decoding and encoding both run with ``errors="strict"``: no replacement
    characters are ever produced.

    Parameters
    ----------
    buffer : bytes
        Content in the direction's source encoding.
    direction : ConversionDirection
        ``TO_UTF8`` (GBK -> UTF-8) or ``TO_GBK`` (UTF-8 -> GBK).

    Returns
    -------
    bytes
        Content in the target encoding.

    Raises
    ------
    DecodeError
        If ``buffer`` is not valid in the source encoding.
    EncodeError
        If a character cannot be represented in the target encoding.
    """
    return _encode(_decode(buffer, direction), direction)


def to_utf8(buffer: bytes) -> bytes:
    """Convert GBK bytes to UTF-8."""
    return transform(buffer, ConversionDirection.TO_UTF8)


def to_gbk(buffer: bytes) -> bytes:
    """Convert UTF-8 bytes to GBK."""
    return transform(buffer, ConversionDirection.TO_GBK)


def convert_file(
    path: Path,
    direction: ConversionDirection,
    writer: ContentWriter = rewrite_atomic,
) -> bytes:
    """Convert the whole file at ``path`` in place and return the new bytes.

    The original file is only touched by ``writer``, which receives a fully
    transformed buffer; codec failures raise before any write.
    """
    try:
        content = path.read_bytes()
    except OSError as exc:
        raise FileAccessError(f"read failed: {exc.strerror or exc}", path=path) from exc
    try:
        new_content = transform(content, direction)
    except (DecodeError, EncodeError) as exc:
        exc.path = path
        raise
    writer(path, new_content)
    return new_content
