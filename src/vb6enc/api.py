"""Public path-based API (delegates to application use-cases)."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import Iterable
from typing import Optional

from vb6enc.application.results import FileOutcome, RunResult
from vb6enc.application.use_cases import build_run_options
from vb6enc.application.use_cases import convert_tree
from vb6enc.application.use_cases import scan_tree
from vb6enc.application.use_cases import verify_tree
from vb6enc.codec import transform
from vb6enc.detector import classify
from vb6enc.schemas import DEFAULT_MAX_READ_BYTES
from vb6enc.types import ConversionDirection, EncodingLabel


def scan_path(
    root: Path,
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
    extensions: Optional[Iterable[str]] = None,
    skip_dirs: Optional[Iterable[str]] = None,
    on_outcome: Optional[Callable[[FileOutcome], None]] = None,
) -> RunResult:
    """Classify every candidate file under ``root`` without modifying it."""
    options = build_run_options(
        root=root,
        max_read_bytes=max_read_bytes,
        extensions=extensions,
        skip_dirs=skip_dirs,
    )
    return scan_tree(options, on_outcome=on_outcome)


def convert_path(
    root: Path,
    direction: ConversionDirection,
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
    extensions: Optional[Iterable[str]] = None,
    skip_dirs: Optional[Iterable[str]] = None,
    on_outcome: Optional[Callable[[FileOutcome], None]] = None,
) -> RunResult:
    """Convert matching files under ``root`` in place, one at a time."""
    options = build_run_options(
        root=root,
        direction=direction,
        max_read_bytes=max_read_bytes,
        extensions=extensions,
        skip_dirs=skip_dirs,
    )
    return convert_tree(options, on_outcome=on_outcome)


def verify_path(
    root: Path,
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
    extensions: Optional[Iterable[str]] = None,
    skip_dirs: Optional[Iterable[str]] = None,
    on_outcome: Optional[Callable[[FileOutcome], None]] = None,
) -> RunResult:
    """Classify files under ``root``; inspect ``RunResult.issues`` for Unknown ones."""
    options = build_run_options(
        root=root,
        max_read_bytes=max_read_bytes,
        extensions=extensions,
        skip_dirs=skip_dirs,
    )
    return verify_tree(options, on_outcome=on_outcome)


def detect_bytes(buffer: bytes) -> EncodingLabel:
    """Classify an in-memory buffer."""
    return classify(buffer)


def convert_bytes(buffer: bytes, direction: ConversionDirection) -> bytes:
    """Strictly convert an in-memory buffer."""
    return transform(buffer, direction)
