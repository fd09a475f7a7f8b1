"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from vb6enc.application.options import RunOptions
from vb6enc.application.ports import (
    ContentConverter,
    ContentStore,
    EncodingDetector,
    FileSource,
)
from vb6enc.application.results import FileOutcome, RunResult
from vb6enc.schemas import DEFAULT_MAX_READ_BYTES
from vb6enc.types import ConversionDirection


def build_run_options(
    *,
    root: Path,
    direction: ConversionDirection | None = None,
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
    extensions: Iterable[str] | None = None,
    skip_dirs: Iterable[str] | None = None,
) -> RunOptions:
    """Build typed run options via lazy use-case import."""
    from vb6enc.application.use_cases import build_run_options as _impl

    return _impl(
        root=root,
        direction=direction,
        max_read_bytes=max_read_bytes,
        extensions=extensions,
        skip_dirs=skip_dirs,
    )


def scan_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    on_outcome: Callable[[FileOutcome], None] | None = None,
) -> RunResult:
    """Classify every candidate file via lazy use-case import."""
    from vb6enc.application.use_cases import scan_tree as _impl

    return _impl(options, source=source, detector=detector, on_outcome=on_outcome)


def convert_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    converter: ContentConverter | None = None,
    store: ContentStore | None = None,
    on_outcome: Callable[[FileOutcome], None] | None = None,
) -> RunResult:
    """Convert candidate files via lazy use-case import."""
    from vb6enc.application.use_cases import convert_tree as _impl

    return _impl(
        options,
        source=source,
        detector=detector,
        converter=converter,
        store=store,
        on_outcome=on_outcome,
    )


def verify_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    on_outcome: Callable[[FileOutcome], None] | None = None,
) -> RunResult:
    """Report unclassifiable files via lazy use-case import."""
    from vb6enc.application.use_cases import verify_tree as _impl

    return _impl(options, source=source, detector=detector, on_outcome=on_outcome)


__all__ = [
    "RunOptions",
    "FileOutcome",
    "RunResult",
    "build_run_options",
    "scan_tree",
    "convert_tree",
    "verify_tree",
]
