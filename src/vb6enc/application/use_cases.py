"""Application use-cases orchestrating scan, convert, and verify runs."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from pathlib import Path

from pydantic import ValidationError

from vb6enc.adapters.converters import StrictCodecConverter
from vb6enc.adapters.filesystem import AtomicFileStore, BoundedFileDetector, TreeFileSource
from vb6enc.application.options import RunOptions
from vb6enc.application.ports import (
    ContentConverter,
    ContentStore,
    EncodingDetector,
    FileSource,
)
from vb6enc.application.results import FileOutcome, RunResult
from vb6enc.errors import ConfigError, EnumerationError, Vb6EncError
from vb6enc.schemas import DEFAULT_MAX_READ_BYTES, RunConfig, WalkerConfig
from vb6enc.types import CommandName, ConversionDirection, EncodingLabel, OutcomeStatus

logger = logging.getLogger(__name__)

OutcomeCallback = Callable[[FileOutcome], None]


def build_run_options(
    *,
    root: Path,
    direction: ConversionDirection | None = None,
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES,
    extensions: Iterable[str] | None = None,
    skip_dirs: Iterable[str] | None = None,
) -> RunOptions:
    """Build a typed option object from command/API params."""
    walker_payload: dict[str, object] = {}
    if extensions is not None:
        walker_payload["extensions"] = tuple(extensions)
    if skip_dirs is not None:
        walker_payload["skip_dirs"] = tuple(skip_dirs)
    try:
        config = RunConfig(
            root=root,
            direction=direction,
            max_read_bytes=max_read_bytes,
            walker=WalkerConfig(**walker_payload),
        )
    except ValidationError as exc:
        raise ConfigError(f"Invalid run parameters: {exc}") from exc
    return RunOptions(
        root=config.root,
        direction=config.direction,
        max_read_bytes=config.max_read_bytes,
        walker=config.walker,
    )


def _failure(path: Path, exc: Exception, encoding: EncodingLabel | None = None) -> FileOutcome:
    if isinstance(exc, Vb6EncError):
        reason, kind = exc.message, exc.kind
    else:
        reason, kind = str(exc), "io"
    logger.debug("%s failed (%s): %s", path, kind, reason)
    return FileOutcome(
        path=path,
        status=OutcomeStatus.FAILED,
        encoding=encoding,
        reason=reason,
        error_kind=kind,
    )


def _list_files(source: FileSource, root: Path) -> list[Path]:
    try:
        return source.list_files(root)
    except EnumerationError:
        raise
    except OSError as exc:
        raise EnumerationError(f"cannot enumerate files: {exc}", path=root) from exc


def _emit(
    outcome: FileOutcome,
    outcomes: list[FileOutcome],
    on_outcome: OutcomeCallback | None,
) -> None:
    outcomes.append(outcome)
    if on_outcome is not None:
        on_outcome(outcome)


def classify_file(path: Path, detector: EncodingDetector) -> FileOutcome:
    """Detect one file without mutating it."""
    try:
        detection = detector.detect(path)
    except (Vb6EncError, OSError) as exc:
        return _failure(path, exc)
    if detection.truncated:
        logger.info(
            "%s exceeds the read cap; classified from its first %d bytes",
            path,
            detection.bytes_read,
        )
    return FileOutcome(
        path=path,
        status=OutcomeStatus.SKIPPED,
        encoding=detection.encoding,
        truncated=detection.truncated,
    )


def process_file(
    path: Path,
    direction: ConversionDirection,
    *,
    detector: EncodingDetector,
    converter: ContentConverter,
    store: ContentStore,
) -> FileOutcome:
    """Detect, conditionally convert, and rewrite one file.

    Every per-file error is folded into a ``Failed`` outcome; the file is
    left untouched unless the outcome is ``Converted``.
    """
    classified = classify_file(path, detector)
    if classified.failed:
        return classified

    encoding = classified.encoding
    if encoding is not direction.source:
        reason = "unknown encoding" if encoding is EncodingLabel.UNKNOWN else f"already {encoding}"
        return FileOutcome(
            path=path,
            status=OutcomeStatus.SKIPPED,
            encoding=encoding,
            reason=reason,
            truncated=classified.truncated,
        )

    try:
        content = store.read(path)
        new_content = converter.convert(content, direction)
        if new_content == content:
            return FileOutcome(
                path=path,
                status=OutcomeStatus.SKIPPED,
                encoding=encoding,
                reason=f"already {direction.target}-compatible",
            )
        store.write(path, new_content)
    except (Vb6EncError, OSError) as exc:
        return _failure(path, exc, encoding)

    logger.debug("converted %s (%s -> %s)", path, direction.source, direction.target)
    return FileOutcome(path=path, status=OutcomeStatus.CONVERTED, encoding=encoding)


def _classify_tree(
    command: CommandName,
    options: RunOptions,
    source: FileSource | None,
    detector: EncodingDetector | None,
    on_outcome: OutcomeCallback | None,
) -> RunResult:
    source = source or TreeFileSource(options.walker)
    detector = detector or BoundedFileDetector(options.max_read_bytes)

    outcomes: list[FileOutcome] = []
    for path in _list_files(source, options.root):
        _emit(classify_file(path, detector), outcomes, on_outcome)
    return RunResult(command=command, root=options.root, outcomes=tuple(outcomes))


def scan_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> RunResult:
    """Use-case: report the encoding of every candidate file; no mutation."""
    return _classify_tree("scan", options, source, detector, on_outcome)


def verify_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> RunResult:
    """Use-case: classify every candidate file; ``RunResult.issues`` lists Unknown/failed files."""
    return _classify_tree("verify", options, source, detector, on_outcome)


def convert_tree(
    options: RunOptions,
    *,
    source: FileSource | None = None,
    detector: EncodingDetector | None = None,
    converter: ContentConverter | None = None,
    store: ContentStore | None = None,
    on_outcome: OutcomeCallback | None = None,
) -> RunResult:
    """Use-case: convert every file in the direction's source encoding, one at a time.

    Raises
    ------
    ConfigError
        If ``options.direction`` is not set.
    EnumerationError
        If the candidate file list cannot be produced.
    """
    direction = options.direction
    if direction is None:
        raise ConfigError("a conversion direction is required")

    source = source or TreeFileSource(options.walker)
    detector = detector or BoundedFileDetector(options.max_read_bytes)
    converter = converter or StrictCodecConverter()
    store = store or AtomicFileStore()

    outcomes: list[FileOutcome] = []
    for path in _list_files(source, options.root):
        outcome = process_file(
            path,
            direction,
            detector=detector,
            converter=converter,
            store=store,
        )
        _emit(outcome, outcomes, on_outcome)
    result = RunResult(command=direction.value, root=options.root, outcomes=tuple(outcomes))
    logger.info(
        "%s finished: %d converted, %d skipped, %d failed",
        direction.value,
        result.converted,
        result.skipped,
        result.failed,
    )
    return result
