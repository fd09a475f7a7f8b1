"""Typed option objects shared across run use-cases."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from vb6enc.schemas import DEFAULT_MAX_READ_BYTES, WalkerConfig
from vb6enc.types import ConversionDirection


@dataclass(frozen=True)
class RunOptions:
    """Explicit configuration for one run over a tree.

    ``direction`` is ``None`` for read-only runs (scan, verify).
    """

    root: Path
    direction: ConversionDirection | None = None
    max_read_bytes: int = DEFAULT_MAX_READ_BYTES
    walker: WalkerConfig = field(default_factory=WalkerConfig)
