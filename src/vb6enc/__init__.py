"""Classify and convert legacy text trees between GBK and UTF-8."""

from __future__ import annotations

from vb6enc.codec import to_gbk, to_utf8, transform
from vb6enc.detector import classify, detect_file
from vb6enc.infrastructure.atomic_write import rewrite_atomic
from vb6enc.types import ConversionDirection, EncodingLabel, OutcomeStatus

__version__ = "0.1.0"

__all__ = [
    "ConversionDirection",
    "EncodingLabel",
    "OutcomeStatus",
    "classify",
    "detect_file",
    "rewrite_atomic",
    "to_gbk",
    "to_utf8",
    "transform",
]
