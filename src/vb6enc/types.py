"""Shared enumerations and type aliases for detection and conversion."""

from __future__ import annotations

from enum import StrEnum
from typing import Literal, TypeAlias

CommandName: TypeAlias = Literal["scan", "to-utf8", "to-gbk", "verify"]
ErrorKind: TypeAlias = Literal["io", "decode", "encode", "rename", "enumeration", "config"]


class EncodingLabel(StrEnum):
    """Classification result for a byte buffer."""

    UTF8 = "UTF-8"
    GBK = "GBK"
    UNKNOWN = "Unknown"


_CODEC_NAMES: dict[EncodingLabel, str] = {
    EncodingLabel.UTF8: "utf-8",
    EncodingLabel.GBK: "gbk",
}


def codec_name(label: EncodingLabel) -> str:
    """Return the Python codec name backing an encoding label.

    Raises
    ------
    ValueError
        If ``label`` is ``UNKNOWN``.
    """
    try:
        return _CODEC_NAMES[label]
    except KeyError:
        raise ValueError(f"no codec for encoding label {label!s}") from None


class ConversionDirection(StrEnum):
    """Caller-selected conversion direction."""

    TO_UTF8 = "to-utf8"
    TO_GBK = "to-gbk"

    @property
    def source(self) -> EncodingLabel:
        return EncodingLabel.GBK if self is ConversionDirection.TO_UTF8 else EncodingLabel.UTF8

    @property
    def target(self) -> EncodingLabel:
        return EncodingLabel.UTF8 if self is ConversionDirection.TO_UTF8 else EncodingLabel.GBK


class OutcomeStatus(StrEnum):
    """Per-file outcome tag reported to the caller."""

    CONVERTED = "Converted"
    SKIPPED = "Skipped"
    FAILED = "Failed"
