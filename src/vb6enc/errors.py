"""Exception hierarchy for detection, conversion, and rewrite failures."""

from __future__ import annotations

from pathlib import Path

from vb6enc.types import ErrorKind


class Vb6EncError(Exception):
    """Base class for all tool errors.

    Parameters
    ----------
    message : str
        Human-readable cause.
    path : Path | None, default=None
        File the error relates to, when known.
    """

    kind: ErrorKind = "io"
    exit_code: int = 1

    def __init__(self, message: str, *, path: Path | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path

    def __str__(self) -> str:
        if self.path is None:
            return self.message
        return f"{self.path}: {self.message}"


class FileAccessError(Vb6EncError):
    """Open/read/stat/write failure for a single file."""

    kind: ErrorKind = "io"


class ConversionError(Vb6EncError):
    """Codec transform failed; no output bytes were produced."""


class DecodeError(ConversionError):
    """Source bytes are not valid under the declared source encoding."""

    kind: ErrorKind = "decode"


class EncodeError(ConversionError):
    """A decoded character has no representation in the target encoding."""

    kind: ErrorKind = "encode"


class RenameError(Vb6EncError):
    """The atomic commit step (temp file replace) failed."""

    kind: ErrorKind = "rename"


class EnumerationError(Vb6EncError):
    """The candidate file list could not be produced. Aborts the run."""

    kind: ErrorKind = "enumeration"


class ConfigError(Vb6EncError):
    """Invalid run parameters."""

    kind: ErrorKind = "config"
    exit_code: int = 2
