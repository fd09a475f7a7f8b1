"""Pydantic schemas for runtime validation of run parameters."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from vb6enc.types import ConversionDirection

DEFAULT_EXTENSIONS: tuple[str, ...] = (
    ".vbp", ".frm", ".bas", ".cls", ".ctl", ".txt", ".ini", ".cfg", ".md", ".json", ".xml",
)
DEFAULT_SKIP_DIRS: tuple[str, ...] = (
    ".git", ".svn", "bin", "obj", ".idea", ".vscode", "node_modules",
)
DEFAULT_MAX_READ_BYTES = 50 * 1024 * 1024


class WalkerConfig(BaseModel):
    """Filtering rules for tree traversal."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    skip_dirs: tuple[str, ...] = DEFAULT_SKIP_DIRS
    probe_bytes: int = Field(default=1024, gt=0)

    @field_validator("extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        normalized: list[str] = []
        for item in value:
            ext = item.strip().lower()
            if not ext or ext == ".":
                raise ValueError("extensions cannot contain empty entries.")
            normalized.append(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("at least one extension is required.")
        return tuple(normalized)

    @field_validator("skip_dirs")
    @classmethod
    def _normalize_skip_dirs(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if any(not item.strip() for item in value):
            raise ValueError("skip_dirs cannot contain empty entries.")
        return tuple(item.strip().lower() for item in value)


class RunConfig(BaseModel):
    """Validated input for one scan/convert/verify run."""

    model_config = ConfigDict(extra="forbid")

    root: Path
    direction: ConversionDirection | None = None
    max_read_bytes: int = Field(default=DEFAULT_MAX_READ_BYTES, gt=0)
    walker: WalkerConfig = Field(default_factory=WalkerConfig)
