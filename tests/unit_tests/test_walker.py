"""Unit tests for candidate file enumeration."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from vb6enc.errors import EnumerationError
from vb6enc.schemas import WalkerConfig
from vb6enc.walker import Walker


def test_walk_filters_extension_binary_and_skip_dirs(mixed_tree: Path) -> None:
    files = Walker().walk(mixed_tree)

    assert [p.relative_to(mixed_tree).as_posix() for p in files] == [
        "Form1.frm",
        "Module1.bas",
        "ascii.txt",
        "broken.cls",
    ]


def test_walk_is_case_insensitive(tmp_path: Path) -> None:
    (tmp_path / "BIN").mkdir()
    (tmp_path / "BIN" / "x.bas").write_bytes(b"x")
    (tmp_path / "MAIN.FRM").write_bytes(b"x")

    files = Walker().walk(tmp_path)

    assert files == [tmp_path / "MAIN.FRM"]


def test_walk_recurses_in_sorted_order(tmp_path: Path) -> None:
    for rel in ("b/z.bas", "b/a.bas", "a/m.cls", "root.vbp"):
        path = tmp_path / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"x")

    files = Walker().walk(tmp_path)

    assert [p.relative_to(tmp_path).as_posix() for p in files] == [
        "root.vbp",
        "a/m.cls",
        "b/a.bas",
        "b/z.bas",
    ]


def test_walk_single_file_root(tmp_path: Path) -> None:
    path = tmp_path / "Module1.bas"
    path.write_bytes(b"x")
    assert Walker().walk(path) == [path]


def test_walk_missing_root_raises_enumeration_error(tmp_path: Path) -> None:
    with pytest.raises(EnumerationError):
        Walker().walk(tmp_path / "nope")


def test_custom_config_normalizes_extensions(tmp_path: Path) -> None:
    (tmp_path / "a.SQL").write_bytes(b"select 1")
    (tmp_path / "b.bas").write_bytes(b"x")

    walker = Walker(WalkerConfig(extensions=("SQL",), skip_dirs=()))

    assert walker.config.extensions == (".sql",)
    assert walker.walk(tmp_path) == [tmp_path / "a.SQL"]


def test_nul_beyond_probe_window_is_text(tmp_path: Path) -> None:
    path = tmp_path / "long.txt"
    path.write_bytes(b"a" * 1024 + b"\x00")
    assert Walker().is_probably_text(path)


@pytest.mark.parametrize(
    "payload",
    [{"extensions": ()}, {"extensions": ("",)}, {"skip_dirs": (" ",)}, {"probe_bytes": 0}],
)
def test_invalid_walker_config_rejected(payload: dict[str, object]) -> None:
    with pytest.raises(ValidationError):
        WalkerConfig(**payload)
