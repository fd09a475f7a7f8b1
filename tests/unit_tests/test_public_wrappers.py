"""Unit tests for the public path-based API wrappers."""

from __future__ import annotations

from pathlib import Path

import pytest

import vb6enc
from vb6enc import api as api_module
from vb6enc.errors import ConfigError, EnumerationError
from vb6enc.types import ConversionDirection, EncodingLabel, OutcomeStatus

GBK_ZHONGWEN = bytes.fromhex("D6D0CEC4")
UTF8_ZHONGWEN = bytes.fromhex("E4B8ADE69687")


def test_top_level_exports() -> None:
    assert vb6enc.classify(GBK_ZHONGWEN) is EncodingLabel.GBK
    assert vb6enc.to_utf8(GBK_ZHONGWEN) == UTF8_ZHONGWEN
    assert vb6enc.transform(UTF8_ZHONGWEN, ConversionDirection.TO_GBK) == GBK_ZHONGWEN


def test_detect_and_convert_bytes() -> None:
    assert api_module.detect_bytes(b"\xff\xfe") is EncodingLabel.UNKNOWN
    assert api_module.convert_bytes(GBK_ZHONGWEN, ConversionDirection.TO_UTF8) == UTF8_ZHONGWEN


def test_scan_path_collects_outcomes(mixed_tree: Path) -> None:
    seen: list[str] = []

    result = api_module.scan_path(mixed_tree, on_outcome=lambda o: seen.append(o.path.name))

    assert seen == ["Form1.frm", "Module1.bas", "ascii.txt", "broken.cls"]
    assert result.unknown == 1


def test_convert_path_with_extension_filter(mixed_tree: Path) -> None:
    result = api_module.convert_path(
        mixed_tree,
        ConversionDirection.TO_UTF8,
        extensions=[".frm"],
    )

    assert [(o.path.name, o.status) for o in result.outcomes] == [
        ("Form1.frm", OutcomeStatus.CONVERTED)
    ]
    assert vb6enc.classify((mixed_tree / "Form1.frm").read_bytes()) is EncodingLabel.UTF8


def test_verify_path_with_custom_skip_dirs(mixed_tree: Path) -> None:
    """Clearing the skip list exposes files under ``bin/``."""
    result = api_module.verify_path(mixed_tree, skip_dirs=[])

    names = [o.path.name for o in result.outcomes]
    assert "Skip.bas" in names
    assert [o.path.name for o in result.issues] == ["broken.cls"]


def test_verify_path_missing_root(tmp_path: Path) -> None:
    with pytest.raises(EnumerationError):
        api_module.verify_path(tmp_path / "missing")


def test_invalid_cap_is_config_error(tmp_path: Path) -> None:
    with pytest.raises(ConfigError):
        api_module.scan_path(tmp_path, max_read_bytes=-1)


def test_application_wrappers_forward_callbacks(mixed_tree: Path) -> None:
    from vb6enc import application

    options = application.build_run_options(root=mixed_tree, extensions=[".frm", ".bas"])
    seen: list[str] = []

    result = application.scan_tree(options, on_outcome=lambda o: seen.append(o.path.name))

    assert seen == ["Form1.frm", "Module1.bas"]
    assert [o.encoding for o in result.outcomes] == [EncodingLabel.GBK, EncodingLabel.UTF8]
