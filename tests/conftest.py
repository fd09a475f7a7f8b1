"""Shared pytest configuration, marker assignment, and sample trees."""

from __future__ import annotations

from pathlib import Path

import pytest

# "中文" in each encoding.
GBK_ZHONGWEN = bytes.fromhex("D6D0CEC4")
UTF8_ZHONGWEN = bytes.fromhex("E4B8ADE69687")


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    """Create a small VB6-style project with one file per classification.

    Layout::

        project/
            Form1.frm      GBK
            Module1.bas    UTF-8
            ascii.txt      7-bit ASCII
            broken.cls     invalid under both encodings
            logo.txt       NUL byte in the probe window (binary)
            notes.doc      extension not in the allow-list
            bin/Skip.bas   inside a skipped directory
    """
    root = tmp_path / "project"
    root.mkdir()
    (root / "Form1.frm").write_bytes(b"Caption = \"" + GBK_ZHONGWEN + b"\"\r\n")
    (root / "Module1.bas").write_bytes(b"' " + UTF8_ZHONGWEN + b"\r\n")
    (root / "ascii.txt").write_bytes(b"plain ascii\n")
    (root / "broken.cls").write_bytes(b"\xff\xfe")
    (root / "logo.txt").write_bytes(b"GIF89a\x00\x01")
    (root / "notes.doc").write_bytes(GBK_ZHONGWEN)
    (root / "bin").mkdir()
    (root / "bin" / "Skip.bas").write_bytes(GBK_ZHONGWEN)
    return root
