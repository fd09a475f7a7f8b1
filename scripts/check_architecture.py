#!/usr/bin/env python3
"""Architecture boundary checks."""

from __future__ import annotations

from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
PACKAGE = ROOT / "src/vb6enc"


def _read(path: Path) -> str:
    return path.read_text(encoding="utf-8")


def _assert_no_imports(path: Path, banned: list[str]) -> None:
    text = _read(path)
    for token in banned:
        if token in text:
            raise SystemExit(f"Architecture violation in {path}: found '{token}'")


def main() -> None:
    """Run repository architecture boundary checks."""
    core_modules = ["detector.py", "codec.py", "walker.py", "infrastructure/atomic_write.py"]
    for name in core_modules:
        _assert_no_imports(
            PACKAGE / name,
            [
                "import typer",
                "from typer",
                "vb6enc.cli",
                "vb6enc.application",
            ],
        )

    app_dir = PACKAGE / "application"
    for path in app_dir.glob("*.py"):
        _assert_no_imports(path, ["import typer", "from typer", "vb6enc.cli"])

    print("Architecture checks passed.")


if __name__ == "__main__":
    main()
