#!/usr/bin/env python3
"""
vb6enc.cli.cli

Typer-based CLI for classifying and converting source trees between GBK and
UTF-8.

Examples
--------
Report the encoding of every candidate file under the current directory:

    vb6enc scan

Convert GBK files under ``./project`` to UTF-8 in place:

    vb6enc to-utf8 ./project

List files that are neither valid UTF-8 nor valid GBK:

    vb6enc verify ./project
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from vb6enc.application.options import RunOptions
from vb6enc.application.results import FileOutcome
from vb6enc.errors import ConfigError, EnumerationError
from vb6enc.schemas import DEFAULT_EXTENSIONS, DEFAULT_MAX_READ_BYTES, DEFAULT_SKIP_DIRS
from vb6enc.types import ConversionDirection, EncodingLabel, OutcomeStatus

app = typer.Typer(
    name="vb6enc",
    help="Classify and convert legacy source files between GBK and UTF-8.",
    no_args_is_help=True,
)

PATH_HELP = "Root directory or file to process (default: current directory)."
EXT_HELP = "File extension to include (repeatable). Replaces the default allow-list."
SKIP_DIR_HELP = "Directory name to skip (repeatable). Replaces the default skip list."
MAX_READ_HELP = "Maximum bytes read per file for classification."


# -----------------------------
# Utilities
# -----------------------------
def _print_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly error and return the process exit code.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the command.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.secho(f"✗ {type(exc).__name__}: {exc}", fg=typer.colors.RED, err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _resolve_root(path: Path | None) -> Path:
    return path if path is not None else Path.cwd()


def _build_options(
    path: Path | None,
    direction: ConversionDirection | None,
    extensions: list[str] | None,
    skip_dirs: list[str] | None,
    max_read_bytes: int,
) -> RunOptions:
    from vb6enc.application.use_cases import build_run_options

    try:
        return build_run_options(
            root=_resolve_root(path),
            direction=direction,
            max_read_bytes=max_read_bytes,
            extensions=extensions or None,
            skip_dirs=skip_dirs or None,
        )
    except ConfigError as exc:
        raise typer.BadParameter(exc.message) from exc


def _warn_truncated(outcome: FileOutcome) -> None:
    if outcome.truncated:
        typer.secho(
            f"[WARN] {outcome.path}: larger than the read cap; classified from a prefix only.",
            fg=typer.colors.YELLOW,
            err=True,
        )


def _debug_flag(ctx: typer.Context) -> bool:
    return bool((ctx.obj or {}).get("debug", False))


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Initialize shared CLI state and logging.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    verbose : bool, default=False
        Whether to log per-file decisions.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
            stream=sys.stderr,
            force=True,
        )
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("scan")
def scan_cmd(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help=PATH_HELP),
    ext: list[str] | None = typer.Option(None, "--ext", help=EXT_HELP),
    skip_dir: list[str] | None = typer.Option(None, "--skip-dir", help=SKIP_DIR_HELP),
    max_read_bytes: int = typer.Option(
        DEFAULT_MAX_READ_BYTES,
        "--max-read-bytes",
        envvar="VB6ENC_MAX_READ_BYTES",
        help=MAX_READ_HELP,
    ),
) -> None:
    """Report the encoding of every candidate file. Nothing is modified."""
    options = _build_options(path, None, ext, skip_dir, max_read_bytes)
    typer.echo(f"Scanning directory: {options.root}")

    def _report(outcome: FileOutcome) -> None:
        if outcome.failed:
            typer.echo(f"[Error] {outcome.path}: {outcome.reason}")
            return
        _warn_truncated(outcome)
        typer.echo(f"[{outcome.encoding}] {outcome.path}")

    from vb6enc.application.use_cases import scan_tree

    try:
        scan_tree(options, on_outcome=_report)
    except EnumerationError as exc:
        raise typer.Exit(code=_print_error(exc, _debug_flag(ctx)))


def _run_convert(
    ctx: typer.Context,
    direction: ConversionDirection,
    path: Path | None,
    ext: list[str] | None,
    skip_dir: list[str] | None,
    max_read_bytes: int,
) -> None:
    options = _build_options(path, direction, ext, skip_dir, max_read_bytes)
    typer.echo(f"Converting files to {direction.target} in: {options.root}")
    label = f"({direction.source} -> {direction.target})"

    def _report(outcome: FileOutcome) -> None:
        _warn_truncated(outcome)
        if outcome.status is OutcomeStatus.CONVERTED:
            typer.echo(f"Converting {outcome.path.name} {label}... Done")
        elif outcome.failed and outcome.encoding is None:
            typer.echo(f"[Error] Detect {outcome.path}: {outcome.reason}")
        elif outcome.failed:
            typer.echo(f"Converting {outcome.path.name} {label}... Failed: {outcome.reason}")

    from vb6enc.application.use_cases import convert_tree

    try:
        result = convert_tree(options, on_outcome=_report)
    except EnumerationError as exc:
        raise typer.Exit(code=_print_error(exc, _debug_flag(ctx)))

    typer.echo(
        f"\nSummary: {result.converted} converted, "
        f"{result.skipped} skipped, {result.failed} failed"
    )


@app.command("to-utf8")
def to_utf8_cmd(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help=PATH_HELP),
    ext: list[str] | None = typer.Option(None, "--ext", help=EXT_HELP),
    skip_dir: list[str] | None = typer.Option(None, "--skip-dir", help=SKIP_DIR_HELP),
    max_read_bytes: int = typer.Option(
        DEFAULT_MAX_READ_BYTES,
        "--max-read-bytes",
        envvar="VB6ENC_MAX_READ_BYTES",
        help=MAX_READ_HELP,
    ),
) -> None:
    """Convert GBK files to UTF-8 in place."""
    _run_convert(ctx, ConversionDirection.TO_UTF8, path, ext, skip_dir, max_read_bytes)


@app.command("to-gbk")
def to_gbk_cmd(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help=PATH_HELP),
    ext: list[str] | None = typer.Option(None, "--ext", help=EXT_HELP),
    skip_dir: list[str] | None = typer.Option(None, "--skip-dir", help=SKIP_DIR_HELP),
    max_read_bytes: int = typer.Option(
        DEFAULT_MAX_READ_BYTES,
        "--max-read-bytes",
        envvar="VB6ENC_MAX_READ_BYTES",
        help=MAX_READ_HELP,
    ),
) -> None:
    """Convert UTF-8 files to GBK in place.

    Notes
    -----
    - Files containing characters outside GBK fail and are left untouched.
    """
    _run_convert(ctx, ConversionDirection.TO_GBK, path, ext, skip_dir, max_read_bytes)


@app.command("verify")
def verify_cmd(
    ctx: typer.Context,
    path: Path | None = typer.Argument(None, help=PATH_HELP),
    ext: list[str] | None = typer.Option(None, "--ext", help=EXT_HELP),
    skip_dir: list[str] | None = typer.Option(None, "--skip-dir", help=SKIP_DIR_HELP),
    max_read_bytes: int = typer.Option(
        DEFAULT_MAX_READ_BYTES,
        "--max-read-bytes",
        envvar="VB6ENC_MAX_READ_BYTES",
        help=MAX_READ_HELP,
    ),
) -> None:
    """Report files that are neither valid UTF-8 nor valid GBK."""
    options = _build_options(path, None, ext, skip_dir, max_read_bytes)
    typer.echo(f"Verifying files in: {options.root}")

    def _report(outcome: FileOutcome) -> None:
        if outcome.failed:
            typer.echo(f"[Error] {outcome.path}: {outcome.reason}")
        elif outcome.encoding is EncodingLabel.UNKNOWN:
            typer.echo(f"[UNKNOWN] {outcome.path}")
        else:
            _warn_truncated(outcome)

    from vb6enc.application.use_cases import verify_tree

    try:
        result = verify_tree(options, on_outcome=_report)
    except EnumerationError as exc:
        raise typer.Exit(code=_print_error(exc, _debug_flag(ctx)))

    if not result.issues:
        typer.echo("All files have valid encodings (UTF-8 or GBK).")
    else:
        typer.echo(f"Found {len(result.issues)} files with issues.")


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed toolchain versions and codec availability."""
    import codecs
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("vb6enc", "typer", "pydantic"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    for name in ("utf-8", "gbk"):
        try:
            typer.echo(f"codec {name}: {codecs.lookup(name).name}")
        except LookupError:
            typer.echo(f"codec {name}: <unavailable>")

    typer.echo(f"extensions: {' '.join(DEFAULT_EXTENSIONS)}")
    typer.echo(f"skip dirs: {' '.join(DEFAULT_SKIP_DIRS)}")


if __name__ == "__main__":
    app()
