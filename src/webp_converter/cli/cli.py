#!/usr/bin/env python3
"""
webp_converter.cli.app

Typer-based CLI that mirrors an image tree as WebP files.

Examples
--------
Convert ``public/images`` into ``public/webp`` with every default:

    webp-convert

Convert another tree at a lower quality, PNG files only:

    webp-convert convert assets/img build/webp --quality 80 --ext .png

Install SVG support:

    uv pip install -e ".[svg]"
"""

from __future__ import annotations

import logging
import sys
import traceback
from pathlib import Path

import typer

from webp_converter.application.options import (
    DEFAULT_INPUT_DIR,
    DEFAULT_OUTPUT_DIR,
    DEFAULT_QUALITY,
)

app = typer.Typer(
    name="webp-convert",
    help="Convert image trees (JPEG / PNG / SVG) to mirrored WebP trees.",
)

EXT_HELP = "Extension to convert, case-insensitive (repeatable). Default: .jpg .jpeg .png .svg"


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly fatal error.

    Parameters
    ----------
    exc : Exception
        Exception that aborted the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _run_conversion(
    *,
    input_dir: Path,
    output_dir: Path,
    quality: int,
    extensions: list[str] | None,
    verbose: bool,
    workers: int,
    debug: bool,
) -> None:
    """Run one conversion and translate fatal errors into exit codes."""
    try:
        from webp_converter.api import convert_tree_to_webp

        report = convert_tree_to_webp(
            input_dir=input_dir,
            output_dir=output_dir,
            quality=quality,
            extensions=extensions or None,
            verbose=verbose,
            workers=workers,
        )
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if verbose:
        typer.echo(
            f"Done: {report.converted} converted, {report.skipped} skipped, "
            f"{report.failed} failed"
        )


# -----------------------------
# Global options
# -----------------------------
@app.callback(invoke_without_command=True)
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks and debug logs."),
) -> None:
    """Initialize shared CLI state; convert with defaults when no command is given.

    Parameters
    ----------
    ctx : typer.Context
        Typer context object used to store shared state.
    debug : bool, default=False
        Whether to enable debug error output.
    """
    ctx.obj = {"debug": debug}
    if debug:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
        )
    if ctx.invoked_subcommand is None:
        _run_conversion(
            input_dir=DEFAULT_INPUT_DIR,
            output_dir=DEFAULT_OUTPUT_DIR,
            quality=DEFAULT_QUALITY,
            extensions=None,
            verbose=True,
            workers=1,
            debug=debug,
        )


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    input_dir: Path = typer.Argument(
        DEFAULT_INPUT_DIR, help="Root of the source image tree."
    ),
    output_dir: Path = typer.Argument(
        DEFAULT_OUTPUT_DIR, help="Root of the mirrored WebP tree."
    ),
    quality: int = typer.Option(
        DEFAULT_QUALITY, "--quality", "-q", min=0, max=100, help="WebP quality (0-100)."
    ),
    extensions: list[str] | None = typer.Option(None, "--ext", help=EXT_HELP),
    quiet: bool = typer.Option(
        False, "--quiet", help="Only report failures."
    ),
    workers: int = typer.Option(
        1, "--workers", min=1, help="Files converted concurrently."
    ),
) -> None:
    """Convert every supported image under INPUT_DIR into OUTPUT_DIR.

    Notes
    -----
    - Existing ``.webp`` outputs are never overwritten.
    - A file that fails to convert is reported and does not change the exit
      status.
    - SVG sources require the `svg` extra (cairosvg).
    """
    debug: bool = bool(ctx.obj.get("debug", False))
    _run_conversion(
        input_dir=input_dir,
        output_dir=output_dir,
        quality=quality,
        extensions=extensions,
        verbose=not quiet,
        workers=workers,
        debug=debug,
    )


@app.command("doctor")
def doctor_cmd() -> None:
    """Print installed codec versions and WebP support."""
    import importlib.metadata as metadata

    typer.echo(f"Python: {sys.version.split()[0]}")
    for module in ("pillow", "cairosvg", "pydantic", "typer"):
        try:
            version = metadata.version(module)
            typer.echo(f"{module}: {version}")
        except metadata.PackageNotFoundError:
            typer.echo(f"{module}: <not installed>")

    from PIL import features

    webp = "yes" if features.check("webp") else "no"
    typer.echo(f"webp support: {webp}")


if __name__ == "__main__":
    app()
