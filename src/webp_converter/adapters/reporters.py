"""Console reporter for conversion progress."""

from __future__ import annotations

from pathlib import Path

import typer


class ConsoleReporter:
    """Render one human-readable line per reported event."""

    def looking(self, root: Path) -> None:
        """Announce the input root being scanned."""
        typer.echo(f"📂 Looking inside: {root}")

    def found(self, count: int) -> None:
        """Report the raw number of discovered files."""
        typer.echo(f"🔍 Found {count} files")

    def success(self, source: Path, output: Path) -> None:
        """Report a converted file as relative source and output paths."""
        typer.echo(f"✓ Converted: {source} → {output}")

    def skipped(self, output: Path) -> None:
        """Report an output left untouched because it already exists."""
        typer.echo(f"⏭ Skipped: {output} (already exists)")

    def error(self, source: Path, error: BaseException) -> None:
        """Report a per-file failure on stderr."""
        typer.echo(f"✗ Failed to convert: {source} ({type(error).__name__}: {error})", err=True)
