"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FileDiscovery(Protocol):
    """List candidate files beneath a directory tree."""

    def discover(self, root: Path) -> list[Path]:
        """Return absolute file paths found recursively under ``root``."""


class ImageEncoder(Protocol):
    """Encode one source image as WebP."""

    def encode(self, source: Path, destination: Path, quality: int) -> None:
        """Write ``source`` to ``destination`` as WebP; raise on failure."""


class ConversionReporter(Protocol):
    """Receive progress and per-file decisions of a conversion run."""

    def looking(self, root: Path) -> None:
        """Scan of ``root`` started."""

    def found(self, count: int) -> None:
        """Discovery returned ``count`` files."""

    def success(self, source: Path, output: Path) -> None:
        """One file was converted (paths relative to their roots)."""

    def skipped(self, output: Path) -> None:
        """Output already existed, conversion was not attempted."""

    def error(self, source: Path, error: BaseException) -> None:
        """One file failed; the run continues."""
