"""Mirrored output-path mapping for source images."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

WEBP_SUFFIX = ".webp"


@dataclass(frozen=True)
class ConversionRequest:
    """Normalized conversion request for a single source file.

    Parameters
    ----------
    source_path : Path
        Absolute path of the source image.
    relative_path : Path
        Source path relative to the input root.
    output_path : Path
        Absolute destination path under the output root.
    relative_output_path : Path
        Destination path relative to the output root.
    quality : int
        WebP quality shared across the run.
    """

    source_path: Path
    relative_path: Path
    output_path: Path
    relative_output_path: Path
    quality: int

    @property
    def output_dir(self) -> Path:
        """Directory that must exist before the output is written."""
        return self.output_path.parent


def normalized_extension(path: Path) -> str:
    """Return the lowercased final suffix of ``path`` (``""`` when absent)."""
    return path.suffix.lower()


def is_eligible(path: Path, extensions: Iterable[str]) -> bool:
    """Check whether ``path`` has an extension in the allow-list."""
    return normalized_extension(path) in set(extensions)


def mirrored_output_path(relative_path: Path) -> Path:
    """Map a source-relative path onto its WebP counterpart.

    ``a/b/c.png`` becomes ``a/b/c.webp``; only the final suffix is replaced.
    """
    return relative_path.parent / f"{relative_path.stem}{WEBP_SUFFIX}"


def build_request(
    source_path: Path,
    *,
    input_root: Path,
    output_root: Path,
    quality: int,
) -> ConversionRequest:
    """Build the request for ``source_path`` found under ``input_root``.

    Raises
    ------
    ValueError
        If ``source_path`` is not located under ``input_root``.
    """
    relative_path = source_path.relative_to(input_root)
    relative_output = mirrored_output_path(relative_path)
    return ConversionRequest(
        source_path=source_path,
        relative_path=relative_path,
        output_path=output_root / relative_output,
        relative_output_path=relative_output,
        quality=quality,
    )
