"""Top-level API for mirroring image trees as WebP."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from webp_converter.application.ports import (
    ConversionReporter,
    FileDiscovery,
    ImageEncoder,
)

__version__ = "0.1.0"


def convert(
    input_dir: str | Path = "public/images",
    output_dir: str | Path = "public/webp",
    *,
    quality: int = 100,
    extensions: Iterable[str] | None = None,
    verbose: bool = True,
    workers: int = 1,
    reporter: ConversionReporter | None = None,
    encoder: ImageEncoder | None = None,
    discovery: FileDiscovery | None = None,
) -> None:
    """Convert every supported image under ``input_dir`` to WebP.

    Output files are written under ``output_dir`` at the same relative
    location with a ``.webp`` suffix. Files whose output already exists are
    skipped. A file that fails to encode is reported and the run continues.

    Parameters
    ----------
    input_dir : str | Path, default="public/images"
        Root of the source image tree.
    output_dir : str | Path, default="public/webp"
        Root of the mirrored WebP tree.
    quality : int, default=100
        WebP quality (0-100) passed to the encoder unchanged.
    extensions : Iterable[str], optional
        Case-insensitive extension allow-list. A single string is one
        extension. Defaults to ``.jpg``, ``.jpeg``, ``.png`` and ``.svg``.
    verbose : bool, default=True
        Report scan, skip and success lines. Failures are always reported.
    workers : int, default=1
        Number of files converted concurrently.
    reporter, encoder, discovery, optional
        Replacements for the console reporter, Pillow encoder and
        directory walk.

    Raises
    ------
    ConfigurationError
        If options are out of range.
    DiscoveryError
        If the input tree cannot be walked.
    OSError
        If an output directory cannot be created.
    """
    from .api import convert_tree_to_webp as _impl

    _impl(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir),
        quality=quality,
        extensions=extensions,
        verbose=verbose,
        workers=workers,
        discovery=discovery,
        encoder=encoder,
        reporter=reporter,
    )


__all__ = [
    "convert",
]
