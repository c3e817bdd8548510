"""Application-layer use-cases and option objects."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from webp_converter.application.options import ConvertOptions
from webp_converter.application.ports import (
    ConversionReporter,
    FileDiscovery,
    ImageEncoder,
)
from webp_converter.application.results import ConversionReport, FileOutcome


def build_convert_options(
    *,
    quality: int = 100,
    extensions: Iterable[str] | None = None,
    verbose: bool = True,
    workers: int = 1,
) -> ConvertOptions:
    """Build typed conversion options via lazy use-case import."""
    from webp_converter.application.use_cases import build_convert_options as _impl

    return _impl(
        quality=quality,
        extensions=extensions,
        verbose=verbose,
        workers=workers,
    )


def convert_directory(
    *,
    input_dir: Path,
    output_dir: Path,
    options: ConvertOptions,
    discovery: FileDiscovery | None = None,
    encoder: ImageEncoder | None = None,
    reporter: ConversionReporter | None = None,
) -> ConversionReport:
    """Convert an image tree via lazy use-case import."""
    from webp_converter.application.use_cases import convert_directory as _impl

    return _impl(
        input_dir=input_dir,
        output_dir=output_dir,
        options=options,
        discovery=discovery,
        encoder=encoder,
        reporter=reporter,
    )


__all__ = [
    "ConvertOptions",
    "ConversionReport",
    "FileOutcome",
    "build_convert_options",
    "convert_directory",
]
