"""Public directory conversion API (delegates to application use-cases)."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable
from typing import Optional

from webp_converter.application.options import DEFAULT_INPUT_DIR
from webp_converter.application.options import DEFAULT_OUTPUT_DIR
from webp_converter.application.options import DEFAULT_QUALITY
from webp_converter.application.ports import ConversionReporter
from webp_converter.application.ports import FileDiscovery
from webp_converter.application.ports import ImageEncoder
from webp_converter.application.results import ConversionReport
from webp_converter.application.use_cases import build_convert_options
from webp_converter.application.use_cases import convert_directory


def convert_tree_to_webp(
    input_dir: Path = DEFAULT_INPUT_DIR,
    output_dir: Path = DEFAULT_OUTPUT_DIR,
    quality: int = DEFAULT_QUALITY,
    extensions: Optional[Iterable[str]] = None,
    verbose: bool = True,
    workers: int = 1,
    discovery: Optional[FileDiscovery] = None,
    encoder: Optional[ImageEncoder] = None,
    reporter: Optional[ConversionReporter] = None,
) -> ConversionReport:
    """Convert an image tree to WebP and return the structured report."""
    options = build_convert_options(
        quality=quality,
        extensions=extensions,
        verbose=verbose,
        workers=workers,
    )
    return convert_directory(
        input_dir=Path(input_dir),
        output_dir=Path(output_dir),
        options=options,
        discovery=discovery,
        encoder=encoder,
        reporter=reporter,
    )
