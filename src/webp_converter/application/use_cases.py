"""Application use-cases orchestrating directory conversion."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path

from pydantic import ValidationError

from webp_converter.adapters.discovery import WalkFileDiscovery
from webp_converter.adapters.encoders import PillowWebpEncoder
from webp_converter.adapters.reporters import ConsoleReporter
from webp_converter.application.options import (
    DEFAULT_EXTENSIONS,
    DEFAULT_QUALITY,
    ConvertOptions,
)
from webp_converter.application.ports import (
    ConversionReporter,
    FileDiscovery,
    ImageEncoder,
)
from webp_converter.application.results import ConversionReport, FileOutcome
from webp_converter.errors import ConfigurationError, OutputCollisionError
from webp_converter.mapping import ConversionRequest, build_request, is_eligible
from webp_converter.schemas import ConversionConfig

logger = logging.getLogger(__name__)


def build_convert_options(
    *,
    quality: int = DEFAULT_QUALITY,
    extensions: Iterable[str] | None = None,
    verbose: bool = True,
    workers: int = 1,
) -> ConvertOptions:
    """Build typed option object from command/API params."""
    if isinstance(extensions, str):
        extensions = (extensions,)
    return ConvertOptions(
        quality=quality,
        extensions=(
            DEFAULT_EXTENSIONS if extensions is None else frozenset(extensions)
        ),
        verbose=verbose,
        workers=workers,
    )


def _plan_requests(
    files: Iterable[Path], config: ConversionConfig
) -> tuple[list[ConversionRequest], list[FileOutcome]]:
    """Map eligible files to requests, rejecting output-path collisions.

    The first file (in discovery order) claiming an output path keeps it.
    """
    requests: list[ConversionRequest] = []
    collisions: list[FileOutcome] = []
    claimed: dict[Path, ConversionRequest] = {}
    input_root = config.input_root
    output_root = config.output_root

    for file in files:
        if not is_eligible(file, config.extensions):
            continue
        request = build_request(
            file,
            input_root=input_root,
            output_root=output_root,
            quality=config.quality,
        )
        owner = claimed.get(request.output_path)
        if owner is not None:
            error = OutputCollisionError(
                f"{request.relative_path} and {owner.relative_path} both map to "
                f"{request.relative_output_path}"
            )
            collisions.append(FileOutcome(request=request, kind="failed", error=error))
            continue
        claimed[request.output_path] = request
        requests.append(request)

    return requests, collisions


def _process_request(request: ConversionRequest, encoder: ImageEncoder) -> FileOutcome:
    """Convert one request; directory creation errors propagate."""
    request.output_dir.mkdir(parents=True, exist_ok=True)

    if request.output_path.exists():
        logger.debug("Output exists, skipping %s", request.relative_output_path)
        return FileOutcome(request=request, kind="skipped")

    try:
        encoder.encode(request.source_path, request.output_path, request.quality)
    except Exception as exc:
        logger.debug("Conversion failed for %s", request.relative_path, exc_info=True)
        return FileOutcome(request=request, kind="failed", error=exc)
    return FileOutcome(request=request, kind="converted")


def _run_requests(
    requests: list[ConversionRequest], encoder: ImageEncoder, workers: int
) -> Iterator[FileOutcome]:
    if workers <= 1 or len(requests) <= 1:
        for request in requests:
            yield _process_request(request, encoder)
        return

    with ThreadPoolExecutor(max_workers=workers) as executor:
        yield from executor.map(lambda item: _process_request(item, encoder), requests)


def _report(outcome: FileOutcome, reporter: ConversionReporter, verbose: bool) -> None:
    request = outcome.request
    if outcome.error is not None:
        reporter.error(request.relative_path, outcome.error)
    elif not verbose:
        return
    elif outcome.kind == "skipped":
        reporter.skipped(request.relative_output_path)
    else:
        reporter.success(request.relative_path, request.relative_output_path)


def convert_directory(
    *,
    input_dir: Path,
    output_dir: Path,
    options: ConvertOptions,
    discovery: FileDiscovery | None = None,
    encoder: ImageEncoder | None = None,
    reporter: ConversionReporter | None = None,
) -> ConversionReport:
    """Use-case: mirror an image tree into WebP files.

    Per-file encoding failures are reported and recorded; discovery and
    output-directory creation failures propagate to the caller.
    """
    try:
        config = ConversionConfig(
            input_dir=input_dir,
            output_dir=output_dir,
            quality=options.quality,
            extensions=options.extensions,
            verbose=options.verbose,
            workers=options.workers,
        )
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid conversion options: {exc}") from exc

    discovery = discovery or WalkFileDiscovery()
    encoder = encoder or PillowWebpEncoder()
    reporter = reporter or ConsoleReporter()

    input_root = config.input_root
    if config.verbose:
        reporter.looking(input_root)

    files = discovery.discover(input_root)
    if config.verbose:
        reporter.found(len(files))

    requests, collisions = _plan_requests(files, config)
    outcomes: list[FileOutcome] = []
    for outcome in collisions:
        _report(outcome, reporter, config.verbose)
        outcomes.append(outcome)

    for outcome in _run_requests(requests, encoder, config.workers):
        _report(outcome, reporter, config.verbose)
        outcomes.append(outcome)

    return ConversionReport(
        input_root=input_root,
        output_root=config.output_root,
        discovered=len(files),
        outcomes=tuple(outcomes),
    )
