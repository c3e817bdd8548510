"""Unit tests for mirrored output-path mapping."""

from __future__ import annotations

from pathlib import Path

import pytest
from hypothesis import given
from hypothesis import strategies as st

from webp_converter.mapping import (
    build_request,
    is_eligible,
    mirrored_output_path,
    normalized_extension,
)

_segment = st.text(
    alphabet=st.characters(categories=("Ll", "Lu", "Nd"), max_codepoint=0x7F),
    min_size=1,
    max_size=8,
)


def test_nested_png_maps_to_nested_webp() -> None:
    """Map ``a/b/c.png`` onto ``a/b/c.webp`` under the output root."""
    request = build_request(
        Path("/in/a/b/c.png"),
        input_root=Path("/in"),
        output_root=Path("/out"),
        quality=80,
    )

    assert request.relative_path == Path("a/b/c.png")
    assert request.relative_output_path == Path("a/b/c.webp")
    assert request.output_path == Path("/out/a/b/c.webp")
    assert request.output_dir == Path("/out/a/b")
    assert request.quality == 80


def test_top_level_file_maps_into_output_root() -> None:
    """Files directly under the input root land directly under the output root."""
    request = build_request(
        Path("/in/logo.svg"), input_root=Path("/in"), output_root=Path("/out"), quality=100
    )
    assert request.output_path == Path("/out/logo.webp")
    assert request.output_dir == Path("/out")


def test_only_final_suffix_is_replaced() -> None:
    """Keep inner dots of multi-dot names."""
    assert mirrored_output_path(Path("x/photo.v2.JPG")) == Path("x/photo.v2.webp")


def test_extension_checks_are_case_insensitive() -> None:
    """Lowercase the extension before comparing against the allow-list."""
    assert normalized_extension(Path("IMG_001.JPEG")) == ".jpeg"
    assert normalized_extension(Path("README")) == ""
    assert is_eligible(Path("IMG_001.JPEG"), {".jpeg"})
    assert not is_eligible(Path("notes.txt"), {".jpg", ".png"})


def test_build_request_rejects_paths_outside_root() -> None:
    """Refuse to map a file that is not under the input root."""
    with pytest.raises(ValueError):
        build_request(
            Path("/elsewhere/a.png"),
            input_root=Path("/in"),
            output_root=Path("/out"),
            quality=100,
        )


@given(
    dirs=st.lists(_segment, max_size=4),
    stem=_segment,
    ext=st.sampled_from([".jpg", ".jpeg", ".png", ".svg", ".PNG"]),
)
def test_output_mirrors_every_directory_segment(
    dirs: list[str], stem: str, ext: str
) -> None:
    """Output keeps every intermediate segment and swaps only the suffix."""
    input_root = Path("/data/in")
    output_root = Path("/data/out")
    source = input_root.joinpath(*dirs, f"{stem}{ext}")

    request = build_request(
        source, input_root=input_root, output_root=output_root, quality=50
    )

    assert request.output_path == output_root.joinpath(*dirs, f"{stem}.webp")
    assert request.relative_output_path.parts[:-1] == tuple(dirs)
    assert request.output_path.suffix == ".webp"
