"""Image fixtures for integration tests."""

from __future__ import annotations

import random
from collections.abc import Callable
from pathlib import Path

import pytest
from PIL import Image

ImageFactory = Callable[..., Path]


def _noise(size: tuple[int, int], mode: str, seed: int) -> Image.Image:
    rng = random.Random(seed)
    channels = len(mode)
    data = bytes(rng.randrange(256) for _ in range(size[0] * size[1] * channels))
    return Image.frombytes(mode, size, data)


@pytest.fixture
def make_image() -> ImageFactory:
    """Write a noisy image to ``path`` in the format implied by its suffix."""

    def _make(
        path: Path,
        *,
        mode: str = "RGB",
        size: tuple[int, int] = (48, 48),
        seed: int = 0,
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        _noise(size, mode, seed).save(path)
        return path

    return _make


@pytest.fixture
def make_corrupt() -> ImageFactory:
    """Write bytes that no decoder accepts under an image suffix."""

    def _make(path: Path) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(b"\x89PNG\r\n\x1a\n this is not really a png")
        return path

    return _make
