"""Typed option objects shared across conversion use-cases."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_INPUT_DIR = Path("public/images")
DEFAULT_OUTPUT_DIR = Path("public/webp")
DEFAULT_QUALITY = 100
DEFAULT_EXTENSIONS: frozenset[str] = frozenset({".jpg", ".jpeg", ".png", ".svg"})


@dataclass(frozen=True)
class ConvertOptions:
    """Per-run conversion options."""

    quality: int = DEFAULT_QUALITY
    extensions: frozenset[str] = DEFAULT_EXTENSIONS
    verbose: bool = True
    workers: int = 1
