"""Pydantic schemas for runtime validation of conversion inputs."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ConversionConfig(BaseModel):
    """Validated configuration for one directory conversion run."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    input_dir: Path
    output_dir: Path
    quality: int = Field(default=100, ge=0, le=100)
    extensions: frozenset[str]
    verbose: bool = True
    workers: int = Field(default=1, ge=1)

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalize_extensions(cls, value: object) -> frozenset[str]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple, set, frozenset)):
            raise ValueError("extensions must be a collection of strings.")
        normalized: set[str] = set()
        for item in value:
            if not isinstance(item, str):
                raise ValueError("extensions must contain only strings.")
            ext = item.strip().lower()
            if not ext or ext == ".":
                raise ValueError("extensions cannot contain empty entries.")
            normalized.add(ext if ext.startswith(".") else f".{ext}")
        if not normalized:
            raise ValueError("extensions must contain at least one entry.")
        return frozenset(normalized)

    @property
    def input_root(self) -> Path:
        """Absolute input root."""
        return self.input_dir.resolve()

    @property
    def output_root(self) -> Path:
        """Absolute output root."""
        return self.output_dir.resolve()
