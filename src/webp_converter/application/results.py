"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from webp_converter.mapping import ConversionRequest
from webp_converter.types import OutcomeKind


@dataclass(frozen=True)
class FileOutcome:
    """Outcome of processing one eligible file."""

    request: ConversionRequest
    kind: OutcomeKind
    error: BaseException | None = None


@dataclass(frozen=True)
class ConversionReport:
    """Structured outcome of a whole run.

    ``discovered`` counts every file returned by discovery, before the
    extension filter is applied.
    """

    input_root: Path
    output_root: Path
    discovered: int
    outcomes: tuple[FileOutcome, ...] = field(default_factory=tuple)

    def _count(self, kind: OutcomeKind) -> int:
        return sum(1 for outcome in self.outcomes if outcome.kind == kind)

    @property
    def converted(self) -> int:
        return self._count("converted")

    @property
    def skipped(self) -> int:
        return self._count("skipped")

    @property
    def failed(self) -> int:
        return self._count("failed")

    @property
    def eligible(self) -> int:
        return len(self.outcomes)
