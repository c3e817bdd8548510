"""Shared type aliases for converter modules."""

from __future__ import annotations

from typing import Literal, TypeAlias

OutcomeKind: TypeAlias = Literal["converted", "skipped", "failed"]
