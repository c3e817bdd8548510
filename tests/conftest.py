"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

import pytest

_SUITE_MARKERS = {
    "e2e_tests": pytest.mark.e2e,
    "integration_tests": pytest.mark.integration,
    "unit_tests": pytest.mark.unit,
}


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach the suite marker matching each test's top-level directory."""
    del config
    for item in items:
        for part in item.path.parts:
            marker = _SUITE_MARKERS.get(part)
            if marker is not None:
                item.add_marker(marker)
                break
