# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Unit test configuration.

Every test collected below tests/unit/ gets the ``unit`` marker, so the
suite can be selected with ``pytest -m unit``. A module-level ``pytestmark``
in a conftest would not reach the test modules, hence the collection hook.
"""

import pytest


def pytest_collection_modifyitems(
    config: pytest.Config,
    items: list[pytest.Item],
) -> None:
    """Mark tests living under tests/unit with ``pytest.mark.unit``."""
    for item in items:
        if "tests/unit" not in str(item.path):
            continue
        if not any(marker.name == "unit" for marker in item.iter_markers()):
            item.add_marker(pytest.mark.unit)
