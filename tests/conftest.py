"""Pytest configuration and fixtures."""

from __future__ import annotations

import pytest


@pytest.fixture
def journal() -> list[str]:
    """Shared close-order journal for resource doubles."""
    return []
