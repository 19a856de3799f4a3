"""Shared test configuration and fixtures."""

from datetime import datetime, timezone

import pytest


@pytest.fixture
def fixed_time():
    """A fixed UTC timestamp so controlids are predictable."""
    return datetime(2024, 1, 15, 10, 30, 45, tzinfo=timezone.utc)
