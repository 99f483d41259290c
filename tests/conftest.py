from __future__ import annotations

import pytest

from querychain import Select


@pytest.fixture
def builder() -> Select:
    """Fixture providing a fresh SELECT builder."""
    return Select()


@pytest.fixture
def sample_subquery() -> str:
    """Fixture providing a rendered subquery."""
    return "SELECT column_one, column_two FROM table_one AS to"
