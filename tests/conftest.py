"""Shared pytest fixtures."""

from __future__ import annotations

import pytest

from aicontext.theme import ThemeCatalog
from tests.helpers import make_record


@pytest.fixture
def holiday_catalog() -> ThemeCatalog:
    return ThemeCatalog(
        [
            make_record("default_light"),
            make_record(
                "christmas_2024",
                category="seasonal",
                window=("2024-12-01T00:00:00Z", "2024-12-26T23:59:59Z"),
            ),
        ]
    )
