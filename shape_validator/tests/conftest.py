"""Shared fixtures for shape_validator tests.

Settings are cached process-wide, so every test starts and ends with a
cleared cache and the environment variables it sets are undone by
``monkeypatch``.
"""

from __future__ import annotations

from collections.abc import Iterator

import pytest

from shape_validator.config import get_settings
from shape_validator.factories import validator


@pytest.fixture(autouse=True)
def _fresh_settings() -> Iterator[None]:
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def user_schema():
    """A nested object schema resembling an API user payload."""
    return validator.object(
        {
            "id": validator.number(),
            "name": validator.string(),
            "email": validator.string().optional(),
            "settings": validator.object(
                {
                    "theme": validator.string(),
                    "notifications": validator.boolean(),
                }
            ),
        }
    )
