"""Validator configuration loaded from environment variables."""

from __future__ import annotations

import functools
import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger(__name__)


class ValidatorSettings(BaseSettings):
    """Settings loaded from environment variables with SHAPE_VALIDATOR_ prefix.

    Only the process environment is read: as a library, the validator
    never picks up the host application's ``.env`` file.
    """

    model_config = SettingsConfigDict(
        env_prefix="SHAPE_VALIDATOR_",
        extra="ignore",
        case_sensitive=False,
    )

    debug: bool = False

    # Error messages
    path_separator: str = "."
    max_rendered_value_length: int | None = None

    @field_validator("max_rendered_value_length")
    @classmethod
    def positive_length(cls, v: int | None) -> int | None:
        if v is not None and v <= 0:
            raise ValueError("max_rendered_value_length must be a positive integer")
        return v


def load_settings(**overrides: object) -> ValidatorSettings:
    """Load settings from environment, with optional overrides for testing."""
    settings = ValidatorSettings(**overrides)  # type: ignore[arg-type]

    if settings.debug:
        logger.info(
            "Loaded validator settings: path_separator=%r, max_rendered_value_length=%s",
            settings.path_separator,
            settings.max_rendered_value_length,
        )

    return settings


@functools.lru_cache(maxsize=1)
def get_settings() -> ValidatorSettings:
    """Return the process-wide settings, loading them on first use.

    Call ``get_settings.cache_clear()`` after changing the environment.
    """
    return load_settings()
