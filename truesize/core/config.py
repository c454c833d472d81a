"""Configuration loaded from environment variables.

All values have defaults matching ``truesize.core.constants``.  The map
layer loads a ``TrueSizeConfig`` once at startup and passes its values
into the transforms, the catalog and the clone sessions.

Fail-fast validation:
    ``from_env()`` raises ``ConfigValidationError`` if any numeric value
    is out of its valid range.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from truesize.core.constants import (
    DEAD_ZONE_TOLERANCE,
    DEFAULT_SEARCH_LIMIT,
    DEFAULT_SEARCH_MIN_QUERY,
    MAX_CLAMP_LATITUDE_DEG,
    MIN_CLAMP_LATITUDE_DEG,
)
from truesize.core.exceptions import TrueSizeError


class ConfigValidationError(TrueSizeError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class TrueSizeConfig:
    """Immutable runtime configuration.

    Attributes:
        min_latitude_deg: Lower clamp for absolute latitude before cosines.
        max_latitude_deg: Upper clamp for absolute latitude before cosines.
        dead_zone: Tolerance around a scale factor of 1.0 that is ignored.
        search_min_query: Shortest query the catalog will answer.
        search_limit: Maximum number of catalog search results.
    """

    min_latitude_deg: float = MIN_CLAMP_LATITUDE_DEG
    max_latitude_deg: float = MAX_CLAMP_LATITUDE_DEG
    dead_zone: float = DEAD_ZONE_TOLERANCE
    search_min_query: int = DEFAULT_SEARCH_MIN_QUERY
    search_limit: int = DEFAULT_SEARCH_LIMIT

    @classmethod
    def from_env(cls) -> TrueSizeConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``TRUESIZE_DEAD_ZONE=abc``).
        """
        config = cls(
            min_latitude_deg=float(
                os.getenv("TRUESIZE_MIN_LATITUDE_DEG", str(MIN_CLAMP_LATITUDE_DEG))
            ),
            max_latitude_deg=float(
                os.getenv("TRUESIZE_MAX_LATITUDE_DEG", str(MAX_CLAMP_LATITUDE_DEG))
            ),
            dead_zone=float(os.getenv("TRUESIZE_DEAD_ZONE", str(DEAD_ZONE_TOLERANCE))),
            search_min_query=int(
                os.getenv("TRUESIZE_SEARCH_MIN_QUERY", str(DEFAULT_SEARCH_MIN_QUERY))
            ),
            search_limit=int(os.getenv("TRUESIZE_SEARCH_LIMIT", str(DEFAULT_SEARCH_LIMIT))),
        )
        _validate(config)
        return config


def _validate(config: TrueSizeConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.max_latitude_deg <= 0 or config.max_latitude_deg >= 90:
        raise ConfigValidationError(
            "TRUESIZE_MAX_LATITUDE_DEG",
            config.max_latitude_deg,
            "must be between 0 and 90 exclusive (degrees)",
        )

    if config.min_latitude_deg <= 0 or config.min_latitude_deg >= config.max_latitude_deg:
        raise ConfigValidationError(
            "TRUESIZE_MIN_LATITUDE_DEG",
            config.min_latitude_deg,
            f"must be > 0 and < TRUESIZE_MAX_LATITUDE_DEG ({config.max_latitude_deg})",
        )

    if config.dead_zone < 0:
        raise ConfigValidationError(
            "TRUESIZE_DEAD_ZONE",
            config.dead_zone,
            "must be >= 0",
        )

    if config.search_min_query < 1:
        raise ConfigValidationError(
            "TRUESIZE_SEARCH_MIN_QUERY",
            config.search_min_query,
            "must be >= 1 (characters)",
        )

    if config.search_limit < 1:
        raise ConfigValidationError(
            "TRUESIZE_SEARCH_LIMIT",
            config.search_limit,
            "must be >= 1",
        )
