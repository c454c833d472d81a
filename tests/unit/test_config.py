"""Tests for runtime configuration.

Covers:
- Default values match the shared constants
- Loading from environment variables with type coercion
- Fail-fast range validation
"""

from __future__ import annotations

import os
from unittest.mock import patch

import pytest

from truesize.core.config import ConfigValidationError, TrueSizeConfig


class TestTrueSizeConfigDefaults:
    def test_clamp_bounds(self) -> None:
        cfg = TrueSizeConfig()
        assert cfg.min_latitude_deg == 0.1
        assert cfg.max_latitude_deg == 85.0

    def test_dead_zone(self) -> None:
        assert TrueSizeConfig().dead_zone == 0.01

    def test_search(self) -> None:
        cfg = TrueSizeConfig()
        assert cfg.search_min_query == 2
        assert cfg.search_limit == 10

    def test_frozen(self) -> None:
        with pytest.raises(AttributeError):
            TrueSizeConfig().dead_zone = 0.5  # type: ignore[misc]


class TestTrueSizeConfigFromEnv:
    def test_loads_from_environment(self) -> None:
        env = {
            "TRUESIZE_MIN_LATITUDE_DEG": "0.5",
            "TRUESIZE_MAX_LATITUDE_DEG": "80",
            "TRUESIZE_DEAD_ZONE": "0.02",
            "TRUESIZE_SEARCH_MIN_QUERY": "3",
            "TRUESIZE_SEARCH_LIMIT": "25",
        }
        with patch.dict(os.environ, env, clear=False):
            cfg = TrueSizeConfig.from_env()

        assert cfg.min_latitude_deg == 0.5
        assert cfg.max_latitude_deg == 80.0
        assert cfg.dead_zone == 0.02
        assert cfg.search_min_query == 3
        assert cfg.search_limit == 25

    def test_defaults_when_env_missing(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            cfg = TrueSizeConfig.from_env()
        assert cfg == TrueSizeConfig()

    def test_unparseable_number(self) -> None:
        with patch.dict(os.environ, {"TRUESIZE_DEAD_ZONE": "abc"}, clear=True), pytest.raises(
            ValueError
        ):
            TrueSizeConfig.from_env()


class TestTrueSizeConfigValidation:
    @pytest.mark.parametrize(
        ("key", "value"),
        [
            ("TRUESIZE_MAX_LATITUDE_DEG", "90"),
            ("TRUESIZE_MAX_LATITUDE_DEG", "0"),
            ("TRUESIZE_MIN_LATITUDE_DEG", "0"),
            ("TRUESIZE_MIN_LATITUDE_DEG", "86"),
            ("TRUESIZE_DEAD_ZONE", "-0.1"),
            ("TRUESIZE_SEARCH_MIN_QUERY", "0"),
            ("TRUESIZE_SEARCH_LIMIT", "0"),
        ],
    )
    def test_out_of_range(self, key: str, value: str) -> None:
        with patch.dict(os.environ, {key: value}, clear=True), pytest.raises(
            ConfigValidationError, match=key
        ) as exc_info:
            TrueSizeConfig.from_env()
        assert exc_info.value.key == key
        assert exc_info.value.code == "CONFIG_VALIDATION_FAILED"

    def test_zero_dead_zone_allowed(self) -> None:
        with patch.dict(os.environ, {"TRUESIZE_DEAD_ZONE": "0"}, clear=True):
            assert TrueSizeConfig.from_env().dead_zone == 0.0
