# tests/test_config.py

"""
Unit tests for reading service settings from environment values.
"""

import pytest

from catalog_service.config import (
    ConfigurationError,
    parse_api_prefix,
    parse_log_level,
    parse_origins,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("/api/products", "/api/products"),
        ("/api/products/", "/api/products"),
        (" /catalog ", "/catalog"),
    ],
)
def test_api_prefix_normalised(value, expected):
    assert parse_api_prefix(value) == expected


@pytest.mark.parametrize("value", ["/", "", "   ", "api/products"])
def test_api_prefix_rejected(value):
    with pytest.raises(ConfigurationError, match="API_PREFIX"):
        parse_api_prefix(value)


@pytest.mark.parametrize("value, expected", [("info", "INFO"), (" debug ", "DEBUG"), ("WARNING", "WARNING")])
def test_log_level_accepted(value, expected):
    assert parse_log_level(value) == expected


@pytest.mark.parametrize("value", ["LOUD", "", "Level 5"])
def test_log_level_rejected(value):
    with pytest.raises(ConfigurationError, match="LOG_LEVEL"):
        parse_log_level(value)


def test_origins_split_and_trimmed():
    assert parse_origins("*") == ["*"]
    assert parse_origins("http://a.test, http://b.test,,") == ["http://a.test", "http://b.test"]
