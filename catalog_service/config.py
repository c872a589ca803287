# catalog_service/config.py

"""
Service configuration read from environment variables.
Fails fast with a clear message when a setting cannot be used.
"""
import logging
import os


class ConfigurationError(Exception):
    """Raised when a setting from the environment is invalid."""
    pass


def parse_api_prefix(value: str) -> str:
    """Normalise the route prefix; it must name a path below the root."""
    prefix = value.strip().rstrip("/")
    if not prefix.startswith("/"):
        raise ConfigurationError(
            f"API_PREFIX must start with '/' and name a path below the root, got {value!r}"
        )
    return prefix


def parse_log_level(value: str) -> str:
    level = value.strip().upper()
    # getLevelName returns an int only for registered level names
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL, got {value!r}"
        )
    return level


def parse_origins(value: str) -> list:
    """Comma separated list, "*" allows every origin."""
    return [origin.strip() for origin in value.split(",") if origin.strip()]


# Read settings from environment variables, with defaults for local/dev
SERVICE_NAME = os.getenv("SERVICE_NAME", "product-service")
API_PREFIX = parse_api_prefix(os.getenv("API_PREFIX", "/api/products"))
LOG_LEVEL = parse_log_level(os.getenv("LOG_LEVEL", "INFO"))
CORS_ALLOW_ORIGINS = parse_origins(os.getenv("CORS_ALLOW_ORIGINS", "*"))
