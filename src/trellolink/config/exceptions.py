"""Exceptions for configuration loading."""


class ConfigError(Exception):
    """Raised when configuration is invalid or missing."""
