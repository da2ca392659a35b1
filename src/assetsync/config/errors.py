"""Configuration error definitions."""

from __future__ import annotations


class ConfigurationError(RuntimeError):
    """Raised when configuration values are invalid."""

    summary = "Invalid provider configuration"


class MissingConfigurationError(ConfigurationError):
    """Raised when required configuration values are absent or blank."""

    summary = "Missing provider configuration"
