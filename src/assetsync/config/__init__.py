"""Application configuration helpers."""

from __future__ import annotations

from .assets import (
    DEFAULT_ATLASSIAN_HOST,
    AssetsConfig,
    FeaturesConfig,
    assets_base_url,
    build_resilience_config,
    get_assets_config,
    validate_features,
)
from .env import optional_env_var, parse_bool, require_env_vars
from .errors import ConfigurationError, MissingConfigurationError
from .http_resilience import (
    IDEMPOTENT_METHODS,
    CacheConfig,
    RateLimit,
    ResilienceConfig,
    RetryPolicy,
)
from .logging import configure_logging

__all__ = [
    "DEFAULT_ATLASSIAN_HOST",
    "IDEMPOTENT_METHODS",
    "AssetsConfig",
    "CacheConfig",
    "ConfigurationError",
    "FeaturesConfig",
    "MissingConfigurationError",
    "RateLimit",
    "ResilienceConfig",
    "RetryPolicy",
    "assets_base_url",
    "build_resilience_config",
    "configure_logging",
    "get_assets_config",
    "optional_env_var",
    "parse_bool",
    "require_env_vars",
    "validate_features",
]
