"""Atlassian Assets configuration values."""

from __future__ import annotations

from dataclasses import dataclass

from .env import optional_env_var, parse_bool, require_env_vars
from .errors import ConfigurationError
from .http_resilience import CacheConfig, RateLimit, ResilienceConfig

DEFAULT_ATLASSIAN_HOST = "https://api.atlassian.com"
ASSETS_TIMEOUT_SECONDS = 30.0

HOST_ENV = "ATLASSIAN_HOST"
TOKEN_ENV = "ATLASSIAN_TOKEN"
MAIL_ENV = "ATLASSIAN_MAIL"
WORKSPACE_ENV = "ASSETS_WORKSPACE_ID"
DESTROY_OBJECT_ENV = "ASSETS_DESTROY_OBJECT"
OBSOLETE_ATTRIBUTE_ENV = "ASSETS_OBJECTTYPEATTRIBUTE_ID"
SCHEMA_CACHE_TTL_ENV = "ASSETS_SCHEMA_CACHE_TTL"


@dataclass(frozen=True, slots=True)
class FeaturesConfig:
    """Provider feature switches.

    ``destroy_object`` selects hard deletion. When it is ``False`` objects are
    marked obsolete instead, by writing ``"Obsolete"`` to the attribute named by
    ``obsolete_attribute_id``.
    """

    destroy_object: bool = True
    obsolete_attribute_id: str = ""


@dataclass(frozen=True, slots=True)
class AssetsConfig:
    host: str
    token: str
    mail: str
    workspace_id: str
    features: FeaturesConfig
    resilience: ResilienceConfig


def assets_base_url(host: str, workspace_id: str) -> str:
    return f"{host.rstrip('/')}/jsm/assets/workspace/{workspace_id}/v1/"


def validate_features(features: FeaturesConfig) -> FeaturesConfig:
    """Fail fast on a soft-delete setup without a usable fallback attribute."""

    if features.destroy_object:
        return features
    attribute_id = features.obsolete_attribute_id.strip()
    if not attribute_id:
        raise ConfigurationError(
            "destroy_object is disabled but no obsolete object type attribute id is "
            f"configured (set {OBSOLETE_ATTRIBUTE_ENV})"
        )
    if not attribute_id.isdigit():
        raise ConfigurationError(
            f"Obsolete object type attribute id must be numeric, got {attribute_id!r}"
        )
    return features


def _is_schema_listing(payload: object) -> bool:
    # attribute and icon listings are JSON arrays; single entities are never cached
    return isinstance(payload, list)


def build_resilience_config(
    *,
    host: str,
    workspace_id: str,
    mail: str,
    token: str,
    cache_ttl_seconds: float | None = None,
) -> ResilienceConfig:
    cache = (
        CacheConfig(ttl_seconds=cache_ttl_seconds, should_cache=_is_schema_listing)
        if cache_ttl_seconds is not None
        else None
    )
    return ResilienceConfig(
        name="assets",
        base_url=assets_base_url(host, workspace_id),
        timeout_seconds=ASSETS_TIMEOUT_SECONDS,
        ratelimit=RateLimit(max_calls=10, per_seconds=1.0),
        cache=cache,
        default_headers={"Accept": "application/json"},
        basic_auth=(mail, token),
    )


def _parse_cache_ttl(value: str | None) -> float | None:
    if value is None:
        return None
    try:
        ttl = float(value)
    except ValueError as exc:
        raise ConfigurationError(f"{SCHEMA_CACHE_TTL_ENV} must be a number of seconds") from exc
    if ttl <= 0:
        raise ConfigurationError(f"{SCHEMA_CACHE_TTL_ENV} must be positive")
    return ttl


def get_assets_config(
    *,
    host: str | None = None,
    token: str | None = None,
    mail: str | None = None,
    workspace_id: str | None = None,
    destroy_object: bool | None = None,
    obsolete_attribute_id: str | None = None,
) -> AssetsConfig:
    """Build the provider configuration once, explicit arguments winning over env vars."""

    values = require_env_vars(
        (TOKEN_ENV, MAIL_ENV, WORKSPACE_ENV),
        provided={TOKEN_ENV: token, MAIL_ENV: mail, WORKSPACE_ENV: workspace_id},
    )
    effective_host = host or optional_env_var(HOST_ENV) or DEFAULT_ATLASSIAN_HOST

    if destroy_object is None:
        raw_destroy = optional_env_var(DESTROY_OBJECT_ENV)
        destroy_object = (
            True if raw_destroy is None else parse_bool(DESTROY_OBJECT_ENV, raw_destroy)
        )
    if obsolete_attribute_id is None:
        obsolete_attribute_id = optional_env_var(OBSOLETE_ATTRIBUTE_ENV) or ""

    features = validate_features(
        FeaturesConfig(
            destroy_object=destroy_object,
            obsolete_attribute_id=obsolete_attribute_id.strip(),
        )
    )

    return AssetsConfig(
        host=effective_host,
        token=values[TOKEN_ENV],
        mail=values[MAIL_ENV],
        workspace_id=values[WORKSPACE_ENV],
        features=features,
        resilience=build_resilience_config(
            host=effective_host,
            workspace_id=values[WORKSPACE_ENV],
            mail=values[MAIL_ENV],
            token=values[TOKEN_ENV],
            cache_ttl_seconds=_parse_cache_ttl(optional_env_var(SCHEMA_CACHE_TTL_ENV)),
        ),
    )
