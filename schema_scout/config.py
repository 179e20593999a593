"""Configuration helpers for schema loading and search."""

from __future__ import annotations

import json
import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from django.conf import settings as django_settings
from django.core.exceptions import ImproperlyConfigured, ValidationError
from django.core.validators import URLValidator

from .defaults import LIBRARY_DEFAULTS, merge_settings

logger = logging.getLogger(__name__)

SETTINGS_NAME = "SCHEMA_SCOUT"

# Environment variable -> settings key
ENV_VARIABLES = {
    "SCHEMA_SCOUT_NAME": "name",
    "SCHEMA_SCOUT_ENDPOINT": "endpoint",
    "SCHEMA_SCOUT_HEADERS": "headers",
    "SCHEMA_SCOUT_SCHEMA": "schema",
    "SCHEMA_SCOUT_USE_PROJECT_SCHEMA": "use_project_schema",
    "SCHEMA_SCOUT_TIMEOUT": "timeout_seconds",
}


@dataclass(frozen=True)
class SchemaScoutSettings:
    name: str = "schema-scout"
    endpoint: str = "http://localhost:8000/graphql"
    headers: dict[str, str] = field(default_factory=dict)
    schema: Optional[str] = None
    use_project_schema: bool = False
    timeout_seconds: int = 30

    @property
    def schema_is_url(self) -> bool:
        return bool(self.schema) and self.schema.startswith(("http://", "https://"))

    @property
    def source_label(self) -> str:
        """Human readable description of where the schema comes from."""
        if self.schema:
            return self.schema
        if self.use_project_schema:
            return "project schema"
        return self.endpoint


def get_schema_scout_settings(environ: Optional[Mapping[str, str]] = None) -> SchemaScoutSettings:
    """
    Build settings from library defaults, the ``SCHEMA_SCOUT`` Django setting
    and ``SCHEMA_SCOUT_*`` environment variables, in increasing priority.
    """
    defaults = LIBRARY_DEFAULTS.get("schema_scout", {})
    merged = merge_settings(defaults)

    external = getattr(django_settings, SETTINGS_NAME, None)
    if isinstance(external, dict):
        merged = merge_settings(merged, external)
    elif external is not None:
        raise ImproperlyConfigured(f"{SETTINGS_NAME} must be a dict")

    env_overrides = _read_environment(os.environ if environ is None else environ)
    if env_overrides:
        # Headers from the environment replace configured headers entirely.
        merged.update(env_overrides)

    return _build_settings(merged)


def _read_environment(environ: Mapping[str, str]) -> dict[str, Any]:
    overrides: dict[str, Any] = {}
    for variable, key in ENV_VARIABLES.items():
        value = environ.get(variable)
        if value is None or value == "":
            continue
        if key == "headers":
            overrides[key] = _parse_headers_json(value, variable)
        elif key == "use_project_schema":
            overrides[key] = value.strip().lower() == "true"
        else:
            overrides[key] = value
    return overrides


def _build_settings(config: dict[str, Any]) -> SchemaScoutSettings:
    endpoint = str(config.get("endpoint") or "").strip()
    _validate_url(endpoint, "endpoint")

    return SchemaScoutSettings(
        name=str(config.get("name") or LIBRARY_DEFAULTS["schema_scout"]["name"]),
        endpoint=endpoint,
        headers=_normalize_headers(config.get("headers")),
        schema=_coerce_optional_str(config.get("schema")),
        use_project_schema=bool(config.get("use_project_schema", False)),
        timeout_seconds=_coerce_timeout(config.get("timeout_seconds")),
    )


def _validate_url(value: str, setting: str) -> None:
    try:
        URLValidator(schemes=["http", "https"])(value)
    except ValidationError as exc:
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME} {setting} must be a valid URL, got {value!r}"
        ) from exc


def _parse_headers_json(raw: str, source: str) -> dict[str, str]:
    try:
        parsed = json.loads(raw)
    except (TypeError, ValueError) as exc:
        raise ImproperlyConfigured(f"{source} must be a valid JSON string") from exc
    if not isinstance(parsed, dict):
        raise ImproperlyConfigured(f"{source} must be a JSON object")
    return parsed


def _normalize_headers(value: Any) -> dict[str, str]:
    if not value:
        return {}
    if isinstance(value, str):
        value = _parse_headers_json(value, f"{SETTINGS_NAME} headers")
    if not isinstance(value, dict):
        raise ImproperlyConfigured(f"{SETTINGS_NAME} headers must be a dict")
    return {str(key): str(header) for key, header in value.items() if key}


def _coerce_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _coerce_timeout(value: Any) -> int:
    if value is None or value == "":
        return LIBRARY_DEFAULTS["schema_scout"]["timeout_seconds"]
    try:
        timeout = int(value)
    except (TypeError, ValueError) as exc:
        raise ImproperlyConfigured(
            f"{SETTINGS_NAME} timeout_seconds must be an integer, got {value!r}"
        ) from exc
    if timeout <= 0:
        raise ImproperlyConfigured(f"{SETTINGS_NAME} timeout_seconds must be greater than 0")
    return timeout
