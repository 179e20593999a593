"""
Schema loading.

Builds a graphql-core ``GraphQLSchema`` from one of four sources, picked in
this order: a remote SDL URL, a local SDL file, the host project's graphene
schema, or live introspection of the configured endpoint.
"""

import json
import logging
from pathlib import Path
from typing import Any, Optional

import requests
from graphql import (
    GraphQLError,
    GraphQLSchema,
    build_client_schema,
    build_schema,
    get_introspection_query,
    print_schema,
)

from .config import SchemaScoutSettings, get_schema_scout_settings
from .exceptions import SchemaLoadError

logger = logging.getLogger(__name__)


class SchemaLoader:
    """Loads the configured schema; every call fetches afresh."""

    def __init__(self, settings: Optional[SchemaScoutSettings] = None):
        self.settings = settings or get_schema_scout_settings()

    def load(self) -> GraphQLSchema:
        settings = self.settings
        logger.debug(f"Loading GraphQL schema from {settings.source_label}")
        if settings.schema_is_url:
            return self._build_from_sdl(self.fetch_remote_sdl(settings.schema), settings.schema)
        if settings.schema:
            return self._build_from_sdl(self.read_local_sdl(settings.schema), settings.schema)
        if settings.use_project_schema:
            return self.project_schema()
        return self.introspect_endpoint()

    def introspect(self) -> str:
        """Return the loaded schema as SDL."""
        return print_schema(self.load())

    def fetch_remote_sdl(self, url: str) -> str:
        try:
            response = requests.get(url, timeout=self.settings.timeout_seconds)
        except requests.RequestException as exc:
            logger.error(f"Failed to fetch schema from {url}: {exc}")
            raise SchemaLoadError(f"Failed to fetch schema: {exc}", source=url) from exc
        if not response.ok:
            raise SchemaLoadError(
                f"Failed to fetch schema: {response.status_code} {response.reason}", source=url
            )
        return response.text

    def read_local_sdl(self, path: str) -> str:
        try:
            return Path(path).read_text(encoding="utf-8")
        except OSError as exc:
            logger.error(f"Failed to read schema file {path}: {exc}")
            raise SchemaLoadError(f"Failed to read schema file: {exc}", source=path) from exc

    def project_schema(self) -> GraphQLSchema:
        from graphene_django.settings import graphene_settings

        schema = graphene_settings.SCHEMA
        if not schema:
            raise SchemaLoadError("GRAPHENE.SCHEMA is not configured or could not be loaded.")
        return getattr(schema, "graphql_schema", schema)

    def introspect_endpoint(self) -> GraphQLSchema:
        endpoint = self.settings.endpoint
        headers = {"Content-Type": "application/json", **self.settings.headers}
        try:
            response = requests.post(
                endpoint,
                json={"query": get_introspection_query()},
                headers=headers,
                timeout=self.settings.timeout_seconds,
            )
        except requests.RequestException as exc:
            logger.error(f"Introspection request to {endpoint} failed: {exc}")
            raise SchemaLoadError(f"Introspection failed: {exc}", source=endpoint) from exc

        if not response.ok:
            raise SchemaLoadError(
                f"Introspection failed: {response.status_code} {response.reason}", source=endpoint
            )

        payload = self._decode_json(response, endpoint)
        if payload.get("errors"):
            raise SchemaLoadError(
                f"Introspection returned errors: {json.dumps(payload['errors'])}", source=endpoint
            )
        data = payload.get("data")
        if not isinstance(data, dict):
            raise SchemaLoadError("Introspection response has no data", source=endpoint)

        try:
            return build_client_schema(data)
        except (GraphQLError, TypeError) as exc:
            raise SchemaLoadError(f"Invalid introspection result: {exc}", source=endpoint) from exc

    @staticmethod
    def _decode_json(response: requests.Response, endpoint: str) -> dict[str, Any]:
        try:
            payload = response.json()
        except ValueError as exc:
            raise SchemaLoadError("Introspection response is not JSON", source=endpoint) from exc
        if not isinstance(payload, dict):
            raise SchemaLoadError("Introspection response is not a JSON object", source=endpoint)
        return payload

    @staticmethod
    def _build_from_sdl(sdl: str, source: str) -> GraphQLSchema:
        try:
            return build_schema(sdl)
        except (GraphQLError, TypeError) as exc:
            logger.error(f"Invalid SDL in {source}: {exc}")
            raise SchemaLoadError(f"Invalid schema definition: {exc}", source=source) from exc


def load_schema(settings: Optional[SchemaScoutSettings] = None) -> GraphQLSchema:
    """Load the configured schema."""
    return SchemaLoader(settings).load()
