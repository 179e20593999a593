"""
Default configuration for the schema-scout library.

Single source of truth for every setting the library consumes. Projects
override them through the ``SCHEMA_SCOUT`` Django setting or the
``SCHEMA_SCOUT_*`` environment variables (see ``schema_scout.config``).
"""

from __future__ import annotations

from typing import Any

LIBRARY_VERSION = "0.1.0"
LIBRARY_NAME = "schema-scout"


LIBRARY_DEFAULTS: dict[str, Any] = {
    "schema_scout": {
        "name": LIBRARY_NAME,
        "endpoint": "http://localhost:8000/graphql",
        "headers": {},
        # Local SDL file path or http(s) URL of an SDL document.
        "schema": None,
        # Search the host project's graphene schema instead of a remote one.
        "use_project_schema": False,
        "timeout_seconds": 30,
    },
}


def merge_settings(*settings_dicts: dict[str, Any]) -> dict[str, Any]:
    """
    Deep-merge settings dictionaries; later dictionaries win.
    """
    result: dict[str, Any] = {}
    for settings_dict in settings_dicts:
        if not settings_dict:
            continue
        for key, value in settings_dict.items():
            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = merge_settings(result[key], value)
            else:
                result[key] = value
    return result
