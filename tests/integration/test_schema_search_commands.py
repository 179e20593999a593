"""
Tests for the schema search management commands.
"""

import json
from io import StringIO
from unittest.mock import patch

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError

from schema_scout.exceptions import SchemaLoadError

pytestmark = pytest.mark.integration


def test_search_schema_command(loaded_schema):
    out = StringIO()
    call_command("search_schema", "borrowed user", stdout=out)

    results = json.loads(out.getvalue())
    assert results == [
        {
            "elementType": "field",
            "name": "loans",
            "parentType": "User",
            "description": "Books borrowed by the user",
            "path": "User.loans",
            "returnType": "[Loan!]!",
            "args": [
                {"name": "first", "type": "Int"},
                {"name": "active", "type": "Boolean", "description": "Only active loans"},
            ],
        }
    ]


def test_search_schema_command_empty_query(loaded_schema):
    out = StringIO()
    call_command("search_schema", "   ", stdout=out)

    assert json.loads(out.getvalue()) == []


def test_search_schema_command_load_failure():
    with patch("schema_scout.loader.SchemaLoader.load", side_effect=SchemaLoadError("Introspection failed: boom")):
        with pytest.raises(CommandError, match="Failed to search schema"):
            call_command("search_schema", "user")


def test_schema_element_details_command(loaded_schema):
    out = StringIO()
    call_command("schema_element_details", "@cached", indent=0, stdout=out)

    details = json.loads(out.getvalue())
    assert details["elementType"] == "directive"
    assert details["args"] == [{"name": "ttl", "type": "Int!", "description": "Seconds to keep the value"}]


def test_schema_element_details_command_not_found(loaded_schema):
    with pytest.raises(CommandError, match="Element not found: User.password"):
        call_command("schema_element_details", "User.password")


def test_introspect_schema_command(library_sdl_path, settings):
    settings.SCHEMA_SCOUT = {"endpoint": "http://testserver.local/graphql", "schema": str(library_sdl_path)}
    out = StringIO()
    call_command("introspect_schema", stdout=out)

    output = out.getvalue()
    assert "type User implements Node" in output
    assert "enum BookStatus" in output


def test_introspect_schema_command_json_to_file(loaded_schema, tmp_path):
    target = tmp_path / "schema.json"
    out = StringIO()
    call_command("introspect_schema", json=True, output_file=str(target), stdout=out)

    data = json.loads(target.read_text(encoding="utf-8"))
    assert "__schema" in data
    assert "Schema written to" in out.getvalue()
