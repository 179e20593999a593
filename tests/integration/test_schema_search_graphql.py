"""
Tests for the schema search GraphQL queries.
"""

import json
from unittest.mock import patch

import pytest

from schema_scout.exceptions import SchemaLoadError
from tests.schema import schema

pytestmark = pytest.mark.integration


def test_search_schema_query(loaded_schema):
    result = schema.execute(
        """
        query {
            searchSchema(query: "active") {
                elementType
                path
                parentType
                returnType
                args { name type }
            }
        }
        """
    )

    assert result.errors is None
    assert result.data["searchSchema"] == [
        {
            "elementType": "argument",
            "path": "User.loans(active)",
            "parentType": "User.loans",
            "returnType": None,
            "args": None,
        },
        {
            "elementType": "field",
            "path": "Loan.active",
            "parentType": "Loan",
            "returnType": "Boolean!",
            "args": [],
        },
    ]


def test_schema_element_details_query(loaded_schema):
    result = schema.execute('{ schemaElementDetails(path: "BookStatus") }')

    assert result.errors is None
    details = json.loads(result.data["schemaElementDetails"])
    assert details["kind"] == "ENUM"
    assert [value["name"] for value in details["values"]] == ["AVAILABLE", "BORROWED"]


def test_schema_element_details_query_not_found(loaded_schema):
    result = schema.execute('{ schemaElementDetails(path: "Book.isbn") }')

    assert result.errors is None
    assert result.data["schemaElementDetails"] is None


def test_search_schema_query_load_failure():
    with patch("schema_scout.loader.SchemaLoader.load", side_effect=SchemaLoadError("boom")):
        result = schema.execute('{ searchSchema(query: "user") { path } }')

    assert result.errors
    assert "Failed to search schema: boom" in result.errors[0].message


def test_search_project_schema(settings):
    settings.SCHEMA_SCOUT = {"endpoint": "http://testserver.local/graphql", "use_project_schema": True}
    result = schema.execute('{ searchSchema(query: "country") { path description } }')

    assert result.errors is None
    assert result.data["searchSchema"] == [
        {"path": "Query.authors(country)", "description": "Filter authors by country"},
    ]
