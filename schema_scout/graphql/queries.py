"""
GraphQL queries exposing schema search.

Mix ``SchemaSearchQuery`` into a project's root query type to expose
``searchSchema`` and ``schemaElementDetails``.
"""

import logging

import graphene
from graphene import Field, ObjectType, String
from graphene import List as GrapheneList
from graphql.error import GraphQLError

from ..exceptions import SchemaLoadError
from ..services import SchemaSearchService
from .types import SearchableElementType

logger = logging.getLogger(__name__)


class SchemaSearchQuery(ObjectType):
    """
    GraphQL queries for searching the configured schema.
    """

    search_schema = Field(
        GrapheneList(SearchableElementType),
        query=String(required=True),
        description=(
            "Search the schema for types, fields, arguments and directives matching "
            "the given keywords. Supports multiple keywords separated by spaces."
        ),
    )

    schema_element_details = Field(
        graphene.JSONString,
        path=String(required=True),
        description=(
            "Get detailed information about a schema element by its path "
            "(e.g. 'Query.users', 'User', '@deprecated')."
        ),
    )

    def resolve_search_schema(self, info, query: str, **kwargs):
        """
        Resolve schema search results.

        Args:
            info: GraphQL resolve info
            query: Keywords separated by spaces

        Returns:
            List of SearchableElementType in schema order
        """
        try:
            results = SchemaSearchService().search(query)
        except SchemaLoadError as e:
            logger.error(f"Schema search query failed: {e}")
            raise GraphQLError(f"Failed to search schema: {e}")
        return [SearchableElementType.from_element(element) for element in results]

    def resolve_schema_element_details(self, info, path: str, **kwargs):
        try:
            details = SchemaSearchService().element_details(path)
        except SchemaLoadError as e:
            logger.error(f"Schema element details query failed: {e}")
            raise GraphQLError(f"Failed to get element details: {e}")
        return details.to_dict() if details is not None else None
