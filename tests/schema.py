"""
Graphene schema used as the host project schema in tests.
"""

import graphene

from schema_scout.graphql import SchemaSearchQuery


class Author(graphene.ObjectType):
    """A person who writes books"""

    name = graphene.String(required=True)


class Query(SchemaSearchQuery, graphene.ObjectType):
    authors = graphene.List(
        graphene.NonNull(Author),
        country=graphene.String(description="Filter authors by country"),
    )


schema = graphene.Schema(query=Query)
