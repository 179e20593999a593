"""
GraphQL types for schema search results.
"""

from graphene import ObjectType, String
from graphene import List as GrapheneList


class ArgumentInfoType(ObjectType):
    """An argument of a field, as listed on a search result."""

    name = String(required=True)
    type = String(required=True, description="Printed type reference, e.g. [ID!]!")
    description = String()


class SearchableElementType(ObjectType):
    """
    GraphQL type for one schema search result.

    Fields:
        element_type: type, field, argument or directive
        name: The element's own name
        parent_type: Owning type, field path or directive path
        description: Element description, if any
        path: Address accepted by schemaElementDetails
        type_kind: Kind of a type element (OBJECT, ENUM, ...)
        return_type: Printed return type of an object/interface field
        args: Arguments of an object/interface field
    """

    element_type = String(required=True)
    name = String(required=True)
    parent_type = String()
    description = String()
    path = String(required=True)
    type_kind = String()
    return_type = String()
    args = GrapheneList(ArgumentInfoType)

    @staticmethod
    def from_element(element):
        return SearchableElementType(
            element_type=element.element_type.value,
            name=element.name,
            parent_type=element.parent_type,
            description=element.description,
            path=element.path,
            type_kind=element.type_kind.value if element.type_kind else None,
            return_type=element.return_type,
            args=(
                [ArgumentInfoType(name=arg.name, type=arg.type, description=arg.description) for arg in element.args]
                if element.args is not None
                else None
            ),
        )
