"""
Schema search package.

Flattens a GraphQL schema into searchable records, matches keywords against
them, and resolves element paths back to full details.
"""

from .collector import collect_searchable_elements
from .matcher import search_schema_elements
from .printer import print_type_ref
from .resolver import get_element_details
from .types import (
    ArgumentInfo,
    DirectiveDetails,
    ElementDetails,
    ElementType,
    EnumValueInfo,
    FieldDetails,
    FieldSummary,
    SearchableElement,
    TypeDetails,
    TypeKind,
)

__all__ = [
    "collect_searchable_elements",
    "search_schema_elements",
    "get_element_details",
    "print_type_ref",
    "ArgumentInfo",
    "DirectiveDetails",
    "ElementDetails",
    "ElementType",
    "EnumValueInfo",
    "FieldDetails",
    "FieldSummary",
    "SearchableElement",
    "TypeDetails",
    "TypeKind",
]
