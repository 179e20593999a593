from .queries import SchemaSearchQuery
from .types import ArgumentInfoType, SearchableElementType

__all__ = ["SchemaSearchQuery", "SearchableElementType", "ArgumentInfoType"]
