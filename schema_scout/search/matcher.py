"""
Keyword matching over collected schema elements.
"""

from typing import Iterable

from .types import SearchableElement


def tokenize_query(query: str) -> list[str]:
    return [keyword for keyword in query.lower().split() if keyword]


def search_schema_elements(elements: Iterable[SearchableElement], query: str) -> list[SearchableElement]:
    """
    Keep the elements whose name or description contains every keyword.

    Matching is case-insensitive substring containment, ANDed across the
    whitespace-separated keywords. An empty query matches nothing.
    """
    keywords = tokenize_query(query)
    if not keywords:
        return []

    return [
        element for element in elements
        if all(keyword in element.searchable_text for keyword in keywords)
    ]
