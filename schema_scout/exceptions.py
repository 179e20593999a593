"""
Custom exceptions for schema loading and search.
"""

from typing import Optional


class SchemaScoutError(Exception):
    """Base exception for schema-scout errors."""


class SchemaLoadError(SchemaScoutError):
    """Raised when a schema cannot be fetched, read or built."""

    def __init__(self, message: str, source: Optional[str] = None):
        self.source = source
        super().__init__(message)
