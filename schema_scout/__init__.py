"""
schema-scout: keyword search and path lookup over GraphQL schemas.
"""

from .defaults import LIBRARY_VERSION

__version__ = LIBRARY_VERSION
