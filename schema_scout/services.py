"""
Service facade used by the management commands, REST views and GraphQL
queries. Each call loads the schema afresh; nothing is cached between calls.
"""

import logging
from typing import Optional

from .config import SchemaScoutSettings
from .loader import SchemaLoader
from .search import (
    ElementDetails,
    SearchableElement,
    collect_searchable_elements,
    get_element_details,
    search_schema_elements,
)

logger = logging.getLogger(__name__)


class SchemaSearchService:
    """Keyword search and path lookup over the configured schema."""

    def __init__(
        self,
        settings: Optional[SchemaScoutSettings] = None,
        loader: Optional[SchemaLoader] = None,
    ):
        self.loader = loader or SchemaLoader(settings)

    @property
    def settings(self) -> SchemaScoutSettings:
        return self.loader.settings

    def search(self, query: str) -> list[SearchableElement]:
        logger.debug("Searching schema for %r", query)
        elements = collect_searchable_elements(self.loader.load())
        results = search_schema_elements(elements, query)
        logger.info(
            "Schema search for %r matched %d of %d elements", query, len(results), len(elements)
        )
        return results

    def element_details(self, path: str) -> Optional[ElementDetails]:
        details = get_element_details(path, self.loader.load())
        if details is None:
            logger.info("Schema element not found: %s", path)
        return details

    def introspect(self) -> str:
        return self.loader.introspect()
