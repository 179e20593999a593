"""
Schema search and element detail API views.
"""

import logging

from django.http import HttpRequest, JsonResponse

from ...exceptions import SchemaLoadError
from .base import BaseAPIView

logger = logging.getLogger(__name__)


class SchemaSearchAPIView(BaseAPIView):
    """Keyword search over types, fields, arguments and directives."""

    def get(self, request: HttpRequest) -> JsonResponse:
        query = request.GET.get("q", "")
        try:
            results = self.get_service().search(query)
        except SchemaLoadError as e:
            logger.error(f"Error searching schema: {e}")
            return self.error_response(f"Failed to search schema: {e}", status=502, details={'source': e.source})
        return self.json_response({'query': query, 'count': len(results), 'results': [element.to_dict() for element in results]})


class SchemaElementDetailAPIView(BaseAPIView):
    """Full details of a single element addressed by path."""

    def get(self, request: HttpRequest, element_path: str) -> JsonResponse:
        try:
            details = self.get_service().element_details(element_path)
        except SchemaLoadError as e:
            logger.error(f"Error getting schema element '{element_path}': {e}")
            return self.error_response(f"Failed to get element details: {e}", status=502, details={'source': e.source})
        if details is None:
            return self.error_response(f"Element not found: {element_path}", status=404)
        return self.json_response({'element': details.to_dict()})


class SchemaSDLAPIView(BaseAPIView):
    """The whole schema as SDL."""

    def get(self, request: HttpRequest) -> JsonResponse:
        try:
            sdl = self.get_service().introspect()
        except SchemaLoadError as e:
            logger.error(f"Error introspecting schema: {e}")
            return self.error_response(f"Failed to introspect schema: {e}", status=502, details={'source': e.source})
        return self.json_response({'sdl': sdl})
