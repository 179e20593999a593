"""
Base API view for schema search endpoints.
"""

import logging
from datetime import datetime
from typing import Any, Optional

from django.conf import settings
from django.http import HttpRequest, JsonResponse
from django.utils.decorators import method_decorator
from django.views import View
from django.views.decorators.csrf import csrf_exempt

from ...services import SchemaSearchService

logger = logging.getLogger(__name__)


@method_decorator(csrf_exempt, name='dispatch')
class BaseAPIView(View):
    """Base class for API views with common functionality."""

    http_method_names = ["get", "options"]

    def dispatch(self, request: HttpRequest, *args, **kwargs):
        """Handle CORS and common headers."""
        response = super().dispatch(request, *args, **kwargs)

        if getattr(settings, "SCHEMA_SCOUT_API_CORS_ENABLED", True):
            allowed_origins = getattr(settings, "SCHEMA_SCOUT_API_CORS_ALLOWED_ORIGINS", [])
            origin = request.META.get("HTTP_ORIGIN")
            if not allowed_origins:
                response["Access-Control-Allow-Origin"] = "*"
            elif origin and origin in allowed_origins:
                response["Access-Control-Allow-Origin"] = origin
                response["Vary"] = "Origin"
            response["Access-Control-Allow-Methods"] = "GET, OPTIONS"
            response["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        return response

    def options(self, request: HttpRequest, *args, **kwargs):
        """Handle preflight requests."""
        return JsonResponse({}, status=200)

    def get_service(self) -> SchemaSearchService:
        return SchemaSearchService()

    def json_response(self, data: dict[str, Any], status: int = 200) -> JsonResponse:
        """Create a JSON response."""
        return JsonResponse({'timestamp': datetime.now().isoformat(), 'status': 'success' if 200 <= status < 300 else 'error', 'data': data}, status=status)

    def error_response(self, message: str, status: int = 400, details: Optional[dict] = None) -> JsonResponse:
        """Create an error response."""
        return self.json_response({'message': message, 'details': details or {}}, status=status)
