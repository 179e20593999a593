from .base import BaseAPIView
from .search import SchemaElementDetailAPIView, SchemaSDLAPIView, SchemaSearchAPIView

__all__ = [
    "BaseAPIView",
    "SchemaSearchAPIView",
    "SchemaElementDetailAPIView",
    "SchemaSDLAPIView",
]
