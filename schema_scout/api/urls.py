"""
URL patterns for the schema search REST API.
"""

from django.urls import path

from .views import SchemaElementDetailAPIView, SchemaSDLAPIView, SchemaSearchAPIView

app_name = "schema_scout_api"

urlpatterns = [
    path("search/", SchemaSearchAPIView.as_view(), name="search"),
    path("elements/<str:element_path>/", SchemaElementDetailAPIView.as_view(), name="element-detail"),
    path("sdl/", SchemaSDLAPIView.as_view(), name="sdl"),
]
