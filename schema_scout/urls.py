"""
URL configuration for schema-scout.

Include it in a project with ``path("schema-scout/", include("schema_scout.urls"))``.
"""

from django.urls import include, path

urlpatterns = [
    path("api/v1/", include("schema_scout.api.urls", namespace="schema_scout_api")),
]
