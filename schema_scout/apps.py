"""
Django app configuration for schema-scout.
"""

import logging

from django.apps import AppConfig as BaseAppConfig
from django.core.exceptions import ImproperlyConfigured

logger = logging.getLogger(__name__)


class AppConfig(BaseAppConfig):
    """Django app configuration for schema-scout."""

    name = "schema_scout"
    verbose_name = "Schema Scout"
    label = "schema_scout"

    def ready(self):
        """Validate configuration once Django has loaded."""
        from .config import get_schema_scout_settings

        try:
            settings = get_schema_scout_settings()
        except ImproperlyConfigured as e:
            logger.error(f"Invalid schema-scout configuration: {e}")
            if self._is_debug_mode():
                raise
            return

        logger.info(f"Schema scout '{settings.name}' initialized for {settings.source_label}")

    def _is_debug_mode(self) -> bool:
        from django.conf import settings

        return getattr(settings, "DEBUG", False)
