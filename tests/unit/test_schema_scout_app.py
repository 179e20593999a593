import pytest
from django.apps import apps
from django.core.exceptions import ImproperlyConfigured

pytestmark = pytest.mark.unit


def test_ready_tolerates_invalid_configuration_outside_debug(settings):
    settings.DEBUG = False
    settings.SCHEMA_SCOUT = {"endpoint": "not a url"}

    apps.get_app_config("schema_scout").ready()


def test_ready_raises_invalid_configuration_in_debug(settings):
    settings.DEBUG = True
    settings.SCHEMA_SCOUT = {"endpoint": "not a url"}

    with pytest.raises(ImproperlyConfigured):
        apps.get_app_config("schema_scout").ready()
