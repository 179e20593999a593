from pathlib import Path
from unittest.mock import patch

import pytest
from graphql import build_schema

FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def library_sdl_path():
    return FIXTURES_DIR / "library.graphql"


@pytest.fixture
def library_schema(library_sdl_path):
    return build_schema(library_sdl_path.read_text(encoding="utf-8"))


@pytest.fixture
def loaded_schema(library_schema):
    """Make every SchemaLoader return the library fixture schema."""
    with patch("schema_scout.loader.SchemaLoader.load", return_value=library_schema) as mock_load:
        yield mock_load
