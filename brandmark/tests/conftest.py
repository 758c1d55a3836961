"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient

from brandmark.engine.data_models import BrandConcept


@pytest.fixture
def client() -> TestClient:
    """Create a test client for the FastAPI app."""
    from brandmark.api.main import create_app

    return TestClient(create_app())


@pytest.fixture
def sample_concept() -> BrandConcept:
    """A fully populated brand concept."""
    return BrandConcept(
        icon_concept="a rising mountain peak",
        font_style="elegant serif, wide tracking",
        logo_style="Modern minimal",
        primary_color="#1E3A8A",
        secondary_colors=("#F59E0B", "#10B981"),
        background_style="Deep navy gradient",
    )


@pytest.fixture
def sample_concept_payload() -> dict:
    """The same concept in the camelCase wire format."""
    return {
        "iconConcept": "a rising mountain peak",
        "fontStyle": "elegant serif, wide tracking",
        "logoStyle": "Modern minimal",
        "primaryColor": "#1E3A8A",
        "secondaryColors": ["#F59E0B", "#10B981"],
        "backgroundStyle": "Deep navy gradient",
    }
