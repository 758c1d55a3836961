"""Health check routes."""

import importlib.util

from fastapi import APIRouter

from brandmark.api.schemas import HealthResponse
from brandmark.config import get_settings

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health_check():
    """Basic health check; also reports whether PNG export is available."""
    settings = get_settings()
    return HealthResponse(
        status="healthy",
        app=settings.app_name,
        version=settings.app_version,
        raster_backend=importlib.util.find_spec("cairosvg") is not None,
    )
