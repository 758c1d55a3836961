"""API routes for Brandmark."""

from fastapi import APIRouter

from brandmark.api.routes.logos import router as logos_router

# Main API router
api_router = APIRouter()

api_router.include_router(logos_router, prefix="/logos", tags=["Logos"])

__all__ = ["api_router"]
