"""Health check endpoint."""

from fastapi import APIRouter, Depends

from beatstore.application.services import CatalogService
from beatstore.config import get_settings
from beatstore.infrastructure.dependencies import get_catalog_service

router = APIRouter(tags=["Health"])


@router.get("/health")
async def health_check(
    service: CatalogService = Depends(get_catalog_service),
) -> dict:
    """Returns the current application health status and catalog size."""
    settings = get_settings()
    return {
        "status": "healthy",
        "version": settings.app_version,
        "environment": settings.app_env,
        "beats": await service.count(),
    }
