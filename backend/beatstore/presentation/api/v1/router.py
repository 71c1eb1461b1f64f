"""V1 API router: aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from beatstore.presentation.api.v1.endpoints.health import router as health_router
from beatstore.presentation.api.v1.endpoints.beats import router as beats_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(beats_router)
