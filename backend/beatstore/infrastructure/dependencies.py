"""FastAPI dependency injection: wires infrastructure to application layer."""

from fastapi import Request

from beatstore.application.services import CatalogService
from beatstore.infrastructure.database.repositories import SQLAlchemyKeyValueStore
from beatstore.infrastructure.database.session import async_session_factory


def build_catalog_service() -> CatalogService:
    """Build the process-wide CatalogService over the configured database."""
    return CatalogService(SQLAlchemyKeyValueStore(async_session_factory))


def get_catalog_service(request: Request) -> CatalogService:
    """Provides the CatalogService created during application startup."""
    return request.app.state.catalog_service
