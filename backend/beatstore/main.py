"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from beatstore.config import get_settings
from beatstore.infrastructure.database import Base, engine
from beatstore.infrastructure.database.session import sqlite_database_path
from beatstore.infrastructure.dependencies import build_catalog_service
from beatstore.infrastructure.logging.log_config import setup_logging
from beatstore.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan: create tables and build the catalog service."""
    settings = get_settings()
    setup_logging()

    # 1. SQLite needs the parent directory of its database file
    db_path = sqlite_database_path(settings.database_url)
    if db_path is not None:
        db_path.parent.mkdir(parents=True, exist_ok=True)

    # 2. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 3. One CatalogService per process, owning the store
    app.state.catalog_service = build_catalog_service()
    logger.info("Beat catalog ready (%s)", settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "beatstore.main:app",
        host="0.0.0.0",
        port=4000,
        reload=True,
    )
