"""SQLAlchemy database session and engine configuration."""

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from beatstore.config import get_settings


def _get_async_url(url: str) -> str:
    """Convert a sync SQLAlchemy URL to an async one."""
    if url.startswith("sqlite:///"):
        return url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
    if url.startswith("postgresql://"):
        return url.replace("postgresql://", "postgresql+asyncpg://", 1)
    return url


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine for ``url`` (sync URLs are converted)."""
    return create_async_engine(_get_async_url(url), echo=echo, future=True)


def build_session_factory(bind: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind, class_=AsyncSession, expire_on_commit=False)


def sqlite_database_path(url: str) -> Path | None:
    """Return the file path behind a SQLite URL, or None for other backends and :memory:."""
    parsed = make_url(_get_async_url(url))
    if parsed.get_backend_name() != "sqlite":
        return None
    if not parsed.database or parsed.database == ":memory:":
        return None
    return Path(parsed.database)


settings = get_settings()

engine = build_engine(settings.database_url, echo=(settings.log_level_sql.upper() == "DEBUG"))

async_session_factory = build_session_factory(engine)
