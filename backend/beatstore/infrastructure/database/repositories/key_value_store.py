"""Concrete key-value store implementation backed by SQLAlchemy."""

from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from beatstore.application.interfaces import KeyValueStore
from beatstore.infrastructure.database.models import RecordModel


class SQLAlchemyKeyValueStore(KeyValueStore):
    """Implements the KeyValueStore port on the 'records' table.

    Every call opens its own session and commits before returning.
    """

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]):
        self._session_factory = session_factory

    async def get(self, key: str) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            model = await session.get(RecordModel, key)
            return dict(model.value) if model else None

    async def insert(self, key: str, value: dict[str, Any]) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            async with session.begin():
                model = await session.get(RecordModel, key)
                if model is None:
                    session.add(RecordModel(key=key, value=dict(value)))
                    return None
                previous = dict(model.value)
                model.value = dict(value)
                return previous

    async def remove(self, key: str) -> dict[str, Any] | None:
        async with self._session_factory() as session:
            async with session.begin():
                model = await session.get(RecordModel, key)
                if model is None:
                    return None
                removed = dict(model.value)
                await session.delete(model)
                return removed

    async def values(self) -> list[dict[str, Any]]:
        async with self._session_factory() as session:
            stmt = select(RecordModel).order_by(RecordModel.key.asc())
            result = await session.execute(stmt)
            return [dict(row.value) for row in result.scalars().all()]

    async def count(self) -> int:
        async with self._session_factory() as session:
            result = await session.execute(select(func.count()).select_from(RecordModel))
            return result.scalar_one()
