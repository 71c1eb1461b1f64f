"""Application service (use case) for the beat catalog."""

import asyncio
import logging
import uuid
from collections.abc import Callable

from beatstore.application.interfaces import KeyValueStore
from beatstore.application.schemas import BeatCreate, BeatUpdate
from beatstore.domain.entities import Beat, Clock, system_clock
from beatstore.domain.exceptions import BeatAlreadySoldError, EntityNotFoundError

logger = logging.getLogger(__name__)


def _new_beat_id() -> str:
    return str(uuid.uuid4())


class CatalogService:
    """Orchestrates beat lifecycle and transitions. Depends on the store port (DI).

    The service owns its store exclusively. Every operation runs under one
    lock, so reads and the write that follows them never interleave with
    another operation: a second ``buy`` on the same id always sees the first.
    """

    def __init__(
        self,
        store: KeyValueStore,
        clock: Clock = system_clock,
        id_factory: Callable[[], str] = _new_beat_id,
    ):
        self._store = store
        self._clock = clock
        self._id_factory = id_factory
        self._lock = asyncio.Lock()

    async def create(self, data: BeatCreate) -> Beat:
        async with self._lock:
            beat = Beat(
                id=self._id_factory(),
                title=data.title,
                artist=data.artist,
                price=data.price,
                url=data.url,
                created_at=self._clock(),
            )
            await self._store.insert(beat.id, beat.to_record())
        logger.info("Created beat %s (%r by %r)", beat.id, beat.title, beat.artist)
        return beat

    async def get_all(self) -> list[Beat]:
        async with self._lock:
            return await self._load_all()

    async def get_by_id(self, beat_id: str) -> Beat:
        async with self._lock:
            return await self._load(beat_id)

    async def update(self, beat_id: str, data: BeatUpdate) -> Beat:
        async with self._lock:
            beat = await self._load(beat_id)
            beat.update(
                self._clock(),
                title=data.title,
                artist=data.artist,
                price=data.price,
                url=data.url,
            )
            await self._store.insert(beat.id, beat.to_record())
        logger.info("Updated beat %s", beat.id)
        return beat

    async def delete(self, beat_id: str) -> Beat:
        async with self._lock:
            record = await self._store.remove(beat_id)
        if record is None:
            raise EntityNotFoundError("Beat", beat_id)
        logger.info("Deleted beat %s", beat_id)
        return Beat.from_record(record)

    async def buy(self, beat_id: str) -> Beat:
        async with self._lock:
            beat = await self._load(beat_id)
            if beat.sold:
                logger.warning("Refused to buy beat %s: already sold", beat_id)
                raise BeatAlreadySoldError(beat_id)
            beat.mark_sold(self._clock())
            await self._store.insert(beat.id, beat.to_record())
        logger.info("Sold beat %s", beat.id)
        return beat

    async def feature(self, beat_id: str) -> Beat:
        async with self._lock:
            beat = await self._load(beat_id)
            beat.mark_featured(self._clock())
            await self._store.insert(beat.id, beat.to_record())
        logger.info("Featured beat %s", beat.id)
        return beat

    async def search_by_artist(self, query: str) -> list[Beat]:
        """Case-insensitive substring match against the artist name."""
        needle = query.casefold()
        async with self._lock:
            beats = await self._load_all()
        return [b for b in beats if needle in b.artist.casefold()]

    async def search_by_title(self, query: str) -> list[Beat]:
        """Case-insensitive substring match against the title."""
        needle = query.casefold()
        async with self._lock:
            beats = await self._load_all()
        return [b for b in beats if needle in b.title.casefold()]

    async def count(self) -> int:
        async with self._lock:
            return await self._store.count()

    # ── Internals (caller holds the lock) ───────────────────────────

    async def _load(self, beat_id: str) -> Beat:
        record = await self._store.get(beat_id)
        if record is None:
            raise EntityNotFoundError("Beat", beat_id)
        return Beat.from_record(record)

    async def _load_all(self) -> list[Beat]:
        return [Beat.from_record(r) for r in await self._store.values()]
