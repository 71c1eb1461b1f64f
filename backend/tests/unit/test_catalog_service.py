"""Unit tests for the CatalogService."""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any

import pytest
from pydantic import ValidationError

from beatstore.application.interfaces import KeyValueStore
from beatstore.application.schemas import BeatCreate, BeatUpdate
from beatstore.application.services import CatalogService
from beatstore.domain.exceptions import BeatAlreadySoldError, EntityNotFoundError


class FakeKeyValueStore(KeyValueStore):
    """In-memory fake store for unit testing."""

    def __init__(self):
        self._records: dict[str, dict[str, Any]] = {}

    async def get(self, key: str) -> dict[str, Any] | None:
        record = self._records.get(key)
        return dict(record) if record is not None else None

    async def insert(self, key: str, value: dict[str, Any]) -> dict[str, Any] | None:
        previous = self._records.get(key)
        self._records[key] = dict(value)
        return previous

    async def remove(self, key: str) -> dict[str, Any] | None:
        return self._records.pop(key, None)

    async def values(self) -> list[dict[str, Any]]:
        return [dict(self._records[k]) for k in sorted(self._records)]

    async def count(self) -> int:
        return len(self._records)


class SteppingClock:
    """Fixed clock that advances one second per reading."""

    def __init__(self, start: datetime):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now += timedelta(seconds=1)
        return current


T0 = datetime(2024, 5, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> FakeKeyValueStore:
    return FakeKeyValueStore()


@pytest.fixture
def service(store: FakeKeyValueStore) -> CatalogService:
    return CatalogService(store, clock=SteppingClock(T0))


def _night() -> BeatCreate:
    return BeatCreate(title="Night", artist="Wave", price=9.99, url="u1")


@pytest.mark.asyncio
async def test_create_beat(service: CatalogService):
    beat = await service.create(_night())
    assert beat.id
    assert beat.title == "Night"
    assert beat.created_at == T0
    assert beat.updated_at is None
    assert beat.sold is False
    assert beat.featured is False


@pytest.mark.asyncio
async def test_created_ids_are_unique(service: CatalogService):
    beats = [await service.create(_night()) for _ in range(25)]
    assert len({b.id for b in beats}) == 25


@pytest.mark.asyncio
async def test_get_by_id_round_trip(service: CatalogService):
    created = await service.create(_night())
    assert await service.get_by_id(created.id) == created


@pytest.mark.asyncio
async def test_get_by_id_not_found(service: CatalogService):
    with pytest.raises(EntityNotFoundError):
        await service.get_by_id("missing")


@pytest.mark.asyncio
async def test_get_all_returns_beats_in_id_order(store: FakeKeyValueStore):
    ids = iter(["c", "a", "b"])
    service = CatalogService(store, clock=SteppingClock(T0), id_factory=lambda: next(ids))
    for title in ("third", "first", "second"):
        await service.create(BeatCreate(title=title, artist="x", price=1.0, url="u"))

    beats = await service.get_all()
    assert [b.id for b in beats] == ["a", "b", "c"]
    assert [b.title for b in beats] == ["first", "second", "third"]


@pytest.mark.asyncio
async def test_update_merges_only_supplied_fields(service: CatalogService):
    created = await service.create(_night())
    updated = await service.update(created.id, BeatUpdate(price=14.0))

    assert updated.price == 14.0
    assert (updated.title, updated.artist, updated.url) == ("Night", "Wave", "u1")
    assert updated.created_at == created.created_at
    assert updated.updated_at is not None
    assert updated.updated_at > created.created_at
    assert await service.get_by_id(created.id) == updated


@pytest.mark.asyncio
async def test_update_restamps_updated_at(service: CatalogService):
    created = await service.create(_night())
    first = await service.update(created.id, BeatUpdate(title="Dawn"))
    second = await service.update(created.id, BeatUpdate(artist="Tide"))
    assert second.updated_at > first.updated_at
    assert second.title == "Dawn"


@pytest.mark.asyncio
async def test_update_not_found(service: CatalogService):
    with pytest.raises(EntityNotFoundError):
        await service.update("missing", BeatUpdate(title="x"))


def test_update_rejects_protected_fields():
    with pytest.raises(ValidationError):
        BeatUpdate(sold=False)
    with pytest.raises(ValidationError):
        BeatUpdate(id="forged")


@pytest.mark.asyncio
async def test_buy_is_one_way(service: CatalogService):
    created = await service.create(_night())
    sold = await service.buy(created.id)
    assert sold.sold is True
    assert sold.updated_at is not None

    with pytest.raises(BeatAlreadySoldError):
        await service.buy(created.id)
    assert await service.get_by_id(created.id) == sold


@pytest.mark.asyncio
async def test_concurrent_buys_only_one_succeeds(service: CatalogService):
    created = await service.create(_night())
    results = await asyncio.gather(
        service.buy(created.id),
        service.buy(created.id),
        return_exceptions=True,
    )
    assert sum(1 for r in results if isinstance(r, BeatAlreadySoldError)) == 1
    assert (await service.get_by_id(created.id)).sold is True


@pytest.mark.asyncio
async def test_buy_not_found(service: CatalogService):
    with pytest.raises(EntityNotFoundError):
        await service.buy("missing")


@pytest.mark.asyncio
async def test_feature_is_idempotent(service: CatalogService):
    created = await service.create(_night())
    first = await service.feature(created.id)
    second = await service.feature(created.id)
    assert first.featured is True
    assert second.featured is True
    assert second.updated_at > first.updated_at


@pytest.mark.asyncio
async def test_feature_not_found(service: CatalogService):
    with pytest.raises(EntityNotFoundError):
        await service.feature("missing")


@pytest.mark.asyncio
async def test_delete_is_final(service: CatalogService):
    created = await service.create(_night())
    deleted = await service.delete(created.id)
    assert deleted == created

    with pytest.raises(EntityNotFoundError):
        await service.get_by_id(created.id)
    with pytest.raises(EntityNotFoundError):
        await service.delete(created.id)


@pytest.mark.asyncio
async def test_search_by_artist_is_case_insensitive(service: CatalogService):
    match = await service.create(BeatCreate(title="Loop", artist="ProdByX", price=5.0, url="u"))
    await service.create(BeatCreate(title="Other", artist="Wave", price=5.0, url="u"))

    results = await service.search_by_artist("prod")
    assert [b.id for b in results] == [match.id]


@pytest.mark.asyncio
async def test_search_by_title(service: CatalogService):
    await service.create(BeatCreate(title="Midnight Drive", artist="A", price=1.0, url="u"))
    await service.create(BeatCreate(title="Sunrise", artist="B", price=1.0, url="u"))

    assert [b.title for b in await service.search_by_title("NIGHT")] == ["Midnight Drive"]
    assert await service.search_by_title("nothing") == []


@pytest.mark.asyncio
async def test_catalog_scenario(service: CatalogService):
    beat = await service.create(_night())
    assert (beat.sold, beat.featured, beat.updated_at) == (False, False, None)

    sold = await service.buy(beat.id)
    assert sold.sold is True

    with pytest.raises(BeatAlreadySoldError):
        await service.buy(beat.id)
    assert await service.get_by_id(beat.id) == sold

    featured = await service.feature(beat.id)
    assert featured.featured is True
    assert featured.sold is True

    deleted = await service.delete(beat.id)
    assert deleted == featured
    with pytest.raises(EntityNotFoundError):
        await service.get_by_id(beat.id)
    assert await service.count() == 0
