"""Domain entity: pure Python business object for a sellable beat."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any


@dataclass
class Beat:
    """Core domain entity representing a beat listed in the catalog.

    ``updated_at`` stays ``None`` until the first mutation. ``sold`` and
    ``featured`` only ever move from ``False`` to ``True``.
    """

    id: str
    title: str
    artist: str
    price: float
    url: str
    created_at: datetime
    updated_at: datetime | None = None
    sold: bool = False
    featured: bool = False

    def update(
        self,
        now: datetime,
        title: str | None = None,
        artist: str | None = None,
        price: float | None = None,
        url: str | None = None,
    ) -> None:
        """Overwrite the supplied fields and stamp updated_at."""
        if title is not None:
            self.title = title
        if artist is not None:
            self.artist = artist
        if price is not None:
            self.price = price
        if url is not None:
            self.url = url
        self.updated_at = now

    def mark_sold(self, now: datetime) -> None:
        self.sold = True
        self.updated_at = now

    def mark_featured(self, now: datetime) -> None:
        self.featured = True
        self.updated_at = now

    def to_record(self) -> dict[str, Any]:
        """Map entity → JSON-compatible storage record."""
        return {
            "id": self.id,
            "title": self.title,
            "artist": self.artist,
            "price": self.price,
            "url": self.url,
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
            "sold": self.sold,
            "featured": self.featured,
        }

    @classmethod
    def from_record(cls, record: dict[str, Any]) -> "Beat":
        """Map storage record → entity."""
        updated_at = record.get("updated_at")
        return cls(
            id=record["id"],
            title=record["title"],
            artist=record["artist"],
            price=float(record["price"]),
            url=record["url"],
            created_at=datetime.fromisoformat(record["created_at"]),
            updated_at=datetime.fromisoformat(updated_at) if updated_at else None,
            sold=bool(record.get("sold", False)),
            featured=bool(record.get("featured", False)),
        )
