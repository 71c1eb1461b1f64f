"""SQLAlchemy ORM model for the key-value record table."""

from typing import Any

from sqlalchemy import JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from beatstore.infrastructure.database.base import Base


class RecordModel(Base):
    """ORM model: maps to the 'records' table, one row per stored key."""

    __tablename__ = "records"

    key: Mapped[str] = mapped_column(String(64), primary_key=True)
    value: Mapped[dict[str, Any]] = mapped_column(JSON, nullable=False)

    def __repr__(self) -> str:
        return f"<RecordModel(key={self.key})>"
