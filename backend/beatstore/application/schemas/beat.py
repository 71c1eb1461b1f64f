"""Pydantic DTOs (Data Transfer Objects) for the Beat feature."""

from datetime import datetime

from pydantic import BaseModel, Field


class BeatCreate(BaseModel):
    """Schema for listing a new beat."""

    title: str = Field(..., examples=["Night"])
    artist: str = Field(..., examples=["Wave"])
    price: float = Field(..., examples=[9.99])
    url: str = Field(..., examples=["https://cdn.example.com/beats/night.mp3"])


class BeatUpdate(BaseModel):
    """Schema for updating an existing beat: all fields optional.

    Only the four listing fields are accepted; identity, timestamps and the
    sold/featured flags are rejected as extra fields.
    """

    title: str | None = None
    artist: str | None = None
    price: float | None = None
    url: str | None = None

    model_config = {"extra": "forbid"}


class BeatResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    artist: str
    price: float
    url: str
    created_at: datetime
    updated_at: datetime | None
    sold: bool
    featured: bool

    model_config = {"from_attributes": True}
