"""Beat catalog endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from beatstore.application.schemas import BeatCreate, BeatUpdate, BeatResponse
from beatstore.application.services import CatalogService
from beatstore.domain.exceptions import BeatAlreadySoldError, EntityNotFoundError
from beatstore.infrastructure.dependencies import get_catalog_service

router = APIRouter(prefix="/beats", tags=["Beats"])


@router.get("", response_model=list[BeatResponse])
async def list_beats(
    service: CatalogService = Depends(get_catalog_service),
) -> list[BeatResponse]:
    """Retrieve every beat in the catalog, ordered by id."""
    beats = await service.get_all()
    return [BeatResponse.model_validate(b, from_attributes=True) for b in beats]


@router.get("/search/artist", response_model=list[BeatResponse])
async def search_by_artist(
    q: str = Query(..., description="Case-insensitive substring of the artist name"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[BeatResponse]:
    beats = await service.search_by_artist(q)
    return [BeatResponse.model_validate(b, from_attributes=True) for b in beats]


@router.get("/search/title", response_model=list[BeatResponse])
async def search_by_title(
    q: str = Query(..., description="Case-insensitive substring of the title"),
    service: CatalogService = Depends(get_catalog_service),
) -> list[BeatResponse]:
    beats = await service.search_by_title(q)
    return [BeatResponse.model_validate(b, from_attributes=True) for b in beats]


@router.get("/{beat_id}", response_model=BeatResponse)
async def get_beat(
    beat_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    """Retrieve a single beat by ID."""
    try:
        beat = await service.get_by_id(beat_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BeatResponse.model_validate(beat, from_attributes=True)


@router.post("", response_model=BeatResponse, status_code=status.HTTP_201_CREATED)
async def create_beat(
    data: BeatCreate,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    """List a new beat."""
    beat = await service.create(data)
    return BeatResponse.model_validate(beat, from_attributes=True)


@router.put("/{beat_id}", response_model=BeatResponse)
async def update_beat(
    beat_id: str,
    data: BeatUpdate,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    """Update title, artist, price or url of an existing beat."""
    try:
        beat = await service.update(beat_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BeatResponse.model_validate(beat, from_attributes=True)


@router.delete("/{beat_id}", response_model=BeatResponse)
async def delete_beat(
    beat_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    """Delete a beat and return its last stored state."""
    try:
        beat = await service.delete(beat_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BeatResponse.model_validate(beat, from_attributes=True)


@router.post("/{beat_id}/buy", response_model=BeatResponse)
async def buy_beat(
    beat_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    """Mark a beat as sold. Fails with 400 if it was sold already."""
    try:
        beat = await service.buy(beat_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except BeatAlreadySoldError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    return BeatResponse.model_validate(beat, from_attributes=True)


@router.post("/{beat_id}/feature", response_model=BeatResponse)
async def feature_beat(
    beat_id: str,
    service: CatalogService = Depends(get_catalog_service),
) -> BeatResponse:
    try:
        beat = await service.feature(beat_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return BeatResponse.model_validate(beat, from_attributes=True)
