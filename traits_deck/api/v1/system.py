from fastapi import APIRouter, Depends

from traits_deck.api.dependencies import get_store
from traits_deck.api.schemas import HealthResponse, MetaResponse
from traits_deck.core.config import settings
from traits_deck.core.storage.sessions import SessionStore

router = APIRouter()


@router.get("/healthz", response_model=HealthResponse)
async def healthz() -> HealthResponse:
    return HealthResponse()


@router.get("/api/v1/meta", response_model=MetaResponse)
async def meta(store: SessionStore = Depends(get_store)) -> MetaResponse:
    """Service metadata and navigation configuration."""
    return MetaResponse(
        service="traits-deck",
        version=settings.version,
        navigation_policy=store.policy,
        slide_count=len(store.registry),
    )
