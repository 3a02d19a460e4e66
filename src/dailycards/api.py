"""HTTP routes for cards, progress and statistics."""
import logging
from datetime import UTC, date as date_type, datetime
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Request

from dailycards.config import CatalogSettings
from dailycards.models.schemas import (
    DeckResponse,
    MarkRequest,
    MetaResponse,
    OkResponse,
    ResetRequest,
    StatsResponse,
)
from dailycards.monitoring import decks_served
from dailycards.services.card_store import CardStore
from dailycards.services.deck_service import select_deck
from dailycards.services.progress_service import ProgressService
from dailycards.services.stats_service import compute_stats

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


def today_key() -> str:
    """Current UTC date as YYYY-MM-DD."""
    return datetime.now(UTC).date().isoformat()


def get_card_store(request: Request) -> CardStore:
    return request.app.state.card_store


def get_progress_service(request: Request) -> ProgressService:
    return request.app.state.progress_service


def get_catalog_settings(request: Request) -> CatalogSettings:
    return request.app.state.catalog_settings


@router.get("/meta", response_model=MetaResponse)
def read_meta(catalog: CatalogSettings = Depends(get_catalog_settings)):
    return {"languages": catalog.languages, "categories": catalog.categories}


@router.get("/cards", response_model=DeckResponse)
def read_cards(
    profile_id: Optional[str] = Query(None, alias="profileId"),
    date: Optional[str] = Query(None),
    native: Optional[str] = Query(None),
    target: Optional[str] = Query(None),
    category: Optional[str] = Query(None),
    undone_only: bool = Query(False, alias="undoneOnly"),
    card_store: CardStore = Depends(get_card_store),
    progress: ProgressService = Depends(get_progress_service),
    catalog_settings: CatalogSettings = Depends(get_catalog_settings),
):
    """Today's deck for a profile, in its stable daily order."""
    profile_id = profile_id or catalog_settings.default_profile_id
    date = date or today_key()

    catalog = card_store.load_catalog()
    profile = progress.get_profile(profile_id)
    selection = select_deck(
        catalog,
        profile,
        profile_id=profile_id,
        date=date,
        native_language=native or catalog_settings.default_native,
        target_language=target or catalog_settings.default_target,
        category=category or catalog_settings.default_category,
        undone_only=undone_only,
        target_fallback=catalog_settings.target_fallback,
        native_fallback=catalog_settings.native_fallback,
    )
    decks_served.inc()
    logger.debug(
        "Deck for %s on %s: %d of %d cards", profile_id, date,
        len(selection.deck), selection.total_all_cards,
    )
    return {
        "cards": selection.deck,
        "total_all_cards": selection.total_all_cards,
        "learned_today": selection.learned_today,
        "date": date,
    }


@router.post("/progress/mark", response_model=OkResponse)
def mark_progress(
    payload: MarkRequest,
    progress: ProgressService = Depends(get_progress_service),
):
    progress.mark(payload.profile_id, payload.date, payload.card_id, payload.status)
    return OkResponse()


@router.post("/progress/reset", response_model=OkResponse)
def reset_progress(
    payload: ResetRequest,
    progress: ProgressService = Depends(get_progress_service),
):
    progress.reset(payload.profile_id)
    return OkResponse()


@router.get("/progress/{profile_id}", response_model=StatsResponse)
def read_stats(
    profile_id: str,
    date: Optional[str] = Query(None),
    card_store: CardStore = Depends(get_card_store),
    progress: ProgressService = Depends(get_progress_service),
):
    """Statistics for a profile; ``date`` overrides today."""
    if date:
        try:
            today = date_type.fromisoformat(date)
        except ValueError:
            raise HTTPException(status_code=400, detail="date must be YYYY-MM-DD")
    else:
        today = datetime.now(UTC).date()

    catalog = card_store.load_catalog()
    profile = progress.get_profile(profile_id)
    return compute_stats(profile, len(catalog), today)
