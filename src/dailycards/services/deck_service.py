"""Daily deck selection."""
import logging
from typing import Dict, List, Optional, Sequence

from dailycards.config import ALL_CATEGORIES
from dailycards.models.deck_models import DeckSelection, HydratedCard
from dailycards.models.models import Card, Profile
from dailycards.services.shuffler import deck_seed_key, seeded_shuffle

logger = logging.getLogger(__name__)


def _localize(texts: Dict[str, str], language: str, fallback: str, card_id: str, field: str) -> str:
    value = texts.get(language) or texts.get(fallback)
    if value:
        return value
    logger.warning(
        "Card %s has no %s for %s or fallback %s", card_id, field, language, fallback
    )
    return ""


def hydrate_card(
    card: Card,
    native_language: str,
    target_language: str,
    target_fallback: str,
    native_fallback: str,
) -> HydratedCard:
    """Resolve a card's texts for one language pair."""
    return HydratedCard(
        id=card.id,
        category=card.category,
        target=_localize(card.translations, target_language, target_fallback, card.id, "translation"),
        native=_localize(card.translations, native_language, native_fallback, card.id, "translation"),
        example=_localize(card.examples, native_language, native_fallback, card.id, "example"),
    )


def select_deck(
    catalog: Sequence[Card],
    profile: Profile,
    profile_id: str,
    date: str,
    native_language: str,
    target_language: str,
    category: Optional[str] = ALL_CATEGORIES,
    undone_only: bool = False,
    target_fallback: str = "English",
    native_fallback: str = "Indonesia",
) -> DeckSelection:
    """Build the ordered, filtered and localized deck for one profile and day.

    The order comes from the catalog shuffled with the profile/date key, so it
    stays fixed for the day. Filters run after shuffling. ``learned_today``
    and ``total_all_cards`` ignore the filters.
    """
    learned_ids = set(profile.learned_on(date))

    ordered: List[Card] = seeded_shuffle(catalog, deck_seed_key(profile_id, date))
    if category and category != ALL_CATEGORIES:
        ordered = [card for card in ordered if card.category == category]
    if undone_only:
        ordered = [card for card in ordered if card.id not in learned_ids]

    deck = [
        hydrate_card(card, native_language, target_language, target_fallback, native_fallback)
        for card in ordered
    ]
    return DeckSelection(
        deck=deck,
        total_all_cards=len(catalog),
        learned_today=len(learned_ids),
    )
