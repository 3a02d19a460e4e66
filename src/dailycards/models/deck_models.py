"""Result models for deck selection and statistics."""
from dataclasses import dataclass
from typing import List


@dataclass
class HydratedCard:
    """A card localized for one native/target language pair."""
    id: str
    category: str
    target: str
    native: str
    example: str


@dataclass
class DeckSelection:
    """Ordered deck plus the day's global counters."""
    deck: List[HydratedCard]
    total_all_cards: int  # catalog size before filtering
    learned_today: int  # learned ids for the date, ignores filters


@dataclass
class Stats:
    """Progress summary for one profile."""
    total_learned: int
    completion_rate: int
    streak: int
    difficult_today: int
    learned_today: int
    total_cards: int
