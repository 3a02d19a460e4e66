"""Progress statistics for a profile."""
from datetime import date, timedelta
from typing import Dict, List

from dailycards.models.deck_models import Stats
from dailycards.models.models import Profile


def streak_count(learned_by_date: Dict[str, List[str]], today: date) -> int:
    """Consecutive days ending today with at least one learned card."""
    streak = 0
    cursor = today
    while learned_by_date.get(cursor.isoformat()):
        streak += 1
        cursor -= timedelta(days=1)
    return streak


def completion_rate(learned_by_date: Dict[str, List[str]], catalog_size: int) -> int:
    """Learned marks over (learned dates x catalog size), as a rounded percentage.

    Dates with empty lists still count in the denominator, and the same card
    learned on several dates counts every time.
    """
    total_learned = sum(len(card_ids) for card_ids in learned_by_date.values())
    possible = len(learned_by_date) * catalog_size
    if not possible:
        return 0
    return _round_half_up(total_learned * 100 / possible)


def _round_half_up(value: float) -> int:
    # round() in Python rounds halves to even
    return int(value + 0.5)


def compute_stats(profile: Profile, catalog_size: int, today: date) -> Stats:
    """Summarize a profile's progress as of ``today``."""
    key = today.isoformat()
    return Stats(
        total_learned=sum(len(card_ids) for card_ids in profile.learned_by_date.values()),
        completion_rate=completion_rate(profile.learned_by_date, catalog_size),
        streak=streak_count(profile.learned_by_date, today),
        difficult_today=len(profile.difficult_on(key)),
        learned_today=len(profile.learned_on(key)),
        total_cards=catalog_size,
    )
