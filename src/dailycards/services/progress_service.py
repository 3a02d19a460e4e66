"""Progress operations: marking cards and resetting profiles."""
import logging
import threading
from typing import Optional

from dailycards.models.models import CardStatus, Profile, ProgressDatabase
from dailycards.monitoring import cards_marked, profile_resets
from dailycards.services.progress_store import ProgressStore

logger = logging.getLogger(__name__)


def ensure_profile(db: ProgressDatabase, profile_id: str) -> Profile:
    """Return the profile, inserting an empty one into ``db`` if unknown."""
    profile = db.profiles.get(profile_id)
    if profile is None:
        profile = Profile()
        db.profiles[profile_id] = profile
        logger.info("Created profile %s", profile_id)
    return profile


def mark_card(
    db: ProgressDatabase,
    profile_id: str,
    date: str,
    card_id: str,
    status: Optional[str],
) -> bool:
    """Record ``status`` for a card on ``date``.

    Learned removes the card from that day's difficult list; difficult leaves
    learned alone. Both day lists are created for any known status. Unknown
    statuses change nothing and return False.
    """
    card_status = CardStatus.parse(status)
    if card_status is None:
        logger.warning(
            "Ignoring unknown status %r for card %s (profile %s)", status, card_id, profile_id
        )
        return False

    profile = ensure_profile(db, profile_id)
    learned = profile.learned_by_date.setdefault(date, [])
    difficult = profile.difficult_by_date.setdefault(date, [])

    if card_status is CardStatus.LEARNED:
        if card_id not in learned:
            learned.append(card_id)
        if card_id in difficult:
            difficult.remove(card_id)
    else:
        if card_id not in difficult:
            difficult.append(card_id)
    return True


def reset_profile(db: ProgressDatabase, profile_id: str) -> Profile:
    """Replace one profile with an empty one; other profiles are untouched."""
    profile = Profile()
    db.profiles[profile_id] = profile
    return profile


class ProgressService:
    """Read-modify-write progress operations over a ProgressStore.

    Each mutation loads the whole database, changes it and saves it before
    returning. The lock only orders writers inside this process.
    """

    def __init__(self, store: ProgressStore):
        """Initialize the service with a progress store."""
        self.store = store
        self._lock = threading.Lock()

    def get_profile(self, profile_id: str) -> Profile:
        """Get a profile; unknown ids give an empty profile that is not saved."""
        db = self.store.load()
        return ensure_profile(db, profile_id)

    def mark(self, profile_id: str, date: str, card_id: str, status: Optional[str]) -> bool:
        """Mark a card and persist the result."""
        with self._lock:
            db = self.store.load()
            changed = mark_card(db, profile_id, date, card_id, status)
            if not changed:
                return False
            self.store.save(db)
        cards_marked.labels(status=status).inc()
        logger.info("Profile %s marked card %s as %s on %s", profile_id, card_id, status, date)
        return True

    def reset(self, profile_id: str) -> None:
        """Clear all progress of one profile and persist the result."""
        with self._lock:
            db = self.store.load()
            reset_profile(db, profile_id)
            self.store.save(db)
        profile_resets.inc()
        logger.info("Profile %s reset", profile_id)
