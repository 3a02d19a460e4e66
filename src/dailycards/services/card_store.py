"""JSON-backed card catalog."""
import json
import logging
from pathlib import Path
from typing import Iterable, List, Optional

from dailycards.errors import StorageError
from dailycards.models.models import Card

logger = logging.getLogger(__name__)


class CardStore:
    """Read-only card catalog stored as one JSON array.

    The file is read on every call so edits show up without a restart.
    File order is the canonical order fed to the shuffler.
    """

    def __init__(self, path, known_categories: Optional[Iterable[str]] = None):
        self.path = Path(path)
        self.known_categories = set(known_categories) if known_categories else None

    def load_catalog(self) -> List[Card]:
        """Load all cards in file order."""
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                raw = json.load(f)
        except FileNotFoundError as e:
            raise StorageError("Card catalog not found", str(self.path)) from e
        except (OSError, ValueError) as e:
            raise StorageError(f"Card catalog unreadable ({e})", str(self.path)) from e

        if not isinstance(raw, list):
            raise StorageError("Card catalog must be a JSON array", str(self.path))

        cards = []
        for index, record in enumerate(raw):
            try:
                card = Card.from_data(record)
            except (KeyError, TypeError) as e:
                raise StorageError(
                    f"Malformed card at index {index} ({e!r})", str(self.path)
                ) from e
            if self.known_categories is not None and card.category not in self.known_categories:
                logger.warning("Card %s has unknown category %r", card.id, card.category)
            cards.append(card)

        logger.debug("Loaded %d cards from %s", len(cards), self.path)
        return cards
