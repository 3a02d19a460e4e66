"""Test configuration."""
import json
import os
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Set test environment before any imports
os.environ["ENV"] = "test"

# Load test environment variables
test_env_path = Path(__file__).parents[3] / ".env.test"
load_dotenv(test_env_path)

# Import after environment setup
from dailycards.models.models import Card, Profile  # noqa: E402


def make_card(card_id: str, category: str = "vocabulary", **overrides) -> Card:
    """Build a card with all four languages filled in."""
    translations = {
        "Indonesia": f"{card_id}-id",
        "English": f"{card_id}-en",
        "Japanese": f"{card_id}-ja",
        "Korean": f"{card_id}-ko",
    }
    examples = {
        "Indonesia": f"{card_id} contoh",
        "English": f"{card_id} example",
    }
    translations.update(overrides.get("translations", {}))
    examples.update(overrides.get("examples", {}))
    return Card(id=card_id, category=category, translations=translations, examples=examples)


def card_record(card: Card) -> dict:
    return {
        "id": card.id,
        "category": card.category,
        "translations": card.translations,
        "examples": card.examples,
    }


@pytest.fixture
def catalog() -> list[Card]:
    """Four cards, two vocabulary and two grammar."""
    return [
        make_card("v1", "vocabulary"),
        make_card("v2", "vocabulary"),
        make_card("g1", "grammar"),
        make_card("g2", "grammar"),
    ]


@pytest.fixture
def cards_file(tmp_path: Path, catalog: list[Card]) -> Path:
    """Catalog written to a temporary JSON file."""
    path = tmp_path / "cards.json"
    path.write_text(json.dumps([card_record(card) for card in catalog]), encoding="utf-8")
    return path


@pytest.fixture
def empty_profile() -> Profile:
    return Profile()
