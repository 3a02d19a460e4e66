"""Domain models for cards and learner progress."""
from copy import deepcopy
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional


class CardStatus(Enum):
    """Statuses a learner can give a card for a day."""
    LEARNED = "learned"
    DIFFICULT = "difficult"

    @classmethod
    def parse(cls, value: Optional[str]) -> Optional["CardStatus"]:
        """Return the matching status or None for unknown values."""
        for status in cls:
            if status.value == value:
                return status
        return None


@dataclass(frozen=True)
class Card:
    """A catalog card with per-language texts."""
    id: str
    category: str
    translations: Dict[str, str]
    examples: Dict[str, str]

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Card":
        """Build a card from a catalog record, raising KeyError/TypeError on bad shape."""
        translations = data["translations"]
        examples = data["examples"]
        if not isinstance(translations, dict) or not isinstance(examples, dict):
            raise TypeError("translations and examples must be objects")
        return cls(
            id=str(data["id"]),
            category=str(data["category"]),
            translations=dict(translations),
            examples=dict(examples),
        )


@dataclass
class Profile:
    """Learned and difficult card ids per ISO date for one learner.

    Per-date lists keep insertion order and hold each id at most once.
    """
    learned_by_date: Dict[str, List[str]] = field(default_factory=dict)
    difficult_by_date: Dict[str, List[str]] = field(default_factory=dict)

    def learned_on(self, date: str) -> List[str]:
        return self.learned_by_date.get(date, [])

    def difficult_on(self, date: str) -> List[str]:
        return self.difficult_by_date.get(date, [])

    def to_data(self) -> Dict[str, Any]:
        return {
            "learnedByDate": deepcopy(self.learned_by_date),
            "difficultByDate": deepcopy(self.difficult_by_date),
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "Profile":
        return cls(
            learned_by_date=_load_date_map(data.get("learnedByDate", {})),
            difficult_by_date=_load_date_map(data.get("difficultByDate", {})),
        )


@dataclass
class ProgressDatabase:
    """All profiles keyed by profile id."""
    profiles: Dict[str, Profile] = field(default_factory=dict)

    def to_data(self) -> Dict[str, Any]:
        return {
            "profiles": {
                profile_id: profile.to_data()
                for profile_id, profile in self.profiles.items()
            }
        }

    @classmethod
    def from_data(cls, data: Dict[str, Any]) -> "ProgressDatabase":
        profiles = data.get("profiles", {})
        if not isinstance(profiles, dict):
            raise TypeError("profiles must be an object")
        return cls(
            profiles={
                str(profile_id): Profile.from_data(profile)
                for profile_id, profile in profiles.items()
            }
        )


def _load_date_map(raw: Dict[str, Any]) -> Dict[str, List[str]]:
    if not isinstance(raw, dict):
        raise TypeError("date map must be an object")
    result: Dict[str, List[str]] = {}
    for date, card_ids in raw.items():
        if not isinstance(card_ids, list):
            raise TypeError(f"card ids for {date} must be a list")
        unique: List[str] = []
        for card_id in card_ids:
            card_id = str(card_id)
            if card_id not in unique:
                unique.append(card_id)
        result[str(date)] = unique
    return result
