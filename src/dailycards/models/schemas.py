"""Request and response schemas for the HTTP API."""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    # Wire format is camelCase
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# Input
class MarkRequest(ApiModel):
    profile_id: str = Field(min_length=1)
    date: str = Field(min_length=1)
    card_id: str = Field(min_length=1)
    status: Optional[str] = None


class ResetRequest(ApiModel):
    profile_id: str = Field(min_length=1)


# Output
class CategoryResponse(ApiModel):
    id: str
    label: str


class MetaResponse(ApiModel):
    languages: List[str]
    categories: List[CategoryResponse]


class HydratedCardResponse(ApiModel):
    id: str
    category: str
    target: str
    native: str
    example: str


class DeckResponse(ApiModel):
    cards: List[HydratedCardResponse]
    total_all_cards: int
    learned_today: int
    date: str


class OkResponse(ApiModel):
    ok: bool = True


class StatsResponse(ApiModel):
    total_learned: int
    completion_rate: int
    streak: int
    difficult_today: int
    learned_today: int
    total_cards: int
