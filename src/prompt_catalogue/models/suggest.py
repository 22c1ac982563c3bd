"""Autocomplete suggestion models."""

from enum import StrEnum

from pydantic import BaseModel, Field


class SuggestionType(StrEnum):
    """Where a suggestion came from."""

    NAME = "name"
    TAG = "tag"
    PILLAR = "pillar"
    RECENT = "recent"
    ID = "id"


class Suggestion(BaseModel):
    """A single autocomplete candidate."""

    value: str
    type: SuggestionType
    score: float


class SuggestIndex(BaseModel):
    """Occurrence counts per value, one mapping per suggestion category."""

    names: dict[str, int] = Field(default_factory=dict)
    ids: dict[str, int] = Field(default_factory=dict)
    tags: dict[str, int] = Field(default_factory=dict)
    pillars: dict[str, int] = Field(default_factory=dict)
