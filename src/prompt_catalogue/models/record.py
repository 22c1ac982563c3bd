"""Prompt record models."""

from datetime import UTC, datetime
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Provenance(StrEnum):
    """Known origins of a prompt record."""

    GIAC = "giac"
    CUSTOM = "custom"


class PromptRecord(BaseModel):
    """A single catalogue entry as seen by the search engine.

    Only the fields the engine reads are declared; anything else in the
    source JSON (inputs, few_shots, safety, ...) is kept as extra data.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str
    name: str | None = None
    summary: str | None = None
    description: str | None = None
    category: str | None = None
    pillars: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    provenance: str = Provenance.CUSTOM.value
    created_at: str | None = None
    updated_at: str | None = None

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, v: object) -> object:
        return str(v) if isinstance(v, int) else v

    @field_validator("pillars", "tags", mode="before")
    @classmethod
    def _drop_empty(cls, v: object) -> object:
        if v is None:
            return []
        if isinstance(v, list):
            return [item for item in v if item]
        return v

    @property
    def title(self) -> str:
        """Display title, falling back to the id."""
        return self.name or self.id

    @property
    def timestamp(self) -> datetime | None:
        """Most recent of updated_at/created_at, or None when missing or unparseable."""
        raw = self.updated_at or self.created_at
        if not raw:
            return None
        try:
            parsed = datetime.fromisoformat(raw.replace("Z", "+00:00"))
        except ValueError:
            return None
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=UTC)
        return parsed

    def text_field(self, name: str) -> str:
        """Return a scalar text field lowercased, empty string when absent."""
        value = getattr(self, name, None)
        if value is None:
            return ""
        return str(value).lower()
