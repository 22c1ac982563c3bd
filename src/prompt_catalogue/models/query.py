"""Parsed query models."""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class QueryField(StrEnum):
    """Record fields a query term can be scoped to."""

    NAME = "name"
    ID = "id"
    SUMMARY = "summary"
    DESCRIPTION = "description"
    PILLAR = "pillar"


class Term(BaseModel):
    """A single search term, optionally scoped to a field."""

    model_config = ConfigDict(frozen=True)

    field: QueryField | None = None
    value: str


class ParsedQuery(BaseModel):
    """Structured form of a raw search string.

    ``must`` terms are conjunctive, ``should`` terms are any-of (only enforced
    when non-empty) and ``not_`` terms exclude. Serialized as ``not``.
    """

    model_config = ConfigDict(populate_by_name=True)

    must: list[Term] = Field(default_factory=list)
    should: list[Term] = Field(default_factory=list)
    not_: list[Term] = Field(default_factory=list, alias="not")

    @property
    def is_empty(self) -> bool:
        """True when the query has no terms at all and therefore matches everything."""
        return not (self.must or self.should or self.not_)
