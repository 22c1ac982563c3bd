"""Filter state models."""

import base64
import json
import logging
from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)

PRESET_VERSION = 1


class SourceFilter(StrEnum):
    """Which provenance to show."""

    ALL = "all"
    GIAC = "giac"
    CUSTOM = "custom"


class PillarsMode(StrEnum):
    """How a multi-pillar selection combines."""

    ANY = "any"
    ALL = "all"


class SortMode(StrEnum):
    """Result ordering."""

    RELEVANCE = "relevance"
    NEWEST = "newest"
    NAME = "name"
    MOST_VIEWED = "mostViewed"


class FilterState(BaseModel):
    """Flat, JSON-serializable filter state owned by the caller.

    Field aliases match the camelCase keys used in shared links and presets.
    """

    model_config = ConfigDict(populate_by_name=True)

    q: str = ""
    source: SourceFilter = SourceFilter.ALL
    pillars: list[str] = Field(default_factory=list)
    pillars_mode: PillarsMode = Field(default=PillarsMode.ANY, alias="pillarsMode")
    tags: list[str] = Field(default_factory=list)
    favorites: bool = False
    sort: SortMode = SortMode.RELEVANCE

    def to_preset_code(self) -> str:
        """Encode as a shareable URL-safe preset code."""
        payload = {"v": PRESET_VERSION, "state": self.model_dump(mode="json", by_alias=True)}
        raw = json.dumps(payload, separators=(",", ":")).encode("utf-8")
        return base64.urlsafe_b64encode(raw).decode("ascii")

    @classmethod
    def from_preset_code(cls, code: str) -> "FilterState | None":
        """Decode a preset code, returning None when it is malformed."""
        try:
            payload = json.loads(base64.urlsafe_b64decode(code.encode("ascii")))
            if not isinstance(payload, dict) or not isinstance(payload.get("state"), dict):
                return None
            return cls.model_validate(payload["state"])
        except ValueError:
            logger.debug("Ignoring malformed preset code %r", code)
            return None
