"""Autocomplete ranking over a suggestion index and recent query history."""

import logging
from collections.abc import Sequence

from prompt_catalogue.models.suggest import Suggestion, SuggestIndex, SuggestionType

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 8
RECENT_QUERY_LIMIT = 15

EXACT_SCORE = 100
PREFIX_SCORE = 70
CONTAINS_SCORE = 40
BROWSE_SCORE = 10
RECENT_BASE_SCORE = 50
MAX_FREQUENCY_BONUS = 30


def _classify(value: str, needle: str) -> int | None:
    """Base score for a candidate, or None when it should not be suggested."""
    if value == needle:
        return EXACT_SCORE
    if value.startswith(needle):
        return PREFIX_SCORE
    if needle in value:
        return CONTAINS_SCORE
    return None


def _category(counts: dict[str, int], type_: SuggestionType, query: str) -> list[Suggestion]:
    needle = query.lower()
    out: list[Suggestion] = []
    for value, freq in counts.items():
        base = _classify(value.lower(), needle) if needle else BROWSE_SCORE
        if base is None:
            continue
        out.append(Suggestion(value=value, type=type_, score=base + min(MAX_FREQUENCY_BONUS, freq)))
    return out


def get_suggestions(
    query: str,
    index: SuggestIndex,
    limit: int = DEFAULT_LIMIT,
    recent: Sequence[str] = (),
) -> list[Suggestion]:
    """Rank autocomplete candidates for a partial query.

    ``recent`` is the most-recent-first query history; it is only surfaced
    when the query is blank. Duplicates by (type, lowercased value) keep the
    highest score. Ties keep category order: names, tags, pillars, ids, recent.
    """
    query = query or ""
    candidates = [
        *_category(index.names, SuggestionType.NAME, query),
        *_category(index.tags, SuggestionType.TAG, query),
        *_category(index.pillars, SuggestionType.PILLAR, query),
        *_category(index.ids, SuggestionType.ID, query),
    ]
    if not query.strip():
        candidates.extend(
            Suggestion(value=value, type=SuggestionType.RECENT, score=RECENT_BASE_SCORE - i)
            for i, value in enumerate(recent[:RECENT_QUERY_LIMIT])
        )

    seen: set[tuple[SuggestionType, str]] = set()
    unique: list[Suggestion] = []
    for suggestion in sorted(candidates, key=lambda s: s.score, reverse=True):
        key = (suggestion.type, suggestion.value.lower())
        if key in seen:
            continue
        seen.add(key)
        unique.append(suggestion)

    logger.debug("Suggestions for %r: %d candidate(s)", query, len(unique))
    return unique[: max(limit, 0)]


def record_recent_query(history: Sequence[str], query: str) -> list[str]:
    """Return ``history`` with ``query`` moved to the front, deduplicated and bounded."""
    normalized = (query or "").strip().lower()
    if not normalized:
        return list(history)
    rest = [q for q in history if q != normalized]
    return [normalized, *rest][:RECENT_QUERY_LIMIT]
