"""Filter orchestration: text query + structured filters + sort over a record collection."""

import logging
from collections import Counter
from collections.abc import Callable, Iterable, Sequence
from datetime import UTC, datetime

from prompt_catalogue.models.filters import FilterState, PillarsMode, SortMode, SourceFilter
from prompt_catalogue.models.query import ParsedQuery
from prompt_catalogue.models.record import PromptRecord, Provenance
from prompt_catalogue.search.matcher import matches
from prompt_catalogue.search.parser import parse_query
from prompt_catalogue.search.scorer import score_record

logger = logging.getLogger(__name__)

FavoriteLookup = Callable[[str], bool]
ViewCountLookup = Callable[[str], int]

_EPOCH = datetime.min.replace(tzinfo=UTC)


def _no_favorites(_record_id: str) -> bool:
    return False


def _no_views(_record_id: str) -> int:
    return 0


def source_matches(record: PromptRecord, source: SourceFilter) -> bool:
    """Curated (giac) versus everything else."""
    if source is SourceFilter.ALL:
        return True
    is_giac = record.provenance == Provenance.GIAC.value
    return is_giac if source is SourceFilter.GIAC else not is_giac


def pillars_match(record: PromptRecord, pillars: Sequence[str], mode: PillarsMode) -> bool:
    """Any-of or all-of pillar selection; an empty selection passes."""
    if not pillars:
        return True
    own = set(record.pillars)
    if mode is PillarsMode.ALL:
        return set(pillars) <= own
    return not own.isdisjoint(pillars)


def tags_match(record: PromptRecord, tags: Sequence[str]) -> bool:
    """Any-of tag selection; an empty selection passes."""
    if not tags:
        return True
    return not set(record.tags).isdisjoint(tags)


def _sort(
    records: list[PromptRecord],
    mode: SortMode,
    query: ParsedQuery,
    view_count: ViewCountLookup,
    now: datetime | None,
) -> list[PromptRecord]:
    if mode is SortMode.RELEVANCE:
        scores = {id(r): score_record(r, query, now) for r in records}
        return sorted(records, key=lambda r: scores[id(r)], reverse=True)
    if mode is SortMode.NEWEST:
        return sorted(records, key=lambda r: r.timestamp or _EPOCH, reverse=True)
    if mode is SortMode.NAME:
        return sorted(records, key=lambda r: (r.title.casefold(), r.title))
    if mode is SortMode.MOST_VIEWED:
        return sorted(records, key=lambda r: view_count(r.id), reverse=True)
    return records


def apply_filters(
    records: Iterable[PromptRecord],
    state: FilterState,
    *,
    is_favorite: FavoriteLookup | None = None,
    view_count: ViewCountLookup | None = None,
    now: datetime | None = None,
) -> list[PromptRecord]:
    """Return the records passing every filter in ``state``, in its sort order.

    ``is_favorite`` and ``view_count`` are read-only lookups supplied by the
    host; when omitted nothing is a favorite and every view count is zero.
    Sorting is stable, so ties keep input order.
    """
    is_favorite = is_favorite or _no_favorites
    view_count = view_count or _no_views
    query = parse_query(state.q)

    passing = [
        record
        for record in records
        if (not state.q or matches(record, query))
        and source_matches(record, state.source)
        and pillars_match(record, state.pillars, state.pillars_mode)
        and tags_match(record, state.tags)
        and (not state.favorites or is_favorite(record.id))
    ]
    logger.debug("Filter %r kept %d record(s)", state.q, len(passing))
    return _sort(passing, state.sort, query, view_count, now)


# --- facets ---


def all_pillars(records: Iterable[PromptRecord]) -> list[str]:
    """Sorted distinct pillars across the collection."""
    return sorted({p for r in records for p in r.pillars if p})


def all_tags(records: Iterable[PromptRecord]) -> list[str]:
    """Sorted distinct tags across the collection."""
    return sorted({t for r in records for t in r.tags if t})


def top_tags(records: Iterable[PromptRecord], limit: int = 50) -> list[str]:
    """Most frequent tags first; ties keep first-seen order."""
    counts = Counter(t for r in records for t in r.tags if t)
    return [tag for tag, _count in counts.most_common(limit)]


def source_counts(records: Iterable[PromptRecord]) -> dict[str, int]:
    """Number of curated (giac) and custom records."""
    counts = {Provenance.GIAC.value: 0, Provenance.CUSTOM.value: 0}
    for record in records:
        if record.provenance == Provenance.GIAC.value:
            counts[Provenance.GIAC.value] += 1
        else:
            counts[Provenance.CUSTOM.value] += 1
    return counts
