"""Frequency index over record names, ids, tags and pillars."""

from collections.abc import Iterable

from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.models.suggest import SuggestIndex


def _inc(counts: dict[str, int], key: str) -> None:
    counts[key] = counts.get(key, 0) + 1


def build_suggestion_index(records: Iterable[PromptRecord]) -> SuggestIndex:
    """Count every name, id, tag and pillar in the collection.

    Rebuild whenever the collection changes; the index holds no reference
    to the records themselves.
    """
    index = SuggestIndex()
    for record in records:
        if record.name:
            _inc(index.names, record.name)
        if record.id:
            _inc(index.ids, record.id)
        for tag in record.tags:
            if tag:
                _inc(index.tags, tag)
        for pillar in record.pillars:
            if pillar:
                _inc(index.pillars, pillar)
    return index
