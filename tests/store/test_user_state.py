"""Tests for the user-state store."""

import pytest

from prompt_catalogue.suggest.ranker import RECENT_QUERY_LIMIT


@pytest.mark.asyncio
async def test_toggle_favorite(store):
    assert await store.toggle_favorite("dax-001") is True
    assert await store.get_favorites() == {"dax-001"}
    assert await store.toggle_favorite("dax-001") is False
    assert await store.get_favorites() == set()


@pytest.mark.asyncio
async def test_favorites_independent(store):
    await store.toggle_favorite("a")
    await store.toggle_favorite("b")
    await store.toggle_favorite("a")
    assert await store.get_favorites() == {"b"}


@pytest.mark.asyncio
async def test_view_counts(store):
    assert await store.increment_view_count("a") == 1
    assert await store.increment_view_count("a") == 2
    assert await store.increment_view_count("b") == 1
    assert await store.get_view_counts() == {"a": 2, "b": 1}


@pytest.mark.asyncio
async def test_view_counts_empty(store):
    assert await store.get_view_counts() == {}


@pytest.mark.asyncio
async def test_recent_queries_most_recent_first(store):
    await store.record_query("dax")
    await store.record_query("Governance ")
    assert await store.recent_queries() == ["governance", "dax"]


@pytest.mark.asyncio
async def test_recent_queries_deduplicated(store):
    await store.record_query("dax")
    await store.record_query("tmdl")
    history = await store.record_query("DAX")
    assert history == ["dax", "tmdl"]
    assert await store.recent_queries() == ["dax", "tmdl"]


@pytest.mark.asyncio
async def test_recent_queries_bounded(store):
    for i in range(RECENT_QUERY_LIMIT + 5):
        await store.record_query(f"q{i}")
    history = await store.recent_queries()
    assert len(history) == RECENT_QUERY_LIMIT
    assert history[0] == f"q{RECENT_QUERY_LIMIT + 4}"


@pytest.mark.asyncio
async def test_blank_query_not_recorded(store):
    assert await store.record_query("   ") == []
    assert await store.recent_queries() == []
