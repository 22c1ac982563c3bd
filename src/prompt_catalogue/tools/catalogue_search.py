"""catalogue_search MCP tool: boolean/field query + filters + sort."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from prompt_catalogue.catalogue.loader import CATALOGUE
from prompt_catalogue.models.filters import FilterState, PillarsMode, SortMode, SourceFilter
from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.search.filters import apply_filters
from prompt_catalogue.search.parser import extract_highlight_tokens
from prompt_catalogue.store.user_state import UserStateStore
from prompt_catalogue.tools.datasets import resolve_dataset, unknown_dataset
from prompt_catalogue.tools.formatters import format_record_compact, format_result_list

logger = logging.getLogger(__name__)


async def search_records(
    records: list[PromptRecord],
    store: UserStateStore,
    state: FilterState,
    limit: int = 10,
    share: bool = False,
) -> str:
    """Run the filter pipeline against a snapshot of user state and format the result."""
    favorites = await store.get_favorites()
    views = await store.get_view_counts()

    results = apply_filters(
        records,
        state,
        is_favorite=favorites.__contains__,
        view_count=lambda record_id: views.get(record_id, 0),
    )
    if state.q.strip():
        await store.record_query(state.q)

    tokens = extract_highlight_tokens(state.q)
    entries = [format_record_compact(r, tokens, r.id in favorites) for r in results[:limit]]

    note = None
    if len(results) > limit:
        note = f"Showing {limit} of {len(results)} matches. Narrow the query or raise limit."
    header = f"Preset: {state.to_preset_code()}" if share else None
    return format_result_list(entries, header=header, note=note)


def register_catalogue_search(mcp: FastMCP) -> None:
    """Register the catalogue_search tool with the MCP server."""

    @mcp.tool()
    async def catalogue_search(
        query: Annotated[
            str,
            Field(
                description=(
                    "Search text. Supports AND/OR, -term exclusion and field:value "
                    "qualifiers (name, id, summary, description, pillar)"
                )
            ),
        ] = "",
        dataset: Annotated[
            str, Field(description="Dataset to search (catalogue or workforce)")
        ] = CATALOGUE,
        source: Annotated[
            SourceFilter, Field(description="Provenance filter: all, giac or custom")
        ] = SourceFilter.ALL,
        pillars: Annotated[
            list[str] | None, Field(description="Pillars to filter by")
        ] = None,
        pillars_mode: Annotated[
            PillarsMode, Field(description="any: at least one pillar, all: every pillar")
        ] = PillarsMode.ANY,
        tags: Annotated[
            list[str] | None, Field(description="Tags to filter by (any must match)")
        ] = None,
        favorites: Annotated[bool, Field(description="Only show favorites")] = False,
        sort: Annotated[
            SortMode, Field(description="relevance, newest, name or mostViewed")
        ] = SortMode.RELEVANCE,
        limit: Annotated[
            int, Field(description="Maximum results to return (1-100)", ge=1, le=100)
        ] = 10,
        preset: Annotated[
            str | None, Field(description="Preset code; replaces all other filters")
        ] = None,
        share: Annotated[
            bool, Field(description="Include a preset code for the current filters")
        ] = False,
        ctx: Context | None = None,
    ) -> str:
        """Search prompts with boolean keyword queries and structured filters.

        Terms are matched as substrings across name, id, summary and
        description, expanded with common synonyms (resume/cv, ...).
        Relevance sorting favors exact and prefix hits on names and ids,
        and recently updated prompts.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")

        lifespan = ctx.lifespan_context
        records = resolve_dataset(lifespan, dataset)
        if records is None:
            return unknown_dataset(lifespan, dataset)

        state: FilterState | None = None
        if preset:
            state = FilterState.from_preset_code(preset)
            if state is None:
                return "Error: Preset code could not be decoded."
        if state is None:
            state = FilterState(
                q=query,
                source=source,
                pillars=pillars or [],
                pillars_mode=pillars_mode,
                tags=tags or [],
                favorites=favorites,
                sort=sort,
            )

        return await search_records(records, lifespan["store"], state, limit, share)
