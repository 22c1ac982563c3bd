"""catalogue_suggest MCP tool: autocomplete for partial queries."""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from prompt_catalogue.catalogue.loader import CATALOGUE
from prompt_catalogue.config import get_suggest_limit
from prompt_catalogue.models.suggest import SuggestIndex
from prompt_catalogue.store.user_state import UserStateStore
from prompt_catalogue.suggest.ranker import get_suggestions
from prompt_catalogue.tools.datasets import unknown_dataset
from prompt_catalogue.tools.formatters import format_suggestions


async def suggest_text(
    index: SuggestIndex,
    store: UserStateStore,
    partial: str,
    limit: int,
) -> str:
    """Rank suggestions, surfacing recent queries when ``partial`` is blank."""
    recent = await store.recent_queries() if not partial.strip() else []
    return format_suggestions(get_suggestions(partial, index, limit, recent))


def register_catalogue_suggest(mcp: FastMCP) -> None:
    """Register the catalogue_suggest tool with the MCP server."""

    @mcp.tool()
    async def catalogue_suggest(
        partial: Annotated[str, Field(description="What has been typed so far")] = "",
        dataset: Annotated[
            str, Field(description="Dataset to draw names, ids, tags and pillars from")
        ] = CATALOGUE,
        limit: Annotated[
            int | None, Field(description="Maximum suggestions (1-50)", ge=1, le=50)
        ] = None,
        ctx: Context | None = None,
    ) -> str:
        """Suggest completions for a partial search query.

        Candidates are prompt names, ids, tags and pillars ranked by match
        quality (exact, prefix, substring) and popularity. With an empty
        query, recent searches are listed as well.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")

        lifespan = ctx.lifespan_context
        index = lifespan["indexes"].get(dataset.lower())
        if index is None:
            return unknown_dataset(lifespan, dataset)

        return await suggest_text(index, lifespan["store"], partial, limit or get_suggest_limit())
