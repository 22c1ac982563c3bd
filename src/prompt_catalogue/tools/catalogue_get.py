"""catalogue_get MCP tool: full record retrieval by ID."""

import logging
from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.store.user_state import UserStateStore
from prompt_catalogue.tools.datasets import find_record
from prompt_catalogue.tools.formatters import format_record_full

logger = logging.getLogger(__name__)


async def get_record_text(record: PromptRecord | None, record_id: str, store: UserStateStore) -> str:
    """Format a record in full and count the view."""
    if record is None:
        return f"[{record_id}] not found"
    views = await store.increment_view_count(record.id)
    favorites = await store.get_favorites()
    return format_record_full(record, view_count=views, is_favorite=record.id in favorites)


def register_catalogue_get(mcp: FastMCP) -> None:
    """Register the catalogue_get tool with the MCP server."""

    @mcp.tool()
    async def catalogue_get(
        record_id: Annotated[str, Field(description="Prompt id, e.g. from catalogue_search")],
        ctx: Context | None = None,
    ) -> str:
        """Retrieve the full details of one prompt by id.

        Each retrieval counts as a view for the mostViewed sort.
        """
        if ctx is None:
            raise RuntimeError("Context not injected")

        lifespan = ctx.lifespan_context
        record = find_record(lifespan, record_id)
        return await get_record_text(record, record_id, lifespan["store"])
