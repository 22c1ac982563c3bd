"""catalogue_favorite MCP tool: toggle a prompt's favorite flag."""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from prompt_catalogue.tools.datasets import find_record


def register_catalogue_favorite(mcp: FastMCP) -> None:
    """Register the catalogue_favorite tool with the MCP server."""

    @mcp.tool()
    async def catalogue_favorite(
        record_id: Annotated[str, Field(description="Prompt id to (un)favorite")],
        ctx: Context | None = None,
    ) -> str:
        """Add a prompt to favorites, or remove it if it already is one."""
        if ctx is None:
            raise RuntimeError("Context not injected")

        lifespan = ctx.lifespan_context
        record = find_record(lifespan, record_id)
        if record is None:
            return f"[{record_id}] not found"

        now_favorite = await lifespan["store"].toggle_favorite(record.id)
        verb = "Added to" if now_favorite else "Removed from"
        return f"{verb} favorites: [{record.id}] {record.title}"
