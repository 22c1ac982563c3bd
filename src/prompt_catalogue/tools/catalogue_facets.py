"""catalogue_facets MCP tool: available filter values for a dataset."""

from typing import Annotated

from fastmcp import FastMCP
from fastmcp.server.context import Context
from pydantic import Field

from prompt_catalogue.catalogue.loader import CATALOGUE
from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.search.filters import all_pillars, all_tags, source_counts, top_tags
from prompt_catalogue.tools.datasets import resolve_dataset, unknown_dataset


def format_facets(records: list[PromptRecord], tag_limit: int = 50) -> str:
    """Pillars, most used tags and provenance counts."""
    counts = source_counts(records)
    tags = top_tags(records, tag_limit)
    lines = [
        f"{len(records)} prompt(s): {counts['giac']} giac, {counts['custom']} custom",
        f"Pillars: {', '.join(all_pillars(records)) or '-'}",
        f"Top tags ({len(tags)} of {len(all_tags(records))}): {', '.join(tags) or '-'}",
    ]
    return "\n".join(lines)


def register_catalogue_facets(mcp: FastMCP) -> None:
    """Register the catalogue_facets tool with the MCP server."""

    @mcp.tool()
    async def catalogue_facets(
        dataset: Annotated[str, Field(description="catalogue or workforce")] = CATALOGUE,
        ctx: Context | None = None,
    ) -> str:
        """List the pillars, popular tags and sources available for filtering."""
        if ctx is None:
            raise RuntimeError("Context not injected")

        lifespan = ctx.lifespan_context
        records = resolve_dataset(lifespan, dataset)
        if records is None:
            return unknown_dataset(lifespan, dataset)
        return format_facets(records)
