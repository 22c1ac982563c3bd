"""FastMCP server with lifespan management and tool registration."""

import logging
import sys
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from fastmcp import FastMCP

from prompt_catalogue.catalogue.loader import load_catalogue
from prompt_catalogue.config import get_db_path, get_log_level
from prompt_catalogue.db.connection import create_connection
from prompt_catalogue.store.user_state import UserStateStore
from prompt_catalogue.suggest.index import build_suggestion_index
from prompt_catalogue.tools.catalogue_facets import register_catalogue_facets
from prompt_catalogue.tools.catalogue_favorite import register_catalogue_favorite
from prompt_catalogue.tools.catalogue_get import register_catalogue_get
from prompt_catalogue.tools.catalogue_search import register_catalogue_search
from prompt_catalogue.tools.catalogue_suggest import register_catalogue_suggest


@asynccontextmanager
async def lifespan(server: FastMCP) -> AsyncIterator[dict[str, Any]]:
    """Load datasets, build suggestion indexes and open the user-state database."""
    # Configure logging to stderr (stdout is MCP stdio transport)
    logging.basicConfig(
        level=getattr(logging, get_log_level()),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger(__name__)

    datasets = load_catalogue()
    indexes = {name: build_suggestion_index(records) for name, records in datasets.items()}
    for name, records in datasets.items():
        if records:
            logger.info("Dataset %s: %d prompt(s)", name, len(records))
        else:
            logger.warning("Dataset %s is empty; searches will return nothing", name)

    db_path = get_db_path()
    logger.info("Opening user-state database at %s", db_path)
    db = await create_connection(db_path)
    store = UserStateStore(db)

    try:
        yield {
            "db": db,
            "store": store,
            "datasets": datasets,
            "indexes": indexes,
        }
    finally:
        await db.close()
        logger.info("Database connection closed")


_INSTRUCTIONS = """\
This server searches a catalogue of curated and custom prompts (Power BI, \
Fabric, DAX, governance, career skills, ...) and a workforce prompt set.

QUERYING:
- catalogue_search: Keyword search with filters. Query syntax:
  - plain words are all required: `dax measure`
  - OR makes the following words alternatives: `dax OR tmdl`
  - -word excludes: `dax -performance`
  - field:value scopes a word: `name:optimize`, `pillar:governance`
  Filter by source (giac/custom), pillars (any/all), tags, favorites; sort by \
relevance, newest, name or mostViewed.
- catalogue_suggest: Autocomplete a partial query from names, ids, tags and \
pillars. Empty input lists recent searches.
- catalogue_facets: Pillars, popular tags and source counts for a dataset.
- catalogue_get: Full details of one prompt by id (counts as a view).
- catalogue_favorite: Toggle a prompt as favorite; search with favorites=true.

Datasets: catalogue (default), workforce.
"""


def create_server() -> FastMCP:
    """Create and configure the MCP server with all tools."""
    mcp = FastMCP(
        "prompt-catalogue",
        instructions=_INSTRUCTIONS,
        lifespan=lifespan,
    )

    register_catalogue_search(mcp)
    register_catalogue_suggest(mcp)
    register_catalogue_facets(mcp)
    register_catalogue_get(mcp)
    register_catalogue_favorite(mcp)

    return mcp
