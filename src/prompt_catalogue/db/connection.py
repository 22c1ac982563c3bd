"""Database connection management."""

import logging
from pathlib import Path

import aiosqlite

from prompt_catalogue.config import get_db_path
from prompt_catalogue.db.schema import apply_schema

logger = logging.getLogger(__name__)


async def create_connection(db_path: Path | str | None = None) -> aiosqlite.Connection:
    """Open the user-state database and apply the schema.

    For in-memory databases, pass ":memory:".
    """
    db_path = str(db_path or get_db_path())
    if db_path != ":memory:":
        Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    conn = await aiosqlite.connect(db_path)
    conn.row_factory = aiosqlite.Row
    await conn.execute("PRAGMA journal_mode=WAL")

    await apply_schema(conn)
    logger.debug("User-state database ready at %s", db_path)
    return conn
