"""DDL for the user-state database."""

import aiosqlite

SCHEMA_VERSION = 1

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER NOT NULL
);

CREATE TABLE IF NOT EXISTS favorites (
    record_id TEXT PRIMARY KEY,
    created_at TEXT NOT NULL
);

CREATE TABLE IF NOT EXISTS view_counts (
    record_id TEXT PRIMARY KEY,
    count INTEGER NOT NULL DEFAULT 0
);

CREATE TABLE IF NOT EXISTS recent_queries (
    position INTEGER PRIMARY KEY,
    query TEXT NOT NULL UNIQUE
);
"""


async def apply_schema(db: aiosqlite.Connection) -> None:
    """Create tables if missing and record the schema version once."""
    await db.executescript(SCHEMA_SQL)
    cursor = await db.execute("SELECT version FROM schema_version LIMIT 1")
    if await cursor.fetchone() is None:
        await db.execute("INSERT INTO schema_version (version) VALUES (?)", (SCHEMA_VERSION,))
    await db.commit()
