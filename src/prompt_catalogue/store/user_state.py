"""Per-user state: favorites, view counts and recent queries."""

import logging
from datetime import UTC, datetime

import aiosqlite

from prompt_catalogue.suggest.ranker import RECENT_QUERY_LIMIT, record_recent_query

logger = logging.getLogger(__name__)


class UserStateStore:
    """Persisted state the search engine reads through injected lookups."""

    def __init__(self, db: aiosqlite.Connection):
        """Initialize with a database connection."""
        self.db = db

    # --- favorites ---

    async def toggle_favorite(self, record_id: str) -> bool:
        """Flip the favorite flag of a record and return the new state."""
        cursor = await self.db.execute(
            "DELETE FROM favorites WHERE record_id = ?", (record_id,)
        )
        if cursor.rowcount:
            await self.db.commit()
            logger.info("Removed favorite %s", record_id)
            return False

        await self.db.execute(
            "INSERT INTO favorites (record_id, created_at) VALUES (?, ?)",
            (record_id, datetime.now(UTC).isoformat()),
        )
        await self.db.commit()
        logger.info("Added favorite %s", record_id)
        return True

    async def get_favorites(self) -> set[str]:
        """All favorite record ids."""
        cursor = await self.db.execute("SELECT record_id FROM favorites")
        return {row[0] for row in await cursor.fetchall()}

    # --- view counts ---

    async def increment_view_count(self, record_id: str) -> int:
        """Count one more view of a record and return the new total."""
        await self.db.execute(
            """INSERT INTO view_counts (record_id, count) VALUES (?, 1)
            ON CONFLICT(record_id) DO UPDATE SET count = count + 1""",
            (record_id,),
        )
        await self.db.commit()
        cursor = await self.db.execute(
            "SELECT count FROM view_counts WHERE record_id = ?", (record_id,)
        )
        row = await cursor.fetchone()
        return row[0] if row else 0

    async def get_view_counts(self) -> dict[str, int]:
        """View totals keyed by record id; unseen records are absent."""
        cursor = await self.db.execute("SELECT record_id, count FROM view_counts")
        return {row[0]: row[1] for row in await cursor.fetchall()}

    # --- recent queries ---

    async def record_query(self, query: str) -> list[str]:
        """Push a query onto the history and return the updated history."""
        previous = await self.recent_queries()
        history = record_recent_query(previous, query)
        if history == previous:
            return history

        await self.db.execute("DELETE FROM recent_queries")
        await self.db.executemany(
            "INSERT INTO recent_queries (position, query) VALUES (?, ?)",
            list(enumerate(history)),
        )
        await self.db.commit()
        return history

    async def recent_queries(self) -> list[str]:
        """History, most recent first."""
        cursor = await self.db.execute(
            "SELECT query FROM recent_queries ORDER BY position LIMIT ?",
            (RECENT_QUERY_LIMIT,),
        )
        return [row[0] for row in await cursor.fetchall()]
