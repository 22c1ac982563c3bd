"""Shared test fixtures."""

import pytest
import pytest_asyncio

from prompt_catalogue.db.connection import create_connection
from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.store.user_state import UserStateStore
from tests.factories import make_record


@pytest.fixture
def dax_and_resume() -> list[PromptRecord]:
    """The two-record collection used by the end-to-end scenarios."""
    return [
        make_record("a", name="Optimize DAX", pillars=["dax"]),
        make_record("b", name="Resume tips", pillars=["career-soft-skills"]),
    ]


@pytest.fixture
def catalogue() -> list[PromptRecord]:
    """A small mixed catalogue."""
    return [
        make_record(
            "dax-001",
            name="Optimize DAX measures",
            summary="Rewrite slow measures using variables",
            pillars=["dax", "performance-bpa"],
            tags=["dax", "measure"],
            provenance="giac",
            updated_at="2026-09-01T00:00:00Z",
        ),
        make_record(
            "gov-001",
            name="Workspace governance review",
            summary="Audit deployment pipelines and access",
            pillars=["deployment-governance"],
            tags=["governance", "audit"],
            provenance="giac",
            created_at="2025-01-15T00:00:00Z",
        ),
        make_record(
            "car-001",
            name="Resume tips",
            summary="Tailor your CV for analytics roles",
            pillars=["career-soft-skills"],
            tags=["resume", "cv"],
            provenance="custom",
            updated_at="2026-06-01T00:00:00Z",
        ),
        make_record(
            "tmdl-001",
            name="TMDL modeling checklist",
            description="Semantic model conventions",
            pillars=["modeling-tmdl", "dax"],
            tags=["tmdl"],
        ),
    ]


@pytest_asyncio.fixture
async def db():
    """In-memory user-state database with full schema."""
    conn = await create_connection(":memory:")
    yield conn
    await conn.close()


@pytest_asyncio.fixture
async def store(db):
    """User-state store backed by in-memory DB."""
    return UserStateStore(db)
