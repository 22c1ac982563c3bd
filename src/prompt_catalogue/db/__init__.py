"""User-state database connection and schema management."""

from prompt_catalogue.db.connection import create_connection
from prompt_catalogue.db.schema import SCHEMA_VERSION, apply_schema

__all__ = ["SCHEMA_VERSION", "apply_schema", "create_connection"]
