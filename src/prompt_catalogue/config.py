"""Environment-variable-based configuration."""

import os
from pathlib import Path


def get_catalogue_path() -> Path:
    """Return the curated catalogue JSON path from PC_CATALOGUE_PATH."""
    return Path(os.environ.get("PC_CATALOGUE_PATH", "prompt-catalog.json")).expanduser()


def get_workforce_path() -> Path:
    """Return the workforce prompt set JSON path from PC_WORKFORCE_PATH."""
    return Path(os.environ.get("PC_WORKFORCE_PATH", "workforce_prompts.json")).expanduser()


def get_db_path() -> Path:
    """Return the user-state database path from PC_DB_PATH."""
    raw = os.environ.get("PC_DB_PATH", "~/.local/share/prompt_catalogue/state.db")
    return Path(raw).expanduser()


def get_suggest_limit() -> int:
    """Return the default number of autocomplete suggestions from PC_SUGGEST_LIMIT."""
    return int(os.environ.get("PC_SUGGEST_LIMIT", "8"))


def get_log_level() -> str:
    """Return the logging level from PC_LOG_LEVEL."""
    return os.environ.get("PC_LOG_LEVEL", "WARNING")
