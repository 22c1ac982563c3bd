"""Tests for environment configuration."""

from pathlib import Path
from unittest.mock import patch

from prompt_catalogue.config import (
    get_catalogue_path,
    get_db_path,
    get_log_level,
    get_suggest_limit,
    get_workforce_path,
)


def test_defaults():
    with patch.dict("os.environ", {}, clear=True):
        assert get_catalogue_path() == Path("prompt-catalog.json")
        assert get_workforce_path() == Path("workforce_prompts.json")
        assert get_db_path().name == "state.db"
        assert get_suggest_limit() == 8
        assert get_log_level() == "WARNING"


def test_from_env():
    env = {
        "PC_CATALOGUE_PATH": "/data/c.json",
        "PC_SUGGEST_LIMIT": "12",
        "PC_LOG_LEVEL": "DEBUG",
    }
    with patch.dict("os.environ", env):
        assert get_catalogue_path() == Path("/data/c.json")
        assert get_suggest_limit() == 12
        assert get_log_level() == "DEBUG"
