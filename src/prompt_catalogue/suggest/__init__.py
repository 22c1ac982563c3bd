"""Autocomplete module."""

from prompt_catalogue.suggest.index import build_suggestion_index
from prompt_catalogue.suggest.ranker import get_suggestions, record_recent_query

__all__ = ["build_suggestion_index", "get_suggestions", "record_recent_query"]
