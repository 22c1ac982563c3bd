"""Synonym table for search expansion.

Keys and values are lowercase. Lookup is on the whole term value, so a
multi-word term only expands when it matches a key verbatim.
"""

SEARCH_SYNONYMS: dict[str, list[str]] = {
    # Career discovery
    "resume": ["cv", "cover letter", "portfolio", "career", "soft skills", "documentation"],
    "cv": ["resume", "cover letter", "portfolio", "career", "soft skills", "documentation"],
    "cover letter": ["resume", "cv", "portfolio", "career", "documentation"],
    "job application": ["resume", "cv", "cover letter", "portfolio", "career"],
    "interview": ["soft skills", "portfolio", "profile"],
    # General
    "governance": ["deployment", "compliance"],
    "performance": ["optimization", "vertipaq", "speed"],
    "modeling": ["semantic model", "tmdl"],
    "documentation": ["docs", "guide", "help"],
}


def synonyms_for(value: str) -> list[str]:
    """Return the synonyms of a term value (exact, case-insensitive lookup)."""
    return [s.lower() for s in SEARCH_SYNONYMS.get((value or "").lower(), [])]


def expand_term(value: str) -> list[str]:
    """Return the term value followed by its synonyms, all lowercase."""
    base = (value or "").lower()
    return [base, *synonyms_for(base)]
