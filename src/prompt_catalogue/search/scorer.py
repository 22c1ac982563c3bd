"""Relevance scoring for the relevance sort mode."""

from datetime import UTC, datetime

from prompt_catalogue.models.query import ParsedQuery, QueryField, Term
from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.search.matcher import candidate_texts
from prompt_catalogue.search.synonyms import expand_term

# Field weights favor titles and ids over free text
FIELD_WEIGHTS: dict[QueryField | None, float] = {
    QueryField.NAME: 3.0,
    QueryField.ID: 3.0,
    QueryField.SUMMARY: 2.0,
    QueryField.DESCRIPTION: 2.0,
    QueryField.PILLAR: 1.5,
    None: 1.0,
}

EXACT_SCORE = 5.0
PREFIX_SCORE = 3.5
CONTAINS_SCORE = 1.5
SHOULD_FACTOR = 0.6

# Recency bonus decays linearly from MAX to zero over MAX * DAYS_PER_POINT days
RECENCY_MAX_BONUS = 10.0
RECENCY_DAYS_PER_POINT = 18.0


def term_score(record: PromptRecord, term: Term) -> float:
    """Best exact/prefix/contains score of a term over its candidate texts, weighted."""
    best = 0.0
    texts = candidate_texts(record, term.field)
    for value in expand_term(term.value):
        if not value:
            continue
        for text in texts:
            if text == value:
                best = max(best, EXACT_SCORE)
            elif text.startswith(value):
                best = max(best, PREFIX_SCORE)
            elif value in text:
                best = max(best, CONTAINS_SCORE)
    return best * FIELD_WEIGHTS[term.field]


def recency_bonus(record: PromptRecord, now: datetime | None = None) -> float:
    """Bonus up to 10 points for content updated within roughly six months."""
    timestamp = record.timestamp
    if timestamp is None:
        return 0.0
    if now is None:
        now = datetime.now(UTC)
    if now.tzinfo is None:
        now = now.replace(tzinfo=UTC)

    age_days = (now - timestamp).total_seconds() / 86400.0
    return max(0.0, RECENCY_MAX_BONUS - min(RECENCY_MAX_BONUS, age_days / RECENCY_DAYS_PER_POINT))


def score_record(record: PromptRecord, query: ParsedQuery, now: datetime | None = None) -> float:
    """Relevance of a record: must terms + 0.6 * should terms + recency bonus.

    Excluded terms only gate matching and never contribute.
    """
    must = sum(term_score(record, term) for term in query.must)
    should = sum(term_score(record, term) for term in query.should) * SHOULD_FACTOR
    return must + should + recency_bonus(record, now)
