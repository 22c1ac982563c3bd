"""Boolean matching of a parsed query against a single record."""

from prompt_catalogue.models.query import ParsedQuery, QueryField, Term
from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.search.synonyms import expand_term

DEFAULT_FIELDS = ("name", "id", "summary", "description")


def candidate_texts(record: PromptRecord, field: QueryField | None) -> list[str]:
    """Lowercased texts a term scoped to ``field`` is compared against."""
    if field is None:
        return [record.text_field(name) for name in DEFAULT_FIELDS]
    if field is QueryField.PILLAR:
        return [(p or "").lower() for p in record.pillars]
    return [record.text_field(field.value)]


def term_hits(record: PromptRecord, term: Term) -> bool:
    """True when any candidate text contains the term or one of its synonyms."""
    texts = candidate_texts(record, term.field)
    return any(value in text for value in expand_term(term.value) for text in texts)


def matches(record: PromptRecord, query: ParsedQuery) -> bool:
    """Evaluate a parsed query: all must, no not, at least one should if any."""
    if any(not term_hits(record, term) for term in query.must):
        return False
    if any(term_hits(record, term) for term in query.not_):
        return False
    if query.should and not any(term_hits(record, term) for term in query.should):
        return False
    return True
