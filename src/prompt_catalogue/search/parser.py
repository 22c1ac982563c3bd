"""Query parsing: raw search text to a structured ParsedQuery."""

import logging
import re

from prompt_catalogue.models.query import ParsedQuery, QueryField, Term
from prompt_catalogue.search.synonyms import synonyms_for

logger = logging.getLogger(__name__)

FIELD_ALIASES: dict[str, QueryField] = {
    "name": QueryField.NAME,
    "id": QueryField.ID,
    "summary": QueryField.SUMMARY,
    "description": QueryField.DESCRIPTION,
    "pillar": QueryField.PILLAR,
    "pillars": QueryField.PILLAR,
}

_KEYWORDS = {"AND", "OR", "NOT"}
_HIGHLIGHT_TOKEN = re.compile(r"\b(?!(?:AND|OR|NOT)\b)\w{2,}\b", re.IGNORECASE)


def parse_query(raw: str) -> ParsedQuery:
    """Parse search text into must/should/not terms.

    Tokens are whitespace-separated. ``AND`` and ``NOT`` switch subsequent
    terms to ``must``, ``OR`` switches them to ``should`` and also turns the
    required term right before it into an alternative, so ``a OR b`` means
    either. Only a leading ``-`` excludes a term; the ``NOT`` keyword does
    not. A ``field:value`` token scopes the term when ``field`` is known,
    otherwise the whole token is searched across the default text fields.
    Never raises.
    """
    parsed = ParsedQuery()
    mode = "must"
    last_was_must = False
    for token in (raw or "").split():
        upper = token.upper()
        if upper in _KEYWORDS:
            if upper == "OR":
                if last_was_must:
                    parsed.should.append(parsed.must.pop())
                mode = "should"
            else:
                mode = "must"
            last_was_must = False
            continue

        negated = token.startswith("-")
        if negated:
            token = token[1:]

        key, sep, rest = token.partition(":")
        field = FIELD_ALIASES.get(key.lower()) if sep else None
        # Unknown prefixes stay part of the literal text
        value = rest if field is not None else token

        term = Term(field=field, value=value.lower())
        if negated:
            parsed.not_.append(term)
        elif mode == "must":
            parsed.must.append(term)
        else:
            parsed.should.append(term)
        last_was_must = not negated and mode == "must"

    logger.debug(
        "Parsed %r: %d must, %d should, %d not",
        raw,
        len(parsed.must),
        len(parsed.should),
        len(parsed.not_),
    )
    return parsed


def extract_highlight_tokens(raw: str) -> list[str]:
    """Return lowercase words worth highlighting in results, with their synonyms.

    Keywords and single characters are skipped. Order is first-seen.
    """
    tokens: dict[str, None] = {}
    for match in _HIGHLIGHT_TOKEN.finditer(raw or ""):
        word = match.group(0).lower()
        tokens.setdefault(word, None)
        for synonym in synonyms_for(word):
            tokens.setdefault(synonym, None)
    return list(tokens)
