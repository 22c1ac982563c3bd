"""Tests for boolean matching."""

from prompt_catalogue.models.query import ParsedQuery, QueryField, Term
from prompt_catalogue.search.matcher import candidate_texts, matches
from prompt_catalogue.search.parser import parse_query
from tests.factories import make_record


def test_empty_query_matches_everything():
    assert matches(make_record("x"), ParsedQuery())


def test_default_fields_substring():
    record = make_record("dax-001", name="Optimize DAX measures")
    assert matches(record, parse_query("optim"))
    assert matches(record, parse_query("dax-0"))
    assert not matches(record, parse_query("governance"))


def test_missing_fields_are_empty():
    record = make_record("x")
    assert candidate_texts(record, None) == ["", "x", "", ""]
    assert candidate_texts(record, QueryField.SUMMARY) == [""]
    assert candidate_texts(record, QueryField.PILLAR) == []


def test_pillar_field_only_checks_pillars():
    record = make_record("x", name="dax guide", pillars=["Power-Query"])
    assert matches(record, parse_query("pillar:power"))
    assert not matches(record, parse_query("pillar:dax"))


def test_named_field_only_checks_that_field():
    record = make_record("x", name="Alpha", summary="beta")
    assert matches(record, parse_query("summary:beta"))
    assert not matches(record, parse_query("name:beta"))


def test_must_terms_are_conjunctive():
    record = make_record("x", name="Optimize DAX")
    assert not matches(record, parse_query("optimize zzz"))
    assert not matches(record, parse_query("yyy zzz"))


def test_not_takes_precedence():
    record = make_record("x", name="Optimize DAX")
    assert not matches(record, parse_query("optimize -dax"))
    query = ParsedQuery(
        must=[Term(value="dax")],
        should=[Term(value="optimize")],
        **{"not": [Term(value="dax")]},
    )
    assert not matches(record, query)


def test_should_requires_one_hit():
    record = make_record("x", name="Optimize DAX")
    assert matches(record, parse_query("tmdl OR dax"))
    assert not matches(record, parse_query("tmdl OR spark"))


def test_synonym_expansion():
    """A 'resume' query finds a record that only mentions 'cv'."""
    record = make_record("x", name="Polish your CV")
    assert matches(record, parse_query("resume"))


def test_synonyms_are_whole_term_only():
    record = make_record("x", name="Polish your CV")
    assert not matches(record, parse_query("resumes"))


def test_scenario_resume_matches_only_resume_record(dax_and_resume):
    query = parse_query("resume")
    assert [r.id for r in dax_and_resume if matches(r, query)] == ["b"]


def test_scenario_pillar_and_missing_term(dax_and_resume):
    query = parse_query("pillar:dax AND performance")
    assert not any(matches(r, query) for r in dax_and_resume)
