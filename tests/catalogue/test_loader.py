"""Tests for dataset loading and normalization."""

import json

from prompt_catalogue.catalogue.loader import (
    CATALOGUE,
    WORKFORCE,
    flatten_prompts,
    load_catalogue,
    load_records,
    to_records,
)


def test_flatten_list_drops_non_objects():
    assert flatten_prompts([{"id": "a"}, "junk", 3, None]) == [{"id": "a"}]


def test_flatten_nested_fills_category_and_id():
    data = {
        "dax": {"dax-001": {"name": "Optimize"}, "dax-002": {"id": "custom-id"}},
        "junk": "not a group",
    }
    flat = flatten_prompts(data)
    assert flat == [
        {"name": "Optimize", "category": "dax", "id": "dax-001"},
        {"id": "custom-id", "category": "dax"},
    ]


def test_flatten_other_types():
    assert flatten_prompts("text") == []
    assert flatten_prompts(None) == []


def test_to_records_defaults_provenance():
    records = to_records([{"id": "a"}, {"id": "b", "provenance": "giac"}])
    assert [r.provenance for r in records] == ["custom", "giac"]


def test_to_records_skips_invalid(caplog):
    records = to_records([{"name": "no id"}, {"id": "ok"}])
    assert [r.id for r in records] == ["ok"]
    assert "Skipping prompt" in caplog.text


def test_to_records_tolerates_messy_lists():
    records = to_records([{"id": 7, "tags": ["a", None, ""], "pillars": None}])
    assert records[0].id == "7"
    assert records[0].tags == ["a"]
    assert records[0].pillars == []


def test_extra_fields_kept():
    records = to_records([{"id": "a", "few_shots": [{"input": "x", "output": "y"}]}])
    assert records[0].model_extra["few_shots"] == [{"input": "x", "output": "y"}]


def test_load_records_missing_file(tmp_path, caplog):
    assert load_records(tmp_path / "missing.json") == []
    assert "not found" in caplog.text


def test_load_records_from_file(tmp_path):
    path = tmp_path / "catalog.json"
    path.write_text(json.dumps([{"id": "a", "name": "A"}]), encoding="utf-8")
    records = load_records(path)
    assert [r.name for r in records] == ["A"]


def test_load_catalogue_uses_config(tmp_path, monkeypatch):
    catalogue = tmp_path / "c.json"
    catalogue.write_text(json.dumps([{"id": "c1"}]), encoding="utf-8")
    workforce = tmp_path / "w.json"
    workforce.write_text(json.dumps({"hr": {"w1": {"name": "W"}}}), encoding="utf-8")
    monkeypatch.setenv("PC_CATALOGUE_PATH", str(catalogue))
    monkeypatch.setenv("PC_WORKFORCE_PATH", str(workforce))

    datasets = load_catalogue()
    assert [r.id for r in datasets[CATALOGUE]] == ["c1"]
    assert [r.id for r in datasets[WORKFORCE]] == ["w1"]
    assert datasets[WORKFORCE][0].category == "hr"
