"""Dataset lookup shared by the MCP tools."""

from typing import Any

from prompt_catalogue.models.record import PromptRecord


def resolve_dataset(lifespan: dict[str, Any], name: str) -> list[PromptRecord] | None:
    """Return the records of a loaded dataset, or None for an unknown name."""
    datasets: dict[str, list[PromptRecord]] = lifespan["datasets"]
    return datasets.get(name.lower())


def unknown_dataset(lifespan: dict[str, Any], name: str) -> str:
    """Error string listing the datasets that do exist."""
    known = ", ".join(sorted(lifespan["datasets"]))
    return f"Error: Unknown dataset {name!r} (available: {known})."


def find_record(lifespan: dict[str, Any], record_id: str) -> PromptRecord | None:
    """Find a record by id across all datasets, case-insensitively."""
    wanted = record_id.lower()
    for records in lifespan["datasets"].values():
        for record in records:
            if record.id.lower() == wanted:
                return record
    return None
