"""Load prompt datasets from JSON files and normalize them into records."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from prompt_catalogue.config import get_catalogue_path, get_workforce_path
from prompt_catalogue.models.record import PromptRecord

logger = logging.getLogger(__name__)

CATALOGUE = "catalogue"
WORKFORCE = "workforce"


def flatten_prompts(data: Any) -> list[dict[str, Any]]:
    """Flatten a dataset into a list of prompt objects.

    Accepts either a list of prompts or a ``{category: {prompt_id: prompt}}``
    mapping, in which case missing ``category``/``id`` come from the keys.
    Anything that is not an object is dropped.
    """
    if isinstance(data, list):
        return [item for item in data if isinstance(item, dict)]
    if not isinstance(data, dict):
        return []

    flat: list[dict[str, Any]] = []
    for category, group in data.items():
        if not isinstance(group, dict):
            continue
        for prompt_id, prompt in group.items():
            if not isinstance(prompt, dict):
                continue
            item = dict(prompt)
            item.setdefault("category", category)
            item.setdefault("id", prompt_id)
            flat.append(item)
    return flat


def to_records(items: list[dict[str, Any]]) -> list[PromptRecord]:
    """Validate prompt objects, skipping the ones that do not fit the record shape."""
    records: list[PromptRecord] = []
    for item in items:
        if not item.get("provenance"):
            item = {**item, "provenance": "custom"}
        try:
            records.append(PromptRecord.model_validate(item))
        except ValidationError as e:
            logger.warning("Skipping prompt %r: %d validation error(s)", item.get("id"), e.error_count())
    return records


def load_records(path: Path | str) -> list[PromptRecord]:
    """Load one dataset file. A missing file yields an empty list."""
    path = Path(path)
    if not path.exists():
        logger.warning("Dataset not found at %s", path)
        return []
    with path.open(encoding="utf-8") as f:
        data = json.load(f)
    records = to_records(flatten_prompts(data))
    logger.info("Loaded %d record(s) from %s", len(records), path)
    return records


def load_catalogue(
    catalogue_path: Path | str | None = None,
    workforce_path: Path | str | None = None,
) -> dict[str, list[PromptRecord]]:
    """Load the curated catalogue and the workforce set, keyed by dataset name."""
    return {
        CATALOGUE: load_records(catalogue_path or get_catalogue_path()),
        WORKFORCE: load_records(workforce_path or get_workforce_path()),
    }
