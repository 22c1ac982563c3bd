"""Compact output formatters for MCP tool responses."""

import re

from prompt_catalogue.models.record import PromptRecord
from prompt_catalogue.models.suggest import Suggestion


def highlight(text: str, tokens: list[str]) -> str:
    """Wrap case-insensitive occurrences of any token in ``**``."""
    if not text or not tokens:
        return text
    # Longest first so "cover letter" wins over "cover"
    ordered = sorted({t for t in tokens if t}, key=len, reverse=True)
    pattern = re.compile("|".join(re.escape(t) for t in ordered), re.IGNORECASE)
    return pattern.sub(lambda m: f"**{m.group(0)}**", text)


def format_record_header(record: PromptRecord, tokens: list[str] | None = None) -> str:
    """Format: [dax-001] Optimize DAX | dax, performance-bpa."""
    title = highlight(record.title, tokens or [])
    header = f"[{record.id}] {title}"
    if record.pillars:
        header += f" | {', '.join(record.pillars)}"
    return header


def format_record_meta(record: PromptRecord, is_favorite: bool = False) -> str:
    """Format: #tag1 #tag2 | giac  [FAV]."""
    parts: list[str] = []
    if record.tags:
        parts.append(" ".join(f"#{t}" for t in record.tags))
    parts.append(record.provenance)
    line = " | ".join(parts)
    if is_favorite:
        line += "  [FAV]"
    return line


def format_record_compact(
    record: PromptRecord,
    tokens: list[str] | None = None,
    is_favorite: bool = False,
) -> str:
    """Header + summary + meta. For catalogue_search."""
    lines = [format_record_header(record, tokens)]
    if record.summary:
        lines.append(f"  {highlight(record.summary, tokens or [])}")
    lines.append(f"  {format_record_meta(record, is_favorite)}")
    return "\n".join(lines)


def format_record_full(
    record: PromptRecord,
    view_count: int = 0,
    is_favorite: bool = False,
) -> str:
    """Header + meta + summary + description + timestamps. For catalogue_get."""
    lines = [format_record_header(record), f"  {format_record_meta(record, is_favorite)}"]
    if record.category:
        lines.append(f"  category: {record.category}")
    if record.summary:
        lines.append(f"  {record.summary}")
    if record.description:
        lines.append(f"  {record.description}")
    stamp = record.updated_at or record.created_at
    if stamp:
        lines.append(f"  updated: {stamp}")
    lines.append(f"  views: {view_count}")
    return "\n".join(lines)


def format_suggestions(suggestions: list[Suggestion]) -> str:
    """One suggestion per line: value (type)."""
    if not suggestions:
        return "No suggestions."
    return "\n".join(f"{s.value} ({s.type.value})" for s in suggestions)


def format_result_list(
    formatted_entries: list[str],
    header: str | None = None,
    note: str | None = None,
) -> str:
    """Count + note + entries joined by blank lines."""
    if not formatted_entries:
        return f"{header}\nNo results found." if header else "No results found."

    lines: list[str] = []
    if header:
        lines.append(header)
    lines.append(f"{len(formatted_entries)} result(s)")
    if note:
        lines.append(f"Note: {note}")
    lines.append("")
    lines.append("\n\n".join(formatted_entries))
    return "\n".join(lines)
