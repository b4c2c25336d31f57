"""Load reqline statements from a file for batch runs."""

from pathlib import Path

import yaml


def load_statements(file_path: Path) -> list[str]:
    """Read statements from a YAML/JSON document or a plain text file.

    Structured documents may hold a list of statements, a list of
    ``{"reqline": ...}`` payloads, or a single payload. Anything else is read
    as one statement per non-blank line.
    """
    text = file_path.read_text(encoding="utf-8")

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError:
        data = None

    if isinstance(data, dict) and "reqline" in data:
        return [str(data["reqline"])]
    if isinstance(data, list) and data:
        statements = [_statement_from_item(item) for item in data]
        if all(s is not None for s in statements):
            return statements

    return [line for line in text.splitlines() if line.strip()]


def _statement_from_item(item) -> str | None:
    if isinstance(item, str):
        return item
    if isinstance(item, dict) and isinstance(item.get("reqline"), str):
        return item["reqline"]
    return None
