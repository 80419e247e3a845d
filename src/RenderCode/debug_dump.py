"""Debug dump of a parsed document, shown next to the generated code."""

from __future__ import annotations

from dataclasses import fields, is_dataclass
from typing import Any

import yaml

from .model import Document


def to_data(node: Any) -> Any:
    """Convert model nodes into plain dicts and lists, tagged with their type."""
    if is_dataclass(node) and not isinstance(node, type):
        data: dict[str, Any] = {"type": type(node).__name__}
        for f in fields(node):
            data[f.name] = to_data(getattr(node, f.name))
        return data
    if isinstance(node, (list, tuple)):
        return [to_data(item) for item in node]
    return node


def dump_document(doc: Document) -> str:
    return yaml.safe_dump(to_data(doc), sort_keys=False, allow_unicode=True)
