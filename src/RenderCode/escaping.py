from __future__ import annotations

from typing import Iterable

from .code_model import Attribute

_INSPECT_ESCAPES = {
    "\\": "\\\\",
    '"': '\\"',
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\f": "\\f",
}


def escape_text(content: str) -> str:
    """Escape double quotes only; text arguments are otherwise emitted verbatim."""
    return content.replace('"', '\\"')


def escape_code(content: str) -> str:
    return content.replace("\\", "\\\\")


def inspect_string(value: str) -> str:
    """Return the debug string literal for ``value``, quotes included."""
    parts = ['"']
    for char in value:
        escaped = _INSPECT_ESCAPES.get(char)
        if escaped is not None:
            parts.append(escaped)
        elif ord(char) < 0x20 or ord(char) == 0x7F:
            parts.append(f"\\u{{{ord(char):04X}}}")
        else:
            parts.append(char)
    parts.append('"')
    return "".join(parts)


def render_attributes(attributes: Iterable[Attribute]) -> str:
    rendered = [f"attribute.{key}({inspect_string(value)})" for key, value in attributes]
    if not rendered:
        return "[]"
    # joined without a separator; invalid output for more than one attribute
    return "[" + "".join(rendered) + "]"
