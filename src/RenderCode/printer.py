from __future__ import annotations

from enum import Enum
from typing import Iterable

from .code_model import CodeNode, Element, RawHtmlNode, SelfClosingElement, TextNode
from .escaping import escape_text, inspect_string, render_attributes

INDENT = "  "
NAMESPACE = "html"
RAW_HTML_CONSTRUCTOR = "element.unsafe_raw_html"


class PrefixMode(Enum):
    NAMESPACED = "namespaced"
    BARE = "bare"


def print_nodes(nodes: Iterable[CodeNode], prefix_mode: PrefixMode = PrefixMode.BARE) -> str:
    """Print top-level nodes at depth 0, separated by ``",\\n"``."""
    return ",\n".join(print_node(node, 0, prefix_mode) for node in nodes)


def print_node(node: CodeNode, depth: int, prefix_mode: PrefixMode = PrefixMode.BARE) -> str:
    indent = INDENT * depth
    prefix = f"{NAMESPACE}." if prefix_mode is PrefixMode.NAMESPACED else ""
    if isinstance(node, Element):
        children = ",\n".join(print_node(child, depth + 1, prefix_mode) for child in node.children)
        attributes = render_attributes(node.attributes)
        return f"{indent}{prefix}{node.tag}({attributes}, [\n{children}\n{indent}])"
    elif isinstance(node, SelfClosingElement):
        return f"{indent}{prefix}{node.tag}({render_attributes(node.attributes)})"
    elif isinstance(node, TextNode):
        return f'{indent}{prefix}text("{escape_text(node.content)}")'
    elif isinstance(node, RawHtmlNode):
        arguments = ", ".join(
            [
                inspect_string(node.namespace),
                inspect_string(node.tag),
                render_attributes(node.attributes),
                inspect_string(node.content),
            ]
        )
        return f"{indent}{RAW_HTML_CONSTRUCTOR}({arguments})"
    raise TypeError(f"Not a code node: {node!r}")
