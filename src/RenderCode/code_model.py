"""Intermediate construction-call tree produced by the tree mapper."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Tuple, Union

Attribute = Tuple[str, str]


@dataclass(frozen=True)
class Element:
    tag: str
    attributes: List[Attribute] = field(default_factory=list)
    children: List["CodeNode"] = field(default_factory=list)


@dataclass(frozen=True)
class SelfClosingElement:
    tag: str
    attributes: List[Attribute] = field(default_factory=list)


@dataclass(frozen=True)
class RawHtmlNode:
    """Content passed through to the target API without processing."""

    namespace: str
    tag: str
    attributes: List[Attribute]
    content: str


@dataclass(frozen=True)
class TextNode:
    content: str


CodeNode = Union[Element, SelfClosingElement, RawHtmlNode, TextNode]
