from __future__ import annotations

import logging
from typing import Iterable, List

from .code_model import CodeNode, Element, RawHtmlNode, SelfClosingElement, TextNode
from .errors import UnsupportedConstructError
from .escaping import escape_code
from .model import (
    Block,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Heading,
    Image,
    Inline,
    Link,
    Paragraph,
    RawBlock,
    Strong,
    Text,
    ThematicBreak,
    Url,
)

logger = logging.getLogger(__name__)


def map_document(doc: Document) -> List[CodeNode]:
    """Map every block of ``doc`` to a construction node.

    Raises UnsupportedConstructError on the first construct the element API
    cannot express; nothing is returned for a partially mapped document.
    """
    logger.debug("Mapping %d blocks", len(doc.blocks))
    return [map_block(block) for block in doc.blocks]


def map_block(block: Block) -> CodeNode:
    if isinstance(block, Paragraph):
        return Element("p", [], _map_inlines(block.inline))
    elif isinstance(block, Heading):
        return Element(f"h{block.level}", [], _map_inlines(block.inline))
    elif isinstance(block, BulletList):
        items = [Element("li", [], [map_block(b) for b in item]) for item in block.items]
        return Element("ul", [], items)
    elif isinstance(block, CodeBlock):
        # language is not reflected in the output
        return Element("pre", [], [TextNode(escape_code(block.content))])
    elif isinstance(block, ThematicBreak):
        return SelfClosingElement("hr", [])
    elif isinstance(block, RawBlock):
        return RawHtmlNode("html", "div", [], block.content)
    # BlockQuote and unknown blocks
    raise UnsupportedConstructError(type(block).__name__)


def map_inline(inline: Inline) -> CodeNode:
    if isinstance(inline, Text):
        return TextNode(inline.text)
    elif isinstance(inline, Code):
        return Element("code", [], [TextNode(inline.text)])
    elif isinstance(inline, Emphasis):
        return Element("em", [], _map_inlines(inline.inline))
    elif isinstance(inline, Strong):
        return Element("strong", [], _map_inlines(inline.inline))
    elif isinstance(inline, Link):
        if not isinstance(inline.destination, Url):
            raise UnsupportedConstructError("Link", "reference destination")
        return Element("a", [("href", inline.destination.url)], _map_inlines(inline.inline))
    elif isinstance(inline, Image):
        if not isinstance(inline.destination, Url):
            raise UnsupportedConstructError("Image", "reference destination")
        return SelfClosingElement("img", [("src", inline.destination.url)])
    # Footnote, Linebreak, MathInline, MathDisplay, NonBreakingSpace
    raise UnsupportedConstructError(type(inline).__name__)


def _map_inlines(inlines: Iterable[Inline]) -> List[CodeNode]:
    return [map_inline(inline) for inline in inlines]
