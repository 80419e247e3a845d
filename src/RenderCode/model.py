from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Block:
    """Base class for block-level nodes."""


@dataclass(frozen=True)
class Document:
    blocks: List[Block] = field(default_factory=list)


@dataclass(frozen=True)
class Paragraph(Block):
    inline: List["Inline"]


@dataclass(frozen=True)
class Heading(Block):
    level: int
    inline: List["Inline"]


@dataclass(frozen=True)
class BulletList(Block):
    # one block sequence per list item
    items: List[List[Block]]


@dataclass(frozen=True)
class CodeBlock(Block):
    language: Optional[str]
    content: str


@dataclass(frozen=True)
class BlockQuote(Block):
    blocks: List[Block]


@dataclass(frozen=True)
class RawBlock(Block):
    content: str


@dataclass(frozen=True)
class ThematicBreak(Block):
    """Horizontal rule / thematic break."""


@dataclass(frozen=True)
class Destination:
    """Base class for link and image targets."""


@dataclass(frozen=True)
class Url(Destination):
    url: str


@dataclass(frozen=True)
class Reference(Destination):
    name: str


@dataclass(frozen=True)
class Inline:
    """Base class for inline nodes."""


@dataclass(frozen=True)
class Text(Inline):
    text: str


@dataclass(frozen=True)
class Emphasis(Inline):
    inline: List[Inline]


@dataclass(frozen=True)
class Strong(Inline):
    inline: List[Inline]


@dataclass(frozen=True)
class Code(Inline):
    text: str


@dataclass(frozen=True)
class Link(Inline):
    inline: List[Inline]
    destination: Destination


@dataclass(frozen=True)
class Image(Inline):
    inline: List[Inline]
    destination: Destination


@dataclass(frozen=True)
class Footnote(Inline):
    reference: str


@dataclass(frozen=True)
class Linebreak(Inline):
    """Hard line break."""


@dataclass(frozen=True)
class MathInline(Inline):
    latex: str


@dataclass(frozen=True)
class MathDisplay(Inline):
    latex: str


@dataclass(frozen=True)
class NonBreakingSpace(Inline):
    """Explicit non-breaking space."""
