from __future__ import annotations

from typing import Any, List, Sequence

from markdown_it import MarkdownIt
from markdown_it.token import Token
from mdit_py_plugins.footnote import footnote_plugin
from mdit_py_plugins.texmath import texmath_plugin

from .errors import UnsupportedConstructError
from .model import (
    Block,
    BlockQuote,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Footnote,
    Heading,
    Image,
    Inline,
    Linebreak,
    Link,
    MathDisplay,
    MathInline,
    NonBreakingSpace,
    Paragraph,
    RawBlock,
    Strong,
    Text,
    ThematicBreak,
    Url,
)

NBSP = "\u00a0"

# block tokens emitted by the footnote plugin for definitions
_FOOTNOTE_DEFINITION_TYPES = {"footnote_block_open", "footnote_reference_open"}


def build_markdown_parser() -> MarkdownIt:
    return MarkdownIt("commonmark").use(texmath_plugin).use(footnote_plugin)


def parse_tokens(text: str, md: MarkdownIt | None = None) -> tuple[list[Token], dict[str, Any]]:
    md = md or build_markdown_parser()
    env: dict[str, Any] = {}
    tokens = md.parse(text, env)
    return tokens, env


def parse_markdown(text: str) -> Document:
    tokens, _ = parse_tokens(text)
    return build_document(tokens)


def render_html(tokens: Sequence[Token], env: dict[str, Any], md: MarkdownIt | None = None) -> str:
    """Render the preview HTML from an already parsed token stream."""
    md = md or build_markdown_parser()
    return md.renderer.render(tokens, md.options, env)


def build_document(tokens: Sequence[Token]) -> Document:
    blocks, _ = _parse_blocks(tokens, 0, stop_types=set())
    return Document(blocks=blocks)


def _parse_blocks(tokens: Sequence[Token], index: int, stop_types: set[str]) -> tuple[list, int]:
    blocks: List[Block] = []
    i = index
    while i < len(tokens):
        tok = tokens[i]
        if tok.type in stop_types:
            break
        if tok.type == "heading_open":
            level = int(tok.tag[1])
            blocks.append(Heading(level=level, inline=_inline_children(tokens[i + 1])))
            i += 3
        elif tok.type == "paragraph_open":
            blocks.append(Paragraph(inline=_inline_children(tokens[i + 1])))
            i += 3
        elif tok.type == "bullet_list_open":
            i += 1
            items: list[list[Block]] = []
            while i < len(tokens) and tokens[i].type != "bullet_list_close":
                if tokens[i].type == "list_item_open":
                    item_blocks, i = _parse_blocks(tokens, i + 1, stop_types={"list_item_close"})
                    items.append(item_blocks)
                i += 1  # skip list_item_close
            blocks.append(BulletList(items=items))
            i += 1  # skip list close
        elif tok.type == "ordered_list_open":
            raise UnsupportedConstructError("OrderedList")
        elif tok.type == "blockquote_open":
            quoted, i = _parse_blocks(tokens, i + 1, stop_types={"blockquote_close"})
            blocks.append(BlockQuote(blocks=quoted))
            i += 1
        elif tok.type in ("fence", "code_block"):
            blocks.append(CodeBlock(language=_info_language(tok.info), content=tok.content))
            i += 1
        elif tok.type == "html_block":
            blocks.append(RawBlock(content=tok.content))
            i += 1
        elif tok.type == "hr":
            blocks.append(ThematicBreak())
            i += 1
        elif tok.type in ("math_block", "math_block_eqno"):
            blocks.append(Paragraph(inline=[MathDisplay(tok.content.strip())]))
            i += 1
        elif tok.type in _FOOTNOTE_DEFINITION_TYPES:
            i = _skip_to_close(tokens, i, tok.type.replace("_open", "_close"))
        else:
            i += 1
    return blocks, i


def _inline_children(inline_token: Token) -> list[Inline]:
    inlines, _ = _parse_inline(inline_token.children or [], 0, stop_type=None)
    return inlines


def _parse_inline(children: Sequence[Token], index: int, stop_type: str | None) -> tuple[list[Inline], int]:
    result: List[Inline] = []
    i = index
    while i < len(children):
        tok = children[i]
        if tok.type == stop_type:
            break
        if tok.type in ("text", "text_special"):
            result.extend(_split_nbsp(tok.content))
        elif tok.type == "softbreak":
            result.append(Text(" "))
        elif tok.type == "hardbreak":
            result.append(Linebreak())
        elif tok.type == "em_open":
            inner, i = _parse_inline(children, i + 1, "em_close")
            result.append(Emphasis(inline=inner))
        elif tok.type == "strong_open":
            inner, i = _parse_inline(children, i + 1, "strong_close")
            result.append(Strong(inline=inner))
        elif tok.type == "code_inline":
            result.append(Code(tok.content))
        elif tok.type == "link_open":
            href = str(tok.attrGet("href") or "")
            inner, i = _parse_inline(children, i + 1, "link_close")
            result.append(Link(inline=inner, destination=Url(href)))
        elif tok.type == "image":
            src = str(tok.attrGet("src") or "")
            alt, _ = _parse_inline(tok.children or [], 0, stop_type=None)
            result.append(Image(inline=alt, destination=Url(src)))
        elif tok.type == "math_inline":
            result.append(MathInline(tok.content))
        elif tok.type == "math_inline_double":
            result.append(MathDisplay(tok.content))
        elif tok.type == "footnote_ref":
            meta = tok.meta or {}
            result.append(Footnote(str(meta.get("label") or meta.get("id", ""))))
        elif tok.type == "html_inline":
            raise UnsupportedConstructError("RawInline", tok.content)
        i += 1
    return result, i


def _split_nbsp(text: str) -> list[Inline]:
    parts: list[Inline] = []
    for idx, chunk in enumerate(text.split(NBSP)):
        if idx:
            parts.append(NonBreakingSpace())
        if chunk:
            parts.append(Text(chunk))
    return parts


def _info_language(info: str) -> str | None:
    words = info.strip().split()
    return words[0] if words else None


def _skip_to_close(tokens: Sequence[Token], index: int, close_type: str) -> int:
    i = index + 1
    while i < len(tokens) and tokens[i].type != close_type:
        i += 1
    return i + 1
