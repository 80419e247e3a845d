import pytest

from RenderCode.code_model import Element, RawHtmlNode, SelfClosingElement, TextNode
from RenderCode.errors import RenderCodeError, UnsupportedConstructError
from RenderCode.model import (
    BlockQuote,
    BulletList,
    Code,
    CodeBlock,
    Document,
    Emphasis,
    Footnote,
    Heading,
    Image,
    Linebreak,
    Link,
    MathDisplay,
    MathInline,
    NonBreakingSpace,
    Paragraph,
    RawBlock,
    Reference,
    Strong,
    Text,
    ThematicBreak,
    Url,
)
from RenderCode.tree_mapper import map_block, map_document, map_inline


def test_heading_maps_to_level_tag():
    doc = Document(blocks=[Heading(level=1, inline=[Text("Hello")])])
    assert map_document(doc) == [Element("h1", [], [TextNode("Hello")])]


@pytest.mark.parametrize("level", [1, 2, 3, 4, 5, 6])
def test_every_heading_level(level):
    node = map_block(Heading(level=level, inline=[]))
    assert node == Element(f"h{level}", [], [])


def test_empty_document_maps_to_empty_list():
    assert map_document(Document(blocks=[])) == []


def test_bullet_list_wraps_items():
    block = BulletList(items=[[Paragraph([Text("x")])], [Paragraph([Text("y")])]])
    assert map_block(block) == Element(
        "ul",
        [],
        [
            Element("li", [], [Element("p", [], [TextNode("x")])]),
            Element("li", [], [Element("p", [], [TextNode("y")])]),
        ],
    )


def test_code_block_drops_language_and_escapes_backslashes():
    node = map_block(CodeBlock(language="python", content='print("a\\n")'))
    assert node == Element("pre", [], [TextNode('print("a\\\\n")')])


def test_thematic_break_and_raw_block():
    assert map_block(ThematicBreak()) == SelfClosingElement("hr", [])
    assert map_block(RawBlock("<b>hi</b>")) == RawHtmlNode("html", "div", [], "<b>hi</b>")


def test_inline_mapping_table():
    assert map_inline(Text("t")) == TextNode("t")
    assert map_inline(Code("x = 1")) == Element("code", [], [TextNode("x = 1")])
    assert map_inline(Emphasis([Text("e")])) == Element("em", [], [TextNode("e")])
    assert map_inline(Strong([Text("s")])) == Element("strong", [], [TextNode("s")])
    assert map_inline(Link([Text("site")], Url("https://example.com"))) == Element(
        "a", [("href", "https://example.com")], [TextNode("site")]
    )
    assert map_inline(Image([Text("alt")], Url("cat.png"))) == SelfClosingElement(
        "img", [("src", "cat.png")]
    )


def test_paragraph_preserves_inline_order():
    node = map_block(Paragraph([Text("a"), Strong([Text("b")]), Text("c")]))
    assert node == Element(
        "p", [], [TextNode("a"), Element("strong", [], [TextNode("b")]), TextNode("c")]
    )


@pytest.mark.parametrize(
    "inline, construct",
    [
        (Footnote("1"), "Footnote"),
        (Linebreak(), "Linebreak"),
        (MathInline("x"), "MathInline"),
        (MathDisplay("x"), "MathDisplay"),
        (NonBreakingSpace(), "NonBreakingSpace"),
        (Link([Text("l")], Reference("ref")), "Link"),
        (Image([Text("i")], Reference("ref")), "Image"),
    ],
)
def test_unsupported_inlines_raise(inline, construct):
    with pytest.raises(UnsupportedConstructError) as excinfo:
        map_inline(inline)
    assert excinfo.value.construct == construct


def test_block_quote_is_unsupported():
    with pytest.raises(UnsupportedConstructError) as excinfo:
        map_block(BlockQuote([Paragraph([Text("q")])]))
    assert excinfo.value.construct == "BlockQuote"
    assert str(excinfo.value) == "Unsupported construct: BlockQuote"


def test_nested_unsupported_construct_aborts_document():
    doc = Document(
        blocks=[
            Heading(level=1, inline=[Text("ok")]),
            Paragraph([Footnote("1")]),
        ]
    )
    with pytest.raises(UnsupportedConstructError) as excinfo:
        map_document(doc)
    assert excinfo.value.construct == "Footnote"
    assert isinstance(excinfo.value, RenderCodeError)


def test_reference_destination_detail_in_message():
    with pytest.raises(UnsupportedConstructError, match=r"Link \(reference destination\)"):
        map_inline(Link([Text("l")], Reference("ref")))


def test_unknown_variant_is_rejected():
    class Table:
        pass

    with pytest.raises(UnsupportedConstructError) as excinfo:
        map_block(Table())
    assert excinfo.value.construct == "Table"
