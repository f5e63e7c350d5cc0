"""
Tests for mapping block markdown nodes to document elements
"""
import dataclasses

import pytest

from mdast import (
    ColumnAlignment,
    ListStyle,
    MarkdownASTBoldNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTHeaderNode,
    MarkdownASTHorizontalRuleNode,
    MarkdownASTLinkNode,
    MarkdownASTListItemNode,
    MarkdownASTListNode,
    MarkdownASTParagraphNode,
    MarkdownASTQuoteNode,
    MarkdownASTTableCellNode,
    MarkdownASTTableColumn,
    MarkdownASTTableNode,
    MarkdownASTTableRowNode,
    MarkdownASTTextNode
)
from mdrender import (
    CodeBlockElement,
    Color,
    DocumentBlockMapper,
    DocumentInlineMapper,
    HeaderElement,
    InvalidTargetError,
    ListElement,
    MarkerStyle,
    MissingStyleError,
    ParagraphElement,
    QuoteElement,
    RuleElement,
    ScrollBarVisibility,
    SpanRun,
    TableElement,
    TextAlignment,
    TextRun,
    Thickness,
    UnsupportedNodeError
)


@pytest.fixture
def block_mapper():
    """Fixture providing a block mapper."""
    return DocumentBlockMapper(DocumentInlineMapper())


def paragraph(text):
    """Create a paragraph node holding one text node."""
    node = MarkdownASTParagraphNode()
    node.add_child(MarkdownASTTextNode(text))
    return node


def header(level, text):
    """Create a header node holding one text node."""
    node = MarkdownASTHeaderNode(level)
    node.add_child(MarkdownASTTextNode(text))
    return node


def list_node(style, *items):
    """Create a list whose items each hold the given blocks."""
    node = MarkdownASTListNode(style)
    for blocks in items:
        item = MarkdownASTListItemNode()
        item.add_children(list(blocks))
        node.add_child(item)

    return node


def table(alignments, rows):
    """Create a table from column alignments and rows of cell text."""
    node = MarkdownASTTableNode([MarkdownASTTableColumn(alignment) for alignment in alignments])
    for row in rows:
        row_node = MarkdownASTTableRowNode()
        for text in row:
            cell = MarkdownASTTableCellNode()
            cell.add_child(MarkdownASTTextNode(text))
            row_node.add_child(cell)

        node.add_child(row_node)

    return node


def test_map_blocks_one_to_one(block_mapper):
    """Test that each top-level block maps to exactly one element, in order."""
    nodes = [header(1, "a"), paragraph("b"), MarkdownASTHorizontalRuleNode(), paragraph("c")]
    blocks = block_mapper.map_blocks(nodes)
    assert len(blocks) == 4
    assert [type(block) for block in blocks] == [HeaderElement, ParagraphElement, RuleElement, ParagraphElement]


@pytest.mark.parametrize("level,size", [
    (1, 28),
    (2, 21),
    (3, 16.3833),
    (4, 14),
    (5, 11.6167),
    (6, 9.38333),
])
def test_header_sizes(block_mapper, level, size):
    """Test the font size used for each header level."""
    element = block_mapper.map_blocks([header(level, "Title")])[0]
    assert isinstance(element, HeaderElement)
    assert element.font_size == size
    assert element.content == SpanRun(children=(TextRun(text="Title"),))


@pytest.mark.parametrize("level", [0, 7])
def test_header_level_without_size(block_mapper, level):
    """Test that a header level with no size entry is rejected."""
    with pytest.raises(MissingStyleError):
        block_mapper.map_blocks([header(level, "Title")])


def test_paragraph(block_mapper):
    """Test that a paragraph keeps its runs in order."""
    node = MarkdownASTParagraphNode()
    node.add_child(MarkdownASTTextNode("a "))
    bold = MarkdownASTBoldNode()
    bold.add_child(MarkdownASTTextNode("b"))
    node.add_child(bold)

    element = block_mapper.map_blocks([node])[0]
    assert element == ParagraphElement(inlines=(
        TextRun(text="a "),
        SpanRun(children=(TextRun(text="b"),), bold=True)
    ))
    assert element.padding is None
    assert element.margin is None


def test_empty_paragraph(block_mapper):
    """Test that an empty paragraph maps to an empty paragraph element."""
    element = block_mapper.map_blocks([MarkdownASTParagraphNode()])[0]
    assert element == ParagraphElement()


@pytest.mark.parametrize("style,marker", [
    (ListStyle.BULLETED, MarkerStyle.DISC),
    (ListStyle.ORDERED, MarkerStyle.DECIMAL),
])
def test_list_markers(block_mapper, style, marker):
    """Test the marker used for each list style."""
    element = block_mapper.map_blocks([list_node(style, [paragraph("a")], [paragraph("b")])])[0]
    assert isinstance(element, ListElement)
    assert element.marker_style == marker
    assert len(element.items) == 2
    assert element.items[1].blocks == (ParagraphElement(inlines=(TextRun(text="b"),)),)


def test_nested_list(block_mapper):
    """Test that list items may hold further lists."""
    inner = list_node(ListStyle.ORDERED, [paragraph("x")])
    outer = list_node(ListStyle.BULLETED, [paragraph("a"), inner])

    element = block_mapper.map_blocks([outer])[0]
    item_blocks = element.items[0].blocks
    assert len(item_blocks) == 2
    assert isinstance(item_blocks[1], ListElement)
    assert item_blocks[1].marker_style == MarkerStyle.DECIMAL


def test_code_block(block_mapper):
    """Test the fixed presentation of a code block."""
    element = block_mapper.map_blocks([MarkdownASTCodeBlockNode("int x = 1;")])[0]
    assert isinstance(element, CodeBlockElement)
    assert element.text == "int x = 1;"
    assert element.language == "C#"
    assert element.font_family == "Consolas"
    assert element.font_size == 12
    assert element.editor_padding == Thickness(10, 10, 10, 10)
    assert element.border_color == Color(0xd3, 0xd3, 0xd3)
    assert element.border_thickness == Thickness(1, 1, 1, 1)
    assert element.max_height == 250
    assert element.horizontal_scroll == ScrollBarVisibility.AUTO
    assert element.vertical_scroll == ScrollBarVisibility.AUTO
    assert element.read_only
    assert element.show_line_numbers


def test_code_block_language_ignores_content(block_mapper):
    """Test that the highlighting language does not depend on the code."""
    elements = block_mapper.map_blocks([
        MarkdownASTCodeBlockNode("def f():\n    pass"),
        MarkdownASTCodeBlockNode("<html></html>"),
        MarkdownASTCodeBlockNode("")
    ])
    assert {element.language for element in elements} == {"C#"}
    assert elements[2].text == ""


def test_quote(block_mapper):
    """Test the quote styling and the restyling of its children."""
    quote = MarkdownASTQuoteNode()
    quote.add_child(paragraph("a"))
    quote.add_child(header(2, "b"))

    element = block_mapper.map_blocks([quote])[0]
    assert isinstance(element, QuoteElement)
    assert element.background == Color(0xff, 0xf8, 0xdc)
    assert element.border_color == Color(0xff, 0xeb, 0x8e)
    assert element.border_thickness == Thickness(2, 0, 0, 0)
    assert element.padding == Thickness(5, 5, 5, 5)

    assert len(element.blocks) == 2
    for child in element.blocks:
        assert child.padding == Thickness(5, 0, 5, 0)
        assert child.margin == Thickness(0, 0, 0, 0)

    assert isinstance(element.blocks[1], HeaderElement)
    assert element.blocks[1].font_size == 21


def test_quote_child_matches_unquoted_apart_from_spacing(block_mapper):
    """Test that quoting a block changes only its padding and margin."""
    plain = block_mapper.map_blocks([paragraph("a")])[0]
    quote = MarkdownASTQuoteNode()
    quote.add_child(paragraph("a"))
    quoted = block_mapper.map_blocks([quote])[0].blocks[0]

    assert dataclasses.replace(quoted, padding=None, margin=None) == plain


def test_nested_quote(block_mapper):
    """Test that a quote inside a quote is itself restyled as a child."""
    inner = MarkdownASTQuoteNode()
    inner.add_child(paragraph("x"))
    outer = MarkdownASTQuoteNode()
    outer.add_child(inner)

    element = block_mapper.map_blocks([outer])[0]
    nested = element.blocks[0]
    assert isinstance(nested, QuoteElement)
    assert nested.padding == Thickness(5, 0, 5, 0)
    assert nested.blocks[0].padding == Thickness(5, 0, 5, 0)


def test_rule(block_mapper):
    """Test the rule stroke colour."""
    element = block_mapper.map_blocks([MarkdownASTHorizontalRuleNode()])[0]
    assert element == RuleElement(stroke=Color(0xa9, 0xa9, 0xa9))


def test_table_styling(block_mapper):
    """Test table and cell borders, padding and header bolding."""
    node = table([ColumnAlignment.LEFT], [["h"], ["a"]])
    element = block_mapper.map_blocks([node])[0]
    assert isinstance(element, TableElement)
    assert element.border_color == Color(0xdf, 0xe2, 0xe5)
    assert element.border_thickness == Thickness(0, 0, 1, 1)
    assert element.cell_spacing == 0

    header_cell = element.rows[0].cells[0]
    body_cell = element.rows[1].cells[0]
    assert header_cell.bold
    assert not body_cell.bold
    assert body_cell.border_color == Color(0xdf, 0xe2, 0xe5)
    assert body_cell.border_thickness == Thickness(1, 1, 0, 0)
    assert body_cell.padding == Thickness(13, 6, 13, 6)
    assert body_cell.content == ParagraphElement(inlines=(TextRun(text="a"),))


def test_table_alignments(block_mapper):
    """Test that unspecified column alignment becomes justified text."""
    node = table(
        [ColumnAlignment.LEFT, ColumnAlignment.RIGHT, ColumnAlignment.CENTER, ColumnAlignment.UNSPECIFIED],
        [["a", "b", "c", "d"]]
    )
    element = block_mapper.map_blocks([node])[0]
    assert [cell.alignment for cell in element.rows[0].cells] == [
        TextAlignment.LEFT,
        TextAlignment.RIGHT,
        TextAlignment.CENTER,
        TextAlignment.JUSTIFY
    ]


def test_table_striping(block_mapper):
    """Test that only even, non-header rows get the stripe background."""
    node = table([ColumnAlignment.UNSPECIFIED], [["h"], ["1"], ["2"], ["3"], ["4"]])
    element = block_mapper.map_blocks([node])[0]
    stripe = Color(0xf6, 0xf8, 0xfa)
    assert [row.background for row in element.rows] == [None, None, stripe, None, stripe]


def test_table_cell_without_column(block_mapper):
    """Test that a cell beyond the declared columns is rejected."""
    node = table([ColumnAlignment.LEFT], [["a", "b"]])
    with pytest.raises(MissingStyleError):
        block_mapper.map_blocks([node])


def test_table_column_without_alignment_style(block_mapper):
    """Test that a column alignment with no style entry is rejected."""
    node = table([ColumnAlignment.LEFT], [["a"]])
    node.columns[0].alignment = "diagonal"
    with pytest.raises(MissingStyleError):
        block_mapper.map_blocks([node])


def test_unsupported_block_node(block_mapper):
    """Test that an inline node in block position is rejected."""
    with pytest.raises(UnsupportedNodeError):
        block_mapper.map_blocks([MarkdownASTTextNode("loose")])


def test_unsupported_node_deep_in_tree(block_mapper):
    """Test that an unknown node inside a list inside a quote is rejected."""
    quote = MarkdownASTQuoteNode()
    quote.add_child(list_node(ListStyle.BULLETED, [MarkdownASTTextNode("loose")]))
    with pytest.raises(UnsupportedNodeError):
        block_mapper.map_blocks([paragraph("fine"), quote])


def test_invalid_link_in_table_cell(block_mapper):
    """Test that a bad link target anywhere in the tree is rejected."""
    node = MarkdownASTTableNode([MarkdownASTTableColumn()])
    row = MarkdownASTTableRowNode()
    cell = MarkdownASTTableCellNode()
    cell.add_child(MarkdownASTLinkNode("relative/path"))
    row.add_child(cell)
    node.add_child(row)

    with pytest.raises(InvalidTargetError):
        block_mapper.map_blocks([node])
