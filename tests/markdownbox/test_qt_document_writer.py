"""
Tests for writing document trees into a QTextDocument
"""
import pytest

from PySide6.QtCore import Qt
from PySide6.QtGui import QTextCharFormat, QTextCursor, QTextDocument, QTextListFormat

from mdrender import DocElement, DocumentRenderer, DocumentTree, UnsupportedNodeError

from markdownbox import QtDocumentWriter


@pytest.fixture
def document(qapp):
    """Fixture providing an empty text document."""
    return QTextDocument()


@pytest.fixture
def writer(document):
    """Fixture providing a writer for the document."""
    return QtDocumentWriter(document)


@pytest.fixture
def activated():
    """Fixture collecting the URLs passed to the link activator."""
    return []


@pytest.fixture
def renderer(activated):
    """Fixture providing a renderer with a recording link activator."""
    return DocumentRenderer(link_activator=activated.append)


def char_format_at(document, text):
    """Get the character format of the first character of `text` in the document."""
    position = document.toPlainText().index(text)
    cursor = QTextCursor(document)
    cursor.setPosition(position + 1)
    return cursor.charFormat()


def table_at(document, text):
    """Get the table holding the first occurrence of `text` in the document."""
    cursor = QTextCursor(document)
    cursor.setPosition(document.toPlainText().index(text))
    return cursor.currentTable()


def test_write_paragraphs(document, writer, renderer):
    """Test that paragraphs are written as separate blocks."""
    writer.write(renderer.render("first\n\nsecond"))
    assert document.toPlainText() == "first\nsecond"
    assert document.blockCount() == 2


def test_write_empty_tree(document, writer):
    """Test that writing an empty tree leaves an empty document."""
    writer.write(DocumentTree())
    assert document.toPlainText() == ""
    assert writer.hyperlinks() == {}


def test_write_replaces_content(document, writer, renderer):
    """Test that each write replaces the previous content."""
    writer.write(renderer.render("[old](https://old.example)"))
    writer.write(renderer.render("new"))
    assert document.toPlainText() == "new"
    assert writer.hyperlinks() == {}


def test_header_size(document, writer, renderer):
    """Test that header sizes are converted to points."""
    writer.write(renderer.render("# Big\n\n## Smaller"))
    assert char_format_at(document, "Big").fontPointSize() == pytest.approx(21)
    assert char_format_at(document, "Smaller").fontPointSize() == pytest.approx(15.75)


def test_inline_styles(document, writer, renderer):
    """Test bold, italic, strikethrough and script text."""
    writer.write(renderer.render("**b** *i* ~~s~~ x^2^ y~3~"))
    assert char_format_at(document, "b").font().bold()
    assert char_format_at(document, "i").fontItalic()
    assert char_format_at(document, "s").fontStrikeOut()
    assert char_format_at(document, "2").verticalAlignment() == QTextCharFormat.VerticalAlignment.AlignSuperScript
    assert char_format_at(document, "3").verticalAlignment() == QTextCharFormat.VerticalAlignment.AlignSubScript
    assert not char_format_at(document, "x").font().bold()


def test_inline_code_background(document, writer, renderer):
    """Test the background of inline code."""
    writer.write(renderer.render("use `code` here"))
    assert char_format_at(document, "code").background().color().name() == "#eff0f1"
    assert char_format_at(document, "use").background().style() == Qt.BrushStyle.NoBrush


def test_hyperlinks(document, writer, renderer, activated):
    """Test that links are written as anchors and remembered."""
    writer.write(renderer.render('[go](https://example.com/a "Tip") and https://example.org'))

    link_format = char_format_at(document, "go")
    assert link_format.isAnchor()
    assert link_format.anchorHref() == "https://example.com/a"
    assert link_format.toolTip() == "Tip"

    hyperlinks = writer.hyperlinks()
    assert set(hyperlinks) == {"https://example.com/a", "https://example.org"}
    hyperlinks["https://example.org"].activate()
    assert activated == ["https://example.org"]


def test_lists(document, writer, renderer):
    """Test list membership and marker styles."""
    writer.write(renderer.render("- one\n- two\n\n1. first\n\nafter"))

    block = document.firstBlock()
    bullets = block.textList()
    assert bullets is not None
    assert bullets.format().style() == QTextListFormat.Style.ListDisc
    assert bullets.count() == 2
    assert block.text() == "one"

    block = block.next().next()
    assert block.text() == "first"
    numbers = block.textList()
    assert numbers is not None
    assert numbers.format().style() == QTextListFormat.Style.ListDecimal

    block = block.next()
    assert block.text() == "after"
    assert block.textList() is None


def test_nested_list(document, writer, renderer):
    """Test that a nested list is a separate, deeper list."""
    writer.write(renderer.render("- outer\n  - inner\n"))
    outer = document.findBlockByNumber(0)
    inner = document.findBlockByNumber(1)
    assert outer.text() == "outer"
    assert inner.text() == "inner"
    assert inner.textList() is not None
    assert inner.textList() != outer.textList()
    assert inner.textList().format().indent() > outer.textList().format().indent()


def test_code_block(document, writer, renderer):
    """Test that code is written with line numbers inside a frame."""
    writer.write(renderer.render("```\nint a = 1;\nint b = 2;\n```"))
    text = document.toPlainText()
    assert "1  int a = 1;" in text
    assert "2  int b = 2;" in text

    frames = document.rootFrame().childFrames()
    assert len(frames) == 1
    assert frames[0].frameFormat().border() == 1

    keyword_format = char_format_at(document, "int")
    assert keyword_format.foreground().color().name() == "#0000ff"


def test_quote(document, writer, renderer):
    """Test that a quote is written as a single bordered cell."""
    writer.write(renderer.render("> quoted text\n\nafter"))
    table = table_at(document, "quoted text")
    assert table is not None
    assert table.rows() == 1
    assert table.columns() == 1
    cell_format = table.cellAt(0, 0).format().toTableCellFormat()
    assert cell_format.leftBorder() == 2
    assert cell_format.rightBorder() == 0
    assert cell_format.background().color().name() == "#fff8dc"
    assert "quoted text" in document.toPlainText()
    assert document.lastBlock().text() == "after"


def test_table(document, writer, renderer):
    """Test table cell text, alignment, header weight and striping."""
    writer.write(renderer.render("| h1 | h2 |\n|:--|---|\n| a | b |\n| c | d |\n"))
    table = table_at(document, "h1")
    assert table is not None
    assert table.rows() == 3
    assert table.columns() == 2

    header_cursor = table.cellAt(0, 0).firstCursorPosition()
    header_cursor.movePosition(QTextCursor.MoveOperation.Right)
    assert header_cursor.charFormat().font().bold()

    assert table.cellAt(1, 0).firstCursorPosition().blockFormat().alignment() == Qt.AlignmentFlag.AlignLeft
    assert table.cellAt(1, 1).firstCursorPosition().blockFormat().alignment() == Qt.AlignmentFlag.AlignJustify

    stripe = table.cellAt(2, 0).format().background().color().name()
    assert stripe == "#f6f8fa"
    assert table.cellAt(1, 0).format().background().style() == Qt.BrushStyle.NoBrush


def test_unsupported_element(writer):
    """Test that an element type the writer does not know is rejected."""
    with pytest.raises(UnsupportedNodeError):
        writer.write(DocumentTree((DocElement(),)))
