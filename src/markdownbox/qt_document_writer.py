"""
Write a rendered document tree into a QTextDocument.
"""

import logging
from typing import Dict, Sequence

from PySide6.QtCore import Qt, QUrl
from PySide6.QtGui import (
    QBrush, QColor, QFont, QFontMetricsF, QTextBlockFormat, QTextCharFormat, QTextCursor, QTextDocument,
    QTextFormat, QTextFrame, QTextFrameFormat, QTextImageFormat, QTextLength, QTextList, QTextListFormat,
    QTextTableCellFormat, QTextTableFormat
)

from mdrender import (
    CodeBlockElement, Color, DocElement, DocumentTree, FontVariant, HeaderElement, HyperlinkRun, ImageRun,
    ListElement, MarkerStyle, ParagraphElement, QuoteElement, RuleElement, RunElement, SpanRun,
    TableElement, TextAlignment, TextRun, Thickness, UnsupportedNodeError
)

from markdownbox.code_highlighter import CodeHighlighter, HighlightRole


# Sizes in the document model are device independent units (1/96 inch)
DIP_TO_POINTS = 72 / 96

LINK_COLOR = "#0000ff"
LINE_NUMBER_COLOR = "#2b91af"

HIGHLIGHT_COLORS: Dict[HighlightRole, str] = {
    HighlightRole.KEYWORD: "#0000ff",
    HighlightRole.STRING: "#a31515",
    HighlightRole.NUMBER: "#098658",
    HighlightRole.COMMENT: "#008000",
    HighlightRole.DIRECTIVE: "#808080",
}

ALIGNMENTS: Dict[TextAlignment, Qt.AlignmentFlag] = {
    TextAlignment.LEFT: Qt.AlignmentFlag.AlignLeft,
    TextAlignment.RIGHT: Qt.AlignmentFlag.AlignRight,
    TextAlignment.CENTER: Qt.AlignmentFlag.AlignHCenter,
    TextAlignment.JUSTIFY: Qt.AlignmentFlag.AlignJustify,
}


def _qcolor(color: Color) -> QColor:
    return QColor(color.name())


class QtDocumentWriter:
    """
    Writes a `DocumentTree` into a QTextDocument.

    The document is cleared and rebuilt on every write.  Hyperlink runs written
    to the document are remembered so the host can activate them when an
    anchor is clicked.
    """

    def __init__(self, document: QTextDocument, highlighter: CodeHighlighter | None = None) -> None:
        """
        Initialize the writer.

        Args:
            document: The QTextDocument to write into
            highlighter: Highlighter for code blocks
        """
        self._document = document
        self._highlighter = highlighter if highlighter is not None else CodeHighlighter()
        self._logger = logging.getLogger("QtDocumentWriter")

        self._cursor = QTextCursor(document)
        self._hyperlinks: Dict[str, HyperlinkRun] = {}
        self._default_font_height: float = 0

        # True while the cursor sits in an empty block nothing has claimed yet
        self._fresh_block = True

        # True when the next block should share the list item's own block
        self._pending_item = False
        self._list_level = 0

    def hyperlinks(self) -> Dict[str, HyperlinkRun]:
        """
        Get the hyperlinks written by the last `write`.

        Returns:
            Hyperlink runs keyed by their anchor URL as Qt reports it
        """
        return dict(self._hyperlinks)

    def write(self, tree: DocumentTree) -> None:
        """
        Replace the document content with the given tree.

        Args:
            tree: The rendered document
        """
        self._hyperlinks = {}
        self._document.clear()
        cursor = QTextCursor(self._document)
        self._cursor = cursor
        self._fresh_block = True
        self._pending_item = False
        self._list_level = 0
        self._default_font_height = QFontMetricsF(self._document.defaultFont()).height()

        # One edit block so Qt does not lay out the document while it's being built
        cursor.beginEditBlock()
        try:
            self._write_blocks(tree.blocks)

        finally:
            cursor.endEditBlock()

        self._logger.debug("wrote %d blocks, %d hyperlinks", len(tree.blocks), len(self._hyperlinks))

    def _write_blocks(self, blocks: Sequence[DocElement]) -> None:
        for block in blocks:
            if isinstance(block, HeaderElement):
                self._write_header(block)

            elif isinstance(block, ParagraphElement):
                self._write_paragraph(block)

            elif isinstance(block, ListElement):
                self._write_list(block)

            elif isinstance(block, CodeBlockElement):
                self._write_code_block(block)

            elif isinstance(block, QuoteElement):
                self._write_quote(block)

            elif isinstance(block, RuleElement):
                self._write_rule(block)

            elif isinstance(block, TableElement):
                self._write_table(block)

            else:
                raise UnsupportedNodeError(block)

    def _block_format(self, element: DocElement) -> QTextBlockFormat:
        block_format = QTextBlockFormat()
        if element.padding is None and element.margin is None:
            block_format.setBottomMargin(self._default_font_height)

        else:
            margin = element.margin or Thickness()
            padding = element.padding or Thickness()
            block_format.setLeftMargin(margin.left + padding.left)
            block_format.setTopMargin(margin.top + padding.top)
            block_format.setRightMargin(margin.right + padding.right)
            block_format.setBottomMargin(margin.bottom + padding.bottom)

        if self._list_level:
            block_format.setIndent(self._list_level)

        return block_format

    def _start_block(self, block_format: QTextBlockFormat) -> None:
        """Move the cursor to a block of its own with the given format."""
        if self._pending_item:
            # Share the list item's block; merging keeps its list membership
            self._pending_item = False
            self._fresh_block = False
            block_format.clearProperty(QTextFormat.Property.BlockIndent)
            self._cursor.mergeBlockFormat(block_format)
            return

        if not self._fresh_block:
            self._cursor.insertBlock()

        self._fresh_block = False

        # New blocks inherit the list of the block they were split from
        text_list = self._cursor.currentList()
        if text_list is not None:
            text_list.remove(self._cursor.block())

        self._cursor.setBlockFormat(block_format)

    def _start_frame(self) -> QTextFrame:
        """
        Prepare to insert a frame or table.

        Returns:
            The enclosing frame, used to leave the new frame once it has been filled
        """
        self._pending_item = False
        self._start_block(QTextBlockFormat())
        return self._cursor.currentFrame()

    def _end_frame(self, parent_frame: QTextFrame) -> None:
        # Frames are always appended, so the end of the parent is just past the new frame
        self._cursor.setPosition(parent_frame.lastPosition())
        self._fresh_block = True

    def _write_header(self, element: HeaderElement) -> None:
        self._start_block(self._block_format(element))

        char_format = QTextCharFormat()
        char_format.setFontPointSize(element.font_size * DIP_TO_POINTS)
        self._write_run(element.content, char_format)

    def _write_paragraph(self, element: ParagraphElement) -> None:
        self._start_block(self._block_format(element))
        self._write_runs(element.inlines, QTextCharFormat())

    def _write_list(self, element: ListElement) -> None:
        # A nested list never shares the block of the item that contains it
        self._pending_item = False

        self._list_level += 1
        list_format = QTextListFormat()
        list_format.setStyle(
            QTextListFormat.Style.ListDisc if element.marker_style == MarkerStyle.DISC
            else QTextListFormat.Style.ListDecimal
        )
        list_format.setIndent(self._list_level)

        text_list: QTextList | None = None
        for item in element.items:
            self._start_block(QTextBlockFormat())
            if text_list is None:
                text_list = self._cursor.createList(list_format)

            else:
                text_list.add(self._cursor.block())

            self._pending_item = True
            self._write_blocks(item.blocks)
            self._pending_item = False

        self._list_level -= 1

    def _write_code_block(self, element: CodeBlockElement) -> None:
        """
        Write a code block into a bordered frame.

        The document has no way to bound the height of a frame or give it its
        own scrollbars, so `max_height` and the scrollbar settings are not used.
        """
        parent_frame = self._start_frame()

        frame_format = QTextFrameFormat()
        frame_format.setBorderStyle(QTextFrameFormat.BorderStyle.BorderStyle_Solid)
        frame_format.setBorder(element.border_thickness.left)
        frame_format.setBorderBrush(QBrush(_qcolor(element.border_color)))
        frame_format.setPadding(element.editor_padding.left)
        frame_format.setWidth(QTextLength(QTextLength.Type.PercentageLength, 100))
        self._apply_frame_spacing(frame_format, element)
        self._cursor.insertFrame(frame_format)

        base_format = QTextCharFormat()
        base_format.setFontFamilies([element.font_family, "monospace"])
        base_format.setFontPointSize(element.font_size * DIP_TO_POINTS)

        number_format = QTextCharFormat(base_format)
        number_format.setForeground(QColor(LINE_NUMBER_COLOR))

        lines = self._highlighter.highlight(element.language, element.text)
        number_width = len(str(len(lines)))
        for line_number, fragments in enumerate(lines, start=1):
            if line_number > 1:
                self._cursor.insertBlock()

            if element.show_line_numbers:
                self._cursor.insertText(f"{line_number:>{number_width}}  ", number_format)

            for text, role in fragments:
                fragment_format = QTextCharFormat(base_format)
                if role in HIGHLIGHT_COLORS:
                    fragment_format.setForeground(QColor(HIGHLIGHT_COLORS[role]))

                self._cursor.insertText(text, fragment_format)

        self._end_frame(parent_frame)

    def _write_quote(self, element: QuoteElement) -> None:
        """Write a quote as a single-cell table so it can carry a left border only."""
        parent_frame = self._start_frame()

        table_format = QTextTableFormat()
        table_format.setBorder(0)
        table_format.setBorderCollapse(True)
        table_format.setCellSpacing(0)
        table_format.setCellPadding(0)
        table_format.setWidth(QTextLength(QTextLength.Type.PercentageLength, 100))
        self._apply_frame_spacing(table_format, element)
        table = self._cursor.insertTable(1, 1, table_format)

        cell = table.cellAt(0, 0)
        cell_format = cell.format().toTableCellFormat()
        self._apply_cell_borders(cell_format, element.border_thickness, element.border_color)
        self._apply_cell_padding(cell_format, element.padding or Thickness())
        cell_format.setBackground(_qcolor(element.background))
        cell.setFormat(cell_format)

        self._write_in_cell(cell.firstCursorPosition(), element.blocks)
        self._end_frame(parent_frame)

    def _write_rule(self, element: RuleElement) -> None:
        block_format = self._block_format(element)
        block_format.setProperty(
            QTextFormat.Property.BlockTrailingHorizontalRulerWidth,
            QTextLength(QTextLength.Type.PercentageLength, 100)
        )
        self._start_block(block_format)

    def _write_table(self, element: TableElement) -> None:
        column_count = max((len(row.cells) for row in element.rows), default=0)
        if column_count == 0:
            self._logger.debug("skipping table with no cells")
            return

        parent_frame = self._start_frame()

        table_format = QTextTableFormat()
        table_format.setBorderStyle(QTextFrameFormat.BorderStyle.BorderStyle_Solid)
        table_format.setBorder(max(element.border_thickness.right, element.border_thickness.bottom))
        table_format.setBorderBrush(QBrush(_qcolor(element.border_color)))
        table_format.setBorderCollapse(True)
        table_format.setCellSpacing(element.cell_spacing)
        table_format.setCellPadding(0)
        table_format.setWidth(QTextLength(QTextLength.Type.PercentageLength, 100))
        self._apply_frame_spacing(table_format, element)
        table = self._cursor.insertTable(len(element.rows), column_count, table_format)

        for row_index, row in enumerate(element.rows):
            for column_index, cell_element in enumerate(row.cells):
                cell = table.cellAt(row_index, column_index)
                cell_format = cell.format().toTableCellFormat()
                self._apply_cell_borders(cell_format, cell_element.border_thickness, cell_element.border_color)
                self._apply_cell_padding(cell_format, cell_element.padding)
                if row.background is not None:
                    cell_format.setBackground(_qcolor(row.background))

                cell.setFormat(cell_format)

                cell_cursor = cell.firstCursorPosition()
                block_format = cell_cursor.blockFormat()
                block_format.setAlignment(ALIGNMENTS[cell_element.alignment])
                cell_cursor.setBlockFormat(block_format)

                char_format = QTextCharFormat()
                if cell_element.bold:
                    char_format.setFontWeight(QFont.Weight.Bold)

                old_cursor = self._cursor
                self._cursor = cell_cursor
                self._write_runs(cell_element.content.inlines, char_format)
                self._cursor = old_cursor

        self._end_frame(parent_frame)

    def _write_in_cell(self, cell_cursor: QTextCursor, blocks: Sequence[DocElement]) -> None:
        """Write blocks into a table cell, then restore the outer writing state."""
        saved = (self._cursor, self._fresh_block, self._pending_item, self._list_level)
        self._cursor = cell_cursor
        self._fresh_block = True
        self._pending_item = False
        self._list_level = 0

        self._write_blocks(blocks)

        self._cursor, self._fresh_block, self._pending_item, self._list_level = saved

    def _apply_frame_spacing(self, frame_format: QTextFrameFormat, element: DocElement) -> None:
        if element.margin is not None:
            frame_format.setLeftMargin(element.margin.left)
            frame_format.setTopMargin(element.margin.top)
            frame_format.setRightMargin(element.margin.right)
            frame_format.setBottomMargin(element.margin.bottom)

        else:
            frame_format.setBottomMargin(self._default_font_height)

    def _apply_cell_borders(self, cell_format: QTextTableCellFormat, thickness: Thickness, color: Color) -> None:
        brush = QBrush(_qcolor(color))
        cell_format.setLeftBorder(thickness.left)
        cell_format.setTopBorder(thickness.top)
        cell_format.setRightBorder(thickness.right)
        cell_format.setBottomBorder(thickness.bottom)
        cell_format.setBorderBrush(brush)
        cell_format.setBorderStyle(QTextFrameFormat.BorderStyle.BorderStyle_Solid)

    def _apply_cell_padding(self, cell_format: QTextTableCellFormat, padding: Thickness) -> None:
        cell_format.setLeftPadding(padding.left)
        cell_format.setTopPadding(padding.top)
        cell_format.setRightPadding(padding.right)
        cell_format.setBottomPadding(padding.bottom)

    def _write_runs(self, runs: Sequence[RunElement], char_format: QTextCharFormat) -> None:
        for run in runs:
            self._write_run(run, char_format)

    def _write_run(self, run: RunElement, char_format: QTextCharFormat) -> None:
        """
        Write one run, deriving its format from the enclosing run's format.

        Args:
            run: The run to write
            char_format: Format of the enclosing run
        """
        if isinstance(run, TextRun):
            text_format = QTextCharFormat(char_format)
            if run.background is not None:
                text_format.setBackground(_qcolor(run.background))

            self._cursor.insertText(run.text, text_format)
            return

        if isinstance(run, SpanRun):
            span_format = QTextCharFormat(char_format)
            if run.bold:
                span_format.setFontWeight(QFont.Weight.Bold)

            if run.italic:
                span_format.setFontItalic(True)

            if run.strikethrough:
                span_format.setFontStrikeOut(True)

            if run.variant == FontVariant.SUBSCRIPT:
                span_format.setVerticalAlignment(QTextCharFormat.VerticalAlignment.AlignSubScript)

            elif run.variant == FontVariant.SUPERSCRIPT:
                span_format.setVerticalAlignment(QTextCharFormat.VerticalAlignment.AlignSuperScript)

            self._write_runs(run.children, span_format)
            return

        if isinstance(run, HyperlinkRun):
            link_format = QTextCharFormat(char_format)
            link_format.setAnchor(True)
            link_format.setAnchorHref(run.target)
            link_format.setFontUnderline(True)
            link_format.setForeground(QColor(LINK_COLOR))
            if run.tooltip:
                link_format.setToolTip(run.tooltip)

            self._hyperlinks[QUrl(run.target).toString()] = run
            self._write_runs(run.children, link_format)
            return

        if isinstance(run, ImageRun):
            image_format = QTextImageFormat()
            image_format.setName(run.source)
            if run.width is not None:
                image_format.setWidth(run.width)

            if run.height is not None:
                image_format.setHeight(run.height)

            if run.tooltip:
                image_format.setToolTip(run.tooltip)

            self._cursor.insertImage(image_format)
            return

        raise UnsupportedNodeError(run)
