"""
Map block markdown nodes to document elements.
"""

import dataclasses
from typing import List, Sequence, Tuple

from mdast import (
    ListStyle, MarkdownASTVisitor, MarkdownASTNode, MarkdownASTHeaderNode, MarkdownASTParagraphNode,
    MarkdownASTListNode, MarkdownASTCodeBlockNode, MarkdownASTQuoteNode, MarkdownASTHorizontalRuleNode,
    MarkdownASTTableNode
)

from mdrender.document_element import (
    CodeBlockElement, DocElement, HeaderElement, ListElement, ListItemElement, MarkerStyle, ParagraphElement,
    QuoteElement, RuleElement, SpanRun, TableCellElement, TableElement, TableRowElement, TextAlignment
)
from mdrender.document_error import MissingStyleError, UnsupportedNodeError
from mdrender.document_style import (
    CODE_BORDER_COLOR, CODE_BORDER_THICKNESS, CODE_FONT_FAMILY, CODE_FONT_SIZE, CODE_LANGUAGE,
    CODE_MAX_HEIGHT, CODE_PADDING, COLUMN_ALIGNMENTS, HEADER_FONT_SIZES, QUOTE_BACKGROUND,
    QUOTE_BORDER_COLOR, QUOTE_BORDER_THICKNESS, QUOTE_CHILD_MARGIN, QUOTE_CHILD_PADDING, QUOTE_PADDING,
    RULE_STROKE, TABLE_BORDER_COLOR, TABLE_BORDER_THICKNESS, TABLE_CELL_BORDER_THICKNESS,
    TABLE_CELL_PADDING, TABLE_CELL_SPACING, TABLE_STRIPE_BACKGROUND
)
from mdrender.inline_mapper import DocumentInlineMapper


class DocumentBlockMapper(MarkdownASTVisitor):
    """
    Visitor that turns each block node into one document element.

    Blocks that carry inline content use the inline mapper; list items and
    quotes recurse back into this mapper.
    """

    def __init__(self, inline_mapper: DocumentInlineMapper) -> None:
        """
        Initialize the block mapper.

        Args:
            inline_mapper: Mapper used for inline content
        """
        super().__init__()
        self._inline_mapper = inline_mapper

    def map_blocks(self, nodes: Sequence[MarkdownASTNode]) -> Tuple[DocElement, ...]:
        """
        Map a sequence of block nodes, preserving order.

        Args:
            nodes: The block nodes to map

        Returns:
            One document element per node, fully built

        Raises:
            UnsupportedNodeError: If a node (at any depth) has an unknown type
            MissingStyleError: If a header level or table column has no style entry
            InvalidTargetError: If a link or image has a malformed URL
        """
        return tuple(self.visit(node) for node in nodes)

    def generic_visit(self, node: MarkdownASTNode) -> DocElement:
        raise UnsupportedNodeError(node)

    def visit_MarkdownASTHeaderNode(self, node: MarkdownASTHeaderNode) -> DocElement:  # pylint: disable=invalid-name
        if node.level not in HEADER_FONT_SIZES:
            raise MissingStyleError(f"No font size for header level {node.level}")

        return HeaderElement(
            font_size=HEADER_FONT_SIZES[node.level],
            content=SpanRun(children=self._inline_mapper.map_inlines(node.children))
        )

    def visit_MarkdownASTParagraphNode(self, node: MarkdownASTParagraphNode) -> DocElement:  # pylint: disable=invalid-name
        return ParagraphElement(inlines=self._inline_mapper.map_inlines(node.children))

    def visit_MarkdownASTListNode(self, node: MarkdownASTListNode) -> DocElement:  # pylint: disable=invalid-name
        marker_style = MarkerStyle.DISC if node.style == ListStyle.BULLETED else MarkerStyle.DECIMAL
        items = tuple(ListItemElement(blocks=self.map_blocks(item.children)) for item in node.children)
        return ListElement(marker_style=marker_style, items=items)

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> DocElement:  # pylint: disable=invalid-name
        """
        Map a code block.

        The highlighting language is always `CODE_LANGUAGE`; the code itself is
        never inspected to choose one.
        """
        return CodeBlockElement(
            text=node.text,
            language=CODE_LANGUAGE,
            font_family=CODE_FONT_FAMILY,
            font_size=CODE_FONT_SIZE,
            editor_padding=CODE_PADDING,
            border_color=CODE_BORDER_COLOR,
            border_thickness=CODE_BORDER_THICKNESS,
            max_height=CODE_MAX_HEIGHT
        )

    def visit_MarkdownASTQuoteNode(self, node: MarkdownASTQuoteNode) -> DocElement:  # pylint: disable=invalid-name
        """
        Map a quote.

        Children are mapped as usual, then rebuilt with the quote's own inner
        padding and no margin so they sit flush inside the quote.
        """
        blocks = tuple(
            dataclasses.replace(block, padding=QUOTE_CHILD_PADDING, margin=QUOTE_CHILD_MARGIN)
            for block in self.map_blocks(node.children)
        )
        return QuoteElement(
            blocks=blocks,
            background=QUOTE_BACKGROUND,
            border_color=QUOTE_BORDER_COLOR,
            border_thickness=QUOTE_BORDER_THICKNESS,
            padding=QUOTE_PADDING
        )

    def visit_MarkdownASTHorizontalRuleNode(  # pylint: disable=invalid-name
        self,
        _node: MarkdownASTHorizontalRuleNode
    ) -> DocElement:
        return RuleElement(stroke=RULE_STROKE)

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> DocElement:  # pylint: disable=invalid-name
        """
        Map a table.

        Row 0 is the header row and is shown bold.  Rows with an even, non-zero
        index get the stripe background, so the striping starts at the third
        physical row.
        """
        alignments = self._column_alignments(node)

        rows: List[TableRowElement] = []
        for row_index, row in enumerate(node.children):
            cells: List[TableCellElement] = []
            for cell_index, cell in enumerate(row.children):
                if cell_index >= len(alignments):
                    raise MissingStyleError(f"No column definition for table cell {cell_index}")

                cells.append(TableCellElement(
                    content=ParagraphElement(inlines=self._inline_mapper.map_inlines(cell.children)),
                    alignment=alignments[cell_index],
                    border_color=TABLE_BORDER_COLOR,
                    border_thickness=TABLE_CELL_BORDER_THICKNESS,
                    padding=TABLE_CELL_PADDING,
                    bold=row_index == 0
                ))

            striped = row_index % 2 == 0 and row_index != 0
            rows.append(TableRowElement(
                cells=tuple(cells),
                background=TABLE_STRIPE_BACKGROUND if striped else None
            ))

        return TableElement(
            rows=tuple(rows),
            border_color=TABLE_BORDER_COLOR,
            border_thickness=TABLE_BORDER_THICKNESS,
            cell_spacing=TABLE_CELL_SPACING
        )

    def _column_alignments(self, node: MarkdownASTTableNode) -> List[TextAlignment]:
        alignments: List[TextAlignment] = []
        for column in node.columns:
            if column.alignment not in COLUMN_ALIGNMENTS:
                raise MissingStyleError(f"No text alignment for column alignment {column.alignment!r}")

            alignments.append(COLUMN_ALIGNMENTS[column.alignment])

        return alignments
