"""
Map inline markdown nodes to document runs.
"""

from typing import Sequence, Tuple

from mdast import (
    MarkdownASTVisitor, MarkdownASTNode, MarkdownASTTextNode, MarkdownASTBoldNode, MarkdownASTItalicNode,
    MarkdownASTStrikethroughNode, MarkdownASTInlineCodeNode, MarkdownASTLinkNode, MarkdownASTRawHyperlinkNode,
    MarkdownASTImageNode, MarkdownASTSubscriptNode, MarkdownASTSuperscriptNode
)

from mdrender.document_element import (
    FontVariant, HyperlinkRun, ImageRun, LinkActivator, RunElement, SpanRun, TextRun
)
from mdrender.document_error import UnsupportedNodeError
from mdrender.document_style import INLINE_CODE_BACKGROUND
from mdrender.document_target import resolve_target


class DocumentInlineMapper(MarkdownASTVisitor):
    """Visitor that turns each inline node into one run element."""

    def __init__(self, link_activator: LinkActivator | None = None) -> None:
        """
        Initialize the inline mapper.

        Args:
            link_activator: Called with the target URL when a rendered link is activated
        """
        super().__init__()
        self._link_activator = link_activator

    def map_inline(self, node: MarkdownASTNode) -> RunElement:
        """
        Map one inline node.

        Args:
            node: The inline node to map

        Returns:
            The run element for the node

        Raises:
            UnsupportedNodeError: If the node is not an inline node type
            InvalidTargetError: If a link or image has a malformed URL
        """
        return self.visit(node)

    def map_inlines(self, nodes: Sequence[MarkdownASTNode]) -> Tuple[RunElement, ...]:
        """
        Map a sequence of inline nodes, preserving order.

        Args:
            nodes: The inline nodes to map

        Returns:
            One run element per node
        """
        return tuple(self.visit(node) for node in nodes)

    def generic_visit(self, node: MarkdownASTNode) -> RunElement:
        raise UnsupportedNodeError(node)

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> RunElement:  # pylint: disable=invalid-name
        return TextRun(text=node.content)

    def visit_MarkdownASTBoldNode(self, node: MarkdownASTBoldNode) -> RunElement:  # pylint: disable=invalid-name
        return SpanRun(children=self.map_inlines(node.children), bold=True)

    def visit_MarkdownASTItalicNode(self, node: MarkdownASTItalicNode) -> RunElement:  # pylint: disable=invalid-name
        return SpanRun(children=self.map_inlines(node.children), italic=True)

    def visit_MarkdownASTStrikethroughNode(  # pylint: disable=invalid-name
        self,
        node: MarkdownASTStrikethroughNode
    ) -> RunElement:
        return SpanRun(children=self.map_inlines(node.children), strikethrough=True)

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> RunElement:  # pylint: disable=invalid-name
        """Inline code is shown verbatim; its content is never parsed further."""
        return TextRun(text=node.content, background=INLINE_CODE_BACKGROUND)

    def visit_MarkdownASTLinkNode(self, node: MarkdownASTLinkNode) -> RunElement:  # pylint: disable=invalid-name
        return HyperlinkRun(
            children=self.map_inlines(node.children),
            target=resolve_target(node.url),
            tooltip=node.tooltip,
            activator=self._link_activator
        )

    def visit_MarkdownASTRawHyperlinkNode(  # pylint: disable=invalid-name
        self,
        node: MarkdownASTRawHyperlinkNode
    ) -> RunElement:
        return HyperlinkRun(
            children=(TextRun(text=node.text),),
            target=resolve_target(node.url),
            activator=self._link_activator
        )

    def visit_MarkdownASTImageNode(self, node: MarkdownASTImageNode) -> RunElement:  # pylint: disable=invalid-name
        """
        Map an image.

        A declared width or height of 0 means the image was given no size, so
        it is shown at its natural size instead of collapsing to nothing.
        """
        return ImageRun(
            source=resolve_target(node.url),
            width=node.width if node.width != 0 else None,
            height=node.height if node.height != 0 else None,
            tooltip=node.tooltip
        )

    def visit_MarkdownASTSubscriptNode(self, node: MarkdownASTSubscriptNode) -> RunElement:  # pylint: disable=invalid-name
        return SpanRun(children=self.map_inlines(node.children), variant=FontVariant.SUBSCRIPT)

    def visit_MarkdownASTSuperscriptNode(  # pylint: disable=invalid-name
        self,
        node: MarkdownASTSuperscriptNode
    ) -> RunElement:
        return SpanRun(children=self.map_inlines(node.children), variant=FontVariant.SUPERSCRIPT)
