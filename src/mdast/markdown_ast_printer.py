"""
Visitor class to print markdown AST structures for debugging
"""
import sys
from typing import Any, List, TextIO

from mdast.markdown_ast_node import (
    MarkdownASTVisitor, MarkdownASTNode, MarkdownASTTextNode, MarkdownASTHeaderNode, MarkdownASTListNode,
    MarkdownASTInlineCodeNode, MarkdownASTCodeBlockNode, MarkdownASTTableNode, MarkdownASTLinkNode,
    MarkdownASTRawHyperlinkNode, MarkdownASTImageNode
)


class MarkdownASTPrinter(MarkdownASTVisitor):
    """Visitor that prints the AST structure for debugging."""
    def __init__(self, stream: TextIO | None = None) -> None:
        """
        Initialize the AST printer with zero indentation.

        Args:
            stream: Where to write the output, defaults to stdout
        """
        super().__init__()
        self._stream = stream if stream is not None else sys.stdout
        self.indent_level = 0

    def _indent(self) -> str:
        return "  " * self.indent_level

    def _print(self, text: str) -> None:
        print(f"{self._indent()}{text}", file=self._stream)

    def _visit_children(self, node: MarkdownASTNode) -> List[Any]:
        self.indent_level += 1
        results = super().generic_visit(node)
        self.indent_level -= 1
        return results

    def generic_visit(self, node: MarkdownASTNode) -> List[Any]:
        """
        Default visit method that prints the node type without its prefix.

        Args:
            node: The node to visit

        Returns:
            The results of visiting the children
        """
        node_name = node.__class__.__name__.removeprefix("MarkdownAST").removesuffix("Node")
        self._print(node_name)
        return self._visit_children(node)

    def visit_MarkdownASTTextNode(self, node: MarkdownASTTextNode) -> str:  # pylint: disable=invalid-name
        """Print a text node with its content."""
        self._print(f"Text: {node.content!r}")
        return node.content

    def visit_MarkdownASTHeaderNode(self, node: MarkdownASTHeaderNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print a header node with its level."""
        self._print(f"Header (level {node.level})")
        return self._visit_children(node)

    def visit_MarkdownASTListNode(self, node: MarkdownASTListNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print a list node with its style."""
        self._print(f"List ({node.style.name.lower()})")
        return self._visit_children(node)

    def visit_MarkdownASTInlineCodeNode(self, node: MarkdownASTInlineCodeNode) -> str:  # pylint: disable=invalid-name
        """Print an inline code node with its content."""
        self._print(f"InlineCode: {node.content!r}")
        return node.content

    def visit_MarkdownASTCodeBlockNode(self, node: MarkdownASTCodeBlockNode) -> str:  # pylint: disable=invalid-name
        """Print a code block with the start of its content."""
        self._print("CodeBlock")
        self.indent_level += 1
        self._print(f"Content: '{node.text[:30]}...' ({len(node.text)} chars)")
        self.indent_level -= 1
        return node.text

    def visit_MarkdownASTTableNode(self, node: MarkdownASTTableNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print a table node with its column alignments."""
        alignments = ", ".join(column.alignment.name.lower() for column in node.columns)
        self._print(f"Table (columns: {alignments})")
        return self._visit_children(node)

    def visit_MarkdownASTLinkNode(self, node: MarkdownASTLinkNode) -> List[Any]:  # pylint: disable=invalid-name
        """Print a link node with its URL and tooltip."""
        tooltip_info = f", tooltip='{node.tooltip}'" if node.tooltip else ""
        self._print(f"Link: url='{node.url}'{tooltip_info}")
        return self._visit_children(node)

    def visit_MarkdownASTRawHyperlinkNode(self, node: MarkdownASTRawHyperlinkNode) -> str:  # pylint: disable=invalid-name
        """Print a raw hyperlink with its text and URL."""
        self._print(f"RawHyperlink: text='{node.text}', url='{node.url}'")
        return node.url

    def visit_MarkdownASTImageNode(self, node: MarkdownASTImageNode) -> str:  # pylint: disable=invalid-name
        """Print an image node with its URL, size and tooltip."""
        tooltip_info = f", tooltip='{node.tooltip}'" if node.tooltip else ""
        self._print(f"Image: url='{node.url}', size={node.width}x{node.height}{tooltip_info}")
        return node.url
