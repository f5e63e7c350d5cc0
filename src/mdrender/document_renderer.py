"""
Render markdown text to a document tree.

Every render starts from the raw text: the text is parsed, the top-level
blocks are mapped and a new `DocumentTree` is returned.  Nothing is cached or
reused between renders.
"""

import logging
from typing import List, Protocol

from mdast import MarkdownASTBuilder, MarkdownASTNode

from mdrender.block_mapper import DocumentBlockMapper
from mdrender.document_element import DocumentTree, LinkActivator
from mdrender.inline_mapper import DocumentInlineMapper


class MarkdownParser(Protocol):
    """Anything that can turn markdown text into top-level block nodes."""

    def parse(self, text: str) -> List[MarkdownASTNode]:
        """Parse text into its ordered top-level blocks."""


class DocumentRenderer:
    """Renders markdown text to a `DocumentTree`."""

    def __init__(self, parser: MarkdownParser | None = None, link_activator: LinkActivator | None = None) -> None:
        """
        Initialize the renderer.

        Args:
            parser: Parser used to build the AST, defaults to `MarkdownASTBuilder`
            link_activator: Called with the target URL when a rendered link is activated
        """
        self._logger = logging.getLogger("DocumentRenderer")
        self._parser: MarkdownParser = parser if parser is not None else MarkdownASTBuilder()
        self._block_mapper = DocumentBlockMapper(DocumentInlineMapper(link_activator))

    def render(self, text: str | None) -> DocumentTree:
        """
        Render markdown text.

        Args:
            text: The markdown source; None is treated as empty

        Returns:
            A newly built document tree

        Raises:
            MarkdownRenderError: If the AST cannot be rendered.  No tree is returned
                in that case.
        """
        blocks = self._parser.parse(text or "")
        tree = DocumentTree(self._block_mapper.map_blocks(blocks))
        self._logger.debug("rendered %d top-level blocks", len(tree.blocks))
        return tree


def render(
    text: str | None,
    parser: MarkdownParser | None = None,
    link_activator: LinkActivator | None = None
) -> DocumentTree:
    """
    Render markdown text with a one-off renderer.

    Args:
        text: The markdown source; None is treated as empty
        parser: Parser used to build the AST, defaults to `MarkdownASTBuilder`
        link_activator: Called with the target URL when a rendered link is activated

    Returns:
        A newly built document tree
    """
    return DocumentRenderer(parser, link_activator).render(text)
