"""Exceptions raised while rendering a markdown AST."""

from typing import Any


class MarkdownRenderError(Exception):
    """Base exception for rendering errors.

    All rendering errors are fatal: the render is abandoned and no partial
    document is produced.
    """


class UnsupportedNodeError(MarkdownRenderError):
    """Raised when the AST contains a node type the renderer does not know."""

    def __init__(self, node: Any) -> None:
        super().__init__(f"Unsupported markdown node: {node.__class__.__name__}")
        self.node = node


class InvalidTargetError(MarkdownRenderError):
    """Raised when a link or image URL is not a well-formed absolute reference."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Invalid link target {url!r}: {reason}")
        self.url = url


class MissingStyleError(MarkdownRenderError):
    """Raised when a value has no entry in one of the fixed style tables.

    For example a header level outside 1-6, or a table cell with no column
    definition.
    """
