"""
Markdown AST node types.

Block nodes describe the structure of a document (headers, paragraphs, lists,
code, quotes, rules and tables).  Inline nodes describe styled text inside a
block.  Nested content is always held in `children`, in document order.
"""

from enum import Enum, auto
from typing import List

from mdast.ast_node import ASTNode, ASTVisitor


class ListStyle(Enum):
    """Marker style of a list."""
    ORDERED = auto()
    BULLETED = auto()


class ColumnAlignment(Enum):
    """Alignment declared for a table column."""
    LEFT = auto()
    RIGHT = auto()
    CENTER = auto()
    UNSPECIFIED = auto()


class MarkdownASTNode(ASTNode):
    """Base class for all Markdown AST nodes."""


class MarkdownASTVisitor(ASTVisitor):
    """Base visitor class for Markdown AST traversal."""


class MarkdownASTDocumentNode(MarkdownASTNode):
    """Root node; its children are the top-level blocks."""


class MarkdownASTHeaderNode(MarkdownASTNode):
    """Node representing a header; children are inline nodes."""
    def __init__(self, level: int) -> None:
        """
        Initialize a header node.

        Args:
            level: The header level (1-6)
        """
        super().__init__()
        self.level = level


class MarkdownASTParagraphNode(MarkdownASTNode):
    """Node representing a paragraph; children are inline nodes."""


class MarkdownASTListNode(MarkdownASTNode):
    """Node representing a list; children are list items."""
    def __init__(self, style: ListStyle) -> None:
        """
        Initialize a list node.

        Args:
            style: Whether the list is ordered or bulleted
        """
        super().__init__()
        self.style = style


class MarkdownASTListItemNode(MarkdownASTNode):
    """Node representing a list item; children are block nodes."""


class MarkdownASTCodeBlockNode(MarkdownASTNode):
    """Node representing a code block."""
    def __init__(self, text: str) -> None:
        """
        Initialize a code block node.

        Args:
            text: The code content
        """
        super().__init__()
        self.text = text


class MarkdownASTQuoteNode(MarkdownASTNode):
    """Node representing a block quote; children are block nodes."""


class MarkdownASTHorizontalRuleNode(MarkdownASTNode):
    """Node representing a horizontal rule."""


class MarkdownASTTableColumn:
    """Column definition of a table."""
    def __init__(self, alignment: ColumnAlignment = ColumnAlignment.UNSPECIFIED) -> None:
        self.alignment = alignment


class MarkdownASTTableNode(MarkdownASTNode):
    """Node representing a table; children are rows, the first one being the header row."""
    def __init__(self, columns: List[MarkdownASTTableColumn] | None = None) -> None:
        """
        Initialize a table node.

        Args:
            columns: Column definitions, one per column
        """
        super().__init__()
        self.columns: List[MarkdownASTTableColumn] = columns if columns is not None else []


class MarkdownASTTableRowNode(MarkdownASTNode):
    """Node representing a table row; children are cells."""


class MarkdownASTTableCellNode(MarkdownASTNode):
    """Node representing a table cell; children are inline nodes."""


class MarkdownASTTextNode(MarkdownASTNode):
    """Node representing plain text content."""
    def __init__(self, content: str) -> None:
        """
        Initialize a text node.

        Args:
            content: The text content
        """
        super().__init__()
        self.content = content


class MarkdownASTBoldNode(MarkdownASTNode):
    """Node representing bold text."""


class MarkdownASTItalicNode(MarkdownASTNode):
    """Node representing italic text."""


class MarkdownASTStrikethroughNode(MarkdownASTNode):
    """Node representing struck-through text."""


class MarkdownASTSubscriptNode(MarkdownASTNode):
    """Node representing subscript text."""


class MarkdownASTSuperscriptNode(MarkdownASTNode):
    """Node representing superscript text."""


class MarkdownASTInlineCodeNode(MarkdownASTNode):
    """Node representing inline code."""
    def __init__(self, content: str = "") -> None:
        """
        Initialize an inline code node.

        Args:
            content: The code content
        """
        super().__init__()
        self.content = content


class MarkdownASTLinkNode(MarkdownASTNode):
    """Node representing a link; children are the link text."""
    def __init__(self, url: str = "", tooltip: str | None = None) -> None:
        """
        Initialize a link node.

        Args:
            url: The link URL
            tooltip: Optional tooltip (the link title)
        """
        super().__init__()
        self.url = url
        self.tooltip = tooltip


class MarkdownASTRawHyperlinkNode(MarkdownASTNode):
    """Node representing a bare URL or autolink, shown as literal text."""
    def __init__(self, text: str, url: str) -> None:
        """
        Initialize a raw hyperlink node.

        Args:
            text: The literal text displayed for the link
            url: The link URL
        """
        super().__init__()
        self.text = text
        self.url = url


class MarkdownASTImageNode(MarkdownASTNode):
    """Node representing an image."""
    def __init__(self, url: str = "", width: int = 0, height: int = 0, tooltip: str | None = None) -> None:
        """
        Initialize an image node.

        Args:
            url: The image URL
            width: Declared width, 0 when not given
            height: Declared height, 0 when not given
            tooltip: Optional tooltip (the image title)
        """
        super().__init__()
        self.url = url
        self.width = width
        self.height = height
        self.tooltip = tooltip
