"""A markdown abstract syntax tree and a parser that builds it."""

from mdast.ast_node import ASTNode, ASTVisitor
from mdast.markdown_ast_builder import MarkdownASTBuilder
from mdast.markdown_ast_node import (
    ColumnAlignment,
    ListStyle,
    MarkdownASTBoldNode,
    MarkdownASTCodeBlockNode,
    MarkdownASTDocumentNode,
    MarkdownASTHeaderNode,
    MarkdownASTHorizontalRuleNode,
    MarkdownASTImageNode,
    MarkdownASTInlineCodeNode,
    MarkdownASTItalicNode,
    MarkdownASTLinkNode,
    MarkdownASTListItemNode,
    MarkdownASTListNode,
    MarkdownASTNode,
    MarkdownASTParagraphNode,
    MarkdownASTQuoteNode,
    MarkdownASTRawHyperlinkNode,
    MarkdownASTStrikethroughNode,
    MarkdownASTSubscriptNode,
    MarkdownASTSuperscriptNode,
    MarkdownASTTableCellNode,
    MarkdownASTTableColumn,
    MarkdownASTTableNode,
    MarkdownASTTableRowNode,
    MarkdownASTTextNode,
    MarkdownASTVisitor
)
from mdast.markdown_ast_printer import MarkdownASTPrinter


__all__ = [
    "ASTNode",
    "ASTVisitor",
    "ColumnAlignment",
    "ListStyle",
    "MarkdownASTBoldNode",
    "MarkdownASTBuilder",
    "MarkdownASTCodeBlockNode",
    "MarkdownASTDocumentNode",
    "MarkdownASTHeaderNode",
    "MarkdownASTHorizontalRuleNode",
    "MarkdownASTImageNode",
    "MarkdownASTInlineCodeNode",
    "MarkdownASTItalicNode",
    "MarkdownASTLinkNode",
    "MarkdownASTListItemNode",
    "MarkdownASTListNode",
    "MarkdownASTNode",
    "MarkdownASTParagraphNode",
    "MarkdownASTPrinter",
    "MarkdownASTQuoteNode",
    "MarkdownASTRawHyperlinkNode",
    "MarkdownASTStrikethroughNode",
    "MarkdownASTSubscriptNode",
    "MarkdownASTSuperscriptNode",
    "MarkdownASTTableCellNode",
    "MarkdownASTTableColumn",
    "MarkdownASTTableNode",
    "MarkdownASTTableRowNode",
    "MarkdownASTTextNode",
    "MarkdownASTVisitor"
]
