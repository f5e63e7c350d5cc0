"""Render a markdown AST into a styled document model."""

from mdrender.block_mapper import DocumentBlockMapper
from mdrender.document_dumper import DocumentDumper
from mdrender.document_element import (
    CodeBlockElement,
    Color,
    DocElement,
    DocumentTree,
    FontVariant,
    HeaderElement,
    HyperlinkRun,
    ImageRun,
    LinkActivator,
    ListElement,
    ListItemElement,
    MarkerStyle,
    ParagraphElement,
    QuoteElement,
    RuleElement,
    RunElement,
    ScrollBarVisibility,
    SpanRun,
    TableCellElement,
    TableElement,
    TableRowElement,
    TextAlignment,
    TextRun,
    Thickness
)
from mdrender.document_error import InvalidTargetError, MarkdownRenderError, MissingStyleError, UnsupportedNodeError
from mdrender.document_renderer import DocumentRenderer, MarkdownParser, render
from mdrender.document_target import resolve_target
from mdrender.inline_mapper import DocumentInlineMapper


__all__ = [
    "CodeBlockElement",
    "Color",
    "DocElement",
    "DocumentBlockMapper",
    "DocumentDumper",
    "DocumentInlineMapper",
    "DocumentRenderer",
    "DocumentTree",
    "FontVariant",
    "HeaderElement",
    "HyperlinkRun",
    "ImageRun",
    "InvalidTargetError",
    "LinkActivator",
    "ListElement",
    "ListItemElement",
    "MarkdownParser",
    "MarkdownRenderError",
    "MarkerStyle",
    "MissingStyleError",
    "ParagraphElement",
    "QuoteElement",
    "RuleElement",
    "RunElement",
    "ScrollBarVisibility",
    "SpanRun",
    "TableCellElement",
    "TableElement",
    "TableRowElement",
    "TextAlignment",
    "TextRun",
    "Thickness",
    "UnsupportedNodeError",
    "render",
    "resolve_target"
]
