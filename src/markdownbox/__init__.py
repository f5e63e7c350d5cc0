"""Qt widget that displays markdown."""

from markdownbox.code_highlighter import CodeHighlighter, HighlightRole
from markdownbox.link_activator import ignore_link, open_external_link
from markdownbox.markdown_box import MarkdownBox
from markdownbox.markdown_box_settings import MarkdownBoxSettings
from markdownbox.qt_document_writer import QtDocumentWriter


__all__ = [
    "CodeHighlighter",
    "HighlightRole",
    "MarkdownBox",
    "MarkdownBoxSettings",
    "QtDocumentWriter",
    "ignore_link",
    "open_external_link"
]
