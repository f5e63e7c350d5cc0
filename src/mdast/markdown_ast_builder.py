"""
Build a markdown AST from source text.

Parsing is delegated to markdown-it-py; this module walks the resulting syntax
tree and produces the node types defined in `mdast.markdown_ast_node`.
"""

import logging
import re
from typing import Callable, Dict, List

from markdown_it import MarkdownIt
from markdown_it.rules_inline import StateInline
from markdown_it.tree import SyntaxTreeNode
from mdit_py_plugins.attrs import attrs_plugin

from mdast.markdown_ast_node import (
    ColumnAlignment, ListStyle, MarkdownASTBoldNode, MarkdownASTCodeBlockNode, MarkdownASTDocumentNode,
    MarkdownASTHeaderNode, MarkdownASTHorizontalRuleNode, MarkdownASTImageNode, MarkdownASTInlineCodeNode,
    MarkdownASTItalicNode, MarkdownASTLinkNode, MarkdownASTListItemNode, MarkdownASTListNode, MarkdownASTNode,
    MarkdownASTParagraphNode, MarkdownASTQuoteNode, MarkdownASTRawHyperlinkNode, MarkdownASTStrikethroughNode,
    MarkdownASTSubscriptNode, MarkdownASTSuperscriptNode, MarkdownASTTableCellNode, MarkdownASTTableColumn,
    MarkdownASTTableNode, MarkdownASTTableRowNode, MarkdownASTTextNode
)


_UNESCAPED_SPACE_RE = re.compile(r"(^|[^\\])(\\\\)*\s")

_ALIGNMENTS: Dict[str, ColumnAlignment] = {
    "text-align:left": ColumnAlignment.LEFT,
    "text-align:right": ColumnAlignment.RIGHT,
    "text-align:center": ColumnAlignment.CENTER,
}


def _script_rule(marker: str, token_name: str, tag: str) -> Callable[[StateInline, bool], bool]:
    """
    Create an inline rule for text enclosed in a single marker character.

    `^text^` gives superscript and `~text~` subscript.  Unescaped whitespace
    is not allowed between the markers.

    Args:
        marker: The enclosing character
        token_name: Prefix for the open and close token types
        tag: HTML tag recorded on the tokens

    Returns:
        The inline rule function
    """
    def rule(state: StateInline, silent: bool) -> bool:
        start = state.pos
        maximum = state.posMax

        if state.src[start] != marker or silent:
            return False

        if start + 2 >= maximum:
            return False

        state.pos = start + 1
        found = False
        while state.pos < maximum:
            if state.src[state.pos] == marker:
                found = True
                break

            state.md.inline.skipToken(state)

        if not found or start + 1 == state.pos:
            state.pos = start
            return False

        content = state.src[start + 1:state.pos]
        if _UNESCAPED_SPACE_RE.search(content):
            state.pos = start
            return False

        end = state.pos

        token = state.push(f"{token_name}_open", tag, 1)
        token.markup = marker

        # The enclosed text may carry its own inline markup
        first = len(state.tokens)
        state.pos = start + 1
        state.posMax = end
        state.md.inline.tokenize(state)
        for inner in state.tokens[first:]:
            if inner.type in ("text", "text_special"):
                inner.content = inner.content.replace("\\ ", " ")

        token = state.push(f"{token_name}_close", tag, -1)
        token.markup = marker

        state.pos = end + 1
        state.posMax = maximum
        return True

    return rule


class MarkdownASTBuilder:
    """
    Builder class for constructing an AST from markdown text.

    Every call to `build_ast` parses the text from scratch; no state is kept
    between calls.
    """

    def __init__(self) -> None:
        """Initialize the builder and configure the markdown-it parser."""
        self._logger = logging.getLogger("MarkdownASTBuilder")

        md = MarkdownIt("commonmark", {"linkify": True})
        md.enable("table")
        md.enable("strikethrough")
        md.enable("linkify")
        md.use(attrs_plugin)

        # A single "~" is left alone by the strikethrough rule, which needs "~~"
        md.inline.ruler.after("emphasis", "superscript", _script_rule("^", "sup", "sup"))
        md.inline.ruler.after("emphasis", "subscript", _script_rule("~", "sub", "sub"))
        self._md = md

        self._block_handlers: Dict[str, Callable[[SyntaxTreeNode], MarkdownASTNode]] = {
            "heading": self._build_header,
            "paragraph": self._build_paragraph,
            "bullet_list": self._build_list,
            "ordered_list": self._build_list,
            "fence": self._build_code_block,
            "code_block": self._build_code_block,
            "blockquote": self._build_quote,
            "hr": self._build_rule,
            "table": self._build_table,
            "html_block": self._build_html_block,
        }

        self._inline_handlers: Dict[str, Callable[[SyntaxTreeNode], MarkdownASTNode]] = {
            "text": self._build_text,
            "softbreak": lambda _node: MarkdownASTTextNode(" "),
            "hardbreak": lambda _node: MarkdownASTTextNode("\n"),
            "html_inline": self._build_text,
            "strong": lambda node: self._build_group(MarkdownASTBoldNode(), node),
            "em": lambda node: self._build_group(MarkdownASTItalicNode(), node),
            "s": lambda node: self._build_group(MarkdownASTStrikethroughNode(), node),
            "sub": lambda node: self._build_group(MarkdownASTSubscriptNode(), node),
            "sup": lambda node: self._build_group(MarkdownASTSuperscriptNode(), node),
            "code_inline": self._build_inline_code,
            "link": self._build_link,
            "image": self._build_image,
        }

    def build_ast(self, text: str) -> MarkdownASTDocumentNode:
        """
        Parse markdown text into a document node.

        Args:
            text: The markdown text to parse

        Returns:
            The document node; its children are the top-level blocks
        """
        tree = SyntaxTreeNode(self._md.parse(text))
        document = MarkdownASTDocumentNode()
        document.add_children(self._build_blocks(tree))
        return document

    def parse(self, text: str) -> List[MarkdownASTNode]:
        """
        Parse markdown text into the ordered list of top-level blocks.

        Args:
            text: The markdown text to parse

        Returns:
            The top-level block nodes
        """
        return list(self.build_ast(text).children)

    def _build_blocks(self, node: SyntaxTreeNode) -> List[MarkdownASTNode]:
        blocks: List[MarkdownASTNode] = []
        for child in node.children:
            handler = self._block_handlers.get(child.type)
            if handler is None:
                self._logger.warning("ignoring unexpected block type: %s", child.type)
                continue

            blocks.append(handler(child))

        return blocks

    def _build_inlines(self, node: SyntaxTreeNode) -> List[MarkdownASTNode]:
        """
        Build inline nodes for every child of `node`.

        Block-level containers (paragraphs, headings, table cells) hold a single
        "inline" child that wraps the actual inline content, so that is unwrapped.
        """
        inlines: List[MarkdownASTNode] = []
        for child in node.children:
            if child.type == "inline":
                inlines.extend(self._build_inlines(child))
                continue

            # Some markdown-it versions emit empty text tokens next to emphasis
            if child.type == "text" and not child.content:
                continue

            handler = self._inline_handlers.get(child.type)
            if handler is None:
                self._logger.warning("treating unexpected inline type as text: %s", child.type)
                inlines.append(MarkdownASTTextNode(child.content))
                continue

            inlines.append(handler(child))

        return inlines

    def _build_header(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        header = MarkdownASTHeaderNode(int(node.tag[1:]))
        header.add_children(self._build_inlines(node))
        return header

    def _build_paragraph(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        paragraph = MarkdownASTParagraphNode()
        paragraph.add_children(self._build_inlines(node))
        return paragraph

    def _build_list(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        style = ListStyle.ORDERED if node.type == "ordered_list" else ListStyle.BULLETED
        list_node = MarkdownASTListNode(style)
        for item in node.children:
            item_node = MarkdownASTListItemNode()
            item_node.add_children(self._build_blocks(item))
            list_node.add_child(item_node)

        return list_node

    def _build_code_block(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        # markdown-it keeps the final newline of the block; the display does not want it
        text = node.content
        if text.endswith("\n"):
            text = text[:-1]

        return MarkdownASTCodeBlockNode(text)

    def _build_quote(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        quote = MarkdownASTQuoteNode()
        quote.add_children(self._build_blocks(node))
        return quote

    def _build_rule(self, _node: SyntaxTreeNode) -> MarkdownASTNode:
        return MarkdownASTHorizontalRuleNode()

    def _build_html_block(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        paragraph = MarkdownASTParagraphNode()
        paragraph.add_child(MarkdownASTTextNode(node.content.strip()))
        return paragraph

    def _build_table(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        rows: List[SyntaxTreeNode] = []
        for section in node.children:
            rows.extend(section.children)

        columns: List[MarkdownASTTableColumn] = []
        if rows:
            for cell in rows[0].children:
                style = str(cell.attrs.get("style", ""))
                columns.append(MarkdownASTTableColumn(_ALIGNMENTS.get(style, ColumnAlignment.UNSPECIFIED)))

        table = MarkdownASTTableNode(columns)
        for row in rows:
            row_node = MarkdownASTTableRowNode()
            for cell in row.children:
                cell_node = MarkdownASTTableCellNode()
                cell_node.add_children(self._build_inlines(cell))
                row_node.add_child(cell_node)

            table.add_child(row_node)

        return table

    def _build_text(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        return MarkdownASTTextNode(node.content)

    def _build_group(self, group: MarkdownASTNode, node: SyntaxTreeNode) -> MarkdownASTNode:
        group.add_children(self._build_inlines(node))
        return group

    def _build_inline_code(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        return MarkdownASTInlineCodeNode(node.content)

    def _build_link(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        url = str(node.attrGet("href") or "")

        # Bare URLs and <...> autolinks are shown exactly as written
        if node.markup in ("linkify", "autolink"):
            return MarkdownASTRawHyperlinkNode(self._plain_text(node), url)

        title = node.attrGet("title")
        link = MarkdownASTLinkNode(url, str(title) if title is not None else None)
        link.add_children(self._build_inlines(node))
        return link

    def _build_image(self, node: SyntaxTreeNode) -> MarkdownASTNode:
        title = node.attrGet("title")
        return MarkdownASTImageNode(
            url=str(node.attrGet("src") or ""),
            width=self._dimension(node.attrGet("width")),
            height=self._dimension(node.attrGet("height")),
            tooltip=str(title) if title is not None else None
        )

    def _dimension(self, value: str | int | float | None) -> int:
        """
        Convert a declared image dimension to pixels.

        Args:
            value: The attribute value, e.g. `120` or `"120px"`

        Returns:
            The size in pixels, or 0 if not given or not understood
        """
        if value is None:
            return 0

        text = str(value).strip()
        if text.endswith("px"):
            text = text[:-2]

        try:
            return max(0, int(float(text)))

        except ValueError:
            self._logger.debug("ignoring image dimension: %r", value)
            return 0

    def _plain_text(self, node: SyntaxTreeNode) -> str:
        if not node.children:
            return node.content

        return "".join(self._plain_text(child) for child in node.children)
