"""
Syntax highlighting for code blocks.

Highlighting works a line at a time.  The only state carried from one line to
the next is whether a block comment is still open.
"""

from dataclasses import dataclass
from enum import Enum, auto
import logging
import re
from typing import Dict, List, Tuple


class HighlightRole(Enum):
    """Kind of a highlighted fragment of code."""
    TEXT = auto()
    KEYWORD = auto()
    STRING = auto()
    NUMBER = auto()
    COMMENT = auto()
    DIRECTIVE = auto()


Fragment = Tuple[str, HighlightRole]


@dataclass
class HighlightState:
    """State carried between lines."""
    in_block_comment: bool = False


class LanguageHighlighter:
    """Base class for a single language.  The base class highlights nothing."""

    def highlight_line(self, state: HighlightState, line: str) -> Tuple[List[Fragment], HighlightState]:
        """
        Split one line into highlighted fragments.

        Args:
            state: State left by the previous line
            line: The line to highlight, without its newline

        Returns:
            The fragments, in order, and the state for the next line
        """
        return ([(line, HighlightRole.TEXT)] if line else []), state


class CSharpHighlighter(LanguageHighlighter):
    """Highlighter for C#."""

    _KEYWORDS = frozenset({
        "abstract", "as", "async", "await", "base", "bool", "break", "byte", "case", "catch", "char",
        "checked", "class", "const", "continue", "decimal", "default", "delegate", "do", "double", "else",
        "enum", "event", "explicit", "extern", "false", "finally", "fixed", "float", "for", "foreach",
        "get", "goto", "if", "implicit", "in", "init", "int", "interface", "internal", "is", "lock",
        "long", "namespace", "new", "null", "object", "operator", "out", "override", "params",
        "partial", "private", "protected", "public", "readonly", "record", "ref", "return", "sbyte",
        "sealed", "set", "short", "sizeof", "stackalloc", "static", "string", "struct", "switch",
        "this", "throw", "true", "try", "typeof", "uint", "ulong", "unchecked", "unsafe", "ushort",
        "using", "var", "virtual", "void", "volatile", "when", "where", "while", "yield",
    })

    _TOKEN_RE = re.compile(
        r"(?P<directive>^\s*#\s*\w+.*$)"
        r"|(?P<comment>//.*$)"
        r"|(?P<block_comment>/\*.*?(?:\*/|$))"
        r"|(?P<string>@\"(?:[^\"]|\"\")*\"?|\$?\"(?:[^\"\\]|\\.)*\"?|'(?:[^'\\]|\\.)*'?)"
        r"|(?P<number>\b(?:0[xX][0-9a-fA-F_]+|0[bB][01_]+|\d[\d_]*(?:\.\d+)?(?:[eE][+-]?\d+)?)[uUlLfFdDmM]*\b)"
        r"|(?P<word>\b[A-Za-z_]\w*\b)"
    )

    _ROLES = {
        "directive": HighlightRole.DIRECTIVE,
        "comment": HighlightRole.COMMENT,
        "block_comment": HighlightRole.COMMENT,
        "string": HighlightRole.STRING,
        "number": HighlightRole.NUMBER,
    }

    def highlight_line(self, state: HighlightState, line: str) -> Tuple[List[Fragment], HighlightState]:
        fragments: List[Fragment] = []
        pos = 0

        if state.in_block_comment:
            end = line.find("*/")
            if end < 0:
                return ([(line, HighlightRole.COMMENT)] if line else []), HighlightState(in_block_comment=True)

            pos = end + 2
            fragments.append((line[:pos], HighlightRole.COMMENT))

        in_block_comment = False
        for match in self._TOKEN_RE.finditer(line, pos):
            if match.start() > pos:
                self._append(fragments, line[pos:match.start()], HighlightRole.TEXT)

            kind = match.lastgroup or "word"
            value = match.group()
            if kind == "word":
                role = HighlightRole.KEYWORD if value in self._KEYWORDS else HighlightRole.TEXT

            else:
                role = self._ROLES[kind]

            if kind == "block_comment" and not value.endswith("*/"):
                in_block_comment = True

            self._append(fragments, value, role)
            pos = match.end()

        if pos < len(line):
            self._append(fragments, line[pos:], HighlightRole.TEXT)

        return fragments, HighlightState(in_block_comment=in_block_comment)

    def _append(self, fragments: List[Fragment], text: str, role: HighlightRole) -> None:
        # Merge neighbours with the same role so plain text stays in one piece
        if fragments and fragments[-1][1] == role:
            fragments[-1] = (fragments[-1][0] + text, role)
            return

        fragments.append((text, role))


class CodeHighlighter:
    """Highlights code for a named language."""

    def __init__(self) -> None:
        self._logger = logging.getLogger("CodeHighlighter")
        self._languages: Dict[str, LanguageHighlighter] = {
            "c#": CSharpHighlighter(),
            "csharp": CSharpHighlighter(),
        }

    def register_language(self, name: str, highlighter: LanguageHighlighter) -> None:
        """Register a highlighter under a language name (case insensitive)."""
        self._languages[name.lower()] = highlighter

    def highlight(self, language: str, text: str) -> List[List[Fragment]]:
        """
        Highlight a block of code.

        Args:
            language: Language name, e.g. "C#"
            text: The code to highlight

        Returns:
            One list of fragments per line.  Unknown languages give plain text.
        """
        highlighter = self._languages.get(language.lower())
        if highlighter is None:
            self._logger.debug("no highlighter for language %r", language)
            highlighter = LanguageHighlighter()

        lines: List[List[Fragment]] = []
        state = HighlightState()
        for line in text.split("\n"):
            fragments, state = highlighter.highlight_line(state, line)
            lines.append(fragments)

        return lines
