"""
Rendered document model.

A render produces a `DocumentTree` of block elements (`DocElement`) that hold
inline runs (`RunElement`).  Elements are immutable values: a parent that needs
to restyle a child builds a new element rather than changing the old one.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Tuple


LinkActivator = Callable[[str], None]


@dataclass(frozen=True)
class Thickness:
    """Widths of the four edges of a box, in device independent units."""
    left: float = 0
    top: float = 0
    right: float = 0
    bottom: float = 0

    @classmethod
    def uniform(cls, value: float) -> "Thickness":
        """Create a thickness with the same width on every edge."""
        return cls(value, value, value, value)


@dataclass(frozen=True)
class Color:
    """An opaque RGB colour."""
    red: int
    green: int
    blue: int

    def name(self) -> str:
        """Return the colour in `#rrggbb` form."""
        return f"#{self.red:02x}{self.green:02x}{self.blue:02x}"


class MarkerStyle(Enum):
    """List item marker."""
    DISC = auto()
    DECIMAL = auto()


class TextAlignment(Enum):
    """Horizontal alignment of text in a block."""
    LEFT = auto()
    RIGHT = auto()
    CENTER = auto()
    JUSTIFY = auto()


class FontVariant(Enum):
    """Vertical placement of text relative to the baseline."""
    NORMAL = auto()
    SUBSCRIPT = auto()
    SUPERSCRIPT = auto()


class ScrollBarVisibility(Enum):
    """When a scrollable element shows a scrollbar."""
    AUTO = auto()
    VISIBLE = auto()
    HIDDEN = auto()


@dataclass(frozen=True, kw_only=True)
class RunElement:
    """Base class for inline elements."""


@dataclass(frozen=True, kw_only=True)
class TextRun(RunElement):
    """A run of plain text."""
    text: str
    background: Color | None = None


@dataclass(frozen=True, kw_only=True)
class SpanRun(RunElement):
    """A group of runs sharing a style."""
    children: Tuple[RunElement, ...] = ()
    bold: bool = False
    italic: bool = False
    strikethrough: bool = False
    variant: FontVariant = FontVariant.NORMAL


@dataclass(frozen=True, kw_only=True)
class HyperlinkRun(RunElement):
    """A group of runs that navigates to `target` when activated."""
    children: Tuple[RunElement, ...] = ()
    target: str
    tooltip: str | None = None
    activator: LinkActivator | None = field(default=None, compare=False, repr=False)

    def activate(self) -> bool:
        """
        Forward the target to the link activator.

        Returns:
            True, meaning the host should not apply its own default action
        """
        if self.activator is not None:
            self.activator(self.target)

        return True


@dataclass(frozen=True, kw_only=True)
class ImageRun(RunElement):
    """An embedded image.  A width or height of None means the natural size."""
    source: str
    width: float | None = None
    height: float | None = None
    tooltip: str | None = None


@dataclass(frozen=True, kw_only=True)
class DocElement:
    """Base class for block elements.  None padding or margin means the host default."""
    padding: Thickness | None = None
    margin: Thickness | None = None


@dataclass(frozen=True, kw_only=True)
class HeaderElement(DocElement):
    """A header: one styled group of runs shown at a fixed size."""
    font_size: float
    content: SpanRun


@dataclass(frozen=True, kw_only=True)
class ParagraphElement(DocElement):
    """A paragraph of runs."""
    inlines: Tuple[RunElement, ...] = ()


@dataclass(frozen=True, kw_only=True)
class ListItemElement:
    """One item of a list; it may hold any blocks."""
    blocks: Tuple[DocElement, ...] = ()


@dataclass(frozen=True, kw_only=True)
class ListElement(DocElement):
    """A list of items sharing one marker style."""
    marker_style: MarkerStyle
    items: Tuple[ListItemElement, ...] = ()


@dataclass(frozen=True, kw_only=True)
class CodeBlockElement(DocElement):
    """A read-only code display."""
    text: str
    language: str
    font_family: str
    font_size: float
    editor_padding: Thickness
    border_color: Color
    border_thickness: Thickness
    max_height: float
    horizontal_scroll: ScrollBarVisibility = ScrollBarVisibility.AUTO
    vertical_scroll: ScrollBarVisibility = ScrollBarVisibility.AUTO
    read_only: bool = True
    show_line_numbers: bool = True


@dataclass(frozen=True, kw_only=True)
class QuoteElement(DocElement):
    """A quoted section of blocks."""
    blocks: Tuple[DocElement, ...] = ()
    background: Color
    border_color: Color
    border_thickness: Thickness


@dataclass(frozen=True, kw_only=True)
class RuleElement(DocElement):
    """A full-width horizontal divider."""
    stroke: Color


@dataclass(frozen=True, kw_only=True)
class TableCellElement:
    """One table cell."""
    content: ParagraphElement
    alignment: TextAlignment
    border_color: Color
    border_thickness: Thickness
    padding: Thickness
    bold: bool = False


@dataclass(frozen=True, kw_only=True)
class TableRowElement:
    """One table row; a None background means no striping."""
    cells: Tuple[TableCellElement, ...] = ()
    background: Color | None = None


@dataclass(frozen=True, kw_only=True)
class TableElement(DocElement):
    """A table.  The first row is the header row."""
    rows: Tuple[TableRowElement, ...] = ()
    border_color: Color
    border_thickness: Thickness
    cell_spacing: float = 0


@dataclass(frozen=True)
class DocumentTree:
    """The result of one render: the ordered top-level blocks."""
    blocks: Tuple[DocElement, ...] = ()
