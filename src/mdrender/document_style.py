"""
Fixed style tables used when mapping markdown to the document model.

Sizes are in device independent units (1/96 inch).
"""

from typing import Dict

from mdast import ColumnAlignment

from mdrender.document_element import Color, Thickness, TextAlignment


HEADER_FONT_SIZES: Dict[int, float] = {
    1: 28,
    2: 21,
    3: 16.3833,
    4: 14,
    5: 11.6167,
    6: 9.38333,
}

COLUMN_ALIGNMENTS: Dict[ColumnAlignment, TextAlignment] = {
    ColumnAlignment.CENTER: TextAlignment.CENTER,
    ColumnAlignment.LEFT: TextAlignment.LEFT,
    ColumnAlignment.RIGHT: TextAlignment.RIGHT,
    ColumnAlignment.UNSPECIFIED: TextAlignment.JUSTIFY,
}

LIGHT_GRAY = Color(0xd3, 0xd3, 0xd3)
DARK_GRAY = Color(0xa9, 0xa9, 0xa9)

# Code blocks
CODE_LANGUAGE = "C#"
CODE_FONT_FAMILY = "Consolas"
CODE_FONT_SIZE = 12.0
CODE_PADDING = Thickness.uniform(10)
CODE_BORDER_COLOR = LIGHT_GRAY
CODE_BORDER_THICKNESS = Thickness.uniform(1)
CODE_MAX_HEIGHT = 250.0

# Inline code
INLINE_CODE_BACKGROUND = Color(0xef, 0xf0, 0xf1)

# Quotes
QUOTE_BACKGROUND = Color(0xff, 0xf8, 0xdc)
QUOTE_BORDER_COLOR = Color(0xff, 0xeb, 0x8e)
QUOTE_BORDER_THICKNESS = Thickness(2, 0, 0, 0)
QUOTE_PADDING = Thickness.uniform(5)
QUOTE_CHILD_PADDING = Thickness(5, 0, 5, 0)
QUOTE_CHILD_MARGIN = Thickness.uniform(0)

# Rules
RULE_STROKE = DARK_GRAY

# Tables
TABLE_BORDER_COLOR = Color(0xdf, 0xe2, 0xe5)
TABLE_BORDER_THICKNESS = Thickness(0, 0, 1, 1)
TABLE_CELL_SPACING = 0.0
TABLE_CELL_BORDER_THICKNESS = Thickness(1, 1, 0, 0)
TABLE_CELL_PADDING = Thickness(13, 6, 13, 6)
TABLE_STRIPE_BACKGROUND = Color(0xf6, 0xf8, 0xfa)
