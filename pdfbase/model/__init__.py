"""
Document Object Model

Mutable model of a paginated document: sections with page setup, headers and
footers, paragraphs, images and tables with borders, shading and paragraph
formats.
"""

from .enums import (
    Alignment,
    BorderStyle,
    Edge,
    Orientation,
    RowHeightRule,
    VerticalAlignment,
)
from .formatting import Border, Borders, ParagraphFormat, Shading
from .styles import Style, StyleSheet
from .elements import (
    Cell,
    Column,
    Document,
    DocumentInfo,
    EdgeSpec,
    HeaderFooter,
    Image,
    PageBreak,
    PageSetup,
    Paragraph,
    Row,
    Section,
    Table,
)

__all__ = [
    'Alignment',
    'BorderStyle',
    'Edge',
    'Orientation',
    'RowHeightRule',
    'VerticalAlignment',
    'Border',
    'Borders',
    'ParagraphFormat',
    'Shading',
    'Style',
    'StyleSheet',
    'Cell',
    'Column',
    'Document',
    'DocumentInfo',
    'EdgeSpec',
    'HeaderFooter',
    'Image',
    'PageBreak',
    'PageSetup',
    'Paragraph',
    'Row',
    'Section',
    'Table',
]
