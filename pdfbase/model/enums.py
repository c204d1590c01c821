"""
Enumerations used by the document model.
"""

from enum import Enum, Flag, auto


class RowHeightRule(Enum):
    """How a row height is interpreted"""
    AUTO = 'auto'
    AT_LEAST = 'at_least'
    EXACTLY = 'exactly'


class VerticalAlignment(Enum):
    """Vertical alignment of cell content (values are reportlab VALIGN names)"""
    TOP = 'TOP'
    CENTER = 'MIDDLE'
    BOTTOM = 'BOTTOM'


class Alignment(Enum):
    """Horizontal paragraph alignment"""
    LEFT = 'left'
    CENTER = 'center'
    RIGHT = 'right'
    JUSTIFY = 'justify'


class BorderStyle(Enum):
    """Line style of a border"""
    NONE = 'none'
    SINGLE = 'single'
    DOT = 'dot'
    DASH_SMALL = 'dash_small'
    DASH_LARGE = 'dash_large'


class Orientation(Enum):
    """Page orientation"""
    PORTRAIT = 'portrait'
    LANDSCAPE = 'landscape'


class Edge(Flag):
    """Edges of a rectangular cell range"""
    TOP = auto()
    BOTTOM = auto()
    LEFT = auto()
    RIGHT = auto()
    INTERIOR_HORIZONTAL = auto()
    INTERIOR_VERTICAL = auto()
    BOX = TOP | BOTTOM | LEFT | RIGHT
    INTERIOR = INTERIOR_HORIZONTAL | INTERIOR_VERTICAL
    ALL = BOX | INTERIOR
