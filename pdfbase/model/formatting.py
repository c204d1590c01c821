"""
Formatting value objects: borders, shading and paragraph formats.

All values are expressed in reportlab terms: lengths in points (use
reportlab.lib.units.mm / cm to convert) and reportlab colors.
"""

import copy
from dataclasses import dataclass, field, fields
from typing import Optional

from reportlab.lib import colors
from reportlab.lib.colors import Color

from .enums import Alignment, BorderStyle


DEFAULT_BORDER_WIDTH = 0.5  # points
DEFAULT_BORDER_COLOR = colors.black


@dataclass
class Border:
    """
    A single border line.

    A border is drawn as soon as any of its attributes is set, unless its
    style is BorderStyle.NONE. Unset width and color fall back to 0.5pt black.
    """

    style: Optional[BorderStyle] = None
    width: Optional[float] = None
    color: Optional[Color] = None

    @property
    def visible(self) -> bool:
        if self.style is BorderStyle.NONE:
            return False
        return any(value is not None for value in (self.style, self.width, self.color))

    @property
    def effective_width(self) -> float:
        return DEFAULT_BORDER_WIDTH if self.width is None else self.width

    @property
    def effective_color(self) -> Color:
        return DEFAULT_BORDER_COLOR if self.color is None else self.color

    def clone(self) -> 'Border':
        return copy.deepcopy(self)


@dataclass
class Borders:
    """The four borders of a table, column, row or cell"""

    top: Border = field(default_factory=Border)
    bottom: Border = field(default_factory=Border)
    left: Border = field(default_factory=Border)
    right: Border = field(default_factory=Border)

    def items(self):
        """Yield (side, border) pairs in top/bottom/left/right order"""
        for side in ('top', 'bottom', 'left', 'right'):
            yield side, getattr(self, side)

    def clone(self) -> 'Borders':
        return copy.deepcopy(self)


@dataclass
class Shading:
    """Background fill"""

    color: Optional[Color] = None

    def clone(self) -> 'Shading':
        return copy.deepcopy(self)


@dataclass
class ParagraphFormat:
    """
    Paragraph formatting overrides.

    Every attribute is optional; None means "inherit from the style".
    """

    font_name: Optional[str] = None
    font_size: Optional[float] = None
    leading: Optional[float] = None
    text_color: Optional[Color] = None
    alignment: Optional[Alignment] = None
    space_before: Optional[float] = None
    space_after: Optional[float] = None
    left_indent: Optional[float] = None
    right_indent: Optional[float] = None
    first_line_indent: Optional[float] = None
    keep_with_next: Optional[bool] = None

    def merged(self, other: Optional['ParagraphFormat']) -> 'ParagraphFormat':
        """
        Return a copy of this format overlaid with the set fields of other.

        Args:
            other: Format whose set fields take precedence (may be None)
        """
        result = self.clone()
        if other is None:
            return result
        for f in fields(other):
            value = getattr(other, f.name)
            if value is not None:
                setattr(result, f.name, copy.deepcopy(value))
        return result

    def is_empty(self) -> bool:
        return all(getattr(self, f.name) is None for f in fields(self))

    def clone(self) -> 'ParagraphFormat':
        return copy.deepcopy(self)
