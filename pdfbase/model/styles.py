"""
Named paragraph styles.

A style is a ParagraphFormat plus an optional base style. Resolving a style
walks the base chain from the root ("Normal") down to the named style and
overlays each level's set fields.
"""

import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, Optional

from reportlab.lib import colors

from .enums import Alignment
from .formatting import ParagraphFormat


logger = logging.getLogger(__name__)

NORMAL = 'Normal'


def _normal_format() -> ParagraphFormat:
    return ParagraphFormat(
        font_name='Helvetica',
        font_size=10,
        leading=12,
        text_color=colors.black,
        alignment=Alignment.LEFT,
        space_before=0,
        space_after=0,
        left_indent=0,
        right_indent=0,
        first_line_indent=0,
        keep_with_next=False,
    )


@dataclass
class Style:
    """A named paragraph style"""

    name: str
    base_style: Optional[str] = NORMAL
    paragraph_format: ParagraphFormat = field(default_factory=ParagraphFormat)


class StyleSheet:
    """Collection of named styles. Always contains the "Normal" style."""

    def __init__(self):
        self._styles: Dict[str, Style] = {
            NORMAL: Style(NORMAL, base_style=None, paragraph_format=_normal_format()),
        }

    def __getitem__(self, name: str) -> Style:
        return self._styles[name]

    def __contains__(self, name: str) -> bool:
        return name in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    @property
    def normal(self) -> Style:
        return self._styles[NORMAL]

    def add_style(self, name: str, base_style: Optional[str] = NORMAL) -> Style:
        """
        Add (or replace) a named style.

        Args:
            name: Style name
            base_style: Name of the style to inherit from

        Returns:
            The new Style, whose paragraph_format can be customized
        """
        if not name or not name.strip():
            raise ValueError("Style name must not be empty")
        if name == NORMAL:
            raise ValueError("The Normal style cannot be replaced, modify it instead")
        if base_style is not None and base_style not in self._styles:
            raise KeyError(f"Base style '{base_style}' not found")

        style = Style(name, base_style=base_style)
        self._styles[name] = style
        return style

    def resolve(self, name: Optional[str], *overrides: Optional[ParagraphFormat]) -> ParagraphFormat:
        """
        Resolve a style name into a complete ParagraphFormat.

        Args:
            name: Style name (None means Normal)
            *overrides: Formats applied on top, in order; None entries are skipped

        Returns:
            The effective ParagraphFormat
        """
        if name and name not in self._styles:
            logger.warning(f"Unknown style '{name}', falling back to '{NORMAL}'")
            name = None

        chain = []
        current = self._styles[name or NORMAL]
        while current is not None and current not in chain:
            chain.append(current)
            current = self._styles.get(current.base_style) if current.base_style else None

        result = self.normal.paragraph_format.clone()
        for style in reversed(chain):
            result = result.merged(style.paragraph_format)
        for override in overrides:
            result = result.merged(override)
        return result
