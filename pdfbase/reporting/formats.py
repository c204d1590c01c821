"""
Style descriptors for columns, rows and tables.

A descriptor lists optional style attributes. apply() copies the attributes
that are set onto a target and leaves everything else untouched. Borders,
shading and paragraph formats are cloned on every application so targets
never share style objects with the descriptor or with each other.
"""

from dataclasses import dataclass
from typing import Optional

from pdfbase.exceptions import InvalidArgumentError
from pdfbase.model import (
    Borders,
    Column,
    ParagraphFormat,
    Row,
    RowHeightRule,
    Shading,
    Table,
    VerticalAlignment,
)


def _has_style(style: Optional[str]) -> bool:
    return style is not None and bool(style.strip())


@dataclass
class ColumnFormat:
    """Column descriptor; width is also used when the column is added"""

    width: Optional[float] = None
    format: Optional[ParagraphFormat] = None
    borders: Optional[Borders] = None
    shading: Optional[Shading] = None
    style: Optional[str] = None

    def apply(self, column: Column) -> None:
        if column is None:
            raise InvalidArgumentError("column is required")

        if self.width is not None:
            column.width = self.width

        if self.format is not None:
            column.format = self.format.clone()

        if self.borders is not None:
            column.borders = self.borders.clone()

        if self.shading is not None:
            column.shading = self.shading.clone()

        if _has_style(self.style):
            column.style = self.style


@dataclass
class RowFormat:
    """Row descriptor"""

    borders: Optional[Borders] = None
    format: Optional[ParagraphFormat] = None
    height: Optional[float] = None
    height_rule: Optional[RowHeightRule] = None
    shading: Optional[Shading] = None
    vertical_alignment: Optional[VerticalAlignment] = None
    style: Optional[str] = None

    def apply(self, row: Row) -> None:
        if row is None:
            raise InvalidArgumentError("row is required")

        if self.borders is not None:
            row.borders = self.borders.clone()

        if self.format is not None:
            row.format = self.format.clone()

        if self.height is not None:
            row.height = self.height

        if self.height_rule is not None:
            row.height_rule = self.height_rule

        if self.shading is not None:
            row.shading = self.shading.clone()

        if self.vertical_alignment is not None:
            row.vertical_alignment = self.vertical_alignment

        if _has_style(self.style):
            row.style = self.style


@dataclass
class TableFormat:
    """Table descriptor"""

    borders: Optional[Borders] = None
    format: Optional[ParagraphFormat] = None
    shading: Optional[Shading] = None
    style: Optional[str] = None

    def apply(self, table: Table) -> None:
        if table is None:
            raise InvalidArgumentError("table is required")

        if self.borders is not None:
            table.borders = self.borders.clone()

        if self.format is not None:
            table.format = self.format.clone()

        if self.shading is not None:
            table.shading = self.shading.clone()

        if _has_style(self.style):
            table.style = self.style
