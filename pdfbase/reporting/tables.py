"""
Formatted Table

A table whose columns and styling are set up once from descriptors, and whose
rows all share the same row descriptor.
"""

import logging
from typing import Iterable, List, Optional

from reportlab.lib.colors import Color

from pdfbase.exceptions import InvalidArgumentError, InvalidStateError
from pdfbase.model import BorderStyle, Edge, Row, Table
from .formats import ColumnFormat, RowFormat, TableFormat


logger = logging.getLogger(__name__)


class FormattedTable:
    """
    Wraps a model Table for its whole lifetime.

    Usage:
        formatted = FormattedTable(section.add_table())
        formatted.initialize(
            [ColumnFormat(width=40 * mm), ColumnFormat(width=120 * mm)],
            table_format=TableFormat(style='TableCell'),
            row_format=RowFormat(height=6 * mm, height_rule=RowHeightRule.AT_LEAST),
        )
        row = formatted.add_row()
        row[0].add_paragraph('Name')

    Subclasses typically call initialize() from their own constructor.
    """

    def __init__(self, table: Table):
        if table is None:
            raise InvalidArgumentError("table is required")

        self._table = table
        self._column_formats: Optional[List[ColumnFormat]] = None
        self._row_format: Optional[RowFormat] = None

    @property
    def table(self) -> Table:
        return self._table

    @property
    def column_formats(self) -> Optional[List[ColumnFormat]]:
        return self._column_formats

    @property
    def row_format(self) -> Optional[RowFormat]:
        return self._row_format

    @property
    def is_initialized(self) -> bool:
        return self._column_formats is not None

    def initialize(
        self,
        column_formats: Iterable[ColumnFormat],
        table_format: Optional[TableFormat] = None,
        row_format: Optional[RowFormat] = None,
    ) -> None:
        """
        Set up columns and table styling.

        Args:
            column_formats: One descriptor per column, left to right
            table_format: Optional table descriptor, applied before the columns
            row_format: Optional descriptor applied to every row added later

        Raises:
            InvalidArgumentError: If column_formats is None or empty
            InvalidStateError: If the table was already initialized
        """
        if self.is_initialized:
            raise InvalidStateError("Table is already initialized")

        column_formats = list(column_formats) if column_formats is not None else []
        if not column_formats:
            raise InvalidArgumentError("At least one column format is required")

        if table_format is not None:
            table_format.apply(self._table)

        for column_format in column_formats:
            column = self._table.add_column(column_format.width)
            column_format.apply(column)

        self._column_formats = column_formats
        self._row_format = row_format

    def add_row(self) -> Row:
        """
        Append a row styled with the shared row descriptor.

        Raises:
            InvalidStateError: If initialize() has not been called
        """
        if not self.is_initialized:
            raise InvalidStateError("Table is not initialized")

        row = self._table.add_row()
        if self._row_format is not None:
            self._row_format.apply(row)
        return row

    def apply_outer_border_only(self, edge: Edge, style: BorderStyle, width: float,
                                color: Optional[Color] = None) -> None:
        """
        Draw a border on the outer edge of the table's current extent.

        Rows added afterwards are not covered. Does nothing on a table
        without rows.
        """
        columns, rows = len(self._table.columns), len(self._table.rows)
        if columns == 0 or rows == 0:
            logger.debug("Outer border skipped: table has no cells")
            return

        self._table.set_edge(0, 0, columns, rows, edge, style, width, color)

    def keep_rows_together(self) -> None:
        """Keep all current rows on the same page"""
        rows = self._table.rows
        if rows:
            rows[0].keep_with = len(rows) - 1
