"""
Tests for FormattedTable
"""

from unittest import TestCase

from reportlab.lib import colors
from reportlab.lib.units import mm

from pdfbase.exceptions import InvalidArgumentError, InvalidStateError
from pdfbase.model import BorderStyle, Edge, RowHeightRule, Shading, Table
from pdfbase.reporting import ColumnFormat, FormattedTable, RowFormat, TableFormat


class FormattedTableTestCase(TestCase):
    """Test cases for FormattedTable"""

    def setUp(self):
        self.table = Table()
        self.formatted = FormattedTable(self.table)

    def test_table_is_required(self):
        with self.assertRaises(InvalidArgumentError):
            FormattedTable(None)

    def test_table_property(self):
        self.assertIs(self.formatted.table, self.table)
        self.assertFalse(self.formatted.is_initialized)

    def test_empty_column_formats_raise(self):
        for column_formats in (None, [], iter([])):
            with self.subTest(column_formats=column_formats):
                with self.assertRaises(InvalidArgumentError):
                    self.formatted.initialize(column_formats)
        self.assertFalse(self.formatted.is_initialized)
        self.assertEqual(self.table.columns, [])

    def test_columns_added_in_order(self):
        self.formatted.initialize([
            ColumnFormat(width=10 * mm),
            ColumnFormat(width=20 * mm, style='Right'),
            ColumnFormat(width=30 * mm),
        ])

        self.assertEqual([c.width for c in self.table.columns], [10 * mm, 20 * mm, 30 * mm])
        self.assertEqual([c.index for c in self.table.columns], [0, 1, 2])
        self.assertEqual(self.table.columns[1].style, 'Right')

    def test_generator_of_column_formats_accepted(self):
        self.formatted.initialize(ColumnFormat(width=w) for w in (10, 20))
        self.assertEqual(len(self.table.columns), 2)
        self.assertEqual(len(self.formatted.column_formats), 2)

    def test_table_format_applied(self):
        self.formatted.initialize(
            [ColumnFormat(width=10 * mm)],
            table_format=TableFormat(shading=Shading(colors.lightgrey), style='TableCell'),
        )
        self.assertEqual(self.table.style, 'TableCell')
        self.assertIs(self.table.shading.color, colors.lightgrey)

    def test_initialize_twice_raises(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm)])

        with self.assertRaises(InvalidStateError):
            self.formatted.initialize([ColumnFormat(width=10 * mm)])

        self.assertEqual(len(self.table.columns), 1)

    def test_add_row_before_initialize_raises(self):
        with self.assertRaises(InvalidStateError):
            self.formatted.add_row()
        self.assertEqual(self.table.rows, [])

    def test_row_format_applied_to_every_row(self):
        row_format = RowFormat(height=6 * mm, height_rule=RowHeightRule.AT_LEAST)
        self.formatted.initialize([ColumnFormat(width=10 * mm), ColumnFormat(width=10 * mm)],
                                  row_format=row_format)

        rows = [self.formatted.add_row() for _ in range(3)]

        self.assertIs(self.formatted.row_format, row_format)
        for row in rows:
            with self.subTest(row=row.index):
                self.assertEqual(row.height, 6 * mm)
                self.assertEqual(row.height_rule, RowHeightRule.AT_LEAST)
                self.assertEqual(len(row.cells), 2)

    def test_add_row_without_row_format(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm)])
        row = self.formatted.add_row()
        self.assertIsNone(row.height)
        self.assertIs(self.table.rows[0], row)

    def test_outer_border_spans_current_extent(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm), ColumnFormat(width=10 * mm)])
        self.formatted.add_row()
        self.formatted.add_row()
        self.formatted.add_row()

        self.formatted.apply_outer_border_only(Edge.BOX, BorderStyle.SINGLE, 0.75, colors.blue)

        spec = self.table.edges[0]
        self.assertEqual((spec.column, spec.row, spec.columns, spec.rows), (0, 0, 2, 3))
        self.assertEqual(spec.edge, Edge.BOX)
        self.assertEqual(spec.border.width, 0.75)

    def test_outer_border_without_rows_is_noop(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm)])
        self.formatted.apply_outer_border_only(Edge.BOX, BorderStyle.SINGLE, 1, colors.black)
        self.assertEqual(self.table.edges, [])

    def test_keep_rows_together(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm)])
        for _ in range(4):
            self.formatted.add_row()

        self.formatted.keep_rows_together()

        self.assertEqual(self.table.rows[0].keep_with, 3)

    def test_keep_rows_together_on_empty_table(self):
        self.formatted.initialize([ColumnFormat(width=10 * mm)])
        self.formatted.keep_rows_together()
        self.assertEqual(self.table.rows, [])
