"""
Tests for the Printing Framework
"""

import base64
import os
import tempfile
from io import BytesIO
from pathlib import Path
from unittest import TestCase

from reportlab.lib import colors
from reportlab.lib.units import mm
from reportlab.platypus import Image as RLImage, Spacer, Table as RLTable

from pdfbase.exceptions import InvalidArgumentError
from pdfbase.model import (
    BorderStyle,
    Document,
    Edge,
    Orientation,
    Paragraph,
    RowHeightRule,
    Table,
)
from pdfbase.printing import IPdfRenderer, PdfResult, ReportLabRenderer
from pdfbase.printing.reportlab_renderer import _edge_commands


PNG_1X1 = base64.b64decode(
    'iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAYAAAAfFcSJAAAADUlEQVR42mNkYPhfDwAChwGA60e6kgAAAABJRU5ErkJggg=='
)


def _simple_document(title='Test Report'):
    document = Document()
    document.info.title = title
    section = document.add_section()
    section.add_paragraph('Hello <b>world</b>')
    return document


class PdfResultTestCase(TestCase):
    """Test cases for PdfResult"""

    def test_fields(self):
        result = PdfResult(b'%PDF-1.4\n', 'Report.pdf', 'Report', report_key='simple.v1')

        self.assertEqual(result.content_type, 'application/pdf')
        self.assertEqual(len(result), 9)
        self.assertEqual(result.title, 'Report')
        self.assertEqual(result.report_key, 'simple.v1')

    def test_invalid_content_raises(self):
        for pdf_bytes, filename in ((b'', 'a.pdf'), (b'<html>', 'a.pdf'), (b'%PDF-1.4', ' ')):
            with self.subTest(pdf_bytes=pdf_bytes, filename=filename):
                with self.assertRaises(InvalidArgumentError):
                    PdfResult(pdf_bytes, filename, 'Report')

    def test_save_to_file(self):
        result = PdfResult(b'%PDF-1.4\n', 'Report.pdf', 'Report')
        with tempfile.TemporaryDirectory() as tmp:
            path = result.save(Path(tmp) / 'custom.pdf')

            self.assertEqual(path, Path(tmp) / 'custom.pdf')
            self.assertEqual(path.read_bytes(), b'%PDF-1.4\n')

    def test_save_to_directory_uses_filename(self):
        result = PdfResult(b'%PDF-1.4\n', 'Report.pdf', 'Report')
        with tempfile.TemporaryDirectory() as tmp:
            path = result.save(tmp)

            self.assertEqual(path, Path(tmp) / 'Report.pdf')
            self.assertTrue(path.is_file())


class ReportLabRendererTestCase(TestCase):
    """Test cases for ReportLabRenderer"""

    def setUp(self):
        self.renderer = ReportLabRenderer()

    def test_is_pdf_renderer(self):
        self.assertIsInstance(self.renderer, IPdfRenderer)

    def test_render_to_bytes_generates_pdf(self):
        pdf_bytes = self.renderer.render_to_bytes(_simple_document())

        self.assertIsInstance(pdf_bytes, bytes)
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))

    def test_render_document_writes_to_stream(self):
        stream = BytesIO()
        self.renderer.render_document(_simple_document(), stream)
        self.assertTrue(stream.getvalue().startswith(b'%PDF'))

    def test_document_without_sections_raises(self):
        with self.assertRaises(ValueError):
            self.renderer.render_to_bytes(Document())

    def test_render_multiple_sections_with_header_and_footer(self):
        document = _simple_document()
        first = document.sections[0]
        first.header.add_paragraph('Header')
        first.footer.add_paragraph('Page {page}')

        second = document.add_section()
        second.page_setup.orientation = Orientation.LANDSCAPE
        second.add_paragraph('Landscape content')
        second.add_page_break()
        second.add_paragraph('More content')

        pdf_bytes = self.renderer.render_to_bytes(document)
        self.assertTrue(pdf_bytes.startswith(b'%PDF'))

    def test_empty_section_renders(self):
        document = Document()
        document.add_section()
        self.assertTrue(self.renderer.render_to_bytes(document).startswith(b'%PDF'))

    def test_page_number_token_replaced(self):
        document = _simple_document()
        flowables = self.renderer.build_flowables(
            document, [Paragraph('Page {page}')], 100 * mm, page_number=3
        )
        self.assertEqual(flowables[0].getPlainText(), 'Page 3')

    def test_page_number_token_kept_in_body(self):
        document = _simple_document()
        flowables = self.renderer.build_flowables(document, [Paragraph('Page {page}')], 100 * mm)
        self.assertEqual(flowables[0].getPlainText(), 'Page {page}')

    def test_unsupported_element_raises(self):
        with self.assertRaises(TypeError):
            self.renderer.build_flowables(_simple_document(), [object()], 100 * mm)

    def test_paragraph_style_applies_overrides(self):
        document = _simple_document()
        heading = document.styles.add_style('Heading')
        heading.paragraph_format.font_name = 'Helvetica-Bold'
        heading.paragraph_format.font_size = 14

        style = self.renderer.paragraph_style(document, 'Heading')

        self.assertEqual(style.fontName, 'Helvetica-Bold')
        self.assertEqual(style.fontSize, 14)


class ImageRenderingTestCase(TestCase):
    """Test cases for image resolution"""

    def setUp(self):
        self.renderer = ReportLabRenderer()
        self.tmp = tempfile.TemporaryDirectory()
        self.document = _simple_document()
        self.document.image_path = self.tmp.name

    def tearDown(self):
        self.tmp.cleanup()

    def test_relative_image_resolved_against_image_path(self):
        with open(os.path.join(self.tmp.name, '0000000001.png'), 'wb') as f:
            f.write(PNG_1X1)
        self.document.sections[0].add_image('0000000001.png', width=10 * mm)

        flowables = self.renderer.build_flowables(
            self.document, self.document.sections[0].elements[1:], 100 * mm
        )

        self.assertIsInstance(flowables[0], RLImage)
        self.assertAlmostEqual(flowables[0].drawHeight, 10 * mm)
        self.assertTrue(self.renderer.render_to_bytes(self.document).startswith(b'%PDF'))

    def test_missing_image_becomes_spacer(self):
        self.document.sections[0].add_image('0000000002.png', width=10 * mm, height=5 * mm)

        with self.assertLogs('pdfbase.printing.reportlab_renderer', level='WARNING'):
            flowables = self.renderer.build_flowables(
                self.document, self.document.sections[0].elements[1:], 100 * mm
            )

        self.assertIsInstance(flowables[0], Spacer)

    def test_unreadable_image_becomes_spacer(self):
        with open(os.path.join(self.tmp.name, 'broken.png'), 'wb') as f:
            f.write(b'<html>not an image</html>')
        self.document.sections[0].add_image('broken.png')

        with self.assertLogs('pdfbase.printing.reportlab_renderer', level='WARNING'):
            self.assertTrue(self.renderer.render_to_bytes(self.document).startswith(b'%PDF'))


class TableRenderingTestCase(TestCase):
    """Test cases for table conversion"""

    def setUp(self):
        self.renderer = ReportLabRenderer()
        self.document = _simple_document()
        self.table = Table()
        self.table.add_column(30 * mm)
        self.table.add_column(40 * mm)

    def test_table_without_rows_is_skipped(self):
        flowables = self.renderer.build_flowables(self.document, [self.table], 100 * mm)
        self.assertEqual(flowables, [])

    def test_table_converted(self):
        row = self.table.add_row()
        row[0].add_paragraph('A')
        row.borders.bottom.color = colors.black
        row.shading.color = colors.lightgrey
        self.table.add_row().keep_with = 0
        self.table.rows[0].keep_with = 1
        self.table.set_edge(0, 0, 2, 2, Edge.BOX, BorderStyle.DASH_SMALL, 1, colors.red)

        flowables = self.renderer.build_flowables(self.document, [self.table], 100 * mm)

        self.assertIsInstance(flowables[0], RLTable)
        self.document.sections[0].elements.append(self.table)
        self.assertTrue(self.renderer.render_to_bytes(self.document).startswith(b'%PDF'))

    def test_row_heights(self):
        exact = self.table.add_row()
        exact.height = 2 * mm
        exact.height_rule = RowHeightRule.EXACTLY

        at_least = self.table.add_row()
        at_least.height = 50 * mm
        at_least.height_rule = RowHeightRule.AT_LEAST

        auto = self.table.add_row()
        auto[0].add_paragraph('Text')

        data = [[[] for _ in self.table.columns] for _ in self.table.rows]
        heights = self.renderer._row_heights(self.table, data, [30 * mm, 40 * mm], 100 * mm)

        self.assertEqual(heights, [2 * mm, 50 * mm, None])

    def test_table_default_row_height(self):
        self.table.row_height = 4 * mm
        self.table.row_height_rule = RowHeightRule.EXACTLY
        self.table.add_row()

        data = [[[], []]]
        heights = self.renderer._row_heights(self.table, data, [30 * mm, 40 * mm], 100 * mm)

        self.assertEqual(heights, [4 * mm])

    def test_box_edge_commands(self):
        self.table.add_row()
        self.table.add_row()
        spec = self.table.set_edge(0, 0, 2, 2, Edge.BOX, BorderStyle.SINGLE, 1, colors.red)

        ops = {command[0]: command[1:3] for command in _edge_commands(spec)}

        self.assertEqual(ops, {
            'LINEABOVE': ((0, 0), (1, 0)),
            'LINEBELOW': ((0, 1), (1, 1)),
            'LINEBEFORE': ((0, 0), (0, 1)),
            'LINEAFTER': ((1, 0), (1, 1)),
        })

    def test_bottom_edge_only(self):
        self.table.add_row()
        spec = self.table.set_edge(0, 0, 2, 1, Edge.BOTTOM, BorderStyle.DOT, 1)

        commands = _edge_commands(spec)

        self.assertEqual(len(commands), 1)
        self.assertEqual(commands[0][0], 'LINEBELOW')
        self.assertEqual(commands[0][6], (1, 2))

    def test_rows_kept_together_taller_than_page_still_render(self):
        for i in range(120):
            row = self.table.add_row()
            row.height = 8 * mm
            row.height_rule = RowHeightRule.AT_LEAST
            row[0].add_paragraph(f'Row {i}')
        self.table.rows[0].keep_with = len(self.table.rows) - 1
        self.document.sections[0].elements.append(self.table)

        self.assertTrue(self.renderer.render_to_bytes(self.document).startswith(b'%PDF'))

    def test_short_kept_range_uses_nosplit(self):
        for _ in range(3):
            self.table.add_row()
        self.table.rows[0].keep_with = 2

        flowables = self.renderer.build_flowables(self.document, [self.table], 100 * mm,
                                                  available_height=200 * mm)
        self.document.sections[0].elements.append(self.table)

        self.assertIsInstance(flowables[0], RLTable)
        self.assertTrue(self.renderer.render_to_bytes(self.document).startswith(b'%PDF'))
