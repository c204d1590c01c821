"""
Invoice Report Template (v1)

Template for generating invoice PDF reports.
"""

from decimal import Decimal
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.units import mm

from pdfbase.model import (
    Alignment,
    Border,
    Borders,
    BorderStyle,
    Edge,
    ParagraphFormat,
    RowHeightRule,
    Shading,
    VerticalAlignment,
)
from pdfbase.reporting import (
    ColumnFormat,
    DocumentTemplate,
    FormattedTable,
    RowFormat,
    TableFormat,
)
from pdfbase.reporting.styles import define_default_styles


HEADER_COLOR = colors.HexColor('#4a5568')
RULE_COLOR = colors.HexColor('#cccccc')
LOGO_HEIGHT = 12 * mm


def _money(value) -> Decimal:
    return Decimal(str(value or 0)).quantize(Decimal('0.01'))


class InvoiceItemsTable(FormattedTable):
    """Line items table: description, quantity, unit price, amount"""

    COLUMN_WIDTHS = (85 * mm, 20 * mm, 30 * mm, 35 * mm)

    def __init__(self, table):
        super().__init__(table)

        right = ParagraphFormat(alignment=Alignment.RIGHT)
        self.initialize(
            [
                ColumnFormat(width=self.COLUMN_WIDTHS[0]),
                ColumnFormat(width=self.COLUMN_WIDTHS[1], format=right),
                ColumnFormat(width=self.COLUMN_WIDTHS[2], format=right),
                ColumnFormat(width=self.COLUMN_WIDTHS[3], format=right),
            ],
            table_format=TableFormat(style='TableCell'),
            row_format=RowFormat(
                height=7 * mm,
                height_rule=RowHeightRule.AT_LEAST,
                vertical_alignment=VerticalAlignment.CENTER,
                borders=Borders(bottom=Border(width=0.25, color=RULE_COLOR)),
            ),
        )

    def add_header_row(self, *labels: str):
        row = self.add_row()
        row.style = 'TableHeader'
        row.shading = Shading(HEADER_COLOR)
        for cell, label in zip(row.cells, labels):
            cell.add_paragraph(escape(label))
        return row

    def add_item_row(self, description: str, quantity, unit_price: Decimal, amount: Decimal, currency: str):
        row = self.add_row()
        row[0].add_paragraph(escape(description))
        row[1].add_paragraph(escape(str(quantity)))
        row[2].add_paragraph(f"{unit_price:,.2f} {escape(currency)}")
        row[3].add_paragraph(f"{amount:,.2f} {escape(currency)}")
        return row

    def add_total_row(self, total: Decimal, currency: str):
        row = self.add_row()
        row.format = ParagraphFormat(font_name='Helvetica-Bold')
        row[2].add_paragraph('Total')
        row[3].add_paragraph(f"{total:,.2f} {escape(currency)}")
        return row


class InvoiceReportV1(DocumentTemplate):
    """
    Template for invoices version 1

    Expected context structure:
    {
        'number': str,
        'date': str,
        'customer': {'name': str, 'address': str (may contain newlines)},
        'logo_url': str (optional, http(s) URL or local path),
        'currency': str (default 'EUR'),
        'items': list of dict with 'description', 'quantity', 'unit_price',
        'notes': str (optional),
    }
    """

    def define_styles(self, generator):
        define_default_styles(generator.document)

        setup = generator.section.page_setup
        setup.top_margin = 40 * mm
        setup.bottom_margin = 25 * mm
        setup.header_distance = 10 * mm
        setup.footer_distance = 10 * mm

    def build_header(self, generator):
        context = generator.context
        section = generator.section
        header = section.header

        logo_url = context.get('logo_url')
        if logo_url:
            header.add_image(generator.stage_image(logo_url), height=LOGO_HEIGHT)

        header.add_paragraph(escape(generator.title), 'ReportHeading')
        generator.add_separator(header, section.page_setup.content_width, 1 * mm,
                                with_line=True, color=RULE_COLOR)

    def build_footer(self, generator):
        footer = generator.section.footer
        generator.add_separator(footer, generator.section.page_setup.content_width, 1 * mm,
                                with_line=True, color=RULE_COLOR)
        footer.add_paragraph('Page {page}', 'ReportFooter')

    def build_content(self, generator):
        context = generator.context
        section = generator.section
        currency = context.get('currency', 'EUR')

        section.add_paragraph(f"Invoice {escape(str(context.get('number', 'N/A')))}", 'ReportTitle')
        section.add_paragraph(f"<b>Date:</b> {escape(str(context.get('date', 'N/A')))}", 'ReportBody')

        customer = context.get('customer', {})
        section.add_paragraph('Bill To', 'ReportSubheading')
        section.add_paragraph(escape(customer.get('name', 'N/A')), 'ReportBody')
        for line in customer.get('address', '').split('\n'):
            if line.strip():
                section.add_paragraph(escape(line.strip()), 'ReportBody')

        generator.add_separator(section, section.page_setup.content_width, 3 * mm)

        items = InvoiceItemsTable(section.add_table())
        items.add_header_row('Description', 'Qty', 'Unit Price', 'Amount')

        total = Decimal('0.00')
        for item in context.get('items', []):
            quantity = item.get('quantity', 1)
            unit_price = _money(item.get('unit_price'))
            amount = _money(unit_price * Decimal(str(quantity)))
            total += amount
            items.add_item_row(item.get('description', 'N/A'), quantity, unit_price, amount, currency)

        items.add_total_row(total, currency)
        items.keep_rows_together()
        items.apply_outer_border_only(Edge.BOX, BorderStyle.SINGLE, 0.5, HEADER_COLOR)

        notes = context.get('notes', '')
        if notes:
            section.add_paragraph('Notes', 'ReportSubheading')
            for para in notes.split('\n'):
                if para.strip():
                    section.add_paragraph(escape(para), 'ReportBody')
