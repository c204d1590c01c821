"""
PDF Styling

Provides standard named styles for PDF reports.
"""

from reportlab.lib import colors
from reportlab.lib.units import mm

from pdfbase.model import Alignment, Document


def define_default_styles(document: Document) -> None:
    """
    Add the standard report styles to a document.

    Styles: ReportTitle, ReportHeading, ReportSubheading, ReportBody,
    ReportFooter, TableHeader, TableCell.

    Args:
        document: Document whose style sheet is extended
    """
    styles = document.styles

    normal = styles.normal.paragraph_format
    normal.font_name = 'Helvetica'
    normal.font_size = 10
    normal.leading = 12

    title = styles.add_style('ReportTitle').paragraph_format
    title.font_name = 'Helvetica-Bold'
    title.font_size = 18
    title.leading = 22
    title.text_color = colors.HexColor('#1a1a1a')
    title.space_after = 20

    heading = styles.add_style('ReportHeading').paragraph_format
    heading.font_name = 'Helvetica-Bold'
    heading.font_size = 14
    heading.leading = 17
    heading.text_color = colors.HexColor('#333333')
    heading.space_before = 12
    heading.space_after = 12
    heading.keep_with_next = True

    subheading = styles.add_style('ReportSubheading', 'ReportHeading').paragraph_format
    subheading.font_size = 12
    subheading.leading = 15
    subheading.text_color = colors.HexColor('#555555')
    subheading.space_before = 8
    subheading.space_after = 8

    body = styles.add_style('ReportBody').paragraph_format
    body.space_after = 6

    footer = styles.add_style('ReportFooter').paragraph_format
    footer.font_size = 8
    footer.leading = 10
    footer.text_color = colors.HexColor('#666666')
    footer.alignment = Alignment.CENTER

    table_cell = styles.add_style('TableCell').paragraph_format
    table_cell.font_size = 9
    table_cell.leading = 11
    table_cell.space_before = 0.5 * mm
    table_cell.space_after = 0.5 * mm

    table_header = styles.add_style('TableHeader', 'TableCell').paragraph_format
    table_header.font_name = 'Helvetica-Bold'
    table_header.text_color = colors.white
