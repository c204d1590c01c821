"""
ReportLab Renderer Implementation

Adapter for rendering the document model to PDF using ReportLab Platypus.
"""

import logging
import os
from typing import BinaryIO, List, Optional

from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY, TA_LEFT, TA_RIGHT
from reportlab.lib.styles import ParagraphStyle
from reportlab.lib.units import mm
from reportlab.lib.utils import ImageReader
from reportlab.platypus import (
    BaseDocTemplate,
    Flowable,
    Frame,
    Image as RLImage,
    NextPageTemplate,
    PageBreak as RLPageBreak,
    PageTemplate,
    Paragraph as RLParagraph,
    Spacer,
    Table as RLTable,
    TableStyle,
)

from pdfbase.model import (
    Alignment,
    BorderStyle,
    Borders,
    Document,
    Edge,
    Image,
    PageBreak,
    Paragraph,
    ParagraphFormat,
    RowHeightRule,
    Shading,
    Table,
)
from .canvas import create_header_footer_function
from .interfaces import IPdfRenderer


logger = logging.getLogger(__name__)

CELL_PADDING_H = 1.2 * mm
CELL_PADDING_V = 0.5 * mm
PAGE_NUMBER_TOKEN = '{page}'

_ALIGNMENTS = {
    Alignment.LEFT: TA_LEFT,
    Alignment.CENTER: TA_CENTER,
    Alignment.RIGHT: TA_RIGHT,
    Alignment.JUSTIFY: TA_JUSTIFY,
}

_DASHES = {
    BorderStyle.DOT: (1, 2),
    BorderStyle.DASH_SMALL: (3, 3),
    BorderStyle.DASH_LARGE: (6, 3),
}

# Side of a bordered range -> reportlab line command
_LINE_COMMANDS = {
    'top': 'LINEABOVE',
    'bottom': 'LINEBELOW',
    'left': 'LINEBEFORE',
    'right': 'LINEAFTER',
}


def _line_command(op: str, start, stop, border) -> tuple:
    command = (op, start, stop, border.effective_width, border.effective_color)
    dash = _DASHES.get(border.style)
    if dash:
        command += (1, dash)
    return command


def _border_commands(borders: Borders, start, stop) -> list:
    return [
        _line_command(_LINE_COMMANDS[side], start, stop, border)
        for side, border in borders.items()
        if border.visible
    ]


def _shading_commands(shading: Shading, start, stop) -> list:
    if shading.color is None:
        return []
    return [('BACKGROUND', start, stop, shading.color)]


def _edge_commands(spec) -> list:
    border = spec.border
    if not border.visible:
        return []

    c0, r0, c1, r1 = spec.column, spec.row, spec.last_column, spec.last_row
    commands = []
    if Edge.TOP in spec.edge:
        commands.append(_line_command('LINEABOVE', (c0, r0), (c1, r0), border))
    if Edge.BOTTOM in spec.edge:
        commands.append(_line_command('LINEBELOW', (c0, r1), (c1, r1), border))
    if Edge.LEFT in spec.edge:
        commands.append(_line_command('LINEBEFORE', (c0, r0), (c0, r1), border))
    if Edge.RIGHT in spec.edge:
        commands.append(_line_command('LINEAFTER', (c1, r0), (c1, r1), border))
    if Edge.INTERIOR_HORIZONTAL in spec.edge and r1 > r0:
        commands.append(_line_command('LINEBELOW', (c0, r0), (c1, r1 - 1), border))
    if Edge.INTERIOR_VERTICAL in spec.edge and c1 > c0:
        commands.append(_line_command('LINEAFTER', (c0, r0), (c1 - 1, r1), border))
    return commands


class ReportLabRenderer(IPdfRenderer):
    """
    PDF renderer using ReportLab Platypus.

    Supports:
    - One page template per section (page size, orientation, margins)
    - Headers and footers drawn on every page, with {page} substitution
    - Tables with table/column/row/cell styling and range edges
    - Images resolved against Document.image_path
    """

    def __init__(self, creator: str = 'pdfbase'):
        self.creator = creator

    def render_document(self, document: Document, output: BinaryIO) -> None:
        if not document.sections:
            raise ValueError("Document has no sections")

        first_setup = document.sections[0].page_setup
        doc = BaseDocTemplate(
            output,
            pagesize=first_setup.effective_page_size,
            leftMargin=first_setup.left_margin,
            rightMargin=first_setup.right_margin,
            topMargin=first_setup.top_margin,
            bottomMargin=first_setup.bottom_margin,
            title=document.info.title,
            author=document.info.author,
            subject=document.info.subject,
            keywords=document.info.keywords,
            creator=self.creator,
        )

        templates = []
        story: List[Flowable] = []
        for index, section in enumerate(document.sections):
            setup = section.page_setup
            width, height = setup.effective_page_size
            template_id = f'section-{index}'

            frame_height = height - setup.top_margin - setup.bottom_margin
            frame = Frame(
                setup.left_margin,
                setup.bottom_margin,
                setup.content_width,
                frame_height,
                id=f'{template_id}-body',
                leftPadding=0,
                rightPadding=0,
                topPadding=0,
                bottomPadding=0,
            )

            def build(elements, available_width, page_number):
                return self.build_flowables(document, elements, available_width, page_number=page_number)

            templates.append(PageTemplate(
                id=template_id,
                frames=[frame],
                onPage=create_header_footer_function(section, build),
                pagesize=(width, height),
            ))

            if index > 0:
                story.append(NextPageTemplate(template_id))
                story.append(RLPageBreak())
            story.extend(self.build_flowables(
                document, section.elements, setup.content_width, available_height=frame_height
            ))

        doc.addPageTemplates(templates)
        if not story:
            story.append(Spacer(1, 0))

        doc.build(story)
        logger.debug(f"Rendered document '{document.info.title}' ({len(document.sections)} sections)")

    def build_flowables(
        self,
        document: Document,
        elements: list,
        available_width: float,
        *,
        page_number: Optional[int] = None,
        available_height: Optional[float] = None,
        default_style: Optional[str] = None,
        formats: tuple = (),
    ) -> List[Flowable]:
        """
        Convert model elements into reportlab flowables.

        Args:
            document: Owning document (styles, image path)
            elements: Model elements to convert
            available_width: Width available to the elements, in points
            page_number: When set, replaces {page} in paragraph text
            available_height: Page body height; rows kept together beyond it may split
            default_style: Style name used by paragraphs without one
            formats: Paragraph formats inherited from enclosing table parts

        Returns:
            List of flowables
        """
        flowables = []
        for element in elements:
            if isinstance(element, Paragraph):
                flowables.append(self._build_paragraph(document, element, page_number, default_style, formats))
            elif isinstance(element, Image):
                flowables.append(self._build_image(document, element))
            elif isinstance(element, PageBreak):
                flowables.append(RLPageBreak())
            elif isinstance(element, Table):
                table = self._build_table(document, element, available_width, page_number, available_height)
                if table is not None:
                    flowables.append(table)
            else:
                raise TypeError(f"Unsupported element type: {type(element).__name__}")
        return flowables

    def paragraph_style(self, document: Document, style_name: Optional[str],
                        *overrides: Optional[ParagraphFormat]) -> ParagraphStyle:
        """Resolve a named style plus overrides into a reportlab ParagraphStyle"""
        fmt = document.styles.resolve(style_name, *overrides)
        font_size = fmt.font_size or 10
        return ParagraphStyle(
            style_name or 'Normal',
            fontName=fmt.font_name or 'Helvetica',
            fontSize=font_size,
            leading=fmt.leading or font_size * 1.2,
            textColor=fmt.text_color,
            alignment=_ALIGNMENTS.get(fmt.alignment, TA_LEFT),
            spaceBefore=fmt.space_before or 0,
            spaceAfter=fmt.space_after or 0,
            leftIndent=fmt.left_indent or 0,
            rightIndent=fmt.right_indent or 0,
            firstLineIndent=fmt.first_line_indent or 0,
            keepWithNext=1 if fmt.keep_with_next else 0,
        )

    def _build_paragraph(self, document, paragraph, page_number, default_style, formats):
        text = paragraph.text
        if page_number is not None:
            text = text.replace(PAGE_NUMBER_TOKEN, str(page_number))
        style = self.paragraph_style(document, paragraph.style or default_style, *formats, paragraph.format)
        return RLParagraph(text, style)

    def _resolve_image_path(self, document: Document, name: str) -> str:
        if os.path.isabs(name) or not document.image_path:
            return name
        return os.path.join(document.image_path, name)

    def _build_image(self, document: Document, image: Image) -> Flowable:
        path = self._resolve_image_path(document, image.name)
        placeholder = Spacer(image.width or 0, image.height or 0)

        if not os.path.isfile(path):
            logger.warning(f"Image not found, leaving it out: {path}")
            return placeholder

        try:
            pixel_width, pixel_height = ImageReader(path).getSize()
        except Exception as e:
            logger.warning(f"Image could not be read, leaving it out: {path} ({e})")
            return placeholder

        width, height = image.width, image.height
        if width is None and height is None:
            width, height = pixel_width, pixel_height
        elif width is None:
            width = height * pixel_width / pixel_height
        elif height is None:
            height = width * pixel_height / pixel_width

        return RLImage(path, width=width, height=height)

    def _row_heights(self, table: Table, data: list, col_widths: list, available_width: float) -> list:
        heights = []
        for row, row_data in zip(table.rows, data):
            height = row.height if row.height is not None else table.row_height
            rule = row.height_rule or table.row_height_rule
            if height is None or rule is RowHeightRule.AUTO:
                heights.append(None)
            elif rule is RowHeightRule.EXACTLY:
                heights.append(height)
            else:
                content = max(
                    (self._content_height(flowables, width or available_width / len(col_widths))
                     for flowables, width in zip(row_data, col_widths)),
                    default=0,
                )
                heights.append(max(height, content))
        return heights

    def _content_height(self, flowables, width: float) -> float:
        if not flowables:
            return 0
        inner_width = max(width - 2 * CELL_PADDING_H, 1)
        total = 2 * CELL_PADDING_V
        for flowable in flowables:
            _, h = flowable.wrap(inner_width, 1e6)
            total += h + flowable.getSpaceBefore() + flowable.getSpaceAfter()
        return total

    def _estimated_row_height(self, row_data: list, col_widths: list, fallback_width: float) -> float:
        return max(
            (self._content_height(flowables, width or fallback_width) if flowables else 2 * CELL_PADDING_V
             for flowables, width in zip(row_data, col_widths)),
            default=0,
        )

    def _build_table(self, document: Document, table: Table, available_width: float,
                     page_number: Optional[int], available_height: Optional[float] = None) -> Optional[RLTable]:
        if not table.columns or not table.rows:
            logger.debug("Skipping table without columns or rows")
            return None

        col_widths = [column.width for column in table.columns]
        fallback_width = available_width / len(table.columns)

        data = []
        for row in table.rows:
            row_data = []
            for column, cell in zip(table.columns, row.cells):
                inner_width = (column.width or fallback_width) - 2 * CELL_PADDING_H
                row_data.append(self.build_flowables(
                    document,
                    cell.elements,
                    inner_width,
                    page_number=page_number,
                    default_style=cell.style or row.style or column.style or table.style,
                    formats=(table.format, column.format, row.format, cell.format),
                ) or '')
            data.append(row_data)

        commands = [
            ('LEFTPADDING', (0, 0), (-1, -1), CELL_PADDING_H),
            ('RIGHTPADDING', (0, 0), (-1, -1), CELL_PADDING_H),
            ('TOPPADDING', (0, 0), (-1, -1), CELL_PADDING_V),
            ('BOTTOMPADDING', (0, 0), (-1, -1), CELL_PADDING_V),
            ('VALIGN', (0, 0), (-1, -1), 'TOP'),
        ]

        # Later commands win: table < column < row < cell < edges
        commands += _shading_commands(table.shading, (0, 0), (-1, -1))
        commands += _border_commands(table.borders, (0, 0), (-1, -1))

        for column in table.columns:
            start, stop = (column.index, 0), (column.index, -1)
            commands += _shading_commands(column.shading, start, stop)
            commands += _border_commands(column.borders, start, stop)

        row_heights = self._row_heights(table, data, col_widths, available_width)

        last_row = len(table.rows) - 1
        for row in table.rows:
            start, stop = (0, row.index), (-1, row.index)
            if row.vertical_alignment is not None:
                commands.append(('VALIGN', start, stop, row.vertical_alignment.value))
            commands += _shading_commands(row.shading, start, stop)
            commands += _border_commands(row.borders, start, stop)
            if row.keep_with > 0:
                end = min(row.index + row.keep_with, last_row)
                kept = sum(
                    fixed if fixed is not None else self._estimated_row_height(row_data, col_widths, fallback_width)
                    for fixed, row_data in zip(row_heights[row.index:end + 1], data[row.index:end + 1])
                )
                if available_height is not None and kept > available_height:
                    logger.debug(f"Rows {row.index}-{end} do not fit on one page, allowing split")
                else:
                    commands.append(('NOSPLIT', start, (-1, end)))

            for column_index, cell in enumerate(row.cells):
                position = (column_index, row.index)
                if cell.vertical_alignment is not None:
                    commands.append(('VALIGN', position, position, cell.vertical_alignment.value))
                commands += _shading_commands(cell.shading, position, position)
                commands += _border_commands(cell.borders, position, position)

        for spec in table.edges:
            commands += _edge_commands(spec)

        return RLTable(
            data,
            colWidths=col_widths,
            rowHeights=row_heights,
            style=TableStyle(commands),
            hAlign='LEFT',
        )
