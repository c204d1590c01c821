"""
Document object model: documents, sections, headers/footers, paragraphs,
images and tables.

The model is a plain mutable tree. It knows nothing about rendering; the
printing package turns it into PDF bytes.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from reportlab.lib.colors import Color
from reportlab.lib.pagesizes import A4, landscape
from reportlab.lib.units import cm

from .enums import BorderStyle, Edge, Orientation, RowHeightRule, VerticalAlignment
from .formatting import Border, Borders, ParagraphFormat, Shading
from .styles import StyleSheet


@dataclass
class Paragraph:
    """A block of text. Text may contain reportlab inline markup (<b>, <i>, <font>)."""

    text: str = ''
    style: Optional[str] = None
    format: Optional[ParagraphFormat] = None


@dataclass
class Image:
    """
    An image referenced by name.

    Relative names are resolved against Document.image_path at render time.
    """

    name: str
    width: Optional[float] = None
    height: Optional[float] = None


@dataclass
class PageBreak:
    """Forces the following content onto a new page"""
    pass


class _Container:
    """Mixin for model objects that hold a list of block elements"""

    elements: list

    def add_paragraph(self, text: str = '', style: Optional[str] = None) -> Paragraph:
        paragraph = Paragraph(text=text, style=style)
        self.elements.append(paragraph)
        return paragraph

    def add_image(self, name: str, width: Optional[float] = None,
                  height: Optional[float] = None) -> Image:
        image = Image(name=name, width=width, height=height)
        self.elements.append(image)
        return image

    def add_table(self) -> 'Table':
        table = Table()
        self.elements.append(table)
        return table


@dataclass
class Cell(_Container):
    """A table cell; holds paragraphs, images and nested tables"""

    elements: list = field(default_factory=list)
    borders: Borders = field(default_factory=Borders)
    shading: Shading = field(default_factory=Shading)
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    style: Optional[str] = None
    vertical_alignment: Optional[VerticalAlignment] = None


@dataclass
class Column:
    """A table column"""

    index: int
    width: Optional[float] = None
    borders: Borders = field(default_factory=Borders)
    shading: Shading = field(default_factory=Shading)
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    style: Optional[str] = None


@dataclass
class Row:
    """
    A table row.

    keep_with is the number of following rows that must stay on the same
    page as this one.
    """

    index: int
    cells: List[Cell] = field(default_factory=list)
    height: Optional[float] = None
    height_rule: Optional[RowHeightRule] = None
    borders: Borders = field(default_factory=Borders)
    shading: Shading = field(default_factory=Shading)
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    style: Optional[str] = None
    vertical_alignment: Optional[VerticalAlignment] = None
    keep_with: int = 0

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return len(self.cells)


@dataclass
class EdgeSpec:
    """A border applied to the edges of a rectangular cell range"""

    column: int
    row: int
    columns: int
    rows: int
    edge: Edge
    border: Border

    @property
    def last_column(self) -> int:
        return self.column + self.columns - 1

    @property
    def last_row(self) -> int:
        return self.row + self.rows - 1


@dataclass
class Table:
    """
    A table primitive.

    Columns must be added before content is meaningful; every row gets one
    cell per column. row_height and row_height_rule are defaults for rows
    that do not set their own.
    """

    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    borders: Borders = field(default_factory=Borders)
    shading: Shading = field(default_factory=Shading)
    format: ParagraphFormat = field(default_factory=ParagraphFormat)
    style: Optional[str] = None
    row_height: Optional[float] = None
    row_height_rule: Optional[RowHeightRule] = None
    edges: List[EdgeSpec] = field(default_factory=list)

    def add_column(self, width: Optional[float] = None) -> Column:
        column = Column(index=len(self.columns), width=width)
        self.columns.append(column)
        for row in self.rows:
            row.cells.append(Cell())
        return column

    def add_row(self) -> Row:
        row = Row(index=len(self.rows), cells=[Cell() for _ in self.columns])
        self.rows.append(row)
        return row

    def set_edge(self, column: int, row: int, columns: int, rows: int, edge: Edge,
                 style: BorderStyle, width: float, color: Optional[Color] = None) -> EdgeSpec:
        """
        Set a border on the edges of a cell range.

        Args:
            column: Index of the first column
            row: Index of the first row
            columns: Number of columns in the range
            rows: Number of rows in the range
            edge: Which edges of the range to draw
            style: Border line style
            width: Border width in points
            color: Border color (black if None)

        Raises:
            ValueError: If the range is empty or outside the table
        """
        if columns <= 0 or rows <= 0:
            raise ValueError("Edge range must span at least one column and one row")
        if column < 0 or row < 0:
            raise ValueError("Edge range must start inside the table")
        if column + columns > len(self.columns) or row + rows > len(self.rows):
            raise ValueError(
                f"Edge range ({column}, {row}) x ({columns}, {rows}) exceeds "
                f"table extent ({len(self.columns)}, {len(self.rows)})"
            )

        spec = EdgeSpec(
            column=column,
            row=row,
            columns=columns,
            rows=rows,
            edge=edge,
            border=Border(style=style, width=width, color=color),
        )
        self.edges.append(spec)
        return spec


@dataclass
class HeaderFooter(_Container):
    """Content repeated at the top or bottom of every page of a section"""

    elements: list = field(default_factory=list)

    def is_empty(self) -> bool:
        return not self.elements


@dataclass
class PageSetup:
    """Page geometry for a section"""

    page_size: Tuple[float, float] = A4
    orientation: Orientation = Orientation.PORTRAIT
    top_margin: float = 2.5 * cm
    bottom_margin: float = 2.5 * cm
    left_margin: float = 2 * cm
    right_margin: float = 2 * cm
    header_distance: float = 1 * cm
    footer_distance: float = 1 * cm

    @property
    def effective_page_size(self) -> Tuple[float, float]:
        if self.orientation is Orientation.LANDSCAPE:
            return landscape(self.page_size)
        return tuple(self.page_size)

    @property
    def content_width(self) -> float:
        return self.effective_page_size[0] - self.left_margin - self.right_margin


@dataclass
class Section(_Container):
    """A run of pages sharing page setup, header and footer"""

    page_setup: PageSetup = field(default_factory=PageSetup)
    header: HeaderFooter = field(default_factory=HeaderFooter)
    footer: HeaderFooter = field(default_factory=HeaderFooter)
    elements: list = field(default_factory=list)

    def add_page_break(self) -> PageBreak:
        page_break = PageBreak()
        self.elements.append(page_break)
        return page_break


@dataclass
class DocumentInfo:
    """Metadata written into the PDF"""

    title: str = ''
    author: str = ''
    subject: str = ''
    keywords: str = ''


class Document:
    """
    Root of the document model.

    image_path is the directory relative image names are resolved against.
    """

    def __init__(self):
        self.info = DocumentInfo()
        self.styles = StyleSheet()
        self.sections: List[Section] = []
        self.image_path: Optional[str] = None

    @property
    def last_section(self) -> Optional[Section]:
        return self.sections[-1] if self.sections else None

    def add_section(self) -> Section:
        """
        Append a new section.

        The new section inherits the page setup of the previous one.
        """
        section = Section()
        if self.sections:
            previous = self.sections[-1].page_setup
            section.page_setup = PageSetup(**vars(previous))
        self.sections.append(section)
        return section
