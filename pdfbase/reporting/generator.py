"""
Document Generator

Runs the generation pass of a document: build the model through the template
hooks, render it, and always remove staged images afterwards.
"""

import logging
import uuid
from enum import Enum
from io import BytesIO
from pathlib import Path
from typing import BinaryIO, Optional, Union

from reportlab.lib import colors
from reportlab.lib.colors import Color

from pdfbase import config
from pdfbase.exceptions import InvalidArgumentError, InvalidStateError
from pdfbase.model import Document, RowHeightRule, Section, Table
from pdfbase.printing import IPdfRenderer, ReportLabRenderer
from .formats import ColumnFormat, RowFormat
from .images import TemporaryImageStore
from .interfaces import DocumentTemplate
from .tables import FormattedTable


logger = logging.getLogger(__name__)


class GenerationState(Enum):
    UNINITIALIZED = 'uninitialized'
    BUILDING = 'building'
    RENDERING = 'rendering'
    CLEANED = 'cleaned'


class DocumentGenerator:
    """
    Orchestrates the generation of one document type.

    A generation pass creates a fresh Document, calls the template hooks in
    order (define_styles, build_header, build_footer, build_content), renders
    the result and removes the staged images, whether or not rendering
    succeeded. A generator can run any number of passes, one at a time; use
    separate generators for parallel work.

    Usage:
        generator = DocumentGenerator('Invoice', InvoiceReportV1(), context={...})
        pdf_bytes = generator.export_bytes()
    """

    def __init__(
        self,
        title: str,
        template: DocumentTemplate,
        *,
        context: Optional[dict] = None,
        renderer: Optional[IPdfRenderer] = None,
        fetch_timeout: Optional[float] = None,
    ):
        """
        Initialize the generator.

        Args:
            title: Document title (also used for the file name)
            template: Template supplying the content hooks
            context: Data available to the hooks as generator.context
            renderer: PDF renderer. If None, uses ReportLabRenderer.
            fetch_timeout: Image download timeout in seconds. If None, uses configuration.

        Raises:
            InvalidArgumentError: If title is empty or template is None
        """
        if title is None or not str(title).strip():
            raise InvalidArgumentError("title is required")
        if template is None:
            raise InvalidArgumentError("template is required")

        self.id = str(uuid.uuid4())
        self.title = title
        self.template = template
        self.context = dict(context or {})
        self.renderer = renderer or ReportLabRenderer()
        self.state = GenerationState.UNINITIALIZED

        self._document: Optional[Document] = None
        self._section: Optional[Section] = None
        self._images = TemporaryImageStore(
            self.id,
            template.get_image_temp_dir,
            fetch_timeout if fetch_timeout is not None else config.get_image_fetch_timeout(),
        )

    @property
    def filename(self) -> str:
        return f"{self.title}.pdf"

    @property
    def document(self) -> Optional[Document]:
        return self._document

    @property
    def section(self) -> Optional[Section]:
        """The section content is currently added to"""
        return self._section

    @property
    def image_store(self) -> TemporaryImageStore:
        return self._images

    # Public entry points

    def save_to_path(self, path: Union[str, Path]) -> None:
        """
        Generate the document and write it to a file.

        Raises:
            OSError: If the file cannot be written (after cleanup has run)
        """
        try:
            pdf_bytes = self.render_to_bytes()
            Path(path).write_bytes(pdf_bytes)
        finally:
            self._cleanup()

    def save_to_stream(self, stream: BinaryIO) -> None:
        """Generate the document and write it to a binary stream"""
        try:
            self.render_to_stream(stream)
        finally:
            self._cleanup()

    def export_bytes(self) -> bytes:
        """Generate the document and return the PDF bytes"""
        try:
            return self.render_to_bytes()
        finally:
            self._cleanup()

    # Generation pass

    def generate(self) -> Document:
        """
        Build a fresh document model through the template hooks.

        Returns:
            The new Document
        """
        logger.debug(f"Generating document '{self.title}' ({self.id})")

        # Images staged by a pass that was never cleaned up
        self._images.cleanup(self._document)

        document = Document()
        document.info.title = self.title

        self._document = document
        self._section = document.add_section()
        self.state = GenerationState.BUILDING

        self.template.define_styles(self)
        self.template.build_header(self)
        self.template.build_footer(self)
        self.template.build_content(self)

        return document

    def render(self, stream: BinaryIO) -> None:
        """
        Render the current document model to a stream.

        Raises:
            InvalidStateError: If no document has been generated
        """
        if self._document is None:
            raise InvalidStateError("Document not initialized")

        self.state = GenerationState.RENDERING
        self.renderer.render_document(self._document, stream)

    def render_to_stream(self, stream: BinaryIO) -> None:
        """Generate and render to a stream. Does not remove staged images."""
        self.generate()
        self.render(stream)
        logger.info(f"Generated PDF: {self.filename}")

    def render_to_bytes(self) -> bytes:
        """Generate and render into memory. Does not remove staged images."""
        buffer = BytesIO()
        try:
            self.render_to_stream(buffer)
            pdf_bytes = buffer.getvalue()
        finally:
            buffer.close()

        logger.debug(f"{self.filename}: {len(pdf_bytes)} bytes")
        return pdf_bytes

    def _cleanup(self) -> None:
        self._images.cleanup(self._document)
        self.state = GenerationState.CLEANED

    # Helpers for template hooks

    def add_section(self) -> Section:
        """
        Start a new section; subsequent content goes to it.

        Raises:
            InvalidStateError: If called outside the template hooks
        """
        if self.state is not GenerationState.BUILDING:
            raise InvalidStateError("Sections can only be added while the document is being built")

        self._section = self._document.add_section()
        return self._section

    def stage_image(self, uri: Union[str, Path], extension: Optional[str] = None) -> str:
        """
        Download an image into the temporary directory.

        Args:
            uri: http(s) URL, file:// URI or local path
            extension: Extension to use instead of the one in the URI

        Returns:
            Local image name to pass to add_image()

        Raises:
            InvalidStateError: If called outside the template hooks
            ConfigurationError: If no temporary image directory is configured
        """
        if self._document is None:
            raise InvalidStateError("Document not initialized")
        if self.state is not GenerationState.BUILDING:
            # Nothing would remove the directory once the pass is over
            raise InvalidStateError("Images can only be staged while the document is being built")

        return self._images.stage_image(self._document, uri, extension)

    def add_separator(self, container, width: float, height: float,
                      with_line: bool = False, color: Optional[Color] = None) -> Table:
        """
        Add a spacer table to a section or a header/footer.

        Args:
            container: Section or HeaderFooter receiving the separator
            width: Separator width in points
            height: Height of each of the two rows in points
            with_line: Draw a rule under the first row
            color: Rule color (black if None)

        Raises:
            InvalidArgumentError: If container is None
        """
        if container is None:
            raise InvalidArgumentError("container is required")

        return self.build_separator_table(container.add_table(), width, height,
                                          with_line=with_line, color=color)

    @staticmethod
    def build_separator_table(table: Table, width: float, height: float,
                              with_line: bool = False, color: Optional[Color] = None) -> Table:
        """
        Turn an empty table into a one-column, two-row separator.

        Raises:
            InvalidArgumentError: If table is None
        """
        if table is None:
            raise InvalidArgumentError("table is required")

        separator = FormattedTable(table)
        separator.initialize(
            [ColumnFormat(width=width)],
            row_format=RowFormat(height=height, height_rule=RowHeightRule.EXACTLY),
        )

        ruled = separator.add_row()
        if with_line:
            ruled.borders.bottom.color = color if color is not None else colors.black

        separator.add_row()
        return table
