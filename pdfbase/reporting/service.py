"""
Report Service

Renders registered document templates to PDF.
"""

import logging
from pathlib import Path
from typing import Optional, Union

from pdfbase.printing import IPdfRenderer, PdfResult
from .generator import DocumentGenerator
from .registry import TemplateRegistry, templates


logger = logging.getLogger(__name__)


class ReportService:
    """
    Service for rendering registered reports.

    Usage:
        import reports  # registers the bundled templates

        service = ReportService()
        result = service.render('invoice.v1', 'Invoice 2024-001', context={...})
    """

    def __init__(self, renderer: Optional[IPdfRenderer] = None, fetch_timeout: Optional[float] = None,
                 registry: Optional[TemplateRegistry] = None):
        """
        Initialize the service.

        Args:
            renderer: PDF renderer passed to every generator (None for the default)
            fetch_timeout: Image download timeout in seconds (None for the configured value)
            registry: Template registry (None for the global one)
        """
        self.renderer = renderer
        self.fetch_timeout = fetch_timeout
        self.registry = registry if registry is not None else templates

    def create_generator(self, report_key: str, title: str, context: Optional[dict] = None) -> DocumentGenerator:
        """
        Create a generator for a registered report.

        Raises:
            KeyError: If report_key is not registered
        """
        return self.registry.create_generator(
            report_key,
            title,
            context=context,
            renderer=self.renderer,
            fetch_timeout=self.fetch_timeout,
        )

    def render(self, report_key: str, title: str, context: Optional[dict] = None) -> PdfResult:
        """
        Render a report to PDF bytes.

        Args:
            report_key: Report template identifier (e.g., 'invoice.v1')
            title: Document title
            context: Data for the template

        Returns:
            PdfResult with the PDF bytes and the file name

        Raises:
            KeyError: If report_key is not registered
        """
        generator = self.create_generator(report_key, title, context)
        try:
            pdf_bytes = generator.export_bytes()
        except Exception as e:
            logger.error(f"Failed to render report {report_key}: {e}", exc_info=True)
            raise

        logger.info(f"Successfully generated PDF: {generator.filename} ({len(pdf_bytes)} bytes)")
        return PdfResult(pdf_bytes, generator.filename, generator.title, report_key=report_key)

    def save(self, report_key: str, title: str, path: Union[str, Path],
             context: Optional[dict] = None) -> Path:
        """
        Render a report and write it to a file.

        Returns:
            The path written
        """
        generator = self.create_generator(report_key, title, context)
        try:
            generator.save_to_path(path)
        except Exception as e:
            logger.error(f"Failed to save report {report_key} to {path}: {e}", exc_info=True)
            raise

        return Path(path)
