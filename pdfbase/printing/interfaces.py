"""
Interfaces for the Printing Framework

Defines the contract between the document model and rendering engines.
"""

from abc import ABC, abstractmethod
from io import BytesIO
from typing import BinaryIO

from pdfbase.model import Document


class IPdfRenderer(ABC):
    """
    Interface for PDF rendering engines.

    Implementations serialize a completed Document into PDF bytes.
    """

    @abstractmethod
    def render_document(self, document: Document, output: BinaryIO) -> None:
        """
        Render a document and write the PDF to a binary stream.

        Args:
            document: Completed document model
            output: Writable binary stream

        Raises:
            Exception: If rendering fails
        """
        pass

    def render_to_bytes(self, document: Document) -> bytes:
        """
        Render a document into an in-memory buffer.

        Args:
            document: Completed document model

        Returns:
            PDF content as bytes
        """
        buffer = BytesIO()
        try:
            self.render_document(document, buffer)
            return buffer.getvalue()
        finally:
            buffer.close()
