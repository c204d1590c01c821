"""
Rendered document result
"""

from dataclasses import dataclass
from pathlib import Path
from typing import ClassVar, Optional, Union

from pdfbase.exceptions import InvalidArgumentError


PDF_HEADER = b'%PDF-'


@dataclass(frozen=True)
class PdfResult:
    """
    A rendered document and the names it was generated under.

    filename is derived from the document title ("<title>.pdf") and is only
    a suggestion; save() uses it when given a directory.
    """

    pdf_bytes: bytes
    filename: str
    title: str
    report_key: Optional[str] = None

    content_type: ClassVar[str] = 'application/pdf'

    def __post_init__(self):
        if not self.pdf_bytes.startswith(PDF_HEADER):
            raise InvalidArgumentError("pdf_bytes does not start with a PDF header")
        if not self.filename or not self.filename.strip():
            raise InvalidArgumentError("filename is required")

    def __len__(self) -> int:
        return len(self.pdf_bytes)

    def save(self, path: Union[str, Path]) -> Path:
        """
        Write the PDF to a file, or into a directory under self.filename.

        Returns:
            The path written
        """
        target = Path(path)
        if target.is_dir():
            target = target / self.filename
        target.write_bytes(self.pdf_bytes)
        return target
