"""
Printing Framework

Renders the document model to PDF using ReportLab.
"""

from .dto import PdfResult
from .interfaces import IPdfRenderer
from .reportlab_renderer import ReportLabRenderer

__all__ = [
    'PdfResult',
    'IPdfRenderer',
    'ReportLabRenderer',
]
