"""
Reports package

Contains document templates for PDF generation.
"""

from pdfbase.reporting.registry import templates as _registry
from .templates.invoice_v1 import InvoiceReportV1


def register_all_templates():
    """Register all available document templates"""
    if 'invoice.v1' not in _registry:
        _registry.register('invoice.v1', InvoiceReportV1)


# Auto-register templates when module is imported
register_all_templates()
