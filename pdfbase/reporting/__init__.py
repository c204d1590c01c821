"""
Core Report Framework

Provides the generation lifecycle, temporary image staging, style
descriptors and formatted tables for document templates.
"""

from .formats import ColumnFormat, RowFormat, TableFormat
from .generator import DocumentGenerator, GenerationState
from .images import TemporaryImageStore
from .interfaces import DocumentTemplate
from .service import ReportService
from .tables import FormattedTable

__all__ = [
    'ColumnFormat',
    'RowFormat',
    'TableFormat',
    'DocumentGenerator',
    'GenerationState',
    'TemporaryImageStore',
    'DocumentTemplate',
    'ReportService',
    'FormattedTable',
]
