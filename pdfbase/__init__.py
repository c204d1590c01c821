"""
pdfbase

Base framework for generating paginated PDF reports from document templates.
"""

from .exceptions import (
    PdfBaseError,
    InvalidArgumentError,
    ConfigurationError,
    InvalidStateError,
)

__version__ = '1.0.0'

__all__ = [
    'PdfBaseError',
    'InvalidArgumentError',
    'ConfigurationError',
    'InvalidStateError',
]
