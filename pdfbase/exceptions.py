"""
Framework exceptions for consistent error handling across pdfbase.

Structural violations (arguments, configuration, lifecycle order) are raised
immediately to the caller. Best-effort failures such as an image download or
the removal of a temporary directory are never raised; they are logged where
they happen.
"""


class PdfBaseError(Exception):
    """Base exception for all pdfbase errors."""
    pass


class InvalidArgumentError(PdfBaseError, ValueError):
    """
    Raised when a required input is missing or empty.

    Example:
        Constructing a generator with a blank title, or initializing a
        formatted table without column formats.
    """
    pass


class ConfigurationError(PdfBaseError):
    """
    Raised when required configuration is missing.

    Example:
        An image is staged but no temporary image directory is configured.
    """
    pass


class InvalidStateError(PdfBaseError, RuntimeError):
    """
    Raised when an operation is invoked out of lifecycle order.

    Example:
        Rendering before the document has been generated.
    """
    pass
