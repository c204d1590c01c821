"""
Configuration for pdfbase.

Values are read from the environment on every call so that changes made by
a host application (or a test) take effect without a restart.

Environment variables:
- PDFBASE_IMAGE_TEMP_DIR: root directory for staged images
- PDFBASE_IMAGE_FETCH_TIMEOUT: timeout in seconds for remote image downloads
"""

import logging
import os
from typing import Optional


logger = logging.getLogger(__name__)

IMAGE_TEMP_DIR_ENV = 'PDFBASE_IMAGE_TEMP_DIR'
IMAGE_FETCH_TIMEOUT_ENV = 'PDFBASE_IMAGE_FETCH_TIMEOUT'

DEFAULT_IMAGE_FETCH_TIMEOUT = 10.0  # seconds


def get_image_temp_dir() -> Optional[str]:
    """
    Get the configured root directory for temporary images.

    Returns:
        The directory path, or None if not configured
    """
    value = os.environ.get(IMAGE_TEMP_DIR_ENV, '').strip()
    return value or None


def get_image_fetch_timeout() -> float:
    """
    Get the timeout for remote image downloads.

    Falls back to DEFAULT_IMAGE_FETCH_TIMEOUT when the variable is unset,
    not a number, or not positive.
    """
    raw = os.environ.get(IMAGE_FETCH_TIMEOUT_ENV, '').strip()
    if not raw:
        return DEFAULT_IMAGE_FETCH_TIMEOUT

    try:
        timeout = float(raw)
    except ValueError:
        logger.warning(
            f"Ignoring invalid {IMAGE_FETCH_TIMEOUT_ENV}={raw!r}, "
            f"using {DEFAULT_IMAGE_FETCH_TIMEOUT}s"
        )
        return DEFAULT_IMAGE_FETCH_TIMEOUT

    if timeout <= 0:
        return DEFAULT_IMAGE_FETCH_TIMEOUT
    return timeout
