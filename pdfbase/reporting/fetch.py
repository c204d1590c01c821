"""
Image source fetching.

Copies an image from an http(s) URL, a file:// URI or a local path to a
destination file. Errors are raised; callers decide whether they matter.

Logging Guidelines:
- Logs scheme + host + path only (never query strings, which may carry tokens)
"""

import logging
import shutil
from pathlib import Path
from time import monotonic
from typing import Union
from urllib.parse import unquote, urlparse
from urllib.request import url2pathname

import httpx


logger = logging.getLogger(__name__)

HTTP_SCHEMES = ('http', 'https')
FILE_CHUNK_SIZE = 8192  # bytes


def display_uri(uri: Union[str, Path]) -> str:
    """
    Render an image source for log messages.

    URLs lose their query string and fragment, which may carry tokens.
    """
    if isinstance(uri, Path):
        return str(uri)
    parsed = urlparse(uri)
    if parsed.netloc:
        return f"{parsed.scheme}://{parsed.netloc}{parsed.path}"
    if parsed.scheme.lower() == 'file':
        return parsed.path
    return uri


def uri_extension(uri: Union[str, Path]) -> str:
    """
    Get the file extension of a URI or path, without the leading dot.

    Returns:
        The extension, or an empty string if there is none
    """
    if isinstance(uri, Path):
        return uri.suffix.lstrip('.')
    path = unquote(urlparse(str(uri)).path)
    return Path(path).suffix.lstrip('.')


def download_file(url: str, destination: Path, timeout: float) -> None:
    """
    Download an http(s) resource to a file.

    Args:
        url: Absolute http or https URL
        destination: File to write
        timeout: Limit in seconds for the whole download, and for each
            connect and read within it

    Raises:
        httpx.HTTPError: On network errors, timeouts or non-2xx responses
        httpx.ReadTimeout: If the body is still arriving when the limit is reached
        OSError: If the destination cannot be written
    """
    logger.debug(f"GET {display_uri(url)}")
    deadline = monotonic() + timeout
    with httpx.Client(timeout=timeout, follow_redirects=True) as client:
        with client.stream('GET', url) as response:
            response.raise_for_status()
            with open(destination, 'wb') as f:
                for chunk in response.iter_bytes(FILE_CHUNK_SIZE):
                    if monotonic() > deadline:
                        raise httpx.ReadTimeout(
                            f"Download exceeded {timeout}s", request=response.request
                        )
                    f.write(chunk)


def fetch_to_file(uri: Union[str, Path], destination: Path, timeout: float) -> None:
    """
    Fetch an image source into a local file.

    Args:
        uri: http(s) URL, file:// URI or local filesystem path
        destination: File to write
        timeout: Timeout in seconds for remote downloads

    Raises:
        httpx.HTTPError: On failed remote downloads
        OSError: On missing sources or unwritable destinations
        ValueError: For unsupported URI schemes
    """
    if isinstance(uri, Path):
        shutil.copyfile(uri, destination)
        return

    parsed = urlparse(uri)
    scheme = parsed.scheme.lower()
    if scheme in HTTP_SCHEMES:
        download_file(uri, destination, timeout)
    elif scheme == 'file':
        shutil.copyfile(url2pathname(parsed.path), destination)
    elif not scheme or len(scheme) == 1:
        # Plain path (a single-letter scheme is a Windows drive)
        shutil.copyfile(uri, destination)
    else:
        raise ValueError(f"Unsupported image URI scheme: {scheme}")
