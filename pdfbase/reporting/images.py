"""
Temporary Image Store

Stages images into a private per-generator directory so the renderer can embed
them by local name, and removes the directory once the document is rendered.

Directory layout:
- <configured temp root>/<generator id>/0000000001.<ext>
- <configured temp root>/<generator id>/0000000002.<ext>
- ...
"""

import logging
import shutil
from pathlib import Path
from typing import Callable, Optional, Union

from pdfbase.exceptions import ConfigurationError, InvalidArgumentError
from pdfbase.model import Document
from .fetch import display_uri, fetch_to_file, uri_extension


logger = logging.getLogger(__name__)

SEQUENCE_DIGITS = 10


class TemporaryImageStore:
    """
    Per-generator staging directory for images.

    The directory is created lazily by the first staged image and removed by
    cleanup(). Image names are sequential and never reused between two
    cleanups, even when a download fails.
    """

    def __init__(
        self,
        owner_id: str,
        temp_dir_provider: Callable[[], Optional[Union[str, Path]]],
        fetch_timeout: float,
    ):
        """
        Initialize the store.

        Args:
            owner_id: Unique identifier of the owning generator (namespaces the directory)
            temp_dir_provider: Returns the configured temporary root, or None if not configured
            fetch_timeout: Timeout in seconds for remote downloads
        """
        self.owner_id = owner_id
        self._temp_dir_provider = temp_dir_provider
        self.fetch_timeout = fetch_timeout
        self._root: Optional[Path] = None
        self._sequence = 1

    @property
    def root(self) -> Optional[Path]:
        """The staging directory, or None if no image was staged since the last cleanup"""
        return self._root

    @property
    def next_sequence(self) -> int:
        return self._sequence

    def ensure_root(self, document: Document) -> Path:
        """
        Create the staging directory if it does not exist yet.

        Args:
            document: Document whose image path is pointed at the directory

        Returns:
            The staging directory

        Raises:
            ConfigurationError: If no temporary root is configured
        """
        if self._root is not None:
            return self._root

        configured = self._temp_dir_provider()
        if configured is None or not str(configured).strip():
            raise ConfigurationError("Temporary image directory not specified")

        root = Path(configured) / self.owner_id
        root.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created temporary image directory: {root}")

        self._root = root
        self._sequence = 1
        document.image_path = str(root)
        return root

    def _next_name(self, extension: str) -> str:
        name = f"{self._sequence:0{SEQUENCE_DIGITS}d}.{extension}"
        self._sequence += 1
        return name

    def stage_image(self, document: Document, uri: Union[str, Path],
                    extension: Optional[str] = None) -> str:
        """
        Fetch an image into the staging directory.

        Failed fetches are logged and swallowed: the returned name then points
        at a missing file and the renderer leaves the image out.

        Args:
            document: Document being built
            uri: http(s) URL, file:// URI or local path of the image
            extension: Extension to use instead of the one in the URI

        Returns:
            Local file name to reference from the document (not the full path)

        Raises:
            ConfigurationError: If no temporary root is configured
            InvalidArgumentError: If uri is empty or no extension can be determined
        """
        if uri is None or not str(uri).strip():
            raise InvalidArgumentError("Image URI is required")

        root = self.ensure_root(document)

        extension = (extension if extension is not None else uri_extension(uri)).strip().lstrip('.')
        if not extension:
            raise InvalidArgumentError(f"Cannot determine image extension for {uri}")

        name = self._next_name(extension)
        destination = root / name

        try:
            fetch_to_file(uri, destination, self.fetch_timeout)
        except Exception as e:
            logger.warning(f"Could not stage image {name} from {display_uri(uri)}: {e.__class__.__name__}")
            destination.unlink(missing_ok=True)

        return name

    def cleanup(self, document: Optional[Document] = None) -> None:
        """
        Remove the staging directory.

        Never raises; removal errors are logged. Safe to call when nothing
        was staged.

        Args:
            document: Document whose image path is cleared
        """
        if self._root is None:
            return

        try:
            shutil.rmtree(self._root)
            logger.debug(f"Removed temporary image directory: {self._root}")
        except OSError as e:
            logger.error(f"Failed to remove temporary image directory {self._root}: {e}", exc_info=True)

        self._root = None
        if document is not None:
            document.image_path = None
