"""
Document Template Interface

A document template supplies the four content hooks of a generation pass.
The generator calls them in a fixed order: define_styles, build_header,
build_footer, build_content.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Optional

from pdfbase import config

if TYPE_CHECKING:
    from .generator import DocumentGenerator


class DocumentTemplate(ABC):
    """
    Interface for concrete document types.

    Every hook receives the generator, which exposes the document, the
    current section, the context dict and the staging/separator helpers.
    """

    @abstractmethod
    def define_styles(self, generator: 'DocumentGenerator') -> None:
        """Define named styles and page setup"""
        pass

    @abstractmethod
    def build_header(self, generator: 'DocumentGenerator') -> None:
        """Fill the page header of the current section"""
        pass

    @abstractmethod
    def build_footer(self, generator: 'DocumentGenerator') -> None:
        """Fill the page footer of the current section"""
        pass

    @abstractmethod
    def build_content(self, generator: 'DocumentGenerator') -> None:
        """Add the body content"""
        pass

    def get_image_temp_dir(self) -> Optional[str]:
        """
        Root directory for staged images.

        Defaults to the PDFBASE_IMAGE_TEMP_DIR setting. Return None when
        images cannot be staged.
        """
        return config.get_image_temp_dir()
