"""
Document Template Registry

Maps report keys (e.g., 'invoice.v1') to document template factories and
turns a key into a generator that is ready to run.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

from pdfbase.exceptions import InvalidArgumentError
from .generator import DocumentGenerator
from .interfaces import DocumentTemplate


logger = logging.getLogger(__name__)

TemplateFactory = Callable[[], DocumentTemplate]


@dataclass(frozen=True)
class TemplateEntry:
    """A registered template: its key, factory and a short description"""

    key: str
    factory: TemplateFactory
    description: str = ''


def _describe(factory: TemplateFactory) -> str:
    doc = (getattr(factory, '__doc__', None) or '').strip()
    return doc.splitlines()[0] if doc else ''


class TemplateRegistry:
    """
    Registry of document templates.

    Factories are called once per generator, so every generation pass gets
    its own template instance.

    Usage:
        templates.register('invoice.v1', InvoiceReportV1)
        generator = templates.create_generator('invoice.v1', 'Invoice 2024-001', context={...})
        pdf_bytes = generator.export_bytes()
    """

    def __init__(self):
        self._entries: Dict[str, TemplateEntry] = {}

    def __contains__(self, key: str) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> List[str]:
        """Registered report keys, sorted"""
        return sorted(self._entries)

    def register(self, key: str, factory: TemplateFactory,
                 description: Optional[str] = None) -> TemplateEntry:
        """
        Register a template factory.

        Args:
            key: Report key; surrounding whitespace is ignored
            factory: Template class or any callable returning a DocumentTemplate
            description: Human readable description. If None, the first line
                of the factory's docstring is used.

        Raises:
            InvalidArgumentError: If key is blank or factory is not callable
            ValueError: If key is already registered
        """
        key = (key or '').strip()
        if not key:
            raise InvalidArgumentError("report key is required")
        if not callable(factory):
            raise InvalidArgumentError(f"Template factory for '{key}' is not callable")
        if key in self._entries:
            raise ValueError(f"Report template '{key}' is already registered")

        entry = TemplateEntry(key, factory, _describe(factory) if description is None else description)
        self._entries[key] = entry
        logger.debug(f"Registered report template '{key}'")
        return entry

    def unregister(self, key: str) -> None:
        """
        Raises:
            KeyError: If key is not registered
        """
        self.entry(key)
        del self._entries[key]

    def entry(self, key: str) -> TemplateEntry:
        """
        Raises:
            KeyError: If key is not registered
        """
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"Report template '{key}' not found") from None

    def describe(self) -> Dict[str, str]:
        """Report keys mapped to their descriptions"""
        return {key: self._entries[key].description for key in self.keys()}

    def create_template(self, key: str) -> DocumentTemplate:
        """
        Create a new template instance.

        Raises:
            KeyError: If key is not registered
            TypeError: If the factory does not return a DocumentTemplate
        """
        template = self.entry(key).factory()
        if not isinstance(template, DocumentTemplate):
            raise TypeError(
                f"Factory for '{key}' returned {type(template).__name__}, not a DocumentTemplate"
            )
        return template

    def create_generator(self, key: str, title: str, **options) -> DocumentGenerator:
        """
        Create a generator for a registered template.

        Args:
            key: Report key
            title: Document title
            **options: Passed to DocumentGenerator (context, renderer, fetch_timeout)
        """
        return DocumentGenerator(title, self.create_template(key), **options)


# Templates shipped with or registered by the host application
templates = TemplateRegistry()
