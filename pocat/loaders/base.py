#!/usr/bin/env python3
"""
Base classes for catalog loaders.

CatalogLoader is the abstract base class every format-specific loader
implements. A loader turns a stream of lines into a flat translation
catalog (message key -> translation) and wraps it in a MessageCatalogue.
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from ..catalogue import DEFAULT_DOMAIN, FileResource, MessageCatalogue

logger = logging.getLogger(__name__)


class CatalogLoader(ABC):
    """
    Abstract base class for format-specific loaders.

    Subclasses only implement parse(); load() takes care of opening the
    file, closing it on every exit path, and building the catalogue.
    """

    def __init__(self, encoding: str = "utf-8"):
        self.encoding = encoding

    @property
    @abstractmethod
    def name(self) -> str:
        """Short format name."""
        pass

    @property
    @abstractmethod
    def file_extensions(self) -> list[str]:
        """List of file extensions this loader supports (without dot)."""
        pass

    @abstractmethod
    def parse(self, lines: Iterable[str]) -> dict[str, str]:
        """
        Parse lines into a translation catalog.

        Args:
            lines: Text lines, with or without trailing newlines

        Returns:
            Ordered mapping of message key -> translation
        """
        pass

    def parse_text(self, content: str) -> dict[str, str]:
        """Parse a whole document held in memory."""
        return self.parse(content.split("\n"))

    def load(
        self,
        resource,
        locale: str,
        domain: str = DEFAULT_DOMAIN,
    ) -> MessageCatalogue:
        """
        Load a catalog file into a MessageCatalogue.

        Args:
            resource: Path of the file to load
            locale: Locale the translations belong to
            domain: Translation domain (default: "messages")

        Returns:
            MessageCatalogue holding the parsed messages and the file resource

        Raises:
            OSError: The file does not exist or cannot be read
            PoParseError: The content is malformed (strict loaders only)
        """
        path = Path(resource)
        logger.debug("Loading %s catalog %s (%s/%s)", self.name, path, locale, domain)

        with path.open("r", encoding=self.encoding, newline="\n") as stream:
            messages = self.parse(stream)

        catalogue = MessageCatalogue(locale)
        catalogue.add(messages, domain)
        catalogue.add_resource(FileResource.from_path(path))
        logger.info("Loaded %d messages from %s", len(messages), path)
        return catalogue


class LoaderRegistry:
    """Registry of available catalog loaders."""

    _loaders: dict[str, type[CatalogLoader]] = {}
    _extension_map: dict[str, str] = {}  # extension -> loader name

    @classmethod
    def register(cls, loader_class: type[CatalogLoader]) -> None:
        """Register a loader class."""
        loader = loader_class()
        cls._loaders[loader.name.lower()] = loader_class
        for ext in loader.file_extensions:
            cls._extension_map[ext.lower()] = loader.name.lower()

    @classmethod
    def get_loader(cls, name: str, **options: Any) -> CatalogLoader:
        """Get loader instance by name."""
        name_lower = name.lower()
        if name_lower not in cls._loaders:
            available = ', '.join(cls._loaders.keys())
            raise ValueError(f"Unknown format: {name}. Available: {available}")
        return cls._loaders[name_lower](**options)

    @classmethod
    def get_loader_for_extension(cls, extension: str, **options: Any) -> CatalogLoader:
        """Get loader instance by file extension."""
        ext = extension.lower().lstrip('.')
        if ext not in cls._extension_map:
            available = ', '.join(cls._extension_map.keys())
            raise ValueError(f"Unknown extension: .{ext}. Supported: {available}")
        return cls.get_loader(cls._extension_map[ext], **options)

    @classmethod
    def detect(cls, filepath, **options: Any) -> CatalogLoader:
        """Pick a loader from the file extension of filepath."""
        return cls.get_loader_for_extension(Path(filepath).suffix, **options)

    @classmethod
    def list_formats(cls) -> list[dict[str, Any]]:
        """List all registered formats with their extensions."""
        result = []
        for name, loader_class in cls._loaders.items():
            loader = loader_class()
            result.append({
                'name': loader.name,
                'extensions': loader.file_extensions,
            })
        return result
