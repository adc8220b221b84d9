#!/usr/bin/env python3
"""
Message catalogue: translations grouped by domain for a single locale.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from .gettext_header import get_header

logger = logging.getLogger(__name__)

DEFAULT_DOMAIN = "messages"


@dataclass(frozen=True)
class FileResource:
    """A file a catalogue was loaded from."""
    path: str

    @classmethod
    def from_path(cls, path) -> "FileResource":
        return cls(str(Path(path).resolve()))

    def __str__(self) -> str:
        return self.path


@dataclass
class MessageCatalogue:
    """
    Translations for one locale.

    Attributes:
        locale: Locale code (e.g. "fr", "pt_BR")
        messages: domain -> (message key -> translation)
        resources: Files the messages were loaded from
    """
    locale: str
    messages: dict[str, dict[str, str]] = field(default_factory=dict)
    resources: list[FileResource] = field(default_factory=list)

    def add(self, messages: dict[str, str], domain: str = DEFAULT_DOMAIN) -> None:
        """Merge messages into a domain; existing keys are overwritten."""
        self.messages.setdefault(domain, {}).update(messages)

    def all(self, domain: Optional[str] = None) -> dict:
        """Messages of one domain, or every domain when domain is None."""
        if domain is None:
            return self.messages
        return self.messages.get(domain, {})

    def get(self, key: str, domain: str = DEFAULT_DOMAIN) -> str:
        """Translation for key, falling back to the key itself."""
        return self.all(domain).get(key, key)

    def has(self, key: str, domain: str = DEFAULT_DOMAIN) -> bool:
        return key in self.all(domain)

    def domains(self) -> list[str]:
        return list(self.messages)

    def header(self, domain: str = DEFAULT_DOMAIN) -> Optional[str]:
        """Raw PO header text stored in a domain, if any."""
        return get_header(self.all(domain))

    def add_resource(self, resource: FileResource) -> None:
        if resource not in self.resources:
            logger.debug("Tracking resource %s for locale %s", resource, self.locale)
            self.resources.append(resource)
