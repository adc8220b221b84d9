"""
pocat - GNU gettext PO catalog loader

Parses .po/.pot files into flat translation catalogs and converts the
reserved PO header entry to and from a key/value mapping.

Quick start:
    from pocat import PoLoader
    catalogue = PoLoader().load("messages.fr.po", "fr")
    catalogue.all("messages")
"""

__version__ = "1.0.0"

from .catalogue import FileResource, MessageCatalogue
from .exceptions import MalformedIndexError, ParseIssue, PoCatError, PoParseError
from .gettext_header import (
    HEADER_KEY,
    add_header,
    decode_header,
    del_header,
    empty_header,
    encode_header,
    get_header,
    header_keys,
)
from .loaders import CatalogLoader, LoaderRegistry, PoLoader

__all__ = [
    "HEADER_KEY",
    "CatalogLoader",
    "FileResource",
    "LoaderRegistry",
    "MalformedIndexError",
    "MessageCatalogue",
    "ParseIssue",
    "PoCatError",
    "PoLoader",
    "PoParseError",
    "add_header",
    "decode_header",
    "del_header",
    "empty_header",
    "encode_header",
    "get_header",
    "header_keys",
]
