#!/usr/bin/env python3
"""
Catalog loaders for localization file formats.

Supported formats:
- PO: GNU gettext .po/.pot files
"""

from .base import CatalogLoader, LoaderRegistry
from .po import PoLoader, unescape, unescape_c

# Register loaders
LoaderRegistry.register(PoLoader)

__all__ = [
    'CatalogLoader',
    'LoaderRegistry',
    'PoLoader',
    'unescape',
    'unescape_c',
]
