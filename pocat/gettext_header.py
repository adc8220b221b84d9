#!/usr/bin/env python3
"""
Gettext PO header helpers.

The header is the entry with an empty msgid. Its msgstr carries catalog
metadata as "Key: value" lines:

```
msgid ""
msgstr ""
"Project-Id-Version: MyApp 1.0\\n"
"Content-Type: text/plain; charset=UTF-8\\n"
```

PoLoader stores the raw header text in the catalog under HEADER_KEY; the
accessors below read and write that slot on a catalog the caller owns.
"""

from typing import Optional

# Reserved catalog key holding the raw header text.
HEADER_KEY = "__HEADER__"

_HEADER_KEYS = (
    "Project-Id-Version",
    "POT-Creation-Date",
    "PO-Revision-Date",
    "Last-Translator",
    "Language-Team",
    "MIME-Version",
    "Content-Type",
    "Content-Transfer-Encoding",
    "Plural-Forms",
)


def decode_header(text: str) -> dict[str, str]:
    """
    Parse a header block into an ordered key/value mapping.

    Accepts either bare "Key: value" lines or a full quoted block starting
    with `msgid ""`. In the quoted form the leading quote of each key and
    the trailing `\\n"` of each value are removed.

    Args:
        text: Header text, lines separated by "\\n"

    Returns:
        Mapping in first-appearance order (later duplicates overwrite values)
    """
    result: dict[str, str] = {}
    quoted = False

    for line in text.split("\n"):
        cleaned = line.strip()
        if cleaned == 'msgid ""':
            quoted = True
        if cleaned.find(":") > 0:
            key, value = cleaned.split(":", 1)
            key = key.strip()
            if quoted:
                key = key[1:]
                value = value[:-3]
            result[key] = value.strip()

    return result


def encode_header(header: dict[str, str]) -> Optional[str]:
    """
    Build a quoted PO header block from a mapping.

    Returns None for an empty mapping, so no header entry is emitted.
    """
    if not header:
        return None

    lines = ['msgid ""', 'msgstr ""']
    for key, value in header.items():
        lines.append(f'"{key}: {value}\\n"')
    return "\n".join(lines)


def header_keys() -> list[str]:
    """Canonical order of the standard gettext header fields."""
    return list(_HEADER_KEYS)


def empty_header() -> dict[str, str]:
    return dict.fromkeys(_HEADER_KEYS, "")


def extract_header_block(text: str) -> str:
    """
    Return the leading `msgid ""` entry of raw PO text.

    Comment lines before the entry are skipped. The block ends at the first
    blank line. Returns "" when the text does not open with a header entry.
    """
    block: list[str] = []

    for line in text.split("\n"):
        cleaned = line.strip()
        if not block:
            if not cleaned or cleaned.startswith("#"):
                continue
            if cleaned != 'msgid ""':
                return ""
        elif not cleaned:
            break
        block.append(cleaned)

    return "\n".join(block)


def get_header(catalog: dict[str, str]) -> Optional[str]:
    return catalog.get(HEADER_KEY)


def add_header(catalog: dict[str, str], header: str) -> None:
    """Add or overwrite the header entry of a catalog."""
    catalog[HEADER_KEY] = header


def del_header(catalog: dict[str, str]) -> None:
    catalog.pop(HEADER_KEY, None)
