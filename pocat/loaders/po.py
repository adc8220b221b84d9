#!/usr/bin/env python3
"""
GNU gettext PO/POT loader.

Parses .po and .pot files into a flat catalog of msgid -> msgstr. Plural
entries produce two keys: the singular msgid maps to the first form and the
msgid_plural maps to all forms joined as "{0} form|{1} form|...".
"""

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Optional, Union

from ..exceptions import MalformedIndexError, ParseIssue
from ..gettext_header import add_header
from .base import CatalogLoader

logger = logging.getLogger(__name__)

_PLURAL_FORM = re.compile(r'msgstr\[([0-9]+)\]\s*"')
_SLASHED = re.compile(r'\\(.?)', re.DOTALL)
_C_ESCAPE = re.compile(r'\\(x[0-9A-Fa-f]{1,2}|[0-7]{1,3}|.?)', re.DOTALL)
_C_SIMPLE = {
    'n': '\n',
    't': '\t',
    'r': '\r',
    'v': '\v',
    'f': '\f',
    'a': '\a',
    'b': '\b',
}


def unescape(s: str) -> str:
    """Drop escaping backslashes: `\\\\` -> `\\`, `\\"` -> `"`, `\\0` -> NUL."""
    return _SLASHED.sub(lambda m: '\0' if m.group(1) == '0' else m.group(1), s)


def _c_unescape_one(match: re.Match) -> str:
    seq = match.group(1)
    if len(seq) > 1 and seq[0] == 'x':
        return chr(int(seq[1:], 16))
    if seq and seq[0] in '01234567':
        return chr(int(seq, 8) & 0xFF)
    return _C_SIMPLE.get(seq, seq)


def unescape_c(s: str) -> str:
    """C-style unescape: `\\n`, `\\t`, ..., octal `\\ooo` and hex `\\xHH`."""
    return _C_ESCAPE.sub(_c_unescape_one, s)


@dataclass
class _ParseItem:
    """One message block while it is being read."""
    ids: dict[str, str] = field(default_factory=dict)
    translated: Union[str, dict[int, str], None] = None
    # Field continuation lines extend: "ids" until any msgstr line is seen.
    active: str = 'ids'
    last_id: Optional[str] = None

    def set_id(self, slot: str, text: str) -> None:
        self.ids[slot] = text
        self.last_id = slot

    def set_translation(self, text: str) -> None:
        self.translated = text
        self.active = 'translated'

    def set_form(self, index: int, text: str) -> None:
        if not isinstance(self.translated, dict):
            self.translated = {}
        self.translated[index] = text
        self.active = 'translated'

    def extend(self, fragment: str) -> bool:
        """Append a continuation fragment; False if there is nothing to extend."""
        if self.active == 'translated':
            if isinstance(self.translated, dict):
                last = max(self.translated)
                self.translated[last] += fragment
            else:
                self.translated = (self.translated or '') + fragment
            return True

        if self.last_id is None:
            return False
        self.ids[self.last_id] += fragment
        return True


class PoLoader(CatalogLoader):
    """
    Loader for GNU gettext PO/POT files.

    Supported subset:
    ```
    # comments are ignored
    msgid "Source text"
    msgstr "Translated text"

    msgid "One item"
    msgid_plural "%d items"
    msgstr[0] "Un élément"
    msgstr[1] "%d éléments"
    ```

    Differences from the reference gettext tools:
    - msgctxt and comments are ignored.
    - Message ids are not restricted to US-ASCII.
    - The header entry (empty msgid) is kept raw under HEADER_KEY.
    - Keys whose final translation is empty are dropped, including
      untranslated entries.

    Args:
        strict: Raise MalformedIndexError on a bad `msgstr[N]` line. When
            False the line is skipped and recorded in `issues`.
        encoding: Encoding used by load() to read files
    """

    def __init__(self, strict: bool = True, encoding: str = "utf-8"):
        super().__init__(encoding=encoding)
        self.strict = strict
        self.issues: list[ParseIssue] = []

    @property
    def name(self) -> str:
        return "po"

    @property
    def file_extensions(self) -> list[str]:
        return ["po", "pot"]

    def parse(self, lines: Iterable[str]) -> dict[str, str]:
        """
        Parse PO lines into a translation catalog.

        Args:
            lines: PO file lines (an open text file works)

        Returns:
            Ordered mapping of msgid -> translation, plus HEADER_KEY when
            the file has a header entry

        Raises:
            MalformedIndexError: Bad `msgstr[N]` line in strict mode
        """
        self.issues = []
        messages: dict[str, str] = {}
        item = _ParseItem()

        for line_num, raw in enumerate(lines, 1):
            line = raw.strip()

            # Blank line ends the current entry
            if not line:
                self._add_message(messages, item)
                item = _ParseItem()

            elif line.startswith('msgid "'):
                self._add_message(messages, item)
                item = _ParseItem()
                item.set_id('singular', line[7:-1])

            elif line.startswith('msgstr "'):
                item.set_translation(line[8:-1])

            # Continuation of the previous msgid/msgstr
            elif line.startswith('"'):
                if not item.extend(line[1:-1]):
                    logger.debug("Line %d: continuation without msgid, dropped", line_num)

            elif line.startswith('msgid_plural "'):
                item.set_id('plural', line[14:-1])

            elif line.startswith('msgstr['):
                match = _PLURAL_FORM.match(line)
                if match is None:
                    error = MalformedIndexError(line_num, line)
                    if self.strict:
                        raise error
                    logger.warning("%s; line skipped", error)
                    self.issues.append(ParseIssue.from_error(error))
                    continue
                item.set_form(int(match.group(1)), line[match.end():-1])

            else:
                logger.debug("Line %d ignored: %r", line_num, line)

        # Don't forget the last entry
        self._add_message(messages, item)

        # Empty translations never make it into the catalog
        return {key: value for key, value in messages.items() if value}

    def _add_message(self, messages: dict[str, str], item: _ParseItem) -> None:
        """Fold a finished entry into the catalog."""
        translated = item.translated
        singular = item.ids.get('singular', '')

        if isinstance(translated, dict):
            messages[singular] = unescape(translated.get(0, ''))
            if 'plural' in item.ids:
                forms = '|'.join(
                    f'{{{index}}} {translated[index]}' for index in sorted(translated)
                )
                messages[item.ids['plural']] = unescape_c(forms)

        elif singular:
            messages[singular] = unescape(translated or '')

        elif translated:
            # Empty msgid: this is the header
            add_header(messages, translated)
