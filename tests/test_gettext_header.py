#!/usr/bin/env python3
"""
Tests for the PO header helpers:
1. decode/encode of header blocks
2. canonical empty header
3. header slot accessors on a catalog
"""

from pathlib import Path

from pocat.gettext_header import (
    HEADER_KEY,
    add_header,
    decode_header,
    del_header,
    empty_header,
    encode_header,
    extract_header_block,
    get_header,
    header_keys,
)

FIXTURES = Path(__file__).parent / "fixtures"


def test_decode_empty_header():
    assert decode_header("") == {}


def test_decode_bare_lines():
    """Unquoted "Key:Value" lines are split on the first colon and trimmed."""
    actual = decode_header("A:B\nC:D")
    assert actual == {"A": "B", "C": "D"}
    assert actual["C"] == "D"


def test_decode_ignores_lines_without_key():
    actual = decode_header("no colon here\n:starts with colon\nKey: value: with colon")
    assert actual == {"Key": "value: with colon"}


def test_decode_duplicate_key_keeps_first_position():
    actual = decode_header("A: 1\nB: 2\nA: 3")
    assert list(actual) == ["A", "B"]
    assert actual["A"] == "3"


def test_decode_quoted_block():
    text = '\n'.join([
        'msgid ""',
        'msgstr ""',
        '"Language: fr\\n"',
        '"Plural-Forms: nplurals=2; plural=(n > 1);\\n"',
    ])
    assert decode_header(text) == {
        "Language": "fr",
        "Plural-Forms": "nplurals=2; plural=(n > 1);",
    }


def test_encode_empty_mapping_returns_none():
    assert encode_header({}) is None


def test_encode_header():
    actual = encode_header({"A": "B", "C": "D"})
    expected = '\n'.join(['msgid ""', 'msgstr ""', '"A: B\\n"', '"C: D\\n"'])
    assert actual == expected


def test_empty_header_uses_canonical_keys():
    header = empty_header()
    assert list(header) == header_keys()
    assert "".join(header.values()) == ""
    assert header_keys()[0] == "Project-Id-Version"
    assert header_keys()[-1] == "Plural-Forms"
    assert len(header_keys()) == 9


def test_empty_header_roundtrip():
    header = empty_header()
    decoded = decode_header(encode_header(header))
    assert decoded == header
    assert list(decoded) == list(header)


def test_header_file_roundtrip():
    """A real header block survives decode then encode byte for byte."""
    text = (FIXTURES / "header.po").read_text(encoding="utf-8")
    assert encode_header(decode_header(text)) == text


def test_header_file_fields():
    text = (FIXTURES / "header.po").read_text(encoding="utf-8")
    fields = decode_header(text)
    assert list(fields) == header_keys()
    assert fields["Last-Translator"] == "Jane Doe <jane@example.com>"
    assert fields["POT-Creation-Date"] == "2012-01-01 12:00+0100"


def test_extract_header_block_stops_at_blank_line():
    text = '\n'.join([
        '# SOME DESCRIPTIVE TITLE.',
        'msgid ""',
        'msgstr ""',
        '"Language: de\\n"',
        '',
        'msgid "foo"',
        'msgstr "bar"',
    ])
    block = extract_header_block(text)
    assert block == 'msgid ""\nmsgstr ""\n"Language: de\\n"'
    assert decode_header(block) == {"Language": "de"}


def test_extract_header_block_without_header():
    assert extract_header_block('msgid "foo"\nmsgstr "bar"\n') == ""
    assert extract_header_block("") == ""


def test_header_accessors():
    catalog = {"foo": "bar"}
    assert get_header(catalog) is None

    add_header(catalog, "Language: fr")
    assert catalog[HEADER_KEY] == "Language: fr"
    assert get_header(catalog) == "Language: fr"

    add_header(catalog, "foo")
    assert get_header(catalog) == "foo"

    del_header(catalog)
    assert get_header(catalog) is None
    assert catalog == {"foo": "bar"}

    # Deleting a missing header is a no-op
    del_header(catalog)
    assert catalog == {"foo": "bar"}
