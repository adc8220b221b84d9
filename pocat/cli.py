#!/usr/bin/env python3
"""
pocat - GNU gettext PO catalog inspector

Commands:
    parse         - Parse a .po/.pot file and print its catalog
    header        - Decode the header entry of a .po/.pot file
    empty-header  - Print a header block with every standard field empty
    formats       - List supported formats

Every command prints a single JSON (or YAML) document. Errors are printed to
stderr as JSON with exit code 1.

Example:
    pocat parse messages.fr.po --locale fr
    pocat header messages.fr.po --output-format yaml
"""

import argparse
import json
import logging
import sys
from pathlib import Path

import yaml

from .gettext_header import (
    HEADER_KEY,
    decode_header,
    del_header,
    empty_header,
    encode_header,
    extract_header_block,
)
from .loaders import LoaderRegistry


def cmd_parse(args) -> dict:
    """Parse a catalog file."""
    loader = LoaderRegistry.detect(args.input, strict=not args.lax, encoding=args.encoding)
    catalogue = loader.load(args.input, args.locale, args.domain)

    messages = dict(catalogue.all(args.domain))
    header = catalogue.header(args.domain)
    del_header(messages)

    issues = [issue.to_dict() for issue in getattr(loader, "issues", [])]

    return {
        "status": "ok" if not issues else "warning",
        "format": loader.name,
        "locale": catalogue.locale,
        "domain": args.domain,
        "resources": [str(r) for r in catalogue.resources],
        "has_header": header is not None,
        "messages": messages,
        "issues": issues,
        "summary": f"{len(messages)} messages loaded from {args.input}"
                   + (f", {len(issues)} lines skipped" if issues else ""),
    }


def cmd_header(args) -> dict:
    """Decode the header block of a catalog file."""
    content = Path(args.input).read_text(encoding=args.encoding)
    block = extract_header_block(content)

    if not block:
        return {
            "status": "error",
            "error_type": "NO_HEADER",
            "error": f"No header entry found in {args.input}",
            "suggestion": 'The file must start with an entry whose msgid is ""',
        }

    fields = decode_header(block)
    return {
        "status": "ok",
        "header_key": HEADER_KEY,
        "fields": fields,
        "summary": f"{len(fields)} header fields",
    }


def cmd_empty_header(args) -> str:
    """Encoded header with the canonical fields left blank."""
    return encode_header(empty_header())


def cmd_formats(args) -> dict:
    """List supported formats."""
    formats = LoaderRegistry.list_formats()
    return {
        "status": "ok",
        "formats": formats,
        "summary": f"{len(formats)} formats supported: {', '.join(f['name'] for f in formats)}",
    }


def _dump(result: dict, output_format: str) -> str:
    if output_format == "yaml":
        return yaml.safe_dump(result, allow_unicode=True, sort_keys=False)
    return json.dumps(result, indent=2, ensure_ascii=False)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pocat",
        description="pocat - GNU gettext PO catalog inspector",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Print the translations of a PO file
  pocat parse messages.fr.po --locale fr

  # Skip malformed msgstr[N] lines instead of failing
  pocat parse messages.fr.po --lax

  # Show the header fields as YAML
  pocat header messages.fr.po --output-format yaml

  # Start a new header
  pocat empty-header > header.po
        """,
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # parse command
    parse_parser = subparsers.add_parser("parse", help="Parse a catalog file")
    parse_parser.add_argument("input", help="Input .po/.pot file")
    parse_parser.add_argument("--locale", "-l", default="en", help="Locale of the catalog (default: en)")
    parse_parser.add_argument("--domain", "-d", default="messages", help="Translation domain (default: messages)")
    parse_parser.add_argument("--lax", action="store_true", help="Skip malformed msgstr[N] lines instead of failing")
    parse_parser.add_argument("--encoding", "-e", default="utf-8", help="File encoding (default: utf-8)")
    parse_parser.add_argument("--output-format", "-f", default="json", choices=["json", "yaml"],
                              help="Output format (default: json)")

    # header command
    header_parser = subparsers.add_parser("header", help="Decode the header entry")
    header_parser.add_argument("input", help="Input .po/.pot file")
    header_parser.add_argument("--encoding", "-e", default="utf-8", help="File encoding (default: utf-8)")
    header_parser.add_argument("--output-format", "-f", default="json", choices=["json", "yaml"],
                               help="Output format (default: json)")

    # empty-header command
    subparsers.add_parser("empty-header", help="Print an empty standard header")

    # formats command
    subparsers.add_parser("formats", help="List supported formats")

    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "parse":
            result = cmd_parse(args)
            print(_dump(result, args.output_format))
        elif args.command == "header":
            result = cmd_header(args)
            print(_dump(result, args.output_format))
            if result["status"] == "error":
                sys.exit(1)
        elif args.command == "empty-header":
            print(cmd_empty_header(args))
        elif args.command == "formats":
            result = cmd_formats(args)
            print(json.dumps(result, indent=2))
    except Exception as e:
        print(json.dumps({
            "status": "error",
            "error": str(e),
            "error_type": type(e).__name__,
        }), file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
