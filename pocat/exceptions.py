#!/usr/bin/env python3
"""
Error types raised and reported while loading PO catalogs.

An empty input is not an error (it yields an empty catalog), and I/O
failures are left to propagate as the usual OSError/UnicodeDecodeError.
"""

from dataclasses import dataclass


class PoCatError(Exception):
    """Base class for all pocat errors."""


class PoParseError(PoCatError, ValueError):
    """Raised when a PO line cannot be interpreted."""

    def __init__(self, message: str, line_num: int = 0, line: str = ""):
        super().__init__(message)
        self.line_num = line_num
        self.line = line


class MalformedIndexError(PoParseError):
    """
    A `msgstr[N]` line whose index is missing, non-numeric or unterminated.

    Attributes:
        line_num: 1-based line number in the input stream
        line: The offending line, stripped of surrounding whitespace
    """

    def __init__(self, line_num: int, line: str):
        super().__init__(
            f"Line {line_num}: malformed plural index in {line!r}",
            line_num=line_num,
            line=line,
        )


@dataclass
class ParseIssue:
    """Structured record of a line skipped in non-strict mode."""
    line_num: int
    error_type: str
    message: str
    suggestion: str

    @classmethod
    def from_error(cls, error: PoParseError) -> "ParseIssue":
        return cls(
            line_num=error.line_num,
            error_type=type(error).__name__,
            message=str(error),
            suggestion='Use the form: msgstr[0] "translation"',
        )

    def to_dict(self) -> dict:
        return {
            "line": self.line_num,
            "type": self.error_type,
            "message": self.message,
            "fix": self.suggestion,
        }
