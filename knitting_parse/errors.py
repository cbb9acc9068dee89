"""
Error model for pattern construction.

Every failure while building a Pattern is a ParseError carrying a typed
error_type and the 1-based line number it occurred on. The three error types
are frozen dataclasses; ``ParseError.to_dict()`` is the machine-readable form
a UI uses to underline the offending text.

extract_error_range is the error extractor shared by the line grammar and the
directive parser: it turns "what was left when parsing stopped" into a byte
range over the original line.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class InvalidSyntaxRange:
    """Bytes ``start`` through ``end`` (inclusive) of the line could not be parsed."""

    start: int
    end: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Invalid syntax range", "start": self.start, "end": self.end}


@dataclass(frozen=True)
class InvalidStitchCount:
    """A line of width ``count`` cannot be padded symmetrically to the pattern width."""

    count: int

    def to_dict(self) -> dict[str, Any]:
        return {"type": "Invalid stitch count", "count": self.count}


@dataclass(frozen=True)
class UnderlyingReadFailure:
    """The line source raised while producing a line."""

    cause: BaseException

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": "Underlying read failure",
            "cause": f"{type(self.cause).__name__}: {self.cause}",
        }


ParseErrorType = Union[InvalidSyntaxRange, InvalidStitchCount, UnderlyingReadFailure]


class ParseError(Exception):
    """Raised when a line or a whole pattern cannot be built.

    Attributes:
        error_type: What went wrong, with its kind-specific fields.
        line_number: 1-based source line the error belongs to.
    """

    def __init__(self, error_type: ParseErrorType, line_number: int) -> None:
        self.error_type = error_type
        self.line_number = line_number
        super().__init__(json.dumps(self.to_dict()))

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.error_type.to_dict(), "line": self.line_number}


def _byte_len(text: str) -> int:
    return len(text.encode("utf-8"))


def extract_error_range(original: str, remaining: str) -> InvalidSyntaxRange:
    """
    Range from the first unparsed byte through the last byte of ``original``.

    ``remaining`` must be a suffix of ``original``. The range always runs to
    the end of the line; it does not try to isolate the single bad token.
    Offsets are UTF-8 byte offsets.
    """
    start = _byte_len(original) - _byte_len(remaining)
    end = _byte_len(original) - 1
    return InvalidSyntaxRange(start, end)


def syntax_error(original: str, remaining: str, line_number: int) -> ParseError:
    """Build the ParseError for a parse that stopped with ``remaining`` left over."""
    return ParseError(extract_error_range(original, remaining), line_number)
