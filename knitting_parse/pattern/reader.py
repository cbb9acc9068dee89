"""
Pattern ingestion: classify source lines, parse them, assemble the result.

Line classes, by leading characters:

    ##...   directive: updates the pattern Options
    #...    comment: ignored
    (blank) ignored
    other   stitch line: parsed by the line grammar

Line numbers are 1-based positions in the source, counting every line.
The first error of any kind aborts the build; nothing partial is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from dataclasses import replace
from enum import Enum

from knitting_parse.catalog.types import Stitch
from knitting_parse.errors import ParseError, UnderlyingReadFailure
from knitting_parse.grammar.line import parse_line

from .assembler import Pattern, assemble
from .options import DIRECTIVE_MARKER, Options, parse_directive

logger = logging.getLogger(__name__)

COMMENT_MARKER = "#"

# Errors a line source may raise while producing lines (file reads, decoding).
_READ_ERRORS = (OSError, UnicodeDecodeError)


class LineKind(str, Enum):
    DIRECTIVE = "directive"
    COMMENT = "comment"
    BLANK = "blank"
    STITCHES = "stitches"


def classify_line(line: str) -> LineKind:
    """Classify a single line with its line ending already removed."""
    if line.startswith(DIRECTIVE_MARKER):
        return LineKind.DIRECTIVE
    if line.startswith(COMMENT_MARKER):
        return LineKind.COMMENT
    if not line.strip():
        return LineKind.BLANK
    return LineKind.STITCHES


def _numbered_lines(source: Iterable[str]) -> Iterator[tuple[str, int]]:
    """Yield (line, number) with line endings stripped; wrap read failures."""
    line_number = 0
    lines = iter(source)
    while True:
        line_number += 1
        try:
            line = next(lines)
        except StopIteration:
            return
        except _READ_ERRORS as exc:
            raise ParseError(UnderlyingReadFailure(exc), line_number) from exc
        yield line.rstrip("\r\n"), line_number


def read_pattern(source: Iterable[str], options: Options | None = None) -> Pattern:
    """
    Build a Pattern from any iterable of text lines (an open text file, a
    list of strings, a generator).

    ``options`` seeds the pattern settings before any directive line is
    applied; the caller's object is not modified.

    Raises ParseError for the first syntax error, odd-width line, or failure
    raised by ``source`` itself.
    """
    options = replace(options) if options is not None else Options()
    parsed: list[tuple[list[Stitch], int]] = []

    for line, line_number in _numbered_lines(source):
        kind = classify_line(line)
        if kind is LineKind.DIRECTIVE:
            parse_directive(line, line_number, options)
        elif kind is LineKind.STITCHES:
            parsed.append((parse_line(line, line_number), line_number))

    logger.debug("Parsed %d stitch lines; options=%s", len(parsed), options)
    return assemble(parsed, options)


def parse_pattern(text: str, options: Options | None = None) -> Pattern:
    """Build a Pattern from a whole pattern held in one string."""
    return read_pattern(text.splitlines(), options)
