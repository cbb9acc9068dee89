"""
knitting_parse: stitch shorthand → rectangular grid of stitch tokens.

Parses lines such as ``k, p2tog, (yo, k) x3`` into fully expanded Stitch
sequences, pads every row of a pattern symmetrically to a common width, and
reports failures as ParseError with the line number and the unparsable byte
range.
"""

from .catalog import Stitch, StitchCatalog, get_catalog, line_width, width
from .errors import (
    InvalidStitchCount,
    InvalidSyntaxRange,
    ParseError,
    ParseErrorType,
    UnderlyingReadFailure,
    extract_error_range,
)
from .grammar import format_line, parse_line
from .pattern import (
    Options,
    Pattern,
    Row,
    Side,
    assemble,
    parse_directive,
    parse_pattern,
    read_pattern,
)
from .api import ValidationReport, validate_pattern

__all__ = [
    # types
    "Stitch",
    "Side",
    "Options",
    "Pattern",
    "Row",
    "ValidationReport",
    # errors
    "ParseError",
    "ParseErrorType",
    "InvalidSyntaxRange",
    "InvalidStitchCount",
    "UnderlyingReadFailure",
    "extract_error_range",
    # catalog
    "StitchCatalog",
    "get_catalog",
    "width",
    "line_width",
    # grammar
    "parse_line",
    "format_line",
    # pattern
    "parse_directive",
    "assemble",
    "read_pattern",
    "parse_pattern",
    "validate_pattern",
]
