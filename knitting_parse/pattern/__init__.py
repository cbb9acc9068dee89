"""
Pattern assembly and ingestion.

Turns parsed stitch lines into a rectangular Pattern, applies ``##``
directive lines to the pattern Options, and reads whole patterns from any
line source.
"""

from .side import Side
from .options import DIRECTIVE_MARKER, Options, parse_directive
from .assembler import Pattern, Row, assemble
from .reader import COMMENT_MARKER, LineKind, classify_line, parse_pattern, read_pattern

__all__ = [
    # types
    "Side",
    "Options",
    "Pattern",
    "Row",
    "LineKind",
    # markers
    "DIRECTIVE_MARKER",
    "COMMENT_MARKER",
    # operations
    "parse_directive",
    "assemble",
    "classify_line",
    "read_pattern",
    "parse_pattern",
]
