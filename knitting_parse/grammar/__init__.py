"""
Line grammar for stitch shorthand: parsing a line into tokens and writing
tokens back out as canonical text.
"""

from .format import format_line
from .line import parse_line

__all__ = [
    "parse_line",
    "format_line",
]
