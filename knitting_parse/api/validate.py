"""
Public pattern validation API.

validate_pattern() builds a Pattern from shorthand text and reports the
outcome instead of raising, so pattern-design tools can show the failing line
and underline the offending byte range without handling ParseError
themselves.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from knitting_parse.errors import ParseError
from knitting_parse.pattern.assembler import Pattern
from knitting_parse.pattern.options import Options
from knitting_parse.pattern.reader import parse_pattern


@dataclass(frozen=True)
class ValidationReport:
    """Outcome of validating a knitting pattern.

    Attributes:
        passed: True when the whole pattern parsed and assembled.
        pattern: The assembled Pattern, or None if the build failed.
        error: ``ParseError.to_dict()`` of the failure, else None.
    """

    passed: bool
    pattern: Pattern | None
    error: dict[str, Any] | None


def validate_pattern(pattern_text: str, options: Options | None = None) -> ValidationReport:
    """
    Parse and assemble a knitting pattern.

    Parameters
    ----------
    pattern_text:
        Whole pattern, one line per row, directives and comments included.
    options:
        Initial pattern settings; directive lines in the text override them.

    Returns
    -------
    ValidationReport
        Always returned for pattern problems. Inspect ``passed`` and ``error``.
    """
    try:
        pattern = parse_pattern(pattern_text, options)
    except ParseError as exc:
        return ValidationReport(passed=False, pattern=None, error=exc.to_dict())
    return ValidationReport(passed=True, pattern=pattern, error=None)
