"""
Pattern-wide options and the ``##`` directive line parser.

A directive line configures the pattern instead of contributing stitches:

    ## in_round
    ## first_line=3 start_wrong_side

After the two-character marker, directives are separated by spaces or tabs
and may appear in any order. Applying a directive twice has the same effect
as applying it once.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from knitting_parse.errors import syntax_error

from .side import Side

DIRECTIVE_MARKER = "##"

_SPACE = " \t"
_LINE_ENDINGS = ("\r\n", "\n")


@dataclass
class Options:
    """
    Settings shared by every line of a pattern.

    Attributes:
        first_line_number: Label given to the first row of the pattern.
        starting_side: Side the first row is worked from.
        in_round: Whether the fabric is worked as a continuous tube.
    """

    first_line_number: int = 1
    starting_side: Side = Side.RS
    in_round: bool = False

    def __post_init__(self) -> None:
        if self.first_line_number < 1:
            raise ValueError(f"first_line_number must be >= 1, got {self.first_line_number}")


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    return pos


def _at_boundary(text: str, pos: int) -> bool:
    return pos == len(text) or text[pos] in _SPACE


def _keyword(name: str, apply: Callable[[Options], None]):
    def handler(text: str, pos: int, options: Options) -> int | None:
        end = pos + len(name)
        if not text.startswith(name, pos) or not _at_boundary(text, end):
            return None
        apply(options)
        return end

    return handler


def _set_in_round(options: Options) -> None:
    options.in_round = True


def _set_start_wrong_side(options: Options) -> None:
    options.starting_side = Side.WS


def _first_line(text: str, pos: int, options: Options) -> int | None:
    key = "first_line="
    if not text.startswith(key, pos):
        return None
    start = pos + len(key)
    end = start
    while end < len(text) and text[end].isascii() and text[end].isdigit():
        end += 1
    if end == start or not _at_boundary(text, end):
        return None
    value = int(text[start:end])
    if value < 1:
        return None
    options.first_line_number = value
    return end


_DirectiveHandler = Callable[[str, int, Options], "int | None"]

_DIRECTIVES: tuple[_DirectiveHandler, ...] = (
    _keyword("in_round", _set_in_round),
    _keyword("start_wrong_side", _set_start_wrong_side),
    _first_line,
)


def _strip_line_ending(line: str) -> str:
    for ending in _LINE_ENDINGS:
        if line.endswith(ending):
            return line[: -len(ending)]
    return line


def parse_directive(line: str, line_number: int, options: Options) -> None:
    """
    Apply every directive on ``line`` to ``options`` in place.

    ``line`` must start with DIRECTIVE_MARKER. Raises ValueError if it does
    not, and ParseError with an InvalidSyntaxRange if anything after the
    marker is not a directive. The range is relative to the text after the
    marker. Directives before the bad text have already been applied when the
    error is raised; callers abandon the options along with the pattern.
    """
    if not line.startswith(DIRECTIVE_MARKER):
        raise ValueError(f"directive line must start with {DIRECTIVE_MARKER!r}: {line!r}")

    body = _strip_line_ending(line[len(DIRECTIVE_MARKER) :])
    pos = 0
    while True:
        pos = _skip_space(body, pos)
        if pos == len(body):
            return
        for handler in _DIRECTIVES:
            end = handler(body, pos, options)
            if end is not None:
                pos = end
                break
        else:
            raise syntax_error(body, body[pos:], line_number)
