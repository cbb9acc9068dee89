"""
Pattern assembly: parsed lines → rectangular Pattern.

assemble() runs once, after every line has been parsed. It finds the widest
line and pads each narrower line with NO_STITCH cells, the same number on the
left as on the right, until all lines share that width. A line whose deficit
is odd cannot be centred and aborts the whole assembly.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from dataclasses import dataclass

from knitting_parse.catalog.registry import line_width
from knitting_parse.catalog.types import Stitch
from knitting_parse.errors import InvalidStitchCount, ParseError

from .options import Options
from .side import Side

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """One labelled row of an assembled pattern."""

    number: int
    side: Side
    stitches: tuple[Stitch, ...]


@dataclass(frozen=True)
class Pattern:
    """
    A rectangular knitting pattern.

    Attributes:
        lines: Rows of stitches, top to bottom, all of total width ``width``.
        first_line_number: Label of the first row.
        starting_side: Side the first row is worked from.
        in_round: Whether the fabric is worked in the round.
        width: Total stitch width shared by every line (0 for no lines).
    """

    lines: tuple[tuple[Stitch, ...], ...]
    first_line_number: int = 1
    starting_side: Side = Side.RS
    in_round: bool = False
    width: int = 0

    def __post_init__(self) -> None:
        for index, line in enumerate(self.lines):
            actual = line_width(line)
            if actual != self.width:
                raise ValueError(
                    f"line {index} has width {actual}, pattern width is {self.width}"
                )

    def rows(self) -> Iterator[Row]:
        """Yield each line with its displayed row number and working side."""
        side = self.starting_side
        for offset, line in enumerate(self.lines):
            yield Row(number=self.first_line_number + offset, side=side, stitches=line)
            side = side.switch(self.in_round)


def _pad(line: Sequence[Stitch], deficit: int) -> tuple[Stitch, ...]:
    padding = (Stitch.NO_STITCH,) * (deficit // 2)
    return padding + tuple(line) + padding


def assemble(
    lines: Sequence[tuple[Sequence[Stitch], int]],
    options: Options | None = None,
) -> Pattern:
    """
    Pad parsed lines into a rectangular Pattern.

    Parameters
    ----------
    lines:
        ``(stitches, source_line_number)`` pairs in pattern order.
    options:
        Pattern-wide settings carried onto the Pattern; defaults to Options().

    Returns
    -------
    Pattern whose lines all have width equal to the widest input line.

    Raises
    ------
    ParseError
        InvalidStitchCount(width) for the first line, in input order, whose
        width differs from the pattern width by an odd amount.
    """
    options = options or Options()

    widths = [line_width(stitches) for stitches, _ in lines]
    pattern_width = max(widths, default=0)

    padded: list[tuple[Stitch, ...]] = []
    for (stitches, line_number), width in zip(lines, widths):
        deficit = pattern_width - width
        if deficit % 2 != 0:
            logger.debug(
                "line %d: width %d cannot be centred in %d", line_number, width, pattern_width
            )
            raise ParseError(InvalidStitchCount(width), line_number)
        padded.append(_pad(stitches, deficit))

    logger.debug("Assembled %d lines at width %d", len(padded), pattern_width)
    return Pattern(
        lines=tuple(padded),
        first_line_number=options.first_line_number,
        starting_side=options.starting_side,
        in_round=options.in_round,
        width=pattern_width,
    )
