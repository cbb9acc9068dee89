"""Canonical text for a token sequence, accepted back by parse_line."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import groupby

from knitting_parse.catalog.types import Stitch


def format_line(stitches: Iterable[Stitch]) -> str:
    """
    Join canonical stitch names with ", ", writing runs of the same stitch as
    ``name xN``. Groups are never emitted: the input is already flattened.

    ``parse_line(format_line(tokens), n) == list(tokens)`` for any tokens.
    """
    parts: list[str] = []
    for stitch, run in groupby(stitches):
        count = sum(1 for _ in run)
        parts.append(stitch.value if count == 1 else f"{stitch.value} x{count}")
    return ", ".join(parts)
