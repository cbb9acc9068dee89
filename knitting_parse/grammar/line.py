"""
Line grammar: one line of stitch shorthand → ordered list of Stitch tokens.

    line        := group_list
    group_list  := element ("," element)*
    element     := group | stitch_token
    group       := "(" group_list ")" multiplier?
    stitch_token:= <stitch name> multiplier?
    multiplier  := "x" <decimal digits>

Spaces and tabs are insignificant around every token, comma, parenthesis and
multiplier. Multipliers are expanded as they are parsed, so the result is the
fully unrolled, depth-first, left-to-right token sequence.

Each helper takes the line and a start offset and returns the parsed value
with the offset just past it, or None when nothing matched. A failed helper
consumes nothing; callers resume from the offset they passed in.
"""

from __future__ import annotations

from knitting_parse.catalog.types import Stitch
from knitting_parse.errors import syntax_error

_SPACE = " \t"
_DIGITS = "0123456789"

# Stitch names grouped by shared first character. Within a group the
# alternatives are ordered so that no longer name is shadowed by a shorter
# one (``k2tog`` before ``k``, ``m pwise`` before ``ml``).
_PREFIXED: tuple[tuple[str, tuple[tuple[str, Stitch], ...]], ...] = (
    ("1", (("lcf", Stitch.LCF1), ("rcb", Stitch.RCB1))),
    ("2", (("lcf", Stitch.LCF2), ("rcb", Stitch.RCB2))),
    ("3", (("lcf", Stitch.LCF3), ("rcb", Stitch.RCB3))),
    ("4", (("lcf", Stitch.LCF4), ("rcb", Stitch.RCB4))),
    ("b", (("ead", Stitch.BEAD), ("obble", Stitch.BOBBLE), ("o", Stitch.BO))),
    (
        "k",
        (
            ("tbl", Stitch.KTBL),
            ("bf", Stitch.KBF),
            ("fb", Stitch.KFB),
            ("2tog", Stitch.K2TOG),
            ("", Stitch.K),
        ),
    ),
    (
        "m",
        (
            (" pwise", Stitch.M_PWISE),
            (" kwise", Stitch.M_KWISE),
            ("l", Stitch.ML),
            ("r", Stitch.MR),
        ),
    ),
    (
        "p",
        (
            ("tbl", Stitch.PTBL),
            ("bf", Stitch.PBF),
            ("fb", Stitch.PFB),
            ("2tog", Stitch.P2TOG),
            ("", Stitch.P),
        ),
    ),
    (
        "s",
        (
            ("l pwise", Stitch.SL_PWISE),
            ("l kwise", Stitch.SL_KWISE),
            ("sp", Stitch.SSP),
            ("sk", Stitch.SSK),
        ),
    ),
)

_UNPREFIXED: tuple[tuple[str, Stitch], ...] = (
    ("nostitch", Stitch.NO_STITCH),
    ("yo", Stitch.YO),
)


def _skip_space(text: str, pos: int) -> int:
    while pos < len(text) and text[pos] in _SPACE:
        pos += 1
    return pos


def _match_stitch(text: str, pos: int) -> tuple[Stitch, int] | None:
    """Match one stitch name at ``pos``, trying prefix groups in order."""
    for prefix, alternatives in _PREFIXED:
        if not text.startswith(prefix, pos):
            continue
        rest = pos + len(prefix)
        for suffix, stitch in alternatives:
            if text.startswith(suffix, rest):
                return stitch, rest + len(suffix)
    for name, stitch in _UNPREFIXED:
        if text.startswith(name, pos):
            return stitch, pos + len(name)
    return None


def _multiplier(text: str, pos: int) -> tuple[int, int] | None:
    if not text.startswith("x", pos):
        return None
    end = pos + 1
    while end < len(text) and text[end] in _DIGITS:
        end += 1
    if end == pos + 1:
        return None
    return int(text[pos + 1 : end]), end


def _optional_multiplier(text: str, pos: int) -> tuple[int, int]:
    """Return (count, offset); count is 1 when no multiplier is present."""
    found = _multiplier(text, pos)
    if found is None:
        return 1, pos
    count, pos = found
    return count, _skip_space(text, pos)


def _stitch_token(text: str, pos: int) -> tuple[list[Stitch], int] | None:
    pos = _skip_space(text, pos)
    matched = _match_stitch(text, pos)
    if matched is None:
        return None
    stitch, pos = matched
    pos = _skip_space(text, pos)
    count, pos = _optional_multiplier(text, pos)
    return [stitch] * count, pos


def _group(text: str, pos: int) -> tuple[list[Stitch], int] | None:
    """
    Parse a parenthesized group starting at ``pos``, nested to any depth.

    Open groups are kept on an explicit stack, one token list per level. A
    failure at any depth leaves every enclosing group without its ``)``, so
    the whole outermost group fails and consumes nothing.
    """
    pos = _skip_space(text, pos)
    if not text.startswith("(", pos):
        return None
    stack: list[list[Stitch]] = [[]]
    pos += 1
    at_list_start = True
    while True:
        start = _skip_space(text, pos)
        if text.startswith("(", start):
            stack.append([])
            pos = start + 1
            at_list_start = True
            continue

        token = _stitch_token(text, pos)
        if token is not None:
            parsed, pos = token
            stack[-1].extend(parsed)
            if text.startswith(",", pos):
                pos += 1
                at_list_start = False
                continue
        elif not at_list_start:
            # Element missing after a comma.
            return None

        # Close groups until one is followed by a comma.
        while True:
            pos = _skip_space(text, pos)
            if not text.startswith(")", pos):
                return None
            pos = _skip_space(text, pos + 1)
            count, pos = _optional_multiplier(text, pos)
            body = stack.pop() * count
            if not stack:
                return body, pos
            stack[-1].extend(body)
            if text.startswith(",", pos):
                pos += 1
                at_list_start = False
                break


def _element(text: str, pos: int) -> tuple[list[Stitch], int] | None:
    return _group(text, pos) or _stitch_token(text, pos)


def _group_list(text: str, pos: int) -> tuple[list[Stitch], int]:
    """
    Parse comma-separated elements starting at ``pos``.

    Never fails: stops before the first comma whose following element does not
    parse (or at ``pos`` itself if the first element does not parse), leaving
    that text for the caller to report.
    """
    stitches: list[Stitch] = []
    first = _element(text, pos)
    if first is None:
        return stitches, pos
    parsed, pos = first
    stitches.extend(parsed)

    while text.startswith(",", pos):
        following = _element(text, pos + 1)
        if following is None:
            break
        parsed, pos = following
        stitches.extend(parsed)
    return stitches, pos


def parse_line(text: str, line_number: int) -> list[Stitch]:
    """
    Parse one stitch line into its fully expanded token list.

    Raises ParseError with an InvalidSyntaxRange covering everything from the
    point parsing stopped through the end of ``text``.

    >>> parse_line("k, (p, yo) x2", 1)
    [<Stitch.K: 'k'>, <Stitch.P: 'p'>, <Stitch.YO: 'yo'>, <Stitch.P: 'p'>, <Stitch.YO: 'yo'>]
    """
    stitches, pos = _group_list(text, 0)
    if _skip_space(text, pos) != len(text):
        raise syntax_error(text, text[pos:], line_number)
    return stitches
