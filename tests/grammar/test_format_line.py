"""Tests for knitting_parse.grammar.format: canonical text output."""

import pytest

from knitting_parse.catalog.types import Stitch
from knitting_parse.grammar import format_line, parse_line


class TestFormatLine:
    def test_single(self):
        assert format_line([Stitch.K]) == "k"

    def test_empty(self):
        assert format_line([]) == ""

    def test_runs_are_collapsed(self):
        assert format_line([Stitch.K, Stitch.K, Stitch.K, Stitch.P]) == "k x3, p"

    def test_non_adjacent_repeats_are_kept_apart(self):
        assert format_line([Stitch.K, Stitch.P, Stitch.K]) == "k, p, k"

    def test_names_with_spaces(self):
        assert format_line([Stitch.SL_PWISE, Stitch.M_KWISE]) == "sl pwise, m kwise"

    def test_accepts_tuple(self):
        assert format_line((Stitch.LCF2, Stitch.LCF2)) == "2lcf x2"


class TestCanonicalRoundTrip:
    @pytest.mark.parametrize(
        "text",
        [
            "k, k2tog",
            "(k, (p, k) x2) x2",
            "sl kwise, m pwise x3, (yo, ssk) x4, 4rcb",
            "  ( k , p )x2 , bobble ,bead",
            "nostitch, 1lcf, (2rcb, (3lcf x0, kfb)) x2",
            "",
        ],
    )
    def test_reparsing_canonical_text_gives_same_tokens(self, text):
        tokens = parse_line(text, 1)
        assert parse_line(format_line(tokens), 1) == tokens

    def test_canonical_text_is_stable(self):
        once = format_line(parse_line("(k, p) x2, p, p", 1))
        twice = format_line(parse_line(once, 1))
        assert once == twice == "k, p, k, p x3"
