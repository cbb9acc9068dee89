"""Tests for knitting_parse.pattern.assembler: symmetric padding into a rectangle."""

import pytest

from knitting_parse.catalog import Stitch, line_width
from knitting_parse.errors import InvalidStitchCount, ParseError
from knitting_parse.pattern.assembler import Pattern, Row, assemble
from knitting_parse.pattern.options import Options
from knitting_parse.pattern.side import Side

K, P, NO = Stitch.K, Stitch.P, Stitch.NO_STITCH


def _numbered(*lines):
    return [(list(line), n) for n, line in enumerate(lines, start=1)]


class TestPadding:
    def test_pads_narrow_line_on_both_sides(self):
        pattern = assemble(_numbered([K] * 5, [K] * 7))
        assert pattern.lines == (
            (NO, K, K, K, K, K, NO),
            (K,) * 7,
        )
        assert pattern.width == 7

    def test_equal_lines_untouched(self):
        pattern = assemble(_numbered([K, P], [P, K]))
        assert pattern.lines == ((K, P), (P, K))

    def test_stitch_widths_not_counts(self):
        """Four single stitches and two 2-wide cables are the same width."""
        pattern = assemble(_numbered([K] * 4, [Stitch.LCF1, Stitch.RCB1]))
        assert pattern.lines == ((K, K, K, K), (Stitch.LCF1, Stitch.RCB1))

    def test_wide_stitch_sets_pattern_width(self):
        pattern = assemble(_numbered([K, K], [Stitch.LCF4]))
        assert pattern.width == 8
        assert pattern.lines[0] == (NO, NO, NO, K, K, NO, NO, NO)

    def test_empty_line_is_padded_fully(self):
        pattern = assemble(_numbered([], [K, K]))
        assert pattern.lines[0] == (NO, NO)

    def test_no_lines(self):
        pattern = assemble([])
        assert pattern.lines == ()
        assert pattern.width == 0

    def test_input_lines_not_modified(self):
        line = [K, K, K]
        assemble([(line, 1), ([K] * 5, 2)])
        assert line == [K, K, K]

    @pytest.mark.parametrize(
        "widths",
        [[1], [3, 5, 7], [8, 2, 4, 6], [0, 0], [9, 1, 5, 3, 7]],
    )
    def test_every_line_has_pattern_width(self, widths):
        pattern = assemble(_numbered(*[[K] * w for w in widths]))
        assert pattern.width == max(widths)
        for line in pattern.lines:
            assert line_width(line) == pattern.width


class TestOddDeficit:
    def test_odd_deficit_fails_with_line_width(self):
        with pytest.raises(ParseError) as excinfo:
            assemble(_numbered([K] * 6, [K] * 7))
        assert excinfo.value.error_type == InvalidStitchCount(6)
        assert excinfo.value.line_number == 1

    def test_error_uses_source_line_number(self):
        lines = [([K] * 7, 3), ([K] * 5, 4), ([K] * 4, 9)]
        with pytest.raises(ParseError) as excinfo:
            assemble(lines)
        assert excinfo.value.error_type == InvalidStitchCount(4)
        assert excinfo.value.line_number == 9

    def test_first_offending_line_reported(self):
        lines = [([K] * 2, 1), ([K] * 3, 2), ([K] * 7, 3)]
        with pytest.raises(ParseError) as excinfo:
            assemble(lines)
        assert excinfo.value.error_type == InvalidStitchCount(2)
        assert excinfo.value.line_number == 1


class TestOptionsCarried:
    def test_defaults(self):
        pattern = assemble(_numbered([K]))
        assert pattern.first_line_number == 1
        assert pattern.starting_side is Side.RS
        assert pattern.in_round is False

    def test_options_copied_onto_pattern(self):
        opts = Options(first_line_number=5, starting_side=Side.WS, in_round=True)
        pattern = assemble(_numbered([K]), opts)
        assert pattern.first_line_number == 5
        assert pattern.starting_side is Side.WS
        assert pattern.in_round is True


class TestPattern:
    def test_is_frozen(self):
        pattern = assemble(_numbered([K]))
        with pytest.raises(AttributeError):
            pattern.width = 3

    def test_rejects_non_rectangular_lines(self):
        with pytest.raises(ValueError, match="pattern width"):
            Pattern(lines=((K,), (K, K)), width=2)

    def test_rows_alternate_sides_flat(self):
        pattern = assemble(_numbered([K], [P], [K]), Options(first_line_number=3))
        assert list(pattern.rows()) == [
            Row(number=3, side=Side.RS, stitches=(K,)),
            Row(number=4, side=Side.WS, stitches=(P,)),
            Row(number=5, side=Side.RS, stitches=(K,)),
        ]

    def test_rows_keep_side_in_round(self):
        pattern = assemble(_numbered([K], [K], [K]), Options(in_round=True))
        assert [row.side for row in pattern.rows()] == [Side.RS] * 3

    def test_rows_start_wrong_side(self):
        pattern = assemble(_numbered([K], [K]), Options(starting_side=Side.WS))
        assert [row.side for row in pattern.rows()] == [Side.WS, Side.RS]
