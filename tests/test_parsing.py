"""
Unit tests for the flexible amount parser.
"""

import pytest

from lakhmil.services.parsing import parse_amount, split_suffix, normalize


class TestSuffixes:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1Cr", 1e7),
            ("1.5cr", 1.5e7),
            ("50L", 5e6),
            ("2.3B", 2.3e9),
            ("2billion", 2e9),
            ("1.5M", 1.5e6),
            ("3million", 3e6),
            ("10K", 1e4),
            ("5thousand", 5e3),
            ("300000", 3e5),
        ],
    )
    def test_multipliers(self, raw, expected):
        assert parse_amount(raw) == pytest.approx(expected)

    def test_lakh_long_form(self):
        # first "L" is removed, "AKH" is ignored as trailing garbage
        assert parse_amount("50lakh") == pytest.approx(5e6)

    def test_whitespace_anywhere_is_ignored(self):
        assert parse_amount("  1 . 5 C r ") == pytest.approx(1.5e7)
        assert parse_amount("50\tL") == pytest.approx(5e6)

    def test_crore_checked_before_lakh(self):
        assert split_suffix("2CR") == ("2", 1e7)

    def test_mil_ending_in_l_reads_as_lakh(self):
        # "100MIL" ends with "L", which is checked before the million forms
        assert parse_amount("100Mil") == pytest.approx(1e7)
        assert parse_amount("2BIL") == pytest.approx(2e5)

    def test_only_one_suffix_consulted(self):
        # ends in K; "M" stays in the number text and stops the float parse
        assert parse_amount("1MK") == pytest.approx(1e3)


class TestNumberPart:
    def test_exponent_literal(self):
        assert parse_amount("1e3") == pytest.approx(1000)

    def test_trailing_garbage_ignored(self):
        assert parse_amount("12abc") == pytest.approx(12)

    def test_leading_dot(self):
        assert parse_amount(".5L") == pytest.approx(5e4)

    def test_normalize(self):
        assert normalize(" 1.2 cr ") == "1.2CR"


class TestNeverFails:
    @pytest.mark.parametrize("raw", ["", "   ", "abc", "CR", "L", "K", "-", ".", "e5"])
    def test_unreadable_is_zero(self, raw):
        assert parse_amount(raw) == 0

    def test_none_is_zero(self):
        assert parse_amount(None) == 0  # type: ignore[arg-type]

    @pytest.mark.parametrize("raw", ["١٠L", "１０K", "१Cr"])
    def test_non_ascii_digits_are_unreadable(self, raw):
        assert parse_amount(raw) == 0

    def test_negative_is_zero(self):
        assert parse_amount("-5L") == 0

    def test_overflow_is_zero(self):
        assert parse_amount("1e400") == 0
        assert parse_amount("1e302CR") == 0

    def test_zero(self):
        assert parse_amount("0") == 0
        assert parse_amount("-0") == 0
