"""
Tests for core/natural.py — digit-aware comparison used by NATURAL ordering.
"""
import pytest
from filesorter.core.natural import natural_compare, natural_form, compare_natural_forms, is_ignorable


def sign(value: int) -> int:
    return (value > 0) - (value < 0)


class TestNumericRuns:
    """Digit runs compare by magnitude."""

    def test_smaller_number_first(self):
        assert natural_compare("file2", "file10") < 0
        assert natural_compare("file10", "file2") > 0

    def test_same_length_numbers_first_difference_wins(self):
        assert natural_compare("file12", "file13") < 0
        assert natural_compare("v1.10", "v1.9") > 0

    def test_number_followed_by_text(self):
        assert natural_compare("a2b", "a10a") < 0
        assert natural_compare("file2a", "file2b") < 0

    def test_leading_zero_compares_left_aligned(self):
        """Runs starting with zero behave like decimal fractions."""
        assert natural_compare("01", "1") < 0
        assert natural_compare("001", "01") < 0
        assert natural_compare("x08", "x7") < 0

    def test_equal_numbers_continue_with_rest(self):
        assert natural_compare("12", "12a") < 0
        assert natural_compare("page7-end", "page7-end") == 0

    def test_sorted_with_comparator(self):
        from functools import cmp_to_key
        values = ["file2", "file10", "file1", "file20", "file3"]
        assert sorted(values, key=cmp_to_key(natural_compare)) == ["file1", "file2", "file3", "file10", "file20"]

    def test_non_ascii_digits_are_plain_characters(self):
        """Only ASCII 0-9 start a numeric run."""
        assert natural_compare("a\u0663", "a3") > 0


class TestIgnoredCharacters:
    """Whitespace, control and zero-width characters carry no weight."""

    def test_zero_width_space(self):
        assert natural_compare("a\u200bb", "ab") == 0

    @pytest.mark.parametrize("ch", ["\u200b", "\u200c", "\u200d", "\ufeff", " ", "\t", "\n", "\x00", "\x7f"])
    def test_each_ignored_character(self, ch):
        assert is_ignorable(ch)
        assert natural_compare(f"x{ch}y", "xy") == 0

    def test_visible_characters_are_not_ignored(self):
        assert not is_ignorable("a")
        assert not is_ignorable("_")
        assert not is_ignorable("\u00ad")  # soft hyphen is a format char, not Cc

    def test_ignored_characters_do_not_split_numbers(self):
        assert natural_compare("1 000", "1000") == 0
        assert natural_compare("file 1\u200b0", "file9") > 0

    def test_only_ignored_characters_equals_empty(self):
        assert natural_compare(" \t\ufeff", "") == 0


class TestCaseHandling:
    """Case-sensitive codepoint order versus full lowercase expansion."""

    def test_sensitive_compares_codepoints(self):
        assert natural_compare("B", "a", sensitive=True) < 0

    def test_insensitive_folds(self):
        assert natural_compare("B", "a", sensitive=False) > 0
        assert natural_compare("FILE10", "file10", sensitive=False) == 0

    def test_multi_character_lowercase_expansion(self):
        """'İ' lowercases to 'i' plus a combining dot, two codepoints."""
        assert natural_form("İ", sensitive=False) == "i\u0307"
        assert natural_compare("İx", "i\u0307x", sensitive=False) == 0
        assert natural_compare("İx", "i\u0307x", sensitive=True) != 0

    def test_expanded_sequences_of_different_length(self):
        assert natural_compare("İ", "i", sensitive=False) > 0
        assert natural_compare("i", "İ", sensitive=False) < 0


class TestBoundaries:
    """Prefixes, empty values and symmetry."""

    def test_prefix_is_smaller(self):
        assert natural_compare("abc", "abcd") < 0
        assert natural_compare("abcd", "abc") > 0

    def test_empty(self):
        assert natural_compare("", "") == 0
        assert natural_compare("", "a") < 0

    @pytest.mark.parametrize("left,right", [
        ("file2", "file10"), ("a01", "a1"), ("X", "x"), ("img 3", "img3b"), ("", "0"),
    ])
    def test_antisymmetric(self, left, right):
        for sensitive in (True, False):
            assert sign(natural_compare(left, right, sensitive)) == -sign(natural_compare(right, left, sensitive))

    def test_forms_compare_like_raw_values(self):
        left, right = "Track 02", "track1"
        assert compare_natural_forms(natural_form(left, False), natural_form(right, False)) == \
            natural_compare(left, right, False)
