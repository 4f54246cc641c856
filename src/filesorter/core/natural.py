"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/natural.py
Natural ("human") string ordering: runs of digits compare by magnitude,
so "file2" sorts before "file10".

RULES
-----
• Whitespace, control characters (category Cc), U+200B..U+200D and U+FEFF
  are ignored on both sides. They do not split digit runs either:
  "1 000" compares like "1000".
• A digit run compares right-aligned (longer run is bigger, then the first
  differing digit decides) unless either side starts with "0", in which case
  runs compare left-aligned like decimal fractions ("01" < "1", "001" < "01").
• Case-insensitive comparison expands each character to its full lowercase
  form first ("İ" becomes two codepoints), then compares the expanded text.
"""
import unicodedata
from typing import Tuple

DIGITS = frozenset("0123456789")
ZERO_WIDTH = frozenset("\u200b\u200c\u200d\ufeff")


def is_ignorable(ch: str) -> bool:
    """True for characters that carry no weight in natural comparison."""
    return ch.isspace() or ch in ZERO_WIDTH or unicodedata.category(ch) == "Cc"


def natural_form(text: str, sensitive: bool = True) -> str:
    """
    Materialize the comparable form of `text`: case-folded if requested,
    with ignorable characters removed. Compute it once per value when the
    same text takes part in many comparisons.
    """
    if not sensitive:
        text = "".join(ch.lower() for ch in text)
    return "".join(ch for ch in text if not is_ignorable(ch))


def _sign(left: str, right: str) -> int:
    return -1 if left < right else 1


def _compare_right(left: str, i: int, right: str, j: int) -> Tuple[int, int, int]:
    # The longest run wins. Same length: the first differing digit decides,
    # remembered in bias until both runs are exhausted.
    bias = 0
    while True:
        l_digit = i < len(left) and left[i] in DIGITS
        r_digit = j < len(right) and right[j] in DIGITS
        if not l_digit and not r_digit:
            return bias, i, j
        if not l_digit:
            return -1, i, j
        if not r_digit:
            return 1, i, j
        if not bias and left[i] != right[j]:
            bias = _sign(left[i], right[j])
        i += 1
        j += 1


def _compare_left(left: str, i: int, right: str, j: int) -> Tuple[int, int, int]:
    # Left-aligned (fractional) runs: first difference wins.
    while True:
        l_digit = i < len(left) and left[i] in DIGITS
        r_digit = j < len(right) and right[j] in DIGITS
        if not l_digit and not r_digit:
            return 0, i, j
        if not l_digit:
            return -1, i, j
        if not r_digit:
            return 1, i, j
        if left[i] != right[j]:
            return _sign(left[i], right[j]), i, j
        i += 1
        j += 1


def compare_natural_forms(left: str, right: str) -> int:
    """
    Compare two values already passed through natural_form().
    Returns a negative number, zero or a positive number.
    """
    i = j = 0
    while i < len(left) and j < len(right):
        l, r = left[i], right[j]
        if l in DIGITS and r in DIGITS:
            if l == "0" or r == "0":
                result, i, j = _compare_left(left, i, right, j)
            else:
                result, i, j = _compare_right(left, i, right, j)
            if result:
                return result
            continue

        if l != r:
            return _sign(l, r)
        i += 1
        j += 1

    # Whichever side still has characters left is the bigger one
    return (i < len(left)) - (j < len(right))


def natural_compare(left: str, right: str, sensitive: bool = True) -> int:
    """Natural comparison of two raw strings."""
    return compare_natural_forms(natural_form(left, sensitive), natural_form(right, sensitive))
