import pytest

from vigcrack.core.errors import ErrorKind, InvalidArgumentError
from vigcrack.core.utils import (
    gcd,
    gcd_of,
    index_of_coincidence_az,
    interleave_columns,
    normalize_az,
    split_columns,
)


def test_normalize_strips_and_uppercases():
    assert normalize_az("Hello, World! 123") == "HELLOWORLD"
    assert normalize_az("") == ""
    assert normalize_az(None) == ""
    assert normalize_az("1234 !?") == ""


def test_gcd_basics():
    assert gcd(12, 18) == 6
    assert gcd(18, 12) == 6
    assert gcd(7, 0) == 7
    assert gcd_of([12, 18, 30]) == 6


def test_gcd_of_empty_is_sentinel_one():
    assert gcd_of([]) == 1
    assert gcd_of(iter(())) == 1


def test_ioc_all_same_letter():
    assert index_of_coincidence_az("AAAA") == 1.0


def test_ioc_short_columns_are_zero():
    assert index_of_coincidence_az("") == 0.0
    assert index_of_coincidence_az("Q") == 0.0
    assert index_of_coincidence_az("q!!") == 0.0


def test_ioc_formula():
    # A:2 B:1 C:1 -> 2*1 / (4*3)
    assert index_of_coincidence_az("ABCA") == pytest.approx(2 / 12)


@pytest.mark.parametrize("length", range(1, 21))
def test_split_then_interleave_reconstructs(length):
    text = normalize_az("Splitting by position modulo L must be lossless, for every L.")
    cols = split_columns(text, length)
    assert len(cols) == length
    assert interleave_columns(cols) == text
    sizes = [len(c) for c in cols]
    assert max(sizes) - min(sizes) <= 1
    assert sum(sizes) == len(text)


def test_split_columns_layout():
    assert split_columns("ABCDEFG", 3) == ("ADG", "BE", "CF")
    assert split_columns("", 3) == ("", "", "")
    assert interleave_columns(("", "", "")) == ""


def test_split_columns_rejects_zero():
    with pytest.raises(InvalidArgumentError) as exc:
        split_columns("ABC", 0)
    assert exc.value.kind is ErrorKind.INVALID_ARGUMENT
