import pytest

from vigcrack.classical.common import ALPHABET, parse_shift
from vigcrack.classical.monoalphabetic.caesar import (
    break_caesar_column,
    caesar_shift,
    rank_shifts,
    score_shift,
    unshift_column,
)
from vigcrack.core.errors import InvalidArgumentError
from vigcrack.core.scoring import get_reference_frequencies
from vigcrack.core.utils import normalize_az


def _synthetic_english() -> str:
    # letter counts proportional to the reference table
    ref = get_reference_frequencies()
    return "".join(ch * round(p * 100) for ch, p in zip(ALPHABET, ref.percentages))


def test_caesar_shift_keeps_non_letters():
    assert caesar_shift("abc xyz!", 3) == "DEF ABC!"
    assert caesar_shift("DEF ABC!", -3) == "ABC XYZ!"


def test_shift_zero_is_identity_on_columns():
    col = "QWERTYUIOPASDFGHJKLZXCVBNM"
    assert unshift_column(col, 0) == col
    assert caesar_shift(col, 0) == col


@pytest.mark.parametrize("raw", ["abc", "", "2.5", 26, -26])
def test_parse_shift_rejects_bad_input(raw):
    with pytest.raises(InvalidArgumentError):
        parse_shift(raw)


def test_break_synthetic_column_shift_five():
    column = caesar_shift(_synthetic_english(), 5)
    best = break_caesar_column(column)
    assert best.shift == 5
    assert best.letter == "F"

    ranked = rank_shifts(column)
    assert ranked[0].shift == 5
    assert ranked[0].chi_squared < ranked[1].chi_squared
    assert ranked[0].chi_squared < 0.01


def test_break_real_text(tale):
    column = normalize_az(caesar_shift(tale, 5))
    assert break_caesar_column(column).shift == 5
    assert break_caesar_column(normalize_az(tale)).shift == 0


def test_rank_shifts_covers_every_shift():
    ranked = rank_shifts("HELLOWORLD")
    assert sorted(r.shift for r in ranked) == list(range(26))
    chis = [r.chi_squared for r in ranked]
    assert chis == sorted(chis)


def test_empty_column_ties_resolve_to_shift_zero():
    # all 26 shifts see the same all-zero distribution
    best = break_caesar_column("")
    assert best.shift == 0
    assert best.letter == "A"
    assert best.chi_squared == pytest.approx(sum(get_reference_frequencies().percentages))


def test_score_shift_matches_rank():
    r = score_shift("KHOORZRUOG", 3)
    assert r.shift == 3
    assert r.chi_squared >= 0.0
