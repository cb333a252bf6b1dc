from __future__ import annotations

from vigcrack.classical.common import parse_shift, shift_char, shift_text
from vigcrack.core.registry import register_plugin
from vigcrack.core.results import CaesarShiftResult
from vigcrack.core.scoring import (
    ReferenceFrequencies,
    chi_squared,
    get_reference_frequencies,
    observed_percentages,
)
from vigcrack.core.utils import normalize_az


def caesar_shift(text: str, shift: int) -> str:
    """Shift letters by -25..25 (uppercased); everything else passes through."""
    return shift_text(text, parse_shift(shift))


def unshift_column(column: str, shift: int) -> str:
    return "".join(shift_char(ch, -shift) for ch in column)


# ----------------------------
# Column breaker
# ----------------------------


def score_shift(column: str, shift: int, reference: ReferenceFrequencies | None = None) -> CaesarShiftResult:
    """Chi-squared of the column after undoing 'shift', against the reference table."""
    ref = reference or get_reference_frequencies()
    az = normalize_az(column)
    observed = observed_percentages(unshift_column(az, shift))
    return CaesarShiftResult(chi_squared=chi_squared(observed, ref.percentages), shift=shift)


def rank_shifts(column: str, reference: ReferenceFrequencies | None = None) -> list[CaesarShiftResult]:
    """All 26 shifts, best (lowest chi-squared) first; equal scores keep ascending shift order."""
    ref = reference or get_reference_frequencies()
    return sorted(score_shift(column, s, ref) for s in range(26))


def break_caesar_column(column: str, reference: ReferenceFrequencies | None = None) -> CaesarShiftResult:
    """
    Recover the shift of a single Caesar-enciphered column.

    Every shift 0..25 is undone in turn and the resulting letter distribution is compared
    with the reference table. The first shift reaching the minimum chi-squared wins.
    """
    ref = reference or get_reference_frequencies()
    best: CaesarShiftResult | None = None
    for s in range(26):
        r = score_shift(column, s, ref)
        if best is None or r.chi_squared < best.chi_squared:
            best = r
    return best


class CaesarCipher:
    name = "caesar"

    def encrypt(self, plaintext: str, key: str) -> str:
        return caesar_shift(plaintext, parse_shift(key))

    def decrypt(self, ciphertext: str, key: str) -> str:
        return caesar_shift(ciphertext, -parse_shift(key))


register_plugin(CaesarCipher())
