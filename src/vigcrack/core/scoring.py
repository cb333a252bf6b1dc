from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from importlib import resources
from typing import Sequence

from .errors import InvalidArgumentError
from .utils import normalize_az

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"


@dataclass(frozen=True)
class ReferenceFrequencies:
    """Expected letter frequencies (percentages, A..Z) of the target language."""

    percentages: tuple[float, ...]

    def __post_init__(self) -> None:
        if len(self.percentages) != 26:
            raise InvalidArgumentError(
                f"Reference table needs 26 entries, got {len(self.percentages)}."
            )
        if any(p <= 0 for p in self.percentages):
            raise InvalidArgumentError("Reference frequencies must all be strictly positive.")
        object.__setattr__(self, "percentages", tuple(float(p) for p in self.percentages))

    @classmethod
    def from_package_data(cls, filename: str = "english_frequencies.txt") -> "ReferenceFrequencies":
        pkg = "vigcrack.data"
        text = resources.files(pkg).joinpath(filename).read_text(encoding="utf-8")
        return cls.from_text(text)

    @classmethod
    def from_text(cls, text: str) -> "ReferenceFrequencies":
        """
        Parse lines like "E 13.0" (also "E=13.0" or "E,13.0"). '#' starts a comment.
        """
        vals: dict[str, float] = {}
        for raw in text.splitlines():
            line = raw.split("#", 1)[0].strip()
            if not line:
                continue

            line = line.replace("=", " ").replace(",", " ")
            parts = line.split()
            if len(parts) < 2:
                continue

            letter = parts[0].strip().upper()
            if len(letter) != 1 or letter not in ALPHABET:
                continue

            try:
                vals[letter] = float(parts[1])
            except ValueError as e:
                raise InvalidArgumentError(f"Bad frequency value on line: {raw!r}") from e

        missing = [ch for ch in ALPHABET if ch not in vals]
        if missing:
            raise InvalidArgumentError(f"Reference table is missing letters: {''.join(missing)}")

        return cls(percentages=tuple(vals[ch] for ch in ALPHABET))

    def __getitem__(self, letter: str) -> float:
        return self.percentages[ALPHABET.index(letter.upper())]


_REFERENCE: ReferenceFrequencies | None = None


def get_reference_frequencies() -> ReferenceFrequencies:
    """Load cached reference table from vigcrack.data/english_frequencies.txt."""
    global _REFERENCE
    if _REFERENCE is None:
        _REFERENCE = ReferenceFrequencies.from_package_data()
    return _REFERENCE


def letter_counts(az_text: str) -> list[int]:
    """26-slot count array, A..Z."""
    counts = Counter(normalize_az(az_text))
    return [counts.get(ch, 0) for ch in ALPHABET]


def observed_percentages(az_text: str) -> list[float]:
    """Per-letter percentages (0..100); all zero for empty text."""
    counts = letter_counts(az_text)
    total = sum(counts)
    if total == 0:
        return [0.0] * 26
    return [c * 100.0 / total for c in counts]


def chi_squared(observed: Sequence[float], expected: Sequence[float]) -> float:
    """Lower is better. Expected values come from a table with no zero entries."""
    chi2 = 0.0
    for o, e in zip(observed, expected):
        diff = o - e
        chi2 += diff * diff / e
    return chi2
