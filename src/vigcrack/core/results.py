from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional


@dataclass(frozen=True)
class NGramOccurrence:
    sequence: str
    positions: tuple[int, ...]  # strictly increasing, at least two entries

    @property
    def distances(self) -> tuple[int, ...]:
        """All forward distances positions[j] - positions[i] for i < j."""
        p = self.positions
        return tuple(p[j] - p[i] for i in range(len(p)) for j in range(i + 1, len(p)))

    def to_dict(self) -> dict[str, Any]:
        return {
            "sequence": self.sequence,
            "positions": list(self.positions),
            "distances": list(self.distances),
        }


@dataclass(frozen=True)
class DistanceReport:
    n: int
    occurrences: tuple[NGramOccurrence, ...]
    distances: tuple[int, ...]
    gcd: int
    # (distance, count), count descending then distance ascending
    histogram: tuple[tuple[int, int], ...]

    @property
    def has_evidence(self) -> bool:
        # gcd == 1 on an empty distance set is a sentinel, not a divisor
        return bool(self.distances)

    def top(self, limit: int = 10) -> tuple[tuple[int, int], ...]:
        return self.histogram[:limit]

    def to_dict(self) -> dict[str, Any]:
        return {
            "n": self.n,
            "occurrences": [o.to_dict() for o in self.occurrences],
            "gcd": self.gcd,
            "has_evidence": self.has_evidence,
            "histogram": [list(pair) for pair in self.histogram],
        }


@dataclass(frozen=True)
class KasiskiReport:
    reports: tuple[DistanceReport, ...]
    histogram: tuple[tuple[int, int], ...]

    def for_length(self, n: int) -> Optional[DistanceReport]:
        for r in self.reports:
            if r.n == n:
                return r
        return None

    def top(self, limit: int = 10) -> tuple[tuple[int, int], ...]:
        return self.histogram[:limit]

    def to_dict(self) -> dict[str, Any]:
        return {
            "reports": [r.to_dict() for r in self.reports],
            "histogram": [list(pair) for pair in self.histogram],
        }


# average column IoC above this marks a key length as likely
LIKELY_THRESHOLD = 0.060


@dataclass(frozen=True)
class KeyLengthHypothesis:
    length: int
    avg_ic: float


@dataclass(frozen=True)
class IocScan:
    hypotheses: tuple[KeyLengthHypothesis, ...]  # ascending by length
    best: Optional[KeyLengthHypothesis]
    has_letters: bool = True

    def likely(self, threshold: float = LIKELY_THRESHOLD) -> tuple[KeyLengthHypothesis, ...]:
        return tuple(h for h in self.hypotheses if h.avg_ic > threshold)

    def ranked(self) -> list[KeyLengthHypothesis]:
        return sorted(self.hypotheses, key=lambda h: (-h.avg_ic, h.length))

    def to_dict(self) -> dict[str, Any]:
        return {
            "hypotheses": [(h.length, h.avg_ic) for h in self.hypotheses],
            "best": None if self.best is None else (self.best.length, self.best.avg_ic),
            "has_letters": self.has_letters,
        }


@dataclass(frozen=True, order=True)
class CaesarShiftResult:
    # field order makes the dataclass ordering (chi_squared, shift): best first, lowest shift on ties
    chi_squared: float
    shift: int

    @property
    def letter(self) -> str:
        return chr(ord("A") + self.shift)


@dataclass(frozen=True)
class RecoveredKey:
    key: str
    shifts: tuple[CaesarShiftResult, ...] = field(default=())

    @property
    def length(self) -> int:
        return len(self.key)

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True)
class LetterFrequency:
    letter: str
    count: int
    percentage: float


@dataclass(frozen=True)
class FrequencyReport:
    total: int
    counts: tuple[int, ...]  # 26 slots, A..Z
    frequencies: tuple[LetterFrequency, ...]  # letters that appear, most common first

    @property
    def has_letters(self) -> bool:
        return self.total > 0

    def to_dict(self) -> dict[str, Any]:
        return {
            "total": self.total,
            "frequencies": [
                {"letter": f.letter, "count": f.count, "percentage": round(f.percentage, 2)}
                for f in self.frequencies
            ],
        }


@dataclass(frozen=True)
class AttackReport:
    ciphertext: str
    kasiski: KasiskiReport
    ioc: IocScan
    key_length: Optional[int] = None
    recovered: Optional[RecoveredKey] = None
    plaintext: Optional[str] = None
    manual_key: Optional[str] = None
    manual_plaintext: Optional[str] = None

    def to_dict(self) -> dict[str, Any]:
        return {
            "ciphertext": self.ciphertext,
            "kasiski": self.kasiski.to_dict(),
            "ioc": self.ioc.to_dict(),
            "key_length": self.key_length,
            "key": None if self.recovered is None else self.recovered.key,
            "plaintext": self.plaintext,
            "manual_key": self.manual_key,
            "manual_plaintext": self.manual_plaintext,
        }
