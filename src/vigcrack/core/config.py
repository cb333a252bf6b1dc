from __future__ import annotations

from dataclasses import dataclass, field

from .errors import InvalidArgumentError
from .features import MAX_KEY_LENGTH, check_threshold
from .results import LIKELY_THRESHOLD
from .scoring import ReferenceFrequencies, get_reference_frequencies


@dataclass(frozen=True)
class AttackConfig:
    # longest first: tetragram repeats are the more reliable evidence
    ngram_lengths: tuple[int, ...] = (4, 3)
    max_key_length: int = 15
    likely_threshold: float = LIKELY_THRESHOLD
    top_distances: int = 10
    max_listed_ngrams: int = 10
    reference: ReferenceFrequencies = field(default_factory=get_reference_frequencies)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ngram_lengths", tuple(self.ngram_lengths))
        if not self.ngram_lengths:
            raise InvalidArgumentError("At least one n-gram length is required.")
        if any(n < 2 for n in self.ngram_lengths):
            raise InvalidArgumentError(f"n-gram lengths must be >= 2 (got {self.ngram_lengths}).")
        if not 1 <= self.max_key_length <= MAX_KEY_LENGTH:
            raise InvalidArgumentError(
                f"max key length must be in 1..{MAX_KEY_LENGTH} (got {self.max_key_length})."
            )
        check_threshold(self.likely_threshold)
        if self.top_distances < 0 or self.max_listed_ngrams < 0:
            raise InvalidArgumentError("Listing limits must not be negative.")
