from __future__ import annotations

import logging

from .errors import InvalidArgumentError
from .results import FrequencyReport, IocScan, KeyLengthHypothesis, LetterFrequency
from .scoring import ALPHABET, letter_counts
from .utils import index_of_coincidence_az, normalize_az, split_columns

logger = logging.getLogger(__name__)

# English-like columns sit around 0.065-0.070, a wrong split drifts toward 1/26 (~0.038)
ENGLISH_IOC = 0.0667
RANDOM_IOC = 0.0385

MAX_KEY_LENGTH = 50


def check_threshold(threshold: float) -> float:
    if not 0.0 <= threshold <= 1.0:
        raise InvalidArgumentError(f"IoC threshold must be within 0..1 (got {threshold}).")
    return threshold


def average_ioc(az: str, key_length: int) -> float:
    """Mean IoC over the key_length columns; columns shorter than 2 count as 0."""
    cols = split_columns(az, key_length)
    return sum(index_of_coincidence_az(col) for col in cols) / key_length


def ioc_scan(text: str, max_length: int = 15) -> IocScan:
    """
    Score every candidate key length 1..max_length by average column IoC.

    The best hypothesis is the highest score; on equal scores the shorter length wins.
    """
    if not 1 <= max_length <= MAX_KEY_LENGTH:
        raise InvalidArgumentError(f"max key length must be in 1..{MAX_KEY_LENGTH} (got {max_length}).")

    az = normalize_az(text)
    hypotheses = tuple(
        KeyLengthHypothesis(length=k, avg_ic=average_ioc(az, k)) for k in range(1, max_length + 1)
    )

    best = hypotheses[0]
    for h in hypotheses[1:]:
        if h.avg_ic > best.avg_ic:
            best = h

    logger.debug("ioc scan 1..%d: best k=%d avg_ic=%.5f", max_length, best.length, best.avg_ic)
    return IocScan(hypotheses=hypotheses, best=best, has_letters=len(az) >= 2)


def letter_frequencies(text: str) -> FrequencyReport:
    """
    Letter counts and percentages for A-Z (case-folded); other characters are ignored.
    Only letters that appear are listed, most common first.
    """
    counts = letter_counts(text)
    total = sum(counts)
    freqs = [
        LetterFrequency(letter=ch, count=c, percentage=c * 100.0 / total)
        for ch, c in zip(ALPHABET, counts)
        if c > 0
    ]
    freqs.sort(key=lambda f: (-f.count, f.letter))
    return FrequencyReport(total=total, counts=tuple(counts), frequencies=tuple(freqs))
