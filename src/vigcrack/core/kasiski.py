from __future__ import annotations

import logging
from collections import Counter
from typing import Iterable, Sequence

from .ngrams import find_repeated_ngrams
from .results import DistanceReport, KasiskiReport, NGramOccurrence
from .utils import gcd_of, normalize_az

logger = logging.getLogger(__name__)

# ----------------------------
# Distance factoring
# ----------------------------


def pairwise_distances(positions: Sequence[int]) -> list[int]:
    """
    Distances between every pair of repetitions, i < j.
    Positions [5, 12, 33] -> [7, 28, 21]
    """
    out = []
    for i in range(len(positions)):
        for j in range(i + 1, len(positions)):
            out.append(positions[j] - positions[i])
    return out


def _rank_histogram(counts: Counter) -> tuple[tuple[int, int], ...]:
    # most frequent first; equal counts ordered by the smaller distance
    return tuple(sorted(counts.items(), key=lambda kv: (-kv[1], kv[0])))


def factor_distances(occurrences: Iterable[NGramOccurrence], n: int = 0) -> DistanceReport:
    occs = tuple(occurrences)
    distances: list[int] = []
    for occ in occs:
        distances.extend(pairwise_distances(occ.positions))

    report = DistanceReport(
        n=n,
        occurrences=occs,
        distances=tuple(distances),
        gcd=gcd_of(distances),
        histogram=_rank_histogram(Counter(distances)),
    )
    logger.debug(
        "n=%d: %d repeated sequences, %d distances, gcd=%d",
        n, len(occs), len(distances), report.gcd,
    )
    return report


def merge_histograms(*reports: DistanceReport) -> tuple[tuple[int, int], ...]:
    merged: Counter = Counter()
    for r in reports:
        for dist, count in r.histogram:
            merged[dist] += count
    return _rank_histogram(merged)


# ----------------------------
# Kasiski examination
# ----------------------------


def kasiski_examination(text: str, ngram_lengths: Sequence[int] = (4, 3)) -> KasiskiReport:
    """
    Find repeated n-grams for each requested length (longest first by default, since
    tetragram repeats are far less likely to be accidental) and factor their distances.
    """
    az = normalize_az(text)
    reports = []
    for n in ngram_lengths:
        repeated = find_repeated_ngrams(az, n)
        reports.append(factor_distances(repeated.values(), n=n))

    return KasiskiReport(reports=tuple(reports), histogram=merge_histograms(*reports))
