from __future__ import annotations

import logging
from collections import defaultdict

from .errors import InvalidArgumentError
from .results import NGramOccurrence

logger = logging.getLogger(__name__)


def find_repeated_ngrams(text: str, n: int) -> dict[str, NGramOccurrence]:
    """
    Index every length-n substring of an A-Z text by its start positions and keep
    only the ones seen at least twice.

    Example: "ABCXABC" with n=3 -> {"ABC": positions (0, 4)}

    The result is keyed in ascending sequence order.
    """
    if n < 2:
        raise InvalidArgumentError(f"n-gram length must be >= 2 (got {n}).")

    pos_map: dict[str, list[int]] = defaultdict(list)
    # range() is empty when the text is shorter than n
    for i in range(len(text) - n + 1):
        pos_map[text[i:i + n]].append(i)

    repeated = {
        seq: NGramOccurrence(sequence=seq, positions=tuple(positions))
        for seq, positions in sorted(pos_map.items())
        if len(positions) >= 2
    }
    logger.debug("n=%d: %d distinct, %d repeated", n, len(pos_map), len(repeated))
    return repeated
