from __future__ import annotations

import re
from collections import Counter
from typing import Iterable, Sequence

from .errors import InvalidArgumentError

_AZ_ONLY_RE = re.compile(r"[^A-Z]+")


def normalize_az(s: str) -> str:
    """Keep only A-Z, uppercase. Order is preserved, nothing is inserted for dropped characters."""
    if s is None:
        return ""
    s = f"{s}".upper()
    return _AZ_ONLY_RE.sub("", s)


def index_of_coincidence_az(s: str) -> float:
    """IoC for A-Z only; returns 0.0 if too short."""
    s = normalize_az(s)
    n = len(s)
    if n < 2:
        return 0.0
    counts = Counter(s)
    num = sum(c * (c - 1) for c in counts.values())
    den = n * (n - 1)
    return num / den


def split_columns(text: str, length: int) -> tuple[str, ...]:
    """
    Partition text into `length` interleaved columns: character i goes to column i % length.
    Column lengths differ by at most one.
    """
    if length < 1:
        raise InvalidArgumentError(f"Column count must be >= 1 (got {length}).")
    return tuple(text[i::length] for i in range(length))


def interleave_columns(columns: Sequence[str]) -> str:
    """Inverse of split_columns()."""
    if not columns:
        return ""
    width = len(columns)
    total = sum(len(c) for c in columns)
    return "".join(columns[i % width][i // width] for i in range(total))


def gcd(a: int, b: int) -> int:
    # Euclid: keep taking remainders until one hits zero
    while b != 0:
        a, b = b, a % b
    return a


def gcd_of(numbers: Iterable[int]) -> int:
    """GCD of all numbers. An empty collection gives 1, meaning 'no evidence', not a real factor."""
    it = iter(numbers)
    try:
        result = next(it)
    except StopIteration:
        return 1
    for x in it:
        result = gcd(result, x)
    return result
