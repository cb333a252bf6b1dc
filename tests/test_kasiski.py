import pytest

from vigcrack.classical.polyalphabetic.vigenere import vigenere_encrypt
from vigcrack.core.errors import InvalidArgumentError
from vigcrack.core.kasiski import (
    factor_distances,
    kasiski_examination,
    merge_histograms,
    pairwise_distances,
)
from vigcrack.core.ngrams import find_repeated_ngrams
from vigcrack.core.results import NGramOccurrence
from vigcrack.core.utils import normalize_az


def test_repeated_ngrams_keeps_only_repeats():
    found = find_repeated_ngrams("ABCXABCYABC", 3)
    assert list(found) == ["ABC"]
    assert found["ABC"].positions == (0, 4, 8)
    assert found["ABC"].distances == (4, 8, 4)


def test_repeated_ngrams_short_text_is_empty():
    assert find_repeated_ngrams("AB", 3) == {}
    assert find_repeated_ngrams("", 4) == {}


def test_repeated_ngrams_rejects_tiny_n():
    with pytest.raises(InvalidArgumentError):
        find_repeated_ngrams("AAAA", 1)


def test_repeated_ngrams_sorted_by_sequence():
    found = find_repeated_ngrams("XYZABXYZAB", 2)
    assert list(found) == sorted(found)
    assert all(len(o.positions) >= 2 for o in found.values())


def test_pairwise_distances():
    assert pairwise_distances([5, 12, 33]) == [7, 28, 21]
    assert pairwise_distances([3]) == []


def test_factor_distances_without_repeats_has_no_evidence():
    report = factor_distances([], n=4)
    assert report.gcd == 1
    assert not report.has_evidence
    assert report.histogram == ()


def test_histogram_ties_break_on_smaller_distance():
    occs = [
        NGramOccurrence("AAA", (0, 6)),
        NGramOccurrence("BBB", (1, 5)),
        NGramOccurrence("CCC", (2, 8)),
        NGramOccurrence("DDD", (3, 7)),
        NGramOccurrence("EEE", (4, 13)),
    ]
    report = factor_distances(occs, n=3)
    assert report.histogram == ((4, 2), (6, 2), (9, 1))
    assert report.gcd == 1
    assert report.has_evidence


def test_merge_histograms_sums_counts():
    a = factor_distances([NGramOccurrence("AAA", (0, 6, 12))], n=3)  # 6, 12, 6
    b = factor_distances([NGramOccurrence("BBBB", (1, 13))], n=4)  # 12
    assert merge_histograms(a, b) == ((6, 2), (12, 2))


def test_tetragram_distances_follow_key_period(pangram_x4):
    ct = normalize_az(vigenere_encrypt(pangram_x4, "ABC"))
    report = kasiski_examination(ct)

    tetra = report.for_length(4)
    assert tetra.occurrences
    assert all(d % 3 == 0 for d in tetra.distances)
    # repeats only line up where both the plaintext (35) and the key (3) realign
    assert tetra.gcd % 3 == 0
    assert tetra.gcd == 105

    assert report.top(1) == ((105, 65),)


def test_kasiski_on_tale_with_six_letter_key(tale):
    ct = vigenere_encrypt(tale, "CIPHER")
    report = kasiski_examination(ct, ngram_lengths=(4,))
    assert report.for_length(4).gcd == 6
    assert report.for_length(3) is None
