"""The stralgo metrics, one unit per byte.

Strings are compared through their UTF-8 encoding, and ``bytes`` input is
used as-is. This is the fast path for text known to hold no multi-byte
characters. On other text a single character can span several units, which
changes Hamming lengths, bigrams and edit counts.

Example:
    >>> from stralgo import bytewise
    >>> bytewise.hamming("日本語", "日本ゴ")
    3
"""

from __future__ import annotations

from stralgo import alignment, bigram, edit, exact
from stralgo._utils import (
    DEFAULT_BOOST_THRESHOLD,
    DEFAULT_MAX_PREFIX,
    DEFAULT_PREFIX_WEIGHT,
)
from stralgo.enums import Granularity
from stralgo.sequence import Text

GRANULARITY = Granularity.BYTE


def hamming(a: Text, b: Text) -> int:
    """Bytewise :func:`stralgo.hamming`."""
    return exact.hamming(a, b, granularity=GRANULARITY)


def lee(a: Text, b: Text, q: int) -> int:
    """Bytewise :func:`stralgo.lee`."""
    return exact.lee(a, b, q, granularity=GRANULARITY)


def dice_coefficient(a: Text, b: Text) -> float:
    """Bytewise :func:`stralgo.dice_coefficient`."""
    return bigram.dice_coefficient(a, b, granularity=GRANULARITY)


def white_similarity(a: Text, b: Text) -> float:
    """Bytewise :func:`stralgo.white_similarity` (ASCII case folding only)."""
    return bigram.white_similarity(a, b, granularity=GRANULARITY)


def levenshtein(a: Text, b: Text) -> int:
    """Bytewise :func:`stralgo.levenshtein`."""
    return edit.levenshtein(a, b, granularity=GRANULARITY)


def damerau_levenshtein(a: Text, b: Text) -> int:
    """Bytewise :func:`stralgo.damerau_levenshtein`."""
    return edit.damerau_levenshtein(a, b, granularity=GRANULARITY)


def jaro_similarity(a: Text, b: Text) -> float:
    """Bytewise :func:`stralgo.jaro_similarity`."""
    return alignment.jaro_similarity(a, b, granularity=GRANULARITY)


def jaro_winkler_similarity(
    a: Text,
    b: Text,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    max_prefix: int = DEFAULT_MAX_PREFIX,
    boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
) -> float:
    """Bytewise :func:`stralgo.jaro_winkler_similarity`."""
    return alignment.jaro_winkler_similarity(
        a, b, prefix_weight, max_prefix, boost_threshold, granularity=GRANULARITY
    )


__all__ = [
    "hamming",
    "lee",
    "dice_coefficient",
    "white_similarity",
    "levenshtein",
    "damerau_levenshtein",
    "jaro_similarity",
    "jaro_winkler_similarity",
]
