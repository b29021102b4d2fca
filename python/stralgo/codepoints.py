"""The stralgo metrics, one unit per Unicode codepoint.

``str`` input is compared character by character; ``bytes`` input is
decoded as UTF-8 first, with malformed sequences replaced by U+FFFD. Use
this form whenever text may contain multi-byte characters so that one unit
is one character.

Example:
    >>> from stralgo import codepoints
    >>> codepoints.hamming("日本語", "日本ゴ")
    1
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

GRANULARITY = Granularity.CODEPOINT


def hamming(a: Text, b: Text) -> int:
    """Codepoint-wise :func:`stralgo.hamming`."""
    return exact.hamming(a, b, granularity=GRANULARITY)


def lee(a: Text, b: Text, q: int) -> int:
    """Codepoint-wise :func:`stralgo.lee`."""
    return exact.lee(a, b, q, granularity=GRANULARITY)


def dice_coefficient(a: Text, b: Text) -> float:
    """Codepoint-wise :func:`stralgo.dice_coefficient`."""
    return bigram.dice_coefficient(a, b, granularity=GRANULARITY)


def white_similarity(a: Text, b: Text) -> float:
    """Codepoint-wise :func:`stralgo.white_similarity`."""
    return bigram.white_similarity(a, b, granularity=GRANULARITY)


def levenshtein(a: Text, b: Text) -> int:
    """Codepoint-wise :func:`stralgo.levenshtein`."""
    return edit.levenshtein(a, b, granularity=GRANULARITY)


def damerau_levenshtein(a: Text, b: Text) -> int:
    """Codepoint-wise :func:`stralgo.damerau_levenshtein`."""
    return edit.damerau_levenshtein(a, b, granularity=GRANULARITY)


def jaro_similarity(a: Text, b: Text) -> float:
    """Codepoint-wise :func:`stralgo.jaro_similarity`."""
    return alignment.jaro_similarity(a, b, granularity=GRANULARITY)


def jaro_winkler_similarity(
    a: Text,
    b: Text,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    max_prefix: int = DEFAULT_MAX_PREFIX,
    boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
) -> float:
    """Codepoint-wise :func:`stralgo.jaro_winkler_similarity`."""
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
