"""Enums for stralgo API."""

from enum import Enum


class Granularity(str, Enum):
    """What a single comparison unit is.

    Every metric runs the same algorithm at either granularity; only the
    notion of "one unit" changes.

    Example:
        >>> from stralgo import Granularity, hamming
        >>> hamming("日本語", "日本ゴ", granularity=Granularity.BYTE)
        3
        >>> hamming("日本語", "日本ゴ", granularity=Granularity.CODEPOINT)
        1
    """

    BYTE = "byte"
    """One unit per byte of the UTF-8 encoding. Fast, exact for ASCII text"""

    CODEPOINT = "codepoint"
    """One unit per Unicode codepoint. Correct for multi-byte text"""


class Algorithm(str, Enum):
    """Available metrics.

    This enum provides type-safe metric selection for ``compare`` and the
    batch and Polars APIs. String values are accepted wherever an
    ``Algorithm`` is.

    Example:
        >>> from stralgo import Algorithm, compare
        >>> compare("kitten", "sitting", Algorithm.LEVENSHTEIN)
        3
    """

    HAMMING = "hamming"
    """Count of differing positions (equal-length strings only)"""

    LEE = "lee"
    """Circular per-position distance over a q-ary alphabet (equal-length strings only)"""

    DICE = "dice"
    """Sorensen-Dice coefficient over distinct bigrams"""

    WHITE = "white"
    """Strike-a-match similarity: whitespace-free, case-folded bigram multisets"""

    LEVENSHTEIN = "levenshtein"
    """Classic edit distance (insertions, deletions, substitutions)"""

    DAMERAU_LEVENSHTEIN = "damerau_levenshtein"
    """Edit distance including adjacent transpositions (e.g., 'ca' -> 'ac' is 1 edit)"""

    DAMERAU = "damerau"
    """Alias for DAMERAU_LEVENSHTEIN"""

    JARO = "jaro"
    """Jaro similarity, good for short strings"""

    JARO_WINKLER = "jaro_winkler"
    """Jaro-Winkler similarity with prefix weighting, excellent for names"""


__all__ = ["Algorithm", "Granularity"]
