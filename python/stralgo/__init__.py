"""
stralgo - String similarity and edit-distance metrics

Every metric runs over either bytes or Unicode codepoints, selected with the
``granularity`` keyword (default ``"codepoint"``) or by importing
``stralgo.bytewise`` / ``stralgo.codepoints``.

Example usage:
    >>> import stralgo as sa

    # Edit distances
    >>> sa.levenshtein("kitten", "sitting")
    3
    >>> sa.damerau_levenshtein("Sjöstedt", "Söjstedt")
    1
    >>> sa.damerau_levenshtein("Sjöstedt", "Söjstedt", granularity="byte")
    2

    # Similarities in [0, 1]
    >>> sa.dice_coefficient("night", "nacht")
    0.25
    >>> round(sa.jaro_winkler_similarity("martha", "marhta"), 4)
    0.9611

    # Undefined metrics raise instead of returning a sentinel
    >>> sa.hamming("green eggs", "ham")
    Traceback (most recent call last):
    ...
    stralgo.exceptions.LengthMismatchError: Hamming distance is undefined ...
"""

import logging
from importlib.metadata import version as _get_version

# Register the .stralgo expression namespace
import stralgo.expr  # noqa: F401
from stralgo import batch, bytewise, codepoints
from stralgo.alignment import jaro_similarity, jaro_winkler_similarity
from stralgo.bigram import dice_coefficient, white_similarity
from stralgo.edit import damerau_levenshtein, levenshtein
from stralgo.enums import Algorithm, Granularity
from stralgo.exact import hamming, lee
from stralgo.exceptions import (
    AlgorithmError,
    InsufficientContentError,
    InsufficientLengthError,
    InvalidAlphabetSizeError,
    LengthMismatchError,
    StralgoError,
    ValidationError,
)
from stralgo.registry import compare, is_similarity
from stralgo.sequence import BYTES, CODEPOINTS, Bigram, get_adapter

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = _get_version("stralgo")
__all__ = [
    # Version
    "__version__",
    # Custom exceptions
    "StralgoError",
    "ValidationError",
    "AlgorithmError",
    "LengthMismatchError",
    "InvalidAlphabetSizeError",
    "InsufficientLengthError",
    "InsufficientContentError",
    # Enums
    "Algorithm",
    "Granularity",
    # Sequence adapters
    "Bigram",
    "BYTES",
    "CODEPOINTS",
    "get_adapter",
    # Exact-position metrics
    "hamming",
    "lee",
    # Bigram metrics
    "dice_coefficient",
    "white_similarity",
    # Edit distances
    "levenshtein",
    "damerau_levenshtein",
    # Alignment metrics
    "jaro_similarity",
    "jaro_winkler_similarity",
    # Dispatch
    "compare",
    "is_similarity",
    # Submodules
    "batch",
    "bytewise",
    "codepoints",
]


# Convenience aliases
edit_distance = levenshtein
similarity = jaro_winkler_similarity
