"""Bigram-overlap similarity: Dice coefficient and White similarity."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from stralgo._utils import DEFAULT_GRANULARITY
from stralgo.enums import Granularity
from stralgo.exceptions import InsufficientContentError, InsufficientLengthError
from stralgo.sequence import Bigram, SequenceAdapter, Text, bigrams, get_adapter


def dice_coefficient(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> float:
    """Sorensen-Dice coefficient over the distinct bigrams of two strings.

    The result is scaled between 0.0 and 1.0; higher means more similar.

    This is the set-based variant: each bigram counts once per string no
    matter how often it occurs, and whitespace is an ordinary unit. That is
    why ``dice_coefficient("GG", "GGGG")`` is 1.0. Use
    :func:`white_similarity` when bigram frequency matters.
    See: http://en.wikipedia.org/wiki/Sorensen-Dice_coefficient

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Raises:
        InsufficientLengthError: If both strings are shorter than two units.

    Example:
        >>> dice_coefficient("night", "nacht")
        0.25
    """
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)
    if len(a_units) < 2 and len(b_units) < 2:
        raise InsufficientLengthError(
            "At least one of the input strings must be 2 or more units long "
            "for the bigram-based Dice coefficient to be calculated"
        )

    a_set = set(bigrams(a_units))
    total_bigrams = len(a_set)

    b_set: set[Bigram] = set()
    shared_bigrams = 0
    for bigram in bigrams(b_units):
        if bigram in b_set:
            continue
        b_set.add(bigram)
        total_bigrams += 1
        if bigram in a_set:
            shared_bigrams += 1
    return 2 * shared_bigrams / total_bigrams


def _word_letter_pairs(units: Sequence[Any], adapter: SequenceAdapter) -> list[Bigram]:
    # Upper-cased bigrams that contain no whitespace unit
    pairs = []
    limit = len(units) - 1
    i = 0
    while i < limit:
        second = units[i + 1]
        if adapter.is_space(second):
            i += 2
            continue
        first = units[i]
        if adapter.is_space(first):
            i += 1
            continue
        pairs.append(Bigram(adapter.upper(first), adapter.upper(second)))
        i += 1
    return pairs


def white_similarity(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> float:
    """White ("strike a match") similarity of two strings.

    A variation on the Dice coefficient that ignores bigrams containing
    whitespace, compares case-insensitively, and respects bigram frequency:
    each bigram of ``a`` can pair with at most one equal bigram of ``b``.
    The result is scaled between 0.0 and 1.0; higher means more similar.
    See: http://www.catalysoft.com/articles/strikeamatch.html

    With byte granularity only ASCII letters are upper-cased and only
    single-byte whitespace is recognised.

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Raises:
        InsufficientContentError: If neither string has a bigram free of
            whitespace.

    Example:
        >>> white_similarity("Healed", "Sealed")
        0.8
    """
    adapter = get_adapter(granularity)
    a_pairs = _word_letter_pairs(adapter.units(a), adapter)
    b_pairs = _word_letter_pairs(adapter.units(b), adapter)
    union = len(a_pairs) + len(b_pairs)
    if union == 0:
        raise InsufficientContentError(
            "At least one of the input strings must contain a bigram without "
            "whitespace for the White similarity to be calculated"
        )

    consumed = [False] * len(b_pairs)
    intersection = 0
    for a_bigram in a_pairs:
        for j, b_bigram in enumerate(b_pairs):
            if not consumed[j] and a_bigram == b_bigram:
                consumed[j] = True
                intersection += 1
                break
    return 2 * intersection / union


__all__ = ["dice_coefficient", "white_similarity"]
