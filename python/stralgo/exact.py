"""Exact-position metrics: Hamming and Lee distance.

Both compare units index by index and are only defined for inputs with the
same number of units at the chosen granularity.
"""

from __future__ import annotations

from typing import Union

from stralgo._utils import DEFAULT_GRANULARITY
from stralgo.enums import Granularity
from stralgo.exceptions import InvalidAlphabetSizeError, LengthMismatchError
from stralgo.sequence import Text, get_adapter


def hamming(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> int:
    """Count the positions at which two equal-length strings differ.

    The higher the result, the more different the strings.
    See: http://en.wikipedia.org/wiki/Hamming_distance

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Returns:
        Number of differing positions.

    Raises:
        LengthMismatchError: If the unit counts differ. With byte granularity
            this compares encoded lengths, so "日本語" and "日本g" (same
            character count) fail while "日本語" and "日本gon" do not.

    Example:
        >>> hamming("toned", "roses")
        3
    """
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)
    if len(a_units) != len(b_units):
        raise LengthMismatchError("Hamming", len(a_units), len(b_units))
    return sum(1 for x, y in zip(a_units, b_units) if x != y)


def lee(
    a: Text,
    b: Text,
    q: int,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> int:
    """Lee distance between two equal-length strings over a q-ary alphabet.

    Each position contributes the circular distance between the integer
    values of its units, ``min(d, q - d)`` with ``d = |x - y| mod q``. Unit
    values are taken modulo ``q``, so they only behave as the classical
    definition expects when they lie in ``0..q-1``.
    See: http://en.wikipedia.org/wiki/Lee_distance

    Args:
        a: First string.
        b: Second string.
        q: Alphabet size, at least 2.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Raises:
        InvalidAlphabetSizeError: If ``q < 2``.
        LengthMismatchError: If the unit counts differ.

    Example:
        >>> lee("3140", "2543", 6)
        6
    """
    if q < 2:
        raise InvalidAlphabetSizeError(q)
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)
    if len(a_units) != len(b_units):
        raise LengthMismatchError("Lee", len(a_units), len(b_units))

    ordinal = adapter.ordinal
    d = 0
    for x, y in zip(a_units, b_units):
        diff = abs(ordinal(x) - ordinal(y)) % q
        d += min(diff, q - diff)
    return d


__all__ = ["hamming", "lee"]
