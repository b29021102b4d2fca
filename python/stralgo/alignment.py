"""Alignment-window similarity: Jaro and Jaro-Winkler.

Both return ``0.0`` when either input is empty. That is the value of the
formula when no units can match, not an error condition.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any, Union

from stralgo._utils import (
    DEFAULT_BOOST_THRESHOLD,
    DEFAULT_GRANULARITY,
    DEFAULT_MAX_PREFIX,
    DEFAULT_PREFIX_WEIGHT,
    validate_jaro_winkler_params,
)
from stralgo.enums import Granularity
from stralgo.sequence import Text, get_adapter


def _jaro(a_units: Sequence[Any], b_units: Sequence[Any]) -> float:
    a_len = len(a_units)
    b_len = len(b_units)
    if a_len == 0 or b_len == 0:
        return 0.0

    # Scan the longer sequence, search the shorter one
    if b_len > a_len:
        a_units, a_len, b_units, b_len = b_units, b_len, a_units, a_len

    window = max(0, a_len // 2 - 1)
    a_matched = [False] * a_len
    b_matched = [False] * b_len
    matches = 0
    for i in range(a_len):
        unit = a_units[i]
        low = max(0, i - window)
        high = min(b_len - 1, i + window)
        for j in range(low, high + 1):
            if not b_matched[j] and b_units[j] == unit:
                a_matched[i] = b_matched[j] = True
                matches += 1
                break

    if matches == 0:
        return 0.0

    half_transpositions = 0
    k = 0
    for i in range(a_len):
        if not a_matched[i]:
            continue
        while not b_matched[k]:
            k += 1
        if a_units[i] != b_units[k]:
            half_transpositions += 1
        k += 1
    transpositions = half_transpositions // 2

    return (
        matches / a_len
        + matches / b_len
        + (matches - transpositions) / matches
    ) / 3.0


def _common_prefix(a_units: Sequence[Any], b_units: Sequence[Any], limit: int) -> int:
    n = 0
    for x, y in zip(a_units, b_units):
        if n >= limit or x != y:
            break
        n += 1
    return n


def jaro_similarity(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> float:
    """Jaro similarity of two strings.

    Units match when they are equal and no further apart than
    ``max(len(a), len(b)) // 2 - 1`` positions. Matched units that appear in a
    different order count as transpositions.

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Returns:
        Similarity between 0.0 and 1.0 (1.0 for identical non-empty
        strings, 0.0 when either string is empty).

    Example:
        >>> round(jaro_similarity("martha", "marhta"), 4)
        0.9444
    """
    adapter = get_adapter(granularity)
    return _jaro(adapter.units(a), adapter.units(b))


def jaro_winkler_similarity(
    a: Text,
    b: Text,
    prefix_weight: float = DEFAULT_PREFIX_WEIGHT,
    max_prefix: int = DEFAULT_MAX_PREFIX,
    boost_threshold: float = DEFAULT_BOOST_THRESHOLD,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> float:
    """Jaro-Winkler similarity of two strings.

    Starts from :func:`jaro_similarity` and, when that score reaches
    ``boost_threshold``, adds ``prefix * prefix_weight * (1 - jaro)`` where
    ``prefix`` is the length of the common leading run of units, capped at
    ``max_prefix``.

    Args:
        a: First string.
        b: Second string.
        prefix_weight: Boost per shared prefix unit (default 0.1).
        max_prefix: Longest prefix that earns a boost (default 4).
        boost_threshold: Jaro score below which no boost is applied
            (default 0.7).
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Raises:
        ValidationError: If ``prefix_weight`` or ``max_prefix`` is negative,
            if ``prefix_weight * max_prefix`` exceeds 1 (the result could
            leave [0, 1]), or if a float parameter is not finite.

    Example:
        >>> round(jaro_winkler_similarity("martha", "marhta"), 4)
        0.9611
    """
    validate_jaro_winkler_params(prefix_weight, max_prefix, boost_threshold)
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)

    sim = _jaro(a_units, b_units)
    if sim < boost_threshold:
        return sim
    prefix = _common_prefix(a_units, b_units, max_prefix)
    return sim + prefix * prefix_weight * (1.0 - sim)


__all__ = ["jaro_similarity", "jaro_winkler_similarity"]
