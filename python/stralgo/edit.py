"""Edit distances: Levenshtein and (restricted) Damerau-Levenshtein.

Both keep only a few dynamic-programming rows alive, sized to the shorter
input, so memory is O(min(n, m)) per call.
"""

from __future__ import annotations

from typing import Union

from stralgo._utils import DEFAULT_GRANULARITY
from stralgo.enums import Granularity
from stralgo.sequence import Text, get_adapter


def levenshtein(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> int:
    """Levenshtein edit distance between two strings.

    The minimum number of single-unit insertions, deletions or substitutions
    needed to turn one string into the other. The larger the result, the
    more different the strings.
    See: http://en.wikipedia.org/wiki/Levenshtein_distance

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Example:
        >>> levenshtein("kitten", "sitting")
        3
    """
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)
    a_len = len(a_units)
    b_len = len(b_units)
    if a_len == 0:
        return b_len
    if b_len == 0:
        return a_len
    if a_units == b_units:
        return 0

    # Columns run over the shorter sequence
    if b_len > a_len:
        a_units, a_len, b_units, b_len = b_units, b_len, a_units, a_len

    prev_row = list(range(b_len + 1))
    curr_row = [0] * (b_len + 1)
    for i in range(a_len):
        a_unit = a_units[i]
        curr_row[0] = i + 1
        for j in range(b_len):
            cost = 0 if a_unit == b_units[j] else 1
            curr_row[j + 1] = min(
                curr_row[j] + 1,
                prev_row[j + 1] + 1,
                prev_row[j] + cost,
            )
        prev_row, curr_row = curr_row, prev_row
    return prev_row[b_len]


def damerau_levenshtein(
    a: Text,
    b: Text,
    *,
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
) -> int:
    """Damerau-Levenshtein distance with adjacent-only transpositions.

    Like :func:`levenshtein`, but swapping two adjacent units costs one edit
    instead of two substitutions. This is the restricted variant (optimal
    string alignment): a unit that took part in a transposition is not
    edited again, so ``damerau_levenshtein("ca", "abc")`` is 3, not 2.
    See: http://en.wikipedia.org/wiki/Damerau-Levenshtein_distance

    Transpositions are detected per unit, so with byte granularity swapping
    a multi-byte character with its neighbour usually costs 2 edits, while
    codepoint granularity reports 1.

    Args:
        a: First string.
        b: Second string.
        granularity: ``"codepoint"`` (default) or ``"byte"``.

    Example:
        >>> damerau_levenshtein("1234567890", "1324576809")
        3
    """
    adapter = get_adapter(granularity)
    a_units = adapter.units(a)
    b_units = adapter.units(b)
    a_len = len(a_units)
    b_len = len(b_units)
    if a_len == 0:
        return b_len
    if b_len == 0:
        return a_len

    # a holds the shorter sequence
    if a_len > b_len:
        a_units, a_len, b_units, b_len = b_units, b_len, a_units, a_len

    row_len = a_len + 1
    tran_row = [0] * row_len
    prev_row = list(range(row_len))
    curr_row = [0] * row_len
    prev_b = None
    for i in range(1, b_len + 1):
        curr_b = b_units[i - 1]
        curr_row[0] = i

        start = max(1, i - b_len - 1)
        end = min(a_len, i + b_len + 1)

        prev_a = None
        for j in range(start, end + 1):
            curr_a = a_units[j - 1]
            cost = 0 if curr_a == curr_b else 1
            entry = min(
                curr_row[j - 1] + 1,
                prev_row[j] + 1,
                prev_row[j - 1] + cost,
            )
            # prev_a and prev_b stay None on the first row and column
            if prev_a is not None and prev_b is not None:
                if curr_a == prev_b and curr_b == prev_a:
                    entry = min(entry, tran_row[j - 2] + cost)
            curr_row[j] = entry
            prev_a = curr_a
        prev_b = curr_b
        tran_row, prev_row, curr_row = prev_row, curr_row, tran_row
    return prev_row[a_len]


__all__ = ["levenshtein", "damerau_levenshtein"]
