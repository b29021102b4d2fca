"""Batch operations API for stralgo.

This module provides list-based helpers that run one metric over many
string pairs. All functions are thin loops over one metric looked up once per call;
metric errors (for example a Hamming length mismatch) propagate unchanged.

Example usage:
    >>> import stralgo.batch as batch

    # Pairwise distance between aligned lists
    >>> batch.pairwise(["kitten", "flaw"], ["sitting", "lawn"], "levenshtein")
    [3, 2]

    # Full matrix of scores
    >>> matrix = batch.matrix(["hello", "world"], ["hallo", "word", "help"], "jaro_winkler")
    >>> # matrix[0] = scores of "hello" against each choice
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Union

from stralgo._utils import DEFAULT_GRANULARITY, normalize_algorithm, normalize_granularity
from stralgo.exceptions import ValidationError
from stralgo.registry import get_metric

if TYPE_CHECKING:
    from stralgo.enums import Algorithm, Granularity
    from stralgo.sequence import Text

logger = logging.getLogger(__name__)

__all__ = [
    "pairwise",
    "matrix",
]


def pairwise(
    left: list[Text],
    right: list[Text],
    algorithm: str | Algorithm = "levenshtein",
    granularity: str | Granularity = DEFAULT_GRANULARITY,
    **params: Any,
) -> list[Union[int, float]]:
    """Compute a metric between each pair of two equal-length lists.

    Takes two lists of strings and computes the metric for each
    corresponding pair (left[i], right[i]).

    Args:
        left: First list of strings.
        right: Second list of strings (must be same length as left).
        algorithm: Metric to use (string or Algorithm enum). Options:
            - "hamming", "lee": exact-position distances
            - "dice", "white": bigram similarities
            - "levenshtein" (default), "damerau_levenshtein": edit distances
            - "jaro", "jaro_winkler": alignment similarities
        granularity: ``"codepoint"`` (default) or ``"byte"``.
        **params: Extra metric arguments, e.g. ``q`` for ``"lee"``.

    Returns:
        List of results, one for each pair.

    Raises:
        ValidationError: If left and right have different lengths, or if the
            metric is undefined for one of the pairs.

    Example:
        >>> pairwise(["hello", "world"], ["hallo", "word"])
        [1, 1]
    """
    if len(left) != len(right):
        raise ValidationError(
            f"left and right must have the same length, got {len(left)} and {len(right)}"
        )
    algo = normalize_algorithm(algorithm)
    gran = normalize_granularity(granularity)
    metric = get_metric(algo)
    logger.debug("pairwise %s (%s) over %d pairs", algo, gran, len(left))
    return [metric(a, b, granularity=gran, **params) for a, b in zip(left, right)]


def matrix(
    queries: list[Text],
    choices: list[Text],
    algorithm: str | Algorithm = "levenshtein",
    granularity: str | Granularity = DEFAULT_GRANULARITY,
    **params: Any,
) -> list[list[Union[int, float]]]:
    """Compute a metric between all queries and all choices.

    Similar to scipy.spatial.distance.cdist, this function compares every
    pair of strings from queries and choices, returning a 2D matrix.

    Args:
        queries: First list of strings (rows of output matrix).
        choices: Second list of strings (columns of output matrix).
        algorithm: Metric to use (string or Algorithm enum), default
            "levenshtein".
        granularity: ``"codepoint"`` (default) or ``"byte"``.
        **params: Extra metric arguments.

    Returns:
        2D list where result[i][j] is the metric between queries[i]
        and choices[j].

    Example:
        >>> result = matrix(["hello", "world"], ["hallo", "word", "help"])
        >>> len(result)
        2
        >>> len(result[0])
        3
    """
    algo = normalize_algorithm(algorithm)
    gran = normalize_granularity(granularity)
    metric = get_metric(algo)
    logger.debug(
        "matrix %s (%s) for %d x %d strings", algo, gran, len(queries), len(choices)
    )
    return [
        [metric(query, choice, granularity=gran, **params) for choice in choices]
        for query in queries
    ]
