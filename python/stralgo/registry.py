"""Metric lookup by algorithm name.

``get_metric`` backs the batch and Polars APIs, and ``compare`` is the one-call
form: it resolves an :class:`~stralgo.enums.Algorithm` (or its string value) to a
metric function and forwards the inputs, granularity and any metric-specific
keyword arguments.
"""

from __future__ import annotations

from typing import Any, Callable, Union

from stralgo._utils import DEFAULT_GRANULARITY, normalize_algorithm
from stralgo.alignment import jaro_similarity, jaro_winkler_similarity
from stralgo.bigram import dice_coefficient, white_similarity
from stralgo.edit import damerau_levenshtein, levenshtein
from stralgo.enums import Algorithm, Granularity
from stralgo.exact import hamming, lee
from stralgo.sequence import Text

Metric = Callable[..., Union[int, float]]

METRICS: dict[str, Metric] = {
    Algorithm.HAMMING.value: hamming,
    Algorithm.LEE.value: lee,
    Algorithm.DICE.value: dice_coefficient,
    Algorithm.WHITE.value: white_similarity,
    Algorithm.LEVENSHTEIN.value: levenshtein,
    Algorithm.DAMERAU_LEVENSHTEIN.value: damerau_levenshtein,
    Algorithm.DAMERAU.value: damerau_levenshtein,
    Algorithm.JARO.value: jaro_similarity,
    Algorithm.JARO_WINKLER.value: jaro_winkler_similarity,
}

# Metrics returning a float in [0, 1]; the rest return an int distance
SIMILARITIES = frozenset({
    Algorithm.DICE.value,
    Algorithm.WHITE.value,
    Algorithm.JARO.value,
    Algorithm.JARO_WINKLER.value,
})


def get_metric(algorithm: Union[str, Algorithm]) -> Metric:
    """Return the metric function for an algorithm.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
    """
    return METRICS[normalize_algorithm(algorithm)]


def is_similarity(algorithm: Union[str, Algorithm]) -> bool:
    """True when the algorithm yields a similarity ratio rather than a distance."""
    return normalize_algorithm(algorithm) in SIMILARITIES


def compare(
    a: Text,
    b: Text,
    algorithm: Union[str, Algorithm],
    granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
    **params: Any,
) -> Union[int, float]:
    """Compute one metric between two strings.

    Args:
        a: First string.
        b: Second string.
        algorithm: Metric to use (string or Algorithm enum).
        granularity: ``"codepoint"`` (default) or ``"byte"``.
        **params: Extra metric arguments, e.g. ``q`` for ``"lee"`` or
            ``prefix_weight`` for ``"jaro_winkler"``.

    Returns:
        An int for distance metrics, a float for similarity metrics.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        ValidationError: If the metric is undefined for these inputs.

    Example:
        >>> compare("kitten", "sitting", "levenshtein")
        3
        >>> compare("3140", "2543", "lee", q=6)
        6
    """
    metric = get_metric(algorithm)
    return metric(a, b, granularity=granularity, **params)


__all__ = ["METRICS", "SIMILARITIES", "compare", "get_metric", "is_similarity"]
