"""Internal utilities for stralgo."""

from __future__ import annotations

import math
from typing import Union

from stralgo.enums import Algorithm, Granularity
from stralgo.exceptions import AlgorithmError, ValidationError

DEFAULT_GRANULARITY = Granularity.CODEPOINT.value

# Jaro-Winkler defaults (Winkler 1990)
DEFAULT_PREFIX_WEIGHT = 0.1
DEFAULT_MAX_PREFIX = 4
DEFAULT_BOOST_THRESHOLD = 0.7

# Valid algorithm names (lowercase)
VALID_ALGORITHMS = frozenset(a.value for a in Algorithm)

VALID_GRANULARITIES = frozenset(g.value for g in Granularity)


def normalize_algorithm(algorithm: Union[str, Algorithm]) -> str:
    """Convert Algorithm enum to string, or validate string algorithm name.

    Args:
        algorithm: Either an Algorithm enum value or a string algorithm name.

    Returns:
        Lowercase string algorithm name.

    Raises:
        AlgorithmError: If the algorithm name is not recognized.
        TypeError: If algorithm is not a string or Algorithm enum.

    Example:
        >>> normalize_algorithm(Algorithm.JARO_WINKLER)
        'jaro_winkler'
        >>> normalize_algorithm("Levenshtein")
        'levenshtein'
    """
    if isinstance(algorithm, Algorithm):
        return algorithm.value

    if isinstance(algorithm, str):
        algo_lower = algorithm.lower()
        if algo_lower in VALID_ALGORITHMS:
            return algo_lower
        raise AlgorithmError(
            f"Unknown algorithm: '{algorithm}'. "
            f"Valid options: {sorted(VALID_ALGORITHMS)}"
        )

    raise TypeError(
        f"algorithm must be str or Algorithm enum, got {type(algorithm).__name__}"
    )


def normalize_granularity(granularity: Union[str, Granularity]) -> str:
    """Convert Granularity enum to string, or validate a granularity name.

    Raises:
        ValidationError: If the granularity name is not recognized.
        TypeError: If granularity is not a string or Granularity enum.
    """
    if isinstance(granularity, Granularity):
        return granularity.value

    if isinstance(granularity, str):
        lowered = granularity.lower()
        if lowered in VALID_GRANULARITIES:
            return lowered
        raise ValidationError(
            f"Unknown granularity: '{granularity}'. "
            f"Valid options: {sorted(VALID_GRANULARITIES)}"
        )

    raise TypeError(
        f"granularity must be str or Granularity enum, got {type(granularity).__name__}"
    )


def validate_jaro_winkler_params(
    prefix_weight: float, max_prefix: int, boost_threshold: float
) -> None:
    """Check Jaro-Winkler parameters keep the boosted score inside [0, 1].

    Raises:
        ValidationError: If any parameter is out of range.
    """
    if not math.isfinite(prefix_weight) or prefix_weight < 0.0:
        raise ValidationError(
            f"prefix_weight must be a finite number >= 0, got {prefix_weight}"
        )
    if isinstance(max_prefix, bool) or not isinstance(max_prefix, int) or max_prefix < 0:
        raise ValidationError(f"max_prefix must be an int >= 0, got {max_prefix!r}")
    if prefix_weight * max_prefix > 1.0:
        raise ValidationError(
            "prefix_weight * max_prefix must be in range [0, 1], "
            f"got {prefix_weight} * {max_prefix} = {prefix_weight * max_prefix}"
        )
    if not math.isfinite(boost_threshold):
        raise ValidationError(
            f"boost_threshold must be a finite number, got {boost_threshold}"
        )


__all__ = [
    "DEFAULT_GRANULARITY",
    "DEFAULT_PREFIX_WEIGHT",
    "DEFAULT_MAX_PREFIX",
    "DEFAULT_BOOST_THRESHOLD",
    "VALID_ALGORITHMS",
    "VALID_GRANULARITIES",
    "normalize_algorithm",
    "normalize_granularity",
    "validate_jaro_winkler_params",
]
