"""Polars expression namespace for string metrics.

This module registers a `.stralgo` namespace on Polars expressions,
enabling metric computation directly in Polars expression contexts.
Values are passed through `map_elements`, one pair at a time.

Note:
    Null values are compared as empty strings. Metrics that are undefined
    for a pair (for example Hamming on unequal lengths) raise, which Polars
    reports as a compute error for the whole expression.

Example:
    >>> import polars as pl
    >>> import stralgo  # Registers the namespace
    >>>
    >>> df = pl.DataFrame({"name": ["martha", "dwayne"], "other": ["marhta", "duane"]})
    >>> df.with_columns(
    ...     score=pl.col("name").stralgo.metric(pl.col("other"), "jaro_winkler")
    ... )
"""

from __future__ import annotations

import logging
from typing import Any, Union

import polars as pl

from stralgo._utils import DEFAULT_GRANULARITY, normalize_algorithm, normalize_granularity
from stralgo.enums import Algorithm, Granularity
from stralgo.registry import get_metric, is_similarity

logger = logging.getLogger(__name__)


@pl.api.register_expr_namespace("stralgo")
class StralgoExprNamespace:
    """
    String metric namespace for Polars expressions.

    Access via `.stralgo` on any string expression.
    """

    def __init__(self, expr: pl.Expr):
        self._expr = expr

    def metric(
        self,
        other: Union[str, pl.Expr],
        algorithm: Union[str, Algorithm] = "levenshtein",
        granularity: Union[str, Granularity] = DEFAULT_GRANULARITY,
        **params: Any,
    ) -> pl.Expr:
        """
        Compute a metric between this column and a literal or another column.

        Args:
            other: String literal or column expression to compare against
            algorithm: Metric to use (string or Algorithm enum)
            granularity: "codepoint" (default) or "byte"
            **params: Extra metric arguments, e.g. ``q`` for "lee"

        Returns:
            Int64 expression for distances, Float64 for similarities

        Example:
            >>> df.with_columns(
            ...     edits=pl.col("name").stralgo.metric("martha")
            ... )
            >>> df.with_columns(
            ...     score=pl.col("name").stralgo.metric(pl.col("other"), "jaro")
            ... )
        """
        algo = normalize_algorithm(algorithm)
        gran = normalize_granularity(granularity)
        func = get_metric(algo)
        dtype = pl.Float64 if is_similarity(algo) else pl.Int64
        logger.debug("registering %s (%s) expression", algo, gran)

        def compute(left: Any, right: Any) -> Union[int, float]:
            return func(
                str(left) if left is not None else "",
                str(right) if right is not None else "",
                granularity=gran,
                **params,
            )

        if isinstance(other, str):
            # Compare against a literal string
            return self._expr.map_elements(
                lambda s: compute(s, other),
                return_dtype=dtype,
                skip_nulls=False,
            )

        # Compare against another column
        result = pl.struct([self._expr.alias("_left"), other.alias("_right")]).map_elements(
            lambda row: compute(row["_left"], row["_right"]),
            return_dtype=dtype,
        )
        # Keep the left column's name, as the literal form does
        name = self._expr.meta.output_name(raise_if_undetermined=False)
        if name is None:
            return result
        return result.alias(name)

    def levenshtein(self, other: Union[str, pl.Expr], **kwargs: Any) -> pl.Expr:
        """Shorthand for ``metric(other, "levenshtein", ...)``."""
        return self.metric(other, Algorithm.LEVENSHTEIN, **kwargs)

    def jaro_winkler(self, other: Union[str, pl.Expr], **kwargs: Any) -> pl.Expr:
        """Shorthand for ``metric(other, "jaro_winkler", ...)``."""
        return self.metric(other, Algorithm.JARO_WINKLER, **kwargs)


__all__ = ["StralgoExprNamespace"]
