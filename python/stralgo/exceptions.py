"""Exception hierarchy for stralgo.

A raised ``ValidationError`` means the metric is undefined for the given
inputs. It is never a stand-in for "zero similarity".
"""

from __future__ import annotations


class StralgoError(Exception):
    """Base exception for all stralgo errors."""


class ValidationError(StralgoError, ValueError):
    """Raised when input validation fails (invalid parameters, out of range values)."""


class AlgorithmError(StralgoError, ValueError):
    """Raised when an unknown or unsupported algorithm is specified."""


class LengthMismatchError(ValidationError):
    """Raised when a metric that needs equal-length inputs gets unequal ones."""

    def __init__(self, metric: str, len_a: int, len_b: int) -> None:
        self.metric = metric
        self.len_a = len_a
        self.len_b = len_b
        super().__init__(
            f"{metric} distance is undefined between strings of unequal length "
            f"({len_a} != {len_b} units)"
        )


class InvalidAlphabetSizeError(ValidationError):
    """Raised when Lee distance is asked for an alphabet smaller than 2."""

    def __init__(self, q: int) -> None:
        self.q = q
        super().__init__(
            f"Lee distance needs a q-ary alphabet size of at least 2, got {q}"
        )


class InsufficientLengthError(ValidationError):
    """Raised when neither input is long enough to contain a bigram."""


class InsufficientContentError(ValidationError):
    """Raised when neither input contains a bigram free of whitespace."""


__all__ = [
    "StralgoError",
    "ValidationError",
    "AlgorithmError",
    "LengthMismatchError",
    "InvalidAlphabetSizeError",
    "InsufficientLengthError",
    "InsufficientContentError",
]
