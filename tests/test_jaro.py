"""Tests for Jaro and Jaro-Winkler similarity algorithms.

This module tests the alignment-window metrics, including the empty-input
convention and Jaro-Winkler parameter validation.
"""

import pytest

import stralgo as sa


class TestJaro:
    """Tests for Jaro similarity."""

    def test_empty_is_zero_not_error(self):
        assert sa.jaro_similarity("", "") == 0.0
        assert sa.jaro_similarity("", "a") == 0.0
        assert sa.jaro_similarity("b", "") == 0.0

    def test_identical(self):
        assert sa.jaro_similarity("a", "a") == 1.0
        assert sa.jaro_similarity("abc", "abc") == 1.0

    def test_different(self):
        assert sa.jaro_similarity("abc", "123") == 0.0

    def test_classic_examples(self):
        assert sa.jaro_similarity("martha", "marhta") == pytest.approx(0.9444444, abs=1e-4)
        assert sa.jaro_similarity("dwayne", "duane") == pytest.approx(0.8222222, abs=1e-4)
        assert sa.jaro_similarity("dixon", "dicksonx") == pytest.approx(0.7666666, abs=1e-4)

    def test_transpositions(self):
        assert sa.jaro_similarity("abcvwxyz", "cabvwxyz") == pytest.approx(0.958, abs=1e-3)
        # Four half-transpositions -> 2
        assert sa.jaro_similarity("abcduvwxyz", "dabcuvwxyz") == pytest.approx(
            (1.0 / 3.0) * (2.0 + (10.0 - 2.0) / 10.0), abs=1e-4
        )
        # Three half-transpositions -> 1 (integer division)
        assert sa.jaro_similarity("abcduvwxyz", "dbacuvwxyz") == pytest.approx(
            (1.0 / 3.0) * (2.0 + (10.0 - 1.0) / 10.0), abs=1e-4
        )

    def test_single_match(self):
        assert sa.jaro_similarity("abcd", "qrsd") == pytest.approx(
            (1.0 / 3.0) * (1.0 / 4.0 + 1.0 / 4.0 + 1.0), abs=1e-4
        )

    def test_argument_order_of_unequal_lengths(self):
        assert sa.jaro_similarity("dicksonx", "dixon") == sa.jaro_similarity("dixon", "dicksonx")

    def test_multibyte(self):
        assert sa.jaro_similarity("日本語", "日本語", granularity="byte") == 1.0
        assert sa.jaro_similarity("日本語", "日本ゴ") == pytest.approx((2 / 3 + 2 / 3 + 1) / 3)


class TestJaroWinkler:
    """Tests for Jaro-Winkler similarity."""

    def test_empty_is_zero(self):
        assert sa.jaro_winkler_similarity("", "") == 0.0
        assert sa.jaro_winkler_similarity("", "a") == 0.0
        assert sa.jaro_winkler_similarity("b", "") == 0.0

    def test_identical(self):
        assert sa.jaro_winkler_similarity("a", "a") == 1.0
        assert sa.jaro_winkler_similarity("abc", "abc") == 1.0
        assert sa.jaro_winkler_similarity("abc", "123") == 0.0

    def test_prefix_boost(self):
        assert sa.jaro_winkler_similarity("martha", "marhta") == pytest.approx(
            0.9444444 + 0.1 * 3 * (1 - 0.9444444), abs=1e-4
        )
        assert sa.jaro_winkler_similarity("dwayne", "duane") == pytest.approx(
            0.8222222 + 0.1 * 1 * (1 - 0.8222222), abs=1e-4
        )
        assert sa.jaro_winkler_similarity("dixon", "dicksonx") == pytest.approx(
            0.7666666 + 0.1 * 2 * (1 - 0.7666666), abs=1e-4
        )

    def test_no_shared_prefix(self):
        assert sa.jaro_winkler_similarity("abcduvwxyz", "dabcuvwxyz") == pytest.approx(
            (1.0 / 3.0) * (2.0 + (10.0 - 2.0) / 10.0), abs=1e-4
        )

    def test_below_threshold_unchanged(self):
        # Jaro is about 0.67 and 0.5 here, under the default 0.7 threshold
        assert sa.jaro_winkler_similarity("abcd", "abxy") == sa.jaro_similarity("abcd", "abxy")
        assert sa.jaro_winkler_similarity("abcd", "qrsd") == pytest.approx(0.5, abs=1e-4)

    def test_custom_threshold(self):
        jaro = sa.jaro_similarity("martha", "marhta")
        assert sa.jaro_winkler_similarity("martha", "marhta", boost_threshold=0.95) == jaro
        assert sa.jaro_winkler_similarity("martha", "marhta", boost_threshold=0.0) > jaro

    def test_custom_prefix(self):
        jaro = sa.jaro_similarity("martha", "marhta")
        capped = sa.jaro_winkler_similarity("martha", "marhta", max_prefix=2)
        assert capped == pytest.approx(jaro + 2 * 0.1 * (1 - jaro))
        heavier = sa.jaro_winkler_similarity("martha", "marhta", prefix_weight=0.2)
        assert heavier == pytest.approx(jaro + 3 * 0.2 * (1 - jaro))

    def test_positional_parametric_form(self):
        assert sa.jaro_winkler_similarity("martha", "marhta", 0.1, 4, 0.7) == (
            sa.jaro_winkler_similarity("martha", "marhta")
        )


class TestJaroWinklerValidation:
    """Tests for Jaro-Winkler parameter validation."""

    def test_prefix_weight_negative_raises_error(self):
        with pytest.raises(sa.ValidationError, match="prefix_weight"):
            sa.jaro_winkler_similarity("hello", "hallo", prefix_weight=-0.01)

    def test_unbounded_boost_raises_error(self):
        with pytest.raises(sa.ValidationError, match="must be in range"):
            sa.jaro_winkler_similarity("hello", "hello", prefix_weight=0.3)
        with pytest.raises(sa.ValidationError, match="must be in range"):
            sa.jaro_winkler_similarity("hello", "hello", prefix_weight=0.1, max_prefix=11)

    def test_boundary_values(self):
        assert sa.jaro_winkler_similarity("hello", "hello", prefix_weight=0.0) == 1.0
        assert sa.jaro_winkler_similarity("hello", "hello", prefix_weight=0.25) == 1.0
        assert sa.jaro_winkler_similarity("hello", "hellx", prefix_weight=0.25) <= 1.0

    def test_max_prefix_invalid(self):
        with pytest.raises(sa.ValidationError, match="max_prefix"):
            sa.jaro_winkler_similarity("hello", "hallo", max_prefix=-1)
        with pytest.raises(sa.ValidationError, match="max_prefix"):
            sa.jaro_winkler_similarity("hello", "hallo", max_prefix=2.5)

    def test_non_finite_parameters(self):
        with pytest.raises(sa.ValidationError):
            sa.jaro_winkler_similarity("hello", "hallo", prefix_weight=float("nan"))
        with pytest.raises(sa.ValidationError):
            sa.jaro_winkler_similarity("hello", "hallo", boost_threshold=float("inf"))


class TestJaroLongStrings:
    """Tests for Jaro similarity with long strings."""

    def test_jaro_similarity_long_strings(self):
        result = sa.jaro_similarity("a" * 1000, "b" * 1000)
        assert isinstance(result, float)
        assert result == 0.0


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
