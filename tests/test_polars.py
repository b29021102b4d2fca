"""Tests for the Polars `.stralgo` expression namespace."""

import polars as pl
import pytest

import stralgo as sa  # noqa: F401  Registers the namespace


@pytest.fixture
def names():
    return pl.DataFrame(
        {
            "name": ["martha", "dwayne", "kitten", None],
            "other": ["marhta", "duane", "sitting", "abc"],
        }
    )


class TestMetricColumnToColumn:
    """Column-to-column comparisons."""

    def test_levenshtein_dtype_and_values(self, names):
        result = names.with_columns(
            edits=pl.col("name").stralgo.metric(pl.col("other"), "levenshtein")
        )
        assert result["edits"].dtype == pl.Int64
        # Null compares as the empty string
        assert result["edits"].to_list() == [2, 2, 3, 3]

    def test_jaro_winkler_dtype_and_values(self, names):
        result = names.with_columns(
            score=pl.col("name").stralgo.jaro_winkler(pl.col("other"))
        )
        assert result["score"].dtype == pl.Float64
        scores = result["score"].to_list()
        assert scores[0] == pytest.approx(0.9611, abs=1e-4)
        assert scores[1] == pytest.approx(0.84, abs=1e-4)
        assert scores[3] == 0.0

    def test_output_keeps_left_column_name(self, names):
        result = names.select(pl.col("name").stralgo.levenshtein(pl.col("other")))
        assert result.columns == ["name"]
        assert result["name"].to_list() == [2, 2, 3, 3]

    def test_granularity(self):
        df = pl.DataFrame({"a": ["Sjöstedt"], "b": ["Söjstedt"]})
        result = df.select(
            cp=pl.col("a").stralgo.metric(pl.col("b"), "damerau_levenshtein"),
            by=pl.col("a").stralgo.metric(
                pl.col("b"), "damerau_levenshtein", granularity="byte"
            ),
        )
        assert result.row(0) == (1, 2)


class TestMetricLiteral:
    """Comparisons against a string literal."""

    def test_levenshtein_literal(self, names):
        result = names.select(edits=pl.col("name").stralgo.levenshtein("martha"))
        assert result["edits"].to_list() == [0, 6, 5, 6]

    def test_params_forwarded(self):
        df = pl.DataFrame({"code": ["3140", "2543"]})
        result = df.select(d=pl.col("code").stralgo.metric("2543", "lee", q=6))
        assert result["d"].to_list() == [6, 0]

    def test_undefined_metric_raises(self):
        df = pl.DataFrame({"word": ["abc", "ab"]})
        with pytest.raises(Exception):
            df.select(pl.col("word").stralgo.metric("abd", "hamming"))

    def test_unknown_algorithm_raises_eagerly(self):
        with pytest.raises(sa.AlgorithmError):
            pl.col("word").stralgo.metric("abd", "soundex")


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
