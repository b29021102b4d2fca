"""Tests for bigram metrics: Dice coefficient and White similarity."""

import pytest

import stralgo as sa


class TestDiceCoefficient:
    """Tests for the set-based Dice coefficient."""

    def test_classic_example(self):
        # {ni, ig, gh, ht} vs {na, ac, ch, ht}: one shared bigram out of 8
        assert sa.dice_coefficient("night", "nacht") == 0.25
        assert sa.dice_coefficient("night", "nacht", granularity="byte") == 0.25

    def test_identical(self):
        assert sa.dice_coefficient("GGGG", "GGGG") == 1.0

    def test_ignores_bigram_frequency(self):
        # Both bigram sets are {GG}
        assert sa.dice_coefficient("GG", "GGGG") == 1.0

    def test_one_side_without_bigrams(self):
        assert sa.dice_coefficient("ab", "") == 0.0
        assert sa.dice_coefficient("a", "ab") == 0.0

    def test_too_short_raises(self):
        with pytest.raises(sa.InsufficientLengthError):
            sa.dice_coefficient("", "")
        with pytest.raises(sa.InsufficientLengthError):
            sa.dice_coefficient("a", "b")

    def test_multibyte_codepoint(self):
        assert sa.dice_coefficient("日本語", "日本語") == 1.0
        assert sa.dice_coefficient("日本語", "日本ゴ") == 0.5
        assert sa.dice_coefficient("日本語", "日本g") == 0.5

    def test_single_characters_bytewise(self):
        # A lone CJK character is three bytes, so it has two byte bigrams
        assert sa.dice_coefficient("日", "本", granularity="byte") == 0.0
        # E6 97 A5 vs E6 97 A8 share the leading bigram
        assert sa.dice_coefficient("日", "旨", granularity="byte") == 0.5

    def test_single_characters_codepoint_raise(self):
        with pytest.raises(sa.InsufficientLengthError):
            sa.dice_coefficient("日", "本", granularity="codepoint")
        with pytest.raises(sa.InsufficientLengthError):
            sa.dice_coefficient("日", "旨", granularity="codepoint")


class TestWhiteSimilarity:
    """Tests for White (strike a match) similarity."""

    @pytest.mark.parametrize("granularity", ["byte", "codepoint"])
    @pytest.mark.parametrize(
        "other,expected",
        [
            ("Sealed", 0.8),
            ("Healthy", 0.55),
            ("Heard", 0.44),
            ("Herded", 0.40),
            ("Help", 0.25),
            ("Sold", 0.0),
        ],
    )
    def test_healed_family(self, granularity, other, expected):
        score = sa.white_similarity("Healed", other, granularity=granularity)
        assert score == pytest.approx(expected, abs=0.01)

    def test_identical(self):
        assert sa.white_similarity("Healed", "Healed") == 1.0
        assert sa.white_similarity("GGGG", "GGGG") == 1.0

    def test_case_and_trailing_whitespace_ignored(self):
        assert sa.white_similarity("Healed ", "HEALed") == 1.0
        assert sa.white_similarity("Healed ", "HEALed", granularity="byte") == 1.0

    @pytest.mark.parametrize(
        "a,b,expected,tolerance",
        [
            ("REPUBLIC OF FRANCE", "FRANCE", 0.56, 0.01),
            ("FRANCE", "QUEBEC", 0.0, 0.001),
            ("FRENCH REPUBLIC", "REPUBLIC OF FRANCE", 0.72, 0.01),
            ("FRENCH REPUBLIC", "REPUBLIC OF CUBA", 0.61, 0.01),
        ],
    )
    def test_country_names(self, a, b, expected, tolerance):
        assert sa.white_similarity(a, b) == pytest.approx(expected, abs=tolerance)

    def test_respects_bigram_frequency(self):
        # [GG] vs [GG, GG, GG, GG]: only one pairing is possible
        assert sa.white_similarity("GG", "GGGGG") == pytest.approx(0.4)
        assert sa.white_similarity("GGGGG", "GG") == pytest.approx(0.4)

    def test_no_content_raises(self):
        with pytest.raises(sa.InsufficientContentError):
            sa.white_similarity("", "")
        with pytest.raises(sa.InsufficientContentError):
            sa.white_similarity("a", "b")
        with pytest.raises(sa.InsufficientContentError):
            sa.white_similarity("a b", "c d")

    def test_unicode_whitespace_codepoint(self):
        # U+3000 is whitespace as a codepoint: [AB, CD] vs [AB, BC, CD]
        assert sa.white_similarity("ab　cd", "abcd") == pytest.approx(0.8)

    def test_unicode_case_folding_codepoint_only(self):
        assert sa.white_similarity("éclair", "ÉCLAIR") == 1.0
        # Bytewise folding is ASCII only: C3 A9 and C3 89 stay distinct
        assert sa.white_similarity("éclair", "ÉCLAIR", granularity="byte") == pytest.approx(2 / 3)

    @pytest.mark.parametrize("text", ["à", "Š", "Å", "Ņ"])
    def test_continuation_bytes_are_not_whitespace(self, text):
        # C3 A0, C5 A0, C3 85, C5 85
        assert sa.white_similarity(text, text, granularity="byte") == 1.0

    def test_multibyte_bytewise(self):
        # [VO, OI, IL, L\xc3, \xc3\xa0] vs [VO, OI, IL, LA]
        assert sa.white_similarity("voilà", "voila", granularity="byte") == pytest.approx(2 / 3)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
