"""
Tests for the coordinate text tokenizer.
"""

import pytest

from coordkit.core.parsers.lexer import (
    Token,
    count_letters,
    count_numbers,
    infer_split,
    mask,
    normalize_text,
    split_halves,
    tokenize,
)


def values(tokens):
    return [token.value for token in tokens]


class TestTokenize:
    """Tests for tokenize."""

    def test_decimal_degrees(self) -> None:
        """Numbers, bearings and the divider become typed tokens."""
        tokens = tokenize("40.7128 N / 74.0060 W")

        assert tokens == [
            Token("n", "40.7128"),
            Token("a", "N"),
            Token("/", "/"),
            Token("n", "74.0060"),
            Token("o", "W"),
        ]

    def test_glyphs_stay_with_numbers(self) -> None:
        """Unit glyphs are attached to the number before them."""
        tokens = tokenize("40°26'46\"N")

        assert values(tokens) == ["40°", "26'", '46"', "N"]
        assert mask(tokens) == "nnna"

    def test_sign_and_glyph_separated_by_spaces(self) -> None:
        """A sign and a glyph may be spaced away from their digits."""
        tokens = tokenize(' + 89  ° 59   59.999 " N')

        assert values(tokens) == ["+89°", "59", '59.999"', "N"]

    def test_comma_becomes_divider(self) -> None:
        """A comma separates the halves like the divider does."""
        assert mask(tokenize("+27.5916 , -099.4523")) == "n/n"

    def test_lowercase_bearings(self) -> None:
        """Bearing letters are case insensitive."""
        assert values(tokenize("1 n / 2 w")) == ["1", "N", "/", "2", "W"]

    def test_words(self) -> None:
        """Other words are kept as word tokens."""
        tokens = tokenize("1 N / 2 W extra")

        assert tokens[-1] == Token("w", "extra")
        assert count_letters(tokens) == 3
        assert count_numbers(tokens) == 2

    def test_custom_divider(self) -> None:
        """An explicit divider replaces the configured one."""
        assert mask(tokenize("1 N | 2 E", divider="|")) == "na/no"


class TestNormalizeText:
    """Tests for normalize_text."""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("40º", "40°"),
            ("40˚", "40°"),
            ("26′", "26'"),
            ("26’", "26'"),
            ("46″", '46"'),
            ("46”", '46"'),
            ("46''", '46"'),
            ("1, 2", "1/ 2"),
        ],
    )
    def test_alternate_glyphs(self, text: str, expected: str) -> None:
        """Alternate glyphs are replaced by the canonical ones."""
        assert normalize_text(text, "/") == expected


class TestSplitHalves:
    """Tests for splitting tokens into halves."""

    def test_explicit_divider(self) -> None:
        """The first divider splits the tokens."""
        first, second = split_halves(tokenize("1 2 / 3 4"))

        assert values(first) == ["1", "2"]
        assert values(second) == ["3", "4"]

    def test_later_dividers_stay_in_second_half(self) -> None:
        """Only the first divider is used for splitting."""
        first, second = split_halves(tokenize("-33 / 22 / 3"))

        assert values(first) == ["-33"]
        assert values(second) == ["22", "/", "3"]

    def test_split_after_bearing(self) -> None:
        """A bearing that is not last ends the first half."""
        assert infer_split(tokenize("1 N 1")) == 2

    def test_split_before_degrees(self) -> None:
        """A degree marked number that is not first starts the second half."""
        assert infer_split(tokenize("12 ° 56 12° 56")) == 2

    def test_split_after_seconds(self) -> None:
        """A seconds marked number ends the first half."""
        assert infer_split(tokenize('9° 8" 9 8')) == 2

    def test_split_after_seconds_and_bearing(self) -> None:
        """A bearing right after a seconds marked number belongs to the first half."""
        tokens = tokenize('40° 26\' 46.302" N 79° 58\' 56.207" W')

        assert infer_split(tokens) == 4

    def test_two_numbers(self) -> None:
        """Two bare numbers split one and one."""
        assert infer_split(tokenize("-45.5 75.3")) == 1

    def test_ambiguous(self) -> None:
        """Four bare numbers cannot be split."""
        assert infer_split(tokenize("9° 8' 9 8")) is None
        assert split_halves(tokenize("9° 8' 9 8")) is None

    def test_conflicting_hints(self) -> None:
        """Hints that disagree make the split ambiguous."""
        assert infer_split(tokenize("1 N 2 3°")) is None
