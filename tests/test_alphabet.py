"""Tests for the shared alphabet helpers."""

import pytest

from cipherlab.services.engines.alphabet import index_of, is_letter, letters_only, shift_char


class TestIndexOf:
    """Test letter-to-index mapping."""

    @pytest.mark.parametrize("char, expected", [("A", 0), ("a", 0), ("Z", 25), ("m", 12)])
    def test_letters(self, char, expected):
        assert index_of(char) == expected

    @pytest.mark.parametrize("char", ["1", " ", "!", "", "é", "ß", "ı", "AB"])
    def test_non_letters(self, char):
        assert index_of(char) is None

    def test_is_letter_matches_index_of(self):
        for char in "aZ9 -":
            assert is_letter(char) == (index_of(char) is not None)


class TestShiftChar:
    """Test single character shifting."""

    def test_preserves_case(self):
        assert shift_char("a", 3) == "d"
        assert shift_char("A", 3) == "D"

    def test_wraps_around(self):
        assert shift_char("z", 1) == "a"
        assert shift_char("Y", 3) == "B"

    def test_negative_shift(self):
        assert shift_char("a", -1) == "z"
        assert shift_char("C", -29) == "Z"

    def test_large_shift_is_reduced(self):
        assert shift_char("A", 26 * 4 + 2) == "C"

    @pytest.mark.parametrize("char", ["1", "!", " ", "\n", "é", "ß"])
    def test_non_letters_pass_through(self, char):
        assert shift_char(char, 5) == char


class TestLettersOnly:
    """Test destructive normalization used by Playfair and Hill."""

    def test_strips_and_uppercases(self):
        assert letters_only("Hello, World! 123") == "HELLOWORLD"

    def test_does_not_expand_unicode(self):
        # 'ß'.upper() is 'SS'; it must be dropped, not expanded
        assert letters_only("straße") == "STRAE"

    def test_empty(self):
        assert letters_only("") == ""
