"""Tests for Caesar cipher engine."""

import pytest

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.services.engines.monoalphabetic.caesar import CaesarEngine, ShiftKey, caesar


class TestCaesarFunction:
    """Test suite for the caesar() transform."""

    @pytest.fixture
    def sample_plaintext(self):
        return "Hello, World! Meet me at 10pm."

    def test_known_vector(self):
        assert caesar("HELLO", 3, True) == "KHOOR"

    def test_non_alphabetic_pass_through(self):
        assert caesar("a1b!", 3, True) == "d1e!"

    def test_preserves_case_and_punctuation(self):
        assert caesar("Hello, World!", 7) == "Olssv, Dvysk!"

    def test_decrypt(self):
        assert caesar("KHOOR", 3, False) == "HELLO"

    def test_negative_and_large_shifts(self):
        assert caesar("abc", -1) == "zab"
        assert caesar("xyz", 29) == "abc"

    @pytest.mark.parametrize("shift", [-53, -27, -1, 0, 1, 13, 25, 26, 27, 100])
    def test_encrypt_decrypt_roundtrip(self, sample_plaintext, shift):
        """Test that encrypt followed by decrypt returns original."""
        ciphertext = caesar(sample_plaintext, shift, True)
        assert caesar(ciphertext, shift, False) == sample_plaintext

    def test_shift_26_is_identity(self, sample_plaintext):
        assert caesar(sample_plaintext, 26) == sample_plaintext


class TestCaesarEngine:
    """Test suite for Caesar cipher engine."""

    @pytest.fixture
    def engine(self):
        return CaesarEngine()

    def test_encrypt_shift_7(self, engine):
        """Test specific encryption with shift 7."""
        result = engine.encrypt("HELLO", "7")
        assert result.text == "OLSSV"
        assert result.key == "7"

    def test_decrypt_shift_7(self, engine):
        """Test specific decryption with shift 7."""
        result = engine.decrypt("OLSSV", 7)
        assert result.text == "HELLO"

    def test_parse_key(self, engine):
        assert engine.parse_key("3") == ShiftKey(3)
        assert engine.parse_key(" -4 ") == ShiftKey(-4)
        assert engine.parse_key("+5") == ShiftKey(5)
        assert engine.parse_key(30) == ShiftKey(30)
        assert engine.parse_key("") == ShiftKey(0)

    @pytest.mark.parametrize("key", ["abc", "3.5", "3a", [3], True])
    def test_parse_key_rejects_non_integers(self, engine, key):
        with pytest.raises(InvalidKeyError):
            engine.parse_key(key)

    def test_validate_key(self, engine):
        """Test key validation."""
        for i in range(26):
            assert engine.validate_key(str(i)) is True

        assert engine.validate_key("abc") is False
        assert engine.validate_key("-1") is True
        assert engine.validate_key("100") is True

    def test_generate_random_key(self, engine):
        """Test random key generation."""
        keys = [engine.generate_random_key() for _ in range(100)]

        for key in keys:
            assert engine.validate_key(key)
            assert 1 <= int(key) <= 25  # Excludes 0 (no encryption)

    @pytest.mark.parametrize("raw, expected", [
        ("7", "7"),
        ("Shift: 29", "3"),
        ("The key is 13.", "13"),
    ])
    def test_normalize_suggested_key(self, engine, raw, expected):
        assert engine.normalize_suggested_key(raw) == expected

    def test_normalize_suggested_key_without_digits(self, engine):
        with pytest.raises(InvalidKeyError):
            engine.normalize_suggested_key("seven")

    def test_explain(self, engine):
        """Test explanation generation."""
        result = engine.encrypt("HELLO", "7")

        assert "7" in result.explanation
        assert "shift" in result.explanation.lower()
