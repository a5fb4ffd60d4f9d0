import random
import re
from dataclasses import dataclass
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ALPHABET_SIZE, shift_char
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@dataclass(frozen=True)
class ShiftKey:
    """Caesar key. The shift is reduced mod 26 only when applied."""

    shift: int


def caesar(text: str, shift: int, encrypt: bool = True) -> str:
    """
    Shift every letter of text by a fixed amount.

    Case is preserved and non-letters pass through untouched. Any integer
    shift is valid, including negative values.
    """
    effective = shift if encrypt else -shift
    return "".join(shift_char(char, effective) for char in text)


@EngineRegistry.register
class CaesarEngine(CipherEngine):
    """
    Caesar cipher engine.

    The Caesar cipher is a simple substitution cipher that shifts each letter
    by a fixed amount. With only 26 possible keys, it offers no real security
    and is kept here for teaching.
    """

    name = "Caesar Cipher"
    cipher_type = CipherType.CAESAR
    cipher_family = CipherFamily.MONOALPHABETIC
    description = (
        "A substitution cipher where each letter is shifted by a fixed amount. "
        "Named after Julius Caesar who used it for military communications."
    )
    key_hint = "An integer shift, e.g. 3. Negative values shift backwards."

    def parse_key(self, key: Any) -> ShiftKey:
        """Parse key to a shift. An empty key means no shift."""
        if isinstance(key, ShiftKey):
            return key
        if isinstance(key, bool):
            raise InvalidKeyError("Caesar key must be an integer", key)
        if isinstance(key, int):
            return ShiftKey(key)
        if not isinstance(key, str):
            raise InvalidKeyError("Caesar key must be an integer", key)

        key_str = key.strip()
        if not key_str:
            return ShiftKey(0)
        if not re.fullmatch(r"[+-]?\d+", key_str):
            raise InvalidKeyError(f"Caesar key '{key_str}' is not an integer", key)
        return ShiftKey(int(key_str))

    def transform(self, text: str, key: ShiftKey, encrypt: bool) -> str:
        return caesar(text, key.shift, encrypt)

    def format_key(self, key: ShiftKey) -> str:
        return str(key.shift)

    def generate_random_key(self) -> str:
        """Generate a random shift (1-25, excluding 0 and 26)."""
        return str(random.randint(1, 25))

    def normalize_suggested_key(self, raw: str) -> str:
        """Keep only the digits of a suggestion and reduce them mod 26."""
        digits = re.sub(r"[^0-9]", "", raw)
        if not digits:
            raise InvalidKeyError("Suggested Caesar key contains no digits", raw)
        return str(int(digits) % ALPHABET_SIZE)

    def explain(self, text: str, result: str, key: ShiftKey, encrypt: bool) -> str:
        """Generate human-readable explanation."""
        shift = key.shift % ALPHABET_SIZE
        direction = "forward" if encrypt else "back"

        return (
            f"Caesar cipher with shift of {key.shift}. "
            f"Each letter was shifted {direction} {shift} positions in the alphabet; "
            "non-letters were left unchanged. "
            f"For example, '{text[0] if text else 'N/A'}' "
            f"becomes '{result[0] if result else 'N/A'}'."
        )
