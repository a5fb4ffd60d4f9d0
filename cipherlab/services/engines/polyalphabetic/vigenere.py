import random
import re
from dataclasses import dataclass
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import ALPHABET, index_of, is_letter, shift_char
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry


@dataclass(frozen=True)
class RunningKey:
    """Vigenère keyword. Empty or non-alphabetic keywords leave text untouched."""

    keyword: str

    @property
    def is_identity(self) -> bool:
        return not self.keyword or not all(is_letter(c) for c in self.keyword)

    @property
    def shifts(self) -> list[int]:
        return [index_of(c) for c in self.keyword]


def vigenere(text: str, key: str, encrypt: bool = True) -> str:
    """
    Shift each letter of text by the matching letter of a repeating keyword.

    The key cursor only advances on letters, so spaces and punctuation do
    not consume key material. An empty key, or one containing anything
    other than Latin letters, returns text unchanged.
    """
    running = RunningKey(key)
    if running.is_identity:
        return text

    shifts = running.shifts
    result = []
    key_idx = 0

    for char in text:
        if is_letter(char):
            shift = shifts[key_idx % len(shifts)]
            result.append(shift_char(char, shift if encrypt else -shift))
            key_idx += 1
        else:
            result.append(char)

    return "".join(result)


@EngineRegistry.register
class VigenereEngine(CipherEngine):
    """
    Vigenère cipher engine.

    A polyalphabetic substitution cipher that uses a keyword to determine
    the shift for each letter. Each letter of the keyword represents a
    different Caesar shift applied in sequence.
    """

    name = "Vigenère Cipher"
    cipher_type = CipherType.VIGENERE
    cipher_family = CipherFamily.POLYALPHABETIC
    description = (
        "A polyalphabetic cipher where each letter is shifted by a different amount "
        "based on a repeating keyword. More secure than Caesar but vulnerable to "
        "Kasiski examination and frequency analysis per key position."
    )
    key_hint = "A keyword of Latin letters, e.g. LEMON."

    def parse_key(self, key: Any) -> RunningKey:
        """Parse key to a running key. Any string is accepted."""
        if isinstance(key, RunningKey):
            return key
        if not isinstance(key, str):
            raise InvalidKeyError("Vigenère key must be a string", key)
        return RunningKey(key)

    def transform(self, text: str, key: RunningKey, encrypt: bool) -> str:
        return vigenere(text, key.keyword, encrypt)

    def format_key(self, key: RunningKey) -> str:
        return key.keyword

    def generate_random_key(self) -> str:
        """Generate a random keyword."""
        length = random.randint(4, 10)
        return "".join(random.choice(ALPHABET) for _ in range(length))

    def normalize_suggested_key(self, raw: str) -> str:
        """Keep only the letters of a suggestion, uppercased."""
        letters = re.sub(r"[^A-Za-z]", "", raw).upper()
        if not letters:
            raise InvalidKeyError("Suggested Vigenère key contains no letters", raw)
        return letters

    def explain(self, text: str, result: str, key: RunningKey, encrypt: bool) -> str:
        """Generate human-readable explanation."""
        if key.is_identity:
            return (
                f"Vigenère keyword '{key.keyword}' is empty or not purely alphabetic, "
                f"so the text was returned unchanged."
            )

        shift_desc = ", ".join(
            f"{letter.upper()}={shift}" for letter, shift in zip(key.keyword, key.shifts)
        )
        direction = "forward" if encrypt else "back"

        return (
            f"Vigenère cipher with keyword '{key.keyword}' (length {len(key.keyword)}). "
            f"Letter shifts: {shift_desc}. "
            f"Each letter of the text is shifted {direction} by the corresponding "
            f"key letter's position in the alphabet; non-letters are copied "
            f"without advancing the keyword."
        )
