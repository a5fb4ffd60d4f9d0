import random
from dataclasses import dataclass
from typing import Any, ClassVar

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType
from cipherlab.services.engines.alphabet import letters_only
from cipherlab.services.engines.base import CipherEngine
from cipherlab.services.engines.registry import EngineRegistry

SQUARE_ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
SQUARE_SIZE = 5
FILLER = "X"


@dataclass(frozen=True)
class PlayfairKeyword:
    """Playfair keyword. Any string is usable, including the empty one."""

    keyword: str


def _fold(text: str) -> str:
    """Uppercase, keep Latin letters only and merge J into I."""
    return letters_only(text).replace("J", "I")


def build_key_square(keyword: str) -> list[list[str]]:
    """
    Build the 5x5 key square from a keyword.

    Keyword letters come first in order of appearance, then the rest of the
    alphabet. Every letter appears once and J shares a cell with I.
    """
    seen = set()
    key_letters = []
    for char in _fold(keyword) + SQUARE_ALPHABET:
        if char not in seen:
            seen.add(char)
            key_letters.append(char)

    return [
        key_letters[row * SQUARE_SIZE:(row + 1) * SQUARE_SIZE]
        for row in range(SQUARE_SIZE)
    ]


def prepare_digraphs(text: str) -> list[tuple[str, str]]:
    """
    Split text into Playfair digraphs.

    - Convert to uppercase and drop non-letters
    - Replace J with I
    - A doubled pair becomes (letter, X) and pairing resumes at the second letter
    - A trailing single letter is padded with X
    """
    text = _fold(text)

    result = []
    i = 0
    while i < len(text):
        first = text[i]
        second = text[i + 1] if i + 1 < len(text) else None

        if second is None or second == first:
            result.append((first, FILLER))
            i += 1
        else:
            result.append((first, second))
            i += 2

    return result


def playfair(text: str, key: str, encrypt: bool = True) -> str:
    """
    Encrypt or decrypt text with the Playfair digraph cipher.

    Output is uppercase letters only, so non-letters and the original case
    are lost. The key square is rebuilt on every call.
    """
    square = build_key_square(key)
    positions = {
        square[row][col]: (row, col)
        for row in range(SQUARE_SIZE)
        for col in range(SQUARE_SIZE)
    }
    step = 1 if encrypt else -1

    result = []
    for a, b in prepare_digraphs(text):
        row_a, col_a = positions[a]
        row_b, col_b = positions[b]

        if row_a == row_b:
            # Same row: shift columns
            result.append(square[row_a][(col_a + step) % SQUARE_SIZE])
            result.append(square[row_b][(col_b + step) % SQUARE_SIZE])
        elif col_a == col_b:
            # Same column: shift rows
            result.append(square[(row_a + step) % SQUARE_SIZE][col_a])
            result.append(square[(row_b + step) % SQUARE_SIZE][col_b])
        else:
            # Rectangle: swap columns
            result.append(square[row_a][col_b])
            result.append(square[row_b][col_a])

    return "".join(result)


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON").
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )
    key_hint = "A keyword, e.g. MONARCHY. Non-letters in the keyword are ignored."

    SAMPLE_KEYWORDS: ClassVar[list[str]] = [
        "PLAYFAIR", "SECRET", "KEYWORD", "CIPHER", "MONARCHY",
        "EXAMPLE", "CRYPTO", "HIDDEN", "SECURE", "SQUARE",
    ]

    def parse_key(self, key: Any) -> PlayfairKeyword:
        """Parse key to a keyword. Any string is accepted."""
        if isinstance(key, PlayfairKeyword):
            return key
        if not isinstance(key, str):
            raise InvalidKeyError("Playfair key must be a string", key)
        return PlayfairKeyword(key)

    def transform(self, text: str, key: PlayfairKeyword, encrypt: bool) -> str:
        return playfair(text, key.keyword, encrypt)

    def format_key(self, key: PlayfairKeyword) -> str:
        return key.keyword

    def generate_random_key(self) -> str:
        """Pick a keyword and scramble it with a random suffix."""
        suffix = "".join(random.choice(SQUARE_ALPHABET) for _ in range(random.randint(0, 4)))
        return random.choice(self.SAMPLE_KEYWORDS) + suffix

    def normalize_suggested_key(self, raw: str) -> str:
        """Keep only the letters of a suggestion, uppercased."""
        letters = letters_only(raw)
        if not letters:
            raise InvalidKeyError("Suggested Playfair key contains no letters", raw)
        return letters

    def explain(self, text: str, result: str, key: PlayfairKeyword, encrypt: bool) -> str:
        """Generate human-readable explanation."""
        square = build_key_square(key.keyword)
        square_str = "\n".join(" ".join(row) for row in square)
        keyword_desc = f"keyword '{key.keyword}'" if key.keyword else "no keyword"

        return (
            f"Playfair cipher with {keyword_desc}. "
            f"5x5 key square:\n{square_str}\n"
            f"Letters are {'encrypted' if encrypt else 'decrypted'} in pairs using "
            f"row/column rules. Doubled letters and a trailing single letter are "
            f"padded with '{FILLER}', and non-letters are dropped."
        )
