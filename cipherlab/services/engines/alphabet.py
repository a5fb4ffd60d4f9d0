"""
Alphabet helpers shared by every cipher engine.

Only the 26 ASCII Latin letters are alphabetic. Case and non-alphabetic
pass-through are decided here and nowhere else.
"""
import string

ALPHABET = string.ascii_uppercase
ALPHABET_SIZE = len(ALPHABET)

_INDEX = {letter: idx for idx, letter in enumerate(ALPHABET)}


def is_letter(char: str) -> bool:
    """Return True if char is a single ASCII Latin letter."""
    return len(char) == 1 and char in string.ascii_letters


def index_of(char: str) -> int | None:
    """Return the 0-25 alphabet index of char, case-insensitively, or None."""
    if not is_letter(char):
        return None
    return _INDEX[char.upper()]


def letter_at(index: int) -> str:
    """Return the uppercase letter at index, reduced mod 26."""
    return ALPHABET[index % ALPHABET_SIZE]


def shift_char(char: str, n: int) -> str:
    """
    Shift a letter n places through the alphabet, preserving its case.

    Non-letters are returned unchanged. Negative shifts wrap around.
    """
    idx = index_of(char)
    if idx is None:
        return char

    shifted = letter_at(idx + n)
    return shifted if char.isupper() else shifted.lower()


def letters_only(text: str) -> str:
    """Uppercase text and drop every character that is not a Latin letter."""
    return "".join(c.upper() for c in text if is_letter(c))
