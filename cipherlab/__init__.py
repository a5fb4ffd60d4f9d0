"""
Classical cipher lab.

Caesar, Vigenère, Playfair and Hill ciphers as plain functions, plus a
registry of engine classes and a small HTTP API around them.
"""
from cipherlab.core.exceptions import (
    CipherLabError,
    InvalidKeyError,
    NonInvertibleKeyError,
)
from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.alphabet import index_of, letters_only, shift_char
from cipherlab.services.engines.monoalphabetic.caesar import caesar
from cipherlab.services.engines.polyalphabetic.vigenere import vigenere
from cipherlab.services.engines.polygraphic.hill import hill
from cipherlab.services.engines.polygraphic.playfair import playfair

__version__ = "0.1.0"

__all__ = [
    "CipherLabError",
    "CipherType",
    "InvalidKeyError",
    "NonInvertibleKeyError",
    "caesar",
    "hill",
    "index_of",
    "letters_only",
    "playfair",
    "shift_char",
    "vigenere",
]
