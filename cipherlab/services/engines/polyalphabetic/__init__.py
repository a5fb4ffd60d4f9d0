"""Polyalphabetic cipher engines."""

from cipherlab.services.engines.polyalphabetic.vigenere import RunningKey, VigenereEngine, vigenere

__all__ = [
    "RunningKey",
    "VigenereEngine",
    "vigenere",
]
