"""Monoalphabetic cipher engines."""

from cipherlab.services.engines.monoalphabetic.caesar import CaesarEngine, ShiftKey, caesar

__all__ = [
    "CaesarEngine",
    "ShiftKey",
    "caesar",
]
