"""Polygraphic cipher engines."""

from cipherlab.services.engines.polygraphic.hill import HillEngine, HillKeyMatrix, hill
from cipherlab.services.engines.polygraphic.playfair import PlayfairEngine, PlayfairKeyword, playfair

__all__ = [
    "HillEngine",
    "HillKeyMatrix",
    "PlayfairEngine",
    "PlayfairKeyword",
    "hill",
    "playfair",
]
