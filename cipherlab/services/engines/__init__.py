"""Classical cipher engines and their registry."""

from cipherlab.services.engines.base import CipherEngine, TransformResult
from cipherlab.services.engines.registry import EngineRegistry

__all__ = [
    "CipherEngine",
    "EngineRegistry",
    "TransformResult",
]
