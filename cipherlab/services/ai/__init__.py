"""AI services for key suggestion."""

from cipherlab.services.ai.gemini_client import GeminiClient

__all__ = ["GeminiClient"]
