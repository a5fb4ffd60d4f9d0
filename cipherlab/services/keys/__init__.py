"""Key suggestion and validation."""

from cipherlab.services.keys.suggestion import KeySuggestion, KeySuggestionService

__all__ = ["KeySuggestion", "KeySuggestionService"]
