from typing import Any


class CipherLabError(Exception):
    """Base exception for all cipher lab errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(CipherLabError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when input text exceeds maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class EngineError(CipherLabError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class InvalidKeyError(EngineError, ValueError):
    """Raised when a key does not match the grammar of the selected cipher."""

    def __init__(self, message: str, key: Any = None):
        details = {} if key is None else {"key": str(key)}
        super().__init__(message, details)


class NonInvertibleKeyError(EngineError, ValueError):
    """Raised when a Hill key matrix has no inverse modulo 26."""

    def __init__(self, determinant: int):
        super().__init__(
            f"Key matrix determinant {determinant} has no inverse mod 26",
            {"determinant": determinant},
        )


class KeySuggestionError(CipherLabError):
    """Raised when the key-suggestion collaborator fails or returns an unusable key."""

    pass
