from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    MONOALPHABETIC = "monoalphabetic"
    POLYALPHABETIC = "polyalphabetic"
    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    CAESAR = "caesar"
    VIGENERE = "vigenere"
    PLAYFAIR = "playfair"
    HILL = "hill"


class KeySource(str, Enum):
    """Where a suggested key came from."""

    AI = "ai"
    LOCAL = "local"


# Keys arrive as strings from forms, but numeric and matrix keys are accepted as JSON too.
KeyInput = str | int | list[int] | list[list[int]]


# ============================================================================
# Request Schemas
# ============================================================================


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    text: str = Field(min_length=1)
    cipher_type: CipherType
    key: KeyInput | None = None


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    text: str = Field(min_length=1)
    cipher_type: CipherType
    key: KeyInput


class KeySuggestionRequest(BaseModel):
    """Request schema for /keys/suggest endpoint."""

    cipher_type: CipherType
    key_length: int | None = Field(default=None, ge=1, le=64)


# ============================================================================
# Response Schemas
# ============================================================================


class CipherInfo(BaseModel):
    """Metadata about a registered cipher."""

    cipher_type: CipherType
    name: str
    family: CipherFamily
    description: str
    key_hint: str


class TransformResponse(BaseModel):
    """Response schema for /encrypt and /decrypt endpoints."""

    text: str
    cipher_type: CipherType
    key_used: str
    explanation: str


class KeySuggestionResponse(BaseModel):
    """Response schema for /keys/suggest endpoint."""

    cipher_type: CipherType
    key: str
    source: KeySource


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
