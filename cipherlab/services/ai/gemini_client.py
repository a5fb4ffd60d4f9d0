"""
Gemini AI client for key suggestion.

Asks a text-generation model for a candidate key. The reply is free text;
callers must clean and validate it before use.
"""
import logging

import httpx

from cipherlab.core.config import get_settings
from cipherlab.core.exceptions import KeySuggestionError

logger = logging.getLogger(__name__)


class GeminiClient:
    """
    Client for Google's Gemini API.

    Provides key suggestions for the classical cipher engines.
    """

    BASE_URL = "https://generativelanguage.googleapis.com/v1beta/models"
    DEFAULT_MODEL = "gemini-2.5-flash-lite"

    def __init__(
        self,
        api_key: str | None = None,
        model: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """
        Initialize Gemini client.

        Args:
            api_key: Gemini API key. Falls back to settings if not provided.
            model: Model to use. Falls back to settings, then gemini-2.5-flash-lite.
            timeout: Request timeout in seconds. Falls back to settings.
            transport: Optional httpx transport, used by tests.
        """
        settings = get_settings()
        self.api_key = api_key or settings.gemini_api_key
        self.model = model or settings.gemini_model or self.DEFAULT_MODEL
        self._client = httpx.AsyncClient(
            timeout=timeout or settings.key_suggestion_timeout_seconds,
            transport=transport,
        )

    async def close(self) -> None:
        """Close the HTTP client."""
        await self._client.aclose()

    async def __aenter__(self) -> "GeminiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    async def generate_content(self, prompt: str) -> str:
        """
        Generate content using Gemini.

        Args:
            prompt: The prompt to send to Gemini

        Returns:
            Generated text response

        Raises:
            KeySuggestionError: If no API key is set or the request fails
        """
        if not self.api_key:
            raise KeySuggestionError("Gemini API key is not configured")

        url = f"{self.BASE_URL}/{self.model}:generateContent"

        payload = {
            "contents": [
                {
                    "parts": [
                        {"text": prompt}
                    ]
                }
            ]
        }

        headers = {
            "x-goog-api-key": self.api_key,
            "Content-Type": "application/json",
        }

        try:
            response = await self._client.post(url, json=payload, headers=headers)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            logger.warning("Gemini returned HTTP %s", e.response.status_code)
            raise KeySuggestionError(
                "Key suggestion service returned an error",
                {"status_code": e.response.status_code},
            ) from e
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Gemini request failed: %s", type(e).__name__)
            raise KeySuggestionError("Key suggestion service is unreachable") from e

        # Extract text from response
        try:
            candidates = data.get("candidates") or []
            if candidates:
                parts = (candidates[0].get("content") or {}).get("parts") or []
                if parts:
                    return parts[0].get("text") or ""
        except (AttributeError, TypeError, IndexError, KeyError) as e:
            logger.warning("Gemini returned an unexpected payload")
            raise KeySuggestionError("Key suggestion service returned a malformed response") from e

        return ""

    async def suggest_key(self, algorithm: str, key_length: int | None = None) -> str:
        """
        Ask Gemini for an encryption key.

        Args:
            algorithm: Cipher name, e.g. "caesar" or "hill"
            key_length: Desired key length, if any

        Returns:
            Raw key text as generated by the model
        """
        length_clause = ""
        if key_length and algorithm in _KEYWORD_CIPHERS:
            length_clause = f" The key should be {key_length} letters long."
        prompt = (
            f"You are a security expert. Generate an encryption key for the "
            f"{algorithm} cipher.{length_clause} "
            f"{_KEY_FORMATS.get(algorithm, '')} "
            f"Return only the key, with no explanation."
        )

        text = await self.generate_content(prompt)
        return text.strip()


_KEY_FORMATS = {
    "caesar": "The key is a single whole number between 1 and 25.",
    "vigenere": "The key is a single word made of English letters.",
    "playfair": "The key is a single word made of English letters.",
    "hill": (
        "The key is four integers between 0 and 25, separated by spaces, "
        "forming a 2x2 matrix that is invertible modulo 26."
    ),
}

# Only keyword keys have a meaningful length; numeric keys have a fixed shape.
_KEYWORD_CIPHERS = {"vigenere", "playfair"}
