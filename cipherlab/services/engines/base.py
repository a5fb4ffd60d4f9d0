from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from cipherlab.core.exceptions import InvalidKeyError
from cipherlab.models.schemas import CipherFamily, CipherType


@dataclass(frozen=True)
class TransformResult:
    """Result of an encrypt or decrypt operation."""

    text: str
    key: str
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    Each cipher implementation must provide:
    - parse_key(): Turn raw key input into the cipher's typed key
    - transform(): Run the cipher in either direction
    - format_key(): Render a typed key back to its canonical string
    - generate_random_key(): Produce a fresh usable key
    - normalize_suggested_key(): Clean up a key proposed by an outside source
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily
    description: str
    key_hint: str

    @abstractmethod
    def parse_key(self, key: Any) -> Any:
        """
        Parse raw key input into this cipher's key type.

        Args:
            key: Key as supplied by a user or a suggestion service

        Returns:
            Typed key

        Raises:
            InvalidKeyError: If the key does not fit the cipher's key grammar
        """
        pass

    @abstractmethod
    def transform(self, text: str, key: Any, encrypt: bool) -> str:
        """
        Encrypt or decrypt text with a typed key.

        Args:
            text: Input text
            key: Key as returned by parse_key()
            encrypt: True to encrypt, False to decrypt

        Returns:
            Transformed text
        """
        pass

    @abstractmethod
    def format_key(self, key: Any) -> str:
        """Render a typed key as its canonical string form."""
        pass

    @abstractmethod
    def generate_random_key(self) -> str:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key string
        """
        pass

    @abstractmethod
    def normalize_suggested_key(self, raw: str) -> str:
        """
        Strip a suggested key down to this cipher's key grammar.

        Args:
            raw: Free-form key text, e.g. from a text-generation model

        Returns:
            Key string ready for parse_key()

        Raises:
            InvalidKeyError: If nothing usable is left after cleaning
        """
        pass

    @abstractmethod
    def explain(self, text: str, result: str, key: Any, encrypt: bool) -> str:
        """
        Generate human-readable explanation of a transform.

        Args:
            text: The input text
            result: The transformed text
            key: The typed key used
            encrypt: Direction of the transform

        Returns:
            Explanation string
        """
        pass

    def encrypt(self, plaintext: str, key: Any) -> TransformResult:
        """Encrypt plaintext with the given key."""
        return self._run(plaintext, key, encrypt=True)

    def decrypt(self, ciphertext: str, key: Any) -> TransformResult:
        """Decrypt ciphertext with the given key."""
        return self._run(ciphertext, key, encrypt=False)

    def validate_key(self, key: Any, encrypt: bool = True) -> bool:
        """
        Validate that a key is usable for this cipher.

        Args:
            key: The key to validate
            encrypt: Direction the key will be used in

        Returns:
            True if key is valid
        """
        try:
            self.parse_key(key)
        except InvalidKeyError:
            return False
        return True

    def _run(self, text: str, key: Any, encrypt: bool) -> TransformResult:
        typed_key = self.parse_key(key)
        result = self.transform(text, typed_key, encrypt)
        return TransformResult(
            text=result,
            key=self.format_key(typed_key),
            explanation=self.explain(text, result, typed_key, encrypt),
        )
