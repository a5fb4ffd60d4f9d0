import logging
from dataclasses import dataclass

from cipherlab.core.config import Settings, get_settings
from cipherlab.core.exceptions import InvalidKeyError, KeySuggestionError
from cipherlab.models.schemas import CipherType, KeySource
from cipherlab.services.ai.gemini_client import GeminiClient
from cipherlab.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class KeySuggestion:
    """A key proposed for a cipher, already checked against its grammar."""

    cipher_type: CipherType
    key: str
    source: KeySource


class KeySuggestionService:
    """
    Produces candidate keys for the cipher engines.

    Suggestions from the model are treated exactly like user input: they are
    stripped to the cipher's key grammar and parsed again before being
    returned. Without an API key, keys are generated locally.
    """

    def __init__(
        self,
        settings: Settings | None = None,
        client: GeminiClient | None = None,
        registry: EngineRegistry | None = None,
    ):
        self.settings = settings or get_settings()
        self.client = client
        self.registry = registry or EngineRegistry()

    async def suggest(
        self,
        cipher_type: CipherType,
        key_length: int | None = None,
    ) -> KeySuggestion:
        """
        Suggest a key for the given cipher.

        Args:
            cipher_type: Cipher the key is for
            key_length: Desired key length, passed on to the model

        Returns:
            Validated key suggestion

        Raises:
            EngineNotFoundError: If the cipher is not registered
            KeySuggestionError: If the model fails or proposes an unusable key
        """
        engine = self.registry.require_engine(cipher_type)

        if self.client is None and not self.settings.key_suggestion_enabled:
            logger.info("No Gemini API key set, generating %s key locally", engine.cipher_type.value)
            return KeySuggestion(engine.cipher_type, engine.generate_random_key(), KeySource.LOCAL)

        client = self.client or GeminiClient(
            api_key=self.settings.gemini_api_key,
            model=self.settings.gemini_model,
            timeout=self.settings.key_suggestion_timeout_seconds,
        )
        try:
            raw = await client.suggest_key(engine.cipher_type.value, key_length)
        finally:
            if self.client is None:
                await client.close()

        try:
            key = engine.normalize_suggested_key(raw)
        except InvalidKeyError as e:
            logger.warning("Discarded unusable %s key suggestion", engine.cipher_type.value)
            raise KeySuggestionError(e.message, {"cipher_type": engine.cipher_type.value}) from e

        if not engine.validate_key(key, encrypt=False):
            logger.warning("Suggested %s key failed validation", engine.cipher_type.value)
            raise KeySuggestionError(
                f"Suggested {engine.name} key is not valid",
                {"cipher_type": engine.cipher_type.value},
            )

        return KeySuggestion(engine.cipher_type, key, KeySource.AI)
