from typing import Type

from cipherlab.core.exceptions import EngineNotFoundError
from cipherlab.models.schemas import CipherType
from cipherlab.services.engines.base import CipherEngine


class EngineRegistry:
    """
    Registry for cipher engines.

    Manages available cipher engines and provides lookup by type.
    Engines are stateless, so one shared instance per type is enough.
    """

    _engines: dict[CipherType, Type[CipherEngine]] = {}
    _instances: dict[CipherType, CipherEngine] = {}

    @classmethod
    def register(cls, engine_class: Type[CipherEngine]) -> Type[CipherEngine]:
        """
        Register a cipher engine class.

        Can be used as a decorator:
            @EngineRegistry.register
            class CaesarEngine(CipherEngine):
                ...

        Args:
            engine_class: The engine class to register

        Returns:
            The engine class (for decorator usage)
        """
        cls._engines[engine_class.cipher_type] = engine_class
        return engine_class

    def get_engine(self, cipher_type: CipherType) -> CipherEngine | None:
        """
        Get an engine instance for the specified cipher type.

        Args:
            cipher_type: The type of cipher

        Returns:
            Engine instance or None if not found
        """
        if cipher_type not in self._engines:
            return None

        # Lazy instantiation with caching
        if cipher_type not in self._instances:
            self._instances[cipher_type] = self._engines[cipher_type]()

        return self._instances[cipher_type]

    def require_engine(self, cipher_type: CipherType | str) -> CipherEngine:
        """
        Get an engine instance or fail loudly.

        Args:
            cipher_type: The type of cipher, as enum or its string value

        Returns:
            Engine instance

        Raises:
            EngineNotFoundError: If no engine is registered for the type
        """
        try:
            cipher_type = CipherType(cipher_type)
        except ValueError:
            raise EngineNotFoundError(str(cipher_type)) from None

        engine = self.get_engine(cipher_type)
        if engine is None:
            raise EngineNotFoundError(cipher_type.value)
        return engine

    def get_all_engines(self) -> list[CipherEngine]:
        """Get all registered engines, in CipherType order."""
        return [
            self.get_engine(cipher_type)
            for cipher_type in CipherType
            if cipher_type in self._engines
        ]

    @classmethod
    def list_registered(cls) -> list[CipherType]:
        """List all registered cipher types."""
        return list(cls._engines.keys())

    @classmethod
    def is_registered(cls, cipher_type: CipherType) -> bool:
        """Check if a cipher type is registered."""
        return cipher_type in cls._engines


# Import engines to trigger registration
def _load_engines() -> None:
    """Load all engine modules to trigger registration."""
    from cipherlab.services.engines.monoalphabetic import caesar  # noqa: F401
    from cipherlab.services.engines.polyalphabetic import vigenere  # noqa: F401
    from cipherlab.services.engines.polygraphic import hill, playfair  # noqa: F401


# Load engines when module is imported
_load_engines()
