from typing import Annotated

from fastapi import Depends

from cipherlab.core.config import Settings, get_settings
from cipherlab.services.engines.registry import EngineRegistry
from cipherlab.services.keys.suggestion import KeySuggestionService


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]


def get_registry() -> EngineRegistry:
    """Get the cipher engine registry."""
    return EngineRegistry()


RegistryDep = Annotated[EngineRegistry, Depends(get_registry)]


def get_key_suggestion_service(settings: SettingsDep, registry: RegistryDep) -> KeySuggestionService:
    """Get a key suggestion service bound to the current settings."""
    return KeySuggestionService(settings=settings, registry=registry)


KeySuggestionServiceDep = Annotated[KeySuggestionService, Depends(get_key_suggestion_service)]
