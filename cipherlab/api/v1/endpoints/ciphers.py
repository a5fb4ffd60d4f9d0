from fastapi import APIRouter

from cipherlab.dependencies import RegistryDep
from cipherlab.models.schemas import CipherInfo

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the available classical ciphers and the key each one expects.",
)
async def list_ciphers(registry: RegistryDep) -> list[CipherInfo]:
    """List all registered cipher engines."""
    return [
        CipherInfo(
            cipher_type=engine.cipher_type,
            name=engine.name,
            family=engine.cipher_family,
            description=engine.description,
            key_hint=engine.key_hint,
        )
        for engine in registry.get_all_engines()
    ]
