from fastapi import APIRouter

from cipherlab.core.exceptions import TextTooLongError
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import DecryptRequest, ErrorResponse, TransformResponse

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Invalid or non-invertible key"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified cipher type and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TransformResponse:
    """
    Decrypt ciphertext with a known key.

    Hill keys without an inverse mod 26 are rejected instead of producing
    a wrong plaintext.
    """
    if len(request.text) > settings.max_text_length:
        raise TextTooLongError(len(request.text), settings.max_text_length)

    engine = registry.require_engine(request.cipher_type)
    result = engine.decrypt(request.text, request.key)

    return TransformResponse(
        text=result.text,
        cipher_type=engine.cipher_type,
        key_used=result.key,
        explanation=result.explanation,
    )
