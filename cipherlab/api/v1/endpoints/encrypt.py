import logging

from fastapi import APIRouter

from cipherlab.core.exceptions import TextTooLongError
from cipherlab.dependencies import RegistryDep, SettingsDep
from cipherlab.models.schemas import EncryptRequest, ErrorResponse, TransformResponse

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=TransformResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Invalid key"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified cipher type. A random key is used when none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
    registry: RegistryDep,
) -> TransformResponse:
    """
    Encrypt plaintext with a specified cipher type.

    Text is passed to the engine as-is; each cipher decides how case and
    non-letters are handled.
    """
    if len(request.text) > settings.max_text_length:
        raise TextTooLongError(len(request.text), settings.max_text_length)

    engine = registry.require_engine(request.cipher_type)

    key = request.key
    if key is None:
        key = engine.generate_random_key()
        logger.info("Generated random %s key for encryption", engine.cipher_type.value)

    result = engine.encrypt(request.text, key)

    return TransformResponse(
        text=result.text,
        cipher_type=engine.cipher_type,
        key_used=result.key,
        explanation=result.explanation,
    )
