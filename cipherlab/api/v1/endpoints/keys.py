from fastapi import APIRouter

from cipherlab.dependencies import KeySuggestionServiceDep
from cipherlab.models.schemas import ErrorResponse, KeySuggestionRequest, KeySuggestionResponse

router = APIRouter()


@router.post(
    "/suggest",
    response_model=KeySuggestionResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        502: {"model": ErrorResponse, "description": "Key suggestion failed"},
    },
    summary="Suggest a key",
    description=(
        "Suggest a key for a cipher. Uses the configured text-generation model "
        "when available, otherwise generates one locally."
    ),
)
async def suggest_key(
    request: KeySuggestionRequest,
    service: KeySuggestionServiceDep,
) -> KeySuggestionResponse:
    """Suggest a validated key for the requested cipher."""
    suggestion = await service.suggest(request.cipher_type, request.key_length)

    return KeySuggestionResponse(
        cipher_type=suggestion.cipher_type,
        key=suggestion.key,
        source=suggestion.source,
    )
