import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from cipherlab.api.v1.router import api_router
from cipherlab.core.config import get_settings
from cipherlab.core.exceptions import (
    CipherLabError,
    EngineNotFoundError,
    InvalidKeyError,
    KeySuggestionError,
    NonInvertibleKeyError,
    ValidationError,
)
from cipherlab.core.logging import configure_logging
from cipherlab.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()

_STATUS_CODES: list[tuple[type[CipherLabError], int]] = [
    (EngineNotFoundError, status.HTTP_404_NOT_FOUND),
    (InvalidKeyError, 422),
    (NonInvertibleKeyError, 422),
    (KeySuggestionError, status.HTTP_502_BAD_GATEWAY),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
]


async def cipher_lab_error_handler(request: Request, exc: CipherLabError) -> JSONResponse:
    """Render cipher lab errors as ErrorResponse bodies."""
    status_code = next(
        (code for error_type, code in _STATUS_CODES if isinstance(exc, error_type)),
        status.HTTP_400_BAD_REQUEST,
    )
    logger.info("%s %s failed: %s", request.method, request.url.path, type(exc).__name__)

    body = ErrorResponse(error=type(exc).__name__, message=exc.message, details=exc.details)
    return JSONResponse(status_code=status_code, content=body.model_dump())


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Classical Cipher Lab API. "
            "Encrypt and decrypt text with the Caesar, Vigenère, Playfair "
            "and Hill ciphers, and get suggested keys for each."
        ),
        version="0.1.0",
        openapi_url=f"{settings.api_v1_prefix}/openapi.json",
        docs_url=f"{settings.api_v1_prefix}/docs",
        redoc_url=f"{settings.api_v1_prefix}/redoc",
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"] if settings.is_development else [],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(CipherLabError, cipher_lab_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "cipherlab.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
