import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from polysquare.api.v1.router import api_router
from polysquare.core.config import get_settings
from polysquare.core.exceptions import (
    CharacterNotInKeyError,
    EngineNotFoundError,
    PolysquareError,
    ValidationError,
)
from polysquare.core.logger import configure_logging
from polysquare.models.schemas import ErrorResponse

logger = logging.getLogger(__name__)

settings = get_settings()

# Checked in order; the first matching class wins
ERROR_STATUS_CODES: list[tuple[type[PolysquareError], int]] = [
    (ValidationError, status.HTTP_400_BAD_REQUEST),
    (EngineNotFoundError, status.HTTP_404_NOT_FOUND),
    (CharacterNotInKeyError, status.HTTP_422_UNPROCESSABLE_ENTITY),
]


def status_code_for(exc: PolysquareError) -> int:
    """HTTP status code for a polysquare error."""
    for error_class, status_code in ERROR_STATUS_CODES:
        if isinstance(exc, error_class):
            return status_code
    return status.HTTP_500_INTERNAL_SERVER_ERROR


async def polysquare_error_handler(request: Request, exc: PolysquareError) -> JSONResponse:
    """Render a polysquare error as an ErrorResponse body."""
    status_code = status_code_for(exc)
    logger.warning(
        "%s %s failed with %d: %s",
        request.method, request.url.path, status_code, exc.message,
    )

    body = ErrorResponse(
        error=type(exc).__name__,
        message=exc.message,
        details=exc.details,
    )
    return JSONResponse(status_code=status_code, content=jsonable_encoder(body))


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    configure_logging(settings.log_level)

    app = FastAPI(
        title=settings.app_name,
        description=(
            "Playfair, Two-Square and Four-Square cipher API. "
            "Encrypt and decrypt text with classical digram ciphers "
            "built on 5x5 key squares."
        ),
        version="0.1.0",
        debug=settings.debug,
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

    app.add_exception_handler(PolysquareError, polysquare_error_handler)

    # Include API router
    app.include_router(api_router, prefix=settings.api_v1_prefix)

    return app


app = create_app()


def run() -> None:
    """Run the application with uvicorn."""
    import uvicorn

    uvicorn.run(
        "polysquare.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.is_development,
    )


if __name__ == "__main__":
    run()
