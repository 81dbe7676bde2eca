import logging

from fastapi import APIRouter

from polysquare.core.exceptions import TextTooLongError
from polysquare.dependencies import SettingsDep
from polysquare.models.schemas import DecryptRequest, DecryptResponse, ErrorResponse
from polysquare.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=DecryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Character not in key square"},
    },
    summary="Decrypt ciphertext",
    description="Decrypt ciphertext using a specified square cipher and key.",
)
async def decrypt_ciphertext(
    request: DecryptRequest,
    settings: SettingsDep,
) -> DecryptResponse:
    """
    Decrypt ciphertext with a known key.

    Filler letters inserted during encryption are not removed.
    """
    if len(request.ciphertext) > settings.max_text_length:
        raise TextTooLongError(len(request.ciphertext), settings.max_text_length)

    engine = EngineRegistry().require_engine(request.cipher_type)
    result = engine.decrypt_with_key(request.ciphertext, request.key)

    logger.info(
        "Decrypted %d letters with %s", len(result.plaintext), request.cipher_type.value,
    )

    return DecryptResponse(
        plaintext=result.plaintext,
        key_used=result.key,
        explanation=result.explanation,
    )
