import logging

from fastapi import APIRouter

from polysquare.core.exceptions import TextTooLongError, ValidationError
from polysquare.dependencies import SettingsDep
from polysquare.models.schemas import EncryptRequest, EncryptResponse, ErrorResponse
from polysquare.services.engines.registry import EngineRegistry

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    response_model=EncryptResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
        422: {"model": ErrorResponse, "description": "Character not in key square"},
    },
    summary="Encrypt plaintext",
    description="Encrypt plaintext using a specified square cipher. A random key is generated if none is given.",
)
async def encrypt_plaintext(
    request: EncryptRequest,
    settings: SettingsDep,
) -> EncryptResponse:
    """
    Encrypt plaintext with a specified cipher type.

    The cipher normalizes the plaintext first: uppercased, J folded into I
    and everything outside the 25-letter alphabet removed.
    """
    if len(request.plaintext) > settings.max_text_length:
        raise TextTooLongError(len(request.plaintext), settings.max_text_length)

    engine = EngineRegistry().require_engine(request.cipher_type)

    key = request.key
    if key is None:
        key = engine.generate_random_key()

    ciphertext = engine.encrypt(request.plaintext, key)
    if not ciphertext:
        raise ValidationError(
            "Plaintext contains no encryptable letters",
            {"plaintext": request.plaintext},
        )

    logger.info(
        "Encrypted %d letters with %s", len(ciphertext), request.cipher_type.value,
    )

    return EncryptResponse(
        ciphertext=ciphertext,
        cipher_type=request.cipher_type,
        key_used=key,
    )
