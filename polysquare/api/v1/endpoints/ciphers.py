from fastapi import APIRouter

from polysquare.models.schemas import CipherInfo, ErrorResponse, KeySquaresRequest, KeySquaresResponse
from polysquare.services.engines.registry import EngineRegistry

router = APIRouter()


@router.get(
    "",
    response_model=list[CipherInfo],
    summary="List ciphers",
    description="List the registered square ciphers.",
)
async def list_ciphers() -> list[CipherInfo]:
    registry = EngineRegistry()
    return [
        CipherInfo(
            cipher_type=engine.cipher_type,
            cipher_family=engine.cipher_family,
            name=engine.name,
            description=engine.description,
        )
        for engine in registry.get_all_engines()
    ]


@router.post(
    "/squares",
    response_model=KeySquaresResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid key"},
        404: {"model": ErrorResponse, "description": "Cipher type not supported"},
    },
    summary="Show key squares",
    description="Render the 5x5 key squares a cipher builds from a key.",
)
async def key_squares(request: KeySquaresRequest) -> KeySquaresResponse:
    engine = EngineRegistry().require_engine(request.cipher_type)
    squares = engine.key_squares(request.key)

    return KeySquaresResponse(cipher_type=request.cipher_type, squares=squares)
