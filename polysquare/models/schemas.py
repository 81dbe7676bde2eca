from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


# ============================================================================
# Enums
# ============================================================================


class CipherFamily(str, Enum):
    """Supported cipher families."""

    POLYGRAPHIC = "polygraphic"


class CipherType(str, Enum):
    """Specific cipher types."""

    PLAYFAIR = "playfair"
    TWO_SQUARE = "two_square"
    FOUR_SQUARE = "four_square"


class CryptDirection(str, Enum):
    """Selects forward (encrypt) or inverse (decrypt) substitution."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"


# ============================================================================
# Request Schemas
# ============================================================================


class DecryptRequest(BaseModel):
    """Request schema for /decrypt endpoint."""

    ciphertext: str = Field(min_length=1)
    cipher_type: CipherType
    key: str | dict[str, Any]


class EncryptRequest(BaseModel):
    """Request schema for /encrypt endpoint."""

    plaintext: str = Field(min_length=1)
    cipher_type: CipherType
    key: str | dict[str, Any] | None = None


class KeySquaresRequest(BaseModel):
    """Request schema for /ciphers/squares endpoint."""

    cipher_type: CipherType
    key: str | dict[str, Any]


# ============================================================================
# Response Schemas
# ============================================================================


class DecryptResponse(BaseModel):
    """Response schema for /decrypt endpoint."""

    plaintext: str
    key_used: str | dict[str, Any]
    explanation: str


class EncryptResponse(BaseModel):
    """Response schema for /encrypt endpoint."""

    ciphertext: str
    cipher_type: CipherType
    key_used: str | dict[str, Any]


class CipherInfo(BaseModel):
    """Metadata about a registered cipher engine."""

    cipher_type: CipherType
    cipher_family: CipherFamily
    name: str
    description: str


class KeySquaresResponse(BaseModel):
    """Key squares of a cipher, each rendered as five 5-letter rows."""

    cipher_type: CipherType
    squares: dict[str, list[str]]


# ============================================================================
# Error Schemas
# ============================================================================


class ErrorResponse(BaseModel):
    """Standard error response."""

    error: str
    message: str
    details: dict[str, Any] = Field(default_factory=dict)
