from typing import Any


class PolysquareError(Exception):
    """Base exception for all polysquare errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ValidationError(PolysquareError):
    """Raised when input validation fails."""

    pass


class TextTooLongError(ValidationError):
    """Raised when a plaintext or ciphertext exceeds the maximum length."""

    def __init__(self, length: int, max_length: int):
        super().__init__(
            f"Text length {length} exceeds maximum {max_length}",
            {"length": length, "max_length": max_length},
        )


class InvalidKeyError(ValidationError):
    """Raised when a key cannot be parsed or does not form a valid key square."""

    pass


class EngineError(PolysquareError):
    """Base exception for cipher engine errors."""

    pass


class EngineNotFoundError(EngineError):
    """Raised when requested cipher engine is not found."""

    def __init__(self, engine_name: str):
        super().__init__(
            f"Cipher engine '{engine_name}' not found",
            {"engine_name": engine_name},
        )


class CharacterNotInKeyError(EngineError):
    """
    Raised when a letter of a digram cannot be located in its key square.

    Only letters outside the 25-letter alphabet trigger this, i.e. input that
    bypassed normalization. The whole payload is aborted.
    """

    def __init__(self, character: str, key: str):
        self.character = character
        self.key = key
        super().__init__(
            f"Only chars A-Z (without J) possible - '{character}' was not found in key {key}",
            {"character": character, "key": key},
        )
