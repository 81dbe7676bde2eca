from typing import Any

from polysquare.core.exceptions import InvalidKeyError
from polysquare.models.schemas import CipherFamily, CipherType
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.engines.polygraphic.keywords import random_keyword
from polysquare.services.squares.variants import PlayfairCipher


@EngineRegistry.register
class PlayfairEngine(CipherEngine):
    """
    Playfair cipher engine.

    The Playfair cipher encrypts digraphs (pairs of letters) using a 5x5 key square.
    The alphabet is reduced to 25 letters (I and J are combined).

    Rules for encryption:
    1. Same row: replace each letter with the one to its right
    2. Same column: replace each letter with the one below
    3. Rectangle: swap corners horizontally

    Double letters are separated by an 'X' (e.g., "BALLOON" -> "BA LX LO ON").
    """

    name = "Playfair Cipher"
    cipher_type = CipherType.PLAYFAIR
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using a 5x5 key square. "
        "Pairs of letters are encrypted together based on their positions "
        "in the square. I and J are treated as the same letter."
    )

    def parse_key(self, key: str | dict[str, Any]) -> str:
        """Parse key to a keyword string."""
        if isinstance(key, dict):
            key = key.get("key", key.get("keyword", ""))
        if not isinstance(key, str):
            raise InvalidKeyError("Playfair key must be a keyword string", {"key": key})
        return key.upper().replace("J", "I")

    def build_cipher(self, key: str | dict[str, Any]) -> PlayfairCipher:
        return PlayfairCipher(self.parse_key(key))

    def generate_random_key(self) -> str:
        """Generate a random keyword."""
        return random_keyword()

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        keyword = self.parse_key(key)
        square = self.build_cipher(keyword).key

        return (
            f"Playfair cipher with keyword '{keyword}'. "
            f"5x5 key square:\n{square}\n"
            f"Letters are decrypted in pairs using row/column rules."
        )
