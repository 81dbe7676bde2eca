from typing import Any

from polysquare.models.schemas import CipherFamily, CipherType
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.engines.polygraphic.keywords import parse_keyword_pair, random_keyword_pair
from polysquare.services.squares.variants import FourSquareCipher


@EngineRegistry.register
class FourSquareEngine(CipherEngine):
    """
    Four-Square cipher engine.

    The Four-Square cipher uses four 5x5 key squares arranged in a 2x2 grid:

        Plaintext 1  |  Ciphertext 1
        ─────────────┼───────────────
        Ciphertext 2 |  Plaintext 2

    The plaintext squares (top-left, bottom-right) use standard alphabet.
    The ciphertext squares (top-right, bottom-left) are keyed.

    Encryption:
    1. Find first plaintext letter in top-left square
    2. Find second plaintext letter in bottom-right square
    3. Form a rectangle and read corners from keyed squares
    """

    name = "Four-Square Cipher"
    cipher_type = CipherType.FOUR_SQUARE
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using four 5x5 key squares. "
        "Two squares contain the standard alphabet, two contain keyed alphabets. "
        "Pairs of letters are encrypted by forming rectangles between squares."
    )

    def parse_key(self, key: str | dict[str, Any]) -> tuple[str, str]:
        """Parse key to two keyword strings."""
        return parse_keyword_pair(key)

    def build_cipher(self, key: str | dict[str, Any]) -> FourSquareCipher:
        key1, key2 = self.parse_key(key)
        return FourSquareCipher(key1, key2)

    def generate_random_key(self) -> dict[str, str]:
        """Generate random keywords for both keyed squares."""
        return random_keyword_pair()

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        key1, key2 = self.parse_key(key)

        return (
            f"Four-Square cipher with keywords '{key1}' and '{key2}'. "
            f"Uses four 5x5 squares: two standard (top-left, bottom-right) "
            f"and two keyed (top-right from '{key1}', bottom-left from '{key2}'). "
            f"Digraphs are decrypted by forming rectangles between squares."
        )
