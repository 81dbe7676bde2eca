from typing import Any

from polysquare.models.schemas import CipherFamily, CipherType
from polysquare.services.engines.base import CipherEngine
from polysquare.services.engines.registry import EngineRegistry
from polysquare.services.engines.polygraphic.keywords import parse_keyword_pair, random_keyword_pair
from polysquare.services.squares.variants import TwoSquareCipher


@EngineRegistry.register
class TwoSquareEngine(CipherEngine):
    """
    Two-Square cipher engine.

    Two keyed 5x5 squares stacked vertically. The first letter of a digram
    is located in the top square, the second in the bottom square, and the
    opposite corners of the rectangle they span are read back. When both
    letters share a column the digram is left as is.
    """

    name = "Two-Square Cipher"
    cipher_type = CipherType.TWO_SQUARE
    cipher_family = CipherFamily.POLYGRAPHIC
    description = (
        "A digraph substitution cipher using two keyed 5x5 squares, one above "
        "the other. Each pair is replaced by the opposite corners of the "
        "rectangle it spans across both squares."
    )

    def parse_key(self, key: str | dict[str, Any]) -> tuple[str, str]:
        """Parse key to the top and bottom keywords."""
        return parse_keyword_pair(key)

    def build_cipher(self, key: str | dict[str, Any]) -> TwoSquareCipher:
        top, bottom = self.parse_key(key)
        return TwoSquareCipher(top, bottom)

    def generate_random_key(self) -> dict[str, str]:
        """Generate random keywords for both squares."""
        return random_keyword_pair()

    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """Generate human-readable explanation."""
        top, bottom = self.parse_key(key)
        cipher = self.build_cipher(key)

        return (
            f"Two-Square cipher with keywords '{top}' (top) and '{bottom}' (bottom).\n"
            f"Top square:\n{cipher.top}\n"
            f"Bottom square:\n{cipher.bottom}\n"
            f"Each digram spans a rectangle across both squares; "
            f"its opposite corners give the result."
        )
