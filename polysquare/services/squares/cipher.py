import logging
from abc import ABC, abstractmethod
from typing import ClassVar, Iterable

from polysquare.models.schemas import CryptDirection
from polysquare.services.preprocessing.digraphs import split_digraphs
from polysquare.services.preprocessing.normalizer import TextNormalizer
from polysquare.services.squares.key_matrix import KeyMatrix
from polysquare.services.squares.rules import Digram, SquareLayout, substitute

logger = logging.getLogger(__name__)


class SquareCipher(ABC):
    """
    Base class for digram ciphers built on 5x5 key squares.

    Subclasses own their key squares and decide, per direction, which square
    each letter is looked up in and which square it is read back from.
    """

    rectangle_only: ClassVar[bool] = False

    def __init__(self) -> None:
        self._normalizer = TextNormalizer()

    @abstractmethod
    def layout(self, direction: CryptDirection) -> SquareLayout:
        """Source and target squares for the given direction."""
        pass

    @property
    @abstractmethod
    def squares(self) -> dict[str, KeyMatrix]:
        """The distinct key squares of this cipher, by name."""
        pass

    def crypt(self, a: str, b: str, direction: CryptDirection) -> Digram:
        """Substitute a single digram."""
        return substitute(a, b, self.layout(direction), direction, self.rectangle_only)

    def crypt_digraphs(self, digraphs: Iterable[Digram], direction: CryptDirection) -> str:
        """
        Substitute every digram and join the results.

        Any CharacterNotInKeyError aborts the whole payload.
        """
        layout = self.layout(direction)
        result = []
        for a, b in digraphs:
            result.extend(substitute(a, b, layout, direction, self.rectangle_only))
        return "".join(result)

    def encrypt(self, plaintext: str) -> str:
        """
        Encrypt text.

        The text is uppercased, J folded into I and everything outside the
        alphabet dropped before it is split into digrams.
        """
        return self._crypt_text(plaintext, CryptDirection.ENCRYPT)

    def decrypt(self, ciphertext: str) -> str:
        """Decrypt text. Fillers inserted on encryption are kept."""
        return self._crypt_text(ciphertext, CryptDirection.DECRYPT)

    def _crypt_text(self, text: str, direction: CryptDirection) -> str:
        normalized = self._normalizer.normalize(text)
        logger.debug(
            "%s %s: %d letters after normalization",
            type(self).__name__, direction.value, len(normalized),
        )
        # Rectangle-only ciphertext may hold doubled digrams that must stay paired
        split_doubles = direction == CryptDirection.ENCRYPT or not self.rectangle_only
        return self.crypt_digraphs(split_digraphs(normalized, split_doubles=split_doubles), direction)
