from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any

from polysquare.models.schemas import CipherFamily, CipherType
from polysquare.services.squares.cipher import SquareCipher


@dataclass
class DecryptionResult:
    """Result of a decryption operation."""

    plaintext: str
    key: str | dict[str, Any]
    explanation: str


class CipherEngine(ABC):
    """
    Abstract base class for all cipher engines.

    An engine adapts user-supplied keys to a SquareCipher. Each
    implementation must provide:
    - parse_key(): Turn a raw key into keyword(s)
    - build_cipher(): Construct the cipher for a key
    - generate_random_key(): Produce a random valid key
    - explain(): Generate human-readable explanation
    """

    # Cipher metadata
    name: str
    cipher_type: CipherType
    cipher_family: CipherFamily = CipherFamily.POLYGRAPHIC
    description: str

    @abstractmethod
    def parse_key(self, key: str | dict[str, Any]) -> Any:
        """
        Normalize a raw key.

        Args:
            key: Keyword string or dict of keywords

        Returns:
            The parsed keyword(s)

        Raises:
            InvalidKeyError: If the key has an unusable shape
        """
        pass

    @abstractmethod
    def build_cipher(self, key: str | dict[str, Any]) -> SquareCipher:
        """
        Build the cipher for a key.

        Args:
            key: The key

        Returns:
            SquareCipher holding the key squares
        """
        pass

    @abstractmethod
    def generate_random_key(self) -> str | dict[str, Any]:
        """
        Generate a random valid key for this cipher.

        Returns:
            A randomly generated key
        """
        pass

    @abstractmethod
    def explain(
        self,
        ciphertext: str,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """
        Generate human-readable explanation of the decryption.

        Args:
            ciphertext: The original ciphertext
            plaintext: The decrypted plaintext
            key: The key used

        Returns:
            Explanation string
        """
        pass

    def encrypt(
        self,
        plaintext: str,
        key: str | dict[str, Any],
    ) -> str:
        """
        Encrypt plaintext with the given key.

        Args:
            plaintext: The plaintext to encrypt
            key: The encryption key

        Returns:
            Ciphertext
        """
        return self.build_cipher(key).encrypt(plaintext)

    def decrypt_with_key(
        self,
        ciphertext: str,
        key: str | dict[str, Any],
    ) -> DecryptionResult:
        """
        Decrypt with a known key.

        Args:
            ciphertext: The ciphertext to decrypt
            key: The decryption key

        Returns:
            DecryptionResult with plaintext and metadata
        """
        plaintext = self.build_cipher(key).decrypt(ciphertext)

        return DecryptionResult(
            plaintext=plaintext,
            key=key,
            explanation=self.explain(ciphertext, plaintext, key),
        )

    def key_squares(self, key: str | dict[str, Any]) -> dict[str, list[str]]:
        """Render each key square of the cipher as five rows."""
        return {
            name: matrix.rows()
            for name, matrix in self.build_cipher(key).squares.items()
        }
