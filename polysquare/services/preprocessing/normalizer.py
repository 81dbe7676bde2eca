import unicodedata
from dataclasses import dataclass, field

from polysquare.services.squares.key_matrix import ALPHABET


@dataclass
class NormalizedText:
    """Result of text normalization."""

    text: str
    original: str
    alphabet: str
    folded: int = 0
    removed_chars: dict[str, int] = field(default_factory=dict)


class TextNormalizer:
    """
    Normalizes text for the 25-letter key squares.

    Handles:
    - Unicode normalization (NFKC)
    - Case conversion
    - Folding J into I
    - Removal of everything outside the alphabet
    """

    def __init__(self, alphabet: str = ALPHABET):
        self.alphabet = alphabet.upper()
        self._allowed = set(self.alphabet)

    def normalize(self, text: str) -> str:
        """
        Normalize text to a stream of key-square letters.

        "I would like 4 tins of jam." becomes "IWOULDLIKETINSOFIAM".

        Args:
            text: Input text to normalize

        Returns:
            Normalized text string
        """
        return self.normalize_full(text).text

    def normalize_full(self, text: str) -> NormalizedText:
        """
        Normalize text and return detailed result.

        Args:
            text: Input text to normalize

        Returns:
            NormalizedText with details about the normalization
        """
        original = text
        removed_chars: dict[str, int] = {}

        text = unicodedata.normalize("NFKC", text).upper()
        folded = text.count("J")
        text = text.replace("J", "I")

        result = []
        for char in text:
            if char in self._allowed:
                result.append(char)
            else:
                removed_chars[char] = removed_chars.get(char, 0) + 1

        return NormalizedText(
            text="".join(result),
            original=original,
            alphabet=self.alphabet,
            folded=folded,
            removed_chars=removed_chars,
        )
