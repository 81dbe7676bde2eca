import logging
from functools import lru_cache
from typing import NamedTuple

from polysquare.core.exceptions import InvalidKeyError

logger = logging.getLogger(__name__)

ALPHABET = "ABCDEFGHIKLMNOPQRSTUVWXYZ"  # 25 letters, I=J
GRID_SIZE = 5


class GridPosition(NamedTuple):
    """Row and column of a letter in a 5x5 key square."""

    row: int
    column: int

    @property
    def index(self) -> int:
        """Linear row-major index into the square."""
        return self.row * GRID_SIZE + self.column

    @classmethod
    def from_index(cls, index: int) -> "GridPosition":
        return cls(index // GRID_SIZE, index % GRID_SIZE)


class KeyMatrix:
    """
    A 5x5 key square holding each letter of the 25-letter alphabet once.

    Letters are stored row-major. A reverse map from letter to grid position
    is built at construction time; instances are never mutated afterwards and
    can be shared freely.

        P L A Y F
        I R E X M
        B C D G H
        K N O Q S
        T U V W Z
    """

    __slots__ = ("_letters", "_positions")

    def __init__(self, letters: str):
        letters = letters.upper()
        if len(letters) != len(ALPHABET) or set(letters) != set(ALPHABET):
            raise InvalidKeyError(
                f"Key square must hold each of the letters {ALPHABET} exactly once",
                {"letters": letters},
            )

        self._letters = letters
        self._positions = {
            letter: GridPosition.from_index(index)
            for index, letter in enumerate(letters)
        }

    @classmethod
    def from_keyword(cls, keyword: str) -> "KeyMatrix":
        """
        Build the key square for a keyword.

        The keyword is uppercased, stripped of spaces and J is folded into I.
        The full alphabet is appended and the first occurrence of every
        alphabet letter is kept, in order, until 25 letters are collected.
        Characters outside the alphabet are skipped, so this never fails.
        An empty keyword gives the plain alphabet square.

        Args:
            keyword: Arbitrary keyword text

        Returns:
            The key square
        """
        raw = keyword.upper().replace(" ", "").replace("J", "I") + ALPHABET

        accepted: list[str] = []
        seen: set[str] = set()
        for char in raw:
            if len(accepted) == len(ALPHABET):
                break
            if char in ALPHABET and char not in seen:
                seen.add(char)
                accepted.append(char)

        return cls("".join(accepted))

    @classmethod
    def plain(cls) -> "KeyMatrix":
        """The unkeyed square: the alphabet in order."""
        return build_key_matrix("")

    @property
    def letters(self) -> str:
        return self._letters

    def position_of(self, letter: str) -> GridPosition | None:
        """Grid position of a letter, or None if the square does not hold it."""
        return self._positions.get(letter)

    def letter_at(self, index: int) -> str:
        """Letter at a linear index in 0..24."""
        if not 0 <= index < len(self._letters):
            raise IndexError(f"Key square index {index} out of range")
        return self._letters[index]

    def letter_at_position(self, position: GridPosition) -> str:
        return self.letter_at(position.index)

    def rows(self) -> list[str]:
        """The square as five 5-letter rows."""
        return [
            self._letters[i * GRID_SIZE:(i + 1) * GRID_SIZE]
            for i in range(GRID_SIZE)
        ]

    def __contains__(self, letter: object) -> bool:
        return letter in self._positions

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, KeyMatrix):
            return NotImplemented
        return self._letters == other._letters

    def __hash__(self) -> int:
        return hash(self._letters)

    def __str__(self) -> str:
        return "\n".join(" ".join(row) for row in self.rows())

    def __repr__(self) -> str:
        return f"KeyMatrix({self._letters!r})"


@lru_cache(maxsize=256)
def build_key_matrix(keyword: str) -> KeyMatrix:
    """Cached ``KeyMatrix.from_keyword``."""
    matrix = KeyMatrix.from_keyword(keyword)
    logger.debug("Built key square %s for keyword %r", matrix.letters, keyword)
    return matrix
