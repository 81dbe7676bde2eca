from polysquare.models.schemas import CryptDirection
from polysquare.services.squares.cipher import SquareCipher
from polysquare.services.squares.key_matrix import KeyMatrix, build_key_matrix
from polysquare.services.squares.rules import SquareLayout


class PlayfairCipher(SquareCipher):
    """
    Playfair: one key square for both letters of every digram.

    Same row shifts right, same column shifts down, otherwise the letters
    swap to the opposite corners of their rectangle.
    """

    def __init__(self, keyword: str):
        super().__init__()
        self.key = build_key_matrix(keyword)
        self._layout = SquareLayout(self.key, self.key, self.key, self.key)

    def layout(self, direction: CryptDirection) -> SquareLayout:
        return self._layout

    @property
    def squares(self) -> dict[str, KeyMatrix]:
        return {"key": self.key}


class TwoSquareCipher(SquareCipher):
    """
    Two-Square (vertical): the first letter lives in the top square, the
    second in the bottom one.

        E X A M P
        L B C D F
        G H I K N
        O Q R S T
        U V W Y Z

        K E Y W O
        R D A B C
        F G H I L
        M N P Q S
        T U V X Z

    The squares are independent, so only the rectangle rule applies and it is
    its own inverse. Letters in the same column come out unchanged.
    """

    rectangle_only = True

    def __init__(self, top_keyword: str, bottom_keyword: str):
        super().__init__()
        self.top = build_key_matrix(top_keyword)
        self.bottom = build_key_matrix(bottom_keyword)
        self._layout = SquareLayout(self.top, self.bottom, self.top, self.bottom)

    def layout(self, direction: CryptDirection) -> SquareLayout:
        return self._layout

    @property
    def squares(self) -> dict[str, KeyMatrix]:
        return {"top": self.top, "bottom": self.bottom}


class FourSquareCipher(SquareCipher):
    """
    Four-Square: four squares in a 2x2 grid.

        Plain      |  Keyed 1
        -----------+-----------
        Keyed 2    |  Plain

    Plaintext letters are found in the plain squares (top-left, bottom-right)
    and read back from the keyed ones (top-right, bottom-left). Decryption
    swaps the roles.
    """

    rectangle_only = True

    def __init__(self, top_right_keyword: str, bottom_left_keyword: str):
        super().__init__()
        self.plain = KeyMatrix.plain()
        self.top_right = build_key_matrix(top_right_keyword)
        self.bottom_left = build_key_matrix(bottom_left_keyword)
        self._layouts = {
            CryptDirection.ENCRYPT: SquareLayout(
                self.plain, self.plain, self.top_right, self.bottom_left,
            ),
            CryptDirection.DECRYPT: SquareLayout(
                self.top_right, self.bottom_left, self.plain, self.plain,
            ),
        }

    def layout(self, direction: CryptDirection) -> SquareLayout:
        return self._layouts[direction]

    @property
    def squares(self) -> dict[str, KeyMatrix]:
        return {
            "top_left": self.plain,
            "top_right": self.top_right,
            "bottom_left": self.bottom_left,
            "bottom_right": self.plain,
        }
