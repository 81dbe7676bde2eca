from typing import Iterator

from polysquare.services.squares.rules import Digram

FILLER = "X"
ALTERNATE_FILLER = "Q"


def _filler_for(letter: str, filler: str) -> str:
    # A filler equal to the letter it pads would form a doubled digram
    return ALTERNATE_FILLER if letter == filler else filler


def split_digraphs(text: str, filler: str = FILLER, split_doubles: bool = True) -> Iterator[Digram]:
    """
    Split normalized text into digrams.

    Two equal letters are never paired: the first one is emitted with the
    filler and the second starts the next digram. A trailing single letter
    is padded with the filler.

        "MYSECRETMESSAGE" -> MY SE CR ET ME SX SA GE

    Args:
        text: Normalized text (25-letter alphabet only)
        filler: Padding letter
        split_doubles: Set to False to pair letters strictly two by two,
            as needed for ciphertext of the two-square ciphers

    Yields:
        Digrams in order
    """
    i = 0
    while i < len(text):
        first = text[i]
        if i + 1 < len(text) and (text[i + 1] != first or not split_doubles):
            yield first, text[i + 1]
            i += 2
        else:
            yield first, _filler_for(first, filler)
            i += 1


class DigraphSegmenter:
    """Restartable iterable over the digrams of a text."""

    def __init__(self, text: str, filler: str = FILLER, split_doubles: bool = True):
        self.text = text
        self.filler = filler
        self.split_doubles = split_doubles

    def __iter__(self) -> Iterator[Digram]:
        return split_digraphs(self.text, self.filler, self.split_doubles)

    def __len__(self) -> int:
        return sum(1 for _ in self)
