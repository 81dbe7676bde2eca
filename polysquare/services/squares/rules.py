"""
Geometric substitution rules for digrams on 5x5 key squares.

Given the grid positions of the two letters of a digram, the rules return
the linear indices of the substituted letters:

1. Square: different row and column. Each letter takes the corner of the
   rectangle in its own row. Identical for encryption and decryption.
2. Column: same column. Each letter moves one row down (encrypt) or up
   (decrypt), wrapping around.
3. Row: same row. Each letter moves one column right (encrypt) or left
   (decrypt), wrapping around.
"""
from dataclasses import dataclass

from polysquare.core.exceptions import CharacterNotInKeyError
from polysquare.models.schemas import CryptDirection
from polysquare.services.squares.key_matrix import GRID_SIZE, GridPosition, KeyMatrix

Digram = tuple[str, str]


@dataclass(frozen=True)
class SquareLayout:
    """Which square each letter is looked up in and which square it is read back from."""

    source_a: KeyMatrix
    source_b: KeyMatrix
    target_a: KeyMatrix
    target_b: KeyMatrix


def rectangle(a_pos: GridPosition, b_pos: GridPosition) -> tuple[int, int]:
    """Square rule arithmetic, applied regardless of alignment."""
    return (
        a_pos.row * GRID_SIZE + b_pos.column,
        b_pos.row * GRID_SIZE + a_pos.column,
    )


def _shift(position: GridPosition, row_step: int, column_step: int) -> int:
    row = (position.row + row_step) % GRID_SIZE
    column = (position.column + column_step) % GRID_SIZE
    return row * GRID_SIZE + column


def transform(
    a_pos: GridPosition,
    b_pos: GridPosition,
    direction: CryptDirection,
) -> tuple[int, int]:
    """
    Apply the Playfair rules to a pair of positions in one square.

    Args:
        a_pos: Position of the first letter
        b_pos: Position of the second letter
        direction: Encrypt moves down/right, decrypt moves up/left

    Returns:
        Linear indices of the two substituted letters

    Raises:
        ValueError: If both positions are the same cell
    """
    if a_pos == b_pos:
        raise ValueError(f"Digram letters must differ, got two letters at {tuple(a_pos)}")

    if a_pos.row != b_pos.row and a_pos.column != b_pos.column:
        return rectangle(a_pos, b_pos)

    step = 1 if direction == CryptDirection.ENCRYPT else -1

    if a_pos.column == b_pos.column:
        return _shift(a_pos, step, 0), _shift(b_pos, step, 0)

    return _shift(a_pos, 0, step), _shift(b_pos, 0, step)


def _locate(letter: str, matrix: KeyMatrix) -> GridPosition:
    position = matrix.position_of(letter)
    if position is None:
        raise CharacterNotInKeyError(letter, matrix.letters)
    return position


def substitute(
    a: str,
    b: str,
    layout: SquareLayout,
    direction: CryptDirection,
    rectangle_only: bool = False,
) -> Digram:
    """
    Substitute one digram.

    Args:
        a: First letter
        b: Second letter
        layout: Source and target squares for each letter
        direction: Encrypt or decrypt
        rectangle_only: Always use the square rule (two independent squares)

    Returns:
        The substituted digram

    Raises:
        CharacterNotInKeyError: If a letter is missing from its source square
    """
    a_pos = _locate(a, layout.source_a)
    b_pos = _locate(b, layout.source_b)

    if rectangle_only:
        a_index, b_index = rectangle(a_pos, b_pos)
    else:
        a_index, b_index = transform(a_pos, b_pos, direction)

    return layout.target_a.letter_at(a_index), layout.target_b.letter_at(b_index)
