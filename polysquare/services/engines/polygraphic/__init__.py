"""Polygraphic cipher engines."""

from polysquare.services.engines.polygraphic.playfair import PlayfairEngine
from polysquare.services.engines.polygraphic.two_square import TwoSquareEngine
from polysquare.services.engines.polygraphic.four_square import FourSquareEngine

__all__ = [
    "PlayfairEngine",
    "TwoSquareEngine",
    "FourSquareEngine",
]
