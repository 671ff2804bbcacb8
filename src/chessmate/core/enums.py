"""Core enumerations for the chess domain."""

from __future__ import annotations

from enum import IntEnum


class Color(IntEnum):
    """Side color."""

    WHITE = 0
    BLACK = 1

    @property
    def opposite(self) -> Color:
        return Color(1 - self.value)

    @classmethod
    def parse(cls, name: str) -> Color:
        """Color from its lowercase name, e.g. ``'white'``."""
        try:
            return cls[name.upper()]
        except KeyError:
            raise ValueError(f"Invalid color name: {name!r}") from None

    def __str__(self) -> str:
        return self.name.lower()


class PieceType(IntEnum):
    """Chess piece types ordered by conventional value."""

    PAWN = 1
    KNIGHT = 2
    BISHOP = 3
    ROOK = 4
    QUEEN = 5
    KING = 6

    def __str__(self) -> str:
        return self.name.lower()


class GameStatus(IntEnum):
    """Status shown to the players after each ply."""

    PLAYING = 0
    CHECK = 1
    CHECKMATE = 2
    STALEMATE = 3  # reserved, no rule currently produces it

    def __str__(self) -> str:
        return self.name.lower()
