"""Board coordinates and helpers.

Board layout (row-major, black at the top):
    row 0 = rank 8 (black back rank), row 7 = rank 1 (white back rank)
    col 0 = file a, col 7 = file h

So ``Position(7, 4)`` is e1 and ``Position(0, 4)`` is e8.
"""

from __future__ import annotations

from dataclasses import dataclass

BOARD_SIZE = 8
FILES = "abcdefgh"


def is_valid_position(row: int, col: int) -> bool:
    """Whether (*row*, *col*) lies on the board."""
    return 0 <= row < BOARD_SIZE and 0 <= col < BOARD_SIZE


@dataclass(frozen=True, slots=True, order=True)
class Position:
    """Immutable board coordinate; always on the board."""

    row: int
    col: int

    def __post_init__(self) -> None:
        if not is_valid_position(self.row, self.col):
            raise ValueError(f"Position out of range: ({self.row!r}, {self.col!r})")

    def shifted(self, drow: int, dcol: int) -> Position | None:
        """Neighbouring coordinate, or ``None`` if it falls off the board."""
        row = self.row + drow
        col = self.col + dcol
        if not is_valid_position(row, col):
            return None
        return Position(row, col)

    # ── Notation ─────────────────────────────────────────────────────────

    @property
    def name(self) -> str:
        """Algebraic square name, e.g. ``Position(6, 4)`` → ``'e2'``."""
        return f"{FILES[self.col]}{BOARD_SIZE - self.row}"

    @classmethod
    def from_name(cls, name: str) -> Position:
        """Parse an algebraic square name, e.g. ``'e4'`` → ``Position(4, 4)``."""
        if len(name) != 2 or name[0] not in FILES or name[1] not in "12345678":
            raise ValueError(f"Invalid square name: {name!r}")
        return cls(BOARD_SIZE - int(name[1]), FILES.index(name[0]))

    def __str__(self) -> str:
        return self.name


def all_positions() -> tuple[Position, ...]:
    """Every square in row-major order."""
    return _ALL_POSITIONS


_ALL_POSITIONS: tuple[Position, ...] = tuple(
    Position(row, col) for row in range(BOARD_SIZE) for col in range(BOARD_SIZE)
)
