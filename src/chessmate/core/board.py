"""Board - immutable piece placement on an 8x8 grid."""

from __future__ import annotations

from collections.abc import Iterator, Mapping, Sequence
from typing import TypeAlias

from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import BOARD_SIZE, FILES, Position, all_positions

Row: TypeAlias = tuple[Piece | None, ...]

_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


class Board:
    """Immutable 8x8 snapshot indexed by ``Position`` or ``(row, col)``.

    Every "mutation" returns a new board and leaves the receiver untouched,
    so look-ahead code can explore moves without copying by hand.
    """

    __slots__ = ("_rows",)

    def __init__(self, rows: tuple[Row, ...]) -> None:
        self._rows = rows

    # -- Element access -----------------------------------------------------

    def __getitem__(self, key: Position | tuple[int, int]) -> Piece | None:
        pos = key if isinstance(key, Position) else Position(*key)
        return self._rows[pos.row][pos.col]

    def is_empty(self, pos: Position) -> bool:
        return self._rows[pos.row][pos.col] is None

    @property
    def rows(self) -> tuple[Row, ...]:
        return self._rows

    # -- Query helpers ------------------------------------------------------

    def pieces(self, color: Color | None = None) -> Iterator[tuple[Position, Piece]]:
        """Occupied squares in row-major order, optionally for one *color*."""
        for pos in all_positions():
            piece = self._rows[pos.row][pos.col]
            if piece is None:
                continue
            if color is None or piece.color == color:
                yield pos, piece

    def piece_count(self, color: Color | None = None) -> int:
        return sum(1 for _ in self.pieces(color))

    # -- Copy-on-write updates ----------------------------------------------

    def with_squares(self, changes: Mapping[Position, Piece | None]) -> Board:
        """New board with *changes* applied; the receiver is left untouched."""
        grid = [list(row) for row in self._rows]
        for pos, piece in changes.items():
            grid[pos.row][pos.col] = piece
        return Board(tuple(tuple(row) for row in grid))

    def place(self, pos: Position, piece: Piece) -> Board:
        return self.with_squares({pos: piece})

    def remove(self, pos: Position) -> Board:
        return self.with_squares({pos: None})

    # -- Factory ------------------------------------------------------------

    @classmethod
    def empty(cls) -> Board:
        return cls(tuple((None,) * BOARD_SIZE for _ in range(BOARD_SIZE)))

    @classmethod
    def initial(cls) -> Board:
        """Standard starting position (black on rows 0-1, white on rows 6-7)."""
        changes: dict[Position, Piece | None] = {}
        for col, pt in enumerate(_BACK_RANK):
            changes[Position(0, col)] = Piece(pt, Color.BLACK)
            changes[Position(1, col)] = Piece(PieceType.PAWN, Color.BLACK)
            changes[Position(6, col)] = Piece(PieceType.PAWN, Color.WHITE)
            changes[Position(7, col)] = Piece(pt, Color.WHITE)
        return cls.empty().with_squares(changes)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[Piece | None]]) -> Board:
        """Build a board from an 8x8 nested sequence."""
        if len(rows) != BOARD_SIZE or any(len(row) != BOARD_SIZE for row in rows):
            raise ValueError(f"Board must be {BOARD_SIZE}x{BOARD_SIZE}")
        return cls(tuple(tuple(row) for row in rows))

    @classmethod
    def from_diagram(cls, diagram: str) -> Board:
        """Parse eight lines of piece characters, ``.`` for empty squares.

        Row 0 (black's back rank) comes first.  Spaces inside a line are
        ignored.
        """
        lines = [line.replace(" ", "") for line in diagram.strip().splitlines()]
        lines = [line for line in lines if line]
        if len(lines) != BOARD_SIZE or any(len(line) != BOARD_SIZE for line in lines):
            raise ValueError(
                f"Diagram must be {BOARD_SIZE} lines of {BOARD_SIZE} squares"
            )
        return cls.from_rows(
            [
                [None if ch == "." else Piece.from_char(ch) for ch in line]
                for line in lines
            ]
        )

    # -- Dunder helpers -----------------------------------------------------

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._rows == other._rows

    def __hash__(self) -> int:
        return hash(self._rows)

    def __repr__(self) -> str:
        lines: list[str] = []
        for row_idx, row in enumerate(self._rows):
            cells = " ".join(str(p) if p else "." for p in row)
            lines.append(f"{BOARD_SIZE - row_idx} {cells}")
        lines.append("  " + " ".join(FILES))
        return "\n".join(lines)


def initialize_board() -> Board:
    """Fresh board in the standard starting position."""
    return Board.initial()
