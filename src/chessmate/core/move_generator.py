"""Pseudo-legal move generation.

Targets are purely geometric: a generated square may still leave the
mover's own king in check.  Filtering that out is the job of
:mod:`chessmate.core.rules`.
"""

from __future__ import annotations

from collections.abc import Callable

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import Position

# (drow, dcol) offsets; row grows towards white's side of the board.
KNIGHT_OFFSETS: tuple[tuple[int, int], ...] = (
    (-2, -1),
    (-2, 1),
    (-1, -2),
    (-1, 2),
    (1, -2),
    (1, 2),
    (2, -1),
    (2, 1),
)

KING_OFFSETS: tuple[tuple[int, int], ...] = (
    (-1, -1),
    (-1, 0),
    (-1, 1),
    (0, -1),
    (0, 1),
    (1, -1),
    (1, 0),
    (1, 1),
)

BISHOP_DIRS: tuple[tuple[int, int], ...] = ((-1, -1), (-1, 1), (1, -1), (1, 1))
ROOK_DIRS: tuple[tuple[int, int], ...] = ((-1, 0), (1, 0), (0, -1), (0, 1))
QUEEN_DIRS: tuple[tuple[int, int], ...] = BISHOP_DIRS + ROOK_DIRS

# White pawns advance towards row 0, black pawns towards row 7.
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: -1, Color.BLACK: 1}
PAWN_START_ROW: dict[Color, int] = {Color.WHITE: 6, Color.BLACK: 1}


def get_possible_moves(board: Board, from_pos: Position, piece: Piece) -> set[Position]:
    """Squares *piece* standing on *from_pos* could move to.

    Pure function of *board*; the board is never modified.
    """
    return _GENERATORS[piece.piece_type](board, from_pos, piece)


# -- Piece-specific generators (private) -----------------------------------


def _gen_pawn(board: Board, from_pos: Position, piece: Piece) -> set[Position]:
    moves: set[Position] = set()
    direction = PAWN_DIRECTION[piece.color]

    one_step = from_pos.shifted(direction, 0)
    if one_step is not None and board.is_empty(one_step):
        moves.add(one_step)
        # Only reachable when the one-ahead square is already known empty.
        if from_pos.row == PAWN_START_ROW[piece.color]:
            two_step = from_pos.shifted(2 * direction, 0)
            if two_step is not None and board.is_empty(two_step):
                moves.add(two_step)

    for dcol in (-1, 1):
        cap_pos = from_pos.shifted(direction, dcol)
        if cap_pos is None:
            continue
        target = board[cap_pos]
        if target is not None and target.color != piece.color:
            moves.add(cap_pos)
    return moves


def _gen_stepping(
    board: Board,
    from_pos: Position,
    piece: Piece,
    offsets: tuple[tuple[int, int], ...],
) -> set[Position]:
    moves: set[Position] = set()
    for drow, dcol in offsets:
        to_pos = from_pos.shifted(drow, dcol)
        if to_pos is None:
            continue
        target = board[to_pos]
        if target is None or target.color != piece.color:
            moves.add(to_pos)
    return moves


def _gen_sliding(
    board: Board,
    from_pos: Position,
    piece: Piece,
    directions: tuple[tuple[int, int], ...],
) -> set[Position]:
    moves: set[Position] = set()
    for drow, dcol in directions:
        to_pos = from_pos.shifted(drow, dcol)
        while to_pos is not None:
            target = board[to_pos]
            if target is None:
                moves.add(to_pos)
                to_pos = to_pos.shifted(drow, dcol)
                continue
            if target.color != piece.color:
                moves.add(to_pos)
            break
    return moves


_Generator = Callable[[Board, Position, Piece], set[Position]]

_GENERATORS: dict[PieceType, _Generator] = {
    PieceType.PAWN: _gen_pawn,
    PieceType.KNIGHT: lambda b, p, pc: _gen_stepping(b, p, pc, KNIGHT_OFFSETS),
    PieceType.BISHOP: lambda b, p, pc: _gen_sliding(b, p, pc, BISHOP_DIRS),
    PieceType.ROOK: lambda b, p, pc: _gen_sliding(b, p, pc, ROOK_DIRS),
    PieceType.QUEEN: lambda b, p, pc: _gen_sliding(b, p, pc, QUEEN_DIRS),
    PieceType.KING: lambda b, p, pc: _gen_stepping(b, p, pc, KING_OFFSETS),
}
