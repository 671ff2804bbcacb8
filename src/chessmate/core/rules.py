"""High-level chess rules: validation, execution, check and checkmate.

Every function here is pure: boards go in, new boards or booleans come out.
"""

from __future__ import annotations

from collections.abc import Iterator

from chessmate.core.board import Board
from chessmate.core.enums import Color, PieceType
from chessmate.core.move import Move
from chessmate.core.move_generator import get_possible_moves
from chessmate.core.types import Position, all_positions

# ── Validation ───────────────────────────────────────────────────────────────


def is_valid_move(
    board: Board, from_pos: Position, to_pos: Position, current_player: Color
) -> bool:
    """Whether *current_player* may move the piece on *from_pos* to *to_pos*.

    Only piece geometry and ownership are checked.  A move that leaves the
    mover's own king in check is still accepted; see :func:`is_legal_move`.
    """
    piece = board[from_pos]
    if piece is None or piece.color != current_player:
        return False
    return to_pos in get_possible_moves(board, from_pos, piece)


def is_legal_move(
    board: Board, from_pos: Position, to_pos: Position, current_player: Color
) -> bool:
    """:func:`is_valid_move` that also refuses to expose the mover's king."""
    if not is_valid_move(board, from_pos, to_pos, current_player):
        return False
    return not is_in_check(make_move(board, from_pos, to_pos), current_player)


# ── Execution ────────────────────────────────────────────────────────────────


def make_move(board: Board, from_pos: Position, to_pos: Position) -> Board:
    """Relocate the piece on *from_pos*, capturing whatever sits on *to_pos*.

    No validation is performed.  The input board is left untouched.
    """
    piece = board[from_pos]
    return board.with_squares(
        {
            to_pos: piece.moved() if piece is not None else None,
            from_pos: None,
        }
    )


# ── Check detection ──────────────────────────────────────────────────────────


def find_king(board: Board, color: Color) -> Position | None:
    """First square (row-major) holding *color*'s king, if any."""
    for pos in all_positions():
        piece = board[pos]
        if piece is None or piece.color != color:
            continue
        if piece.piece_type == PieceType.KING:
            return pos
    return None


def is_square_attacked(board: Board, position: Position, by_color: Color) -> bool:
    """Is *position* among the generated targets of any *by_color* piece?"""
    return any(
        position in get_possible_moves(board, pos, piece)
        for pos, piece in board.pieces(by_color)
    )


def is_in_check(board: Board, color: Color) -> bool:
    """Is *color*'s king attacked?  A board without that king is never in check."""
    king_pos = find_king(board, color)
    if king_pos is None:
        return False
    return is_square_attacked(board, king_pos, color.opposite)


# ── Checkmate detection ──────────────────────────────────────────────────────


def _iter_escapes(board: Board, color: Color) -> Iterator[Move]:
    for pos, piece in board.pieces(color):
        for to_pos in sorted(get_possible_moves(board, pos, piece)):
            if not is_in_check(make_move(board, pos, to_pos), color):
                yield Move(pos, to_pos)


def escape_moves(board: Board, color: Color) -> list[Move]:
    """Pseudo-legal moves of *color* after which *color* is not in check."""
    return list(_iter_escapes(board, color))


def is_checkmate(board: Board, color: Color) -> bool:
    """Is *color* in check with no move that clears it?

    Not being in check means not checkmated; stalemate is not detected here.
    """
    if not is_in_check(board, color):
        return False
    return next(_iter_escapes(board, color), None) is None
