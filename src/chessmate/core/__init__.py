"""Core domain layer — pure chess rules with zero external dependencies.

Quick start::

    from chessmate.core import Color, Position, initialize_board
    from chessmate.core import is_valid_move, make_move

    board = initialize_board()
    e2, e4 = Position.from_name("e2"), Position.from_name("e4")
    if is_valid_move(board, e2, e4, Color.WHITE):
        board = make_move(board, e2, e4)
"""

from chessmate.core.board import Board, initialize_board
from chessmate.core.enums import Color, GameStatus, PieceType
from chessmate.core.move import Move
from chessmate.core.move_generator import get_possible_moves
from chessmate.core.piece import Piece
from chessmate.core.rules import (
    escape_moves,
    find_king,
    is_checkmate,
    is_in_check,
    is_legal_move,
    is_square_attacked,
    is_valid_move,
    make_move,
)
from chessmate.core.types import Position, is_valid_position

__all__ = [
    # Enums
    "Color",
    "GameStatus",
    "PieceType",
    # Domain objects
    "Board",
    "Move",
    "Piece",
    "Position",
    # Board model
    "initialize_board",
    "is_valid_position",
    # Move generation / validation / execution
    "get_possible_moves",
    "is_legal_move",
    "is_valid_move",
    "make_move",
    # Check / checkmate
    "escape_moves",
    "find_king",
    "is_checkmate",
    "is_in_check",
    "is_square_attacked",
]
