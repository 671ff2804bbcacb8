"""Tests for Board."""

import pytest

from chessmate.core.board import Board, initialize_board
from chessmate.core.enums import Color, PieceType
from chessmate.core.piece import Piece
from chessmate.core.types import Position


class TestBoardInitial:
    def test_piece_counts(self) -> None:
        board = initialize_board()
        assert board.piece_count(Color.WHITE) == 16
        assert board.piece_count(Color.BLACK) == 16

    def test_white_king_position(self) -> None:
        board = initialize_board()
        assert board[7, 4] == Piece(PieceType.KING, Color.WHITE)

    def test_black_king_position(self) -> None:
        board = initialize_board()
        assert board[0, 4] == Piece(PieceType.KING, Color.BLACK)

    def test_back_ranks(self) -> None:
        board = initialize_board()
        expected = [
            PieceType.ROOK, PieceType.KNIGHT, PieceType.BISHOP, PieceType.QUEEN,
            PieceType.KING, PieceType.BISHOP, PieceType.KNIGHT, PieceType.ROOK,
        ]
        for col, pt in enumerate(expected):
            assert board[0, col] == Piece(pt, Color.BLACK), f"Mismatch at (0, {col})"
            assert board[7, col] == Piece(pt, Color.WHITE), f"Mismatch at (7, {col})"

    def test_pawn_rows(self) -> None:
        board = initialize_board()
        pawns = [
            (pos, piece)
            for pos, piece in board.pieces()
            if piece.piece_type == PieceType.PAWN
        ]
        assert len(pawns) == 16
        for pos, piece in pawns:
            assert pos.row == (6 if piece.color == Color.WHITE else 1)

    def test_empty_middle(self) -> None:
        board = initialize_board()
        for row in range(2, 6):
            for col in range(8):
                assert board[row, col] is None

    def test_pieces_start_unmoved(self) -> None:
        board = initialize_board()
        assert not any(piece.has_moved for _, piece in board.pieces())

    def test_fresh_boards_are_equal(self) -> None:
        assert initialize_board() == Board.initial()


class TestBoardOperations:
    def test_place_returns_new_board(self) -> None:
        board = Board.empty()
        piece = Piece(PieceType.PAWN, Color.WHITE)
        placed = board.place(Position(4, 4), piece)
        assert placed[4, 4] == piece
        assert board.is_empty(Position(4, 4))

    def test_remove(self) -> None:
        board = initialize_board()
        cleared = board.remove(Position(7, 4))
        assert cleared[7, 4] is None
        assert board[7, 4] == Piece(PieceType.KING, Color.WHITE)
        assert board != cleared

    def test_index_out_of_range(self) -> None:
        with pytest.raises(ValueError, match="out of range"):
            Board.empty()[8, 0]

    def test_pieces_filtered_by_color(self) -> None:
        board = initialize_board()
        assert all(p.color == Color.BLACK for _, p in board.pieces(Color.BLACK))
        first_pos, first_piece = next(board.pieces(Color.WHITE))
        assert first_pos == Position(6, 0)
        assert first_piece.piece_type == PieceType.PAWN

    def test_hashable(self) -> None:
        assert len({initialize_board(), initialize_board()}) == 1


class TestBoardFactories:
    def test_from_rows_shape_checked(self) -> None:
        with pytest.raises(ValueError, match="8x8"):
            Board.from_rows([[None] * 8] * 7)
        with pytest.raises(ValueError, match="8x8"):
            Board.from_rows([[None] * 7] * 8)

    def test_from_rows_copies_input(self) -> None:
        rows: list[list[Piece | None]] = [[None] * 8 for _ in range(8)]
        board = Board.from_rows(rows)
        rows[0][0] = Piece(PieceType.ROOK, Color.BLACK)
        assert board[0, 0] is None

    def test_from_diagram(self) -> None:
        board = Board.from_diagram(
            """
            r n b q k b n r
            p p p p p p p p
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            . . . . . . . .
            P P P P P P P P
            R N B Q K B N R
            """
        )
        assert board == initialize_board()

    def test_from_diagram_bad_shape(self) -> None:
        with pytest.raises(ValueError, match="Diagram"):
            Board.from_diagram("rnbqkbnr\npppppppp")

    def test_from_diagram_bad_piece(self) -> None:
        with pytest.raises(ValueError, match="Invalid piece character"):
            Board.from_diagram("\n".join(["x......."] + ["........"] * 7))

    def test_repr(self) -> None:
        text = repr(initialize_board())
        lines = text.splitlines()
        assert lines[0] == "8 r n b q k b n r"
        assert lines[7] == "1 R N B Q K B N R"
        assert lines[8] == "  a b c d e f g h"
