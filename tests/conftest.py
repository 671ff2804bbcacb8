"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import pytest

from chessmate.core.board import Board, initialize_board

# After 1.f3 e5 2.g4 Qh4# — white is mated.
FOOLS_MATE = """
rnb.kbnr
pppp.ppp
........
....p...
......Pq
.....P..
PPPPP..P
RNBQKBNR
"""

# Rook on a8 checks the black king on d8; the white king on d6 covers the
# escape squares.
BACK_RANK_MATE = """
R..k....
........
...K....
........
........
........
........
........
"""


@pytest.fixture
def start_board() -> Board:
    return initialize_board()


@pytest.fixture
def empty_board() -> Board:
    return Board.empty()


@pytest.fixture
def fools_mate_board() -> Board:
    return Board.from_diagram(FOOLS_MATE)


@pytest.fixture
def back_rank_mate_board() -> Board:
    return Board.from_diagram(BACK_RANK_MATE)
