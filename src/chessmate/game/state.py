"""Game state snapshot — board, turn, selection, status and move history."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from chessmate.core.board import Board, initialize_board
from chessmate.core.enums import Color, GameStatus
from chessmate.core.move import Move
from chessmate.core.types import Position


@dataclass(frozen=True, slots=True)
class GameState:
    """Immutable snapshot of a game in progress.

    The rules engine never touches this object; the controller folds the
    boards and booleans it returns into a fresh snapshot after every action.
    """

    board: Board
    current_player: Color = Color.WHITE
    selected_square: Position | None = None
    status: GameStatus = GameStatus.PLAYING
    move_history: tuple[Move, ...] = field(default_factory=tuple)

    @classmethod
    def new(
        cls, board: Board | None = None, first_player: Color = Color.WHITE
    ) -> GameState:
        """Fresh game from *board* (standard start when omitted)."""
        return cls(
            board=board if board is not None else initialize_board(),
            current_player=first_player,
        )

    # ── Transitions ──────────────────────────────────────────────────────

    def with_selection(self, square: Position | None) -> GameState:
        return replace(self, selected_square=square)

    def after_move(
        self, move: Move, board: Board, current_player: Color, status: GameStatus
    ) -> GameState:
        """Snapshot following *move*, which produced *board*."""
        return replace(
            self,
            board=board,
            current_player=current_player,
            selected_square=None,
            status=status,
            move_history=(*self.move_history, move),
        )

    # ── Query helpers ────────────────────────────────────────────────────

    @property
    def is_game_over(self) -> bool:
        return self.status == GameStatus.CHECKMATE

    @property
    def winner(self) -> Color | None:
        """The mating side; it keeps the turn once the game is over."""
        if not self.is_game_over:
            return None
        return self.current_player

    @property
    def ply_count(self) -> int:
        """Number of half-moves played."""
        return len(self.move_history)

    @property
    def last_move(self) -> Move | None:
        return self.move_history[-1] if self.move_history else None
