"""GameController — drives a two-player game on top of the rules engine.

Coordinates: GameState, move validation, check/checkmate evaluation.
Emits events via simple callbacks so a UI / tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

from chessmate.core.board import Board
from chessmate.core.enums import Color, GameStatus
from chessmate.core.move import Move
from chessmate.core.move_generator import get_possible_moves
from chessmate.core.rules import (
    is_checkmate,
    is_in_check,
    is_legal_move,
    is_valid_move,
    make_move,
)
from chessmate.core.types import Position
from chessmate.game.state import GameState

_LOGGER = logging.getLogger(__name__)

# ── Event definitions ────────────────────────────────────────────────────────

MoveCallback = Callable[[Move, GameState], None]  # move, state after the move
CheckCallback = Callable[[Color], None]  # side now in check
GameOverCallback = Callable[[Color], None]  # winner
ResetCallback = Callable[[], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_move: list[MoveCallback] = field(default_factory=list)
    on_check: list[CheckCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)
    on_reset: list[ResetCallback] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class GameOptions:
    """Immutable game configuration.

    Args:
        prevent_self_check: Reject moves that leave the mover's own king in
            check.  Off by default: only piece geometry is enforced.
        starting_board: Setup used by :meth:`GameController.new_game`;
            ``None`` means the standard starting position.
        first_player: Side that moves first.
    """

    prevent_self_check: bool = False
    starting_board: Board | None = None
    first_player: Color = Color.WHITE


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Turns square clicks and move submissions into new game states.

    Methods are designed to be called from a single thread.
    """

    __slots__ = ("_state", "_options", "events")

    def __init__(self, options: GameOptions | None = None) -> None:
        self._options = options if options is not None else GameOptions()
        self._state = self._fresh_state()
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def options(self) -> GameOptions:
        return self._options

    # ── Game lifecycle ───────────────────────────────────────────────────

    def new_game(self) -> None:
        """Discard the current game and start over."""
        self._state = self._fresh_state()
        _LOGGER.info("New game started, %s to move", self._state.current_player)
        for cb in self.events.on_reset:
            cb()

    def click(self, position: Position) -> bool:
        """Handle a click on *position*; return ``True`` if a move was played.

        Nothing selected: select one of the mover's pieces.  Clicking the
        selected square again deselects it; clicking another own piece
        switches the selection; any other square is a move attempt, and a
        failed attempt clears the selection.
        """
        state = self._state
        if state.is_game_over:
            return False

        piece = state.board[position]
        owns_piece = piece is not None and piece.color == state.current_player
        selected = state.selected_square

        if selected is None:
            if owns_piece:
                self._select(position)
            return False

        if selected == position:
            self._select(None)
            return False

        if owns_piece:
            self._select(position)
            return False

        if self.submit_move(selected, position):
            return True
        self._select(None)
        return False

    def submit_move(self, from_pos: Position, to_pos: Position) -> bool:
        """Validate and play a move for the side to move."""
        state = self._state
        if state.is_game_over:
            _LOGGER.debug("Move %s%s ignored: game is over", from_pos, to_pos)
            return False

        mover = state.current_player
        validate = is_legal_move if self._options.prevent_self_check else is_valid_move
        if not validate(state.board, from_pos, to_pos, mover):
            _LOGGER.debug("Rejected move %s%s for %s", from_pos, to_pos, mover)
            return False

        move = Move(from_pos, to_pos)
        board = make_move(state.board, from_pos, to_pos)
        opponent = mover.opposite

        if is_in_check(board, opponent):
            if is_checkmate(board, opponent):
                self._state = state.after_move(move, board, mover, GameStatus.CHECKMATE)
                _LOGGER.info("Checkmate after %s, %s wins", move, mover)
                self._emit_move(move)
                for cb in self.events.on_game_over:
                    cb(mover)
                return True
            self._state = state.after_move(move, board, opponent, GameStatus.CHECK)
            _LOGGER.info("%s is in check after %s", opponent, move)
            self._emit_move(move)
            for cb in self.events.on_check:
                cb(opponent)
            return True

        self._state = state.after_move(move, board, opponent, GameStatus.PLAYING)
        _LOGGER.debug("Played %s, %s to move", move, opponent)
        self._emit_move(move)
        return True

    # ── Queries ──────────────────────────────────────────────────────────

    def legal_targets(self, position: Position) -> set[Position]:
        """Squares the piece on *position* may move to this turn."""
        state = self._state
        piece = state.board[position]
        if state.is_game_over or piece is None or piece.color != state.current_player:
            return set()
        targets = get_possible_moves(state.board, position, piece)
        if self._options.prevent_self_check:
            targets = {
                to_pos
                for to_pos in targets
                if is_legal_move(state.board, position, to_pos, state.current_player)
            }
        return targets

    # ── Internal helpers ─────────────────────────────────────────────────

    def _fresh_state(self) -> GameState:
        return GameState.new(self._options.starting_board, self._options.first_player)

    def _select(self, square: Position | None) -> None:
        _LOGGER.debug("Selection: %s", square)
        self._state = self._state.with_selection(square)

    def _emit_move(self, move: Move) -> None:
        for cb in self.events.on_move:
            cb(move, self._state)
