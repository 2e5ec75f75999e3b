"""Turn-taking between a human side (B) and the engine side (A)."""

import logging
from enum import Enum
from typing import List, Optional, Tuple

from tictactoe.config import CONFIG
from tictactoe.core.board import Board, Cell, Move
from tictactoe.core.errors import IllegalMove
from tictactoe.core.evaluator import Evaluator, Result
from tictactoe.core.search import SearchEngine

LOGGER = logging.getLogger(__name__)

ENGINE_SIDE = Cell.A
HUMAN_SIDE = Cell.B


class SessionState(Enum):
    IN_PROGRESS = "in_progress"
    TERMINAL = "terminal"


class GameSession:
    def __init__(self, human_first: Optional[bool] = None,
                 evaluator: Optional[Evaluator] = None,
                 engine: Optional[SearchEngine] = None):
        """Empty board; the human moves first unless human_first is False."""
        if human_first is None:
            human_first = CONFIG.game.human_first
        self.human_first = human_first
        self.evaluator = evaluator or Evaluator()
        self.engine = engine or SearchEngine(self.evaluator,
                                             alpha_beta=CONFIG.search.alpha_beta,
                                             log_stats=CONFIG.search.log_stats)
        self._board = Board()
        self._turn = HUMAN_SIDE if human_first else ENGINE_SIDE
        self._result: Optional[Result] = None
        self._history: List[Tuple[Cell, Move]] = []

    # -------------------------
    # Read-only accessors
    # -------------------------
    @property
    def board(self) -> Board:
        return self._board.copy()

    @property
    def turn(self) -> Cell:
        return self._turn

    @property
    def result(self) -> Optional[Result]:
        return self._result

    @property
    def is_terminal(self) -> bool:
        return self._result is not None

    @property
    def state(self) -> SessionState:
        return SessionState.TERMINAL if self.is_terminal else SessionState.IN_PROGRESS

    @property
    def history(self) -> Tuple[Tuple[Cell, Move], ...]:
        return tuple(self._history)

    @property
    def winning_line(self) -> Optional[List[Move]]:
        return self.evaluator.winning_line(self._board)

    def status_message(self) -> str:
        if self._result is Result.A_WINS:
            return "Engine wins!"
        if self._result is Result.B_WINS:
            return "You win!"
        if self._result is Result.DRAW:
            return "It's a tie!"
        if self._turn is HUMAN_SIDE:
            return f"Your turn ({CONFIG.ui.human_symbol})"
        return f"Engine's turn ({CONFIG.ui.engine_symbol})"

    def is_cell_disabled(self, row: int, col: int) -> bool:
        move = Move(row, col)
        if not move.in_bounds():
            return True
        return self.is_terminal or self._board[move] is not Cell.EMPTY

    # -------------------------
    # Transitions
    # -------------------------
    def submit_human_move(self, move) -> Optional[Move]:
        """Apply the human move and, if the game goes on, the engine reply.

        Returns the engine's reply, or None when the human move ended the game.
        Raises IllegalMove out of turn or after the end, InvalidMove for an
        occupied or off-board cell. Rejected moves leave the session untouched.
        """
        self._check_turn(HUMAN_SIDE)
        move = Move(*move)
        self._play(move, HUMAN_SIDE)
        if self.is_terminal:
            return None
        return self.request_engine_move()

    def request_engine_move(self) -> Optional[Move]:
        self._check_turn(ENGINE_SIDE)
        move = self.engine.best_move(self._board)
        if move is not None:
            self._play(move, ENGINE_SIDE)
        return move

    def reset(self) -> "GameSession":
        """Fresh session with the same settings."""
        return GameSession(self.human_first, self.evaluator, self.engine)

    def _check_turn(self, side: Cell):
        if self.is_terminal:
            raise IllegalMove(f"Game is over: {self._result.value}")
        if self._turn is not side:
            raise IllegalMove(f"Not {side.value}'s turn")

    def _play(self, move: Move, side: Cell):
        self._board.apply_move(move, side)
        self._history.append((side, move))
        LOGGER.debug("%s plays %d,%d", side.value, move.row, move.col)

        self._result = self.evaluator.outcome(self._board)
        if self._result is not None:
            LOGGER.info("Game over: %s after %d moves", self._result.value, len(self._history))
        else:
            self._turn = side.opponent()
