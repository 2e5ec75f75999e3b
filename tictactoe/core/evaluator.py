"""Terminal detection and scoring over the 8 winning lines."""

from enum import Enum
from typing import List, Optional, Tuple

from tictactoe.core.board import Board, Cell, Move

WIN_SCORE = 10

# rows, columns, diagonals
LINES: Tuple[Tuple[Move, Move, Move], ...] = (
    tuple(tuple(Move(r, c) for c in range(3)) for r in range(3))
    + tuple(tuple(Move(r, c) for r in range(3)) for c in range(3))
    + ((Move(0, 0), Move(1, 1), Move(2, 2)),
       (Move(0, 2), Move(1, 1), Move(2, 0)))
)


class Result(Enum):
    A_WINS = "A wins"
    B_WINS = "B wins"
    DRAW = "Draw"


class Evaluator:
    def _first_line(self, board: Board) -> Optional[Tuple[Cell, Tuple[Move, Move, Move]]]:
        cells = board.cells
        for line in LINES:
            (r0, c0), (r1, c1), (r2, c2) = line
            owner = cells[r0][c0]
            if owner is not Cell.EMPTY and owner is cells[r1][c1] and owner is cells[r2][c2]:
                return owner, line
        return None

    def evaluate(self, board: Board) -> int:
        """+10 if A owns a full line, -10 if B does, 0 otherwise.

        Draw and ongoing both score 0; combine with Board.is_full() to tell
        them apart.
        """
        found = self._first_line(board)
        if found is None:
            return 0
        return WIN_SCORE if found[0] is Cell.A else -WIN_SCORE

    def outcome(self, board: Board) -> Optional[Result]:
        """Result of a terminal board, None while the game is ongoing."""
        score = self.evaluate(board)
        if score == WIN_SCORE:
            return Result.A_WINS
        if score == -WIN_SCORE:
            return Result.B_WINS
        if board.is_full():
            return Result.DRAW
        return None

    def winning_line(self, board: Board) -> Optional[List[Move]]:
        found = self._first_line(board)
        return list(found[1]) if found else None
