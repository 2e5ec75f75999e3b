import logging
import time
from typing import Optional, Tuple

from tictactoe.core.board import Board, Cell, Move
from tictactoe.core.evaluator import Evaluator, WIN_SCORE
from tictactoe.core.utils import format_search_info

LOGGER = logging.getLogger(__name__)

INF = 1000


class SearchEngine:
    """Exhaustive minimax for the fixed maximizing side A.

    The root always places A, whichever side is logically to move. Scores
    are depth-adjusted at terminal nodes (10 - depth for A wins,
    -10 + depth for B wins) so faster wins rank higher.
    """

    def __init__(self, evaluator: Optional[Evaluator] = None, alpha_beta: bool = True,
                 log_stats: bool = True):
        self.evaluator = evaluator or Evaluator()
        self.alpha_beta = alpha_beta
        self.log_stats = log_stats
        self.nodes = 0

    # Public API
    def search_best_move(self, board: Board) -> Tuple[Optional[Move], Optional[int]]:
        """
        Returns (best_move, root_value). best_move is None when the board is
        already won or full; the caller's board is left untouched.
        """
        self.nodes = 0
        start_time = time.time()

        static = self.evaluator.evaluate(board)
        if static != 0 or board.is_full():
            return None, static

        search_board = board.copy()
        best = -INF
        best_move = None
        alpha = -INF
        beta = INF

        for move in search_board.empty_cells():
            search_board.apply_move(move, Cell.A)
            value = self._minimize(search_board, 1, alpha, beta)
            search_board.undo_move(move)
            # strict: first maximal move in row-major order wins ties
            if value > best:
                best = value
                best_move = move
            alpha = max(alpha, value)

        if self.log_stats:
            LOGGER.debug(format_search_info(best_move, best, self.nodes,
                                            time.time() - start_time, self.alpha_beta))
        return best_move, best

    def best_move(self, board: Board) -> Optional[Move]:
        return self.search_best_move(board)[0]

    # -------------------------
    # Alpha-beta recursion
    # -------------------------
    def _terminal_score(self, board: Board, depth: int) -> Optional[int]:
        score = self.evaluator.evaluate(board)
        if score == WIN_SCORE:
            return score - depth
        if score == -WIN_SCORE:
            return score + depth
        if board.is_full():
            return 0
        return None

    def _maximize(self, board: Board, depth: int, alpha: int, beta: int) -> int:
        self.nodes += 1
        terminal = self._terminal_score(board, depth)
        if terminal is not None:
            return terminal

        best = -INF
        for move in board.empty_cells():
            board.apply_move(move, Cell.A)
            value = self._minimize(board, depth + 1, alpha, beta)
            board.undo_move(move)
            best = max(best, value)
            alpha = max(alpha, best)
            if self.alpha_beta and beta <= alpha:
                break
        return best

    def _minimize(self, board: Board, depth: int, alpha: int, beta: int) -> int:
        self.nodes += 1
        terminal = self._terminal_score(board, depth)
        if terminal is not None:
            return terminal

        best = INF
        for move in board.empty_cells():
            board.apply_move(move, Cell.B)
            value = self._maximize(board, depth + 1, alpha, beta)
            board.undo_move(move)
            best = min(best, value)
            beta = min(beta, best)
            if self.alpha_beta and beta <= alpha:
                break
        return best


_default_engine = SearchEngine()


def best_move(board: Board) -> Optional[Move]:
    """Best move for side A on board, or None if the game is already over."""
    return _default_engine.best_move(board)
