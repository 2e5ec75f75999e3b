"""Core engine components: board, evaluator, search and errors."""

from .board import Board, Cell, Move
from .errors import GameError, IllegalMove, InvalidMove
from .evaluator import Evaluator, Result
from .search import SearchEngine, best_move
