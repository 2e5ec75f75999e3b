"""3x3 board model: cell states, moves and make/unmake operations."""

from enum import Enum
from typing import Iterable, List, NamedTuple, Optional, Sequence

from tictactoe.core.errors import InvalidMove

SIZE = 3

_EMPTY_TOKENS = {".", "", " ", "-"}


class Cell(Enum):
    EMPTY = "."
    A = "A"  # maximizing side (engine)
    B = "B"  # minimizing side (human)

    def opponent(self) -> "Cell":
        if self is Cell.A:
            return Cell.B
        if self is Cell.B:
            return Cell.A
        raise ValueError("Empty cell has no opponent")

    @classmethod
    def parse(cls, token) -> "Cell":
        """Accept a Cell, 'A', 'B' or one of the empty tokens."""
        if isinstance(token, Cell):
            return token
        if not isinstance(token, str):
            raise ValueError(f"Invalid cell token: {token!r}")
        if token in _EMPTY_TOKENS:
            return cls.EMPTY
        try:
            return cls(token.upper())
        except ValueError:
            raise ValueError(f"Invalid cell token: {token!r}") from None


class Move(NamedTuple):
    row: int
    col: int

    @classmethod
    def from_index(cls, index: int) -> "Move":
        """Row-major index 0..8 to a move."""
        if not 0 <= index < SIZE * SIZE:
            raise InvalidMove(f"Index out of range: {index}")
        return cls(index // SIZE, index % SIZE)

    @property
    def index(self) -> int:
        return self.row * SIZE + self.col

    def in_bounds(self) -> bool:
        return 0 <= self.row < SIZE and 0 <= self.col < SIZE


class Board:
    def __init__(self, cells: Optional[List[List[Cell]]] = None):
        """Empty board, or a copy of the given 3x3 grid of Cell."""
        if cells is None:
            self.cells = [[Cell.EMPTY] * SIZE for _ in range(SIZE)]
        else:
            self.cells = [list(row) for row in cells]

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence]) -> "Board":
        """Build from three rows of Cell values or one-character tokens."""
        if len(rows) != SIZE or any(len(row) != SIZE for row in rows):
            raise ValueError("Board must have exactly 3 rows of 3 cells")
        return cls([[Cell.parse(token) for token in row] for row in rows])

    @classmethod
    def from_string(cls, text: str) -> "Board":
        """Parse the compact form, e.g. 'AA.|BB.|...'."""
        rows = [list(part) for part in text.strip().split("|")]
        return cls.from_rows(rows)

    def to_string(self) -> str:
        return "|".join("".join(cell.value for cell in row) for row in self.cells)

    def copy(self) -> "Board":
        return Board(self.cells)

    def mirrored(self) -> "Board":
        """Same position with A and B swapped."""
        return Board([[cell if cell is Cell.EMPTY else cell.opponent() for cell in row]
                      for row in self.cells])

    def rows(self) -> List[List[str]]:
        return [[cell.value for cell in row] for row in self.cells]

    def __getitem__(self, move) -> Cell:
        row, col = move
        return self.cells[row][col]

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self.cells == other.cells

    def __repr__(self) -> str:
        return f"Board({self.to_string()!r})"

    def __str__(self) -> str:
        return "\n".join(" ".join(cell.value for cell in row) for row in self.cells)

    # -------------------------
    # Queries
    # -------------------------
    def is_full(self) -> bool:
        return all(cell is not Cell.EMPTY for row in self.cells for cell in row)

    def empty_cells(self) -> List[Move]:
        """Empty coordinates in row-major order (search traversal order)."""
        return [Move(r, c) for r in range(SIZE) for c in range(SIZE)
                if self.cells[r][c] is Cell.EMPTY]

    def count(self, side: Cell) -> int:
        return sum(cell is side for row in self.cells for cell in row)

    # -------------------------
    # Make / unmake
    # -------------------------
    def apply_move(self, move: Iterable[int], side: Cell):
        row, col = move
        if side is Cell.EMPTY:
            raise InvalidMove("Cannot place an empty cell")
        if not Move(row, col).in_bounds():
            raise InvalidMove(f"Move out of range: ({row}, {col})")
        if self.cells[row][col] is not Cell.EMPTY:
            raise InvalidMove(f"Cell ({row}, {col}) is already taken")
        self.cells[row][col] = side

    def undo_move(self, move: Iterable[int]):
        row, col = move
        if not Move(row, col).in_bounds():
            raise InvalidMove(f"Move out of range: ({row}, {col})")
        if self.cells[row][col] is Cell.EMPTY:
            raise InvalidMove(f"Cell ({row}, {col}) is already empty")
        self.cells[row][col] = Cell.EMPTY
