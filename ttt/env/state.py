from __future__ import annotations
from enum import Enum, IntEnum
import numpy as np
from typing import Iterable, List, Optional, Tuple

BOARD_N = 3


def action_to_rc(a: int) -> Tuple[int, int]:
    # flat index 0..8 => (row, col), 1-indexed
    return (int(a) // BOARD_N + 1, int(a) % BOARD_N + 1)


# Rows, columns, diagonals (1-indexed coordinates)
WIN_LINES: Tuple[Tuple[Tuple[int, int], ...], ...] = (
    ((1, 1), (1, 2), (1, 3)),
    ((2, 1), (2, 2), (2, 3)),
    ((3, 1), (3, 2), (3, 3)),
    ((1, 1), (2, 1), (3, 1)),
    ((1, 2), (2, 2), (3, 2)),
    ((1, 3), (2, 3), (3, 3)),
    ((1, 1), (2, 2), (3, 3)),
    ((1, 3), (2, 2), (3, 1)),
)


class Cell(IntEnum):
    EMPTY = 0
    X = 1
    O = -1

    def __str__(self) -> str:
        return _CELL_CHARS[self]


_CELL_CHARS = {Cell.EMPTY: " ", Cell.X: "X", Cell.O: "O"}
_CHAR_CELLS = {" ": Cell.EMPTY, ".": Cell.EMPTY, "X": Cell.X, "O": Cell.O}


class PlayerIdentity(Enum):
    X = "X"
    O = "O"

    @property
    def mark(self) -> Cell:
        return Cell.X if self is PlayerIdentity.X else Cell.O

    def opposite(self) -> "PlayerIdentity":
        return PlayerIdentity.O if self is PlayerIdentity.X else PlayerIdentity.X


class GameStatus(Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    DRAWN = "drawn"


class OutOfRange(ValueError):
    """Raised when a coordinate falls outside 1..3 on either axis."""

    def __init__(self, row: int, col: int):
        super().__init__(f"Out of range: ({row}, {col})")
        self.row = row
        self.col = col


class IllegalMove(ValueError):
    """Raised when a move targets a cell that is not available."""


def _in_range(row: int, col: int) -> bool:
    if not (isinstance(row, (int, np.integer)) and isinstance(col, (int, np.integer))):
        return False
    return 1 <= row <= BOARD_N and 1 <= col <= BOARD_N


class Board:
    """
    3x3 Tic-Tac-Toe grid with a 1-indexed coordinate contract.

    Cells are stored as int8: 0 = empty, +1 = X, -1 = O.
    `get` raises OutOfRange, `set` reports it as False, and
    `is_available` treats it as simply not available.
    """

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self.cells = np.zeros((BOARD_N, BOARD_N), dtype=np.int8)

    @classmethod
    def from_rows(cls, rows: Iterable[str]) -> "Board":
        """Build a board from three strings like "XOX", "X O", "..O"."""
        rows = list(rows)
        if len(rows) != BOARD_N or any(len(r) != BOARD_N for r in rows):
            raise ValueError(f"Expected {BOARD_N} rows of {BOARD_N} cells, got {rows!r}")
        board = cls()
        for i, row in enumerate(rows, start=1):
            for j, ch in enumerate(row, start=1):
                if ch not in _CHAR_CELLS:
                    raise ValueError(f"Unknown cell character {ch!r}")
                board.set(i, j, _CHAR_CELLS[ch])
        return board

    def copy(self) -> "Board":
        other = Board()
        other.cells = self.cells.copy()
        return other

    # ---- cell access ----

    def get(self, row: int, col: int) -> Cell:
        if not _in_range(row, col):
            raise OutOfRange(row, col)
        return Cell(int(self.cells[row - 1, col - 1]))

    def is_available(self, row: int, col: int) -> bool:
        try:
            return self.get(row, col) is Cell.EMPTY
        except OutOfRange:
            return False

    def set(self, row: int, col: int, mark: Cell) -> bool:
        # Overwrites unconditionally; callers gate on is_available.
        if not _in_range(row, col):
            return False
        self.cells[row - 1, col - 1] = Cell(mark).value
        return True

    def available_actions(self) -> np.ndarray:
        """Flat indices 0..8 of the empty cells, row-major."""
        return np.flatnonzero(self.cells.ravel() == Cell.EMPTY)

    def available_cells(self) -> List[Tuple[int, int]]:
        return [action_to_rc(a) for a in self.available_actions()]

    def count(self, mark: Cell) -> int:
        return int((self.cells == Cell(mark).value).sum())

    # ---- terminal detection ----

    def winning_line(self) -> Optional[Tuple[Tuple[int, int], ...]]:
        for line in WIN_LINES:
            a, b, c = (self.get(r, col) for r, col in line)
            if a == b and b == c and a != Cell.EMPTY:
                return line
        return None

    def winner(self) -> Cell:
        line = self.winning_line()
        if line is None:
            return Cell.EMPTY
        r, c = line[0]
        return self.get(r, c)

    def is_won(self) -> bool:
        return self.winning_line() is not None

    def is_full(self) -> bool:
        return not (self.cells == Cell.EMPTY).any()

    def is_over(self) -> bool:
        if self.is_won():
            return True
        return self.is_full()

    def status(self) -> GameStatus:
        if self.is_won():
            return GameStatus.WON
        if self.is_full():
            return GameStatus.DRAWN
        return GameStatus.IN_PROGRESS

    # ---- rendering ----

    def render_rows(self) -> List[str]:
        return [
            "|" + " ".join(str(self.get(r, c)) for c in range(1, BOARD_N + 1)) + "|"
            for r in range(1, BOARD_N + 1)
        ]

    def render(self) -> str:
        return "\n".join(self.render_rows())

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        rows = ["".join(str(self.get(r, c)) for c in range(1, BOARD_N + 1)) for r in range(1, BOARD_N + 1)]
        return f"Board({rows!r})"
