from typing import NamedTuple, Optional

import numpy as np

from solvers.errors import AlreadyAssigned, OutOfRange
from utils.board_utils import clues_from_board

DIGITS = range(1, 10)


class Cell(NamedTuple):
    """Read-only snapshot of one cell. `value` is None while unknown."""
    row: int
    column: int
    value: Optional[int]


def _check(name, value):
    if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or not 1 <= value <= 9:
        raise OutOfRange(name, value)
    return int(value)


def block_origin(row, column):
    """1-based (row, column) of the top-left cell of the block containing the cell."""
    br, bc = (row - 1) // 3, (column - 1) // 3
    return br * 3 + 1, bc * 3 + 1


class Grid:
    """
    9x9 Sudoku state. Coordinates are 1-based, storage is a numpy array
    where 0 marks an unknown cell.
    """

    def __init__(self):
        self._board = np.zeros((9, 9), dtype=np.int8)

    @classmethod
    def from_clues(cls, clues):
        """Build a grid from (row, column, digit) triples."""
        grid = cls()
        for row, column, digit in clues:
            grid.assign(row, column, digit)
        return grid

    @classmethod
    def from_board(cls, board):
        board = np.asarray(board)
        if board.shape != (9, 9):
            raise ValueError(f"board must be 9x9, got shape {board.shape}")
        return cls.from_clues(clues_from_board(board))

    # ------------------------------------------------------------------
    # Cell access
    # ------------------------------------------------------------------
    def value_at(self, row, column):
        row, column = _check("row", row), _check("column", column)
        val = int(self._board[row - 1, column - 1])
        return val if val != 0 else None

    def assign(self, row, column, digit):
        row, column = _check("row", row), _check("column", column)
        digit = _check("digit", digit)
        current = int(self._board[row - 1, column - 1])
        if current == digit:
            return
        if current != 0:
            raise AlreadyAssigned(row, column, current, digit)
        self._board[row - 1, column - 1] = digit

    def _cell(self, row, column):
        val = int(self._board[row - 1, column - 1])
        return Cell(row, column, val if val != 0 else None)

    # ------------------------------------------------------------------
    # Peer groups
    # ------------------------------------------------------------------
    def peers_in_row(self, row):
        row = _check("row", row)
        return [self._cell(row, c) for c in DIGITS]

    def peers_in_column(self, column):
        column = _check("column", column)
        return [self._cell(r, column) for r in DIGITS]

    def peers_in_block(self, row, column):
        r0, c0 = block_origin(_check("row", row), _check("column", column))
        return [self._cell(r0 + i, c0 + j) for i in range(3) for j in range(3)]

    # ------------------------------------------------------------------
    # Whole-grid queries
    # ------------------------------------------------------------------
    def count_assigned(self):
        return int(np.count_nonzero(self._board))

    def is_complete(self):
        return self.count_assigned() == 81

    def unknown_cells(self):
        return [(int(r) + 1, int(c) + 1) for r, c in np.argwhere(self._board == 0)]

    def clues(self):
        return [(int(r) + 1, int(c) + 1, int(self._board[r, c]))
                for r, c in np.argwhere(self._board != 0)]

    def find_conflicts(self):
        """
        Pairs of assigned cells sharing a row, column or block with the same digit.
        Each pair is reported once, ordered row-major by its first cell.
        """
        conflicts = []
        for r, c, digit in self.clues():
            for other in self.peers_in_row(r) + self.peers_in_column(c) + self.peers_in_block(r, c):
                if (other.row, other.column) <= (r, c) or other.value != digit:
                    continue
                pair = (Cell(r, c, digit), other)
                if pair not in conflicts:
                    conflicts.append(pair)
        return conflicts

    def copy(self):
        grid = Grid()
        grid._board = self._board.copy()
        return grid

    def to_array(self):
        return self._board.astype(int)

    def __eq__(self, other):
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._board, other._board))

    def __str__(self):
        return "\n".join(
            "".join(str(v) if v != 0 else "." for v in row) for row in self._board
        )

    def __repr__(self):
        return f"<Grid assigned={self.count_assigned()}/81>"
