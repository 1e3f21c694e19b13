import numpy as np


def parse_puzzle(text):
    """
    Convert a string of 81 digits (e.g., "53007...") to a 9x9 numpy board.
    '0' or '.' represents an empty cell, whitespace is ignored.
    """
    chars = [ch for ch in text if not ch.isspace()]
    if len(chars) != 81:
        raise ValueError(f"puzzle must have 81 cells, got {len(chars)}")

    data = []
    for ch in chars:
        if ch == ".":
            data.append(0)
        elif ch in "0123456789":
            data.append(int(ch))
        else:
            raise ValueError(f"invalid puzzle character {ch!r}")

    return np.array(data, dtype=int).reshape(9, 9)


def format_puzzle(board, blank="0"):
    """Inverse of parse_puzzle. Accepts a 9x9 array-like or a Grid."""
    if hasattr(board, "to_array"):
        board = board.to_array()
    flat = np.asarray(board).flatten()
    return "".join(str(int(v)) if v != 0 else blank for v in flat)


def board_from_clues(clues):
    """(row, column, digit) triples with 1-based coordinates -> 9x9 board."""
    board = np.zeros((9, 9), dtype=int)
    for row, col, digit in clues:
        board[row - 1, col - 1] = digit
    return board


def clues_from_board(board):
    board = np.asarray(board)
    return [(int(r) + 1, int(c) + 1, int(board[r, c])) for r, c in np.argwhere(board != 0)]
