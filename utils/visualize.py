import numpy as np

from solvers.grid import Grid


def _as_grid(grid):
    if isinstance(grid, Grid):
        return grid
    return Grid.from_board(grid)


def get_conflict_mask(grid):
    """
    Mask of cells breaking the row, column or box rule (True = conflict).
    0 cells never conflict.
    """
    conflict_mask = np.zeros((9, 9), dtype=bool)
    for first, second in _as_grid(grid).find_conflicts():
        conflict_mask[first.row - 1, first.column - 1] = True
        conflict_mask[second.row - 1, second.column - 1] = True
    return conflict_mask


def print_sudoku(grid, original=None):
    """
    grid: Grid or 9x9 board after propagation
    original: the clues before solving; cells blank there are painted as filled
    """
    # ANSI Colors
    RED = '\033[91m'   # conflict
    BLUE = '\033[94m'  # filled by the solver
    RESET = '\033[0m'

    grid = _as_grid(grid)
    conflicts = get_conflict_mask(grid)
    board = grid.to_array()
    if original is not None:
        original = _as_grid(original).to_array()

    print("-" * 25)
    for i in range(9):
        if i > 0 and i % 3 == 0:
            print("-" * 25)
        row_str = ""
        for j in range(9):
            if j > 0 and j % 3 == 0:
                row_str += "| "

            val = board[i, j]
            val_str = str(val) if val != 0 else "."

            is_error = conflicts[i, j]
            is_filled = (original is not None) and (original[i, j] == 0) and (val != 0)

            if is_error:
                row_str += f"{RED}{val_str}{RESET} "
            elif is_filled:
                row_str += f"{BLUE}{val_str}{RESET} "
            else:
                row_str += f"{val_str} "

        print(row_str)
    print("-" * 25)

    if np.any(conflicts):
        print(f"{RED}⚠️  DETECTED ERRORS: The grid violates Sudoku rules!{RESET}")
    elif np.all(board != 0):
        print(f"{BLUE}✅ Perfect Solution!{RESET}")
    else:
        print(f"🧩 {int(np.sum(board == 0))} cells still unknown.")
