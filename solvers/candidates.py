from solvers.grid import DIGITS


def candidates_for(grid, row, column):
    """Digits 1..9 not yet used in the row, column or block of (row, column)."""
    candidates = set(DIGITS)
    peers = grid.peers_in_row(row) + grid.peers_in_column(column) + grid.peers_in_block(row, column)
    # Row, Col, Box Constraints
    candidates -= {cell.value for cell in peers if cell.value is not None}
    return candidates


def candidate_map(grid):
    """Candidate pool for every unknown cell, keyed by (row, column) in row-major order."""
    return {(r, c): candidates_for(grid, r, c) for r, c in grid.unknown_cells()}
