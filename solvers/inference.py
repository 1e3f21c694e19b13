import logging

import numpy as np

from solvers.candidates import candidates_for

log = logging.getLogger(__name__)


def infer_from_block(grid, row, column):
    """
    Hidden single pass over the 3x3 block containing (row, column).

    Every unknown cell of the block gets its candidate pool computed up front.
    A digit that appears in exactly one of those pools can only go in that
    cell, so it is assigned there.

    returns: (placed, conflicts)
        placed: [(row, column, digit), ...] assignments made by this pass
        conflicts: [(row, column), ...] cells that are the only home of two
                   different digits, meaning the block cannot be completed
    """
    pools = [(cell.row, cell.column, candidates_for(grid, cell.row, cell.column))
             for cell in grid.peers_in_block(row, column)
             if cell.value is None]

    # frequency[d] = number of pools containing d (index 0 unused)
    frequency = np.zeros(10, dtype=int)
    for _, _, pool in pools:
        for digit in pool:
            frequency[digit] += 1

    placed = []
    conflicts = []
    for digit in range(1, 10):
        if frequency[digit] != 1:
            continue
        r, c, _ = next(p for p in pools if digit in p[2])
        current = grid.value_at(r, c)
        if current is not None:
            # Already took another unique digit in this pass
            log.warning("r%dc%d is the only place for both %d and %d in its block",
                        r, c, current, digit)
            if (r, c) not in conflicts:
                conflicts.append((r, c))
            continue
        grid.assign(r, c, digit)
        placed.append((r, c, digit))
        log.debug("hidden single: r%dc%d = %d", r, c, digit)

    return placed, conflicts
