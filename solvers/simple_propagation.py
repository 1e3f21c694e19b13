import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Tuple

from solvers.candidates import candidates_for
from solvers.errors import ContradictorySeed
from solvers.grid import Grid
from solvers.inference import infer_from_block
from utils.board_utils import parse_puzzle

log = logging.getLogger(__name__)


class SolveStatus(Enum):
    SOLVED = "solved"
    STALLED = "stalled"            # settled with unknown cells left, needs search
    CONTRADICTION = "contradiction"


class _State(Enum):
    SWEEPING = "sweeping"
    SETTLED = "settled"


@dataclass
class SolveResult:
    status: SolveStatus
    grid: Grid
    sweeps: int = 0
    # assigned count before the first sweep, then after each sweep
    history: List[int] = field(default_factory=list)
    contradictions: List[Tuple[int, int]] = field(default_factory=list)

    @property
    def solved(self):
        return self.status is SolveStatus.SOLVED

    def raise_for_status(self):
        if self.status is SolveStatus.CONTRADICTION:
            raise ContradictorySeed(self.contradictions)
        return self


def sweep(grid, use_inference=True):
    """
    One row-major pass over the grid.

    For every unknown cell: fill it if its candidate pool has a single digit
    (naked single), then run the hidden single pass on its block.

    returns: (placed, contradictions)
        placed: number of cells assigned during the pass
        contradictions: cells with an empty pool or two forced digits
    """
    before = grid.count_assigned()
    contradictions = []

    for r in range(1, 10):
        for c in range(1, 10):
            if grid.value_at(r, c) is not None:
                continue

            pool = candidates_for(grid, r, c)
            if len(pool) == 0:
                # No digit fits, the clues contradict each other
                if (r, c) not in contradictions:
                    contradictions.append((r, c))
            elif len(pool) == 1:
                digit = next(iter(pool))
                grid.assign(r, c, digit)
                log.debug("naked single: r%dc%d = %d", r, c, digit)

            if use_inference:
                _, conflicts = infer_from_block(grid, r, c)
                for cell in conflicts:
                    if cell not in contradictions:
                        contradictions.append(cell)

    return grid.count_assigned() - before, contradictions


def propagate(grid, max_sweeps=None, use_inference=True):
    """
    Sweep until a fixed point (Fixed Point Iteration).
    The grid is filled in place.

    max_sweeps: optional ceiling on the number of sweeps, None for no limit.
                Progress is bounded by 81 cells, so the loop always ends.
    """
    history = [grid.count_assigned()]

    clashes = grid.find_conflicts()
    if clashes:
        cells = []
        for first, second in clashes:
            for cell in (first, second):
                if (cell.row, cell.column) not in cells:
                    cells.append((cell.row, cell.column))
        log.warning("seed has %d clashing clue pair(s)", len(clashes))
        return SolveResult(SolveStatus.CONTRADICTION, grid, 0, history, cells)

    state = _State.SWEEPING
    status = SolveStatus.STALLED
    sweeps = 0
    contradictions = []

    while state is _State.SWEEPING:
        if grid.is_complete():
            status, state = SolveStatus.SOLVED, _State.SETTLED
            break
        if max_sweeps is not None and sweeps >= max_sweeps:
            log.info("stopping after %d sweeps", sweeps)
            status, state = SolveStatus.STALLED, _State.SETTLED
            break

        placed, contradictions = sweep(grid, use_inference=use_inference)
        sweeps += 1
        history.append(grid.count_assigned())
        log.debug("sweep %d placed %d, %d/81 assigned", sweeps, placed, history[-1])

        if contradictions:
            log.warning("contradiction at %s", ", ".join(f"r{r}c{c}" for r, c in contradictions))
            status, state = SolveStatus.CONTRADICTION, _State.SETTLED
        elif grid.is_complete():
            status, state = SolveStatus.SOLVED, _State.SETTLED
        elif placed == 0:
            status, state = SolveStatus.STALLED, _State.SETTLED

    log.info("settled as %s after %d sweeps (%d/81 assigned)",
             status.value, sweeps, grid.count_assigned())
    return SolveResult(status, grid, sweeps, history, contradictions)


def solve_clues(clues, max_sweeps=None, use_inference=True):
    """Solve from (row, column, digit) triples."""
    return propagate(Grid.from_clues(clues), max_sweeps=max_sweeps, use_inference=use_inference)


def solve_sudoku(puzzle, max_sweeps=None, use_inference=True):
    """Solve an 81 character puzzle string ('0' or '.' for blanks)."""
    board = parse_puzzle(puzzle)
    return propagate(Grid.from_board(board), max_sweeps=max_sweeps, use_inference=use_inference)
