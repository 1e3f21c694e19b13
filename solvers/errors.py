class SolverError(Exception):
    """Base class for every error raised by the propagation solver."""


class OutOfRange(SolverError, ValueError):
    """A row, column or digit outside 1..9 was supplied."""

    def __init__(self, name, value):
        super().__init__(f"{name} must be in 1..9, got {value!r}")
        self.name = name
        self.value = value


class AlreadyAssigned(SolverError):
    """A cell already holding a digit was given a different one."""

    def __init__(self, row, column, current, digit):
        super().__init__(
            f"r{row}c{column} already holds {current}, cannot assign {digit}"
        )
        self.row = row
        self.column = column
        self.current = current
        self.digit = digit


class ContradictorySeed(SolverError):
    """The clues break the Sudoku rule, so propagation cannot complete the grid.

    `cells` lists the (row, column) pairs where the contradiction surfaced.
    """

    def __init__(self, cells, message=None):
        cells = list(cells)
        if message is None:
            where = ", ".join(f"r{r}c{c}" for r, c in cells) or "unknown cells"
            message = f"contradictory seed at {where}"
        super().__init__(message)
        self.cells = cells
