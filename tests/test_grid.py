import numpy as np
import pytest

from solvers.errors import AlreadyAssigned, OutOfRange
from solvers.grid import Cell, Grid, block_origin


def test_new_grid_is_empty():
    grid = Grid()
    assert grid.count_assigned() == 0
    assert grid.value_at(5, 5) is None
    assert len(grid.unknown_cells()) == 81
    assert not grid.is_complete()


def test_assign_and_value_at():
    grid = Grid()
    grid.assign(1, 1, 7)
    assert grid.value_at(1, 1) == 7
    assert grid.count_assigned() == 1
    # same digit again is a no-op
    grid.assign(1, 1, 7)
    assert grid.count_assigned() == 1


def test_assign_different_digit_raises():
    grid = Grid.from_clues([(3, 4, 2)])
    with pytest.raises(AlreadyAssigned) as exc:
        grid.assign(3, 4, 5)
    assert exc.value.current == 2
    assert grid.value_at(3, 4) == 2


@pytest.mark.parametrize("row, column, digit", [(0, 1, 1), (10, 1, 1), (1, 0, 1), (1, 1, 0), (1, 1, 10)])
def test_assign_out_of_range(row, column, digit):
    with pytest.raises(OutOfRange):
        Grid().assign(row, column, digit)


def test_queries_reject_bad_coordinates():
    grid = Grid()
    with pytest.raises(OutOfRange):
        grid.value_at(0, 3)
    with pytest.raises(OutOfRange):
        grid.peers_in_row(10)
    with pytest.raises(OutOfRange):
        grid.peers_in_column(-1)
    with pytest.raises(OutOfRange):
        grid.peers_in_block(4, 12)
    # OutOfRange is also a ValueError for callers that only know the builtin
    with pytest.raises(ValueError):
        grid.value_at(1, 99)


def test_peer_groups():
    grid = Grid.from_clues([(2, 5, 4), (6, 5, 7), (5, 9, 3)])

    row = grid.peers_in_row(2)
    assert [cell.column for cell in row] == list(range(1, 10))
    assert row[4] == Cell(2, 5, 4)

    column = grid.peers_in_column(5)
    assert [cell.row for cell in column] == list(range(1, 10))
    assert {cell.value for cell in column} == {None, 4, 7}

    block = grid.peers_in_block(5, 8)
    assert [(cell.row, cell.column) for cell in block] == [
        (4, 7), (4, 8), (4, 9), (5, 7), (5, 8), (5, 9), (6, 7), (6, 8), (6, 9)]
    assert block[5].value == 3


def test_block_origin():
    assert block_origin(1, 1) == (1, 1)
    assert block_origin(3, 3) == (1, 1)
    assert block_origin(4, 9) == (4, 7)
    assert block_origin(9, 5) == (7, 4)


def test_from_board_and_back(wikipedia_puzzle):
    board = np.array([int(ch) for ch in wikipedia_puzzle]).reshape(9, 9)
    grid = Grid.from_board(board)
    assert grid.count_assigned() == 30
    assert grid.value_at(1, 1) == 5
    assert grid.value_at(9, 9) == 9
    assert np.array_equal(grid.to_array(), board)
    assert grid.clues()[0] == (1, 1, 5)


def test_from_board_rejects_wrong_shape():
    with pytest.raises(ValueError):
        Grid.from_board(np.zeros((9, 8), dtype=int))


def test_copy_is_independent():
    grid = Grid.from_clues([(1, 1, 1)])
    clone = grid.copy()
    clone.assign(1, 2, 2)
    assert clone != grid
    assert grid.value_at(1, 2) is None


def test_str_marks_unknown_cells():
    text = str(Grid.from_clues([(1, 1, 9)]))
    lines = text.splitlines()
    assert len(lines) == 9
    assert lines[0] == "9........"


def test_find_conflicts():
    assert Grid.from_clues([(1, 1, 5), (2, 4, 5)]).find_conflicts() == []

    # same row
    conflicts = Grid.from_clues([(1, 1, 5), (1, 9, 5)]).find_conflicts()
    assert conflicts == [(Cell(1, 1, 5), Cell(1, 9, 5))]

    # same row and block is reported once
    conflicts = Grid.from_clues([(1, 1, 5), (1, 2, 5)]).find_conflicts()
    assert len(conflicts) == 1

    # same block only
    conflicts = Grid.from_clues([(4, 4, 8), (6, 6, 8)]).find_conflicts()
    assert conflicts == [(Cell(4, 4, 8), Cell(6, 6, 8))]
