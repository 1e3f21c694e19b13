from solvers.candidates import candidate_map, candidates_for
from solvers.grid import Grid


def test_empty_grid_allows_everything():
    assert candidates_for(Grid(), 5, 5) == set(range(1, 10))


def test_row_column_and_block_are_removed():
    grid = Grid.from_clues([(1, 9, 1), (9, 1, 2), (2, 2, 3), (5, 5, 4)])
    assert candidates_for(grid, 1, 1) == {4, 5, 6, 7, 8, 9}


def test_duplicates_across_groups_are_harmless():
    # (1, 2) is both in the row and in the block of (1, 1)
    grid = Grid.from_clues([(1, 2, 6)])
    assert candidates_for(grid, 1, 1) == {1, 2, 3, 4, 5, 7, 8, 9}


def test_naked_single_in_almost_full_block():
    clues = [(1, 1, 1), (1, 2, 2), (1, 3, 3),
             (2, 1, 4), (2, 2, 5), (2, 3, 6),
             (3, 1, 7), (3, 2, 8)]
    assert candidates_for(Grid.from_clues(clues), 3, 3) == {9}


def test_empty_pool_signals_contradiction():
    # row 1 holds 1..8, column 1 holds 9
    clues = [(1, c, c - 1) for c in range(2, 10)] + [(2, 1, 9)]
    assert candidates_for(Grid.from_clues(clues), 1, 1) == set()


def test_candidate_map_covers_unknown_cells(wikipedia_puzzle):
    from utils.board_utils import parse_puzzle

    grid = Grid.from_board(parse_puzzle(wikipedia_puzzle))
    pools = candidate_map(grid)
    assert len(pools) == 81 - 30
    assert list(pools)[0] == (1, 3)
    assert pools[(5, 5)] == {5}
    assert all(pools.values())
