import argparse
import logging
import sys
import time

from data.seeds import SEEDS
from solvers.candidates import candidate_map
from solvers.grid import Grid
from solvers.simple_propagation import SolveStatus, propagate
from utils.board_utils import board_from_clues, parse_puzzle
from utils.visualize import print_sudoku

EXIT_CODES = {
    SolveStatus.SOLVED: 0,
    SolveStatus.STALLED: 1,
    SolveStatus.CONTRADICTION: 2,
}


def load_grid(args):
    if args.seed:
        return Grid.from_board(board_from_clues(SEEDS[args.seed]))
    if args.file:
        with open(args.file, 'r') as f:
            return Grid.from_board(parse_puzzle(f.read()))
    return Grid.from_board(parse_puzzle(args.input))


def main(argv=None):
    parser = argparse.ArgumentParser(description="Solve a Sudoku by constraint propagation")
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--input', type=str,
    default="530070000600195000098000060800060003400803001700020006060000280000419005000080079",
    help='Sudoku string, 0 or . for blanks')
    source.add_argument('--seed', choices=sorted(SEEDS), help='built-in demo seed')
    source.add_argument('--file', type=str, help='file holding an 81 cell puzzle')
    parser.add_argument('--max-sweeps', type=int, default=None)
    parser.add_argument('--no-inference', action='store_true', help='naked singles only')
    parser.add_argument('--show-candidates', action='store_true',
                        help='list the candidates left in unknown cells')
    parser.add_argument('--verbose', action='store_true')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        grid = load_grid(args)
    except (OSError, ValueError) as e:
        print(f"❌ Failed to load puzzle: {e}")
        return 2

    original = grid.copy()
    print(f"\n🧩 Puzzle: {original.count_assigned()} clues")
    print_sudoku(original)

    start_time = time.time()
    result = propagate(grid, max_sweeps=args.max_sweeps, use_inference=not args.no_inference)
    elapsed = time.time() - start_time

    if result.status is SolveStatus.SOLVED:
        print(f"\n🎉 Solved in {elapsed:.4f} sec ({result.sweeps} sweeps)!")
    elif result.status is SolveStatus.STALLED:
        print(f"\n🐌 Stalled after {result.sweeps} sweeps: "
              f"{81 - grid.count_assigned()} cells need search.")
    else:
        cells = ", ".join(f"r{r}c{c}" for r, c in result.contradictions)
        print(f"\n💀 Contradictory seed at {cells}.")
    print_sudoku(grid, original=original)

    if args.show_candidates:
        for (r, c), pool in candidate_map(grid).items():
            digits = " ".join(str(d) for d in sorted(pool)) or "-"
            print(f"r{r}c{c}: {digits}")

    return EXIT_CODES[result.status]


if __name__ == "__main__":
    sys.exit(main())
