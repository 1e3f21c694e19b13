import sys
import os
import time
import argparse

sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from solvers.simple_propagation import SolveStatus, solve_sudoku

# From gentle to search-only puzzles
PUZZLES = [
    "530070000600195000098000060800060003400803001700020006060000280000419005000080079", # Wikipedia
    "003020600900305001001806400008102900700000008006708200002609500800203009005010300", # Project Euler #1
    "200080300060070084030500209000105408000000000402706000301007040720040060004010003", # Norvig easy
    "000000907000420180000705026100904000050000040000507009920108000034059000507000000", # Norvig easy #2
    "000006000059000008200008000045000000003000000006003054000325006000000000000000000", # Norvig #1
    "800000000003600000070090200050007000000045700000100030001000068008500010090000400", # AI Escargot
    "100000000002740000000500004030000000750000000000009600040006000000000071000001030", # Easter Monster
    "110000000000000000000000000000000000000000000000000000000000000000000000000000000", # Clashing clues
]

PUZZLE_NAMES = [
    "Wikipedia", "Euler #1", "Norvig easy", "Norvig easy #2",
    "Norvig #1", "AI Escargot", "Easter Monster", "Clashing clues",
]


def run_once(puzzle, use_inference):
    start = time.time()
    result = solve_sudoku(puzzle, use_inference=use_inference)
    return result, time.time() - start


def describe(result):
    if result.status is SolveStatus.SOLVED:
        return f"SOLVED/{result.sweeps}"
    if result.status is SolveStatus.CONTRADICTION:
        return "CONTRADICTION"
    return f"{result.grid.count_assigned()}/81"


def run_ablation(puzzles=PUZZLES, names=PUZZLE_NAMES):
    print("🔬 Ablation Study: Naked Singles vs Naked + Hidden Singles")
    print("-" * 80)
    print(f"{'Puzzle Name':<16} | {'Naked only':<14} | {'Naked + Hidden':<16} | {'Inference Impact'}")
    print("-" * 80)

    wins = 0
    rows = []
    for name, p_str in zip(names, puzzles):
        naked, _ = run_once(p_str, use_inference=False)
        full, elapsed = run_once(p_str, use_inference=True)

        gained = full.grid.count_assigned() - naked.grid.count_assigned()
        if full.solved and not naked.solved:
            impact = "🚀 Inference Enables Solve"
            wins += 1
        elif gained > 0:
            impact = f"⚡ +{gained} cells"
            wins += 1
        else:
            impact = "Same (~)"

        print(f"{name:<16} | {describe(naked):<14} | {describe(full):<16} | {impact} ({elapsed:.4f}s)")
        rows.append((name, naked, full))

    print("-" * 80)
    print(f"Summary: Hidden singles improved {wins}/{len(puzzles)} cases.")
    return rows


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    parser.add_argument('--puzzle', type=str, action='append', help='extra puzzle string (repeatable)')
    args = parser.parse_args()

    puzzles, names = list(PUZZLES), list(PUZZLE_NAMES)
    for i, extra in enumerate(args.puzzle or [], start=1):
        puzzles.append(extra)
        names.append(f"Custom #{i}")

    run_ablation(puzzles, names)
