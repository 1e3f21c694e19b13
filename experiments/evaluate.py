import sys
import os
import time
import numpy as np
import argparse
import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
from tqdm import tqdm

# Project root, so the script runs from anywhere
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from data.load_dataset import SudokuDataset
from solvers.simple_propagation import SolveStatus, solve_sudoku
from utils.board_utils import format_puzzle

# -------------------------------------------------------------------------
# 1. Visualization
# -------------------------------------------------------------------------
def save_outcome_graph(counts, save_path='propagation_result.png'):
    labels = [status.value for status in SolveStatus]
    values = [counts[status] for status in SolveStatus]
    total = max(sum(values), 1)

    fig, ax = plt.subplots(figsize=(8, 5))
    bars = ax.bar(labels, values, color=['tab:blue', 'tab:orange', 'tab:red'], alpha=0.7)
    ax.set_xlabel('Outcome')
    ax.set_ylabel('Puzzles')

    for bar, value in zip(bars, values):
        ax.text(bar.get_x() + bar.get_width()/2., bar.get_height(),
                f'{value} ({value / total * 100:.1f}%)', ha='center', va='bottom')

    plt.title('Constraint Propagation Outcomes')
    fig.tight_layout()
    plt.savefig(save_path)
    plt.close(fig)
    print(f"📈 Saved chart to {save_path}")

# -------------------------------------------------------------------------
# 2. Evaluation Logic
# -------------------------------------------------------------------------
def evaluate_propagation(dataset, num_samples=100, use_inference=True, seed=None):
    rng = np.random.default_rng(seed)
    indices = rng.choice(len(dataset), size=min(len(dataset), num_samples), replace=False)

    counts = {status: 0 for status in SolveStatus}
    correct = 0
    checked = 0
    total_time = 0.0
    total_sweeps = 0
    skipped = 0

    print(f"🔍 Evaluating on {len(indices)} samples...")

    for idx in tqdm(indices, desc="Propagating"):
        quiz, solution = dataset[int(idx)]
        if quiz is None:
            skipped += 1
            continue

        start = time.time()
        result = solve_sudoku(quiz, use_inference=use_inference)
        total_time += time.time() - start
        total_sweeps += result.sweeps
        counts[result.status] += 1

        if result.solved and solution is not None:
            checked += 1
            if format_puzzle(result.grid) == solution:
                correct += 1

    n = max(len(indices) - skipped, 1)
    report = {
        'samples': len(indices) - skipped,
        'skipped': skipped,
        'solved': counts[SolveStatus.SOLVED],
        'stalled': counts[SolveStatus.STALLED],
        'contradiction': counts[SolveStatus.CONTRADICTION],
        'accuracy': (correct / checked * 100) if checked else None,
        'avg_time': total_time / n,
        'avg_sweeps': total_sweeps / n,
    }

    print("\n" + "="*55)
    print("📊 Propagation Results")
    print("="*55)
    for status in SolveStatus:
        print(f"{status.value:<15}: {counts[status]:>6} ({counts[status] / n * 100:.2f}%)")
    if report['accuracy'] is not None:
        print(f"{'accuracy':<15}: {report['accuracy']:.2f}% of solved puzzles match the solution")
    print(f"{'avg time':<15}: {report['avg_time']:.5f} sec")
    print(f"{'avg sweeps':<15}: {report['avg_sweeps']:.2f}")
    if skipped:
        print(f"{'skipped':<15}: {skipped} rows without a quiz")
    print("="*55)

    return report, counts

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument('--csv', type=str, default='./data/raw/sudoku.csv')
    parser.add_argument('--samples', type=int, default=100)
    parser.add_argument('--no-inference', action='store_true')
    parser.add_argument('--seed', type=int, default=None)
    parser.add_argument('--plot', type=str, default='propagation_result.png')
    args = parser.parse_args()

    try:
        dataset = SudokuDataset(csv_path=args.csv)
    except (FileNotFoundError, ValueError) as e:
        print(f"❌ {e}")
        return

    _, counts = evaluate_propagation(dataset, num_samples=args.samples,
                                     use_inference=not args.no_inference, seed=args.seed)
    save_outcome_graph(counts, save_path=args.plot)

if __name__ == "__main__":
    main()
