import os

import pandas as pd


class SudokuDataset:
    """
    Puzzles from a CSV with a `quizzes` column and an optional `solutions`
    column, 81 characters per cell string (Kaggle sudoku.csv layout).
    """

    def __init__(self, csv_path, limit=None):
        self.csv_path = csv_path
        if csv_path and os.path.exists(csv_path):
            # Read as strings so leading zeros survive
            self.df = pd.read_csv(csv_path, dtype=str, nrows=limit)
        else:
            raise FileNotFoundError(f"CSV file not found at {csv_path}")

        if 'quizzes' not in self.df.columns:
            raise ValueError(f"{csv_path} has no 'quizzes' column")
        self.has_solutions = 'solutions' in self.df.columns

    def __len__(self):
        return len(self.df)

    def __getitem__(self, idx):
        """(quiz, solution) strings; an empty cell in the CSV comes back as None."""
        row = self.df.iloc[idx]
        quiz = row['quizzes']
        quiz_str = quiz.strip() if isinstance(quiz, str) else None
        sol_str = row['solutions'].strip() if self.has_solutions and isinstance(row['solutions'], str) else None
        return quiz_str, sol_str
