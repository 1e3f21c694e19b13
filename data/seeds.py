# Demo seeds as [row, column, value], 1-based. Blank cells are not listed.

# "Easy"
EASY_SEED = [
    (1, 2, 5), (1, 7, 4),
    (2, 3, 6), (2, 5, 4), (2, 7, 1), (2, 9, 2),
    (3, 1, 2), (3, 2, 7), (3, 4, 5), (3, 9, 6),
    (4, 3, 5), (4, 5, 3), (4, 9, 8),
    (5, 1, 8), (5, 2, 2), (5, 8, 1), (5, 9, 4),
    (6, 1, 4), (6, 5, 7), (6, 7, 5),
    (7, 1, 3), (7, 6, 4), (7, 8, 8), (7, 9, 1),
    (8, 1, 7), (8, 3, 1), (8, 5, 6), (8, 7, 9),
    (9, 3, 2), (9, 8, 7),
]

EXTREME_SEED = [
    (1, 1, 7), (1, 3, 1), (1, 5, 6), (1, 9, 3),
    (3, 1, 3), (3, 2, 2), (3, 6, 8), (3, 7, 6), (3, 8, 1),
    (4, 1, 2), (4, 4, 3), (4, 5, 9), (4, 7, 7),
    (6, 3, 5), (6, 5, 4), (6, 6, 7), (6, 9, 2),
    (7, 2, 5), (7, 3, 9), (7, 4, 2), (7, 8, 3), (7, 9, 1),
    (9, 1, 6), (9, 5, 1), (9, 7, 5), (9, 9, 4),
]

SEEDS = {
    "easy": EASY_SEED,
    "extreme": EXTREME_SEED,
}
