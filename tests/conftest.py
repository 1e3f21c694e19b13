# tests/conftest.py
import sys
from pathlib import Path

import pytest

# Add project root to sys.path so "solvers", "utils", "data" can be imported in tests
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

WIKIPEDIA_PUZZLE = "530070000600195000098000060800060003400803001700020006060000280000419005000080079"
WIKIPEDIA_SOLUTION = "534678912672195348198342567859761423426853791713924856961537284287419635345286179"


@pytest.fixture
def wikipedia_puzzle():
    return WIKIPEDIA_PUZZLE


@pytest.fixture
def wikipedia_solution():
    return WIKIPEDIA_SOLUTION


@pytest.fixture
def one_blank_per_row():
    # The solution with a diagonal of blanks: every blank is the only blank of its row
    cells = list(WIKIPEDIA_SOLUTION)
    for i in range(9):
        cells[i * 9 + i] = "0"
    return "".join(cells)
