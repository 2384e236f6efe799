"""Configuration constants used across the Ultimate Tic-Tac-Toe project."""

import os
from typing import Tuple

GRID_SIZE: int = 9
ROW_LENGTH: int = 3
X_SYMBOL: str = "X"
O_SYMBOL: str = "O"
EMPTY_SYMBOL: str = " "
# Empty squares the next move may take, in the coloured view.
PLAYABLE_SYMBOL: str = "·"

# Row-major cell indices forming three in a row, checked in this order.
WIN_LINES: Tuple[Tuple[int, int, int], ...] = (
    (0, 1, 2),
    (3, 4, 5),
    (6, 7, 8),
    (0, 3, 6),
    (1, 4, 7),
    (2, 5, 8),
    (0, 4, 8),
    (2, 4, 6),
)

# Number of entries kept in the recent-actions panel.
LOG_CAPACITY: int = 12

LOG_LEVEL: str = os.getenv("UTTT_LOG_LEVEL", "WARNING").upper()
LOG_FILE: str = os.getenv("UTTT_LOG_FILE", "uttt.log")
