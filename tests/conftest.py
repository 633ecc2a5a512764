"""Shared fixtures."""

import numpy as np
import pytest

from connect4tree.game import ROWS, Player, Board, create_board, drop_piece


# Full board with no four in a row for either player: cell (r, c) is P1
# iff (r // 2 + c) is even
NO_WIN_PATTERN = [
    [1, 2, 1, 2, 1, 2, 1],
    [1, 2, 1, 2, 1, 2, 1],
    [2, 1, 2, 1, 2, 1, 2],
    [2, 1, 2, 1, 2, 1, 2],
    [1, 2, 1, 2, 1, 2, 1],
    [1, 2, 1, 2, 1, 2, 1],
]


@pytest.fixture
def full_board() -> Board:
    return Board(grid=np.array(NO_WIN_PATTERN, dtype=np.int8))


@pytest.fixture
def threat_board() -> Board:
    """P1 holds columns 1-3 of the bottom row, P2 sits on 1-2; P1 to move."""
    board = create_board()
    for col in (1, 2, 3):
        drop_piece(board, ROWS - 1, col, Player.P1)
    for col in (1, 2):
        drop_piece(board, ROWS - 2, col, Player.P2)
    return board
