"""
Connect 4 board engine.

Board representation:
- 6 rows x 7 columns, row 0 at the top
- 0 = empty
- 1 = first player's stones (P1)
- 2 = second player's stones (P2)

Unlike a canonical-form board, stones keep their owner's mark, so the same
board can be searched for either player.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Sequence, Tuple

import numpy as np

ROWS = 6
COLS = 7
WIN_LENGTH = 4

EMPTY = 0

# (row step, col step): horizontal, vertical, diagonal down-right, diagonal down-left
DIRECTIONS = ((0, 1), (1, 0), (1, 1), (1, -1))


class Player(IntEnum):
    """Stone owner. Values double as cell marks."""

    P1 = 1
    P2 = 2

    @property
    def other(self) -> Player:
        return Player.P2 if self is Player.P1 else Player.P1

    @property
    def symbol(self) -> str:
        return "X" if self is Player.P1 else "O"


@dataclass
class Board:
    """Mutable grid of cell marks."""

    grid: np.ndarray  # shape (6, 7), dtype int8

    def __post_init__(self):
        if self.grid.shape != (ROWS, COLS):
            raise ValueError(f"Board must be {ROWS}x{COLS}")
        if self.grid.dtype != np.int8:
            self.grid = self.grid.astype(np.int8)
        if self.grid.min() < EMPTY or self.grid.max() > Player.P2:
            raise ValueError("Cells must be 0 (empty), 1 (P1) or 2 (P2)")

    def copy(self) -> Board:
        # The source grid is already valid; skip __post_init__
        board = object.__new__(Board)
        board.grid = self.grid.copy()
        return board


def create_board() -> Board:
    """Create an empty board."""
    return Board(grid=np.zeros((ROWS, COLS), dtype=np.int8))


def available_row(board: Board, col: int) -> Optional[int]:
    """
    Return the lowest empty row of a column, or None if it is full.

    Scans from the bottom row upward.
    """
    column = board.grid[:, col]
    for row in range(ROWS - 1, -1, -1):
        if column[row] == EMPTY:
            return row
    return None


def drop_piece(board: Board, row: int, col: int, player: Player) -> None:
    """Place a stone in place. `row` must come from available_row on this board."""
    board.grid[row, col] = player


def _line_windows(mask: np.ndarray, dr: int, dc: int) -> np.ndarray:
    """
    AND together WIN_LENGTH shifted views of `mask`.

    Element (r, c) of the result is True iff the window of WIN_LENGTH cells
    starting at the r-th/c-th valid start position in direction (dr, dc) is
    fully set.
    """
    span_r = (WIN_LENGTH - 1) * dr
    span_c = (WIN_LENGTH - 1) * abs(dc)
    height, width = ROWS - span_r, COLS - span_c

    windows = np.ones((height, width), dtype=bool)
    for i in range(WIN_LENGTH):
        r0 = i * dr
        c0 = i * dc if dc >= 0 else span_c + i * dc
        windows &= mask[r0:r0 + height, c0:c0 + width]
    return windows


def is_winning_move(board: Board, player: Player) -> bool:
    """
    Check whether `player` has WIN_LENGTH stones in a line anywhere.

    Every cell is treated as a potential line start in all four directions,
    so the result does not depend on which stone was placed last.
    """
    mask = board.grid == player
    return any(_line_windows(mask, dr, dc).any() for dr, dc in DIRECTIONS)


def valid_columns(board: Board) -> list[int]:
    """Return legal columns (top cell empty) in ascending order."""
    return [int(c) for c in np.flatnonzero(board.grid[0, :] == EMPTY)]


def is_full(board: Board) -> bool:
    return not np.any(board.grid == EMPTY)


def is_well_formed(board: Board) -> bool:
    """Check gravity: every column is empty above its topmost stone."""
    occupied = board.grid != EMPTY
    # once a column turns occupied (scanning downward) it must stay occupied
    return bool(np.all(occupied[:-1, :] <= occupied[1:, :]))


def board_from_moves(
    moves: Sequence[int],
    first: Player = Player.P1,
) -> Tuple[Board, Player]:
    """
    Build a board by playing alternating moves.

    Args:
        moves: Column indices, played alternately starting with `first`
        first: Player making the first move

    Returns:
        (board, player to move next)
    """
    board = create_board()
    player = first
    for i, col in enumerate(moves):
        if col < 0 or col >= COLS:
            raise ValueError(f"Invalid column {col}, must be 0-{COLS-1}")
        row = available_row(board, col)
        if row is None:
            raise ValueError(f"Column {col} is full")
        if i > 0 and is_winning_move(board, player.other):
            raise ValueError(f"Game already won before move {i} (column {col})")
        drop_piece(board, row, col, player)
        player = player.other
    return board, player


def render(board: Board, last_move: int = -1) -> str:
    """
    Render the board as a string for display.

    - 'X' = P1
    - 'O' = P2
    - '.' = empty
    """
    lines = []
    lines.append(" " + " ".join(str(i) for i in range(COLS)))
    lines.append("-" * (COLS * 2 + 1))

    symbols = {EMPTY: ".", Player.P1: "X", Player.P2: "O"}

    for r in range(ROWS):
        row_str = "|" + "|".join(symbols[board.grid[r, c]] for c in range(COLS)) + "|"
        lines.append(row_str)

    lines.append("-" * (COLS * 2 + 1))

    if last_move >= 0:
        pointer = " " * (last_move * 2 + 1) + "^"
        lines.append(pointer)

    return "\n".join(lines)
