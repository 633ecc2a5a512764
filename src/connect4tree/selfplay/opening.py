"""
Random openings used as starting positions for the explorer.

Moves are drawn with NumPy's global RNG; seed it with utils.set_seed for
reproducible openings.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from ..game import (
    Board,
    Player,
    available_row,
    create_board,
    drop_piece,
    is_winning_move,
    valid_columns,
)


def _quiet_columns(board: Board, player: Player) -> list[int]:
    """Legal columns where `player` does not complete a line."""
    quiet = []
    for col in valid_columns(board):
        trial = board.copy()
        drop_piece(trial, available_row(trial, col), col, player)
        if not is_winning_move(trial, player):
            quiet.append(col)
    return quiet


def random_opening(
    num_moves: int,
    first: Player = Player.P1,
) -> Tuple[Board, Player]:
    """
    Play random alternating moves from an empty board.

    Moves that would win are never played, so the result is always an
    undecided position. Stops early when no such move is left.

    Args:
        num_moves: Number of moves to play
        first: Player making the first move

    Returns:
        (board, player to move next)
    """
    if num_moves < 0:
        raise ValueError(f"Number of moves must be non-negative, got {num_moves}")

    board = create_board()
    player = first
    for _ in range(num_moves):
        legal = _quiet_columns(board, player)
        if not legal:
            break

        col = int(np.random.choice(legal))
        drop_piece(board, available_row(board, col), col, player)
        player = player.other

    return board, player
