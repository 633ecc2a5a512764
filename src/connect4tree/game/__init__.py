"""Game module - Connect 4 board engine."""

from .board import (
    ROWS,
    COLS,
    WIN_LENGTH,
    EMPTY,
    Player,
    Board,
    create_board,
    available_row,
    drop_piece,
    is_winning_move,
    valid_columns,
    is_full,
    is_well_formed,
    board_from_moves,
    render,
)

__all__ = [
    "ROWS",
    "COLS",
    "WIN_LENGTH",
    "EMPTY",
    "Player",
    "Board",
    "create_board",
    "available_row",
    "drop_piece",
    "is_winning_move",
    "valid_columns",
    "is_full",
    "is_well_formed",
    "board_from_moves",
    "render",
]
