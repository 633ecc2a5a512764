"""Tests for the Connect 4 board engine."""

import numpy as np
import pytest

from connect4tree.game import (
    ROWS,
    COLS,
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


def board_with(cells, player):
    """Empty board with `player` stones at the given (row, col) cells."""
    board = create_board()
    for r, c in cells:
        board.grid[r, c] = player
    return board


class TestCreateBoard:
    def test_empty_board(self):
        board = create_board()
        assert board.grid.shape == (ROWS, COLS)
        assert np.all(board.grid == EMPTY)

    def test_all_columns_valid(self):
        assert valid_columns(create_board()) == list(range(COLS))

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            Board(grid=np.zeros((ROWS, COLS + 1), dtype=np.int8))

    def test_rejects_unknown_marks(self):
        grid = np.zeros((ROWS, COLS), dtype=np.int8)
        grid[ROWS - 1, 0] = 3
        with pytest.raises(ValueError):
            Board(grid=grid)

    def test_coerces_dtype(self):
        board = Board(grid=np.zeros((ROWS, COLS), dtype=np.int64))
        assert board.grid.dtype == np.int8

    def test_copy_is_independent(self):
        board = create_board()
        copy = board.copy()
        drop_piece(copy, ROWS - 1, 3, Player.P1)
        assert board.grid[ROWS - 1, 3] == EMPTY

    def test_copy_skips_validation(self, monkeypatch):
        board, _ = board_from_moves([3, 3, 2])

        def fail(self):
            raise AssertionError("copy re-validated the grid")

        monkeypatch.setattr(Board, "__post_init__", fail)
        copy = board.copy()
        assert isinstance(copy, Board)
        assert copy.grid.dtype == np.int8
        assert np.array_equal(copy.grid, board.grid)
        assert copy.grid is not board.grid


class TestAvailableRow:
    def test_empty_column_is_bottom_row(self):
        assert available_row(create_board(), 0) == ROWS - 1

    def test_pieces_stack(self):
        board = create_board()
        for expected in range(ROWS - 1, -1, -1):
            row = available_row(board, 2)
            assert row == expected
            drop_piece(board, row, 2, Player.P1)

    def test_full_column_is_none(self):
        board = create_board()
        for row in range(ROWS):
            drop_piece(board, row, 4, Player.P2)
        assert available_row(board, 4) is None
        assert 4 not in valid_columns(board)

    def test_none_iff_top_cell_occupied(self):
        board, _ = board_from_moves([0, 0, 0, 1, 0, 0, 0, 6])
        for col in range(COLS):
            full = board.grid[0, col] != EMPTY
            assert (available_row(board, col) is None) == full


class TestWinDetection:
    def test_horizontal_win(self):
        board = board_with([(ROWS - 1, c) for c in range(4)], Player.P1)
        assert is_winning_move(board, Player.P1)
        assert not is_winning_move(board, Player.P2)

    def test_vertical_win(self):
        board = board_with([(r, 0) for r in range(ROWS - 4, ROWS)], Player.P2)
        assert is_winning_move(board, Player.P2)

    def test_diagonal_down_right_win(self):
        board = board_with([(i, i) for i in range(4)], Player.P1)
        assert is_winning_move(board, Player.P1)

    def test_diagonal_down_left_win(self):
        board = board_with([(i, 6 - i) for i in range(4)], Player.P1)
        assert is_winning_move(board, Player.P1)

    def test_win_at_far_corner(self):
        board = board_with([(ROWS - 1 - i, COLS - 1 - i) for i in range(4)], Player.P2)
        assert is_winning_move(board, Player.P2)

    def test_no_win_three_in_row(self):
        board = board_with([(ROWS - 1, c) for c in range(3)], Player.P1)
        assert not is_winning_move(board, Player.P1)

    def test_broken_line_is_not_a_win(self):
        board = board_with([(ROWS - 1, c) for c in (0, 1, 3, 4)], Player.P1)
        board.grid[ROWS - 1, 2] = Player.P2
        assert not is_winning_move(board, Player.P1)
        assert not is_winning_move(board, Player.P2)

    def test_lines_do_not_wrap_around(self):
        # Two stones at the end of one row and two at the start of the next
        board = board_with([(4, 5), (4, 6), (5, 0), (5, 1)], Player.P1)
        assert not is_winning_move(board, Player.P1)

    def test_full_board_without_line(self, full_board):
        assert not is_winning_move(full_board, Player.P1)
        assert not is_winning_move(full_board, Player.P2)

    def test_bottom_row_completion(self):
        """P1 holds columns 1-3 of the bottom row and completes at column 0."""
        board = board_with([(ROWS - 1, c) for c in (1, 2, 3)], Player.P1)
        assert 0 in valid_columns(board)

        row = available_row(board, 0)
        assert row == ROWS - 1
        drop_piece(board, row, 0, Player.P1)
        assert is_winning_move(board, Player.P1)


class TestFullBoard:
    def test_no_valid_columns(self, full_board):
        assert valid_columns(full_board) == []
        assert is_full(full_board)

    def test_empty_board_not_full(self):
        assert not is_full(create_board())


class TestGravity:
    def test_played_boards_are_well_formed(self):
        board, _ = board_from_moves([3, 3, 2, 4, 4, 4, 0])
        assert is_well_formed(board)

    def test_floating_stone(self):
        board = board_with([(2, 3)], Player.P1)
        assert not is_well_formed(board)


class TestBoardFromMoves:
    def test_alternates_players(self):
        board, next_player = board_from_moves([3, 3, 4])
        assert board.grid[ROWS - 1, 3] == Player.P1
        assert board.grid[ROWS - 2, 3] == Player.P2
        assert board.grid[ROWS - 1, 4] == Player.P1
        assert next_player is Player.P2

    def test_second_player_first(self):
        board, next_player = board_from_moves([0], first=Player.P2)
        assert board.grid[ROWS - 1, 0] == Player.P2
        assert next_player is Player.P1

    def test_invalid_column_raises(self):
        with pytest.raises(ValueError):
            board_from_moves([-1])
        with pytest.raises(ValueError):
            board_from_moves([COLS])

    def test_full_column_raises(self):
        with pytest.raises(ValueError):
            board_from_moves([0] * (ROWS + 1))

    def test_move_after_win_raises(self):
        # P1 wins vertically in column 0 on the seventh move
        with pytest.raises(ValueError):
            board_from_moves([0, 1, 0, 1, 0, 1, 0, 1])

    def test_winning_last_move_allowed(self):
        board, _ = board_from_moves([0, 1, 0, 1, 0, 1, 0])
        assert is_winning_move(board, Player.P1)


class TestRender:
    def test_render_empty(self):
        output = render(create_board())
        assert "." in output
        assert "X" not in output
        assert "O" not in output

    def test_render_with_pieces(self):
        board, _ = board_from_moves([3, 3])
        output = render(board)
        assert "X" in output
        assert "O" in output

    def test_last_move_pointer(self):
        output = render(create_board(), last_move=2)
        assert output.splitlines()[-1] == "     ^"
