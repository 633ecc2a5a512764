"""
Bounded-depth game tree expansion.

The expansion for one position:
1. Terminal: depth budget spent or board full -> a single NO_MOVE/DRAW leaf
2. Order: legal columns sorted center-first
3. Expand: for each column, play it on a private board copy; an immediate
   win becomes a childless decisive node, anything else recurses for the
   opponent and is classified with summarize()
4. Short-circuit: the first node that is a win for the mover is returned
   alone, discarding its siblings

expand_parallel() fans the root ply out over a worker pool. All started
branches run to completion and the short-circuit is applied afterwards in
move order, so it returns the same forest as expand().
"""

from __future__ import annotations

import os
from concurrent.futures import (
    Executor,
    ProcessPoolExecutor,
    ThreadPoolExecutor,
    as_completed,
)
from typing import Callable, Iterable, Optional

from ..game import (
    COLS,
    Board,
    Player,
    available_row,
    drop_piece,
    is_winning_move,
    valid_columns,
)
from .node import GameNode
from .outcome import summarize, win_for

EXECUTORS = ("process", "thread")
MAX_DEFAULT_WORKERS = 8


def order_moves(columns: Iterable[int]) -> list[int]:
    """Sort columns by distance from the center column (stable on ties)."""
    center = COLS // 2
    return sorted(columns, key=lambda c: abs(c - center))


def _play(board: Board, col: int, player: Player) -> Board:
    """Return a copy of `board` with `player`'s stone dropped in `col`."""
    child = board.copy()
    drop_piece(child, available_row(child, col), col, player)
    return child


def _expand_branch(board: Board, col: int, mover: Player, depth: int) -> GameNode:
    """Build the node for `mover` playing `col`, with its subtree."""
    child = _play(board, col, mover)

    if is_winning_move(child, mover):
        return GameNode(move=col, outcome=win_for(mover))

    children = _expand(child, mover.other, depth - 1)
    return GameNode(
        move=col,
        outcome=summarize(children, mover),
        children=tuple(children),
    )


def _expand(board: Board, mover: Player, depth: int) -> list[GameNode]:
    columns = order_moves(valid_columns(board)) if depth > 0 else []
    if not columns:
        return [GameNode()]

    win = win_for(mover)
    nodes: list[GameNode] = []
    for col in columns:
        node = _expand_branch(board, col, mover, depth)
        if node.outcome is win:
            return [node]
        nodes.append(node)
    return nodes


def _check_depth(depth: int) -> None:
    if depth < 0:
        raise ValueError(f"Depth must be non-negative, got {depth}")


def expand(board: Board, mover: Player, depth: int) -> list[GameNode]:
    """
    Expand the game tree from `board` with `mover` to play.

    Args:
        board: Starting position (not modified)
        mover: Player to move
        depth: Remaining plies to expand

    Returns:
        Forest of candidate moves for `mover`. A single node if a forced
        win was found, a single NO_MOVE/DRAW leaf if nothing can be played.
    """
    _check_depth(depth)
    return _expand(board, mover, depth)


def default_workers() -> int:
    return min(os.cpu_count() or 1, MAX_DEFAULT_WORKERS)


def _check_executor(kind: str) -> None:
    if kind not in EXECUTORS:
        raise ValueError(f"Unknown executor {kind!r}, expected one of {EXECUTORS}")


def _make_executor(kind: str, max_workers: int) -> Executor:
    if kind == "thread":
        return ThreadPoolExecutor(max_workers=max_workers)
    return ProcessPoolExecutor(max_workers=max_workers)


def expand_parallel(
    board: Board,
    mover: Player,
    depth: int,
    max_workers: Optional[int] = None,
    executor: str = "process",
    progress_callback: Optional[Callable[[int, int], None]] = None,
) -> list[GameNode]:
    """
    Expand the game tree with root branches evaluated on a worker pool.

    Args:
        board: Starting position (not modified)
        mover: Player to move
        depth: Remaining plies to expand
        max_workers: Pool size (default: CPU count, capped at 8)
        executor: "process" or "thread"
        progress_callback: Optional callback(branches_done, branches_total)

    Returns:
        The same forest expand() returns for these arguments.
    """
    _check_depth(depth)
    _check_executor(executor)

    columns = order_moves(valid_columns(board)) if depth > 0 else []
    if not columns:
        return [GameNode()]

    # Nothing ordered after the first immediate win can be returned
    for i, col in enumerate(columns):
        if is_winning_move(_play(board, col, mover), mover):
            columns = columns[:i + 1]
            break

    nodes: list[Optional[GameNode]] = [None] * len(columns)
    with _make_executor(executor, max_workers or default_workers()) as pool:
        futures = {
            pool.submit(_expand_branch, board, col, mover, depth): i
            for i, col in enumerate(columns)
        }
        for done, future in enumerate(as_completed(futures), start=1):
            nodes[futures[future]] = future.result()
            if progress_callback:
                progress_callback(done, len(futures))

    win = win_for(mover)
    for node in nodes:
        if node.outcome is win:
            return [node]
    return nodes


class TreeExplorer:
    """
    Game tree explorer with a fixed depth budget.

    Args:
        depth: Plies to expand from the root
        workers: Pool size for root fan-out (0 or 1 = serial)
        executor: Pool kind for parallel expansion ("process" or "thread")
    """

    def __init__(
        self,
        depth: int = 8,
        workers: int = 0,
        executor: str = "process",
    ):
        _check_depth(depth)
        _check_executor(executor)
        self.depth = depth
        self.workers = workers
        self.executor = executor

    @property
    def parallel(self) -> bool:
        return self.workers > 1

    def explore(
        self,
        board: Board,
        mover: Player,
        progress_callback: Optional[Callable[[int, int], None]] = None,
    ) -> list[GameNode]:
        """
        Expand the tree for `mover` from `board`.

        Returns:
            Root forest (see expand())
        """
        if not self.parallel:
            return expand(board, mover, self.depth)
        return expand_parallel(
            board,
            mover,
            self.depth,
            max_workers=self.workers,
            executor=self.executor,
            progress_callback=progress_callback,
        )
