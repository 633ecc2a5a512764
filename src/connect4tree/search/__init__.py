"""Search module - tree expansion, outcomes and path extraction."""

from .outcome import GameOutcome, win_for, loss_for, summarize
from .node import NO_MOVE, GameNode, TreeStats, tree_stats
from .explorer import TreeExplorer, expand, expand_parallel, order_moves
from .path import shortest_path, attribute_moves

__all__ = [
    "GameOutcome",
    "win_for",
    "loss_for",
    "summarize",
    "NO_MOVE",
    "GameNode",
    "TreeStats",
    "tree_stats",
    "TreeExplorer",
    "expand",
    "expand_parallel",
    "order_moves",
    "shortest_path",
    "attribute_moves",
]
