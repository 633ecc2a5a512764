"""
Game tree node data structure.

Each node represents one ply and stores:
- move: the column that produced it (NO_MOVE for depth-cutoff leaves)
- outcome: the resolved GameOutcome
- children: the opponent's replies, in move-generation order

Nodes are immutable and form a strict tree (no parent pointers, no sharing).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .outcome import GameOutcome

NO_MOVE = -1


@dataclass(frozen=True)
class GameNode:
    """Game tree node."""

    move: int = NO_MOVE
    outcome: GameOutcome = GameOutcome.DRAW
    children: Tuple[GameNode, ...] = ()

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass
class TreeStats:
    """Size and leaf breakdown of an explored forest."""

    nodes: int = 0
    leaves: int = 0
    max_depth: int = 0
    p1_wins: int = 0
    p2_wins: int = 0
    draws: int = 0


def tree_stats(forest: Sequence[GameNode]) -> TreeStats:
    """
    Count nodes and classify leaves of a forest.

    Depth is measured in plies, the forest's own nodes being at depth 1.
    """
    stats = TreeStats()
    stack = [(node, 1) for node in forest]

    while stack:
        node, depth = stack.pop()
        stats.nodes += 1
        stats.max_depth = max(stats.max_depth, depth)

        if node.children:
            stack.extend((child, depth + 1) for child in node.children)
            continue

        stats.leaves += 1
        if node.outcome is GameOutcome.WIN_P1:
            stats.p1_wins += 1
        elif node.outcome is GameOutcome.WIN_P2:
            stats.p2_wins += 1
        else:
            stats.draws += 1

    return stats
