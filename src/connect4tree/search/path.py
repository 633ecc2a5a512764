"""
Shortest winning path extraction over an explored forest.
"""

from __future__ import annotations

from typing import Optional, Sequence, Tuple

from ..game import Player
from .node import GameNode
from .outcome import GameOutcome


def shortest_path(
    forest: Sequence[GameNode],
    target: GameOutcome,
) -> Optional[list[int]]:
    """
    Find the shortest move sequence from the forest to a `target` leaf.

    A hit is a node whose outcome is `target` and that has no children, so
    nodes labelled `target` by summarization alone never count. Nodes are
    visited depth-first in forest order; among hits of equal length the
    first one visited wins.

    Args:
        forest: Root forest from the explorer
        target: Outcome to reach

    Returns:
        Moves from the root (first move belongs to the forest's mover),
        or None if no hit exists.
    """
    shortest: Optional[list[int]] = None

    def visit(nodes: Sequence[GameNode], path: list[int]) -> None:
        nonlocal shortest
        for node in nodes:
            new_path = path + [node.move]
            if node.outcome is target and node.is_leaf:
                if shortest is None or len(new_path) < len(shortest):
                    shortest = new_path
            elif node.children:
                # Descendants are at least one move longer
                if shortest is None or len(new_path) + 1 < len(shortest):
                    visit(node.children, new_path)

    visit(forest, [])
    return shortest


def attribute_moves(path: Sequence[int], first: Player) -> list[Tuple[Player, int]]:
    """Pair each move with the player making it, alternating from `first`."""
    moves = []
    player = first
    for col in path:
        moves.append((player, col))
        player = player.other
    return moves
