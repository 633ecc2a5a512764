"""
connect4tree - Bounded-depth game tree search for Connect 4.

Expands every line of play from a position up to a depth budget, classifies
each branch as a win for either player or a draw, and extracts the shortest
sequence of moves that reaches a win.

Usage:
    from connect4tree.game import board_from_moves
    from connect4tree.search import TreeExplorer, shortest_path, win_for

    board, mover = board_from_moves([3, 3, 2])
    forest = TreeExplorer(depth=6).explore(board, mover)
    path = shortest_path(forest, win_for(mover))
"""

__version__ = "0.1.0"

from . import game
from . import search
from . import selfplay

__all__ = [
    "game",
    "search",
    "selfplay",
    "__version__",
]
