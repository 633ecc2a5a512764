"""
Three-valued game outcomes and the bottom-up combination rule.

DRAW doubles as "unknown": a position cut off by the depth budget is
indistinguishable from a drawn one.
"""

from __future__ import annotations

from enum import Enum
from typing import Iterable, TYPE_CHECKING

from ..game import Player

if TYPE_CHECKING:
    from .node import GameNode


class GameOutcome(Enum):
    """Classification of a position."""
    WIN_P1 = "WIN_P1"
    WIN_P2 = "WIN_P2"
    DRAW = "DRAW"


def win_for(player: Player) -> GameOutcome:
    """Outcome in which `player` wins."""
    return GameOutcome.WIN_P1 if player is Player.P1 else GameOutcome.WIN_P2


def loss_for(player: Player) -> GameOutcome:
    """Outcome in which `player` loses."""
    return win_for(player.other)


def summarize(children: Iterable[GameNode], mover: Player) -> GameOutcome:
    """
    Collapse child outcomes into the outcome of the position `mover` chose from.

    - any child is a win for mover -> mover wins (pick that branch)
    - every child is a loss for mover -> mover loses
    - anything else -> DRAW

    Each child's outcome must already be final.
    """
    win = win_for(mover)
    lose = loss_for(mover)

    outcomes = [child.outcome for child in children]
    if win in outcomes:
        return win
    if all(outcome is lose for outcome in outcomes):
        return lose
    return GameOutcome.DRAW
