"""Self-play module."""

from .opening import random_opening

__all__ = [
    "random_opening",
]
