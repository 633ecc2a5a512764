"""
Configuration management for Connect 4 tree search.

Uses dataclasses for clean configuration with sensible defaults.
Supports loading from YAML files.
"""

from __future__ import annotations

from dataclasses import dataclass, field, asdict
from pathlib import Path
from typing import Optional
import yaml

from ..game import Player
from ..search import GameOutcome, win_for
from ..search.explorer import EXECUTORS

PLAYER_NAMES = {"p1": Player.P1, "p2": Player.P2}


def parse_player(name: str) -> Player:
    """Map "p1"/"p2" (case-insensitive) to a Player."""
    try:
        return PLAYER_NAMES[name.lower()]
    except KeyError:
        raise ValueError(f"Unknown player {name!r}, expected 'p1' or 'p2'") from None


@dataclass
class SearchConfig:
    """Tree search configuration."""

    depth: int = 8
    workers: int = 0  # 0 or 1 = serial
    executor: str = "process"
    target: Optional[str] = None  # "p1"/"p2", None = player to move

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError("Depth must be non-negative")
        if self.workers < 0:
            raise ValueError("Workers must be non-negative")
        if self.executor not in EXECUTORS:
            raise ValueError(f"Executor must be one of {EXECUTORS}")
        if self.target is not None:
            parse_player(self.target)

    def target_outcome(self, mover: Player) -> GameOutcome:
        """Outcome the path extractor looks for."""
        if self.target is None:
            return win_for(mover)
        return win_for(parse_player(self.target))


@dataclass
class OpeningConfig:
    """Starting position configuration."""

    moves: list[int] = field(default_factory=list)  # Explicit opening moves
    random_moves: int = 0  # Used only when `moves` is empty
    first: str = "p1"

    def __post_init__(self):
        if self.random_moves < 0:
            raise ValueError("Random moves must be non-negative")
        parse_player(self.first)

    @property
    def first_player(self) -> Player:
        return parse_player(self.first)


@dataclass
class Config:
    """Full configuration."""

    search: SearchConfig = field(default_factory=SearchConfig)
    opening: OpeningConfig = field(default_factory=OpeningConfig)

    # Random seed
    seed: int = 42

    # JSONL metrics log directory (None = console only)
    log_dir: Optional[str] = None

    def save(self, path: str) -> None:
        """Save config to YAML file."""
        with open(path, "w") as f:
            yaml.dump(asdict(self), f, default_flow_style=False)

    @classmethod
    def load(cls, path: str) -> Config:
        """Load config from YAML file."""
        with open(path) as f:
            try:
                data = yaml.safe_load(f) or {}
            except yaml.YAMLError as e:
                raise ValueError(f"Invalid config {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid config {path}: expected a mapping at top level")

        # Parse nested configs; empty sections fall back to defaults
        try:
            return cls(
                search=SearchConfig(**(data.get("search") or {})),
                opening=OpeningConfig(**(data.get("opening") or {})),
                seed=data.get("seed", 42),
                log_dir=data.get("log_dir"),
            )
        except TypeError as e:
            raise ValueError(f"Invalid config {path}: {e}") from e

    def ensure_dirs(self) -> None:
        """Create the log directory if one is configured."""
        if self.log_dir:
            Path(self.log_dir).mkdir(parents=True, exist_ok=True)


def get_default_config() -> Config:
    """Get default configuration (depth 8, serial, empty board)."""
    return Config()
