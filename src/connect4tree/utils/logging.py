"""
Logging utilities with rich formatting.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Optional, Any, Sequence

from rich.console import Console
from rich.table import Table
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    MofNCompleteColumn,
    TimeElapsedColumn,
)
from rich.panel import Panel

from ..game import Player
from ..search import attribute_moves, NO_MOVE


console = Console()

LEVEL_STYLES = {
    "info": "cyan",
    "success": "green",
    "warning": "yellow",
    "error": "red",
}


@dataclass
class SearchMetrics:
    """Metrics for one tree search."""

    depth: int
    mover: str
    target: str
    workers: int
    nodes: int
    leaves: int
    max_depth: int
    p1_wins: int
    p2_wins: int
    draws: int
    elapsed: float
    path_length: Optional[int] = None
    path: Optional[list[int]] = None
    timestamp: str = ""

    def __post_init__(self):
        if not self.timestamp:
            self.timestamp = datetime.now().isoformat()

    @property
    def nodes_per_sec(self) -> float:
        return self.nodes / self.elapsed if self.elapsed > 0 else 0.0


class Logger:
    """
    Search logger with rich output and optional JSON logging.

    Args:
        log_dir: Directory for log files (None = console only)
        verbose: Whether to print to console
    """

    def __init__(self, log_dir: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.log_file: Optional[Path] = None

        if log_dir:
            path = Path(log_dir)
            path.mkdir(parents=True, exist_ok=True)
            timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
            self.log_file = path / f"search_{timestamp}.jsonl"

    def log_search(self, metrics: SearchMetrics) -> None:
        """Log metrics for one search."""
        if self.log_file is not None:
            with open(self.log_file, "a") as f:
                f.write(json.dumps(asdict(metrics)) + "\n")

        if self.verbose:
            self._print_search(metrics)

    def _print_search(self, m: SearchMetrics) -> None:
        """Print search summary to console."""
        table = Table(title=f"Search (depth {m.depth})", show_header=False, box=None)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="white")

        table.add_row("Mover", m.mover)
        table.add_row("Target", m.target)
        table.add_row("Workers", str(m.workers) if m.workers > 1 else "serial")
        table.add_row("Nodes", f"{m.nodes:,}")
        table.add_row("Leaves", f"{m.leaves:,}")
        table.add_row("Max Depth", str(m.max_depth))
        table.add_row("Leaf P1/P2/Draw", f"{m.p1_wins:,} / {m.p2_wins:,} / {m.draws:,}")
        table.add_row("Time", f"{m.elapsed:.3f}s")
        table.add_row("Nodes/sec", f"{m.nodes_per_sec:,.0f}")
        if m.path_length is not None:
            table.add_row("Path Length", str(m.path_length))

        console.print(table)
        console.print()

    def log(self, message: str, level: str = "info") -> None:
        """
        Print a status line styled by level (info, success, warning, error).

        Errors are printed even when the logger is not verbose.
        """
        if self.verbose or level == "error":
            console.print(f"[{LEVEL_STYLES[level]}]{message}[/]")


def create_progress() -> Progress:
    """Create a rich progress bar for root branches."""
    return Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=False,
    )


def print_config(config: Any) -> None:
    """Print configuration in a nice format."""
    table = Table(title="Configuration", show_header=True)
    table.add_column("Parameter", style="cyan")
    table.add_column("Value", style="white")

    def add_dict(d: dict, prefix: str = "") -> None:
        for k, v in d.items():
            key = f"{prefix}{k}" if prefix else k
            if isinstance(v, dict):
                add_dict(v, f"{key}.")
            else:
                table.add_row(key, str(v))

    add_dict(asdict(config))
    console.print(table)


def print_board(board_str: str, title: str = "Board") -> None:
    """Print a game board in a panel."""
    console.print(Panel(board_str, title=title, border_style="blue"))


def print_path(path: Sequence[int], first: Player, title: str = "Winning path") -> None:
    """Print a move sequence with the player making each move."""
    table = Table(title=title, show_header=True)
    table.add_column("Ply", style="cyan", justify="right")
    table.add_column("Player", style="white")
    table.add_column("Column", style="white", justify="right")

    for ply, (player, col) in enumerate(attribute_moves(path, first), start=1):
        style = "red" if player is Player.P1 else "yellow"
        column = "-" if col == NO_MOVE else str(col)
        table.add_row(str(ply), f"[{style}]{player.name} ({player.symbol})[/]", column)

    console.print(table)
