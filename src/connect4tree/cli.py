"""
Command-line interface for Connect 4 tree search.

Commands:
- solve: Explore a position and print the shortest winning path
- benchmark: Compare serial and parallel exploration on the same position
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple
import typer

from .game import Board, Player
from .utils import Logger, console

app = typer.Typer(
    name="c4t",
    help="Connect 4 tree search - find the shortest winning line",
    no_args_is_help=True,
)


def _parse_moves(moves: str) -> list[int]:
    """Parse "3,3,4" into [3, 3, 4]."""
    try:
        return [int(m) for m in moves.split(",") if m.strip()]
    except ValueError:
        raise ValueError(f"Moves must be comma-separated column numbers, got {moves!r}") from None


def _build_board(opening) -> Tuple[Board, Player]:
    """Create the starting position described by an OpeningConfig."""
    from .game import board_from_moves, create_board, is_winning_move
    from .selfplay import random_opening

    if opening.moves:
        board, mover = board_from_moves(opening.moves, first=opening.first_player)
    elif opening.random_moves:
        board, mover = random_opening(opening.random_moves, first=opening.first_player)
    else:
        board, mover = create_board(), opening.first_player

    for player in Player:
        if is_winning_move(board, player):
            raise ValueError(f"Position is already won by {player.name}")
    return board, mover


def _fail(message: str) -> None:
    Logger().log(message, "error")
    raise typer.Exit(code=1)


@app.command()
def solve(
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to config YAML file"
    ),
    depth: Optional[int] = typer.Option(None, "--depth", "-d", help="Search depth in plies"),
    moves: Optional[str] = typer.Option(
        None, "--moves", "-m", help="Opening moves, e.g. 3,3,4"
    ),
    random_moves: Optional[int] = typer.Option(
        None, "--random-moves", "-r", help="Random opening moves (ignored with --moves)"
    ),
    seed: Optional[int] = typer.Option(None, "--seed", help="Random seed"),
    target: Optional[str] = typer.Option(
        None, "--target", "-t", help="Winner to look for: p1 or p2 (default: player to move)"
    ),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", help="Parallel workers for root branches (0 = serial)"
    ),
    executor: Optional[str] = typer.Option(
        None, "--executor", help="Worker pool kind: process or thread"
    ),
    log_dir: Optional[Path] = typer.Option(
        None, "--log-dir", help="Append search metrics as JSON lines here"
    ),
    show_config: bool = typer.Option(False, "--show-config", help="Print the configuration"),
) -> None:
    """Explore a position and print the shortest winning path."""
    import time
    from dataclasses import replace
    from .game import render
    from .search import TreeExplorer, shortest_path, tree_stats
    from .utils import (
        Config,
        SearchMetrics,
        create_progress,
        print_board,
        print_config,
        print_path,
        set_seed,
    )

    try:
        # Load config, then apply command-line overrides
        if config_path and config_path.exists():
            config = Config.load(str(config_path))
        else:
            config = Config()

        search_overrides = {
            k: v for k, v in
            {"depth": depth, "workers": workers, "executor": executor, "target": target}.items()
            if v is not None
        }
        config.search = replace(config.search, **search_overrides)
        if moves is not None:
            config.opening = replace(config.opening, moves=_parse_moves(moves))
        if random_moves is not None:
            config.opening = replace(config.opening, random_moves=random_moves)
        if seed is not None:
            config.seed = seed
        if log_dir is not None:
            config.log_dir = str(log_dir)

        set_seed(config.seed)
        board, mover = _build_board(config.opening)
    except ValueError as e:
        _fail(str(e))

    config.ensure_dirs()
    if show_config:
        print_config(config)

    print_board(render(board), title=f"Initial board ({mover.name} to move)")

    explorer = TreeExplorer(
        depth=config.search.depth,
        workers=config.search.workers,
        executor=config.search.executor,
    )
    target_outcome = config.search.target_outcome(mover)

    logger = Logger(log_dir=config.log_dir)
    logger.log(f"Exploring {config.search.depth} plies...")
    start = time.time()
    if explorer.parallel:
        with create_progress() as progress:
            task = progress.add_task("Root branches", total=None)

            def callback(done, total):
                progress.update(task, completed=done, total=total)

            forest = explorer.explore(board, mover, progress_callback=callback)
    else:
        forest = explorer.explore(board, mover)
    path = shortest_path(forest, target_outcome)
    elapsed = time.time() - start

    if path is not None:
        print_path(path, mover, title=f"Shortest path to {target_outcome.value}")
    else:
        logger.log(
            f"No path to {target_outcome.value} within {config.search.depth} plies.", "warning"
        )

    stats = tree_stats(forest)
    logger.log_search(SearchMetrics(
        depth=config.search.depth,
        mover=mover.name,
        target=target_outcome.value,
        workers=config.search.workers,
        nodes=stats.nodes,
        leaves=stats.leaves,
        max_depth=stats.max_depth,
        p1_wins=stats.p1_wins,
        p2_wins=stats.p2_wins,
        draws=stats.draws,
        elapsed=elapsed,
        path_length=len(path) if path is not None else None,
        path=path,
    ))


@app.command()
def benchmark(
    depth: int = typer.Option(6, "--depth", "-d", help="Search depth in plies"),
    workers: int = typer.Option(0, "--workers", "-w", help="Parallel workers (0 = CPU count)"),
    executor: str = typer.Option("process", "--executor", help="Worker pool kind: process or thread"),
    random_moves: int = typer.Option(0, "--random-moves", "-r", help="Random opening moves"),
    seed: int = typer.Option(42, "--seed", help="Random seed"),
) -> None:
    """Benchmark serial against parallel exploration."""
    import time
    from .search import TreeExplorer, tree_stats
    from .search.explorer import default_workers
    from .utils import OpeningConfig, set_seed

    try:
        set_seed(seed)
        board, mover = _build_board(OpeningConfig(random_moves=random_moves))
        serial = TreeExplorer(depth=depth)
        parallel = TreeExplorer(
            depth=depth,
            workers=max(workers or default_workers(), 2),
            executor=executor,
        )
    except ValueError as e:
        _fail(str(e))

    logger = Logger()
    logger.log(f"Exploring {depth} plies for {mover.name}...")

    start = time.time()
    serial_forest = serial.explore(board, mover)
    serial_time = time.time() - start
    console.print(f"Serial:   {serial_time:.2f}s")

    start = time.time()
    parallel_forest = parallel.explore(board, mover)
    parallel_time = time.time() - start
    console.print(f"Parallel: {parallel_time:.2f}s ({parallel.workers} {executor} workers)")

    nodes = tree_stats(serial_forest).nodes
    console.print(f"\n[green]Nodes: {nodes:,}[/]")
    if parallel_time > 0:
        console.print(f"[green]Speedup: {serial_time / parallel_time:.2f}x[/]")
    if serial_forest == parallel_forest:
        logger.log("Forests identical", "success")
    else:
        logger.log("Forests differ!", "error")
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
