"""Utilities module."""

from .config import (
    Config,
    SearchConfig,
    OpeningConfig,
    get_default_config,
    parse_player,
)
from .seed import set_seed
from .logging import (
    Logger,
    SearchMetrics,
    console,
    create_progress,
    print_config,
    print_board,
    print_path,
)

__all__ = [
    "Config",
    "SearchConfig",
    "OpeningConfig",
    "get_default_config",
    "parse_player",
    "set_seed",
    "Logger",
    "SearchMetrics",
    "console",
    "create_progress",
    "print_config",
    "print_board",
    "print_path",
]
