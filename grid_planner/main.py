"""Demo entry point: random grid, random endpoints, one A* search."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from random import Random
from typing import List, Optional, Sequence

from dotenv import load_dotenv

from .config import CONFIG, Config, LoggingConfig, load_config
from .core.grid import CellState, Grid, generate_grid
from .core.node import Node, manhattan, node_id
from .search.a_star import AStar
from .utils.cli.terminal_view import TerminalView, describe_node
from .utils.observer import SearchStats, record_search


logger = logging.getLogger(__name__)  # For main.py specific logs


def configure_logging(cfg: LoggingConfig) -> None:
    numeric_level = getattr(logging, cfg.global_level, logging.INFO)
    logging.basicConfig(
        level=numeric_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        force=True,
    )
    # Apply per-module levels if defined
    for module_name, level_str in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(level_str).upper(), None)
        if isinstance(module_numeric_level, int):
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning(
                "Invalid log level '%s' for module '%s' in config.", level_str, module_name
            )


configure_logging(CONFIG.logging)


@dataclass
class DemoRun:
    """Everything produced by :func:`run_demo`."""

    grid: Grid
    start: Node
    goal: Node
    found: bool
    path: List[Node] = field(default_factory=list)
    stats: SearchStats = field(default_factory=SearchStats)


def random_endpoints(n: int, rng: Random) -> tuple[Node, Node]:
    """Pick start and goal cells uniformly and fill in their bookkeeping."""

    start = Node(rng.randrange(n), rng.randrange(n))
    goal = Node(rng.randrange(n), rng.randrange(n))
    start.id = node_id(start.x, start.y, n)
    start.pid = start.id
    goal.id = node_id(goal.x, goal.y, n)
    start.h_cost = manhattan(start, goal)
    return start, goal


def run_demo(cfg: Config, rng: Random, view: TerminalView | None = None) -> DemoRun:
    """Generate a grid from ``cfg`` and plan between two random cells."""

    n = cfg.grid.size
    grid = generate_grid(n, rng, cfg.grid.obstacle_probability)
    start, goal = random_endpoints(n, rng)
    # Make sure start and goal are not obstacles
    grid.set(start.x, start.y, CellState.FREE)
    grid.set(goal.x, goal.y, CellState.FREE)

    logger.info(
        "Planning on %dx%d grid from %s to %s", n, n, start.coords, goal.coords
    )
    if view is not None:
        view.render(grid)

    planner = AStar(grid, max_expansions=cfg.search.max_expansions)
    found, path = planner.plan(start, goal)
    record_search(planner.last_stats)
    if found:
        logger.info(
            "Path of %d cells found after %d expansions",
            len(path),
            planner.last_stats.expanded,
        )
    else:
        logger.info("No path found after %d expansions", planner.last_stats.expanded)

    if view is not None:
        view.render_result(found, path, start, goal, grid)
    return DemoRun(grid, start, goal, found, path, planner.last_stats)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="grid-planner", description="Run A* on a randomly generated grid."
    )
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")
    parser.add_argument("--size", type=int, default=None, help="Grid dimension")
    parser.add_argument(
        "--no-colour", action="store_true", help="Disable ANSI colours in output"
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    env_path = Path(".env")
    if env_path.exists():
        load_dotenv(env_path)

    args = _build_parser().parse_args(argv)
    config_path = args.config or os.getenv("GRID_PLANNER_CONFIG")
    if config_path:
        cfg = load_config(Path(config_path))
        configure_logging(cfg.logging)
    else:
        cfg = load_config()
    if args.seed is not None:
        cfg.grid.seed = args.seed
    if args.size is not None:
        cfg.grid.size = args.size

    rng = Random(cfg.grid.seed)
    view = TerminalView(colour=not args.no_colour)
    run = run_demo(cfg, rng, view)
    logger.debug("Start:\n%s", describe_node(run.start))
    logger.debug("Goal:\n%s", describe_node(run.goal))
    return 0 if run.found else 1


if __name__ == "__main__":
    raise SystemExit(main())
