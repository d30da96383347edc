"""ASCII terminal rendering of grids, paths and search nodes."""

from __future__ import annotations

import sys
from typing import Dict, Iterable, List, Sequence, TextIO

from ...core.grid import CellState, Grid
from ...core.node import Node, same_coordinates


# Basic ANSI colour codes used by :class:`TerminalView`
_COLOURS = {
    "red": "\x1b[31m",
    "green": "\x1b[32m",
    "yellow": "\x1b[33m",
    "blue": "\x1b[34m",
    "white": "\x1b[37m",
    "reset": "\x1b[0m",
}

_CELL_COLOURS = {
    CellState.FREE: "white",
    CellState.OBSTACLE: "red",
    CellState.VISITED: "blue",
    CellState.PATH: "green",
}

# Column width of the cost table
_COST_SPACING = 10


class TerminalView:
    """Minimal grid viewer, optionally coloured with ANSI codes."""

    def __init__(self, colour: bool = True, stream: TextIO | None = None) -> None:
        self.colour = colour
        self.stream = stream

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------
    def render(self, grid: Grid) -> None:
        """Write ``grid`` to the configured stream (``stdout`` by default)."""

        out = self.stream if self.stream is not None else sys.stdout
        out.write(format_grid(grid, colour=self.colour) + "\n")
        out.flush()

    def render_result(
        self, found: bool, path: Sequence[Node], start: Node, goal: Node, grid: Grid
    ) -> None:
        """Write the path overlay for a finished search."""

        out = self.stream if self.stream is not None else sys.stdout
        if not found:
            out.write("No path exists\n")
            self.render(grid)
            return
        out.write("Path (goal to start):\n")
        out.write(format_path(path) + "\n")
        self.render(mark_path(path, start, goal, grid))


# ----------------------------------------------------------------------
# Helper functions
# ----------------------------------------------------------------------


def describe_node(node: Node) -> str:
    """Return a multi-line status block for ``node``."""

    return "\n".join(
        [
            "--------------",
            "Node          :",
            f"x             : {node.x}",
            f"y             : {node.y}",
            f"Cost          : {node.cost}",
            f"Heuristic cost: {node.h_cost}",
            f"Id            : {node.id}",
            f"Pid           : {node.pid}",
            "--------------",
        ]
    )


def format_grid(grid: Grid, colour: bool = False) -> str:
    """Return ``grid`` as text, one row per ``x`` with a column header."""

    n = grid.n
    lines: List[str] = [" " * 4 + "".join(f"{y:<3}" for y in range(n))]
    for x, row in enumerate(grid.cells):
        cells: List[str] = []
        for value in row:
            text = f"{value:<3}"
            if colour:
                name = _CELL_COLOURS.get(value, "reset")
                text = f"{_COLOURS[name]}{text}{_COLOURS['reset']}"
            cells.append(text)
        lines.append(f"{x:<4}" + "".join(cells).rstrip())
    return "\n".join(lines)


def mark_path(
    path: Sequence[Node], start: Node, goal: Node, grid: Grid
) -> Grid:
    """Return a copy of ``grid`` with the cells of ``path`` set to ``PATH``.

    The walk starts at the entry matching ``goal`` and follows parent ids
    through ``path`` until ``start`` is reached.
    """

    marked = grid.copy()
    by_id: Dict[int, Node] = {node.id: node for node in path}
    current = next((node for node in path if same_coordinates(node, goal)), None)
    seen: set[int] = set()
    while current is not None and current.id not in seen:
        seen.add(current.id)
        marked.set(current.x, current.y, CellState.PATH)
        if same_coordinates(current, start) or current.pid == current.id:
            break
        current = by_id.get(current.pid)
    marked.set(start.x, start.y, CellState.PATH)
    return marked


def format_path(path: Sequence[Node]) -> str:
    """Return the status blocks of ``path`` in goal-to-start order."""

    if not path:
        return "Path not found"
    return "\n".join(describe_node(node) for node in path)


def format_cost(n: int, nodes: Iterable[Node]) -> str:
    """Return an ``n`` × ``n`` table with the cost of each node in ``nodes``."""

    costs = {(node.x, node.y): node.cost for node in nodes}
    lines: List[str] = []
    for x in range(n):
        row = []
        for y in range(n):
            if (x, y) in costs:
                row.append(f"{costs[(x, y)]:>{_COST_SPACING}} , ")
            else:
                row.append(f"{'':>{_COST_SPACING - 2}}  , ")
        lines.append("".join(row).rstrip())
    return "\n\n".join(lines)


def print_grid(grid: Grid, stream: TextIO | None = None) -> None:
    TerminalView(colour=False, stream=stream).render(grid)


__all__ = [
    "TerminalView",
    "describe_node",
    "format_cost",
    "format_grid",
    "format_path",
    "mark_path",
    "print_grid",
]
