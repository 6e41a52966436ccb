"""Worked examples: two small graphs run through both engines."""

from __future__ import annotations

import sys
from typing import IO, Callable, Dict, Optional

from .graph import Graph
from .logger import Logger
from .report import format_path, format_table
from .solver import compute_shortest_paths, find_path

COMPLEXITY_NOTES = """\
Complexity Analysis:
-------------------
Dense implementation: O(V^2)
Heap implementation:  O((V + E) log V)
Space complexity:     O(V)

Best for dense graphs: dense implementation
Best for sparse graphs: heap implementation
"""


def directed_example() -> Graph:
    """Six-vertex directed graph; shortest ``0 -> 5`` is ``0 -> 1 -> 3 -> 4 -> 5`` (14)."""
    return Graph.from_edges(
        6,
        [
            (0, 1, 4),
            (0, 2, 2),
            (1, 2, 1),
            (1, 3, 5),
            (2, 3, 8),
            (2, 4, 10),
            (3, 4, 2),
            (3, 5, 6),
            (4, 5, 3),
        ],
    )


def undirected_example() -> Graph:
    """Five-vertex undirected graph."""
    return Graph.from_edges(
        5,
        [
            (0, 1, 2),
            (0, 3, 6),
            (1, 2, 3),
            (1, 3, 8),
            (1, 4, 5),
            (2, 4, 7),
            (3, 4, 9),
        ],
        undirected=True,
    )


EXAMPLES: Dict[str, Callable[[], Graph]] = {
    "directed": directed_example,
    "undirected": undirected_example,
}


def _heading(out: IO[str], title: str, underline: str = "-") -> None:
    out.write(f"{title}\n{underline * len(title)}\n")


def run_demo(out: Optional[IO[str]] = None, logger: Logger | None = None) -> None:
    """Print the example scenarios to ``out`` (``stdout`` by default)."""
    out = out or sys.stdout
    _heading(out, "Dijkstra's Algorithm", "=")
    out.write("\n")

    g1 = directed_example()
    _heading(out, "Example 1: Simple Directed Graph")
    out.write("Using dense O(V^2) implementation:\n")
    out.write(format_table(compute_shortest_paths(g1, 0, variant="dense", logger=logger)) + "\n")
    out.write("\nUsing heap-based O((V+E) log V) implementation:\n")
    out.write(format_table(compute_shortest_paths(g1, 0, variant="heap", logger=logger)) + "\n\n")

    _heading(out, "Example 2: Specific Path Finding")
    path = find_path(g1, 0, 5, logger=logger)
    if path:
        out.write(f"Shortest path from 0 to 5: {format_path(path)}\n\n")
    else:
        out.write("No path found from 0 to 5\n\n")

    g2 = undirected_example()
    _heading(out, "Example 3: Undirected Graph")
    out.write(format_table(compute_shortest_paths(g2, 0, logger=logger)) + "\n\n")

    out.write(COMPLEXITY_NOTES)


__all__ = ["EXAMPLES", "COMPLEXITY_NOTES", "directed_example", "undirected_example", "run_demo"]
