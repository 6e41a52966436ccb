"""Human-readable and JSON renderings of solver results."""

from __future__ import annotations

import math
from typing import Any, Dict, List, Optional, Sequence

from .solver import ShortestPathResult

Vertex = int


def format_distance(d: float) -> str:
    """Render a distance, using ``INF`` for unreachable vertices."""
    if math.isinf(d):
        return "INF"
    return f"{d:g}"


def format_path(path: Sequence[Vertex]) -> str:
    """Render a path as ``"0 -> 1 -> 3"``, or ``"No path"`` when empty."""
    if not path:
        return "No path"
    return " -> ".join(str(v) for v in path)


def format_table(result: ShortestPathResult, vertices: Optional[Sequence[Vertex]] = None) -> str:
    """Return a ``Vertex / Distance / Path`` table for ``result``.

    For a run that stopped early only settled vertices carry final values;
    the others are shown as ``?`` / ``not settled``.

    Args:
        result: Output of a solver run.
        vertices: Rows to include; defaults to every vertex.
    """
    rows = range(len(result.distances)) if vertices is None else vertices
    title = f"Shortest distances from vertex {result.source}:"
    if not result.complete:
        title = f"Shortest distances from vertex {result.source} (stopped early, {len(result.settled)} settled):"
    final = set(result.settled)
    lines: List[str] = [
        title,
        f"{'Vertex':<8}{'Distance':<10}Path",
        f"{'------':<8}{'--------':<10}----",
    ]
    for v in rows:
        if result.complete or v in final:
            dist, path = format_distance(result.distances[v]), format_path(result.path(v))
        else:
            dist, path = "?", "not settled"
        lines.append(f"{v:<8}{dist:<10}{path}")
    return "\n".join(lines)


def result_to_dict(result: ShortestPathResult) -> Dict[str, Any]:
    """Return a JSON-serialisable view of ``result`` (``inf`` becomes ``None``)."""
    return {
        "source": result.source,
        "complete": result.complete,
        "distances": [None if math.isinf(d) else d for d in result.distances],
        "predecessors": list(result.predecessors),
    }


__all__ = ["format_distance", "format_path", "format_table", "result_to_dict"]
